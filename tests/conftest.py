"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

import logging
from collections.abc import Generator

import pytest
import structlog

from tpsp.core import logging as logging_module
from tpsp.core.config import get_app_config, get_settings


def _clear_config_caches() -> None:
    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Isolate each test from the caller's environment and from other tests.

    Clears TPSP_* overrides, cached configuration, structlog context and
    the root logger handlers installed by setup_logging().
    """
    for name in ("TPSP_CONFIG_DIR", "TPSP_API_URL", "TPSP_API_TIMEOUT", "TPSP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    _clear_config_caches()

    yield

    _clear_config_caches()
    structlog.contextvars.clear_contextvars()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
