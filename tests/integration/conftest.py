"""
Integration Test Fixtures.

Runs the CLI as a separate process. Only paths that never reach the
network are exercised, plus one that points the API at a closed port.
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def run_tpsp() -> Callable[..., subprocess.CompletedProcess]:
    """
    Run ``python -m tpsp`` from the project root.

    Usage:
        result = run_tpsp("--version")
        result = run_tpsp("metro", env={"TPSP_API_URL": "http://127.0.0.1:9/"})
    """

    def _run(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess:
        process_env = {**os.environ, "PYTHONIOENCODING": "utf-8", **(env or {})}
        return subprocess.run(
            [sys.executable, "-m", "tpsp", *args],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=process_env,
            timeout=30,
        )

    return _run
