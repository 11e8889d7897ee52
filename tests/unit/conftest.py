"""
Unit Test Fixtures.

Fixtures for unit tests - the status API is never contacted.
HTTP traffic is served by httpx.MockTransport.
"""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from tpsp.schemas.line_status import StatusResponse

API_URL = "https://status.test/line-statuses"


# =============================================================================
# Payload Fixtures
# =============================================================================


@pytest.fixture
def status_payload() -> dict[str, Any]:
    """
    A status API document with two operators.

    Mirrors the upstream wire format, including camelCase keys.
    """
    return {
        "status": True,
        "data": [
            {
                "type": "metro",
                "dateUpdate": "19/10/2026 08:30",
                "listItem": [
                    {
                        "id": "1",
                        "line": "Linha 1-Azul",
                        "color": "azul",
                        "status": "Operação Normal",
                        "statusColor": "verde",
                        "description": "",
                        "code": "1",
                    },
                    {
                        "id": "3",
                        "line": "Linha 3-VERMELHA",
                        "color": "vermelha",
                        "status": " Velocidade Reduzida ",
                        "statusColor": "amarelo",
                        "description": "Falha de equipamento",
                        "code": "3",
                    },
                ],
            },
            {
                "type": "CPTM",
                "dateUpdate": "19/10/2026 08:31",
                "listItem": [
                    {
                        "id": "10",
                        "line": "Linha 10-Turquesa",
                        "color": "turquesa",
                        "status": "Operações Encerradas",
                        "statusColor": "cinza",
                        "description": "",
                        "code": "10",
                    },
                ],
            },
        ],
    }


@pytest.fixture
def status_response(status_payload: dict[str, Any]) -> StatusResponse:
    """The sample payload decoded into the response model."""
    return StatusResponse.model_validate(status_payload)


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


@pytest.fixture
def api_url() -> str:
    """URL the mocked status API is served from."""
    return API_URL


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """
    Build a MockTransport answering every request with a fixed response.

    Usage:
        transport = make_transport(json_body={"status": True, "data": []})
        transport = make_transport(status_code=500, content=b"oops")
    """

    def _make(
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
        requests: list[httpx.Request] | None = None,
    ) -> httpx.MockTransport:
        body = content if content is not None else json.dumps(json_body).encode("utf-8")

        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, content=body)

        return httpx.MockTransport(handler)

    return _make
