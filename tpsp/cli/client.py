"""
HTTP Client for the status API.

Issues a single synchronous GET and maps every failure to an
ApplicationError subclass. No retries, no caching.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from tpsp.core.config import get_api_config, get_app_config
from tpsp.core.exceptions import (
    NetworkError,
    ParseError,
    StatusError,
    UnsuccessfulResponseError,
)
from tpsp.core.logging import get_logger
from tpsp.schemas.line_status import StatusResponse

logger = get_logger(__name__)


def _user_agent() -> str:
    application = get_app_config().application
    return f"{application.name}/{application.version}"


class StatusClient:
    """
    HTTP client for the line status API.

    Usage:
        with StatusClient() as client:
            response = client.fetch()
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            url: Status API URL. If None, read from application.yaml / TPSP_API_URL.
            timeout: Request timeout in seconds. If None, read from configuration.
            transport: Optional httpx transport, used by tests.
        """
        config_url, config_timeout = get_api_config()
        self.url = url or config_url
        self.timeout = timeout if timeout is not None else config_timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                max_redirects=10,
                headers={"User-Agent": _user_agent()},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "StatusClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def fetch(self) -> StatusResponse:
        """
        Fetch and decode the current line statuses.

        Raises:
            NetworkError: The request could not complete.
            StatusError: The API answered with a status other than 200.
            ParseError: The body is not a valid status document.
            UnsuccessfulResponseError: The API reported status=false.
        """
        client = self._get_client()

        logger.debug("API request", method="GET", url=self.url, timeout=self.timeout)

        try:
            response = client.get(self.url)
        except httpx.HTTPError as e:
            logger.debug("API request failed", url=self.url, error=str(e))
            raise NetworkError(f"failed to fetch data: {e}") from e

        logger.debug("API response", url=self.url, status_code=response.status_code)

        if response.history:
            logger.debug("API redirected", url=self.url, final_url=str(response.url))

        if response.status_code != httpx.codes.OK:
            raise StatusError(response.status_code)

        try:
            payload = StatusResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.debug("API response could not be decoded", error=str(e))
            raise ParseError(f"failed to parse response: {e.errors()[0]['msg']}") from e

        if not payload.status:
            raise UnsuccessfulResponseError()

        logger.debug(
            "API payload decoded",
            batches=len(payload.data),
            lines=sum(len(batch.list_item) for batch in payload.data),
        )
        return payload


def fetch_line_statuses(url: str | None = None, timeout: float | None = None) -> StatusResponse:
    """Fetch the line statuses with a short-lived client."""
    with StatusClient(url=url, timeout=timeout) as client:
        return client.fetch()
