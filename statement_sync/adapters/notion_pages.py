"""Notion pages API adapter for creating database pages."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Final

import httpx

from statement_sync.mapping import NotionPageCreateRequest

from .errors import NotionConnectionError, NotionResponseError, NotionTimeoutError
from .interfaces import PageCreateResult, PageWriterPort

logger = logging.getLogger(__name__)


class NotionPagesAdapter(PageWriterPort):
    """Adapter implementation for Notion `POST /pages` calls.

    The adapter owns one `httpx.AsyncClient` for its lifetime and must be
    entered with `async with` before pages are created.
    """

    _USER_AGENT: Final[str] = "statement-sync/1.0 (Python/httpx)"
    _PAGES_PATH: Final[str] = "/pages"

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.notion.com/v1",
        api_version: str = "2022-06-28",
        request_timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Notion pages adapter.

        A blank token is accepted here; Notion rejects the first call with
        HTTP 401 which surfaces as `NotionResponseError`.

        Args:
            token: Notion integration token.
            base_url: Base endpoint URL for the Notion API.
            api_version: Value of the `Notion-Version` header.
            request_timeout_seconds: HTTP request timeout in seconds.
            transport: Optional httpx transport override.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_base_url = base_url.strip()
        normalized_api_version = api_version.strip()

        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if not normalized_api_version:
            raise ValueError("api_version must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._token = token.strip()
        self._base_url = normalized_base_url.rstrip("/")
        self._api_version = normalized_api_version
        self._request_timeout_seconds = request_timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "NotionPagesAdapter":
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._adapter_build_headers(),
            timeout=self._request_timeout_seconds,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def adapter_create_page(self, request: NotionPageCreateRequest) -> PageCreateResult:
        """Create one database page from a mapped transaction.

        Args:
            request: Immutable page-creation payload.

        Returns:
            PageCreateResult: Identifier of the created page, blank when not reported.

        Raises:
            NotionTimeoutError: Raised when the request exceeds the timeout.
            NotionConnectionError: Raised for transport, decoding and redirect failures.
            NotionResponseError: Raised when Notion returns a non-success status.
            RuntimeError: Raised when the adapter is used outside `async with`.
        """

        if self._client is None:
            raise RuntimeError("NotionPagesAdapter must be entered with `async with` before use")

        try:
            response = await self._client.post(self._PAGES_PATH, json=request.request_payload())
        except httpx.TimeoutException as error:
            raise NotionTimeoutError("Notion request timed out") from error
        except httpx.RequestError as error:
            raise NotionConnectionError(f"Notion request failed: {error}") from error

        if response.is_error:
            error_code, error_message = self._adapter_extract_response_error(response)
            raise NotionResponseError(
                f"Notion page creation rejected: status={response.status_code}, code={error_code}, message={error_message}",
                status_code=response.status_code,
                error_code=error_code,
            )

        page_id = self._adapter_extract_page_id(response)
        logger.debug("Created page %s", page_id)
        return PageCreateResult(page_id=page_id)

    def _adapter_build_headers(self) -> dict[str, str]:
        """Build default request headers for every Notion call.

        Returns:
            dict[str, str]: Header names and values.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        headers = {
            "Notion-Version": self._api_version,
            "User-Agent": self._USER_AGENT,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _adapter_extract_response_error(self, response: httpx.Response) -> tuple[str, str]:
        """Extract normalized error code and message from a Notion error body.

        Args:
            response: Non-success HTTP response.

        Returns:
            tuple[str, str]: Notion error code and message.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        try:
            payload = response.json()
        except ValueError:
            return "UNKNOWN", response.text.strip() or "unexpected upstream response"

        if not isinstance(payload, dict):
            return "UNKNOWN", "unexpected upstream response"

        error_code = str(payload.get("code") or "UNKNOWN").strip()
        error_message = str(payload.get("message") or "unexpected upstream response").strip()
        return error_code, error_message

    def _adapter_extract_page_id(self, response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return ""
        if not isinstance(payload, dict):
            return ""
        return str(payload.get("id") or "")

