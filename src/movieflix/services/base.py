"""Base HTTP fetch client for external API integrations."""

import logging
from abc import ABC, abstractmethod
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class FetchError(Exception):
    """Base exception for fetch errors.

    ``message`` is the human-readable text surfaced to the user.
    """

    message = "Fetch failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidURLError(FetchError):
    """Raised when the request URL cannot be built."""

    message = "Invalid URL"


class InvalidResponseError(FetchError):
    """Raised when the server answers with a non-2xx status."""

    message = "Invalid response from the server"

    def __init__(self, status_code: int | None = None) -> None:
        super().__init__()
        self.status_code = status_code


class InvalidDataError(FetchError):
    """Raised when a 2xx body does not decode into the expected shape."""

    message = "Invalid data received"


class RequestFailedError(FetchError):
    """Raised on transport-level failures (DNS, timeout, connection reset)."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Request failed: {cause}")
        self.cause = cause


class BaseAPIClient(ABC):
    """Abstract base class for external API fetch clients.

    Every request carries ``default_params`` in addition to the caller's
    query parameters. Each call is a single GET: no retries, no caching.
    """

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        """Initialize the base API client.

        Args:
            base_url: The base URL for the API.
            timeout: Transport timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def default_params(self) -> dict[str, str]:
        """Return query parameters injected into every request."""
        ...

    @property
    def default_headers(self) -> dict[str, str]:
        """Return default headers for API requests."""
        return {"Accept": "application/json"}

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.default_headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def build_url(self, endpoint: str) -> httpx.URL:
        """Join the base URL and an endpoint path.

        Raises:
            InvalidURLError: If the endpoint is empty or the result is not an
                absolute http(s) URL.
        """
        if not endpoint:
            raise InvalidURLError()
        try:
            url = httpx.URL(f"{self.base_url}/{endpoint.lstrip('/')}")
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise InvalidURLError() from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError()
        return url

    def build_params(self, params: dict[str, str] | None = None) -> dict[str, str]:
        """Merge caller parameters with the default (credential) parameters."""
        merged = dict(params or {})
        merged.update(self.default_params)
        return merged

    async def fetch(
        self,
        endpoint: str,
        params: dict[str, str] | None,
        response_model: type[ModelT],
    ) -> ModelT:
        """Fetch an endpoint and decode the body into ``response_model``.

        Args:
            endpoint: API endpoint path, appended to the base URL.
            params: Query parameters.
            response_model: Pydantic model the JSON body must conform to.

        Returns:
            The decoded response.

        Raises:
            InvalidURLError: If the URL cannot be built (no request is made).
            RequestFailedError: On transport failures.
            InvalidResponseError: On a non-2xx status.
            InvalidDataError: If the body does not match ``response_model``.
        """
        url = self.build_url(endpoint)
        query = self.build_params(params)

        client = await self._get_client()
        logger.debug("GET %s params=%s", url, sorted(query))

        try:
            response = await client.request(method="GET", url=url, params=query)
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise RequestFailedError(e) from e

        return self._handle_response(url, response, response_model)

    def _handle_response(
        self,
        url: httpx.URL,
        response: httpx.Response,
        response_model: type[ModelT],
    ) -> ModelT:
        """Validate the status class and decode the body.

        Raises:
            InvalidResponseError: On a non-2xx status.
            InvalidDataError: If the body is not JSON or fails validation.
        """
        if not response.is_success:
            logger.warning("Unexpected status %s from %s", response.status_code, url)
            raise InvalidResponseError(status_code=response.status_code)

        try:
            return response_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Decoding %s failed: %s", response_model.__name__, e)
            raise InvalidDataError() from e

    async def __aenter__(self) -> "BaseAPIClient":
        """Async context manager entry."""
        await self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
