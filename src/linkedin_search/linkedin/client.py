# ABOUTME: Async HTTP client for the LinkedIn search API provider.
# ABOUTME: Wraps httpx, attaches the API key header and converts failures into SearchApiError types.

from types import TracebackType
from typing import Any

import httpx

from linkedin_search.config import Settings
from linkedin_search.linkedin.exceptions import (
    SearchApiAuthError,
    SearchApiConnectionError,
    SearchApiError,
    SearchApiForbiddenError,
    SearchApiRateLimitError,
)
from linkedin_search.linkedin.parameters import ParameterType
from linkedin_search.logging import get_logger

SEARCH_ENDPOINT = "/api/v1/linkedin/search"
PARAMETERS_ENDPOINT = "/api/v1/linkedin/search/parameters"
USERS_ENDPOINT = "/api/v1/users"


class SearchApiClient:
    """Thin async wrapper around the search API.

    Every method issues exactly one request. Failures are raised, never
    retried.
    """

    def __init__(
        self,
        settings: Settings,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: Any = None,
    ) -> None:
        """Create a client for the configured base URL.

        Args:
            settings: Application settings with base URL, key and timeout.
            api_key: Overrides settings.api_key when given.
            transport: Optional httpx transport, used by tests.
            logger: Structured logger; defaults to the module logger.
        """
        key = api_key if api_key is not None else settings.api_key
        self._logger = logger if logger is not None else get_logger(__name__)
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            headers={
                "Content-Type": "application/json",
                "X-API-KEY": key or "",
            },
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "SearchApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    def _error_for_response(self, response: httpx.Response) -> SearchApiError:
        """Convert a non-2xx response to the appropriate SearchApiError subclass.

        Args:
            response: The failed response.

        Returns:
            The exception to raise, carrying status code and raw body.
        """
        status = response.status_code
        body = response.text
        message = f"HTTP error! status: {status}, message: {body}"

        if status == 401:
            return SearchApiAuthError(message, status_code=status, body=body)
        if status == 403:
            return SearchApiForbiddenError(message, status_code=status, body=body)
        if status == 429:
            return SearchApiRateLimitError(message, status_code=status, body=body)
        return SearchApiError(message, status_code=status, body=body)

    async def request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Send one request and return the decoded JSON body.

        Args:
            method: HTTP method.
            endpoint: Path relative to the base URL.
            json: Optional request body.
            params: Query parameters, sent in the given order.

        Returns:
            The decoded JSON object.

        Raises:
            SearchApiConnectionError: If no response was received.
            SearchApiAuthError: On 401.
            SearchApiForbiddenError: On 403.
            SearchApiRateLimitError: On 429.
            SearchApiError: On any other non-2xx status or an undecodable body.
        """
        try:
            response = await self._client.request(method, endpoint, json=json, params=params)
        except httpx.HTTPError as e:
            self._logger.error("api_request_failed", endpoint=endpoint, error=str(e))
            raise SearchApiConnectionError(str(e)) from e

        if response.is_error:
            error = self._error_for_response(response)
            self._logger.error(
                "api_error", endpoint=endpoint, status=response.status_code, error=response.text
            )
            raise error

        try:
            data: dict[str, Any] = response.json()
        except ValueError as e:
            raise SearchApiError(
                f"Invalid JSON in response from {endpoint}",
                status_code=response.status_code,
                body=response.text,
            ) from e
        return data

    async def search(
        self,
        payload: dict[str, Any],
        account_id: str,
        limit: str,
        cursor: str | None = None,
    ) -> dict[str, Any]:
        """POST a search payload and return the raw response."""
        params = {"account_id": account_id, "limit": limit}
        if cursor:
            params["cursor"] = cursor
        return await self.request("POST", SEARCH_ENDPOINT, json=payload, params=params)

    async def get_search_parameters(
        self,
        account_id: str,
        parameter_type: ParameterType,
        keywords: str | None = None,
    ) -> dict[str, Any]:
        """Fetch autocomplete options of one parameter type.

        Args:
            account_id: Provider account to search with.
            parameter_type: Kind of option to look up.
            keywords: Optional text typed by the user; blank text is not sent.

        Returns:
            The raw response with an "items" list.
        """
        params = {"type": parameter_type.value, "account_id": account_id}
        if keywords and keywords.strip():
            params["keywords"] = keywords.strip()
        return await self.request("GET", PARAMETERS_ENDPOINT, params=params)

    async def get_user_profile(
        self,
        account_id: str,
        identifier: str,
        sales_navigator: bool = False,
    ) -> dict[str, Any]:
        """Fetch one LinkedIn profile by provider id or public identifier."""
        params = {"account_id": account_id}
        if sales_navigator:
            params["linkedin_api"] = "sales_navigator"
        return await self.request("GET", f"{USERS_ENDPOINT}/{identifier}", params=params)
