# ABOUTME: Chooses URL or filter search, selects the transformer and issues the search request.
# ABOUTME: One HTTP call per search; no caching, no retry; diagnostics go to an injected logger.

from collections.abc import Mapping
from typing import Any

from linkedin_search.linkedin.client import SearchApiClient
from linkedin_search.linkedin.mapper import parse_parameters_response, parse_search_response
from linkedin_search.linkedin.parameters import resolve_parameter_type
from linkedin_search.logging import get_logger
from linkedin_search.models.results import SearchParametersResponse, SearchResponse
from linkedin_search.search.fields import FilterState
from linkedin_search.search.payloads import Category, Platform, RequestPayload, UrlSearchPayload
from linkedin_search.search.transformers import build_payload

DEFAULT_LIMIT = "10"


def build_search_request(
    filters: FilterState | None,
    platform: Platform | str,
    category: Category | str,
) -> RequestPayload:
    """Build the payload a search call would send.

    Input carrying a "url" string bypasses the transformers and only
    keeps the platform and category.

    Raises:
        KeyError: If platform and category are not a known pair.
    """
    if isinstance(filters, Mapping) and isinstance(filters.get("url"), str):
        return UrlSearchPayload(
            api=Platform(platform), category=Category(category), url=filters["url"]
        )
    return build_payload(filters, platform, category)


class SearchDispatcher:
    """Turns a filter state (or a search URL) into one search request.

    Callers that fire searches for quickly changing filters should keep
    the filter state next to each pending call and discard responses for
    states that are no longer current.
    """

    def __init__(
        self,
        client: SearchApiClient,
        default_limit: int | str = DEFAULT_LIMIT,
        logger: Any = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            client: Client used to send the request.
            default_limit: Page size when a call gives none.
            logger: Structured logger; defaults to the module logger.
        """
        self._client = client
        self._default_limit = str(default_limit)
        self._logger = logger if logger is not None else get_logger(__name__)

    async def search(
        self,
        account_id: str,
        filters: FilterState | None,
        platform: Platform | str = Platform.CLASSIC,
        category: Category | str = Category.PEOPLE,
        cursor: str | None = None,
        limit: int | str | None = None,
    ) -> SearchResponse:
        """Run one search.

        Args:
            account_id: Provider account to search with.
            filters: Filter state, or a mapping with a "url" key.
            platform: "classic" or "sales_navigator".
            category: "people" or "companies".
            cursor: Cursor from the previous page, passed back verbatim.
            limit: Page size; defaults to the dispatcher's default limit.

        Returns:
            The page of results with paging info and the next cursor.

        Raises:
            SearchApiError: If the request fails; nothing is retried.
        """
        payload = build_search_request(filters, platform, category)
        body = payload.to_wire()
        log = self._logger.bind(
            account_id=account_id, platform=body["api"], category=body["category"]
        )
        log.debug("search_request", payload=body, cursor=cursor)

        data = await self._client.search(
            body,
            account_id=account_id,
            limit=str(limit) if limit else self._default_limit,
            cursor=cursor,
        )
        response = parse_search_response(data)

        log.info(
            "search_completed",
            items=len(response.items),
            total=response.paging.total_count,
            has_next_page=response.has_next_page,
        )
        return response

    async def search_people(
        self,
        account_id: str,
        filters: FilterState | None,
        platform: Platform | str = Platform.CLASSIC,
        cursor: str | None = None,
        limit: int | str | None = None,
    ) -> SearchResponse:
        """Run a people search."""
        return await self.search(account_id, filters, platform, Category.PEOPLE, cursor, limit)

    async def search_companies(
        self,
        account_id: str,
        filters: FilterState | None,
        platform: Platform | str = Platform.CLASSIC,
        cursor: str | None = None,
        limit: int | str | None = None,
    ) -> SearchResponse:
        """Run a company search."""
        return await self.search(
            account_id, filters, platform, Category.COMPANIES, cursor, limit
        )

    async def lookup_parameters(
        self,
        account_id: str,
        filter_name: str,
        query: str | None = None,
    ) -> SearchParametersResponse:
        """Fetch autocomplete options for a filter.

        Args:
            account_id: Provider account to search with.
            filter_name: Filter whose options are needed, e.g. "location".
            query: Text typed so far.

        Returns:
            The matching options.
        """
        parameter_type = resolve_parameter_type(filter_name)
        self._logger.debug(
            "parameters_request", filter_name=filter_name, parameter_type=parameter_type.value
        )
        data = await self._client.get_search_parameters(account_id, parameter_type, query)
        return parse_parameters_response(data)
