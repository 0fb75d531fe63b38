# ABOUTME: Coordinates the search dispatcher with list persistence.
# ABOUTME: Runs a search page and saves its results into a list as profiles or accounts.

from uuid import UUID

from linkedin_search.database.store import ListStore
from linkedin_search.linkedin.mapper import map_result_to_account, map_result_to_profile
from linkedin_search.logging import get_logger
from linkedin_search.models.results import SearchResponse, SearchResult
from linkedin_search.search.dispatcher import SearchDispatcher
from linkedin_search.search.fields import FilterState
from linkedin_search.search.payloads import Category, Platform

logger = get_logger(__name__)


class SearchOrchestrator:
    """Coordinates search operations between services.

    Handles the full flow of:
    - Running one page of a search through the dispatcher
    - Mapping results to list rows for the searched category
    - Saving rows into a list, skipping ones already there
    """

    def __init__(self, dispatcher: SearchDispatcher, list_store: ListStore) -> None:
        """Initialize the search orchestrator.

        Args:
            dispatcher: Dispatcher that builds and sends search requests.
            list_store: Storage for lists of saved results.
        """
        self._dispatcher = dispatcher
        self._list_store = list_store

    def save_results(
        self,
        list_id: UUID,
        results: list[SearchResult],
        category: Category | str,
    ) -> int:
        """Save search results into a list.

        Args:
            list_id: The list to add to.
            results: Results of one search page.
            category: People results become profiles, company results accounts.

        Returns:
            Number of rows actually inserted.
        """
        if Category(category) is Category.COMPANIES:
            accounts = [map_result_to_account(result, list_id) for result in results]
            return self._list_store.add_accounts_to_list(list_id, accounts)

        profiles = [map_result_to_profile(result, list_id) for result in results]
        return self._list_store.add_profiles_to_list(list_id, profiles)

    async def search_and_save(
        self,
        account_id: str,
        filters: FilterState | None,
        list_id: UUID,
        platform: Platform | str = Platform.CLASSIC,
        category: Category | str = Category.PEOPLE,
        cursor: str | None = None,
        limit: int | str | None = None,
    ) -> tuple[SearchResponse, int]:
        """Run one search page and save every result into a list.

        Pages are saved independently; a failure on a later page leaves
        earlier pages saved.

        Returns:
            The search response and the number of rows inserted.

        Raises:
            SearchApiError: If the search request fails.
        """
        response = await self._dispatcher.search(
            account_id, filters, platform, category, cursor=cursor, limit=limit
        )
        saved = self.save_results(list_id, response.items, category)
        logger.info(
            "search_results_saved",
            list_id=str(list_id),
            received=len(response.items),
            saved=saved,
        )
        return response, saved
