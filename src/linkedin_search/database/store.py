# ABOUTME: CRUD contract for list and saved-filter storage.
# ABOUTME: Search code depends on this protocol, not on a particular storage backend.

from typing import Any, Protocol
from uuid import UUID

from linkedin_search.models.lists import CrmList, ListAccount, ListProfile, SavedFilter


class ListStore(Protocol):
    """Storage for lists of saved search results."""

    def create_list(self, name: str, account_id: str) -> CrmList: ...

    def get_crm_lists(self, account_id: str) -> list[CrmList]: ...

    def add_profiles_to_list(self, list_id: UUID, profiles: list[ListProfile]) -> int: ...

    def add_accounts_to_list(self, list_id: UUID, accounts: list[ListAccount]) -> int: ...

    def get_profiles_in_list(self, list_id: UUID) -> list[ListProfile]: ...

    def get_accounts_in_list(self, list_id: UUID) -> list[ListAccount]: ...

    def remove_profile_from_list(self, profile_id: UUID) -> None: ...

    def save_filter(
        self,
        account_id: str,
        name: str,
        filters: dict[str, Any],
        group_name: str | None = None,
    ) -> SavedFilter: ...

    def get_saved_filters(self, account_id: str) -> list[SavedFilter]: ...
