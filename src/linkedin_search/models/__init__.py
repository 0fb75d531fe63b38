# ABOUTME: Models package for search responses and list persistence.
# ABOUTME: Exports pydantic response models and the SQLModel list tables.

from linkedin_search.models.lists import CrmList, ListAccount, ListProfile, SavedFilter
from linkedin_search.models.results import (
    PagingInfo,
    SearchParameter,
    SearchParametersResponse,
    SearchResponse,
    SearchResult,
)

__all__ = [
    "CrmList",
    "ListAccount",
    "ListProfile",
    "PagingInfo",
    "SavedFilter",
    "SearchParameter",
    "SearchParametersResponse",
    "SearchResponse",
    "SearchResult",
]
