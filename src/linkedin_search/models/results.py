# ABOUTME: Pydantic models for search API responses.
# ABOUTME: Covers search results, paging info and autocomplete parameter items.

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Base for response models; unknown keys from the API are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class SearchResult(ApiModel):
    """One person or company returned by a search."""

    id: str
    name: str | None = None
    headline: str | None = None
    location: str | None = None
    industry: str | None = None
    summary: str | None = None
    logo: str | None = None
    profile_picture_url: str | None = None
    followers_count: int | None = None
    network_distance: str | None = None
    public_identifier: str | None = None
    profile_url: str | None = None
    public_profile_url: str | None = None


class PagingInfo(ApiModel):
    """Position of the current page within the whole result set."""

    start: int = 0
    page_count: int = 0
    total_count: int = 0


class SearchResponse(ApiModel):
    """A page of search results plus the cursor for the next page."""

    object: str = ""
    items: list[SearchResult] = Field(default_factory=list)
    paging: PagingInfo = Field(default_factory=PagingInfo)
    cursor: Annotated[
        str | None, Field(description="Opaque token to pass back for the next page")
    ] = None
    config: dict[str, Any] | None = None

    @property
    def has_next_page(self) -> bool:
        """Return True if the API issued a cursor for another page."""
        return bool(self.cursor)


class SearchParameter(ApiModel):
    """An autocomplete option for a filter."""

    id: str
    title: str
    count: int | None = None
    additional_data: dict[str, Any] | None = None


class SearchParametersResponse(ApiModel):
    """Autocomplete options returned by the parameters endpoint."""

    items: list[SearchParameter] = Field(default_factory=list)
