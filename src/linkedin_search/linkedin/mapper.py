# ABOUTME: Maps search API responses to models and search results to list rows.
# ABOUTME: Handles data extraction from raw responses and the shape lists expect.

import json
from typing import Any
from uuid import UUID

from pydantic import ValidationError

from linkedin_search.linkedin.exceptions import SearchApiError
from linkedin_search.models.lists import ListAccount, ListProfile
from linkedin_search.models.results import SearchParametersResponse, SearchResponse, SearchResult


def _unexpected_shape(data: Any, error: ValidationError) -> SearchApiError:
    return SearchApiError(
        f"Unexpected response shape: {error.error_count()} invalid field(s)",
        body=json.dumps(data, default=str),
    )


def parse_search_response(data: dict[str, Any]) -> SearchResponse:
    """Narrow a raw search response into a SearchResponse.

    Args:
        data: Decoded JSON from the search endpoint.

    Returns:
        SearchResponse with items, paging and the next-page cursor.

    Raises:
        SearchApiError: If the response does not have the expected shape.
    """
    try:
        return SearchResponse.model_validate(data)
    except ValidationError as e:
        raise _unexpected_shape(data, e) from e


def parse_parameters_response(data: dict[str, Any]) -> SearchParametersResponse:
    """Narrow a raw parameters response into a SearchParametersResponse."""
    try:
        return SearchParametersResponse.model_validate(data)
    except ValidationError as e:
        raise _unexpected_shape(data, e) from e


def map_result_to_profile(result: SearchResult, list_id: UUID) -> ListProfile:
    """Map a people search result to a row of a list.

    Args:
        result: The search result to save.
        list_id: The list the row belongs to.

    Returns:
        ListProfile with empty strings for missing text.
    """
    return ListProfile(
        list_id=list_id,
        linkedin_id=result.id,
        name=result.name or "",
        headline=result.headline or "",
        location=result.location or "",
        profile_url=result.public_profile_url or result.profile_url or "",
    )


def map_result_to_account(result: SearchResult, list_id: UUID) -> ListAccount:
    """Map a company search result to a row of a list.

    Args:
        result: The search result to save.
        list_id: The list the row belongs to.

    Returns:
        ListAccount with empty strings and zero followers for missing data.
    """
    return ListAccount(
        list_id=list_id,
        linkedin_id=result.id,
        name=result.name or "",
        summary=result.summary or "",
        location=result.location or "",
        industry=result.industry or "",
        followers_count=result.followers_count or 0,
        profile_url=result.profile_url or "",
        logo=result.logo or "",
    )
