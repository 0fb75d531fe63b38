# ABOUTME: Search API integration package for HTTP access and response mapping.
# ABOUTME: Exports SearchApiClient, mapper functions, parameter types and exception types.

from linkedin_search.linkedin.client import SearchApiClient
from linkedin_search.linkedin.exceptions import (
    SearchApiAuthError,
    SearchApiConnectionError,
    SearchApiError,
    SearchApiForbiddenError,
    SearchApiRateLimitError,
)
from linkedin_search.linkedin.mapper import (
    map_result_to_account,
    map_result_to_profile,
    parse_parameters_response,
    parse_search_response,
)
from linkedin_search.linkedin.parameters import ParameterType, resolve_parameter_type

__all__ = [
    "ParameterType",
    "SearchApiAuthError",
    "SearchApiClient",
    "SearchApiConnectionError",
    "SearchApiError",
    "SearchApiForbiddenError",
    "SearchApiRateLimitError",
    "map_result_to_account",
    "map_result_to_profile",
    "parse_parameters_response",
    "parse_search_response",
    "resolve_parameter_type",
]
