# ABOUTME: Resolves filter names to the API's lookup parameter types.
# ABOUTME: Used to fetch autocomplete options for a filter; unknown names fall back to KEYWORDS.

from enum import Enum


class ParameterType(str, Enum):
    """Lookup parameter types accepted by the search parameters endpoint."""

    LOCATION = "LOCATION"
    PEOPLE = "PEOPLE"
    COMPANY = "COMPANY"
    SCHOOL = "SCHOOL"
    SERVICE = "SERVICE"
    DEPARTMENT = "DEPARTMENT"
    JOB_TITLE = "JOB_TITLE"
    INDUSTRY = "INDUSTRY"
    KEYWORDS = "KEYWORDS"
    SAVED_SEARCHES = "SAVED_SEARCHES"
    RECENT_SEARCHES = "RECENT_SEARCHES"
    FOLLOWERS = "FOLLOWERS"
    CONNECTIONS = "CONNECTIONS"
    ACCOUNT_LISTS = "ACCOUNT_LISTS"
    TECHNOLOGIES = "TECHNOLOGIES"
    SAVED_ACCOUNTS = "SAVED_ACCOUNTS"


FILTER_PARAMETER_TYPES: dict[str, ParameterType] = {
    "location": ParameterType.LOCATION,
    "company_location": ParameterType.LOCATION,
    "people": ParameterType.PEOPLE,
    "company": ParameterType.COMPANY,
    "past_company": ParameterType.COMPANY,
    "school": ParameterType.SCHOOL,
    "service": ParameterType.SERVICE,
    "job_function": ParameterType.DEPARTMENT,
    "department": ParameterType.DEPARTMENT,
    "role": ParameterType.JOB_TITLE,
    "past_role": ParameterType.JOB_TITLE,
    "industry": ParameterType.INDUSTRY,
    "keywords": ParameterType.KEYWORDS,
    "saved_search": ParameterType.SAVED_SEARCHES,
    "recent_search": ParameterType.RECENT_SEARCHES,
    "followers": ParameterType.FOLLOWERS,
    "connections": ParameterType.CONNECTIONS,
    "account_lists": ParameterType.ACCOUNT_LISTS,
    "technologies": ParameterType.TECHNOLOGIES,
    "saved_accounts": ParameterType.SAVED_ACCOUNTS,
}


def resolve_parameter_type(filter_name: str) -> ParameterType:
    """Map a filter name to its lookup parameter type.

    Args:
        filter_name: Filter name in any case, e.g. "past_role".

    Returns:
        The matching ParameterType, or KEYWORDS for unmapped names.
    """
    return FILTER_PARAMETER_TYPES.get(filter_name.lower(), ParameterType.KEYWORDS)
