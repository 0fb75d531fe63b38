# ABOUTME: Search package for filter transformation and query dispatch.
# ABOUTME: Exports the transformers, payload types, SearchDispatcher and SearchOrchestrator.

from linkedin_search.search.dispatcher import SearchDispatcher, build_search_request
from linkedin_search.search.fields import FieldKind, FieldSpec, FilterState
from linkedin_search.search.orchestrator import SearchOrchestrator
from linkedin_search.search.payloads import Category, Platform, RequestPayload
from linkedin_search.search.ranges import RangePolicy, repair_range, repair_ranges
from linkedin_search.search.transformers import (
    build_payload,
    get_transformer,
    transform_classic_companies,
    transform_classic_people,
    transform_sales_navigator_companies,
    transform_sales_navigator_people,
)

__all__ = [
    "Category",
    "FieldKind",
    "FieldSpec",
    "FilterState",
    "Platform",
    "RangePolicy",
    "RequestPayload",
    "SearchDispatcher",
    "SearchOrchestrator",
    "build_payload",
    "build_search_request",
    "get_transformer",
    "repair_range",
    "repair_ranges",
    "transform_classic_companies",
    "transform_classic_people",
    "transform_sales_navigator_companies",
    "transform_sales_navigator_people",
]
