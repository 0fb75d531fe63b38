# ABOUTME: Field kinds and per-kind coercion used to build search payloads.
# ABOUTME: Each FieldSpec names a filter, its kind and its wire name; coercers never raise.

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from linkedin_search.search.payloads import (
    AdvancedKeywords,
    DepartmentRange,
    IncludeExclude,
    RangeBound,
    RevenueRange,
)
from linkedin_search.search.ranges import RangePolicy, as_bound, repair_ranges
from linkedin_search.search.values import (
    as_string_list,
    clean_text,
    coerce_job_offers,
    coerce_network_distance,
    filter_profile_languages,
    is_flag_set,
    is_non_empty_list,
)

FilterState = Mapping[str, Any]

OPEN_TO_VALUES = ("proBono", "boardMember")
ADVANCED_KEYWORD_NAMES = ("first_name", "last_name", "title", "company", "school")


class FieldKind(str, Enum):
    """Shape of a filter value and how it is coerced."""

    TEXT = "text"
    LIST = "list"
    INCLUDE = "include"
    NETWORK_DISTANCE = "network_distance"
    LANGUAGES = "languages"
    OPEN_TO = "open_to"
    FLAG = "flag"
    RANGE_LIST = "range_list"
    RANGE = "range"
    DEPARTMENT_RANGE = "department_range"
    REVENUE_RANGE = "revenue_range"
    INCLUDE_SELECTOR = "include_selector"
    ADVANCED_KEYWORDS = "advanced_keywords"
    JOB_OFFERS = "job_offers"


@dataclass(frozen=True)
class FieldSpec:
    """One supported filter of a payload.

    Attributes:
        source: Key in the filter state.
        kind: How the value is coerced.
        target: Key in the payload when it differs from source.
        policy: Repair for inverted ranges (range kinds only).
        lenient: For has_job_offers, send False for unrecognized values.
    """

    source: str
    kind: FieldKind
    target: str | None = None
    policy: RangePolicy = RangePolicy.COLLAPSE
    lenient: bool = False

    @property
    def wire_name(self) -> str:
        return self.target or self.source


def _text(filters: FilterState, spec: FieldSpec) -> str | None:
    return clean_text(filters.get(spec.source))


def _list(filters: FilterState, spec: FieldSpec) -> list[str] | None:
    return as_string_list(filters.get(spec.source))


def _include(filters: FilterState, spec: FieldSpec) -> IncludeExclude | None:
    values = as_string_list(filters.get(spec.source))
    return IncludeExclude(include=values) if values else None


def _network_distance(filters: FilterState, spec: FieldSpec) -> list[int | str] | None:
    return coerce_network_distance(filters.get(spec.source))


def _languages(filters: FilterState, spec: FieldSpec) -> list[str] | None:
    return filter_profile_languages(filters.get(spec.source))


def _open_to(filters: FilterState, spec: FieldSpec) -> list[str] | None:
    values = as_string_list(filters.get(spec.source)) or []
    allowed = [value for value in values if value in OPEN_TO_VALUES]
    return allowed or None


def _flag(filters: FilterState, spec: FieldSpec) -> bool | None:
    return True if is_flag_set(filters.get(spec.source)) else None


def _range_list(filters: FilterState, spec: FieldSpec) -> list[RangeBound] | None:
    ranges = repair_ranges(filters.get(spec.source), spec.policy)
    return [RangeBound(**bounds) for bounds in ranges] or None


def _range(filters: FilterState, spec: FieldSpec) -> RangeBound | None:
    value = filters.get(spec.source)
    if not isinstance(value, Mapping):
        return None
    low, high = as_bound(value.get("min")), as_bound(value.get("max"))
    if low is None or high is None:
        return None
    return RangeBound(min=low, max=high)


def _department_range(filters: FilterState, spec: FieldSpec) -> DepartmentRange | None:
    value = filters.get(spec.source)
    if not isinstance(value, Mapping):
        return None
    departments = value.get("department")
    if not is_non_empty_list(departments):
        return None
    departments = [item for item in departments if isinstance(item, str)]
    low, high = as_bound(value.get("min")), as_bound(value.get("max"))
    if not departments or low is None or high is None:
        return None
    return DepartmentRange(department=departments, min=low, max=high)


def _revenue_range(filters: FilterState, spec: FieldSpec) -> RevenueRange | None:
    value = filters.get(spec.source)
    if not isinstance(value, Mapping):
        return None
    currency = value.get("currency")
    low, high = as_bound(value.get("min")), as_bound(value.get("max"))
    if not isinstance(currency, str) or not currency or low is None or high is None:
        return None
    return RevenueRange(currency=currency, min=low, max=high)


def _include_selector(filters: FilterState, spec: FieldSpec) -> IncludeExclude | None:
    value = filters.get(spec.source)
    if not isinstance(value, Mapping):
        return None
    include = value.get("include")
    if not is_non_empty_list(include):
        return None
    include = [item for item in include if isinstance(item, str)]
    return IncludeExclude(include=include) if include else None


def _advanced_keywords(filters: FilterState, spec: FieldSpec) -> AdvancedKeywords | None:
    nested = filters.get(spec.source)
    nested = nested if isinstance(nested, Mapping) else {}

    keywords: dict[str, str] = {}
    for name in ADVANCED_KEYWORD_NAMES:
        # company and school at the top level are id lists, not keywords
        top_level = filters.get(name) if name in ("first_name", "last_name", "title") else None
        text = clean_text(top_level) or clean_text(nested.get(name))
        if text:
            keywords[name] = text
    return AdvancedKeywords(**keywords) if keywords else None


def _job_offers(filters: FilterState, spec: FieldSpec) -> bool | None:
    return coerce_job_offers(filters.get(spec.source), lenient=spec.lenient)


COERCERS: dict[FieldKind, Callable[[FilterState, FieldSpec], Any]] = {
    FieldKind.TEXT: _text,
    FieldKind.LIST: _list,
    FieldKind.INCLUDE: _include,
    FieldKind.NETWORK_DISTANCE: _network_distance,
    FieldKind.LANGUAGES: _languages,
    FieldKind.OPEN_TO: _open_to,
    FieldKind.FLAG: _flag,
    FieldKind.RANGE_LIST: _range_list,
    FieldKind.RANGE: _range,
    FieldKind.DEPARTMENT_RANGE: _department_range,
    FieldKind.REVENUE_RANGE: _revenue_range,
    FieldKind.INCLUDE_SELECTOR: _include_selector,
    FieldKind.ADVANCED_KEYWORDS: _advanced_keywords,
    FieldKind.JOB_OFFERS: _job_offers,
}


def coerce_field(filters: FilterState, spec: FieldSpec) -> Any:
    """Return the wire value for one field, or None to leave it out."""
    return COERCERS[spec.kind](filters, spec)
