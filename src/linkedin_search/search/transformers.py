# ABOUTME: Transforms a loose filter state into one of four typed search payloads.
# ABOUTME: One generic driver walks a per-dialect field table; search URLs short-circuit.

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from linkedin_search.search.fields import FieldKind, FieldSpec, FilterState, coerce_field
from linkedin_search.search.payloads import (
    Category,
    ClassicCompanyPayload,
    ClassicPeoplePayload,
    Platform,
    RequestPayload,
    SalesNavigatorCompanyPayload,
    SalesNavigatorPeoplePayload,
)
from linkedin_search.search.ranges import RangePolicy
from linkedin_search.search.values import clean_text


@dataclass(frozen=True)
class PayloadTable:
    """Supported fields of one (platform, category) payload."""

    model: type[RequestPayload]
    fields: tuple[FieldSpec, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)


CLASSIC_PEOPLE = PayloadTable(
    model=ClassicPeoplePayload,
    fields=(
        FieldSpec("keywords", FieldKind.TEXT),
        FieldSpec("advanced_keywords", FieldKind.ADVANCED_KEYWORDS),
        FieldSpec("industry", FieldKind.LIST),
        FieldSpec("network_distance", FieldKind.NETWORK_DISTANCE),
        FieldSpec("profile_language", FieldKind.LANGUAGES),
        FieldSpec("location", FieldKind.LIST),
        FieldSpec("company", FieldKind.LIST),
        FieldSpec("past_company", FieldKind.LIST),
        FieldSpec("school", FieldKind.LIST),
        FieldSpec("service", FieldKind.LIST),
        FieldSpec("connections_of", FieldKind.LIST),
        FieldSpec("followers_of", FieldKind.LIST),
        FieldSpec("open_to", FieldKind.OPEN_TO),
    ),
)

CLASSIC_COMPANIES = PayloadTable(
    model=ClassicCompanyPayload,
    fields=(
        FieldSpec("keywords", FieldKind.TEXT),
        FieldSpec("industry", FieldKind.LIST),
        FieldSpec("network_distance", FieldKind.NETWORK_DISTANCE),
        FieldSpec("location", FieldKind.LIST),
        FieldSpec("headcount", FieldKind.RANGE_LIST, policy=RangePolicy.COLLAPSE),
        FieldSpec("has_job_offers", FieldKind.JOB_OFFERS, lenient=True),
    ),
)

SALES_NAVIGATOR_PEOPLE = PayloadTable(
    model=SalesNavigatorPeoplePayload,
    fields=(
        FieldSpec("connections_of", FieldKind.LIST),
        FieldSpec("keywords", FieldKind.TEXT),
        FieldSpec("first_name", FieldKind.TEXT),
        FieldSpec("last_name", FieldKind.TEXT),
        FieldSpec("recent_search", FieldKind.TEXT, target="recent_search_id"),
        FieldSpec("saved_search", FieldKind.TEXT, target="saved_search_id"),
        FieldSpec("industry", FieldKind.INCLUDE),
        FieldSpec("job_function", FieldKind.INCLUDE),
        FieldSpec("location", FieldKind.INCLUDE),
        FieldSpec("company", FieldKind.INCLUDE),
        FieldSpec("past_company", FieldKind.INCLUDE),
        FieldSpec("network_distance", FieldKind.NETWORK_DISTANCE),
        FieldSpec("company_location", FieldKind.INCLUDE),
        FieldSpec("role", FieldKind.INCLUDE),
        FieldSpec("past_role", FieldKind.INCLUDE),
        FieldSpec("school", FieldKind.INCLUDE),
        FieldSpec("seniority", FieldKind.INCLUDE),
        FieldSpec("following_your_company", FieldKind.FLAG),
        FieldSpec("viewed_your_profile_recently", FieldKind.FLAG),
        FieldSpec("viewed_profile_recently", FieldKind.FLAG),
        FieldSpec("messaged_recently", FieldKind.FLAG),
        FieldSpec("include_saved_leads", FieldKind.FLAG),
        FieldSpec("tenure", FieldKind.RANGE_LIST, policy=RangePolicy.DROP_MAX),
        FieldSpec("company_headcount", FieldKind.RANGE_LIST, policy=RangePolicy.DROP_MAX),
        FieldSpec("tenure_at_role", FieldKind.RANGE_LIST, policy=RangePolicy.DROP_MAX),
        FieldSpec("tenure_at_company", FieldKind.RANGE_LIST, policy=RangePolicy.DROP_MAX),
        FieldSpec("profile_language", FieldKind.LANGUAGES),
    ),
)

SALES_NAVIGATOR_COMPANIES = PayloadTable(
    model=SalesNavigatorCompanyPayload,
    fields=(
        FieldSpec("keywords", FieldKind.TEXT),
        FieldSpec("recent_search", FieldKind.TEXT, target="recent_search_id"),
        FieldSpec("saved_search", FieldKind.TEXT, target="saved_search_id"),
        FieldSpec("industry", FieldKind.INCLUDE),
        FieldSpec("location", FieldKind.INCLUDE),
        FieldSpec("network_distance", FieldKind.NETWORK_DISTANCE),
        FieldSpec("company_location", FieldKind.INCLUDE),
        FieldSpec("headcount", FieldKind.RANGE_LIST, policy=RangePolicy.COLLAPSE),
        FieldSpec("headcount_growth", FieldKind.RANGE),
        FieldSpec("department_headcount", FieldKind.DEPARTMENT_RANGE),
        FieldSpec("department_headcount_growth", FieldKind.DEPARTMENT_RANGE),
        FieldSpec("annual_revenue", FieldKind.REVENUE_RANGE),
        FieldSpec(
            "followers_count", FieldKind.RANGE_LIST, policy=RangePolicy.DROP_MAX_INCLUSIVE
        ),
        FieldSpec("fortune", FieldKind.RANGE_LIST, policy=RangePolicy.COLLAPSE),
        FieldSpec("technologies", FieldKind.LIST),
        FieldSpec("saved_accounts", FieldKind.LIST),
        FieldSpec("account_lists", FieldKind.INCLUDE_SELECTOR),
        FieldSpec("has_job_offers", FieldKind.JOB_OFFERS),
    ),
    # The API expects the headcount key on every account search.
    defaults={"headcount": []},
)


def _transform(filters: FilterState | None, table: PayloadTable) -> RequestPayload:
    """Build a finished payload from a filter state using one field table.

    A non-empty search_url wins over every other filter. Otherwise each
    supported field is coerced and kept only when it produced a value.
    """
    filters = filters if isinstance(filters, Mapping) else {}

    # Sent as given; trimming only decides whether it is blank.
    if clean_text(filters.get("search_url")):
        return table.model(url=filters["search_url"])

    values: dict[str, Any] = dict(table.defaults)
    for spec in table.fields:
        value = coerce_field(filters, spec)
        if value is not None:
            values[spec.wire_name] = value
    return table.model(**values)


def transform_classic_people(filters: FilterState | None) -> ClassicPeoplePayload:
    """Build a classic people search payload."""
    return _transform(filters, CLASSIC_PEOPLE)  # type: ignore[return-value]


def transform_classic_companies(filters: FilterState | None) -> ClassicCompanyPayload:
    """Build a classic company search payload."""
    return _transform(filters, CLASSIC_COMPANIES)  # type: ignore[return-value]


def transform_sales_navigator_people(
    filters: FilterState | None,
) -> SalesNavigatorPeoplePayload:
    """Build a Sales Navigator people search payload."""
    return _transform(filters, SALES_NAVIGATOR_PEOPLE)  # type: ignore[return-value]


def transform_sales_navigator_companies(
    filters: FilterState | None,
) -> SalesNavigatorCompanyPayload:
    """Build a Sales Navigator company search payload.

    Unlike the other transformers, headcount is always present and
    defaults to an empty list.
    """
    return _transform(filters, SALES_NAVIGATOR_COMPANIES)  # type: ignore[return-value]


TRANSFORMERS: dict[tuple[Platform, Category], Callable[[FilterState | None], RequestPayload]] = {
    (Platform.CLASSIC, Category.PEOPLE): transform_classic_people,
    (Platform.CLASSIC, Category.COMPANIES): transform_classic_companies,
    (Platform.SALES_NAVIGATOR, Category.PEOPLE): transform_sales_navigator_people,
    (Platform.SALES_NAVIGATOR, Category.COMPANIES): transform_sales_navigator_companies,
}


def get_transformer(
    platform: Platform | str, category: Category | str
) -> Callable[[FilterState | None], RequestPayload]:
    """Select the transformer for a platform and category.

    Raises:
        KeyError: If the combination is not one of the four known ones.
    """
    try:
        key = (Platform(platform), Category(category))
    except ValueError:
        raise KeyError((platform, category)) from None
    return TRANSFORMERS[key]


def build_payload(
    filters: FilterState | None, platform: Platform | str, category: Category | str
) -> RequestPayload:
    """Transform a filter state for the given platform and category."""
    return get_transformer(platform, category)(filters)
