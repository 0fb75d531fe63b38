# ABOUTME: Request payload models for the four search dialects plus URL searches.
# ABOUTME: Frozen pydantic models that reject fields outside each dialect's field set.

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Platform(str, Enum):
    """Search API family."""

    CLASSIC = "classic"
    SALES_NAVIGATOR = "sales_navigator"


class Category(str, Enum):
    """Entity type being searched."""

    PEOPLE = "people"
    COMPANIES = "companies"


NetworkDistanceCode = int | Literal["GROUP"]


class WireModel(BaseModel):
    """Base for every model that is serialized into a request body."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON body with unset fields left out."""
        return self.model_dump(mode="json", exclude_none=True)


class RangeBound(WireModel):
    """A repaired numeric range; either bound may be absent."""

    min: int | float | None = None
    max: int | float | None = None


class IncludeExclude(WireModel):
    """Positive and negative membership lists for one field."""

    include: list[str] | None = None
    exclude: list[str] | None = None


class AdvancedKeywords(WireModel):
    """Classic people search keyword refinements."""

    first_name: str | None = None
    last_name: str | None = None
    title: str | None = None
    company: str | None = None
    school: str | None = None


class DepartmentRange(WireModel):
    """Headcount (or headcount growth) range within departments."""

    department: Annotated[list[str], Field(min_length=1)]
    min: int | float
    max: int | float


class RevenueRange(WireModel):
    """Annual revenue range in a currency."""

    currency: Annotated[str, Field(min_length=1)]
    min: int | float
    max: int | float


class SearchPayload(WireModel):
    """Fields shared by every payload."""

    api: Platform
    category: Category


class UrlSearchPayload(SearchPayload):
    """A search driven entirely by a LinkedIn search URL."""

    url: str


class ClassicPeoplePayload(SearchPayload):
    """Classic people search body."""

    api: Literal[Platform.CLASSIC] = Platform.CLASSIC
    category: Literal[Category.PEOPLE] = Category.PEOPLE
    url: str | None = None
    keywords: str | None = None
    advanced_keywords: AdvancedKeywords | None = None
    industry: list[str] | None = None
    location: list[str] | None = None
    profile_language: list[str] | None = None
    network_distance: list[NetworkDistanceCode] | None = None
    company: list[str] | None = None
    past_company: list[str] | None = None
    school: list[str] | None = None
    service: list[str] | None = None
    connections_of: list[str] | None = None
    followers_of: list[str] | None = None
    open_to: list[Literal["proBono", "boardMember"]] | None = None


class ClassicCompanyPayload(SearchPayload):
    """Classic company search body."""

    api: Literal[Platform.CLASSIC] = Platform.CLASSIC
    category: Literal[Category.COMPANIES] = Category.COMPANIES
    url: str | None = None
    keywords: str | None = None
    industry: list[str] | None = None
    location: list[str] | None = None
    network_distance: list[NetworkDistanceCode] | None = None
    headcount: list[RangeBound] | None = None
    has_job_offers: bool | None = None


class SalesNavigatorPeoplePayload(SearchPayload):
    """Sales Navigator people search body."""

    api: Literal[Platform.SALES_NAVIGATOR] = Platform.SALES_NAVIGATOR
    category: Literal[Category.PEOPLE] = Category.PEOPLE
    url: str | None = None
    keywords: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    recent_search_id: str | None = None
    saved_search_id: str | None = None
    connections_of: list[str] | None = None
    industry: IncludeExclude | None = None
    job_function: IncludeExclude | None = None
    location: IncludeExclude | None = None
    company: IncludeExclude | None = None
    past_company: IncludeExclude | None = None
    company_location: IncludeExclude | None = None
    role: IncludeExclude | None = None
    past_role: IncludeExclude | None = None
    school: IncludeExclude | None = None
    seniority: IncludeExclude | None = None
    network_distance: list[NetworkDistanceCode] | None = None
    following_your_company: bool | None = None
    viewed_your_profile_recently: bool | None = None
    viewed_profile_recently: bool | None = None
    messaged_recently: bool | None = None
    include_saved_leads: bool | None = None
    tenure: list[RangeBound] | None = None
    company_headcount: list[RangeBound] | None = None
    tenure_at_role: list[RangeBound] | None = None
    tenure_at_company: list[RangeBound] | None = None
    profile_language: list[str] | None = None


class SalesNavigatorCompanyPayload(SearchPayload):
    """Sales Navigator company (account) search body."""

    api: Literal[Platform.SALES_NAVIGATOR] = Platform.SALES_NAVIGATOR
    category: Literal[Category.COMPANIES] = Category.COMPANIES
    url: str | None = None
    keywords: str | None = None
    recent_search_id: str | None = None
    saved_search_id: str | None = None
    industry: IncludeExclude | None = None
    location: IncludeExclude | None = None
    company_location: IncludeExclude | None = None
    network_distance: list[NetworkDistanceCode] | None = None
    headcount: list[RangeBound] | None = None
    headcount_growth: RangeBound | None = None
    department_headcount: DepartmentRange | None = None
    department_headcount_growth: DepartmentRange | None = None
    annual_revenue: RevenueRange | None = None
    followers_count: list[RangeBound] | None = None
    fortune: list[RangeBound] | None = None
    technologies: list[str] | None = None
    saved_accounts: list[str] | None = None
    account_lists: IncludeExclude | None = None
    has_job_offers: bool | None = None


RequestPayload = (
    ClassicPeoplePayload
    | ClassicCompanyPayload
    | SalesNavigatorPeoplePayload
    | SalesNavigatorCompanyPayload
    | UrlSearchPayload
)
