"""
Page views over the company directory

One entry point, build_view(), replaces the per-page filter code: the page
asks for a ViewContext (home, a city, remote, other cities) and gets back the
sorted companies, their stats and card display data.

Usage:
    from equity_jobs.views import ViewContext, build_view

    view = build_view(companies, ViewContext.for_city("melbourne"))
    print(view.title, view.stats.to_dict())
    for card in view.cards():
        print(card.name, card.location_display)
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

from equity_jobs.company_directory import (
    DirectoryStats,
    aggregate_stats,
    all_locations_text,
    all_work_types_text,
    capitalize_work_type,
    filter_by_city,
    filter_by_work_arrangement,
    filter_excluding_major_cities,
    promote_work_type,
    select_primary_location_display,
    select_work_type_display,
    sort_by_name,
)
from equity_jobs.models.company import Company

# Australian capital cities, in navigation order
MAJOR_CITIES: tuple[str, ...] = (
    "Sydney",
    "Melbourne",
    "Brisbane",
    "Perth",
    "Adelaide",
    "Canberra",
)

REMOTE_ARRANGEMENT = "Remote"


class UnknownViewError(ValueError):
    """Route segment does not name a view (the routing layer's 404)"""


class ViewKind(Enum):
    ALL = "all"
    CITY = "city"
    REMOTE = "remote"
    OTHER = "other"


@dataclass(frozen=True)
class ViewContext:
    """Which subset of the directory a page shows"""

    kind: ViewKind
    city: str | None = None

    @classmethod
    def home(cls) -> "ViewContext":
        return cls(ViewKind.ALL)

    @classmethod
    def for_city(cls, city: str) -> "ViewContext":
        return cls(ViewKind.CITY, city)

    @classmethod
    def remote(cls) -> "ViewContext":
        return cls(ViewKind.REMOTE)

    @classmethod
    def other(cls) -> "ViewContext":
        return cls(ViewKind.OTHER)

    @property
    def slug(self) -> str:
        """URL path segment for this view"""
        if self.kind is ViewKind.CITY:
            return (self.city or "").lower()
        if self.kind is ViewKind.ALL:
            return ""
        return self.kind.value


@dataclass(frozen=True)
class CompanyCard:
    """Display-ready fields for one company card"""

    name: str
    website: str
    description: str
    year: str
    location_display: str
    work_type_display: str
    all_locations_text: str
    all_work_types_text: str
    has_multiple_locations: bool
    has_multiple_work_types: bool

    @classmethod
    def from_company(cls, company: Company, current_city: str | None = None) -> "CompanyCard":
        return cls(
            name=company.name,
            website=company.website,
            description=company.description,
            year=company.year,
            location_display=select_primary_location_display(company, current_city),
            work_type_display=capitalize_work_type(select_work_type_display(company)),
            all_locations_text=all_locations_text(company),
            all_work_types_text=all_work_types_text(company),
            has_multiple_locations=len(company.all_locations) > 1,
            has_multiple_work_types=len(company.all_work_types) > 1,
        )


@dataclass(frozen=True)
class DirectoryView:
    """Everything a page needs to render its list of companies"""

    context: ViewContext
    title: str
    companies: tuple[Company, ...]
    stats: DirectoryStats

    def cards(self) -> list[CompanyCard]:
        current_city = self.context.city if self.context.kind is ViewKind.CITY else None
        return [CompanyCard.from_company(company, current_city) for company in self.companies]


@dataclass(frozen=True)
class NavigationLink:
    label: str
    path: str


def capitalize_city_name(city: str) -> str:
    """'melbourne' -> 'Melbourne'"""
    return city[:1].upper() + city[1:]


def is_valid_city_slug(slug: str) -> bool:
    """True if slug names one of the major cities (any case)"""
    return slug.lower() in {city.lower() for city in MAJOR_CITIES}


def parse_view_path(segment: str | None) -> ViewContext:
    """
    Map a URL path segment to a view

    Raises:
        UnknownViewError: If the segment is not a known view or city
    """
    slug = (segment or "").strip().strip("/").lower()
    if not slug:
        return ViewContext.home()
    if slug == ViewKind.REMOTE.value:
        return ViewContext.remote()
    if slug == ViewKind.OTHER.value:
        return ViewContext.other()
    if is_valid_city_slug(slug):
        return ViewContext.for_city(slug)
    raise UnknownViewError(f"No directory view for '{segment}'")


def pluralize(count: int, singular: str, plural: str) -> str:
    """'1 company', '2 companies'"""
    return f"{count} {singular if count == 1 else plural}"


def view_title(context: ViewContext, count: int) -> str:
    """Page heading for a view"""
    if context.kind is ViewKind.CITY:
        return f"{capitalize_city_name(context.city or '')} companies offering equity"
    if context.kind is ViewKind.REMOTE:
        return f"{count} remote companies offering equity"
    if context.kind is ViewKind.OTHER:
        return f"{count} companies offering equity outside of Australian capital cities"
    return "Australian companies offering equity"


def build_view(companies: Sequence[Company], context: ViewContext) -> DirectoryView:
    """
    Filter, sort and aggregate the directory for one page

    Args:
        companies: Full, immutable collection
        context: Which view to build

    Returns:
        DirectoryView. An unknown city yields an empty view, not an error.
    """
    if context.kind is ViewKind.CITY:
        selected = sort_by_name(filter_by_city(companies, context.city or ""))
        # The page already represents a single city
        stats = replace(aggregate_stats(selected), cities_count=1)
    elif context.kind is ViewKind.REMOTE:
        remote = sort_by_name(filter_by_work_arrangement(companies, REMOTE_ARRANGEMENT))
        stats = aggregate_stats(remote)
        selected = tuple(promote_work_type(company, REMOTE_ARRANGEMENT) for company in remote)
    elif context.kind is ViewKind.OTHER:
        selected = sort_by_name(filter_excluding_major_cities(companies, MAJOR_CITIES))
        stats = aggregate_stats(selected)
    else:
        selected = sort_by_name(companies)
        stats = aggregate_stats(selected)

    return DirectoryView(
        context=context,
        title=view_title(context, len(selected)),
        companies=selected,
        stats=stats,
    )


def navigation_links(context: ViewContext) -> list[NavigationLink]:
    """
    Links to the other views, shown at the bottom of each page

    The current city, remote and other pages are left out of their own list.
    """
    current_city = (context.city or "").lower() if context.kind is ViewKind.CITY else None
    links = [
        NavigationLink(label=city, path=f"/{city.lower()}")
        for city in MAJOR_CITIES
        if city.lower() != current_city
    ]
    if context.kind is not ViewKind.REMOTE:
        links.append(NavigationLink(label="Remote", path="/remote"))
    if context.kind is not ViewKind.OTHER:
        links.append(NavigationLink(label="Other cities", path="/other"))
    return links
