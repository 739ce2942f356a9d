"""
Company directory filtering and aggregation

Pure functions over an immutable collection of companies. Every page of the
site (home, city, remote, other cities) and the company cards build on these;
nothing here performs I/O or mutates its input.

City and work-type matching is case-insensitive. Statistics count distinct
values exactly as stored.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from equity_jobs.models.company import Company


@dataclass(frozen=True)
class DirectoryStats:
    """Headline numbers shown above a list of companies"""

    companies_count: int
    cities_count: int
    work_arrangements_count: int

    def to_dict(self) -> dict:
        return {
            "companiesCount": self.companies_count,
            "citiesCount": self.cities_count,
            "workArrangementsCount": self.work_arrangements_count,
        }


def _matches_any(value: str, candidates: Iterable[str]) -> bool:
    """Case-insensitive membership test"""
    target = value.lower()
    return any(candidate.lower() == target for candidate in candidates)


def filter_by_city(companies: Sequence[Company], city: str) -> tuple[Company, ...]:
    """
    Companies whose primary location or any listed location is `city`

    Args:
        companies: Full collection
        city: City name, any case

    Returns:
        Matching companies in input order (empty if none match)
    """
    return tuple(
        company
        for company in companies
        if company.location.lower() == city.lower() or _matches_any(city, company.locations)
    )


def filter_by_work_arrangement(
    companies: Sequence[Company], arrangement: str
) -> tuple[Company, ...]:
    """Companies whose primary or any listed work type is `arrangement`"""
    return tuple(
        company
        for company in companies
        if company.work_type.lower() == arrangement.lower()
        or _matches_any(arrangement, company.work_types)
    )


def filter_excluding_major_cities(
    companies: Sequence[Company], major_cities: Iterable[str]
) -> tuple[Company, ...]:
    """
    Companies with no presence in any of `major_cities`

    A company with a single major-city office is excluded even if it also
    operates elsewhere.
    """
    excluded = {city.lower() for city in major_cities}

    def has_major_location(company: Company) -> bool:
        if company.location.lower() in excluded:
            return True
        return any(loc.lower() in excluded for loc in company.locations)

    return tuple(company for company in companies if not has_major_location(company))


def sort_by_name(companies: Iterable[Company]) -> tuple[Company, ...]:
    """Alphabetical by name, ignoring case. Ties keep their input order."""
    return tuple(sorted(companies, key=lambda company: company.name.lower()))


def _count_distinct(values: Iterable[str]) -> int:
    return len({value for value in values if value and value.strip()})


def aggregate_stats(companies: Sequence[Company]) -> DirectoryStats:
    """
    Company, city and work arrangement counts for a collection

    Cities and work arrangements are the distinct non-blank values across every
    company's full lists. Values are compared exactly as stored, so "Sydney" and
    "sydney" count twice.
    """
    return DirectoryStats(
        companies_count=len(companies),
        cities_count=_count_distinct(loc for company in companies for loc in company.locations),
        work_arrangements_count=_count_distinct(
            work_type for company in companies for work_type in company.work_types
        ),
    )


def select_primary_location_display(company: Company, current_city: str | None = None) -> str:
    """
    Location label for a company card

    Single-office companies show their location. Multi-office companies show
    one city plus a count of the rest, preferring the city being browsed.

    Examples:
        ["Sydney", "Melbourne"], current_city="melbourne" -> "Melbourne + 1"
        ["Sydney", "Melbourne"], current_city=None -> "Sydney + 1"
    """
    locations = company.all_locations
    if len(locations) <= 1:
        return company.location

    others = len(locations) - 1
    if current_city:
        wanted = current_city.lower()
        for loc in locations:
            if loc.lower() == wanted:
                return f"{loc} + {others}"

    return f"{locations[0]} + {others}"


def select_work_type_display(company: Company) -> str:
    """Work type label for a company card: primary type plus a count of the rest"""
    work_types = company.all_work_types
    if len(work_types) <= 1:
        return company.work_type
    return f"{company.work_type} + {len(work_types) - 1}"


def all_locations_text(company: Company) -> str:
    """Tooltip text listing every location"""
    if len(company.all_locations) > 1:
        return ", ".join(company.all_locations)
    return company.location


def all_work_types_text(company: Company) -> str:
    """Tooltip text listing every work arrangement"""
    if len(company.all_work_types) > 1:
        return ", ".join(company.all_work_types)
    return company.work_type


def capitalize_work_type(work_type: str) -> str:
    """'on-site' -> 'On-site', 'REMOTE' -> 'Remote'"""
    return work_type[:1].upper() + work_type[1:].lower()


def promote_work_type(company: Company, arrangement: str) -> Company:
    """
    Copy of `company` with `arrangement` as its primary work type

    The arrangement is moved to the front of all_work_types; the remaining
    types keep their order. Used by the remote view so cards read "Remote"
    first.
    """
    wanted = arrangement.lower()
    rest = tuple(work_type for work_type in company.all_work_types if work_type.lower() != wanted)
    return company.with_work_types(arrangement, (arrangement,) + rest)
