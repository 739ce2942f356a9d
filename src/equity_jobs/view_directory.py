"""
View the company directory from the command line

Examples:
    python -m equity_jobs.view_directory              # home page
    python -m equity_jobs.view_directory melbourne
    python -m equity_jobs.view_directory remote --limit 10
    python -m equity_jobs.view_directory --marquee
"""

import argparse
import logging
import random
import sys

from equity_jobs.config import get_settings
from equity_jobs.data_loader import DatasetError, load_companies, load_logo_mapping
from equity_jobs.marquee import resolve_logo_path, select_marquee_rows
from equity_jobs.views import (
    DirectoryView,
    UnknownViewError,
    build_view,
    navigation_links,
    parse_view_path,
    pluralize,
)

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1"""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def print_view(view: DirectoryView, limit: int | None = None) -> None:
    """Print a view's heading, stats and company cards"""
    stats = view.stats

    print("=" * 70)
    print(view.title.upper())
    print("=" * 70)
    print(
        f"{pluralize(stats.companies_count, 'company', 'companies')} | "
        f"{pluralize(stats.cities_count, 'city', 'cities')} | "
        f"{pluralize(stats.work_arrangements_count, 'work arrangement', 'work arrangements')}"
    )

    cards = view.cards()
    if not cards:
        print("\nNo companies in this view")
        return

    shown = cards[:limit] if limit else cards
    print()
    for i, card in enumerate(shown, 1):
        print(f"{i}. {card.name} ({card.website})")
        if card.description:
            print(f"   {card.description}")
        print(f"   Founded: {card.year or 'Unknown'}")
        location = card.location_display
        if card.has_multiple_locations:
            location += f"  [{card.all_locations_text}]"
        print(f"   Location: {location}")
        work_type = card.work_type_display
        if card.has_multiple_work_types:
            work_type += f"  [{card.all_work_types_text}]"
        print(f"   Work: {work_type}")
        print()

    if len(shown) < len(cards):
        print(f"... and {len(cards) - len(shown)} more")

    links = navigation_links(view.context)
    print("Browse: " + ", ".join(f"{link.label} ({link.path})" for link in links))


def print_marquee(companies, logo_mapping: dict[str, str], seed: int | None = None) -> None:
    """Print the logo marquee rows"""
    rows = select_marquee_rows(companies, rng=random.Random(seed))
    for label, row in (("Top row", rows.top), ("Bottom row", rows.bottom)):
        print(f"\n{label} ({pluralize(len(row), 'logo', 'logos')}):")
        for company in row:
            print(f"  {company.name}: {resolve_logo_path(company.website, logo_mapping)}")


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="View the equity company directory")
    parser.add_argument(
        "view",
        nargs="?",
        default="",
        help="City slug (e.g. 'sydney'), 'remote' or 'other'. Omit for all companies",
    )
    parser.add_argument(
        "--data",
        default=settings.companies_path,
        help=f"Path to companies JSON (default: {settings.companies_path})",
    )
    parser.add_argument(
        "--limit", type=_positive_int, default=None, help="Show at most N companies"
    )
    parser.add_argument("--marquee", action="store_true", help="Show logo marquee rows instead")
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed for --marquee")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        context = parse_view_path(args.view)
        companies = load_companies(args.data)
        logo_mapping = load_logo_mapping(settings.logo_mapping_path) if args.marquee else {}
    except (UnknownViewError, DatasetError) as e:
        logger.error(str(e))
        return 1

    if args.marquee:
        print_marquee(companies, logo_mapping, args.seed)
        return 0

    print_view(build_view(companies, context), limit=args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
