"""
Logo marquee selection

Picks the two rows of logos scrolled across the home page: a few hand-picked
companies always lead the top row, a blocklist keeps poor logos out, and the
rest are shuffled in.
"""

import random
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from equity_jobs.models.company import Company

PLACEHOLDER_LOGO = "/logos/placeholder.svg"

# Websites always shown in the top row
DEFAULT_WHITELIST: tuple[str, ...] = (
    "eucalyptus.health",
    "canva.com",
    "deputy.com",
    "linktr.ee",
)

# Websites whose logos don't render well on the marquee
DEFAULT_EXCLUDED: tuple[str, ...] = (
    "airshr.com",
    "black.ai",
    "cxnpl.com",
    "dataweavers.com",
    "gomarloo.com",
    "sherlok.com.au",
    "vexev.com",
    "inventia.life",
)


@dataclass(frozen=True)
class MarqueeRows:
    top: tuple[Company, ...]
    bottom: tuple[Company, ...]


def resolve_logo_path(website: str, logo_mapping: Mapping[str, str]) -> str:
    """Local logo path for a website, or the placeholder if none was fetched"""
    return logo_mapping.get(website) or PLACEHOLDER_LOGO


def select_marquee_rows(
    companies: Sequence[Company],
    whitelist: Iterable[str] = DEFAULT_WHITELIST,
    excluded: Iterable[str] = DEFAULT_EXCLUDED,
    rng: random.Random | None = None,
    top_row_count: int = 20,
    bottom_row_count: int = 20,
) -> MarqueeRows:
    """
    Choose the companies for both marquee rows

    Args:
        companies: Candidate companies
        whitelist: Websites that always lead the top row
        excluded: Websites to leave out (whitelist wins if both)
        rng: Random source; pass a seeded Random for repeatable output
        top_row_count: Logos in the top row, whitelisted ones included
        bottom_row_count: Logos in the bottom row

    Returns:
        MarqueeRows. The input is not modified.
    """
    whitelisted = set(whitelist)
    blocked = set(excluded)
    rng = rng or random.Random()

    eligible = [c for c in companies if c.website in whitelisted or c.website not in blocked]
    leaders = [c for c in eligible if c.website in whitelisted]
    others = [c for c in eligible if c.website not in whitelisted]
    rng.shuffle(others)

    fill = max(0, top_row_count - len(leaders))
    top = tuple(leaders + others[:fill])
    bottom = tuple(others[fill : fill + bottom_row_count])
    return MarqueeRows(top=top, bottom=bottom)
