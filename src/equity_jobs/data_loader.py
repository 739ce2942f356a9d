"""
Company dataset loading

The dataset is a JSON array of company records loaded once at startup.
Each record is validated through CompanyRecord; bad records are skipped with a
warning so one typo doesn't take the whole site down, but a missing or
malformed file is fatal.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from equity_jobs.config import get_settings
from equity_jobs.models.company import Company
from equity_jobs.models.pydantic_models import CompanyRecord
from equity_jobs.utils.company_matcher import CompanyMatcher

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """Dataset file is missing or not a JSON array of records"""


@dataclass(frozen=True)
class DirectoryData:
    """Everything loaded from disk for the site"""

    companies: tuple[Company, ...]
    logo_mapping: dict[str, str]


def _read_json(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def parse_companies(records: list, matcher: CompanyMatcher | None = None) -> tuple[Company, ...]:
    """
    Validate raw records and build the immutable collection

    Args:
        records: Raw dicts from the dataset
        matcher: Duplicate detector (default: 90% threshold)

    Returns:
        Companies in dataset order, invalid records and repeated ids dropped
    """
    companies: list[Company] = []
    seen_ids: set[str] = set()

    for index, raw in enumerate(records):
        if not isinstance(raw, dict):
            logger.warning(f"Skipping record {index}: expected an object, got {type(raw).__name__}")
            continue

        try:
            record = CompanyRecord.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                f"Skipping record {index} ({raw.get('name', 'unnamed')}): "
                f"{e.error_count()} validation error(s)"
            )
            logger.debug(str(e))
            continue

        if record.id in seen_ids:
            logger.warning(f"Skipping record {index} ({record.name}): duplicate id '{record.id}'")
            continue

        seen_ids.add(record.id)
        companies.append(record.to_company())

    matcher = matcher or CompanyMatcher()
    for duplicate, original in matcher.find_probable_duplicates(companies):
        logger.warning(
            f"Possible duplicate company: '{duplicate.name}' ({duplicate.website}) "
            f"looks like '{original.name}' ({original.website})"
        )

    return tuple(companies)


def load_companies(path: str | Path) -> tuple[Company, ...]:
    """
    Load the company dataset from a JSON file

    Raises:
        DatasetError: If the file is missing, unreadable or not a JSON array
    """
    path = Path(path)
    try:
        data = _read_json(path)
    except FileNotFoundError as e:
        raise DatasetError(f"Company dataset not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Company dataset is not valid JSON: {path}: {e}") from e

    if not isinstance(data, list):
        raise DatasetError(f"Company dataset must be a JSON array: {path}")

    companies = parse_companies(data)
    logger.info(f"Loaded {len(companies)} companies from {path}")
    return companies


def load_logo_mapping(path: str | Path) -> dict[str, str]:
    """Load the website -> logo path mapping; missing file means no local logos"""
    path = Path(path)
    if not path.exists():
        logger.warning(f"Logo mapping not found: {path} - placeholders will be used")
        return {}

    try:
        data = _read_json(path)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Logo mapping is not valid JSON: {path}: {e}") from e

    if not isinstance(data, dict):
        raise DatasetError(f"Logo mapping must be a JSON object: {path}")

    return {str(website): str(logo) for website, logo in data.items()}


# Loaded once per process
_data: DirectoryData | None = None


def get_directory_data() -> DirectoryData:
    """Get or load the dataset and logo mapping using the configured paths"""
    global _data
    if _data is None:
        settings = get_settings()
        _data = DirectoryData(
            companies=load_companies(settings.companies_path),
            logo_mapping=load_logo_mapping(settings.logo_mapping_path),
        )
    return _data


def reset_directory_data() -> None:
    """Forget the loaded dataset (tests, or after regenerating the JSON)"""
    global _data
    _data = None
