"""
Pytest configuration for unit tests
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from factories import make_company  # noqa: E402

from equity_jobs.models.company import Company  # noqa: E402


@pytest.fixture
def sample_companies() -> tuple[Company, ...]:
    """Small directory covering capitals, regional cities and remote work"""
    return (
        make_company("Zeta", location="Perth", work_type="On-site"),
        make_company(
            "Acme",
            location="Sydney",
            all_locations=["Sydney", "Melbourne"],
            all_work_types=["Hybrid", "Remote"],
        ),
        make_company("beacon", location="Geelong", work_type="Remote"),
        make_company(
            "Coastal",
            location="Newcastle",
            all_locations=["Newcastle", "Brisbane"],
        ),
        make_company("Delta", location="Hobart", work_type="Hybrid"),
    )


@pytest.fixture
def raw_records() -> list[dict]:
    """camelCase records as they appear in companies.json"""
    return [
        {
            "id": "1",
            "name": "Canva",
            "website": "https://www.canva.com/",
            "description": "Design platform",
            "year": "2012",
            "location": "Sydney",
            "workType": "Hybrid",
            "allLocations": ["Sydney", "Melbourne"],
            "allWorkTypes": ["Hybrid", "Remote"],
        },
        {
            "id": "2",
            "name": "Sherlok",
            "website": "sherlok.com.au",
            "description": "Trust account auditing",
            "year": "2020",
            "location": "Hobart",
            "workType": "Remote",
        },
    ]
