"""
Runtime settings

Read from the environment (a local .env file is loaded first):
- COMPANIES_DATA_PATH: dataset JSON (default data/companies.json)
- LOGO_MAPPING_PATH: website -> logo path JSON (default data/logo-mapping.json)
- LOG_LEVEL: logging level name for the console viewer (default INFO)
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_COMPANIES_PATH = "data/companies.json"
DEFAULT_LOGO_MAPPING_PATH = "data/logo-mapping.json"


@dataclass(frozen=True)
class Settings:
    companies_path: str
    logo_mapping_path: str
    log_level: str


def get_settings() -> Settings:
    """Build settings from the environment"""
    load_dotenv()

    return Settings(
        companies_path=os.getenv("COMPANIES_DATA_PATH", DEFAULT_COMPANIES_PATH),
        logo_mapping_path=os.getenv("LOGO_MAPPING_PATH", DEFAULT_LOGO_MAPPING_PATH),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
