"""
Pydantic Models for Company Dataset Validation

This module provides type-safe validation for the raw company records in
companies.json using Pydantic v2. Records are validated on load so that a
malformed entry is reported and skipped instead of breaking a page build.

Key Validations:
- Required fields are present and non-empty (id, name, location, workType)
- Website is normalized to a bare domain (no protocol, www or trailing slash)
- allLocations / allWorkTypes entries are trimmed, blanks removed
"""

import re

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from equity_jobs.models.company import Company


def normalize_website(value: str) -> str:
    """
    Reduce a website to its bare domain

    Examples:
        "https://www.canva.com/" -> "canva.com"
        "http://linktr.ee" -> "linktr.ee"
    """
    website = value.strip()
    website = re.sub(r"^https?://", "", website, flags=re.IGNORECASE)
    website = re.sub(r"^www\.", "", website, flags=re.IGNORECASE)
    return website.rstrip("/")


class CompanyRecord(BaseModel):
    """
    Raw company record as stored in companies.json

    Field names follow the dataset's camelCase keys through aliases; the
    snake_case names can be used when constructing directly.

    Raises:
        ValidationError: If any field fails validation
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Unique, stable identifier")
    name: str = Field(..., min_length=1, description="Display name")
    website: str = Field(default="", description="Bare domain")
    description: str = Field(default="", description="One-line description")
    year: str = Field(default="", description="Founding year (free text)")
    location: str = Field(..., min_length=1, description="Primary city")
    work_type: str = Field(
        ..., alias="workType", min_length=1, description="Primary work arrangement"
    )
    all_locations: list[str] | None = Field(
        default=None, alias="allLocations", description="Every city the company operates in"
    )
    all_work_types: list[str] | None = Field(
        default=None, alias="allWorkTypes", description="Every work arrangement offered"
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Numeric ids from older CSV exports are accepted as strings"""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("id", "name", "location", "work_type")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure required text is not just whitespace"""
        if not v.strip():
            raise ValueError("cannot be empty or whitespace")
        return v.strip()

    @field_validator("description", "year", "website", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        if v is None:
            return ""
        return v

    @field_validator("website")
    @classmethod
    def validate_website(cls, v: str) -> str:
        return normalize_website(v)

    @field_validator("all_locations", "all_work_types")
    @classmethod
    def clean_entries(cls, v: list[str] | None) -> list[str] | None:
        """Trim entries and drop blanks; an all-blank list counts as absent"""
        if v is None:
            return None
        cleaned = [entry.strip() for entry in v if entry and entry.strip()]
        return cleaned or None

    def to_company(self) -> Company:
        """Convert the validated record into an immutable Company"""
        return Company(
            id=self.id,
            name=self.name,
            website=self.website,
            description=self.description,
            year=self.year,
            location=self.location,
            work_type=self.work_type,
            all_locations=tuple(self.all_locations or ()),
            all_work_types=tuple(self.all_work_types or ()),
        )
