"""Models package

Provides the data models for the equity directory.
"""

from .company import Company
from .pydantic_models import CompanyRecord

__all__ = ["Company", "CompanyRecord"]
