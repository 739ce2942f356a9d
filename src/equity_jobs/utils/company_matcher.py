"""
Company Matcher - Fuzzy matching to catch duplicate directory entries

Uses fuzzy string matching to flag companies that appear in the dataset more
than once under a slightly different name or website (e.g. "Canva" and
"Canva Pty Ltd", or "canva.com" and "www.canva.com/").
"""

import logging
import re
from urllib.parse import urlparse

from rapidfuzz import fuzz

from equity_jobs.models.company import Company

logger = logging.getLogger(__name__)


class CompanyMatcher:
    """Fuzzy matching for company names and websites"""

    def __init__(self, similarity_threshold: float = 90.0):
        """
        Initialize company matcher

        Args:
            similarity_threshold: Minimum similarity score (0-100) to consider a match.
                                 Default is 90 (very strict)
        """
        self.similarity_threshold = similarity_threshold

    def find_match(self, candidate: Company, existing_companies: list[Company]) -> Company | None:
        """
        Find if candidate company matches any existing company

        Returns:
            Matching company if found, None otherwise
        """
        norm_candidate_name = self._normalize_company_name(candidate.name)
        norm_candidate_url = self._normalize_url(candidate.website)

        for existing in existing_companies:
            # Website match first (more reliable)
            norm_existing_url = self._normalize_url(existing.website)
            if norm_candidate_url and norm_existing_url:
                url_similarity = fuzz.ratio(norm_candidate_url, norm_existing_url)
                if url_similarity >= self.similarity_threshold:
                    logger.debug(
                        f"Website similarity {url_similarity:.1f}%: "
                        f"{candidate.website} ≈ {existing.website}"
                    )
                    return existing

            norm_existing_name = self._normalize_company_name(existing.name)
            if not norm_candidate_name or not norm_existing_name:
                continue

            name_similarity = fuzz.ratio(norm_candidate_name, norm_existing_name)
            if name_similarity >= self.similarity_threshold:
                logger.debug(
                    f"Name similarity {name_similarity:.1f}%: {candidate.name} ≈ {existing.name}"
                )
                return existing

        return None

    def find_probable_duplicates(
        self, companies: list[Company]
    ) -> list[tuple[Company, Company]]:
        """
        Pair each later company with the earlier entry it appears to duplicate

        Returns:
            List of (duplicate, original) pairs, in dataset order
        """
        seen: list[Company] = []
        duplicates: list[tuple[Company, Company]] = []

        for company in companies:
            match = self.find_match(company, seen)
            if match:
                duplicates.append((company, match))
            seen.append(company)

        return duplicates

    def _normalize_company_name(self, name: str) -> str:
        """
        Normalize company name for comparison

        Examples:
            "Canva Pty Ltd" -> "canva"
            "Eucalyptus, Inc." -> "eucalyptus"
        """
        if not name:
            return ""

        normalized = name.lower()

        suffixes = [
            r"\bpty\.?",
            r"\bltd\.?",
            r"\binc\.?",
            r"\bllc\.?",
            r"\bcorp\.?",
            r"\bcorporation",
            r"\bcompany",
            r"\blimited",
        ]
        for suffix in suffixes:
            normalized = re.sub(suffix, "", normalized, flags=re.IGNORECASE)

        # Remove punctuation except spaces
        normalized = re.sub(r"[^\w\s]", "", normalized)

        return " ".join(normalized.split())

    def _normalize_url(self, url: str) -> str:
        """
        Normalize website for comparison

        Examples:
            "https://www.canva.com/" -> "canva.com"
            "canva.com/au?ref=x" -> "canva.com/au"
        """
        if not url:
            return ""

        value = url.strip().lower()
        if "://" not in value:
            # Bare domains parse as a path without this
            value = f"//{value}"

        parsed = urlparse(value)
        domain = parsed.netloc
        if domain.startswith("www."):
            domain = domain[4:]

        return f"{domain}{parsed.path.rstrip('/')}"
