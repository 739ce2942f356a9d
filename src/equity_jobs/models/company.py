"""
Company data model for the equity directory
Every page, card and marquee reads Company objects built from the static dataset
"""

from dataclasses import dataclass, field, replace


def _as_tuple(values) -> tuple[str, ...]:
    """A single string is one entry, not a sequence of characters"""
    if isinstance(values, str):
        return (values,)
    return tuple(values or ())


@dataclass(frozen=True)
class Company:
    """
    Immutable company record

    all_locations / all_work_types may be empty when the source record did not
    carry them. Use `locations` / `work_types` for filtering, which fall back to
    the primary value.
    """

    id: str
    name: str
    website: str
    location: str
    work_type: str
    description: str = ""
    year: str = ""
    all_locations: tuple[str, ...] = field(default_factory=tuple)
    all_work_types: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept lists from callers but store tuples so the record stays hashable
        object.__setattr__(self, "all_locations", _as_tuple(self.all_locations))
        object.__setattr__(self, "all_work_types", _as_tuple(self.all_work_types))

    @property
    def locations(self) -> tuple[str, ...]:
        """Every city the company operates in (primary location if none listed)"""
        return self.all_locations or (self.location,)

    @property
    def work_types(self) -> tuple[str, ...]:
        """Every work arrangement offered (primary work type if none listed)"""
        return self.all_work_types or (self.work_type,)

    def with_work_types(self, work_type: str, all_work_types: tuple[str, ...]) -> "Company":
        """Return a copy with a different primary work type and arrangement list"""
        return replace(self, work_type=work_type, all_work_types=all_work_types)
