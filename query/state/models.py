"""
State models for the doctor listing query.

The query state is the single source of truth for what the user asked
for: search text, consultation mode, selected specialties and sort order.
It is immutable; every transition produces a new instance.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple


class ConsultFilter(str, Enum):
    """Consultation mode filter; values are the `consultType` URL values."""
    VIDEO_CONSULT = 'Video Consult'
    IN_CLINIC = 'In Clinic'

    @classmethod
    def parse(cls, value: Any) -> Optional['ConsultFilter']:
        """Return the matching member, or None for absent/unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class SortKey(str, Enum):
    """Sort order; values are the `sortBy` URL values."""
    FEES = 'fees'              # fees, low to high
    EXPERIENCE = 'experience'  # experience, high to low

    @classmethod
    def parse(cls, value: Any) -> Optional['SortKey']:
        """Return the matching member, or None for absent/unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def unique_specialties(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """Drop duplicates and non-strings while keeping first-seen order."""
    seen = []
    for value in values or ():
        if isinstance(value, str) and value not in seen:
            seen.append(value)
    return tuple(seen)


@dataclass(frozen=True)
class QueryState:
    """
    Interactive query state.

    specialty_filter has set semantics (membership is what matters) but
    keeps insertion order so controls and URLs stay stable.
    """
    search_text: str = ''
    consult_filter: Optional[ConsultFilter] = None
    specialty_filter: Tuple[str, ...] = field(default_factory=tuple)
    sort_key: Optional[SortKey] = None

    @property
    def has_search(self) -> bool:
        return bool(self.search_text.strip())

    def with_search_text(self, term: str) -> 'QueryState':
        return replace(self, search_text=term)

    def with_consult_toggled(self, mode: ConsultFilter) -> 'QueryState':
        """Select `mode`, or clear the filter when it is already active."""
        return replace(self, consult_filter=None if self.consult_filter == mode else mode)

    def with_sort_toggled(self, key: SortKey) -> 'QueryState':
        """Select `key`, or clear sorting when it is already active."""
        return replace(self, sort_key=None if self.sort_key == key else key)

    def with_specialty_toggled(self, name: str) -> 'QueryState':
        """Add `name` to the specialty filter, or remove it when present."""
        if name in self.specialty_filter:
            selected = tuple(s for s in self.specialty_filter if s != name)
        else:
            selected = self.specialty_filter + (name,)
        return replace(self, specialty_filter=selected)

    def to_dict(self) -> Dict[str, Any]:
        """Convert state to dictionary for storage in dcc.Store."""
        return {
            'search_text': self.search_text,
            'consult_filter': self.consult_filter.value if self.consult_filter else None,
            'specialty_filter': list(self.specialty_filter),
            'sort_key': self.sort_key.value if self.sort_key else None,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'QueryState':
        """Create state instance from dictionary."""
        if not data:
            return cls()

        search_text = data.get('search_text')
        return cls(
            search_text=search_text if isinstance(search_text, str) else '',
            consult_filter=ConsultFilter.parse(data.get('consult_filter')),
            specialty_filter=unique_specialties(data.get('specialty_filter')),
            sort_key=SortKey.parse(data.get('sort_key')),
        )
