"""
URL query parameter store for shareable listing links.

ParameterStore is a plain ordered key/multi-value mapping with the same
semantics as a browser's URLSearchParams. The query engine reads it once
on startup and rewrites its core keys after every state change, so the
link in the address bar always reproduces the current view.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from .state.models import ConsultFilter, QueryState, SortKey, unique_specialties

logger = logging.getLogger(__name__)

SEARCH_KEY = 'search'
CONSULT_TYPE_KEY = 'consultType'
SPECIALTY_KEY = 'specialty'
SORT_BY_KEY = 'sortBy'


class ParameterStore:
    """Ordered string key to one-or-many string values mapping."""

    def __init__(self, items: Optional[Iterable[Tuple[str, str]]] = None):
        self._items: List[Tuple[str, str]] = []
        if items:
            self.replace(items)

    @classmethod
    def from_query_string(cls, query_string: Optional[str]) -> 'ParameterStore':
        """Parse `?a=1&b=2` (leading '?' optional); blank values are kept."""
        if not query_string:
            return cls()
        return cls(parse_qsl(query_string.lstrip('?'), keep_blank_values=True))

    def to_query_string(self) -> str:
        """Render as `?a=1&b=2`, or '' when empty."""
        if not self._items:
            return ''
        return '?' + urlencode(self._items)

    def get(self, key: str) -> Optional[str]:
        """First value stored under `key`, or None."""
        for item_key, value in self._items:
            if item_key == key:
                return value
        return None

    def get_all(self, key: str) -> List[str]:
        return [value for item_key, value in self._items if item_key == key]

    def set(self, key: str, value: str) -> None:
        """Replace every value of `key` with a single value, keeping its position."""
        updated = []
        placed = False
        for item_key, item_value in self._items:
            if item_key != key:
                updated.append((item_key, item_value))
            elif not placed:
                updated.append((key, str(value)))
                placed = True
        if not placed:
            updated.append((key, str(value)))
        self._items = updated

    def append(self, key: str, value: str) -> None:
        self._items.append((key, str(value)))

    def delete(self, key: str) -> None:
        self._items = [(k, v) for k, v in self._items if k != key]

    def replace(self, items: Iterable[Tuple[str, str]]) -> None:
        """Swap the whole contents for `items`."""
        self._items = [(str(k), str(v)) for k, v in items]

    def keys(self) -> List[str]:
        """Distinct keys in first-seen order."""
        seen = []
        for key, _ in self._items:
            if key not in seen:
                seen.append(key)
        return seen

    def items(self) -> List[Tuple[str, str]]:
        return list(self._items)

    def copy(self) -> 'ParameterStore':
        return ParameterStore(self._items)

    def __contains__(self, key: object) -> bool:
        return any(item_key == key for item_key, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterStore):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"ParameterStore({self._items!r})"


def read_query_state(store: ParameterStore) -> QueryState:
    """
    Build a QueryState from the store's core keys.

    Absent keys map to the empty defaults. Unknown consultType/sortBy
    values are ignored and behave as if absent.
    """
    consult_value = store.get(CONSULT_TYPE_KEY)
    consult_filter = ConsultFilter.parse(consult_value)
    if consult_value is not None and consult_filter is None:
        logger.debug(f"Ignoring unknown {CONSULT_TYPE_KEY} value: {consult_value!r}")

    sort_value = store.get(SORT_BY_KEY)
    sort_key = SortKey.parse(sort_value)
    if sort_value is not None and sort_key is None:
        logger.debug(f"Ignoring unknown {SORT_BY_KEY} value: {sort_value!r}")

    return QueryState(
        search_text=store.get(SEARCH_KEY) or '',
        consult_filter=consult_filter,
        specialty_filter=unique_specialties(store.get_all(SPECIALTY_KEY)),
        sort_key=sort_key,
    )


def write_query_state(store: ParameterStore, state: QueryState) -> None:
    """
    Fully re-serialize `state` into the store's core keys.

    The specialty key is deleted and re-appended, never merged. Keys the
    query engine does not own are left untouched.
    """
    if state.has_search:
        store.set(SEARCH_KEY, state.search_text)
    else:
        store.delete(SEARCH_KEY)

    if state.consult_filter:
        store.set(CONSULT_TYPE_KEY, state.consult_filter.value)
    else:
        store.delete(CONSULT_TYPE_KEY)

    store.delete(SPECIALTY_KEY)
    for specialty in state.specialty_filter:
        store.append(SPECIALTY_KEY, specialty)

    if state.sort_key:
        store.set(SORT_BY_KEY, state.sort_key.value)
    else:
        store.delete(SORT_BY_KEY)
