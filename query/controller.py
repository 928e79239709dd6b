"""
Query-state controller for the doctor listing.

The controller owns the interactive query state and is the only writer of
it. Each user intent is one method call that updates the state, re-derives
the visible list and re-serializes the state into the parameter store
before returning, so callers never observe the list and the URL disagreeing.

Typical use:

    params = ParameterStore.from_query_string('?consultType=Video+Consult')
    controller = QueryStateController(params, doctors)
    controller.initialize()
    controller.toggle_sort_key('fees')
    params.to_query_string()  # '?consultType=Video+Consult&sortBy=fees'
"""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from data_handling.doctors import Doctor
from data_handling.specialties import is_known_specialty
from .parameters import SEARCH_KEY, ParameterStore, read_query_state, write_query_state
from .pipeline import apply_query
from .state.models import ConsultFilter, QueryState, SortKey
from .suggestions import suggest

logger = logging.getLogger(__name__)


class QueryStateController:
    """
    Single source of truth for search text, filters and sort order.

    The state is seeded from the parameter store exactly once (initialize)
    and afterwards changes only through the operation methods. The visible
    list and suggestions are derived values owned by the controller and
    exposed read-only as tuples.
    """

    def __init__(self, params: ParameterStore, doctors: Iterable[Doctor] = ()):
        self.params = params
        self._dataset: Tuple[Doctor, ...] = tuple(doctors)
        self._state = QueryState()
        self._visible: Tuple[Doctor, ...] = ()
        self._initialized = False
        self._suggestion_cache: Optional[Tuple[str, Tuple[Doctor, ...]]] = None

    # Read-only views

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def visible(self) -> Tuple[Doctor, ...]:
        return self._visible

    @property
    def dataset(self) -> Tuple[Doctor, ...]:
        return self._dataset

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def suggestions(self) -> Tuple[Doctor, ...]:
        """Autocomplete candidates for the current search text, recomputed lazily."""
        search_text = self._state.search_text
        if self._suggestion_cache is None or self._suggestion_cache[0] != search_text:
            self._suggestion_cache = (search_text, tuple(suggest(self._dataset, search_text)))
        return self._suggestion_cache[1]

    # Lifecycle

    def initialize(self) -> QueryState:
        """
        Seed the state from the parameter store.

        Runs once; later calls leave the state untouched. Core keys are
        rewritten canonically so ignored values do not linger in the URL.
        """
        if self._initialized:
            logger.debug("Query state already initialized; ignoring repeated startup import")
            return self._state

        self._initialized = True
        self._state = read_query_state(self.params)
        write_query_state(self.params, self._state)
        self._visible = self._derive()

        logger.info(f"Query state initialized from parameters: {self._state.to_dict()}")
        return self._state

    def load_dataset(self, doctors: Iterable[Doctor]) -> None:
        """
        Deliver the raw dataset.

        The dataset is immutable for the session: a second delivery is
        ignored. The parameter store is not re-read.
        """
        if self._dataset:
            logger.warning("Dataset already loaded; ignoring new delivery")
            return

        self._dataset = tuple(doctors)
        self._suggestion_cache = None
        self._visible = self._derive()
        logger.info(f"Dataset loaded with {len(self._dataset)} doctors")

    # Operations

    def set_search_text(self, term: Optional[str]) -> None:
        """
        Update the search text as the user types.

        Blank text is the "show all" state: the search key is removed from
        the store and the visible list is reset to the whole dataset without
        running the pipeline.
        """
        term = term or ''
        self._state = self._state.with_search_text(term)

        if not term.strip():
            self.params.delete(SEARCH_KEY)
            self._visible = self._dataset
            logger.debug("Search cleared; showing all doctors")

    def commit_search(self, term: Optional[str]) -> None:
        """Apply `term` as the effective search (enter key or suggestion pick)."""
        term = term or ''
        logger.debug(f"Committing search: {term!r}")
        self._apply(self._state.with_search_text(term))

    def toggle_consult_filter(self, mode: Any) -> None:
        """Select a consultation mode; selecting the active mode clears it."""
        consult_filter = ConsultFilter.parse(mode)
        if consult_filter is None:
            logger.warning(f"Ignoring unknown consultation mode: {mode!r}")
            return
        self._apply(self._state.with_consult_toggled(consult_filter))

    def toggle_specialty(self, name: Any) -> None:
        """Add a specialty to the filter, or remove it when already selected."""
        if not isinstance(name, str) or not name:
            logger.warning(f"Ignoring invalid specialty: {name!r}")
            return
        if not is_known_specialty(name):
            logger.debug(f"Specialty {name!r} is outside the standard vocabulary")
        self._apply(self._state.with_specialty_toggled(name))

    def toggle_sort_key(self, key: Any) -> None:
        """Select a sort order; selecting the active order restores dataset order."""
        sort_key = SortKey.parse(key)
        if sort_key is None:
            logger.warning(f"Ignoring unknown sort key: {key!r}")
            return
        self._apply(self._state.with_sort_toggled(sort_key))

    # Session snapshots

    def snapshot(self) -> Dict[str, Any]:
        """Serializable view of the controller for storage in dcc.Store."""
        return {
            'initialized': self._initialized,
            'state': self._state.to_dict(),
            'visible_ids': [doctor.id for doctor in self._visible],
        }

    @classmethod
    def restore(cls, params: ParameterStore, doctors: Iterable[Doctor],
                snapshot: Optional[Dict[str, Any]]) -> 'QueryStateController':
        """
        Rehydrate a controller from snapshot() output.

        Restoring never re-reads the parameter store. Visible ids missing
        from the dataset are dropped.
        """
        controller = cls(params, doctors)
        if not snapshot:
            return controller

        controller._initialized = bool(snapshot.get('initialized', True))
        controller._state = QueryState.from_dict(snapshot.get('state'))

        by_id = {doctor.id: doctor for doctor in controller._dataset}
        controller._visible = tuple(
            by_id[doctor_id] for doctor_id in snapshot.get('visible_ids') or [] if doctor_id in by_id
        )
        return controller

    # Internals

    def _derive(self) -> Tuple[Doctor, ...]:
        if not self._dataset:
            return ()
        return tuple(apply_query(self._dataset, self._state))

    def _apply(self, state: QueryState) -> None:
        """Install `state`, re-derive the visible list and sync the store."""
        self._state = state
        self._visible = self._derive()
        write_query_state(self.params, state)
        logger.debug(f"Query state updated: {state.to_dict()} ({len(self._visible)} visible)")
