"""
Query engine for the doctor listing.

This module owns the interactive query state (search text, consultation
mode, specialties, sort order), derives the visible list and autocomplete
suggestions from it, and keeps it synchronized with URL query parameters.
"""

from .state.models import ConsultFilter, QueryState, SortKey

from .parameters import (
    ParameterStore,
    read_query_state,
    write_query_state
)

from .pipeline import apply_query, normalize_frame
from .suggestions import MAX_SUGGESTIONS, suggest
from .controller import QueryStateController

__all__ = [
    # State
    'ConsultFilter',
    'QueryState',
    'SortKey',

    # URL parameters
    'ParameterStore',
    'read_query_state',
    'write_query_state',

    # Derivations
    'apply_query',
    'normalize_frame',
    'suggest',
    'MAX_SUGGESTIONS',

    # Controller
    'QueryStateController',
]

# Version info
__version__ = "1.0.0"
