"""
State models for the doctor listing query.

This package provides the immutable query state and the enumerations for
the consultation mode filter and sort order.
"""

from .models import ConsultFilter, QueryState, SortKey, unique_specialties

__all__ = [
    'ConsultFilter',
    'QueryState',
    'SortKey',
    'unique_specialties'
]
