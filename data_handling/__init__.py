"""
Data handling module for Doctor Finder.

This module provides the doctor record model, field normalization for the
remote feed, and the fixed specialty vocabulary.
"""

from .doctors import (
    Doctor,
    format_fees,
    load_doctors,
    normalize_amount,
    normalize_specialties,
)
from .specialties import SPECIALTIES, is_known_specialty, specialty_slug

__all__ = [
    # Doctor records
    'Doctor',
    'format_fees',
    'load_doctors',
    'normalize_amount',
    'normalize_specialties',

    # Specialty vocabulary
    'SPECIALTIES',
    'is_known_specialty',
    'specialty_slug',
]
