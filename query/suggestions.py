"""
Autocomplete suggestions for the doctor name search box.
"""

from itertools import islice
from typing import Iterable, List

from data_handling.doctors import Doctor

MAX_SUGGESTIONS = 3


def suggest(doctors: Iterable[Doctor], search_text: str, limit: int = MAX_SUGGESTIONS) -> List[Doctor]:
    """
    Return up to `limit` doctors whose name contains `search_text`.

    Matching is a case-insensitive substring test in dataset order; there is
    no ranking beyond that. Blank search text yields no suggestions.
    """
    needle = (search_text or '').strip()
    if not needle:
        return []

    matches = (doctor for doctor in doctors if doctor.matches_name(needle))
    return list(islice(matches, limit))
