"""
Filter and sort pipeline for the doctor listing.

apply_query is a pure function of (dataset, QueryState): the dataset is
loaded into a pandas frame of normalized columns, narrowed with boolean
masks and, when a sort key is active, stably sorted. The original
sequence is never mutated.
"""

import logging
from typing import Iterable, List

import pandas as pd

from data_handling.doctors import Doctor
from .state.models import ConsultFilter, QueryState, SortKey

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ['name', 'video', 'specialties', 'fee_amount', 'experience_years']


def normalize_frame(doctors: Iterable[Doctor]) -> pd.DataFrame:
    """
    Build a frame with one row per doctor, indexed by dataset position.

    Columns:
        name: lower-cased name for case-insensitive matching
        video: True when video consultation is offered
        specialties: tuple of names, or None for an unrecognized field shape
        fee_amount / experience_years: normalized integers (0 when unparsable)
    """
    doctors = list(doctors)
    return pd.DataFrame({
        'name': pd.Series([d.name.lower() for d in doctors], dtype=object),
        'video': pd.Series([d.supports_video_consult for d in doctors], dtype=bool),
        'specialties': pd.Series([d.specialties for d in doctors], dtype=object),
        'fee_amount': pd.Series([d.fee_amount for d in doctors]),
        'experience_years': pd.Series([d.experience_years for d in doctors]),
    }, columns=FRAME_COLUMNS)


def _specialty_mask(frame: pd.DataFrame, selected: Iterable[str]) -> pd.Series:
    selected = set(selected)
    return frame['specialties'].map(
        lambda specialties: specialties is not None and not selected.isdisjoint(specialties)
    ).astype(bool)


def apply_query(doctors: Iterable[Doctor], state: QueryState) -> List[Doctor]:
    """
    Derive the visible list for `state`.

    Steps, in order: name search, consultation mode, specialty (any selected
    specialty matches), then a stable sort. Ties keep dataset order.

    Args:
        doctors: The raw dataset, in original order
        state: Current query state

    Returns:
        A new list of doctors
    """
    doctors = list(doctors)
    if not doctors:
        return []

    frame = normalize_frame(doctors)
    mask = pd.Series(True, index=frame.index)

    if state.has_search:
        needle = state.search_text.strip().lower()
        mask &= frame['name'].str.contains(needle, regex=False).astype(bool)

    if state.consult_filter is ConsultFilter.VIDEO_CONSULT:
        mask &= frame['video']
    elif state.consult_filter is ConsultFilter.IN_CLINIC:
        mask &= ~frame['video']

    if state.specialty_filter:
        mask &= _specialty_mask(frame, state.specialty_filter)

    result = frame[mask]

    # Descending order uses a negated key so ties stay in dataset order
    if state.sort_key is SortKey.FEES:
        result = result.sort_values('fee_amount', kind='stable')
    elif state.sort_key is SortKey.EXPERIENCE:
        result = result.sort_values('experience_years', kind='stable', key=lambda column: -column)

    logger.debug(f"Pipeline kept {len(result)} of {len(doctors)} doctors")
    return [doctors[position] for position in result.index]
