"""
Doctor records and field normalization.

Raw records come from a JSON feed whose field shapes vary: fees may be a
number or a string carrying a currency glyph, experience may be decorated
("12 years"), and the specialty field may be a single string or a list.
This module turns each raw record into an immutable Doctor whose derived
values are always comparable, so one malformed record can never break
filtering or sorting for the rest of the dataset.
"""

import logging
import math
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

NON_DIGITS = re.compile(r'[^\d]')
DEFAULT_CURRENCY = '₹'
DEFAULT_PLACEHOLDER_IMAGE = 'https://via.placeholder.com/100'

# Field names seen in the feed for the specialty list, in lookup order
SPECIALTY_KEYS = ('speciality', 'specialty', 'specialties')


def normalize_amount(value: Any) -> int:
    """
    Reduce a fee or experience value to a comparable integer.

    Numbers are used as-is (floats truncated). Anything else is stringified
    and stripped of every non-digit character before parsing. Empty or
    unparsable input normalizes to 0.

    Examples:
        >>> normalize_amount('₹500')
        500
        >>> normalize_amount('12 Years of experience')
        12
        >>> normalize_amount(None)
        0
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0

    digits = NON_DIGITS.sub('', str(value))
    return int(digits) if digits else 0


def format_fees(value: Any, currency: str = DEFAULT_CURRENCY) -> str:
    """Render a fee with exactly one currency prefix."""
    text = '' if value is None else str(value).strip()
    if currency in text:
        return text
    return f"{currency}{text}"


def normalize_specialties(value: Any) -> Optional[Tuple[str, ...]]:
    """
    Normalize the specialty field to a tuple of names.

    Returns None for shapes that cannot be interpreted (missing, numbers,
    mappings); such doctors never match a specialty filter.
    """
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(item for item in value if isinstance(item, str))
    return None


@dataclass(frozen=True)
class Doctor:
    """A single listed doctor."""
    id: str
    name: str
    specialties: Optional[Tuple[str, ...]] = None
    supports_video_consult: bool = False
    fees: Any = None
    experience: Any = None
    image: Optional[str] = None

    @property
    def fee_amount(self) -> int:
        return normalize_amount(self.fees)

    @property
    def experience_years(self) -> int:
        return normalize_amount(self.experience)

    @property
    def specialty_label(self) -> str:
        return ', '.join(self.specialties) if self.specialties else ''

    @property
    def consult_label(self) -> str:
        return 'Video Consult Available' if self.supports_video_consult else 'In-Clinic Only'

    def display_fees(self, currency: str = DEFAULT_CURRENCY) -> str:
        return format_fees(self.fees, currency)

    def image_url(self, placeholder: str = DEFAULT_PLACEHOLDER_IMAGE) -> str:
        return self.image or placeholder

    def matches_name(self, text: str) -> bool:
        """Case-insensitive substring match against the doctor's name."""
        return text.lower() in self.name.lower()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the feed's record shape for storage in dcc.Store."""
        data = {
            'id': self.id,
            'name': self.name,
            'videoConsult': self.supports_video_consult,
            'fees': self.fees,
            'experience': self.experience,
            'image': self.image,
        }
        if self.specialties is not None:
            data['speciality'] = list(self.specialties)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Doctor':
        """Create from a raw feed record."""
        raw_specialties = None
        for key in SPECIALTY_KEYS:
            if key in data:
                raw_specialties = data[key]
                break

        raw_id = data.get('id')
        name = data.get('name')
        return cls(
            id='' if raw_id is None else str(raw_id),
            name=name if isinstance(name, str) else ('' if name is None else str(name)),
            specialties=normalize_specialties(raw_specialties),
            supports_video_consult=bool(data.get('videoConsult', False)),
            fees=data.get('fees'),
            experience=data.get('experience'),
            image=data.get('image') or None,
        )


def load_doctors(records: Optional[Iterable[Any]]) -> Tuple[Doctor, ...]:
    """
    Convert a raw payload into an immutable tuple of doctors.

    Non-mapping records are skipped and later duplicates of an id are
    dropped; both are logged rather than raised.
    """
    if not records:
        return ()

    doctors = []
    seen_ids = set()
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping record {position}: expected an object, got {type(record).__name__}")
            continue

        doctor = Doctor.from_dict(record)
        if not doctor.id:
            # Rendering needs a key; fall back to the feed position
            doctor = replace(doctor, id=f"row-{position}")

        if doctor.id in seen_ids:
            logger.warning(f"Skipping record {position}: duplicate doctor id {doctor.id!r}")
            continue

        seen_ids.add(doctor.id)
        doctors.append(doctor)

    return tuple(doctors)
