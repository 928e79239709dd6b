"""
Specialty vocabulary for the filter panel and the `specialty` URL parameter.
"""

from typing import Tuple

SPECIALTIES: Tuple[str, ...] = (
    "General Physician", "Dentist", "Dermatologist", "Paediatrician",
    "Gynaecologist", "ENT", "Diabetologist", "Cardiologist",
    "Physiotherapist", "Endocrinologist", "Orthopaedic", "Ophthalmologist",
    "Gastroenterologist", "Pulmonologist", "Psychiatrist", "Urologist",
    "Dietitian/Nutritionist", "Psychologist", "Sexologist", "Nephrologist",
    "Neurologist", "Oncologist", "Ayurveda", "Homeopath",
)


def is_known_specialty(name: str) -> bool:
    return name in SPECIALTIES


def specialty_slug(name: str) -> str:
    """DOM-safe identifier for a specialty ('Dietitian/Nutritionist' -> 'Dietitian-Nutritionist')."""
    return name.replace('/', '-') if name else ''
