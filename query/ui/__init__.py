"""
UI components for the doctor listing page.

This package contains the user interface components for the search page,
including layout definitions, reusable components, and styling.
"""

from .layout import layout
from .components import (
    create_search_section,
    create_suggestion_items,
    create_filter_panel,
    create_doctor_card,
    create_results_list,
    create_dataset_alert
)

__all__ = [
    'layout',
    'create_search_section',
    'create_suggestion_items',
    'create_filter_panel',
    'create_doctor_card',
    'create_results_list',
    'create_dataset_alert'
]
