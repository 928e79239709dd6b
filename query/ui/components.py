"""
Reusable UI components for the doctor listing page.

This module contains functions that generate the search box, filter panel
and result cards, promoting consistency and reusability.
"""

from typing import Iterable, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from data_handling.doctors import DEFAULT_CURRENCY, DEFAULT_PLACEHOLDER_IMAGE, Doctor
from data_handling.specialties import SPECIALTIES, specialty_slug
from query.state.models import ConsultFilter, SortKey

from .styles import COLORS, STYLES, CLASSES, ICONS

SORT_LABELS = {
    SortKey.FEES: 'Fees (Low to High)',
    SortKey.EXPERIENCE: 'Experience (High to Low)',
}


def create_search_section():
    """Create the search box with its autocomplete dropdown."""
    return html.Div([
        dbc.InputGroup([
            dbc.InputGroupText(html.I(className=ICONS['search'])),
            dbc.Input(
                id='search-input',
                type='text',
                value='',
                placeholder='Search doctors by name',
                autocomplete='off',
                debounce=False
            )
        ]),
        dbc.ListGroup(id='suggestions-list', style=STYLES['suggestions_list'])
    ], style=STYLES['search_container'], **{'data-testid': 'autocomplete-container'})


def create_suggestion_items(doctors: Iterable[Doctor]):
    """Create clickable suggestion rows, keyed by doctor id."""
    return [
        dbc.ListGroupItem(
            doctor.name,
            id={'type': 'suggestion-item', 'index': doctor.id},
            action=True,
            n_clicks=0
        )
        for doctor in doctors
    ]


def _toggle_button(label: str, button_type: str, value: str):
    return dbc.Button(
        label,
        id={'type': button_type, 'index': value},
        color='primary',
        outline=True,
        size='sm',
        n_clicks=0,
        className=f"{CLASSES['full_width']} {CLASSES['margin_top']}"
    )


def create_filter_panel():
    """Create the consultation mode, specialty and sort controls."""
    return dbc.Card(dbc.CardBody([
        html.Div([
            html.Div("Consultation Mode", className=CLASSES['filter_header'],
                     **{'data-testid': 'filter-header-moc'}),
            html.Div([
                _toggle_button(mode.value, 'consult-button', mode.value)
                for mode in ConsultFilter
            ])
        ], style=STYLES['filter_section']),

        html.Div([
            html.Div("Speciality", className=CLASSES['filter_header'],
                     **{'data-testid': 'filter-header-speciality'}),
            dbc.Checklist(
                id='specialty-checklist',
                options=[
                    {'label': name, 'value': name,
                     'input_id': f"filter-specialty-{specialty_slug(name)}"}
                    for name in SPECIALTIES
                ],
                value=[]
            )
        ], style={**STYLES['filter_section'], **STYLES['specialty_options']}),

        html.Div([
            html.Div("Sort By", className=CLASSES['filter_header'],
                     **{'data-testid': 'filter-header-sort'}),
            html.Div([
                _toggle_button(SORT_LABELS[key], 'sort-button', key.value)
                for key in SortKey
            ])
        ], style=STYLES['filter_section'])
    ]), style=STYLES['filter_panel'])


def create_doctor_card(doctor: Doctor,
                       currency: str = DEFAULT_CURRENCY,
                       placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE):
    """Create the result card for one doctor."""
    consult_color = COLORS['video_consult'] if doctor.supports_video_consult else COLORS['in_clinic']
    consult_icon = ICONS['video'] if doctor.supports_video_consult else ICONS['clinic']

    return dbc.Card(dbc.CardBody(dbc.Row([
        dbc.Col(
            html.Img(src=doctor.image_url(placeholder_image), alt=doctor.name,
                     style=STYLES['doctor_image']),
            width='auto'
        ),
        dbc.Col([
            html.H5(doctor.name, **{'data-testid': 'doctor-name'}),
            html.P(doctor.specialty_label, className=CLASSES['text_muted'],
                   **{'data-testid': 'doctor-specialty'}),
            html.P(f"{doctor.experience} years experience",
                   **{'data-testid': 'doctor-experience'}),
            html.P(f"{doctor.display_fees(currency)} Consultation Fee",
                   **{'data-testid': 'doctor-fee'}),
            html.Span([html.I(className=consult_icon), doctor.consult_label],
                      style={'color': consult_color})
        ]),
        dbc.Col(
            # Booking is not wired to any backend
            dbc.Button("Book Appointment", color='primary', outline=True, size='sm'),
            width='auto',
            className='d-flex align-items-center'
        )
    ])), style=STYLES['doctor_card'])


def create_results_list(doctors: Iterable[Doctor],
                        currency: str = DEFAULT_CURRENCY,
                        placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE):
    """Create the result cards, or a placeholder when nothing matches."""
    cards = [create_doctor_card(doctor, currency, placeholder_image) for doctor in doctors]
    if cards:
        return cards

    return html.Div([
        html.H5("No doctors match your search criteria"),
        html.P("Try adjusting your filters or search term")
    ], style=STYLES['no_results'])


def create_dataset_alert(error: Optional[str]):
    """Create the dataset status alert; empty when the dataset loaded."""
    if not error:
        return None
    return dbc.Alert([html.I(className=ICONS['warning']), error], color='danger')


def create_doctor_list_section():
    """Create the results column with its loading spinner."""
    return html.Div([
        html.Div(id='dataset-status-alert'),
        html.Div(id='result-count', className=CLASSES['text_muted']),
        dcc.Loading(
            id='doctor-list-loading',
            type='default',
            children=html.Div(id='doctor-list')
        )
    ])
