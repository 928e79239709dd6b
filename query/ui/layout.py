"""
Main layout definition for the doctor listing page.

The page-local stores live here: the dataset status (written once after
the fetch) and the query snapshot (the controller's state between
callbacks). Both use memory storage so a reload starts a fresh session
that is seeded from the URL.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from .components import (
    create_search_section,
    create_filter_panel,
    create_doctor_list_section
)


layout = dbc.Container([
    dcc.Store(id='dataset-status-store', storage_type='memory'),
    dcc.Store(id='query-snapshot-store', storage_type='memory'),

    # Row 1: Search box with autocomplete
    dbc.Row([
        dbc.Col([
            create_search_section()
        ], width=12)
    ], className="mb-3"),

    # Row 2: Filters (left) and results (right)
    dbc.Row([
        dbc.Col([
            create_filter_panel()
        ], md=3),
        dbc.Col([
            create_doctor_list_section()
        ], md=9)
    ]),
], id='doctor-finder-container', fluid=True)
