"""
Dataset loading and status callbacks for the doctor listing.

This module contains callbacks responsible for:
- Triggering the one-time remote fetch of the doctor dataset
- Reporting fetch failures to the user
"""

import logging

from dash import Input, Output

from core.dataset import get_dataset_provider
from core.exceptions import DatasetError
from query.ui.components import create_dataset_alert

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch doctors"


def load_dataset_status(_):
    """
    Fetch the doctor dataset and publish its status.

    The doctors themselves stay server-side in the dataset provider; the
    store only carries whether the fetch worked. A failed fetch leaves an
    empty dataset and surfaces an alert.
    """
    try:
        doctors = get_dataset_provider().fetch()
    except DatasetError as e:
        logger.error(f"Doctor dataset unavailable: {e}")
        status = {'loaded': False, 'count': 0, 'error': FETCH_ERROR_MESSAGE}
        return status, create_dataset_alert(FETCH_ERROR_MESSAGE)

    return {'loaded': True, 'count': len(doctors), 'error': None}, None


def register_callbacks(app):
    """Register all dataset loading callbacks with the Dash app."""
    app.callback(
        [Output('dataset-status-store', 'data'),
         Output('dataset-status-alert', 'children')],
        Input('doctor-finder-container', 'id')
    )(load_dataset_status)
