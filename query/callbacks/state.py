"""
Query state callbacks for the doctor listing.

This module contains callbacks responsible for:
- Seeding the query state from the URL once per page load
- Translating control interactions into controller operations
- Keeping the URL search string in sync with the query state

The controller itself is rebuilt per callback from the snapshot store and
the current URL; the URL is only ever read as state on startup.
"""

import logging
from typing import Any, Dict, Iterable, Optional

import dash
from dash import ALL, Input, Output, State, no_update

from core.dataset import get_dataset_provider
from query.controller import QueryStateController
from query.parameters import ParameterStore

logger = logging.getLogger(__name__)


def restore_controller(search: Optional[str], snapshot: Optional[Dict[str, Any]]) -> QueryStateController:
    """Rehydrate the controller for the current session from its snapshot."""
    params = ParameterStore.from_query_string(search)
    return QueryStateController.restore(params, get_dataset_provider().doctors, snapshot)


def _sync_search(params: ParameterStore, search: Optional[str]):
    new_search = params.to_query_string()
    return new_search if new_search != (search or '') else no_update


def initialize_query_state(status, search, snapshot):
    """
    Build the query state from the URL exactly once per page load.

    Runs after the dataset fetch reported its status. Core keys are written
    back canonically, so the URL only changes when it held ignored values.
    The search box and specialty checklist are seeded from the same state.
    """
    if status is None:
        return no_update, no_update, no_update, no_update
    if snapshot and snapshot.get('initialized'):
        logger.debug("Query state already initialized for this page load")
        return no_update, no_update, no_update, no_update

    controller = QueryStateController(ParameterStore.from_query_string(search))
    controller.initialize()
    controller.load_dataset(get_dataset_provider().doctors)

    return (controller.snapshot(),
            _sync_search(controller.params, search),
            controller.state.search_text,
            list(controller.state.specialty_filter))


def _specialty_changes(selected: Optional[Iterable[str]], current: Iterable[str]):
    selected = list(selected or [])
    current = list(current)
    added = [name for name in selected if name not in current]
    removed = [name for name in current if name not in selected]
    return added + removed


def apply_intent(controller: QueryStateController, trigger_id: Any, prop: str, value: Any,
                 search_value: Optional[str], specialty_values: Optional[Iterable[str]]) -> bool:
    """
    Apply the operation corresponding to the triggering control.

    Args:
        controller: Rehydrated controller for the session
        trigger_id: Component id of the trigger (str or pattern-matching dict)
        prop: Triggered property name
        value: Triggered property value
        search_value: Current search box text
        specialty_values: Current specialty checklist selection

    Returns:
        True if an operation ran, False if the trigger was not a user intent
    """
    if trigger_id == 'search-input':
        if prop == 'n_submit':
            controller.commit_search(search_value)
            return True
        if (search_value or '') == controller.state.search_text:
            # Programmatic writes (startup seeding, suggestion pick) echo back here
            return False
        controller.set_search_text(search_value)
        return True

    if trigger_id == 'specialty-checklist':
        changes = _specialty_changes(specialty_values, controller.state.specialty_filter)
        for name in changes:
            controller.toggle_specialty(name)
        return bool(changes)

    if not isinstance(trigger_id, dict) or not value:
        # Pattern-matching components report n_clicks=0 when they are (re)rendered
        return False

    trigger_type = trigger_id.get('type')
    index = trigger_id.get('index')

    if trigger_type == 'suggestion-item':
        doctor = next((d for d in controller.dataset if d.id == index), None)
        if doctor is None:
            logger.warning(f"Suggestion for unknown doctor id {index!r}")
            return False
        controller.commit_search(doctor.name)
        return True

    if trigger_type == 'consult-button':
        controller.toggle_consult_filter(index)
        return True

    if trigger_type == 'sort-button':
        controller.toggle_sort_key(index)
        return True

    logger.warning(f"Unhandled query trigger: {trigger_id!r}")
    return False


def dispatch_query_intent(search_value, n_submit, suggestion_clicks, consult_clicks, sort_clicks,
                          specialty_values, search, snapshot):
    """Route one user interaction to the query controller."""
    ctx = dash.callback_context
    if not ctx.triggered or not ctx.triggered_id:
        return no_update, no_update, no_update
    if not snapshot or not snapshot.get('initialized'):
        # Startup import has not happened yet
        return no_update, no_update, no_update

    trigger = ctx.triggered[0]
    prop = trigger['prop_id'].rsplit('.', 1)[-1]
    trigger_id = ctx.triggered_id

    controller = restore_controller(search, snapshot)
    if not apply_intent(controller, trigger_id, prop, trigger['value'], search_value, specialty_values):
        return no_update, no_update, no_update

    # Picking a suggestion fills the search box with the chosen name
    search_box = no_update
    if isinstance(trigger_id, dict) and trigger_id.get('type') == 'suggestion-item':
        search_box = controller.state.search_text

    return controller.snapshot(), _sync_search(controller.params, search), search_box


def register_callbacks(app):
    """Register all query state callbacks with the Dash app."""
    app.callback(
        [Output('query-snapshot-store', 'data'),
         Output('url', 'search'),
         Output('search-input', 'value'),
         Output('specialty-checklist', 'value')],
        Input('dataset-status-store', 'data'),
        [State('url', 'search'),
         State('query-snapshot-store', 'data')]
    )(initialize_query_state)

    app.callback(
        [Output('query-snapshot-store', 'data', allow_duplicate=True),
         Output('url', 'search', allow_duplicate=True),
         Output('search-input', 'value', allow_duplicate=True)],
        [Input('search-input', 'value'),
         Input('search-input', 'n_submit'),
         Input({'type': 'suggestion-item', 'index': ALL}, 'n_clicks'),
         Input({'type': 'consult-button', 'index': ALL}, 'n_clicks'),
         Input({'type': 'sort-button', 'index': ALL}, 'n_clicks'),
         Input('specialty-checklist', 'value')],
        [State('url', 'search'),
         State('query-snapshot-store', 'data')],
        prevent_initial_call=True
    )(dispatch_query_intent)
