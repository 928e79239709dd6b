"""
Result rendering callbacks for the doctor listing.

This module contains callbacks responsible for:
- Rendering the visible doctor cards
- Showing autocomplete suggestions while the user types
- Reflecting the active consultation mode and sort order on the buttons
"""

from dash import ALL, Input, Output, State, no_update

from config_manager import get_config
from query.parameters import SEARCH_KEY
from query.state.models import ConsultFilter, SortKey
from query.ui.components import create_results_list, create_suggestion_items
from query.ui.styles import STYLES

from .state import restore_controller


def _results_for(visible):
    dataset_config = get_config().dataset
    cards = create_results_list(visible,
                                currency=dataset_config.currency_symbol,
                                placeholder_image=dataset_config.placeholder_image)

    count = len(visible)
    return cards, f"{count} doctor{'s' if count != 1 else ''} found"


def _selection_for(state):
    # Outlined means inactive; order follows the layout
    consult_outline = [mode != state.consult_filter for mode in ConsultFilter]
    sort_outline = [key != state.sort_key for key in SortKey]
    return consult_outline, sort_outline


def render_query_view(snapshot):
    """
    Render the result cards, result count and button highlights together.

    The controller is restored once per snapshot update for all four outputs.
    """
    if not snapshot:
        return [], '', no_update, no_update

    controller = restore_controller(None, snapshot)
    return _results_for(controller.visible) + _selection_for(controller.state)


def render_suggestions(snapshot, search):
    """
    Show up to three name matches while the search text is uncommitted.

    The dropdown is hidden when the text is blank or equals the search
    already applied to the list.
    """
    if not snapshot:
        return [], STYLES['hidden']

    controller = restore_controller(search, snapshot)
    search_text = controller.state.search_text
    if not search_text.strip() or search_text == controller.params.get(SEARCH_KEY):
        return [], STYLES['hidden']

    suggestions = controller.suggestions
    if not suggestions:
        return [], STYLES['hidden']
    return create_suggestion_items(suggestions), STYLES['suggestions_list']


def register_callbacks(app):
    """Register all result rendering callbacks with the Dash app."""
    app.callback(
        [Output('doctor-list', 'children'),
         Output('result-count', 'children'),
         Output({'type': 'consult-button', 'index': ALL}, 'outline'),
         Output({'type': 'sort-button', 'index': ALL}, 'outline')],
        Input('query-snapshot-store', 'data')
    )(render_query_view)

    app.callback(
        [Output('suggestions-list', 'children'),
         Output('suggestions-list', 'style')],
        Input('query-snapshot-store', 'data'),
        State('url', 'search')
    )(render_suggestions)
