import logging

import dash

from config_manager import get_config

# CENTRALIZED MODULAR CALLBACK REGISTRATION
# Use only the centralized registration system to prevent duplicate registrations
from query.callbacks import register_all_callbacks
from query.ui.layout import layout

logger = logging.getLogger(__name__)

dash.register_page(__name__, path='/', title=get_config().ui.page_title)

# Register modular callbacks with proper app instance
try:
    current_app = dash.get_app()
    register_all_callbacks(current_app, verbose=False)
except Exception as e:
    logger.warning(f"Modular callback registration failed: {e}")

__all__ = ['layout']
