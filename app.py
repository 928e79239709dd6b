import argparse
import logging
import threading
import time
import webbrowser

import dash
import dash_bootstrap_components as dbc
from dash import dcc, html

from config_manager import get_config
from core.logging_config import set_log_level, setup_logging

config = get_config()
setup_logging(level=config.log.level, log_file=config.log.log_file, log_dir=config.log.log_dir)
logger = logging.getLogger(__name__)


def resolve_theme(name: str) -> str:
    """Map a configured theme name to a bootstrap stylesheet URL."""
    theme = getattr(dbc.themes, name.upper(), None)
    if theme is None:
        logger.warning(f"Unknown theme {name!r}; falling back to FLATLY")
        theme = dbc.themes.FLATLY
    return theme


app = dash.Dash(
    __name__,
    use_pages=True,
    title=config.ui.page_title,
    external_stylesheets=[resolve_theme(config.ui.theme), dbc.icons.BOOTSTRAP],
    suppress_callback_exceptions=True
)

app.layout = dbc.Container([
    # The URL query string is the shareable copy of the query state
    dcc.Location(id='url', refresh=False),
    dbc.Navbar(
        id='main-navbar',
        children=[
            dbc.Container([
                dbc.NavbarBrand(config.ui.page_title, href="/", className="ms-2"),
                dbc.Nav([
                    dbc.NavItem(dbc.NavLink("Doctors", href="/")),
                ], className="ms-auto", navbar=True)
            ], fluid=True)
        ],
        color="primary",
        dark=True,
        className="mb-3",
    ),
    dash.page_container,
    html.Footer(className="mb-4")
], fluid=True)


def open_browser(url, delay=1.5):
    """Open browser after a delay"""
    def _open():
        time.sleep(delay)
        try:
            webbrowser.open(url)
        except Exception as e:
            logger.warning(f"Could not open browser automatically: {e}")

    threading.Thread(target=_open, daemon=True).start()


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Doctor Finder - Searchable doctor listing')
    parser.add_argument('--no-browser', action='store_true',
                        help='Do not automatically open browser')
    parser.add_argument('--port', type=int, default=8050,
                        help='Port to serve on (default: 8050)')
    parser.add_argument('--debug', action='store_true',
                        help='Run the Dash dev server in debug mode')
    args = parser.parse_args()

    if args.debug:
        set_log_level('DEBUG')

    url = f"http://127.0.0.1:{args.port}"

    if not args.no_browser:
        open_browser(url)

    app.run(debug=args.debug, port=args.port, use_reloader=False)
