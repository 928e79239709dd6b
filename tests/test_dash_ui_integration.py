"""
UI component and application structure tests.
Checks the generated Dash component trees without browser automation.
"""
import os
import sys

import dash
import dash_bootstrap_components as dbc
from dash import html

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config_manager
from config_manager import CONFIG_PATH_ENV_VAR
from data_handling.doctors import Doctor
from data_handling.specialties import SPECIALTIES
from query.ui.components import (
    create_doctor_card,
    create_filter_panel,
    create_results_list,
    create_search_section,
    create_suggestion_items,
)


def find_components(component, predicate):
    """Walk a component tree and collect every node matching predicate."""
    found = []
    if predicate(component):
        found.append(component)
    children = getattr(component, 'children', None)
    if children is None:
        return found
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        if hasattr(child, 'to_plotly_json'):
            found.extend(find_components(child, predicate))
    return found


def find_by_id(component, component_id):
    matches = find_components(component, lambda c: getattr(c, 'id', None) == component_id)
    return matches[0] if matches else None


class TestSearchSection:
    """Test the search box and suggestion rows."""

    def test_search_input_and_dropdown(self):
        section = create_search_section()

        assert isinstance(find_by_id(section, 'search-input'), dbc.Input)
        assert find_by_id(section, 'suggestions-list') is not None

    def test_suggestion_items_keyed_by_doctor(self):
        items = create_suggestion_items([Doctor(id='7', name='Dr. Asha Rao')])

        assert len(items) == 1
        assert items[0].id == {'type': 'suggestion-item', 'index': '7'}
        assert items[0].children == 'Dr. Asha Rao'


class TestFilterPanel:
    """Test the filter and sort controls."""

    def setup_method(self):
        self.panel = create_filter_panel()

    def test_consult_buttons_in_order(self):
        buttons = find_components(
            self.panel, lambda c: isinstance(getattr(c, 'id', None), dict)
            and c.id.get('type') == 'consult-button'
        )
        assert [b.id['index'] for b in buttons] == ['Video Consult', 'In Clinic']

    def test_sort_buttons(self):
        buttons = find_components(
            self.panel, lambda c: isinstance(getattr(c, 'id', None), dict)
            and c.id.get('type') == 'sort-button'
        )
        assert [b.id['index'] for b in buttons] == ['fees', 'experience']
        assert [b.children for b in buttons] == ['Fees (Low to High)', 'Experience (High to Low)']

    def test_specialty_checklist_lists_vocabulary(self):
        checklist = find_by_id(self.panel, 'specialty-checklist')

        assert [option['value'] for option in checklist.options] == list(SPECIALTIES)
        assert checklist.options[0]['input_id'] == 'filter-specialty-General-Physician'


class TestDoctorCards:
    """Test result card rendering."""

    def test_card_shows_doctor_details(self):
        doctor = Doctor(id='1', name='Dr. Asha Rao', specialties=('Dentist', 'ENT'),
                        supports_video_consult=True, fees='500', experience='12')
        text = str(create_doctor_card(doctor))

        assert 'Dr. Asha Rao' in text
        assert 'Dentist, ENT' in text
        assert '12 years experience' in text
        assert '₹500 Consultation Fee' in text
        assert 'Video Consult Available' in text
        assert 'Book Appointment' in text

    def test_placeholder_image(self):
        card = create_doctor_card(Doctor(id='1', name='A'), placeholder_image='blank.png')
        images = find_components(card, lambda c: isinstance(c, html.Img))

        assert images[0].src == 'blank.png'

    def test_results_list_empty_state(self):
        result = create_results_list([])

        assert isinstance(result, html.Div)
        assert 'No doctors match your search criteria' in str(result)

    def test_results_list_one_card_per_doctor(self):
        cards = create_results_list([Doctor(id='1', name='A'), Doctor(id='2', name='B')])
        assert len(cards) == 2


class TestApplicationStructure:
    """Test the overall Dash application wiring."""

    def test_app_initialization(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(tmp_path / 'config.toml'))
        monkeypatch.setattr(config_manager, '_config_instance', None)

        import app

        assert isinstance(app.app, dash.Dash)
        layout_str = str(app.app.layout)
        assert 'Location' in layout_str
        assert "'url'" in layout_str

    def test_resolve_theme_fallback(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(tmp_path / 'config.toml'))
        monkeypatch.setattr(config_manager, '_config_instance', None)

        import app

        assert app.resolve_theme('darkly') == dbc.themes.DARKLY
        assert app.resolve_theme('no-such-theme') == dbc.themes.FLATLY
