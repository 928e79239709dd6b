"""
Tests for the query-state controller.

The controller keeps the query state, the visible list and the URL
parameters in step; these tests drive it the way the page callbacks do.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_handling.doctors import Doctor
from query.controller import QueryStateController
from query.parameters import ParameterStore
from query.state.models import ConsultFilter, QueryState, SortKey


@pytest.fixture
def doctors():
    return (
        Doctor(id='1', name='Dr. Asha Rao', specialties=('Dentist',), supports_video_consult=True,
               fees='₹500', experience='12 Years of experience'),
        Doctor(id='2', name='Dr. Vikram Mehta', specialties=('ENT',), supports_video_consult=False,
               fees='300', experience='4 Years of experience'),
        Doctor(id='3', name='Dr. Ravi Kumar', specialties=('Dentist', 'ENT'), supports_video_consult=True,
               fees=200, experience=20),
        Doctor(id='4', name='Dr. Meera Iyer', specialties=None, supports_video_consult=False,
               fees='₹ 800', experience='8'),
    )


def make_controller(query_string, doctors):
    controller = QueryStateController(ParameterStore.from_query_string(query_string), doctors)
    controller.initialize()
    return controller


def visible_ids(controller):
    return [d.id for d in controller.visible]


class TestInitialize:
    """Test the one-time import of the state from the URL."""

    def test_empty_url_shows_dataset(self, doctors):
        controller = make_controller('', doctors)

        assert controller.state == QueryState()
        assert visible_ids(controller) == ['1', '2', '3', '4']

    def test_url_state_applied(self, doctors):
        controller = make_controller('?consultType=Video+Consult&sortBy=fees', doctors)

        assert controller.state.consult_filter is ConsultFilter.VIDEO_CONSULT
        assert visible_ids(controller) == ['3', '1']

    def test_runs_once(self, doctors):
        params = ParameterStore.from_query_string('?sortBy=fees')
        controller = QueryStateController(params, doctors)
        controller.initialize()

        params.replace([('sortBy', 'experience')])
        controller.initialize()

        assert controller.state.sort_key is SortKey.FEES

    def test_unknown_values_removed_from_url(self, doctors):
        controller = make_controller('?consultType=Teleport&page=2', doctors)

        assert controller.state.consult_filter is None
        assert controller.params.to_query_string() == '?page=2'

    def test_dataset_delivered_after_initialize(self, doctors):
        controller = QueryStateController(ParameterStore.from_query_string('?sortBy=experience'))
        controller.initialize()
        assert controller.visible == ()

        controller.load_dataset(doctors)
        assert visible_ids(controller) == ['3', '1', '4', '2']

    def test_round_trip_through_parameters(self, doctors):
        controller = make_controller('', doctors)
        controller.toggle_consult_filter('Video Consult')
        controller.toggle_specialty('ENT')
        controller.toggle_specialty('Dentist')
        controller.toggle_sort_key('experience')
        controller.commit_search('ra')

        fresh = make_controller(controller.params.to_query_string(), doctors)

        assert fresh.state == controller.state
        assert fresh.visible == controller.visible

    def test_second_dataset_delivery_ignored(self, doctors):
        controller = make_controller('', doctors)
        controller.load_dataset(doctors[:1])

        assert len(controller.dataset) == 4


class TestSearch:
    """Test typing, committing and clearing the search text."""

    def test_typing_does_not_filter_or_touch_url(self, doctors):
        controller = make_controller('', doctors)
        controller.set_search_text('asha')

        assert controller.state.search_text == 'asha'
        assert visible_ids(controller) == ['1', '2', '3', '4']
        assert 'search' not in controller.params

    def test_commit_filters_and_writes_url(self, doctors):
        controller = make_controller('', doctors)
        controller.commit_search('asha')

        assert visible_ids(controller) == ['1']
        assert controller.params.get('search') == 'asha'

    def test_clearing_search_shows_all_and_removes_key(self, doctors):
        controller = make_controller('?search=asha&consultType=In+Clinic', doctors)
        assert visible_ids(controller) == []

        controller.set_search_text('')

        assert 'search' not in controller.params
        # Clearing the box shows the whole dataset regardless of filters
        assert visible_ids(controller) == ['1', '2', '3', '4']
        assert controller.state.consult_filter is ConsultFilter.IN_CLINIC

    def test_suggestions_follow_search_text(self, doctors):
        controller = make_controller('', doctors)
        controller.set_search_text('ra')

        # Four names contain 'ra'; only the first three are offered
        assert [d.id for d in controller.suggestions] == ['1', '2', '3']

        controller.set_search_text('meera')
        assert [d.id for d in controller.suggestions] == ['4']


class TestToggles:
    """Test filter and sort toggles."""

    def test_consult_toggle_is_involution(self, doctors):
        controller = make_controller('', doctors)

        controller.toggle_consult_filter('In Clinic')
        assert visible_ids(controller) == ['2', '4']
        assert controller.params.get('consultType') == 'In Clinic'

        controller.toggle_consult_filter('In Clinic')
        assert controller.state.consult_filter is None
        assert 'consultType' not in controller.params
        assert visible_ids(controller) == ['1', '2', '3', '4']

    def test_consult_switch_mode(self, doctors):
        controller = make_controller('', doctors)
        controller.toggle_consult_filter('In Clinic')
        controller.toggle_consult_filter('Video Consult')

        assert controller.state.consult_filter is ConsultFilter.VIDEO_CONSULT
        assert visible_ids(controller) == ['1', '3']

    def test_unknown_consult_mode_ignored(self, doctors):
        controller = make_controller('', doctors)
        controller.toggle_consult_filter('Home Visit')

        assert controller.state == QueryState()
        assert controller.params.to_query_string() == ''

    def test_specialty_toggle_union_and_url(self, doctors):
        controller = make_controller('', doctors)
        controller.toggle_specialty('ENT')
        controller.toggle_specialty('Dentist')

        assert visible_ids(controller) == ['1', '2', '3']
        assert controller.params.get_all('specialty') == ['ENT', 'Dentist']

        controller.toggle_specialty('ENT')
        assert visible_ids(controller) == ['1', '3']
        assert controller.params.get_all('specialty') == ['Dentist']

    def test_invalid_specialty_ignored(self, doctors):
        controller = make_controller('', doctors)
        controller.toggle_specialty('')
        controller.toggle_specialty(None)

        assert controller.state.specialty_filter == ()

    def test_sort_toggle(self, doctors):
        controller = make_controller('', doctors)

        controller.toggle_sort_key('fees')
        assert visible_ids(controller) == ['3', '2', '1', '4']

        controller.toggle_sort_key('experience')
        assert visible_ids(controller) == ['3', '1', '4', '2']
        assert controller.params.get('sortBy') == 'experience'

        controller.toggle_sort_key('experience')
        assert controller.state.sort_key is None
        assert visible_ids(controller) == ['1', '2', '3', '4']

    def test_unknown_sort_key_ignored(self, doctors):
        controller = make_controller('?sortBy=fees', doctors)
        controller.toggle_sort_key('rating')

        assert controller.state.sort_key is SortKey.FEES

    def test_url_always_reflects_state(self, doctors):
        controller = make_controller('?ref=home', doctors)
        controller.toggle_consult_filter('Video Consult')
        controller.toggle_specialty('Dentist')
        controller.toggle_sort_key('fees')
        controller.commit_search('dr')

        assert controller.params.to_query_string() == (
            '?ref=home&consultType=Video+Consult&sortBy=fees&search=dr&specialty=Dentist'
        )


class TestEmptyDataset:
    """Test behavior before or without a dataset."""

    def test_operations_keep_empty_list(self):
        controller = make_controller('?sortBy=fees', ())
        controller.toggle_consult_filter('Video Consult')
        controller.commit_search('asha')

        assert controller.visible == ()
        assert controller.suggestions == ()
        assert controller.params.get('search') == 'asha'


class TestSnapshot:
    """Test snapshot and restore across stateless callbacks."""

    def test_restore_round_trip(self, doctors):
        controller = make_controller('?sortBy=fees&consultType=Video+Consult', doctors)
        snapshot = controller.snapshot()

        # Restoring must not re-read the URL
        restored = QueryStateController.restore(ParameterStore.from_query_string('?sortBy=experience'),
                                                doctors, snapshot)

        assert restored.initialized
        assert restored.state == controller.state
        assert visible_ids(restored) == visible_ids(controller)

    def test_restore_without_snapshot(self, doctors):
        restored = QueryStateController.restore(ParameterStore(), doctors, None)

        assert not restored.initialized
        assert restored.visible == ()

    def test_restore_drops_unknown_ids(self, doctors):
        snapshot = {'initialized': True, 'state': QueryState().to_dict(), 'visible_ids': ['1', 'gone', '3']}
        restored = QueryStateController.restore(ParameterStore(), doctors, snapshot)

        assert visible_ids(restored) == ['1', '3']
