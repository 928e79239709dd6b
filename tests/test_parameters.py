"""
Tests for the URL parameter store and query state serialization.
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from query.parameters import ParameterStore, read_query_state, write_query_state
from query.state.models import ConsultFilter, QueryState, SortKey


class TestParameterStore:
    """Test URLSearchParams-like behavior of the store."""

    def test_parse_and_render(self):
        store = ParameterStore.from_query_string('?search=asha&specialty=ENT&specialty=Dentist')

        assert store.get('search') == 'asha'
        assert store.get_all('specialty') == ['ENT', 'Dentist']
        assert store.to_query_string() == '?search=asha&specialty=ENT&specialty=Dentist'

    def test_leading_question_mark_optional(self):
        assert ParameterStore.from_query_string('a=1') == ParameterStore.from_query_string('?a=1')

    def test_empty_store_renders_empty_string(self):
        assert ParameterStore.from_query_string('').to_query_string() == ''
        assert ParameterStore.from_query_string(None).to_query_string() == ''

    def test_encoded_values_decoded(self):
        store = ParameterStore.from_query_string('?consultType=Video+Consult&specialty=Dietitian%2FNutritionist')

        assert store.get('consultType') == 'Video Consult'
        assert store.get('specialty') == 'Dietitian/Nutritionist'

    def test_set_replaces_in_place(self):
        store = ParameterStore([('a', '1'), ('b', '2'), ('a', '3')])
        store.set('a', '9')

        assert store.items() == [('a', '9'), ('b', '2')]

    def test_set_new_key_appends(self):
        store = ParameterStore([('a', '1')])
        store.set('b', '2')

        assert store.items() == [('a', '1'), ('b', '2')]

    def test_delete_removes_every_value(self):
        store = ParameterStore([('a', '1'), ('b', '2'), ('a', '3')])
        store.delete('a')

        assert 'a' not in store
        assert store.items() == [('b', '2')]

    def test_keys_are_distinct_in_order(self):
        store = ParameterStore([('b', '1'), ('a', '2'), ('b', '3')])

        assert store.keys() == ['b', 'a']
        assert list(store) == ['b', 'a']
        assert len(store) == 3

    def test_copy_is_independent(self):
        store = ParameterStore([('a', '1')])
        clone = store.copy()
        clone.set('a', '2')

        assert store.get('a') == '1'


class TestReadQueryState:
    """Test startup import of the query state."""

    def test_empty_store_gives_defaults(self):
        assert read_query_state(ParameterStore()) == QueryState()

    def test_all_keys(self):
        store = ParameterStore.from_query_string(
            '?search=rao&consultType=In+Clinic&specialty=ENT&specialty=Dentist&sortBy=experience'
        )
        state = read_query_state(store)

        assert state.search_text == 'rao'
        assert state.consult_filter is ConsultFilter.IN_CLINIC
        assert state.specialty_filter == ('ENT', 'Dentist')
        assert state.sort_key is SortKey.EXPERIENCE

    def test_unknown_values_ignored(self):
        store = ParameterStore.from_query_string('?consultType=Home+Visit&sortBy=rating')
        state = read_query_state(store)

        assert state.consult_filter is None
        assert state.sort_key is None

    def test_duplicate_specialties_collapse(self):
        store = ParameterStore.from_query_string('?specialty=ENT&specialty=ENT')
        assert read_query_state(store).specialty_filter == ('ENT',)


class TestWriteQueryState:
    """Test serialization of the query state into the store."""

    def test_specialties_replaced_not_merged(self):
        store = ParameterStore.from_query_string('?specialty=A&specialty=B')
        write_query_state(store, QueryState(specialty_filter=('C',)))

        assert store.get_all('specialty') == ['C']

    def test_blank_search_removes_key(self):
        store = ParameterStore.from_query_string('?search=old')
        write_query_state(store, QueryState(search_text='   '))

        assert 'search' not in store

    def test_cleared_filters_remove_keys(self):
        store = ParameterStore.from_query_string('?consultType=In+Clinic&sortBy=fees&specialty=ENT')
        write_query_state(store, QueryState())

        assert store.to_query_string() == ''

    def test_foreign_keys_untouched(self):
        store = ParameterStore.from_query_string('?utm_source=mail&sortBy=fees')
        write_query_state(store, QueryState(sort_key=SortKey.EXPERIENCE))

        assert store.get('utm_source') == 'mail'
        assert store.get('sortBy') == 'experience'

    def test_written_state_reads_back(self):
        state = QueryState(search_text='dr', consult_filter=ConsultFilter.VIDEO_CONSULT,
                           specialty_filter=('ENT', 'Dentist'), sort_key=SortKey.FEES)
        store = ParameterStore()
        write_query_state(store, state)

        restored = read_query_state(ParameterStore.from_query_string(store.to_query_string()))
        assert restored == state
