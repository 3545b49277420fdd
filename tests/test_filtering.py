"""
Tests for filtering, distinct values and trailing windows.
Run with: python -m pytest tests/test_filtering.py -v
"""
from pathlib import Path

import pandas as pd
import pytest

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from query.aggregates import count
from query.errors import MissingFieldError
from query.filtering import apply_filter, distinct_values, periods_for, trailing
from query.predicates import always, field_equals, never, text_search


@pytest.fixture
def records_df():
    return pd.DataFrame({
        'name': ['Headphones', 'Chair', 'Stand', 'Speaker', 'Lamp'],
        'category': ['Electronics', 'Furniture', 'Accessories', 'Electronics', None],
        'status': ['in-stock', 'low-stock', 'out-of-stock', 'in-stock', 'in-stock'],
    }, index=[5, 3, 9, 1, 7])


def test_apply_filter_keeps_order_and_index(records_df):
    result = apply_filter(records_df, field_equals('status', 'in-stock'))
    assert result['name'].tolist() == ['Headphones', 'Speaker', 'Lamp']
    assert list(result.index) == [5, 1, 7]


def test_apply_filter_always_returns_everything(records_df):
    result = apply_filter(records_df, always())
    pd.testing.assert_frame_equal(result, records_df)


def test_apply_filter_never_returns_empty_with_columns(records_df):
    result = apply_filter(records_df, never())
    assert result.empty
    assert list(result.columns) == list(records_df.columns)


def test_apply_filter_does_not_modify_input(records_df):
    before = records_df.copy()
    result = apply_filter(records_df, text_search(['name'], 'a'))
    result['name'] = 'changed'
    pd.testing.assert_frame_equal(records_df, before)


def test_apply_filter_empty_input():
    empty = pd.DataFrame(columns=['name', 'status'])
    result = apply_filter(empty, field_equals('status', 'in-stock'))
    assert result.empty
    assert list(result.columns) == ['name', 'status']


def test_count_matches_filter_size(records_df):
    for predicate in (always(), never(), field_equals('category', 'Electronics'), text_search(['name'], 'e')):
        assert count(records_df, predicate) == len(apply_filter(records_df, predicate))


def test_distinct_values_first_seen_order_without_nulls(records_df):
    assert distinct_values(records_df, 'category') == ['Electronics', 'Furniture', 'Accessories']


def test_distinct_values_missing_field(records_df):
    with pytest.raises(MissingFieldError):
        distinct_values(records_df, 'location')


def test_periods_for():
    assert periods_for('1month') == 1
    assert periods_for('3months') == 3
    assert periods_for('6months') == 6
    assert periods_for('1year') == 12
    assert periods_for('custom') is None
    assert periods_for(None) is None


def test_trailing(records_df):
    assert trailing(records_df, 2)['name'].tolist() == ['Speaker', 'Lamp']
    assert trailing(records_df, None)['name'].tolist() == records_df['name'].tolist()
    assert trailing(records_df, 12)['name'].tolist() == records_df['name'].tolist()
    assert trailing(records_df, 0).empty
