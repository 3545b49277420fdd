"""
Tests for the query facade.
Run with: python -m pytest tests/test_engine.py -v
"""
from pathlib import Path

import pandas as pd
import pytest

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from query.aggregates import average, count, total
from query.engine import SCOPE_VISIBLE, Stat, compute_stats, run_query
from query.errors import MissingFieldError
from query.predicates import FilterConfig, field_equals
from services.mock_data import INVENTORY_ITEMS
from services.schemas import INVENTORY_SCHEMA


@pytest.fixture
def inventory_df():
    return INVENTORY_SCHEMA.to_frame(INVENTORY_ITEMS)


@pytest.fixture
def stats():
    return {
        'total_items': Stat(lambda df: count(df)),
        'shown_items': Stat(lambda df: count(df), scope=SCOPE_VISIBLE),
        'low_stock_items': Stat(lambda df: count(df, field_equals('status', 'low-stock'))),
    }


def test_run_query_without_config_returns_everything(inventory_df, stats):
    result = run_query(inventory_df, INVENTORY_SCHEMA, stats=stats)
    assert len(result['visible']) == 6
    assert result['total'] == 6
    assert result['filtered'] is False
    assert result['stats'] == {'total_items': 6, 'shown_items': 6, 'low_stock_items': 2}


def test_run_query_low_stock(inventory_df, stats):
    config = FilterConfig(field_filters={'status': 'low-stock'})
    result = run_query(inventory_df, INVENTORY_SCHEMA, config, stats)

    assert result['visible']['name'].tolist() == ['Office Chair', 'Ergonomic Mouse']
    assert result['filtered'] is True
    assert result['total'] == 6
    assert result['stats']['low_stock_items'] == 2
    assert result['stats']['total_items'] == 6
    assert result['stats']['shown_items'] == 2


def test_run_query_search_is_case_insensitive(inventory_df):
    result = run_query(inventory_df, INVENTORY_SCHEMA, FilterConfig(search_text='chair'))
    assert result['visible']['name'].tolist() == ['Office Chair']


def test_run_query_no_match_is_empty_not_error(inventory_df, stats):
    result = run_query(inventory_df, INVENTORY_SCHEMA, FilterConfig(search_text='zzz'), stats)
    assert result['visible'].empty
    assert result['stats']['shown_items'] == 0
    assert result['stats']['total_items'] == 6


def test_run_query_does_not_modify_input(inventory_df, stats):
    before = inventory_df.copy()
    run_query(inventory_df, INVENTORY_SCHEMA, FilterConfig(search_text='a', field_filters={'location': 'Warehouse A'}), stats)
    pd.testing.assert_frame_equal(inventory_df, before)


def test_run_query_is_repeatable(inventory_df, stats):
    config = FilterConfig(search_text='e', field_filters={'category': 'Electronics'})
    first = run_query(inventory_df, INVENTORY_SCHEMA, config, stats)
    second = run_query(inventory_df, INVENTORY_SCHEMA, config, stats)
    pd.testing.assert_frame_equal(first['visible'], second['visible'])
    assert first['stats'] == second['stats']


def test_run_query_strict_rejects_unknown_filter(inventory_df):
    config = FilterConfig(field_filters={'supplier': 'FurniMax'})
    assert run_query(inventory_df, INVENTORY_SCHEMA, config)['visible'].empty
    with pytest.raises(MissingFieldError):
        run_query(inventory_df, INVENTORY_SCHEMA, config, strict=True)


def test_run_query_empty_records(stats):
    empty = INVENTORY_SCHEMA.to_frame([])
    result = run_query(empty, INVENTORY_SCHEMA, FilterConfig(search_text='chair'), stats)
    assert result['visible'].empty
    assert result['total'] == 0
    assert result['stats'] == {'total_items': 0, 'shown_items': 0, 'low_stock_items': 0}


def test_compute_stats_falls_back_to_default(inventory_df):
    stats = {
        'avg_price': Stat(lambda df: average(df, 'price', policy='raise'), scope=SCOPE_VISIBLE, default=None),
        'total_cost': Stat(lambda df: total(df, 'cost'), default=0.0),
    }
    empty = inventory_df.iloc[0:0]
    assert compute_stats(inventory_df, empty, stats) == {'avg_price': None, 'total_cost': 0.0}


def test_compute_stats_propagates_unexpected_errors(inventory_df):
    def _broken(df):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError):
        compute_stats(inventory_df, inventory_df, {'broken': Stat(_broken)})
