"""
Tests for the predicate builder.
Run with: python -m pytest tests/test_predicates.py -v
"""
from pathlib import Path

import pandas as pd
import pytest

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from query.errors import MissingFieldError
from query.predicates import (
    FilterConfig,
    all_of,
    always,
    build_predicate,
    field_equals,
    is_all,
    never,
    text_search,
)
from services.schemas import ALERTS_SCHEMA, INVENTORY_SCHEMA


@pytest.fixture
def items_df():
    return pd.DataFrame({
        'name': ['Office Chair', 'Desk Lamp', 'Ergonomic Mouse', None],
        'sku': ['OC-002', 'DL-005', 'EM-006', 'XX-999'],
        'category': ['Furniture', 'Lighting', 'Accessories', 'Accessories'],
        'status': ['low-stock', 'in-stock', 'low-stock', 'in-stock'],
        'location': ['Warehouse B', 'Warehouse C', 'Warehouse B', 'Warehouse A'],
    })


def test_is_all_sentinels():
    assert is_all(None)
    assert is_all('')
    assert is_all('all')
    assert not is_all('All')
    assert not is_all('in-stock')


def test_filter_config_is_active():
    assert not FilterConfig().is_active
    assert not FilterConfig(field_filters={'status': 'all', 'category': None}).is_active
    assert FilterConfig(search_text='chair').is_active
    assert FilterConfig(field_filters={'status': 'low-stock'}).is_active


def test_blank_search_text_is_not_a_filter(items_df):
    assert not FilterConfig(search_text='   ').is_active
    assert text_search(['name'], '   ')(items_df).all()


def test_search_text_ignores_surrounding_whitespace(items_df):
    mask = text_search(['name', 'sku'], '  chair ')(items_df)
    assert mask.tolist() == [True, False, False, False]


def test_always_and_never_align_with_index(items_df):
    items_df.index = [10, 20, 30, 40]
    assert always()(items_df).tolist() == [True] * 4
    assert never()(items_df).tolist() == [False] * 4
    assert list(always()(items_df).index) == [10, 20, 30, 40]


def test_text_search_is_case_insensitive(items_df):
    mask = text_search(['name', 'sku'], 'CHAIR')(items_df)
    assert mask.tolist() == [True, False, False, False]


def test_text_search_matches_any_field(items_df):
    mask = text_search(['name', 'sku'], 'xx-9')(items_df)
    assert mask.tolist() == [False, False, False, True]


def test_text_search_empty_text_matches_everything(items_df):
    assert text_search(['name'], '')(items_df).all()
    assert text_search(['name'], None)(items_df).all()


def test_text_search_does_not_treat_text_as_regex(items_df):
    assert not text_search(['name', 'sku'], '.*')(items_df).any()


def test_text_search_skips_null_values_and_missing_columns(items_df):
    mask = text_search(['name', 'supplier'], 'e')(items_df)
    assert mask.tolist() == [True, True, True, False]


def test_field_equals_is_exact(items_df):
    assert field_equals('status', 'low-stock')(items_df).tolist() == [True, False, True, False]
    assert not field_equals('status', 'Low-Stock')(items_df).any()
    assert not field_equals('status', 'low')(items_df).any()


def test_field_equals_all_matches_everything(items_df):
    assert field_equals('status', 'all')(items_df).all()
    assert field_equals('supplier', 'all')(items_df).all()


def test_field_equals_missing_column(items_df):
    assert not field_equals('supplier', 'TechCorp')(items_df).any()
    with pytest.raises(MissingFieldError):
        field_equals('supplier', 'TechCorp', strict=True)(items_df)


def test_all_of_is_conjunction(items_df):
    predicate = all_of(field_equals('status', 'low-stock'), field_equals('location', 'Warehouse B'),
                       text_search(['name'], 'mouse'))
    assert predicate(items_df).tolist() == [False, False, True, False]
    assert all_of()(items_df).all()


def test_build_predicate_combines_search_and_filters(items_df):
    config = FilterConfig(search_text='o', field_filters={'status': 'low-stock', 'category': 'all'})
    mask = build_predicate(INVENTORY_SCHEMA, config)(items_df)
    assert mask.tolist() == [True, False, True, False]


def test_build_predicate_unknown_filter_field(items_df):
    config = FilterConfig(field_filters={'supplier': 'FurniMax'})
    assert not build_predicate(INVENTORY_SCHEMA, config)(items_df).any()
    with pytest.raises(MissingFieldError):
        build_predicate(INVENTORY_SCHEMA, config, strict=True)


def test_build_predicate_ignores_all_on_unknown_field(items_df):
    config = FilterConfig(field_filters={'supplier': 'all'})
    assert build_predicate(INVENTORY_SCHEMA, config, strict=True)(items_df).all()


def test_search_tolerates_alerts_without_item_fields():
    alerts = pd.DataFrame({
        'title': ['Low Stock Alert', 'System Maintenance'],
        'description': ['Item is running low', 'Scheduled maintenance'],
        'item_name': ['Ergonomic Mouse', None],
        'sku': ['EM-006', None],
    })
    mask = build_predicate(ALERTS_SCHEMA, FilterConfig(search_text='mouse'))(alerts)
    assert mask.tolist() == [True, False]
