from typing import Dict, Optional

import pandas as pd

from query.aggregates import count, total
from query.config import ALL
from query.engine import Stat, run_query
from query.filtering import distinct_values
from query.predicates import FilterConfig, field_equals
from services.mock_data import load_records
from services.schemas import INVENTORY_SCHEMA

INVENTORY_COLUMNS = [
    'name', 'sku', 'category', 'quantity', 'min_stock', 'price',
    'supplier', 'location', 'status', 'last_updated',
]


def _stock_value(df: pd.DataFrame) -> pd.Series:
    return df['quantity'] * df['price']


INVENTORY_STATS: Dict[str, Stat] = {
    'total_items': Stat(lambda df: count(df)),
    'low_stock_items': Stat(lambda df: count(df, field_equals('status', 'low-stock'))),
    'out_of_stock_items': Stat(lambda df: count(df, field_equals('status', 'out-of-stock'))),
    'total_value': Stat(lambda df: total(df, _stock_value), default=0.0),
}


def get_inventory_view(
    search_text: str = '',
    category: Optional[str] = ALL,
    status: Optional[str] = ALL,
    location: Optional[str] = ALL,
    records: Optional[pd.DataFrame] = None,
) -> Dict[str, object]:
    """Filtered inventory items, headline stats and the select options."""
    if records is None:
        records = load_records('inventory')

    config = FilterConfig(
        search_text=search_text or '',
        field_filters={'category': category, 'status': status, 'location': location},
    )
    result = run_query(records, INVENTORY_SCHEMA, config, INVENTORY_STATS)
    result['options'] = {
        'category': distinct_values(records, 'category'),
        'status': INVENTORY_SCHEMA.choices('status'),
        'location': distinct_values(records, 'location'),
    }
    return result
