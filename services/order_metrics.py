from typing import Dict, Optional

import pandas as pd

from query.aggregates import count, total
from query.config import ALL
from query.engine import Stat, run_query
from query.filtering import apply_filter
from query.predicates import FilterConfig, field_equals
from services.mock_data import load_records
from services.schemas import ORDERS_SCHEMA

ORDER_COLUMNS = [
    'order_number', 'customer_name', 'customer_email', 'item_count',
    'total_amount', 'status', 'payment_status', 'order_date', 'expected_delivery',
]


def _paid_revenue(df: pd.DataFrame) -> float:
    paid = apply_filter(df, field_equals('payment_status', 'paid'))
    return total(paid, 'total_amount')


ORDER_STATS: Dict[str, Stat] = {
    'total_orders': Stat(lambda df: count(df)),
    'pending_orders': Stat(lambda df: count(df, field_equals('status', 'pending'))),
    'processing_orders': Stat(lambda df: count(df, field_equals('status', 'processing'))),
    'total_revenue': Stat(_paid_revenue, default=0.0),
}


def with_item_counts(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df['item_count'] = df['items'].map(len).astype('int64')
    return df


def get_order_view(
    search_text: str = '',
    status: Optional[str] = ALL,
    payment_status: Optional[str] = ALL,
    records: Optional[pd.DataFrame] = None,
) -> Dict[str, object]:
    if records is None:
        records = load_records('orders')

    config = FilterConfig(
        search_text=search_text or '',
        field_filters={'status': status, 'payment_status': payment_status},
    )
    result = run_query(records, ORDERS_SCHEMA, config, ORDER_STATS)
    result['visible'] = with_item_counts(result['visible'])
    result['options'] = {
        'status': ORDERS_SCHEMA.choices('status'),
        'payment_status': ORDERS_SCHEMA.choices('payment_status'),
    }
    return result
