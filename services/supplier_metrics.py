from typing import Dict, Optional

import pandas as pd

from query.aggregates import average, count, total
from query.config import ALL
from query.engine import Stat, run_query
from query.filtering import distinct_values
from query.predicates import FilterConfig, field_equals
from services.mock_data import load_records
from services.schemas import SUPPLIERS_SCHEMA

SUPPLIER_COLUMNS = [
    'name', 'contact_person', 'email', 'phone', 'category', 'rating',
    'status', 'total_orders', 'total_spent', 'last_order_date', 'payment_terms',
]

SUPPLIER_STATS: Dict[str, Stat] = {
    'total_suppliers': Stat(lambda df: count(df)),
    'active_suppliers': Stat(lambda df: count(df, field_equals('status', 'active'))),
    'total_spent': Stat(lambda df: total(df, 'total_spent'), default=0.0),
    'average_rating': Stat(lambda df: average(df, 'rating'), default=0.0),
}


def get_supplier_view(
    search_text: str = '',
    category: Optional[str] = ALL,
    status: Optional[str] = ALL,
    records: Optional[pd.DataFrame] = None,
) -> Dict[str, object]:
    if records is None:
        records = load_records('suppliers')

    config = FilterConfig(
        search_text=search_text or '',
        field_filters={'category': category, 'status': status},
    )
    result = run_query(records, SUPPLIERS_SCHEMA, config, SUPPLIER_STATS)
    result['options'] = {
        'category': distinct_values(records, 'category'),
        'status': SUPPLIERS_SCHEMA.choices('status'),
    }
    return result
