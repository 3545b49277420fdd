from typing import Dict, Optional

import pandas as pd

from query.aggregates import count
from query.config import ALL
from query.engine import Stat, run_query
from query.predicates import FilterConfig, field_equals
from services.mock_data import load_records
from services.schemas import ALERTS_SCHEMA

ALERT_COLUMNS = [
    'title', 'description', 'item_name', 'sku', 'current_stock', 'min_stock',
    'severity', 'type', 'status', 'priority', 'timestamp',
]

ALERT_STATS: Dict[str, Stat] = {
    'total_alerts': Stat(lambda df: count(df)),
    'active_alerts': Stat(lambda df: count(df, field_equals('status', 'active'))),
    'critical_alerts': Stat(lambda df: count(df, field_equals('severity', 'critical'))),
    'resolved_alerts': Stat(lambda df: count(df, field_equals('status', 'resolved'))),
}


def get_alert_view(
    search_text: str = '',
    severity: Optional[str] = ALL,
    alert_type: Optional[str] = ALL,
    status: Optional[str] = ALL,
    records: Optional[pd.DataFrame] = None,
) -> Dict[str, object]:
    """Alerts matching the search and selects.

    Search covers title, description, item name and SKU; system, order and
    supplier alerts carry no item name or SKU and simply don't match on them.
    """
    if records is None:
        records = load_records('alerts')

    config = FilterConfig(
        search_text=search_text or '',
        field_filters={'severity': severity, 'type': alert_type, 'status': status},
    )
    result = run_query(records, ALERTS_SCHEMA, config, ALERT_STATS)
    result['options'] = {
        'severity': ALERTS_SCHEMA.choices('severity'),
        'type': ALERTS_SCHEMA.choices('type'),
        'status': ALERTS_SCHEMA.choices('status'),
    }
    return result
