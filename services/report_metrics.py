from typing import Dict, Optional

import pandas as pd

from query.aggregates import average, count, period_over_period, share_of_max, total
from query.config import ALL
from query.engine import Stat, compute_stats, run_query
from query.filtering import periods_for, trailing
from query.predicates import FilterConfig, field_equals
from services.mock_data import load_records
from services.schemas import REPORTS_SCHEMA

DEFAULT_TIME_RANGE = '6months'

REPORT_COLUMNS = ['name', 'type', 'status', 'format', 'size', 'last_generated']


def _latest(column: str):
    def _compute(df: pd.DataFrame):
        if df.empty:
            return 0
        return df[column].iloc[-1].item()
    return _compute


REPORT_STATS: Dict[str, Stat] = {
    'total_reports': Stat(lambda df: count(df)),
    'ready_reports': Stat(lambda df: count(df, field_equals('status', 'ready'))),
}

PERIOD_STATS: Dict[str, Stat] = {
    'total_revenue': Stat(lambda df: total(df, 'revenue'), default=0.0),
    'avg_revenue': Stat(lambda df: average(df, 'revenue'), default=0.0),
    'revenue_change': Stat(lambda df: period_over_period(df, 'revenue'), default=0.0),
    'orders_change': Stat(lambda df: period_over_period(df, 'orders'), default=0.0),
    'latest_items': Stat(_latest('items')),
}


def get_period_series(time_range: Optional[str] = DEFAULT_TIME_RANGE, records: Optional[pd.DataFrame] = None) -> pd.DataFrame:
    """Monthly report series over the trailing window, with bar widths."""
    if records is None:
        records = load_records('report_periods')
    series = trailing(records, periods_for(time_range))
    series['revenue_share'] = share_of_max(series, 'revenue')
    return series


def get_report_view(
    report_type: Optional[str] = ALL,
    time_range: Optional[str] = DEFAULT_TIME_RANGE,
    records: Optional[pd.DataFrame] = None,
    periods: Optional[pd.DataFrame] = None,
) -> Dict[str, object]:
    if records is None:
        records = load_records('reports')

    config = FilterConfig(field_filters={'type': report_type})
    result = run_query(records, REPORTS_SCHEMA, config, REPORT_STATS)

    series = get_period_series(time_range, periods)
    result['stats'].update(compute_stats(series, series, PERIOD_STATS, 'report_periods'))
    result['series'] = series
    result['options'] = {'type': REPORTS_SCHEMA.choices('type')}
    return result
