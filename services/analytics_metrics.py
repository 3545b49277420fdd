from typing import Dict, Optional

import pandas as pd

from query.aggregates import group_totals, period_over_period, share_of_max, total
from query.engine import Stat, compute_stats
from query.filtering import periods_for, trailing
from services.mock_data import load_records

DEFAULT_TIME_RANGE = '3months'
METRICS = ('revenue', 'orders', 'customers')

ANALYTICS_STATS: Dict[str, Stat] = {
    'revenue_growth': Stat(lambda df: period_over_period(df, 'revenue'), default=0.0),
    'orders_growth': Stat(lambda df: period_over_period(df, 'orders'), default=0.0),
    'customers_growth': Stat(lambda df: period_over_period(df, 'customers'), default=0.0),
    'total_revenue': Stat(lambda df: total(df, 'revenue'), default=0.0),
    'total_orders': Stat(lambda df: int(total(df, 'orders'))),
    'total_customers': Stat(lambda df: int(total(df, 'customers'))),
}


def get_analytics_view(
    time_range: Optional[str] = DEFAULT_TIME_RANGE,
    metric: Optional[str] = 'revenue',
    periods: Optional[pd.DataFrame] = None,
    products: Optional[pd.DataFrame] = None,
) -> Dict[str, object]:
    """Period growth, totals and top products for the analytics page.

    Growth compares the last period of the window with the one before it.
    """
    if periods is None:
        periods = load_records('analytics_periods')
    if products is None:
        products = load_records('top_products')
    if metric not in METRICS:
        metric = 'revenue'

    series = trailing(periods, periods_for(time_range))
    series['metric_share'] = share_of_max(series, metric)

    return {
        'series': series,
        'metric': metric,
        'stats': compute_stats(series, series, ANALYTICS_STATS, 'analytics_periods'),
        'top_products': products,
        'categories': group_totals(products, 'category', 'revenue'),
        'options': {'metric': list(METRICS)},
    }
