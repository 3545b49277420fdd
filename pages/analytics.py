import logging

import dash
from dash import dcc, Output, Input
import dash_mantine_components as dmc

from services.analytics_metrics import DEFAULT_TIME_RANGE, get_analytics_view
from services.components import TIME_RANGE_OPTIONS, filter_bar, records_table, stat_card, table_rows
from services.dashboard_charts import METRIC_LABELS, build_category_share_chart, build_period_bar_chart
from services.formatting import format_currency, format_percent, growth_color

logger = logging.getLogger(__name__)

TOP_PRODUCT_COLUMNS = ['name', 'category', 'sales', 'revenue', 'growth']

dash.register_page(
    __name__,
    path='/analytics',
    name='Analytics',
    title='Analytics Dashboard'
)


def _growth_conditions():
    return [
        {'if': {'filter_query': '{growth} >= 0', 'column_id': 'growth'}, 'color': '#2b8a3e', 'fontWeight': 600},
        {'if': {'filter_query': '{growth} < 0', 'column_id': 'growth'}, 'color': '#c92a2a', 'fontWeight': 600},
    ]


def layout():
    options = get_analytics_view()['options']
    metric_options = [{'value': m, 'label': METRIC_LABELS.get(m, m.title())} for m in options['metric']]

    return dmc.Container(
        [
            dmc.Title('Analytics Dashboard', order=2),
            dmc.Text('Period-over-period growth and product performance.', c='dimmed'),

            dmc.Grid(
                [
                    stat_card('Revenue', 'analytics-kpi-revenue', value=format_currency(0, 0),
                              note_id='analytics-kpi-revenue-growth'),
                    stat_card('Orders', 'analytics-kpi-orders', note_id='analytics-kpi-orders-growth'),
                    stat_card('Customers', 'analytics-kpi-customers', note_id='analytics-kpi-customers-growth'),
                    stat_card('Top Category', 'analytics-kpi-top-category', value='-',
                              note_id='analytics-kpi-top-category-share'),
                ],
                gutter='lg',
                mt='md',
            ),

            filter_bar(
                None,
                '',
                [
                    ('analytics-time-range', 'Time range', TIME_RANGE_OPTIONS[:-1], DEFAULT_TIME_RANGE),
                    ('analytics-metric', 'Metric', metric_options, 'revenue'),
                ],
            ),

            dmc.Grid(
                [
                    dmc.GridCol(
                        dmc.Paper(
                            dcc.Graph(id='analytics-trend-chart', figure={}, config={'displayModeBar': False}),
                            p='md',
                            radius='md',
                            withBorder=True,
                        ),
                        span={'base': 12, 'md': 7},
                    ),
                    dmc.GridCol(
                        dmc.Paper(
                            dcc.Graph(id='analytics-category-chart', figure={}, config={'displayModeBar': False}),
                            p='md',
                            radius='md',
                            withBorder=True,
                        ),
                        span={'base': 12, 'md': 5},
                    ),
                ],
                gutter='lg',
                mt='lg',
            ),

            dmc.Paper(
                dmc.Stack([
                    dmc.Text('Top Products', fw=600),
                    records_table('analytics-top-products', TOP_PRODUCT_COLUMNS, _growth_conditions()),
                ]),
                p='md',
                radius='md',
                withBorder=True,
                mt='lg',
            ),
        ],
        size='xl',
        py='lg'
    )


@dash.callback(
    Output('analytics-trend-chart', 'figure'),
    Output('analytics-category-chart', 'figure'),
    Output('analytics-top-products', 'data'),
    Output('analytics-kpi-revenue', 'children'),
    Output('analytics-kpi-revenue-growth', 'children'),
    Output('analytics-kpi-revenue-growth', 'c'),
    Output('analytics-kpi-orders', 'children'),
    Output('analytics-kpi-orders-growth', 'children'),
    Output('analytics-kpi-orders-growth', 'c'),
    Output('analytics-kpi-customers', 'children'),
    Output('analytics-kpi-customers-growth', 'children'),
    Output('analytics-kpi-customers-growth', 'c'),
    Output('analytics-kpi-top-category', 'children'),
    Output('analytics-kpi-top-category-share', 'children'),
    Input('analytics-time-range', 'value'),
    Input('analytics-metric', 'value'),
)
def update_analytics(time_range, metric):
    try:
        view = get_analytics_view(time_range, metric)
    except Exception as e:
        logger.error(f"Analytics query failed: {e}")
        empty_fig = build_period_bar_chart(None)
        return (empty_fig, build_category_share_chart(None), [],
                format_currency(0, 0), '', 'dimmed', '0', '', 'dimmed', '0', '', 'dimmed', '-', '')

    stats = view['stats']
    categories = view['categories']
    if categories.empty:
        top_category, top_share = '-', ''
    else:
        top_category = categories['category'].iloc[0]
        top_share = f"{format_percent(categories['share'].iloc[0], signed=False)} of product revenue"

    def _growth_text(value):
        return f"{format_percent(value)} from last period"

    return (
        build_period_bar_chart(view['series'], view['metric'], f"{METRIC_LABELS[view['metric']]} Trend"),
        build_category_share_chart(categories),
        table_rows(view['top_products'], TOP_PRODUCT_COLUMNS),
        format_currency(stats['total_revenue'], 0),
        _growth_text(stats['revenue_growth']),
        growth_color(stats['revenue_growth']),
        f"{stats['total_orders']:,}",
        _growth_text(stats['orders_growth']),
        growth_color(stats['orders_growth']),
        f"{stats['total_customers']:,}",
        _growth_text(stats['customers_growth']),
        growth_color(stats['customers_growth']),
        top_category,
        top_share,
    )
