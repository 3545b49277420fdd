import logging

import dash
from dash import dcc, Output, Input
import dash_mantine_components as dmc

from services.components import (
    TIME_RANGE_OPTIONS,
    empty_message,
    filter_bar,
    records_table,
    stat_card,
    table_rows,
)
from services.dashboard_charts import build_period_bar_chart
from services.formatting import (
    badge_style_conditions,
    format_currency,
    format_percent,
    growth_color,
    select_options,
)
from services.report_metrics import DEFAULT_TIME_RANGE, REPORT_COLUMNS, get_report_view

logger = logging.getLogger(__name__)

dash.register_page(
    __name__,
    path='/reports',
    name='Reports',
    title='Reports & Analytics'
)


def layout():
    options = get_report_view()['options']

    return dmc.Container(
        [
            dmc.Title('Reports & Analytics', order=2),
            dmc.Text('Generated reports and monthly performance trends.', c='dimmed'),

            dmc.Grid(
                [
                    stat_card('Total Revenue', 'reports-kpi-revenue', value=format_currency(0, 0),
                              note_id='reports-kpi-avg-revenue'),
                    stat_card('Revenue Trend', 'reports-kpi-revenue-change', value=format_percent(0),
                              note='vs previous month'),
                    stat_card('Orders Trend', 'reports-kpi-orders-change', value=format_percent(0),
                              note='vs previous month'),
                    stat_card('Reports Ready', 'reports-kpi-ready', note_id='reports-kpi-total'),
                ],
                gutter='lg',
                mt='md',
            ),

            filter_bar(
                None,
                '',
                [
                    ('reports-time-range', 'Time range', TIME_RANGE_OPTIONS, DEFAULT_TIME_RANGE),
                    ('reports-filter-type', 'Report type', select_options(options['type'], 'All Reports')),
                ],
            ),

            dmc.Grid(
                [
                    dmc.GridCol(
                        dmc.Paper(
                            dcc.Graph(id='reports-revenue-chart', figure={}, config={'displayModeBar': False}),
                            p='md',
                            radius='md',
                            withBorder=True,
                        ),
                        span={'base': 12, 'md': 7},
                    ),
                    dmc.GridCol(
                        dmc.Paper(
                            dcc.Graph(id='reports-orders-chart', figure={}, config={'displayModeBar': False}),
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
                    dmc.Group([
                        dmc.Text('Recent Reports', fw=600),
                        dmc.Text('', size='sm', c='dimmed', id='reports-latest-items'),
                    ], justify='space-between'),
                    records_table('reports-table', REPORT_COLUMNS, badge_style_conditions('status')),
                    dmc.Text('', c='dimmed', ta='center', id='reports-empty'),
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
    Output('reports-table', 'data'),
    Output('reports-empty', 'children'),
    Output('reports-revenue-chart', 'figure'),
    Output('reports-orders-chart', 'figure'),
    Output('reports-kpi-revenue', 'children'),
    Output('reports-kpi-avg-revenue', 'children'),
    Output('reports-kpi-revenue-change', 'children'),
    Output('reports-kpi-revenue-change', 'c'),
    Output('reports-kpi-orders-change', 'children'),
    Output('reports-kpi-orders-change', 'c'),
    Output('reports-kpi-ready', 'children'),
    Output('reports-kpi-total', 'children'),
    Output('reports-latest-items', 'children'),
    Input('reports-time-range', 'value'),
    Input('reports-filter-type', 'value'),
)
def update_reports(time_range, report_type):
    try:
        view = get_report_view(report_type, time_range)
    except Exception as e:
        logger.error(f"Reports query failed: {e}")
        empty_fig = build_period_bar_chart(None)
        return ([], 'Report data is unavailable.', empty_fig, empty_fig,
                format_currency(0, 0), '', format_percent(0), 'dimmed',
                format_percent(0), 'dimmed', '0', '', '')

    stats = view['stats']
    series = view['series']
    rows = table_rows(view['visible'], REPORT_COLUMNS)
    return (
        rows,
        empty_message(rows),
        build_period_bar_chart(series, 'revenue', 'Revenue by Month'),
        build_period_bar_chart(series, 'orders', 'Orders by Month'),
        format_currency(stats['total_revenue'], 0),
        f"Avg {format_currency(stats['avg_revenue'], 0)} per month",
        format_percent(stats['revenue_change']),
        growth_color(stats['revenue_change']),
        format_percent(stats['orders_change']),
        growth_color(stats['orders_change']),
        f"{stats['ready_reports']:,}",
        f"of {stats['total_reports']:,} reports",
        f"{stats['latest_items']:,} items sold last month",
    )
