import logging

import dash
from dash import dcc
import dash_mantine_components as dmc

from services.alert_metrics import get_alert_view
from services.components import records_table, stat_card, table_rows
from services.dashboard_charts import build_period_bar_chart
from services.formatting import badge_style_conditions, format_currency, format_percent
from services.inventory_metrics import get_inventory_view
from services.order_metrics import get_order_view
from services.report_metrics import get_report_view

logger = logging.getLogger(__name__)

ACTIVE_ALERT_COLUMNS = ['title', 'item_name', 'severity', 'timestamp']
RECENT_ORDER_COLUMNS = ['order_number', 'customer_name', 'total_amount', 'status']
RECENT_ORDER_LIMIT = 5

dash.register_page(__name__, path='/', name='Dashboard', title='Dashboard')


def _load_summary():
    inventory = get_inventory_view()['stats']
    orders = get_order_view()
    alerts = get_alert_view(status='active')
    reports = get_report_view(time_range='6months')
    return inventory, orders, alerts, reports


def layout():
    try:
        inventory, orders, alerts, reports = _load_summary()
    except Exception as e:
        logger.error(f"Dashboard summary failed: {e}")
        return dmc.Container(
            [
                dmc.Title('Dashboard', order=2),
                dmc.Text('Dashboard data is unavailable.', c='dimmed'),
            ],
            size='xl',
            py='lg'
        )

    order_stats = orders['stats']
    report_stats = reports['stats']
    recent_orders = orders['visible'].sort_values('order_date', ascending=False).head(RECENT_ORDER_LIMIT)

    return dmc.Container(
        [
            dmc.Title('Dashboard', order=2),
            dmc.Text('Inventory, orders and alerts at a glance.', c='dimmed'),

            dmc.Grid(
                [
                    stat_card('Inventory Value', 'home-kpi-value',
                              value=format_currency(inventory['total_value']),
                              note=f"{inventory['total_items']:,} items in stock"),
                    stat_card('Low Stock', 'home-kpi-low-stock', value=f"{inventory['low_stock_items']:,}",
                              note=f"{inventory['out_of_stock_items']:,} out of stock", color='orange'),
                    stat_card('Revenue', 'home-kpi-revenue', value=format_currency(order_stats['total_revenue']),
                              note=f"{order_stats['pending_orders']:,} orders pending"),
                    stat_card('Active Alerts', 'home-kpi-alerts', value=f"{alerts['stats']['active_alerts']:,}",
                              note=f"{alerts['stats']['critical_alerts']:,} critical", color='red'),
                ],
                gutter='lg',
                mt='md',
            ),

            dmc.Grid(
                [
                    dmc.GridCol(
                        dmc.Paper(
                            dmc.Stack([
                                dmc.Group([
                                    dmc.Text('Revenue Trend', fw=600),
                                    dmc.Text(f"{format_percent(report_stats['revenue_change'])} vs previous month",
                                             size='sm', c='dimmed'),
                                ], justify='space-between'),
                                dcc.Graph(
                                    id='home-revenue-chart',
                                    figure=build_period_bar_chart(reports['series'], 'revenue', 'Revenue by Month'),
                                    config={'displayModeBar': False},
                                ),
                            ]),
                            p='md',
                            radius='md',
                            withBorder=True,
                        ),
                        span={'base': 12, 'md': 7},
                    ),
                    dmc.GridCol(
                        dmc.Paper(
                            dmc.Stack([
                                dmc.Text('Active Alerts', fw=600),
                                records_table('home-alerts-table', ACTIVE_ALERT_COLUMNS,
                                              badge_style_conditions('severity'),
                                              data=table_rows(alerts['visible'], ACTIVE_ALERT_COLUMNS)),
                            ]),
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
                    dmc.Text('Recent Orders', fw=600),
                    records_table('home-orders-table', RECENT_ORDER_COLUMNS, badge_style_conditions('status'),
                                  data=table_rows(recent_orders, RECENT_ORDER_COLUMNS)),
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
