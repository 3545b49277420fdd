import logging

import dash
from dash import Output, Input
import dash_mantine_components as dmc

from services.alert_metrics import ALERT_COLUMNS, get_alert_view
from services.components import empty_message, filter_bar, records_table, stat_card, table_rows
from services.formatting import ALERT_STATUS_COLORS, badge_style_conditions, select_options

logger = logging.getLogger(__name__)

dash.register_page(
    __name__,
    path='/alerts',
    name='Low Stock Alerts',
    title='Alerts'
)


def layout():
    options = get_alert_view()['options']

    return dmc.Container(
        [
            dmc.Title('Alerts & Notifications', order=2),
            dmc.Text('Stock, order, supplier and system alerts.', c='dimmed'),

            dmc.Grid(
                [
                    stat_card('Total Alerts', 'alerts-kpi-total', note='All alerts'),
                    stat_card('Active', 'alerts-kpi-active', note='Require attention', color='red'),
                    stat_card('Critical', 'alerts-kpi-critical', note='Highest severity', color='orange'),
                    stat_card('Resolved', 'alerts-kpi-resolved', note='Closed alerts', color='green'),
                ],
                gutter='lg',
                mt='md',
            ),

            filter_bar(
                'alerts-search',
                'Search alerts, items or SKUs...',
                [
                    ('alerts-filter-severity', 'Severity', select_options(options['severity'], 'All Severity')),
                    ('alerts-filter-type', 'Type', select_options(options['type'], 'All Types')),
                    ('alerts-filter-status', 'Status', select_options(options['status'], 'All Status')),
                ],
            ),

            dmc.Paper(
                dmc.Stack([
                    dmc.Text('Alerts', fw=600),
                    records_table(
                        'alerts-table',
                        ALERT_COLUMNS,
                        badge_style_conditions('severity') + badge_style_conditions('status', ALERT_STATUS_COLORS),
                    ),
                    dmc.Text('', c='dimmed', ta='center', id='alerts-empty'),
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
    Output('alerts-table', 'data'),
    Output('alerts-empty', 'children'),
    Output('alerts-kpi-total', 'children'),
    Output('alerts-kpi-active', 'children'),
    Output('alerts-kpi-critical', 'children'),
    Output('alerts-kpi-resolved', 'children'),
    Input('alerts-search', 'value'),
    Input('alerts-filter-severity', 'value'),
    Input('alerts-filter-type', 'value'),
    Input('alerts-filter-status', 'value'),
)
def update_alerts(search_text, severity, alert_type, status):
    try:
        view = get_alert_view(search_text, severity, alert_type, status)
    except Exception as e:
        logger.error(f"Alerts query failed: {e}")
        return [], 'Alert data is unavailable.', '0', '0', '0', '0'

    stats = view['stats']
    rows = table_rows(view['visible'], ALERT_COLUMNS)
    return (
        rows,
        empty_message(rows),
        f"{stats['total_alerts']:,}",
        f"{stats['active_alerts']:,}",
        f"{stats['critical_alerts']:,}",
        f"{stats['resolved_alerts']:,}",
    )
