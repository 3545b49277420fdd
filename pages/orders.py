import logging

import dash
from dash import Output, Input
import dash_mantine_components as dmc

from services.components import empty_message, filter_bar, records_table, stat_card, table_rows
from services.formatting import badge_style_conditions, format_currency, select_options
from services.order_metrics import ORDER_COLUMNS, get_order_view

logger = logging.getLogger(__name__)

dash.register_page(
    __name__,
    path='/orders',
    name='Orders',
    title='Order Management'
)


def layout():
    options = get_order_view()['options']

    return dmc.Container(
        [
            dmc.Title('Order Management', order=2),
            dmc.Text('Customer orders, fulfilment and payment status.', c='dimmed'),

            dmc.Grid(
                [
                    stat_card('Total Orders', 'orders-kpi-total', note='All time orders'),
                    stat_card('Pending', 'orders-kpi-pending', note='Awaiting processing', color='yellow'),
                    stat_card('Processing', 'orders-kpi-processing', note='Being prepared', color='blue'),
                    stat_card('Revenue', 'orders-kpi-revenue', value=format_currency(0), note='From paid orders'),
                ],
                gutter='lg',
                mt='md',
            ),

            filter_bar(
                'orders-search',
                'Search by order number, customer or email...',
                [
                    ('orders-filter-status', 'Status', select_options(options['status'], 'All Status')),
                    ('orders-filter-payment', 'Payment', select_options(options['payment_status'], 'All Payments')),
                ],
            ),

            dmc.Paper(
                dmc.Stack([
                    dmc.Text('Orders', fw=600),
                    records_table(
                        'orders-table',
                        ORDER_COLUMNS,
                        badge_style_conditions('status') + badge_style_conditions('payment_status'),
                    ),
                    dmc.Text('', c='dimmed', ta='center', id='orders-empty'),
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
    Output('orders-table', 'data'),
    Output('orders-empty', 'children'),
    Output('orders-kpi-total', 'children'),
    Output('orders-kpi-pending', 'children'),
    Output('orders-kpi-processing', 'children'),
    Output('orders-kpi-revenue', 'children'),
    Input('orders-search', 'value'),
    Input('orders-filter-status', 'value'),
    Input('orders-filter-payment', 'value'),
)
def update_orders(search_text, status, payment_status):
    try:
        view = get_order_view(search_text, status, payment_status)
    except Exception as e:
        logger.error(f"Orders query failed: {e}")
        return [], 'Order data is unavailable.', '0', '0', '0', format_currency(0)

    stats = view['stats']
    rows = table_rows(view['visible'], ORDER_COLUMNS)
    return (
        rows,
        empty_message(rows),
        f"{stats['total_orders']:,}",
        f"{stats['pending_orders']:,}",
        f"{stats['processing_orders']:,}",
        format_currency(stats['total_revenue']),
    )
