import logging

import dash
from dash import Output, Input
import dash_mantine_components as dmc

from services.components import empty_message, filter_bar, records_table, stat_card, table_rows
from services.formatting import badge_style_conditions, format_currency, select_options
from services.supplier_metrics import SUPPLIER_COLUMNS, get_supplier_view

logger = logging.getLogger(__name__)

dash.register_page(
    __name__,
    path='/suppliers',
    name='Suppliers',
    title='Supplier Management'
)


def layout():
    options = get_supplier_view()['options']

    return dmc.Container(
        [
            dmc.Title('Supplier Management', order=2),
            dmc.Text('Supplier relationships, spend and ratings.', c='dimmed'),

            dmc.Grid(
                [
                    stat_card('Total Suppliers', 'suppliers-kpi-total', note='Registered suppliers'),
                    stat_card('Active', 'suppliers-kpi-active', note='Currently supplying', color='green'),
                    stat_card('Total Spent', 'suppliers-kpi-spent', value=format_currency(0, 0), note='Across all suppliers'),
                    stat_card('Avg Rating', 'suppliers-kpi-rating', value='0.0', note='Out of 5.0'),
                ],
                gutter='lg',
                mt='md',
            ),

            filter_bar(
                'suppliers-search',
                'Search by name, contact or email...',
                [
                    ('suppliers-filter-category', 'Category', select_options(options['category'], 'All Categories')),
                    ('suppliers-filter-status', 'Status', select_options(options['status'], 'All Status')),
                ],
            ),

            dmc.Paper(
                dmc.Stack([
                    dmc.Text('Suppliers', fw=600),
                    records_table('suppliers-table', SUPPLIER_COLUMNS, badge_style_conditions('status')),
                    dmc.Text('', c='dimmed', ta='center', id='suppliers-empty'),
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
    Output('suppliers-table', 'data'),
    Output('suppliers-empty', 'children'),
    Output('suppliers-kpi-total', 'children'),
    Output('suppliers-kpi-active', 'children'),
    Output('suppliers-kpi-spent', 'children'),
    Output('suppliers-kpi-rating', 'children'),
    Input('suppliers-search', 'value'),
    Input('suppliers-filter-category', 'value'),
    Input('suppliers-filter-status', 'value'),
)
def update_suppliers(search_text, category, status):
    try:
        view = get_supplier_view(search_text, category, status)
    except Exception as e:
        logger.error(f"Suppliers query failed: {e}")
        return [], 'Supplier data is unavailable.', '0', '0', format_currency(0, 0), '0.0'

    stats = view['stats']
    rows = table_rows(view['visible'], SUPPLIER_COLUMNS)
    return (
        rows,
        empty_message(rows),
        f"{stats['total_suppliers']:,}",
        f"{stats['active_suppliers']:,}",
        format_currency(stats['total_spent'], 0),
        f"{stats['average_rating']:.1f}",
    )
