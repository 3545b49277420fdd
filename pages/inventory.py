import logging

import dash
from dash import Output, Input
import dash_mantine_components as dmc

from services.components import empty_message, filter_bar, records_table, stat_card, table_rows
from services.formatting import badge_style_conditions, format_currency, select_options
from services.inventory_metrics import INVENTORY_COLUMNS, get_inventory_view

logger = logging.getLogger(__name__)

dash.register_page(
    __name__,
    path='/inventory',
    name='Inventory',
    title='Inventory Management'
)


def layout():
    initial = get_inventory_view()
    options = initial['options']

    return dmc.Container(
        [
            dmc.Title('Inventory Management', order=2),
            dmc.Text('Stock levels, value and availability across warehouses.', c='dimmed'),

            # KPI Cards Row
            dmc.Grid(
                [
                    stat_card('Total Items', 'inventory-kpi-total-items', note='Active inventory items'),
                    stat_card('Low Stock', 'inventory-kpi-low-stock', note='Items below minimum stock', color='yellow'),
                    stat_card('Out of Stock', 'inventory-kpi-out-of-stock', note='Items needing restock', color='red'),
                    stat_card('Total Value', 'inventory-kpi-total-value', value=format_currency(0), note='Quantity x unit price'),
                ],
                gutter='lg',
                mt='md',
            ),

            filter_bar(
                'inventory-search',
                'Search by name or SKU...',
                [
                    ('inventory-filter-category', 'Category', select_options(options['category'], 'All Categories')),
                    ('inventory-filter-status', 'Status', select_options(options['status'], 'All Status')),
                    ('inventory-filter-location', 'Location', select_options(options['location'], 'All Locations')),
                ],
            ),

            dmc.Paper(
                dmc.Stack([
                    dmc.Text('Inventory Items', fw=600),
                    records_table('inventory-table', INVENTORY_COLUMNS, badge_style_conditions('status')),
                    dmc.Text('', c='dimmed', ta='center', id='inventory-empty'),
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
    Output('inventory-table', 'data'),
    Output('inventory-empty', 'children'),
    Output('inventory-kpi-total-items', 'children'),
    Output('inventory-kpi-low-stock', 'children'),
    Output('inventory-kpi-out-of-stock', 'children'),
    Output('inventory-kpi-total-value', 'children'),
    Input('inventory-search', 'value'),
    Input('inventory-filter-category', 'value'),
    Input('inventory-filter-status', 'value'),
    Input('inventory-filter-location', 'value'),
)
def update_inventory(search_text, category, status, location):
    try:
        view = get_inventory_view(search_text, category, status, location)
    except Exception as e:
        logger.error(f"Inventory query failed: {e}")
        return [], 'Inventory data is unavailable.', '0', '0', '0', format_currency(0)

    stats = view['stats']
    rows = table_rows(view['visible'], INVENTORY_COLUMNS)
    return (
        rows,
        empty_message(rows),
        f"{stats['total_items']:,}",
        f"{stats['low_stock_items']:,}",
        f"{stats['out_of_stock_items']:,}",
        format_currency(stats['total_value']),
    )
