import logging

import dash
from dash import Output, Input
import dash_mantine_components as dmc

from services.components import empty_message, filter_bar, records_table, stat_card, table_rows
from services.formatting import badge_style_conditions, select_options
from services.settings_metrics import LOG_COLUMNS, USER_COLUMNS, get_settings_view

logger = logging.getLogger(__name__)

dash.register_page(
    __name__,
    path='/settings',
    name='Settings',
    title='Settings'
)


def layout():
    options = get_settings_view()['options']

    return dmc.Container(
        [
            dmc.Title('Settings', order=2),
            dmc.Text('User accounts and system activity.', c='dimmed'),

            dmc.Grid(
                [
                    stat_card('Users', 'settings-kpi-users', note='Registered accounts'),
                    stat_card('Active Users', 'settings-kpi-active-users', note='Can sign in', color='green'),
                    stat_card('Errors', 'settings-kpi-errors', note='In system log', color='red'),
                    stat_card('Warnings', 'settings-kpi-warnings', note='In system log', color='yellow'),
                ],
                gutter='lg',
                mt='md',
            ),

            filter_bar(
                'settings-search',
                'Search users by name or email...',
                [
                    ('settings-filter-status', 'Status', select_options(options['status'], 'All Status')),
                    ('settings-filter-role', 'Role', select_options(options['role'], 'All Roles')),
                ],
            ),

            dmc.Paper(
                dmc.Stack([
                    dmc.Text('User Management', fw=600),
                    records_table('settings-users-table', USER_COLUMNS, badge_style_conditions('status')),
                    dmc.Text('', c='dimmed', ta='center', id='settings-users-empty'),
                ]),
                p='md',
                radius='md',
                withBorder=True,
                mt='lg',
            ),

            dmc.Paper(
                dmc.Stack([
                    dmc.Group([
                        dmc.Text('System Logs', fw=600),
                        dmc.Select(
                            id='settings-filter-log-type',
                            data=select_options(options['type'], 'All Types'),
                            value='all',
                            allowDeselect=False,
                            w=180,
                        ),
                    ], justify='space-between'),
                    records_table('settings-logs-table', LOG_COLUMNS, badge_style_conditions('type')),
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
    Output('settings-users-table', 'data'),
    Output('settings-users-empty', 'children'),
    Output('settings-logs-table', 'data'),
    Output('settings-kpi-users', 'children'),
    Output('settings-kpi-active-users', 'children'),
    Output('settings-kpi-errors', 'children'),
    Output('settings-kpi-warnings', 'children'),
    Input('settings-search', 'value'),
    Input('settings-filter-status', 'value'),
    Input('settings-filter-role', 'value'),
    Input('settings-filter-log-type', 'value'),
)
def update_settings(search_text, status, role, log_type):
    try:
        view = get_settings_view(search_text, status, role, log_type)
    except Exception as e:
        logger.error(f"Settings query failed: {e}")
        return [], 'User data is unavailable.', [], '0', '0', '0', '0'

    stats = view['stats']
    user_rows = table_rows(view['users'], USER_COLUMNS)
    return (
        user_rows,
        empty_message(user_rows),
        table_rows(view['logs'], LOG_COLUMNS),
        f"{stats['total_users']:,}",
        f"{stats['active_users']:,}",
        f"{stats['error_logs']:,}",
        f"{stats['warning_logs']:,}",
    )
