"""Layout building blocks shared by the dashboard pages."""
from typing import Dict, List, Optional, Sequence, Tuple

import dash_mantine_components as dmc
import pandas as pd
from dash import dash_table

from query.config import ALL, EMPTY_RESULT_MESSAGE

TIME_RANGE_OPTIONS = [
    {'value': '1month', 'label': 'Last Month'},
    {'value': '3months', 'label': 'Last 3 Months'},
    {'value': '6months', 'label': 'Last 6 Months'},
    {'value': '1year', 'label': 'Last Year'},
    {'value': 'custom', 'label': 'Custom Range'},
]


def stat_card(title: str, value_id: str, value: str = '0', note: str = '', note_id: Optional[str] = None, color: Optional[str] = None):
    note_props = {'id': note_id} if note_id else {}
    value_props = {'c': color} if color else {}
    return dmc.GridCol(
        dmc.Paper(
            dmc.Stack([
                dmc.Text(title, size='sm', c='dimmed'),
                dmc.Text(value, size='xl', fw=600, id=value_id, **value_props),
                dmc.Text(note, size='xs', c='dimmed', **note_props),
            ], gap=4),
            p='md',
            radius='md',
            withBorder=True,
        ),
        span={'base': 12, 'sm': 6, 'lg': 3},
    )


def filter_bar(
    search_id: Optional[str],
    search_placeholder: str,
    selects: Sequence[Tuple],
):
    """Search input followed by selects.

    Each select is ``(id, label, options)`` or ``(id, label, options, value)``;
    without a value it starts on the first option (the ``all`` sentinel).
    """
    children = []
    if search_id:
        children.append(
            dmc.TextInput(
                id=search_id,
                placeholder=search_placeholder,
                value='',
                style={'flex': 1, 'minWidth': 220},
            )
        )
    for select in selects:
        select_id, label, options = select[:3]
        if len(select) > 3:
            default = select[3]
        else:
            default = options[0]['value'] if options else ALL
        children.append(
            dmc.Select(
                id=select_id,
                data=options,
                value=default,
                placeholder=label,
                allowDeselect=False,
                w=180,
            )
        )
    return dmc.Paper(
        dmc.Group(children, gap='md', wrap='wrap', align='flex-end'),
        p='md',
        radius='md',
        withBorder=True,
        mt='md',
    )


def records_table(
    table_id: str,
    columns: Sequence[str],
    style_conditions: Optional[List[Dict[str, object]]] = None,
    data: Optional[List[Dict[str, object]]] = None,
):
    return dash_table.DataTable(
        id=table_id,
        columns=[{'name': c.replace('_', ' ').title(), 'id': c} for c in columns],
        data=data or [],
        sort_action='native',
        page_action='none',
        style_table={'overflowX': 'auto'},
        style_cell={'fontFamily': 'Inter, sans-serif', 'fontSize': 13, 'padding': '6px 10px', 'textAlign': 'left'},
        style_header={'fontWeight': 600, 'backgroundColor': '#f8f9fa'},
        style_data_conditional=style_conditions or [],
    )


def table_rows(df: pd.DataFrame, columns: Sequence[str]) -> List[Dict[str, object]]:
    """DataTable rows for ``columns``; nulls become empty cells."""
    if df is None or df.empty:
        return []
    present = [c for c in columns if c in df.columns]
    frame = df[present].astype(object).where(df[present].notna(), '')
    return frame.to_dict('records')


def empty_message(rows: List[Dict[str, object]]) -> str:
    return EMPTY_RESULT_MESSAGE if not rows else ''
