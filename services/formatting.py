"""Display helpers shared by the dashboard pages."""
from typing import Dict, Iterable, List, Optional

from query.config import ALL, CURRENCY_SYMBOL, PERCENT_DECIMALS

# Badge colors keyed by field, then by value. Values missing here render grey.
BADGE_COLORS: Dict[str, Dict[str, str]] = {
    'status': {
        'in-stock': 'green',
        'low-stock': 'yellow',
        'out-of-stock': 'red',
        'pending': 'yellow',
        'processing': 'blue',
        'shipped': 'purple',
        'delivered': 'green',
        'cancelled': 'red',
        'active': 'green',
        'inactive': 'red',
        'acknowledged': 'yellow',
        'resolved': 'green',
        'ready': 'green',
        'generating': 'yellow',
        'failed': 'red',
    },
    'payment_status': {
        'paid': 'green',
        'pending': 'yellow',
        'failed': 'red',
    },
    'severity': {
        'critical': 'red',
        'high': 'orange',
        'medium': 'yellow',
        'low': 'blue',
    },
    'type': {
        'info': 'blue',
        'warning': 'yellow',
        'error': 'red',
        'success': 'green',
    },
}

# Active alerts are urgent, unlike active suppliers or users.
ALERT_STATUS_COLORS = {
    'active': 'red',
    'acknowledged': 'yellow',
    'resolved': 'green',
}

_CELL_COLORS = {
    'green': ('#ebfbee', '#2b8a3e'),
    'yellow': ('#fff9db', '#e67700'),
    'red': ('#fff5f5', '#c92a2a'),
    'orange': ('#fff4e6', '#d9480f'),
    'blue': ('#e7f5ff', '#1864ab'),
    'purple': ('#f3f0ff', '#5f3dc4'),
    'gray': ('#f8f9fa', '#495057'),
}

_LABEL_OVERRIDES = {
    'PDF': 'PDF',
    'CSV': 'CSV',
}


def badge_label(value: Optional[str]) -> str:
    """``low-stock`` -> ``Low Stock``."""
    if not value:
        return 'Unknown'
    if value in _LABEL_OVERRIDES:
        return _LABEL_OVERRIDES[value]
    return value.replace('-', ' ').replace('_', ' ').title()


def badge_color(field: str, value: Optional[str], colors: Optional[Dict[str, str]] = None) -> str:
    palette = colors if colors is not None else BADGE_COLORS.get(field, {})
    return palette.get(value, 'gray')


def format_currency(amount: Optional[float], decimals: int = 2) -> str:
    if amount is None:
        return 'n/a'
    return f"{CURRENCY_SYMBOL}{amount:,.{decimals}f}"


def format_percent(value: Optional[float], signed: bool = True) -> str:
    if value is None:
        return 'n/a'
    if signed:
        return f"{value:+.{PERCENT_DECIMALS}f}%"
    return f"{value:.{PERCENT_DECIMALS}f}%"


def growth_color(value: Optional[float]) -> str:
    if value is None:
        return 'dimmed'
    return 'green' if value >= 0 else 'red'


def select_options(values: Iterable[object], all_label: str) -> List[Dict[str, str]]:
    """Options for a ``dmc.Select``, led by the ``all`` sentinel."""
    options = [{'value': ALL, 'label': all_label}]
    options.extend({'value': str(v), 'label': badge_label(str(v))} for v in values)
    return options


def badge_style_conditions(
    column: str,
    colors: Optional[Dict[str, str]] = None,
    field: Optional[str] = None,
) -> List[Dict[str, object]]:
    """``style_data_conditional`` entries coloring a DataTable column like a badge."""
    palette = colors if colors is not None else BADGE_COLORS.get(field or column, {})
    conditions = []
    for value, color in palette.items():
        background, text = _CELL_COLORS.get(color, _CELL_COLORS['gray'])
        conditions.append({
            'if': {'filter_query': f'{{{column}}} = "{value}"', 'column_id': column},
            'backgroundColor': background,
            'color': text,
            'fontWeight': 600,
        })
    return conditions
