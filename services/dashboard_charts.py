import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from query.config import CURRENCY_SYMBOL

METRIC_COLORS = {
    'revenue': '#1864ab',
    'orders': '#2f9e44',
    'customers': '#7048e8',
    'items': '#f08c00',
}

METRIC_LABELS = {
    'revenue': 'Revenue',
    'orders': 'Orders',
    'customers': 'Customers',
    'items': 'Items',
}


def _build_empty_figure(message: str, title: str, height: int = 400) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        x=0.5,
        y=0.5,
        xref="paper",
        yref="paper",
        showarrow=False,
        font=dict(size=14, color="gray"),
    )
    fig.update_layout(title=title, template="plotly_white", height=height)
    return fig


def build_period_bar_chart(series: pd.DataFrame, metric: str = 'revenue', title: str = None) -> go.Figure:
    """Bar chart of one metric per period; hover shows the share of the best period."""
    label = METRIC_LABELS.get(metric, metric.title())
    title = title or f"{label} by Period"

    if series is None or series.empty or metric not in series.columns:
        return _build_empty_figure("No data available for the selected range.", title)

    if metric == 'revenue':
        value_format = f"{CURRENCY_SYMBOL}%{{y:,.0f}}"
        tickprefix = CURRENCY_SYMBOL
    else:
        value_format = "%{y:,.0f}"
        tickprefix = ""

    share_col = 'revenue_share' if metric == 'revenue' and 'revenue_share' in series.columns else 'metric_share'
    customdata = series[share_col] if share_col in series.columns else None

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=series['period'],
            y=series[metric],
            name=label,
            marker_color=METRIC_COLORS.get(metric, '#1864ab'),
            customdata=customdata,
            hovertemplate=(
                f"%{{x}}<br>{label}: {value_format}"
                + ("<br>%{customdata:.0f}% of peak" if customdata is not None else "")
                + "<extra></extra>"
            ),
        )
    )
    fig.update_layout(
        title=title,
        template="plotly_white",
        height=380,
        margin=dict(t=70, b=50, l=60, r=30),
        xaxis=dict(title="Period"),
        yaxis=dict(title=label, tickprefix=tickprefix, tickformat=",.0f"),
        showlegend=False,
    )
    return fig


def build_category_share_chart(categories: pd.DataFrame, value: str = 'revenue') -> go.Figure:
    title = "Sales by Category"
    if categories is None or categories.empty:
        return _build_empty_figure("No product data available.", title)

    fig = px.pie(
        categories,
        names='category',
        values=value,
        hole=0.45,
        color_discrete_sequence=px.colors.qualitative.Set3,
    )
    fig.update_traces(
        textinfo='label+percent',
        hovertemplate=f"%{{label}}<br>Revenue: {CURRENCY_SYMBOL}%{{value:,.2f}}<extra></extra>",
    )
    fig.update_layout(title=title, template="plotly_white", height=380, margin=dict(t=70, b=30, l=30, r=30))
    return fig
