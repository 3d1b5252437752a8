"""Reusable Plotly chart functions for the Streamlit dashboards."""

from __future__ import annotations

from collections.abc import Sequence

import plotly.graph_objects as go

from watchboard.schemas.trade import NormalizedTransaction
from watchboard.schemas.weather import HourlyTemperature


def transaction_amount_chart(
    transactions: Sequence[NormalizedTransaction], title: str = "Transaction Amount ($)"
) -> go.Figure:
    """Horizontal bar chart of amounts per ticker, largest at the top."""
    fig = go.Figure(data=[
        go.Bar(
            y=[t.ticker or "N/A" for t in transactions],
            x=[t.amount for t in transactions],
            orientation="h",
            name="Transaction Amount ($)",
            marker=dict(
                color="rgba(75,192,192,0.6)",
                line=dict(color="rgba(75,192,192,1)", width=1),
            ),
            hovertemplate="%{y}: $%{x:,.0f}<extra></extra>",
        )
    ])

    fig.update_layout(
        title=title,
        xaxis_title="Amount ($)",
        xaxis_rangemode="tozero",
        yaxis=dict(autorange="reversed", tickfont=dict(size=12)),
        showlegend=False,
        template="plotly_white",
        height=max(400, 22 * len(transactions)),
    )
    return fig


def hourly_temperature_chart(
    points: Sequence[HourlyTemperature], city: str = ""
) -> go.Figure:
    """Line chart of the hourly temperature series."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=[p.time for p in points],
        y=[p.temperature for p in points],
        mode="lines+markers",
        name="Temperature",
        line=dict(color="#e67e22", width=2),
        marker=dict(size=5),
    ))

    fig.update_layout(
        title=f"Hourly Temperature{f' - {city}' if city else ''}",
        xaxis_title="Time",
        yaxis_title="Temperature (°C)",
        template="plotly_white",
        height=350,
    )
    return fig
