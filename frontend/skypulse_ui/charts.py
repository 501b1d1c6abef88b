"""Plotly figures for the forecast section."""

from typing import Sequence

import plotly.graph_objects as go

_MAX_COLOR = "orange"
_MIN_COLOR = "cyan"


def temperature_trend_figure(forecast: Sequence[dict]) -> go.Figure:
    """Daily max/min temperature lines, one point per forecast day."""
    dates = [d["date"] for d in forecast]

    max_trace = go.Scatter(
        x=dates,
        y=[d["max_temp"] for d in forecast],
        mode="lines+markers",
        line=dict(color=_MAX_COLOR, shape="spline", smoothing=0.6),
        name="Max Temp",
    )
    min_trace = go.Scatter(
        x=dates,
        y=[d["min_temp"] for d in forecast],
        mode="lines+markers",
        line=dict(color=_MIN_COLOR, shape="spline", smoothing=0.6),
        name="Min Temp",
    )

    fig = go.Figure(data=[max_trace, min_trace])
    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color="white"),
        margin=dict(l=0, r=0, t=10, b=0),
        height=320,
        yaxis=dict(title="°C"),
        legend=dict(orientation="h"),
    )
    return fig
