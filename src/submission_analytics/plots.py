import plotly.graph_objects as go

from .constants import GRADE_MAX, PERCENT_SCALE
from .series import SeriesBundle

SERIES_COLORS = ["#1976d2", "#ff4081"]


def comparison_bar(bundle: SeriesBundle) -> go.Figure:
    if bundle.empty:
        return go.Figure()
    fig = go.Figure()
    for item, color in zip(bundle.series, SERIES_COLORS):
        fig.add_trace(go.Bar(x=bundle.labels, y=item.values, name=item.name, marker_color=color))
    fig.update_layout(
        title="Grades and plagiarism by student",
        barmode="group",
        xaxis_title="Student",
        yaxis=dict(range=[0, PERCENT_SCALE]),
    )
    return fig


def performance_line(bundle: SeriesBundle) -> go.Figure:
    if bundle.empty:
        return go.Figure()
    personal, baseline = bundle.series[0], bundle.series[1]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(x=bundle.labels, y=personal.values, name=personal.name, mode="lines+markers", fill="tozeroy", line=dict(color=SERIES_COLORS[0], shape="spline"))
    )
    fig.add_trace(
        go.Scatter(x=bundle.labels, y=baseline.values, name=baseline.name, mode="lines", line=dict(color=SERIES_COLORS[1], dash="dash"))
    )
    fig.update_layout(title="My performance over time", xaxis_title="Submission date", yaxis=dict(range=[0, GRADE_MAX]))
    return fig
