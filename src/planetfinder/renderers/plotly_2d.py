"""Plotly 2D catalog map renderer.

Plots every catalog record with numeric RA/Dec on an equatorial grid and
highlights the matched record. Records without usable coordinates are skipped.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import plotly.graph_objects as go

_BG = "#050a1a"
_STAR_COLOR = "#ffffff"
_MATCH_COLOR = "#ccdd77"


def _coord(record: Mapping[str, Any], key: str) -> float | None:
    value = record.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    return None if f != f else f  # NaN


def _label(record: Mapping[str, Any]) -> str:
    return str(record.get("planetName") or record.get("name") or "?")


def render_catalog_map(
    catalog: Sequence[Mapping[str, Any]],
    highlight: Mapping[str, Any] | None = None,
) -> go.Figure:
    """Render catalog positions as a Plotly scatter (RA on x, Dec on y).

    Args:
        catalog: Catalog records in load order.
        highlight: The matched record, drawn on top in the match color.

    Returns:
        Plotly Figure object.
    """
    xs: list[float] = []
    ys: list[float] = []
    names: list[str] = []
    for record in catalog:
        ra, dec = _coord(record, "ra"), _coord(record, "dec")
        if ra is None or dec is None:
            continue
        xs.append(ra)
        ys.append(dec)
        names.append(_label(record))

    catalog_trace = go.Scatter(
        x=xs,
        y=ys,
        mode="markers",
        marker=dict(size=4, color=_STAR_COLOR, opacity=0.6, line=dict(width=0)),
        text=names,
        hovertemplate="%{text}<br>RA %{x:.3f}°<br>Dec %{y:.3f}°<extra></extra>",
        name="catalog",
    )
    traces = [catalog_trace]

    if highlight is not None:
        ra, dec = _coord(highlight, "ra"), _coord(highlight, "dec")
        if ra is not None and dec is not None:
            traces.append(
                go.Scatter(
                    x=[ra],
                    y=[dec],
                    mode="markers+text",
                    marker=dict(size=14, color=_MATCH_COLOR, symbol="star"),
                    text=[_label(highlight)],
                    textposition="top center",
                    textfont=dict(color=_MATCH_COLOR),
                    hoverinfo="skip",
                    name="match",
                )
            )

    fig = go.Figure(data=traces)
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=40, r=10, t=10, b=40),
        height=420,
        font=dict(color="#cccccc"),
        # RA increases to the east, i.e. leftwards on a sky map
        xaxis=dict(
            title="RA (deg)",
            range=[360.0, 0.0],
            gridcolor="#1c2a4a",
            zeroline=False,
        ),
        yaxis=dict(
            title="Dec (deg)",
            range=[-90.0, 90.0],
            gridcolor="#1c2a4a",
            zeroline=False,
        ),
    )
    return fig
