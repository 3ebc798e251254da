from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import plotly.graph_objects as go

from voting_system.candidates import Candidate
from voting_system.tally import share_label, total_votes

_PLOTLY_THEME = "plotly_white"
# Sectors start at 3 o'clock and run clockwise, matching the angle convention below
_START_ROTATION = 90


@dataclass(frozen=True)
class ChartSlice:
    """One pie sector. Angles are in degrees within [0, 360]."""
    candidate_id: str
    label: str
    value: int
    color: str
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


def chart_slices(candidates: Sequence[Candidate]) -> list[ChartSlice]:
    """Partition the full circle into one slice per candidate, in list order.

    Accepts candidates or session views (anything with id, name, votes, color).
    Slice i starts at 360 * (votes before i) / total and ends where slice
    i+1 starts, so the last slice ends at exactly 360. Returns an empty list
    when no votes have been cast.
    """
    total = total_votes(candidates)
    if total == 0:
        return []

    slices = []
    before = 0
    for c in candidates:
        after = before + c.votes
        slices.append(ChartSlice(
            candidate_id=c.id,
            label=share_label(c, total),
            value=c.votes,
            color=c.color,
            start_angle=360.0 * before / total,
            end_angle=360.0 * after / total,
        ))
        before = after
    return slices


def pie_figure(slices: list[ChartSlice], height: int = 320) -> go.Figure:
    """Return a Plotly pie whose sectors follow the given slices."""
    fig = go.Figure(go.Pie(
        labels=[s.label for s in slices],
        values=[s.value for s in slices],
        marker=dict(colors=[s.color for s in slices]),
        sort=False,
        direction="clockwise",
        rotation=_START_ROTATION,
        textinfo="none",
        hovertemplate="%{label}<br>Votes: %{value}<extra></extra>",
    ))
    fig.update_layout(
        template=_PLOTLY_THEME,
        margin=dict(l=10, r=10, t=10, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=-0.15, xanchor="center", x=0.5),
        height=height,
    )
    return fig
