"""
Vote totals and per-candidate share.
Shares are 0 for everyone while no vote has been cast.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from voting_system.candidates import Candidate


def total_votes(candidates: Iterable[Candidate]) -> int:
    """Return the sum of all candidates' vote counts."""
    return sum(c.votes for c in candidates)


def percentage(candidate: Candidate, total: int) -> float:
    """Return the candidate's share of total in [0, 100]; 0.0 when total is 0."""
    if total == 0:
        return 0.0
    return 100.0 * candidate.votes / total


def share_label(candidate: Candidate, total: int) -> str:
    """Return a legend label like 'Candidate A: 33%' (share truncated to int)."""
    return f"{candidate.name}: {int(percentage(candidate, total))}%"


def tally_frame(candidates: Sequence[Candidate]) -> pd.DataFrame:
    """Return one row per candidate, in list order: candidate, votes, share."""
    total = total_votes(candidates)
    rows = [
        {
            "candidate": c.name,
            "votes": c.votes,
            "share": round(percentage(c, total), 1),
        }
        for c in candidates
    ]
    return pd.DataFrame(rows, columns=["candidate", "votes", "share"])
