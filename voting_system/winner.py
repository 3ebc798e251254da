"""
Winner selection by highest vote count.
Ties go to the first candidate in list order.
"""
from __future__ import annotations

from voting_system.candidates import Candidate


def resolve_winner(candidates: list[Candidate]) -> Candidate | None:
    """Return the candidate with the most votes, or None for an empty list."""
    if not candidates:
        return None
    # max() keeps the first maximal element it sees
    return max(candidates, key=lambda c: c.votes)
