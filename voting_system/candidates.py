from __future__ import annotations

import uuid
from dataclasses import dataclass, field


# Default roster shown on the voting screen: (name, color)
DEFAULT_ROSTER: tuple[tuple[str, str], ...] = (
    ("Candidate A", "#1f77b4"),
    ("Candidate B", "#2ca02c"),
    ("Candidate C", "#ff7f0e"),
)


@dataclass
class Candidate:
    """A named entity that can receive votes.

    Attributes:
        name: Label shown next to the vote button
        votes: Non-negative vote counter
        color: Display color (hex string), opaque to the tally logic
        id: Stable unique identifier, generated when omitted
    """
    name: str
    votes: int = 0
    color: str = "#7f7f7f"
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        # winner_name doubles as the "declared" marker, so it must never be blank
        if not self.name or not self.name.strip():
            raise ValueError("candidate name must not be blank")
        if self.votes < 0:
            raise ValueError(f"votes must be >= 0, got {self.votes} for {self.name!r}")


def default_candidates() -> list[Candidate]:
    """Return a fresh list of the fixed candidates, all at zero votes."""
    return [Candidate(name=name, color=color) for name, color in DEFAULT_ROSTER]


def find_candidate(candidates: list[Candidate], candidate_id: str) -> Candidate | None:
    """Return the candidate with the given id, or None if not present."""
    for candidate in candidates:
        if candidate.id == candidate_id:
            return candidate
    return None
