"""In-memory voting session: candidates, winner state and change notifications."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from voting_system.candidates import Candidate, default_candidates, find_candidate
from voting_system.config import DEFAULT_WIN_THRESHOLD
from voting_system.log import get_logger
from voting_system.tally import total_votes
from voting_system.winner import resolve_winner

logger = get_logger(__name__)


class UnknownCandidateError(LookupError):
    """Vote cast for an id that is not in the session's candidate list."""

    def __init__(self, candidate_id: str):
        super().__init__(f"unknown candidate id: {candidate_id!r}")
        self.candidate_id = candidate_id


@dataclass(frozen=True)
class CandidateView:
    id: str
    name: str
    votes: int
    color: str


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only state handed to the page and to subscribers."""
    candidates: tuple[CandidateView, ...]
    total_votes: int
    threshold: int
    winner_declared: bool
    winner_name: str


@dataclass(frozen=True)
class SessionEvent:
    kind: str  # "vote" | "winner" | "reset"
    candidate_id: Optional[str]
    snapshot: SessionSnapshot


Subscriber = Callable[[SessionEvent], None]


def _view(candidate: Candidate) -> CandidateView:
    return CandidateView(id=candidate.id, name=candidate.name, votes=candidate.votes, color=candidate.color)


class VotingSession:
    """Owns the candidate list and the winner flag for one UI session.

    All mutations go through cast_vote() and reset(). Subscribers are called
    synchronously, in registration order, once each mutation is complete.
    """

    def __init__(
        self,
        candidates: Optional[list[Candidate]] = None,
        threshold: int = DEFAULT_WIN_THRESHOLD,
    ):
        if threshold < 1:
            raise ValueError(f"threshold must be >= 1, got {threshold}")
        self._candidates = list(candidates) if candidates is not None else default_candidates()
        self.threshold = threshold
        self.winner_declared = False
        self.winner_name = ""
        self._subscribers: list[Subscriber] = []

    @property
    def candidates(self) -> tuple[CandidateView, ...]:
        """Read-only views of the candidates, in list order."""
        return tuple(_view(c) for c in self._candidates)

    @property
    def total_votes(self) -> int:
        return total_votes(self._candidates)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            candidates=self.candidates,
            total_votes=self.total_votes,
            threshold=self.threshold,
            winner_declared=self.winner_declared,
            winner_name=self.winner_name,
        )

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register callback for session events; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def cast_vote(self, candidate_id: str) -> CandidateView:
        """Add one vote for the candidate and declare a winner if the threshold is reached.

        Raises:
            UnknownCandidateError: If no candidate has this id (state is left unchanged)
        """
        candidate = find_candidate(self._candidates, candidate_id)
        if candidate is None:
            raise UnknownCandidateError(candidate_id)

        candidate.votes += 1
        total = self.total_votes
        logger.debug("vote_cast", candidate=candidate.name, votes=candidate.votes, total=total)

        just_declared = False
        if total >= self.threshold and not self.winner_declared:
            winner = resolve_winner(self._candidates)
            if winner is not None:
                self.winner_declared = True
                self.winner_name = winner.name
                just_declared = True
                logger.info("winner_declared", winner=winner.name, votes=winner.votes, total=total)

        self._notify("vote", candidate_id)
        if just_declared:
            self._notify("winner", candidate_id)
        return _view(candidate)

    def reset(self) -> None:
        """Zero every vote count and clear the winner."""
        for c in self._candidates:
            c.votes = 0
        self.winner_declared = False
        self.winner_name = ""
        logger.info("votes_reset", candidates=len(self._candidates))
        self._notify("reset", None)

    def _notify(self, kind: str, candidate_id: Optional[str]) -> None:
        if not self._subscribers:
            return
        event = SessionEvent(kind=kind, candidate_id=candidate_id, snapshot=self.snapshot())
        # copy so callbacks may unsubscribe themselves
        for callback in list(self._subscribers):
            callback(event)
