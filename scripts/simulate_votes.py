#!/usr/bin/env python3
"""Cast random votes headlessly and report the tally and winner."""
import argparse
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))
from voting_system.config import load_settings
from voting_system.log import configure_logging
from voting_system.session import VotingSession
from voting_system.tally import tally_frame


def _parse_weights(parser: argparse.ArgumentParser, raw: str | None, n: int) -> list[float] | None:
    if not raw:
        return None
    try:
        weights = [float(w) for w in raw.split(",")]
    except ValueError:
        parser.error(f"--weights must be comma-separated numbers, got {raw!r}")
    if len(weights) != n:
        parser.error(f"--weights needs {n} values, got {len(weights)}")
    if any(w < 0 for w in weights) or sum(weights) == 0:
        parser.error("--weights must be non-negative and not all zero")
    return weights


def main():
    parser = argparse.ArgumentParser(description="Simulate a voting session with random votes")
    parser.add_argument("--votes", type=int, default=50, help="Maximum number of votes to cast")
    parser.add_argument("--threshold", type=int, default=None,
                        help="Total votes that trigger winner resolution (default: VOTING_WIN_THRESHOLD or 20)")
    parser.add_argument("--weights", default=None,
                        help="Comma-separated vote weights, one per candidate (e.g. 3,2,1)")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    load_dotenv()
    try:
        settings = load_settings()
    except RuntimeError as e:
        parser.error(str(e))

    threshold = args.threshold if args.threshold is not None else settings.win_threshold
    if threshold < 1:
        parser.error(f"--threshold must be >= 1, got {threshold}")
    if args.votes < 0:
        parser.error(f"--votes must be >= 0, got {args.votes}")

    session = VotingSession(threshold=threshold)
    ids = [c.id for c in session.candidates]
    weights = _parse_weights(parser, args.weights, len(ids))

    configure_logging(settings.log_level, settings.log_json)
    random.seed(args.seed)

    cast = 0
    while cast < args.votes and not session.winner_declared:
        session.cast_vote(random.choices(ids, weights=weights, k=1)[0])
        cast += 1

    print(tally_frame(session.candidates).to_string(index=False))
    print(f"\nTotal votes: {session.total_votes}")
    if session.winner_declared:
        print(f"Winner     : {session.winner_name}")
    else:
        print(f"No winner yet ({session.threshold - session.total_votes} more votes needed)")


if __name__ == "__main__":
    main()
