"""Phase-gated ballot: registration, proposals, voting and tallying."""

from ballot.session import BallotSession

__all__ = ["BallotSession"]
