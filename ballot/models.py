"""Core data models for voters, proposals and the workflow phase."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Phase(IntEnum):
    """Workflow phases, in the order the administrator moves through them."""
    REGISTERING_VOTERS = 0
    PROPOSALS_REGISTRATION_STARTED = 1
    PROPOSALS_REGISTRATION_ENDED = 2
    VOTING_SESSION_STARTED = 3
    VOTING_SESSION_ENDED = 4
    VOTES_TALLIED = 5

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Voting session started"."""
        return self.name.replace("_", " ").capitalize()


@dataclass
class Voter:
    """Registration and voting status of one identity.

    Every identity implicitly has a record; unknown identities read as the
    default (unregistered, not voted) record.

    Attributes:
        is_registered: Set by the administrator during registration
        has_voted: Whether a vote has been recorded for this voter
        voted_proposal_id: Index of the proposal voted for; only meaningful
            when has_voted is True
    """
    is_registered: bool = False
    has_voted: bool = False
    voted_proposal_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_registered": self.is_registered,
            "has_voted": self.has_voted,
            "voted_proposal_id": self.voted_proposal_id,
        }


@dataclass
class Proposal:
    """A submitted proposal and the number of votes it has received.

    Proposals are identified by their position in submission order and are
    never removed.
    """
    description: str
    vote_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "vote_count": self.vote_count}


@dataclass
class TallyResult:
    """Outcome of a tally.

    Attributes:
        proposal_id: Index of the winning proposal
        method: Name of the winner-selection method that was used
        details: Method-specific details for transparency/debugging
            (e.g. the vote counts that were compared)
    """
    proposal_id: int
    method: str
    details: dict[str, Any] = field(default_factory=dict)
