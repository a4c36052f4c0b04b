"""Shared test helpers."""

import pytest

from ballot.config import BallotConfig
from ballot.models import Phase
from ballot.session import BallotSession

ADMIN = "admin"


def make_session(
    voters: list[str],
    proposals: dict[str, str] | None = None,
    phase: Phase = Phase.REGISTERING_VOTERS,
    name: str | None = None,
    **config,
) -> BallotSession:
    """Build a session with registered voters, advanced to phase.

    Args:
        voters: Identities to register
        proposals: {description: submitting voter}, submitted in order
            (requires phase to be PROPOSALS_REGISTRATION_STARTED or later)
        phase: Phase to leave the session in
        name: Optional session (and logger) name
        **config: BallotConfig overrides

    Returns:
        BallotSession owned by ADMIN.
    """
    session = BallotSession(ADMIN, BallotConfig(**config), name=name)
    for voter in voters:
        session.register(ADMIN, voter)

    steps = [
        (Phase.PROPOSALS_REGISTRATION_STARTED, session.start_proposals_registration),
        (Phase.PROPOSALS_REGISTRATION_ENDED, session.end_proposals_registration),
        (Phase.VOTING_SESSION_STARTED, session.start_voting_session),
        (Phase.VOTING_SESSION_ENDED, session.end_voting_session),
        (Phase.VOTES_TALLIED, session.tally),
    ]
    for target, step in steps:
        if phase < target:
            break
        step(ADMIN)
        if target == Phase.PROPOSALS_REGISTRATION_STARTED:
            for description, author in (proposals or {}).items():
                session.submit_proposal(author, description)
    return session


def make_tallied_session(votes: list[int], **config) -> BallotSession:
    """Session where proposal i ("P0", "P1", ...) received votes[i] votes."""
    total = sum(votes)
    voters = [f"V{i}" for i in range(max(total, 1))]
    proposals = {f"P{i}": voters[0] for i in range(len(votes))}
    session = make_session(voters, proposals, Phase.VOTING_SESSION_STARTED, **config)

    ballots = iter(voters)
    for i, count in enumerate(votes):
        for _ in range(count):
            session.vote(next(ballots), f"P{i}")

    session.end_voting_session(ADMIN)
    session.tally(ADMIN)
    return session


@pytest.fixture
def session():
    """Fresh session with voters A and B registered."""
    return make_session(["A", "B"])
