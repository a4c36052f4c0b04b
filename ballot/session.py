"""Ballot session: the shared state aggregate and its public operations."""

import itertools
import threading
from functools import wraps
from typing import Any

from ballot.access import AccessControl, OwnerAccessControl
from ballot.config import BallotConfig
from ballot.errors import BallotError
from ballot.events import EventLog, OwnershipTransferred, Subscriber, Voted
from ballot.logger import get_logger
from ballot.models import Phase, Proposal, Voter
from ballot.proposals import ProposalStore
from ballot.registry import Registry
from ballot.tally.engine import TallyEngine
from ballot.workflow import WorkflowStateMachine

_session_ids = itertools.count(1)


def operation(method):
    """Run a public operation under the session lock, logging rejections."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            try:
                return method(self, *args, **kwargs)
            except BallotError as e:
                self.logger.warning("%s rejected: %s", method.__name__, e)
                raise

    return wrapper


class BallotSession:
    """A single voting process, from voter registration to the tally.

    The session owns every piece of state (registry, proposals, phase,
    winner) and exposes the public operations. Operations that need an
    identity take the caller explicitly; administrator checks go through the
    injected AccessControl. Each operation runs to completion under one lock
    and checks all of its preconditions before changing anything.

    Each session logs through its own logger, ``ballot.<name>``, with
    ``events`` and ``tally`` children, so the level and log file of one
    session never affect another.

    Example:
        >>> session = BallotSession("admin")
        >>> session.register("admin", "alice")
        >>> session.start_proposals_registration("admin")
        <Phase.PROPOSALS_REGISTRATION_STARTED: 1>
        >>> session.submit_proposal("alice", "Plant trees")
        0
    """

    def __init__(
        self,
        admin: str | AccessControl,
        config: BallotConfig | None = None,
        name: str | None = None,
    ):
        self.config = config or BallotConfig()
        self.access = admin if isinstance(admin, AccessControl) else OwnerAccessControl(admin)

        self.name = name or f"session-{next(_session_ids)}"
        self.logger = get_logger(
            self.name, level=self.config.log_level, logfile=self.config.log_file)
        self._lock = threading.RLock()

        self.events = EventLog(self.logger.getChild("events"))
        self.registry = Registry(self.events)
        self.workflow = WorkflowStateMachine(self.events, strict=self.config.strict_transitions)
        self.proposals = ProposalStore(self.registry, self.workflow, self.events)
        self.tally_engine = TallyEngine(self.proposals, self.workflow, self.config.tally_method,
                                       logger=self.logger.getChild("tally"))

    # Administrator operations

    @operation
    def register(self, caller: str, identity: str) -> None:
        self.access.require_admin(caller)
        self.registry.register(identity)

    @operation
    def start_proposals_registration(self, caller: str) -> Phase:
        self.access.require_admin(caller)
        return self.workflow.start_proposals_registration()

    @operation
    def end_proposals_registration(self, caller: str) -> Phase:
        self.access.require_admin(caller)
        return self.workflow.end_proposals_registration()

    @operation
    def start_voting_session(self, caller: str) -> Phase:
        self.access.require_admin(caller)
        return self.workflow.start_voting_session()

    @operation
    def end_voting_session(self, caller: str) -> Phase:
        self.access.require_admin(caller)
        return self.workflow.end_voting_session()

    @operation
    def tally(self, caller: str) -> int:
        """Close the workflow and return the winning proposal id."""
        self.access.require_admin(caller)
        return self.tally_engine.tally()

    @operation
    def transfer_ownership(self, caller: str, new_owner: str) -> None:
        if not isinstance(self.access, OwnerAccessControl):
            raise TypeError("ownership transfer needs an OwnerAccessControl")
        previous = self.access.transfer_ownership(caller, new_owner)
        self.events.emit(OwnershipTransferred(previous=previous, new=new_owner))

    # Participant operations

    @operation
    def submit_proposal(self, caller: str, description: str) -> int:
        return self.proposals.submit(caller, description)

    @operation
    def vote(self, caller: str, description: str) -> list[int]:
        """Vote for every proposal whose description matches exactly.

        Returns the ids of the proposals that received the vote. A
        description that matches nothing is accepted and changes nothing.
        """
        self.registry.require_can_vote(caller)
        self.workflow.require(Phase.VOTING_SESSION_STARTED, "vote")

        matched = self.proposals.find(description)
        if matched and self.config.enforce_single_vote:
            self.registry.record_vote(caller, matched[0])
        for proposal_id in matched:
            self.proposals.record_vote(proposal_id)
            self.events.emit(Voted(voter=caller, proposal_id=proposal_id))
        return matched

    @operation
    def list_proposals(self, caller: str) -> list[Proposal]:
        return self.proposals.list_proposals(caller)

    @operation
    def get_proposal(self, caller: str, proposal_id: int) -> Proposal:
        self.registry.require_registered(caller)
        return self.proposals.get(proposal_id)

    @operation
    def get_voter(self, caller: str, identity: str) -> Voter:
        self.registry.require_registered(caller)
        return self.registry.get(identity)

    # Public queries

    @operation
    def winner(self) -> str:
        """Description of the winning proposal; only once votes are tallied."""
        return self.tally_engine.winner()

    @operation
    def winning_proposal(self) -> Proposal:
        return self.tally_engine.winning_proposal()

    def current_phase(self) -> Phase:
        return self.workflow.current_phase

    @property
    def owner(self) -> str | None:
        return getattr(self.access, "owner", None)

    def subscribe(self, callback: Subscriber) -> Subscriber:
        return self.events.subscribe(callback)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the session as a JSON-serializable dictionary."""
        with self._lock:
            phase = self.workflow.current_phase
            tallied = phase == Phase.VOTES_TALLIED and len(self.proposals) > 0
            result = self.tally_engine.last_result
            return {
                "phase": phase.name,
                "owner": self.owner,
                "voters": {
                    identity: self.registry.get(identity).to_dict()
                    for identity in self.registry.identities()
                },
                "proposals": [
                    self.proposals.get(i).to_dict() for i in range(len(self.proposals))
                ],
                "winning_proposal_id": self.tally_engine.winning_proposal_id if tallied else None,
                "tally": (
                    {"method": result.method, "details": result.details}
                    if tallied and result is not None else None
                ),
                "events": [e.to_dict() for e in self.events],
            }
