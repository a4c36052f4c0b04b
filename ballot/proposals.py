"""Append-only store of proposals and their vote counts."""

from dataclasses import replace

from ballot.errors import UnknownProposalError
from ballot.events import EventLog, ProposalRegistered
from ballot.models import Phase, Proposal
from ballot.registry import Registry
from ballot.workflow import WorkflowStateMachine


class ProposalStore:
    """Ordered proposals, identified by their index.

    Writes and reads are guarded by the registry (registered identities
    only) and, for submissions, by the workflow phase.
    """

    def __init__(self, registry: Registry, workflow: WorkflowStateMachine, events: EventLog):
        self._proposals: list[Proposal] = []
        self._registry = registry
        self._workflow = workflow
        self._events = events

    def submit(self, identity: str, description: str) -> int:
        """Append a proposal with zero votes and return its id.

        Raises:
            AuthorizationError: If identity is not registered
            PhaseError: Outside PROPOSALS_REGISTRATION_STARTED
        """
        self._registry.require_registered(identity)
        self._workflow.require(Phase.PROPOSALS_REGISTRATION_STARTED, "submit")
        self._proposals.append(Proposal(description=description))
        proposal_id = len(self._proposals) - 1
        self._events.emit(ProposalRegistered(proposal_id=proposal_id))
        return proposal_id

    def list_proposals(self, identity: str) -> list[Proposal]:
        """Return copies of all proposals in submission order."""
        self._registry.require_registered(identity)
        return [replace(p) for p in self._proposals]

    def get(self, proposal_id: int) -> Proposal:
        if not 0 <= proposal_id < len(self._proposals):
            raise UnknownProposalError(f"no proposal with id {proposal_id}")
        return replace(self._proposals[proposal_id])

    def find(self, description: str) -> list[int]:
        """Ids of every proposal whose description matches exactly."""
        return [i for i, p in enumerate(self._proposals) if p.description == description]

    def record_vote(self, proposal_id: int) -> None:
        if not 0 <= proposal_id < len(self._proposals):
            raise UnknownProposalError(f"no proposal with id {proposal_id}")
        self._proposals[proposal_id].vote_count += 1

    def vote_counts(self) -> list[int]:
        return [p.vote_count for p in self._proposals]

    def __len__(self) -> int:
        return len(self._proposals)
