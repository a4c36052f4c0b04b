"""Tally engine: closes the workflow and fixes the winning proposal."""

from ballot.errors import UnknownProposalError
from ballot.logger import get_logger
from ballot.models import Phase, Proposal, TallyResult
from ballot.proposals import ProposalStore
from ballot.tally import get_tally_method
from ballot.workflow import WorkflowStateMachine


class TallyEngine:
    """Computes and stores the winning proposal once voting has ended."""

    def __init__(self, proposals: ProposalStore, workflow: WorkflowStateMachine,
                 method: str = "adjacent", logger=None):
        self._proposals = proposals
        self._workflow = workflow
        self.method = get_tally_method(method)
        self.winning_proposal_id = 0
        self.last_result: TallyResult | None = None
        self._logger = logger or get_logger("tally")

    def tally(self) -> int:
        """Move to VOTES_TALLIED, then pick and store the winner.

        Raises:
            PhaseError: Unless the workflow is in VOTING_SESSION_ENDED
        """
        self._workflow.mark_tallied()
        result = self.method.select(self._proposals.vote_counts())
        self._logger.debug("Tally with %s: %s", self.method.name, result.details)
        self.winning_proposal_id = result.proposal_id
        self.last_result = result
        return self.winning_proposal_id

    def winning_proposal(self) -> Proposal:
        """Return the winning proposal (description and vote count).

        Raises:
            PhaseError: Unless the workflow is in VOTES_TALLIED
            UnknownProposalError: If no proposal was ever submitted
        """
        self._workflow.require(Phase.VOTES_TALLIED, "winner")
        if not len(self._proposals):
            raise UnknownProposalError("no proposals were submitted")
        return self._proposals.get(self.winning_proposal_id)

    def winner(self) -> str:
        return self.winning_proposal().description
