"""Adjacent-pair tally: the historical winner-selection scan."""

from ballot.models import TallyResult
from ballot.tally import register_tally_method
from ballot.tally.base import TallyMethod


@register_tally_method
class AdjacentTally(TallyMethod):
    """Compares each proposal only with the one before it.

    The winner starts at index 0. For every later index i, if proposal i has
    strictly more votes than proposal i-1, the winner becomes i. This is not
    a maximum search: counts [3, 1, 2] select index 2, because 2 beats its
    neighbour 1, even though index 0 has more votes.
    """

    key = "adjacent"

    @property
    def name(self) -> str:
        return "Adjacent Comparison"

    @property
    def description(self) -> str:
        return "Last proposal that beats its immediate predecessor wins"

    def select(self, vote_counts: list[int]) -> TallyResult:
        winner = 0
        promotions = []
        for i in range(1, len(vote_counts)):
            if vote_counts[i] > vote_counts[i - 1]:
                winner = i
                promotions.append(i)

        return TallyResult(
            proposal_id=winner,
            method=self.key,
            details={"vote_counts": list(vote_counts), "promotions": promotions},
        )
