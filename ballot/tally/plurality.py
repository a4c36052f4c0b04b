"""Plurality tally: the proposal with the most votes wins."""

from ballot.models import TallyResult
from ballot.tally import register_tally_method
from ballot.tally.base import TallyMethod


@register_tally_method
class PluralityTally(TallyMethod):
    """Running-maximum scan over vote counts.

    Tiebreaker: the earliest submitted proposal among those with the most
    votes wins.
    """

    key = "plurality"

    @property
    def name(self) -> str:
        return "Plurality"

    @property
    def description(self) -> str:
        return "Most votes wins; ties go to the earliest proposal"

    def select(self, vote_counts: list[int]) -> TallyResult:
        winner = 0
        for i, count in enumerate(vote_counts):
            if count > vote_counts[winner]:
                winner = i

        tied = [
            i for i, count in enumerate(vote_counts)
            if count == vote_counts[winner]
        ]
        return TallyResult(
            proposal_id=winner,
            method=self.key,
            details={
                "vote_counts": list(vote_counts),
                "max_votes": vote_counts[winner] if vote_counts else 0,
                "tied": tied if len(tied) > 1 else [],
            },
        )
