"""Abstract base class for tally methods."""

from abc import ABC, abstractmethod

from ballot.models import TallyResult


class TallyMethod(ABC):
    """Abstract base class for winner-selection methods.

    Each method picks a winning proposal index from the list of vote counts
    in proposal order. Methods are registered via the @register_tally_method
    decorator in ballot/tally/__init__.py.
    """

    key: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this method."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this method picks the winner."""
        return ""

    @abstractmethod
    def select(self, vote_counts: list[int]) -> TallyResult:
        """Pick the winning proposal.

        Args:
            vote_counts: Vote count of each proposal, indexed by proposal id

        Returns:
            TallyResult with the winning index and selection details. An
            empty list yields index 0.
        """
        pass
