"""Exceptions raised by ballot operations."""


class BallotError(Exception):
    """Base class for every error raised by a ballot operation."""
    pass


class AuthorizationError(BallotError):
    """Raised when the caller is not allowed to perform an operation.

    Covers a caller that is not the administrator, an identity that is not a
    registered participant, and a participant that has already voted.
    """
    pass


class PhaseError(BallotError):
    """Raised when an operation is invoked outside its required phase."""

    def __init__(self, message: str, required=None, actual=None):
        super().__init__(message)
        self.required = required
        self.actual = actual


class UnknownProposalError(BallotError, LookupError):
    """Raised when a proposal id does not refer to a submitted proposal."""
    pass
