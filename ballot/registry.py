"""Registry of participant identities and their voting status."""

from dataclasses import replace

from ballot.errors import AuthorizationError
from ballot.events import EventLog, VoterRegistered
from ballot.models import Voter


class Registry:
    """Maps identities to Voter records.

    Identities that were never registered read as the default record; they
    are not stored until the administrator registers them.
    """

    def __init__(self, events: EventLog):
        self._voters: dict[str, Voter] = {}
        self._events = events

    def register(self, identity: str) -> None:
        """Mark identity as registered. Registering twice changes nothing."""
        voter = self._voters.setdefault(identity, Voter())
        voter.is_registered = True
        self._events.emit(VoterRegistered(voter=identity))

    def get(self, identity: str) -> Voter:
        """Return a copy of the record for identity."""
        voter = self._voters.get(identity)
        return replace(voter) if voter is not None else Voter()

    def is_registered(self, identity: str) -> bool:
        voter = self._voters.get(identity)
        return voter is not None and voter.is_registered

    def has_voted(self, identity: str) -> bool:
        voter = self._voters.get(identity)
        return voter is not None and voter.has_voted

    def require_registered(self, identity: str) -> None:
        if not self.is_registered(identity):
            raise AuthorizationError(f"{identity!r} is not a registered voter")

    def require_can_vote(self, identity: str) -> None:
        self.require_registered(identity)
        if self.has_voted(identity):
            raise AuthorizationError(f"{identity!r} has already voted")

    def record_vote(self, identity: str, proposal_id: int) -> None:
        """Mark a registered voter as having voted for proposal_id."""
        self.require_registered(identity)
        voter = self._voters[identity]
        voter.has_voted = True
        voter.voted_proposal_id = proposal_id

    def identities(self) -> list[str]:
        """Registered identities, in order of first registration."""
        return [i for i, v in self._voters.items() if v.is_registered]

    def __len__(self) -> int:
        return len(self.identities())
