"""Workflow state machine: the current phase and the legal transitions."""

from dataclasses import dataclass

from ballot.errors import PhaseError
from ballot.events import EventLog, WorkflowStatusChange
from ballot.models import Phase


@dataclass(frozen=True)
class Transition:
    """An administrator transition.

    Attributes:
        name: Operation name
        source: Phase the workflow must be in for a checked transition
        target: Phase the workflow moves to
        checked: Whether source is enforced outside strict mode
    """
    name: str
    source: Phase
    target: Phase
    checked: bool


TRANSITIONS: dict[str, Transition] = {
    t.name: t
    for t in [
        Transition("start_proposals_registration", Phase.REGISTERING_VOTERS,
                   Phase.PROPOSALS_REGISTRATION_STARTED, checked=False),
        Transition("end_proposals_registration", Phase.PROPOSALS_REGISTRATION_STARTED,
                   Phase.PROPOSALS_REGISTRATION_ENDED, checked=False),
        Transition("start_voting_session", Phase.PROPOSALS_REGISTRATION_ENDED,
                   Phase.VOTING_SESSION_STARTED, checked=False),
        Transition("end_voting_session", Phase.VOTING_SESSION_STARTED,
                   Phase.VOTING_SESSION_ENDED, checked=True),
        Transition("tally", Phase.VOTING_SESSION_ENDED,
                   Phase.VOTES_TALLIED, checked=True),
    ]
}


class WorkflowStateMachine:
    """Holds the current phase and applies administrator transitions.

    The first three transitions historically overwrite the phase without
    looking at it, so calling them out of order moves the workflow anyway.
    Only ending the voting session and tallying check where they start from.
    With ``strict=True`` every transition checks its source phase.
    """

    def __init__(self, events: EventLog, strict: bool = False):
        self._phase = Phase.REGISTERING_VOTERS
        self._events = events
        self.strict = strict

    @property
    def current_phase(self) -> Phase:
        return self._phase

    def require(self, phase: Phase, operation: str = "operation") -> None:
        """Raise PhaseError unless the workflow is in phase."""
        if self._phase != phase:
            raise PhaseError(
                f"{operation} requires phase {phase.name}, current phase is {self._phase.name}",
                required=phase,
                actual=self._phase,
            )

    def check(self, name: str) -> Transition:
        """Validate a transition without applying it."""
        transition = TRANSITIONS[name]
        if transition.checked or self.strict:
            self.require(transition.source, name)
        return transition

    def apply(self, name: str) -> Phase:
        """Apply the named transition and return the new phase."""
        transition = self.check(name)
        previous, self._phase = self._phase, transition.target
        self._events.emit(WorkflowStatusChange(previous=previous, new=transition.target))
        return self._phase

    def start_proposals_registration(self) -> Phase:
        return self.apply("start_proposals_registration")

    def end_proposals_registration(self) -> Phase:
        return self.apply("end_proposals_registration")

    def start_voting_session(self) -> Phase:
        return self.apply("start_voting_session")

    def end_voting_session(self) -> Phase:
        return self.apply("end_voting_session")

    def mark_tallied(self) -> Phase:
        return self.apply("tally")
