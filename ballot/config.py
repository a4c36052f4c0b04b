"""Session settings, read from the environment (and a .env file if present)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(name: str, value: str | None, default: bool) -> bool:
    """Parse a boolean setting, falling back to default when unset or blank."""
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {value!r})")


@dataclass(frozen=True)
class BallotConfig:
    """Behavioral switches for a BallotSession.

    Attributes:
        tally_method: Registered winner-selection method ("adjacent" keeps the
            historical adjacent-pair scan, "plurality" takes the true maximum)
        strict_transitions: Require the previous phase for every transition,
            not only for ending the voting session and tallying
        enforce_single_vote: Record accepted votes on the voter so that a
            second vote is rejected
        log_level: Level name for the ballot loggers
        log_file: Optional file that also receives log records
    """
    tally_method: str = "adjacent"
    strict_transitions: bool = False
    enforce_single_vote: bool = False
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "BallotConfig":
        load_dotenv(dotenv_path=dotenv_path)
        return cls(
            tally_method=os.getenv("BALLOT_TALLY_METHOD", "adjacent").strip().lower(),
            strict_transitions=parse_bool(
                "BALLOT_STRICT_TRANSITIONS", os.getenv("BALLOT_STRICT_TRANSITIONS"), False
            ),
            enforce_single_vote=parse_bool(
                "BALLOT_ENFORCE_SINGLE_VOTE", os.getenv("BALLOT_ENFORCE_SINGLE_VOTE"), False
            ),
            log_level=os.getenv("BALLOT_LOG_LEVEL", "INFO").strip().upper(),
            log_file=os.getenv("BALLOT_LOG_FILE") or None,
        )
