"""Tests for logging: levels, log files and rejected operations."""

import logging

import pytest
from tests.conftest import ADMIN, make_session, make_tallied_session

from ballot.errors import PhaseError
from ballot.logger import get_logger
from ballot.models import Phase


def close_file_handlers(logger):
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def sessions():
    """Collects sessions created by a test and closes their log files."""
    created = []
    yield created
    for session in created:
        close_file_handlers(session.logger)


class TestGetLogger:
    def test_namespaced(self):
        logger = get_logger("logger-test-ns")
        assert logger.name == "ballot.logger-test-ns"
        assert get_logger("ballot.logger-test-ns") is logger

    def test_file_added_to_cached_logger(self, tmp_path):
        logger = get_logger("logger-test-cached")
        first, second = tmp_path / "first.log", tmp_path / "second.log"
        try:
            get_logger("logger-test-cached", logfile=first)
            get_logger("logger-test-cached", logfile=second)
            get_logger("logger-test-cached", logfile=second)
            files = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            assert len(files) == 2

            logger.info("hello")
            assert "hello" in first.read_text(encoding="utf-8")
            assert "hello" in second.read_text(encoding="utf-8")
        finally:
            close_file_handlers(logger)


class TestSessionLogging:
    def test_records_reach_log_file(self, tmp_path, sessions):
        logfile = tmp_path / "ballot.log"
        session = make_tallied_session([3, 1, 2], log_level="DEBUG", log_file=str(logfile))
        sessions.append(session)

        text = logfile.read_text(encoding="utf-8")
        assert "VoterRegistered" in text
        assert "WorkflowStatusChange" in text
        assert "DEBUG" in text
        assert "Tally with Adjacent Comparison" in text

    def test_info_level_drops_tally_details(self, tmp_path, sessions):
        logfile = tmp_path / "ballot.log"
        session = make_tallied_session([1, 2], log_file=str(logfile))
        sessions.append(session)

        text = logfile.read_text(encoding="utf-8")
        assert "Voted" in text
        assert "Tally with" not in text

    def test_each_session_writes_its_own_file(self, tmp_path, sessions):
        one, two = tmp_path / "one.log", tmp_path / "two.log"
        first = make_session(["A"], log_file=str(one))
        second = make_session(["B"], log_file=str(two), log_level="WARNING")
        sessions.extend([first, second])

        second.register(ADMIN, "C")
        with pytest.raises(PhaseError):
            second.end_voting_session(ADMIN)
        first.register(ADMIN, "D")

        one_text = one.read_text(encoding="utf-8")
        two_text = two.read_text(encoding="utf-8")
        assert "'voter': 'A'" in one_text
        assert "'voter': 'D'" in one_text
        assert "'voter': 'B'" not in one_text
        assert "end_voting_session rejected" in two_text
        assert "VoterRegistered" not in two_text
        assert first.logger.getEffectiveLevel() == logging.INFO

    def test_rejected_vote_logged_as_warning(self, caplog):
        session = make_session(["A"], {"X": "A"}, phase=Phase.VOTING_SESSION_ENDED)
        session.logger.addHandler(caplog.handler)
        try:
            with pytest.raises(PhaseError):
                session.vote("A", "X")
        finally:
            session.logger.removeHandler(caplog.handler)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].getMessage().startswith("vote rejected:")
        assert "VOTING_SESSION_STARTED" in warnings[0].getMessage()

    def test_named_session(self):
        session = make_session([], name="board-election")
        assert session.logger.name == "ballot.board-election"
