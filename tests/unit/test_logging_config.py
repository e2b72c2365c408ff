"""Unit tests for logging setup"""

import logging

import pytest

from src.logging_config import setup_logging, MAX_SESSION_LOGS


@pytest.fixture
def restore_root_logger():
    """Keep pytest's handlers intact across setup_logging() calls"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestSetupLogging:
    """Test console + rotating file configuration"""

    def test_creates_session_log(self, tmp_path, restore_root_logger):
        session_log = setup_logging(log_file=str(tmp_path / "logs" / "ranking.log"))

        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("ranking_")
        assert session_log.exists()

    def test_handler_levels(self, tmp_path, restore_root_logger):
        setup_logging(
            log_file=str(tmp_path / "ranking.log"),
            console_level=logging.WARNING,
            file_level=logging.DEBUG,
        )
        levels = sorted(handler.level for handler in logging.getLogger().handlers)
        assert levels == [logging.DEBUG, logging.WARNING]

    def test_old_session_logs_cleaned_up(self, tmp_path, restore_root_logger):
        for i in range(8):
            (tmp_path / f"ranking_2024010{i}_000000.log").write_text("old")

        setup_logging(log_file=str(tmp_path / "ranking.log"))

        remaining = list(tmp_path.glob("ranking_*.log"))
        assert len(remaining) == MAX_SESSION_LOGS
        # Oldest sessions removed first
        assert not (tmp_path / "ranking_20240100_000000.log").exists()
        assert (tmp_path / "ranking_20240107_000000.log").exists()
