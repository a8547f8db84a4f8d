"""
Tests for the audit logger and configuration loading.
"""

import pytest
import tempfile
import os
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import Settings, load_settings, save_settings
from core.console import info, error, displayable
from core.exceptions import ConfigurationError
from core.logger import AuditLogger, AuditEntry, ActionType, ActionStatus


class TestAuditEntry:
    """Test AuditEntry dataclass."""

    def test_create_uses_enum_values(self):
        entry = AuditEntry.create(
            action_type=ActionType.COPY,
            action_description="Copy a to b",
            status=ActionStatus.FAILED,
            metadata={"source": "a"}
        )

        assert entry.action_type == "copy"
        assert entry.status == "failed"
        assert entry.metadata == {"source": "a"}

    def test_json_round_trip(self):
        entry = AuditEntry.create(ActionType.MOVE, "Move x to y", result="File moved")

        assert AuditEntry.from_json(entry.to_json()) == entry


class TestAuditLogger:
    """Test AuditLogger class."""

    @pytest.fixture
    def temp_log(self):
        """Create a temporary log file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.jsonl', delete=False) as f:
            yield f.name
        os.unlink(f.name)

    @pytest.fixture
    def logger(self, temp_log):
        """Create a logger with temp file."""
        return AuditLogger(log_path=temp_log)

    def test_creates_missing_directory(self, tmp_path):
        log_path = tmp_path / "nested" / "dir" / "audit.jsonl"

        AuditLogger(log_path=str(log_path))

        assert log_path.exists()

    def test_log_action(self, logger):
        entry = logger.log_action(
            action_type=ActionType.LIST,
            description="List /tmp",
            status=ActionStatus.EXECUTED
        )

        assert entry.action_description == "List /tmp"
        assert entry.status == "executed"

    def test_get_recent(self, logger):
        for i in range(5):
            logger.log_action(
                action_type=ActionType.SEARCH,
                description=f"Search {i}"
            )

        entries = logger.get_recent(limit=3)

        assert [e.action_description for e in entries] == ["Search 4", "Search 3", "Search 2"]

    def test_get_by_action_type(self, logger):
        logger.log_action(ActionType.COPY, "Copy 1")
        logger.log_action(ActionType.DELETE, "Delete 1")
        logger.log_action(ActionType.COPY, "Copy 2")

        copies = logger.get_by_action_type(ActionType.COPY)
        latest = logger.get_by_action_type(ActionType.COPY, limit=1)

        assert [e.action_description for e in copies] == ["Copy 2", "Copy 1"]
        assert [e.action_description for e in latest] == ["Copy 2"]

    def test_get_failed(self, logger):
        logger.log_action(ActionType.MOVE, "Move ok")
        logger.log_action(
            action_type=ActionType.DELETE,
            description="Failed delete",
            status=ActionStatus.FAILED,
            result="[Errno 2] No such file or directory"
        )

        failed = logger.get_failed()

        assert len(failed) == 1
        assert failed[0].action_description == "Failed delete"

    def test_skips_corrupt_lines(self, logger, temp_log):
        logger.log_action(ActionType.LIST, "List a")
        with open(temp_log, "a", encoding="utf-8") as f:
            f.write('{"timestamp": "2024\n')

        assert len(logger.get_recent()) == 1

    def test_undecodable_path_round_trips(self, logger):
        name = os.fsdecode(b"/tmp/\xff.txt")

        logger.log_action(ActionType.DELETE, "Delete", metadata={"path": name})

        assert logger.get_recent()[0].metadata["path"] == name

    def test_clear_requires_confirmation(self, tmp_path):
        logger = AuditLogger(log_path=str(tmp_path / "audit.jsonl"))
        logger.log_action(ActionType.LIST, "List a")

        assert not logger.clear()
        assert len(logger.get_recent()) == 1

        assert logger.clear(confirm=True)
        assert logger.get_recent() == []
        assert len(list(tmp_path.glob("audit.backup.*.jsonl"))) == 1


class TestSettings:
    """Test configuration loading."""

    @pytest.fixture
    def temp_config(self):
        """Create a temporary config file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write("""fileops:
  audit_log: logs/audit.jsonl
  color: false
""")
            f.flush()
            yield f.name
        os.unlink(f.name)

    def test_defaults_without_path(self):
        settings = load_settings(None)

        assert settings == Settings(audit_log=None, color=True)

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_settings(str(tmp_path / "absent.yaml")) == Settings()

    def test_load_from_file(self, temp_config):
        settings = load_settings(temp_config)

        assert settings.audit_log == "logs/audit.jsonl"
        assert settings.color is False

    def test_invalid_yaml(self, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("fileops: [oops\n")

        with pytest.raises(ConfigurationError):
            load_settings(str(config))

    def test_non_mapping(self, tmp_path):
        config = tmp_path / "list.yaml"
        config.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            load_settings(str(config))

    def test_bad_color_value(self, tmp_path):
        config = tmp_path / "color.yaml"
        config.write_text("fileops:\n  color: purple\n")

        with pytest.raises(ConfigurationError):
            load_settings(str(config))

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "conf" / "fileops.yaml"
        original = Settings(audit_log="audit.jsonl", color=False)

        save_settings(original, str(path))

        assert load_settings(str(path)) == original


class TestConsoleHelpers:
    """Test the color formatting helpers."""

    def test_info_escapes_markup(self):
        assert info("[dir]") == "[bright_cyan]\\[dir][/bright_cyan]"

    def test_error_wraps_message(self):
        assert error("boom") == "[bright_red]boom[/bright_red]"

    def test_displayable_replaces_undecodable_bytes(self):
        name = os.fsdecode(b"\xff.txt")

        assert displayable(name) == "\ufffd.txt"
        assert displayable("plain/path.txt") == "plain/path.txt"
        assert info(name) == "[bright_cyan]\ufffd.txt[/bright_cyan]"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
