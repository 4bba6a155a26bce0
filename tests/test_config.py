"""Tests for configuration loading."""

import logging

from taskmaster.config import Config, load_config


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()

    def test_parses_values(self, tmp_path):
        path = tmp_path / "taskmaster.conf"
        path.write_text(
            "# TaskMaster settings\n"
            "SEED_EXAMPLES = false\n"
            "CONFIRM_DELETE=no\n"
            'PAUSE_AFTER_ACTION = "off" # quoted\n'
            "LOG_LEVEL = debug  # inline comment\n"
        )

        config = load_config(path)

        assert config.seed_examples is False
        assert config.confirm_delete is False
        assert config.pause_after_action is False
        assert config.log_level == "DEBUG"

    def test_ignores_bad_values(self, tmp_path):
        path = tmp_path / "taskmaster.conf"
        path.write_text(
            "SEED_EXAMPLES = maybe\n"
            "LOG_LEVEL = chatty\n"
            "not a setting\n"
            "UNKNOWN_KEY = 1\n"
        )

        config = load_config(path)

        assert config.seed_examples is True
        assert config.log_level == "WARNING"

    def test_warns_about_bad_values(self, tmp_path, caplog):
        path = tmp_path / "taskmaster.conf"
        path.write_text("SEED_EXAMPLES = maybe\nLOG_LEVEL = chatty\nnot a setting\n")

        with caplog.at_level(logging.WARNING, logger="taskmaster.config"):
            load_config(path)

        messages = [r.getMessage() for r in caplog.records]
        assert "Ignoring SEED_EXAMPLES: expected a boolean, got 'maybe'" in messages
        assert "Ignoring LOG_LEVEL: unknown level 'chatty'" in messages
        assert "Skipping malformed config line: 'not a setting'" in messages
