"""Tests for voting_system/config.py and log.py."""
import logging

import pytest
import structlog
import structlog.testing

from voting_system.config import DEFAULT_WIN_THRESHOLD, load_settings
from voting_system.log import configure_logging, get_logger


class TestLoadSettings:
    def test_defaults(self, clean_env):
        s = load_settings()
        assert s.win_threshold == DEFAULT_WIN_THRESHOLD == 20
        assert s.log_level == "INFO"
        assert s.log_json is False

    def test_overrides(self, clean_env):
        clean_env.setenv("VOTING_WIN_THRESHOLD", "5")
        clean_env.setenv("VOTING_LOG_LEVEL", "debug")
        clean_env.setenv("VOTING_LOG_JSON", "yes")
        s = load_settings()
        assert s.win_threshold == 5
        assert s.log_level == "DEBUG"
        assert s.log_json is True

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_bad_threshold(self, clean_env, value):
        clean_env.setenv("VOTING_WIN_THRESHOLD", value)
        with pytest.raises(RuntimeError, match="VOTING_WIN_THRESHOLD"):
            load_settings()

    def test_bad_log_level(self, clean_env):
        clean_env.setenv("VOTING_LOG_LEVEL", "LOUD")
        with pytest.raises(RuntimeError, match="VOTING_LOG_LEVEL"):
            load_settings()

    def test_bad_log_json(self, clean_env):
        clean_env.setenv("VOTING_LOG_JSON", "maybe")
        with pytest.raises(RuntimeError, match="VOTING_LOG_JSON"):
            load_settings()

    def test_settings_frozen(self, clean_env):
        s = load_settings()
        with pytest.raises(Exception):
            s.win_threshold = 3


class TestLogging:
    def test_root_level_applied(self):
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_json_renderer_selected(self):
        configure_logging("INFO", json_logs=True)
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_key_value_renderer_by_default(self):
        configure_logging("INFO")
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.KeyValueRenderer)

    def test_bound_fields_reach_processors(self):
        configure_logging("INFO")
        with structlog.testing.capture_logs() as logs:
            get_logger("voting_system.test").info("hello", answer=42)
        assert logs == [{"event": "hello", "answer": 42, "log_level": "info"}]

    def test_configuration_does_not_leak_between_tests(self):
        # the previous tests configured structlog; the conftest fixture resets it
        assert not structlog.is_configured()
