# (c) Copyright IBM Corp. 2025

import logging
import os
from typing import TYPE_CHECKING, Generator

import pytest
from mock import patch

from lsfinder.configurator import config
from lsfinder.options import BaseOptions, DiscoveryOptions

if TYPE_CHECKING:
    from pytest import LogCaptureFixture


class TestBaseOptions:
    def test_base_options(self) -> None:
        base_options = BaseOptions()

        assert not base_options.debug
        assert base_options.log_level == logging.WARN

    @patch.dict(os.environ, {"LSFINDER_DEBUG": "true"})
    def test_base_options_debug(self) -> None:
        base_options = BaseOptions()

        assert base_options.debug
        assert base_options.log_level == logging.DEBUG

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARN),
            ("error", logging.ERROR),
        ],
    )
    def test_base_options_log_level(self, level: str, expected: int) -> None:
        with patch.dict(os.environ, {"LSFINDER_LOG_LEVEL": level}):
            assert BaseOptions().log_level == expected

    @patch.dict(os.environ, {"LSFINDER_LOG_LEVEL": "chatty"})
    def test_base_options_invalid_log_level(self, caplog: "LogCaptureFixture") -> None:
        assert BaseOptions().log_level == logging.WARN
        assert "Invalid LSFINDER_LOG_LEVEL value: chatty" in caplog.messages[0]

    def test_base_options_keywords_win(self) -> None:
        with patch.dict(os.environ, {"LSFINDER_DEBUG": "true"}):
            base_options = BaseOptions(debug=False, log_level=logging.ERROR)

        assert not base_options.debug
        assert base_options.log_level == logging.ERROR


class TestDiscoveryOptions:
    @pytest.fixture(autouse=True)
    def _resource(self, tmp_path) -> Generator[None, None, None]:
        self.config_file = tmp_path / "lsfinder.yaml"
        self.config_file.write_text(
            "discovery:\n"
            "  max_retries: 3\n"
            "  retry_delay: 0.5\n"
            "  probe_timeout: 2\n"
            "  command_timeout: 4.5\n"
        )
        yield

    def test_defaults(self) -> None:
        options = DiscoveryOptions()

        assert options.max_retries == 1
        assert options.retry_delay == 0.1
        assert options.probe_timeout == 5.0
        assert options.command_timeout == 10.0
        assert options.log_level == logging.WARN

    def test_in_code_config(self) -> None:
        config["discovery"] = {"max_retries": 2, "retry_delay": 0}
        options = DiscoveryOptions()

        assert options.max_retries == 2
        assert options.retry_delay == 0.0
        assert options.probe_timeout == 5.0

    def test_config_file(self) -> None:
        with patch.dict(os.environ, {"LSFINDER_CONFIG_PATH": str(self.config_file)}):
            options = DiscoveryOptions()

        assert options.max_retries == 3
        assert options.retry_delay == 0.5
        assert options.probe_timeout == 2.0
        assert options.command_timeout == 4.5

    def test_priority(self) -> None:
        # environment variables > config file > in-code configuration > default value
        config["discovery"] = {"max_retries": 2, "retry_delay": 0.3, "probe_timeout": 1}
        env = {
            "LSFINDER_CONFIG_PATH": str(self.config_file),
            "LSFINDER_MAX_RETRIES": "7",
        }
        with patch.dict(os.environ, env):
            options = DiscoveryOptions()

        assert options.max_retries == 7
        assert options.retry_delay == 0.5
        assert options.probe_timeout == 2.0

    def test_environment_variables(self) -> None:
        env = {
            "LSFINDER_MAX_RETRIES": "5",
            "LSFINDER_RETRY_DELAY": "0",
            "LSFINDER_PROBE_TIMEOUT": "1.5",
            "LSFINDER_COMMAND_TIMEOUT": "30",
        }
        with patch.dict(os.environ, env):
            options = DiscoveryOptions()

        assert options.max_retries == 5
        assert options.retry_delay == 0.0
        assert options.probe_timeout == 1.5
        assert options.command_timeout == 30.0

    @pytest.mark.parametrize(
        "env_var,value,attribute,expected",
        [
            ("LSFINDER_MAX_RETRIES", "zero", "max_retries", 1),
            ("LSFINDER_MAX_RETRIES", "0", "max_retries", 1),
            ("LSFINDER_RETRY_DELAY", "-1", "retry_delay", 0.1),
            ("LSFINDER_PROBE_TIMEOUT", "soon", "probe_timeout", 5.0),
            ("LSFINDER_PROBE_TIMEOUT", "0", "probe_timeout", 5.0),
            ("LSFINDER_PROBE_TIMEOUT", "-3", "probe_timeout", 5.0),
            ("LSFINDER_COMMAND_TIMEOUT", "0", "command_timeout", 10.0),
        ],
        ids=[
            "not_a_number",
            "zero_retries",
            "negative_delay",
            "bad_timeout",
            "zero_probe_timeout",
            "negative_probe_timeout",
            "zero_command_timeout",
        ],
    )
    def test_invalid_values_keep_default(
        self,
        env_var: str,
        value: str,
        attribute: str,
        expected,
        caplog: "LogCaptureFixture",
    ) -> None:
        with patch.dict(os.environ, {env_var: value}):
            options = DiscoveryOptions()

        assert getattr(options, attribute) == expected
        assert any(env_var in message for message in caplog.messages)

    def test_invalid_env_falls_back_to_config_file(self) -> None:
        env = {
            "LSFINDER_CONFIG_PATH": str(self.config_file),
            "LSFINDER_MAX_RETRIES": "many",
        }
        with patch.dict(os.environ, env):
            options = DiscoveryOptions()

        assert options.max_retries == 3

    def test_keywords_override_everything(self) -> None:
        with patch.dict(os.environ, {"LSFINDER_MAX_RETRIES": "5"}):
            options = DiscoveryOptions(max_retries=1, retry_delay=0)

        assert options.max_retries == 1
        assert options.retry_delay == 0

    def test_zero_delay_is_allowed(self) -> None:
        with patch.dict(os.environ, {"LSFINDER_RETRY_DELAY": "0"}):
            assert DiscoveryOptions().retry_delay == 0.0

    def test_unreadable_config_file_keeps_defaults(self, tmp_path) -> None:
        with patch.dict(os.environ, {"LSFINDER_CONFIG_PATH": str(tmp_path)}):
            options = DiscoveryOptions()

        assert options.max_retries == 1
        assert options.probe_timeout == 5.0
