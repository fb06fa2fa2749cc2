"""Tests for the yquotes command line entry point."""

import logging
from unittest.mock import patch

import pytest
import typer
from typer.testing import CliRunner

from yquotes.cli import app, parse_listen_address, parse_log_level
from yquotes.logging_config import configure_logging, level_from_verbosity

runner = CliRunner()


class TestParseListenAddress:
    def test_port_only_binds_all_interfaces(self):
        assert parse_listen_address(":9666") == ("0.0.0.0", 9666)

    def test_host_and_port(self):
        assert parse_listen_address("127.0.0.1:8080") == ("127.0.0.1", 8080)

    def test_ipv6(self):
        assert parse_listen_address("[::1]:9666") == ("::1", 9666)

    @pytest.mark.parametrize("value", ["9666", "localhost:", "host:http", ":70000", ":0"])
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter):
            parse_listen_address(value)


class TestParseLogLevel:
    @pytest.mark.parametrize("value,expected", [("info", "INFO"), ("WARNING", "WARNING"), (" Debug ", "DEBUG")])
    def test_valid(self, value, expected):
        assert parse_log_level(value) == expected

    @pytest.mark.parametrize("value", ["warn", "bogus", "verbose", "trace", ""])
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter):
            parse_log_level(value)


class TestVerbosity:
    def test_default_level(self):
        assert level_from_verbosity(0) == "INFO"

    def test_default_from_settings(self):
        assert level_from_verbosity(0, "warning") == "WARNING"

    def test_verbose_is_debug(self):
        assert level_from_verbosity(1) == "DEBUG"
        assert level_from_verbosity(3) == "DEBUG"

    def test_configure_logging_sets_root_level(self):
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("debug")
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)


class TestCommand:
    @pytest.fixture(autouse=True)
    def configure(self):
        with patch("yquotes.cli.configure_logging") as mock:
            yield mock

    def test_default_listen_address(self, configure):
        with patch("yquotes.cli.uvicorn.run") as run:
            result = runner.invoke(app, [])

        assert result.exit_code == 0, result.output
        run.assert_called_once_with("yquotes.main:app", host="0.0.0.0", port=9666, log_level="info")
        configure.assert_called_once_with("INFO")

    def test_flags(self, configure):
        with patch("yquotes.cli.uvicorn.run") as run:
            result = runner.invoke(app, ["--listen-address", "127.0.0.1:9100", "-v"])

        assert result.exit_code == 0, result.output
        run.assert_called_once_with("yquotes.main:app", host="127.0.0.1", port=9100, log_level="debug")
        configure.assert_called_once_with("DEBUG")

    def test_log_level_overrides_verbose(self):
        with patch("yquotes.cli.uvicorn.run") as run:
            result = runner.invoke(app, ["-v", "--log-level", "warning"])

        assert result.exit_code == 0, result.output
        assert run.call_args.kwargs["log_level"] == "warning"

    def test_bad_listen_address(self):
        with patch("yquotes.cli.uvicorn.run") as run:
            result = runner.invoke(app, ["--listen-address", "nope"])

        assert result.exit_code != 0
        run.assert_not_called()

    @pytest.mark.parametrize("value", ["warn", "bogus"])
    def test_unknown_log_level_is_usage_error(self, configure, value):
        with patch("yquotes.cli.uvicorn.run") as run:
            result = runner.invoke(app, ["--log-level", value])

        assert result.exit_code == 2
        assert not isinstance(result.exception, (KeyError, ValueError))
        run.assert_not_called()
        configure.assert_not_called()

    def test_bad_log_level_from_settings_is_usage_error(self):
        with (
            patch("yquotes.cli.settings.log_level", "verbose"),
            patch("yquotes.cli.uvicorn.run") as run,
        ):
            result = runner.invoke(app, [])

        assert result.exit_code == 2
        run.assert_not_called()
