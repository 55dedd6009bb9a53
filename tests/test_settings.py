"""Tests for environment-driven settings and logging setup."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from echo_logging import configure_structlog, setup_logging
from echo_settings import EchoSettings


class TestEchoSettings:
	def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
		for name in ["ECHO_HOST", "ECHO_PORT", "ECHO_ECHO_PATH", "ECHO_LOG_LEVEL", "ECHO_JSON_LOGS"]:
			monkeypatch.delenv(name, raising=False)

		settings = EchoSettings(_env_file=None)

		assert settings.host == "0.0.0.0"
		assert settings.port == 8000
		assert settings.echo_path == "/echo"
		assert settings.log_level == "INFO"
		assert settings.json_logs is False

	def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
		monkeypatch.setenv("ECHO_PORT", "9090")
		monkeypatch.setenv("ECHO_ECHO_PATH", "/mirror")
		monkeypatch.setenv("ECHO_LOG_LEVEL", "debug")
		monkeypatch.setenv("ECHO_JSON_LOGS", "true")

		settings = EchoSettings(_env_file=None)

		assert settings.port == 9090
		assert settings.echo_path == "/mirror"
		assert settings.log_level == "DEBUG"
		assert settings.json_logs is True

	def test_rejects_unknown_log_level(self) -> None:
		with pytest.raises(ValidationError):
			EchoSettings(log_level="LOUD")

	def test_rejects_relative_path(self) -> None:
		with pytest.raises(ValidationError):
			EchoSettings(echo_path="echo")


class TestSetupLogging:
	def test_sets_root_level_and_single_handler(self) -> None:
		setup_logging(json_logs=True, log_level="ERROR")

		root = logging.getLogger()
		assert root.level == logging.ERROR
		assert len(root.handlers) == 1

	def test_uvicorn_propagates_to_root(self) -> None:
		setup_logging(log_level="INFO")

		uvicorn_logger = logging.getLogger("uvicorn.access")
		assert uvicorn_logger.handlers == []
		assert uvicorn_logger.propagate is True

	def test_configure_structlog_takes_no_arguments(self) -> None:
		configure_structlog()

		processors = structlog.get_config()["processors"]
		assert processors[-1] is structlog.stdlib.ProcessorFormatter.wrap_for_formatter
