import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EchoSettings(BaseSettings):
	"""
	Runtime settings for the echo service.

	Values come from ``ECHO_``-prefixed environment variables or a ``.env``
	file. Environment variables take precedence over the file.
	"""

	model_config = SettingsConfigDict(
		env_prefix="ECHO_",
		env_file=".env",
		env_file_encoding="utf-8",
		case_sensitive=False,
		extra="ignore",
	)

	host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
	port: int = Field(default=8000, ge=1, le=65535, description="Port uvicorn listens on")
	echo_path: str = Field(default="/echo", description="Path the echo routes are mounted at")
	log_level: str = Field(default="INFO", description="Root log level")
	json_logs: bool = Field(default=False, description="Render logs as JSON instead of console output")

	@field_validator("log_level")
	@classmethod
	def validate_log_level(cls, v: str) -> str:
		level = v.upper()
		if level not in logging.getLevelNamesMapping():
			raise ValueError(f"Unknown log level: {v}")
		return level

	@field_validator("echo_path")
	@classmethod
	def validate_echo_path(cls, v: str) -> str:
		if not v.startswith("/"):
			raise ValueError("echo_path must start with '/'")
		return v


@lru_cache
def get_settings() -> EchoSettings:
	return EchoSettings()
