"""Shared fixtures for the echo service tests."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from echo_settings import EchoSettings
from main import create_app


@pytest.fixture
def settings() -> EchoSettings:
	return EchoSettings(log_level="WARNING")


@pytest.fixture
def app(settings: EchoSettings) -> FastAPI:
	return create_app(settings=settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
	"""TestClient bound to http://testserver."""
	with TestClient(app) as test_client:
		yield test_client
