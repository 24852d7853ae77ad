"""Unit tests for dependency providers"""
import httpx
import pytest
from unittest.mock import patch
from src.depends import configure_logging, get_service_resolver, get_task_client
from src.adapter.services.http_task_client import HttpTaskClient


class FakeConfig:
    LOG_LEVEL = "debug"
    TASK_SERVICE_URL = "http://task-config:8383/api/v1/task"
    TASK_SERVICE_NAME = "tasks"
    TASK_SERVICE_TIMEOUT = 3.0


@pytest.fixture
def fake_config():
    with patch("src.depends.ApplicationConfig", FakeConfig):
        yield FakeConfig


def test_get_task_client_uses_config(fake_config):
    client = get_task_client(client=httpx.AsyncClient())

    assert isinstance(client, HttpTaskClient)
    assert client.base_url == "http://task-config:8383/api/v1/task"
    assert client.timeout == 3.0
    assert client.service_name == "tasks"
    assert client.resolver is None


def test_get_service_resolver_seeded_from_config(fake_config):
    resolver = get_service_resolver()

    assert resolver.resolve("tasks") == "http://task-config:8383/api/v1/task"


def test_configure_logging_applies_level(fake_config):
    with patch("src.depends.logging.basicConfig") as mock_basic_config:
        configure_logging()

        assert mock_basic_config.call_args.kwargs["level"] == "DEBUG"
