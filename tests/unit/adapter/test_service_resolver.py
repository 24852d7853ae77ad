"""Unit tests for StaticServiceResolver"""
import pytest
from src.adapter.services.service_resolver import StaticServiceResolver
from src.app.services.service_resolver import ServiceNotFoundError


@pytest.fixture
def resolver():
    return StaticServiceResolver({"task-service": "http://task:8383/api/v1/task"})


class TestStaticServiceResolver:

    def test_resolve_known_service(self, resolver):
        assert resolver.resolve("task-service") == "http://task:8383/api/v1/task"

    def test_resolve_unknown_service_raises(self, resolver):
        with pytest.raises(ServiceNotFoundError) as exc_info:
            resolver.resolve("billing-service")

        assert exc_info.value.service_name == "billing-service"

    def test_register_replaces_entry(self, resolver):
        resolver.register("task-service", "http://task-2:8383/api/v1/task")

        assert resolver.resolve("task-service") == "http://task-2:8383/api/v1/task"

    def test_invalidate_single_entry(self, resolver):
        resolver.register("user-service", "http://user:8080")

        resolver.invalidate("task-service")

        with pytest.raises(ServiceNotFoundError):
            resolver.resolve("task-service")
        assert resolver.resolve("user-service") == "http://user:8080"

    def test_invalidate_all(self, resolver):
        resolver.invalidate()

        with pytest.raises(ServiceNotFoundError):
            resolver.resolve("task-service")

    def test_invalidate_unknown_is_noop(self, resolver):
        resolver.invalidate("missing")

        assert resolver.resolve("task-service") == "http://task:8383/api/v1/task"
