"""Static Service Resolver

In-memory implementation of ServiceResolver backed by a name -> URL mapping.
"""
import logging
from typing import Dict, Optional
from src.app.services.service_resolver import ServiceResolver, ServiceNotFoundError

logger = logging.getLogger(__name__)


class StaticServiceResolver(ServiceResolver):
    """
    Resolves service names from a fixed mapping.

    Entries can be replaced with register() and dropped with invalidate(),
    e.g. after a caller learns an address has moved.
    """

    def __init__(self, services: Optional[Dict[str, str]] = None):
        self._services: Dict[str, str] = dict(services or {})

    def resolve(self, service_name: str) -> str:
        try:
            return self._services[service_name]
        except KeyError:
            raise ServiceNotFoundError(service_name)

    def register(self, service_name: str, base_url: str) -> None:
        logger.info(f"Registering service {service_name} at {base_url}")
        self._services[service_name] = base_url

    def invalidate(self, service_name: Optional[str] = None) -> None:
        """Drop one service entry, or every entry when no name is given."""
        if service_name is None:
            self._services.clear()
        else:
            self._services.pop(service_name, None)
