"""Service Resolver Interface

Maps a logical service name to a concrete base URL.
"""
from abc import ABC, abstractmethod


class ServiceNotFoundError(LookupError):
    """Raised when a service name has no known base URL"""
    def __init__(self, service_name: str):
        self.service_name = service_name
        super().__init__(f"No base URL registered for service '{service_name}'")


class ServiceResolver(ABC):

    @abstractmethod
    def resolve(self, service_name: str) -> str:
        """
        Resolve a logical service name.

        Returns:
            str: Base URL such as "http://task-service:8383/api/v1/task"

        Raises:
            ServiceNotFoundError: When the name is unknown
        """
        pass
