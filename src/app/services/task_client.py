"""Task Client Interface

Abstract interface for the task service's project-scoped endpoints, plus the
error kinds a remote call can end in.
"""
from abc import ABC, abstractmethod
from typing import Optional
from libs.result import RemoteCallResult
from .task_dtos import TaskResponse


class TaskClientError(Exception):
    """Base exception for failed task-service calls"""
    code = "TASK_CLIENT_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TransportError(TaskClientError):
    """No response received: connection refused, DNS failure or timeout"""
    code = "TRANSPORT_ERROR"

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class RemoteError(TaskClientError):
    """Response received with a non-2xx status"""
    code = "REMOTE_ERROR"

    def __init__(self, message: str, status_code: int, body: Optional[TaskResponse] = None):
        super().__init__(message, status_code=status_code)
        self.body = body


class DecodingError(TaskClientError):
    """Response body could not be decoded into a TaskResponse"""
    code = "DECODING_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None, content: str = ""):
        super().__init__(message, status_code=status_code)
        self.content = content


class TaskClient(ABC):
    """
    Abstract interface for the task service.

    Every operation issues a single request and reports its outcome as a
    RemoteCallResult instead of raising. Retry policy belongs to the caller.
    Cancelling the awaiting asyncio task raises asyncio.CancelledError as usual;
    only an expired timeout is reported as a TransportError.
    """

    @abstractmethod
    async def get_counts_by_project(
        self, project_code: str, timeout: Optional[float] = None
    ) -> RemoteCallResult[TaskResponse]:
        """
        Get aggregate task counts for a project.

        Args:
            project_code: Project identifier
            timeout: Optional per-call timeout in seconds

        Returns:
            RemoteCallResult with the TaskResponse, or with a TransportError,
            RemoteError or DecodingError
        """
        pass

    @abstractmethod
    async def complete_by_project(
        self, project_code: str, timeout: Optional[float] = None
    ) -> RemoteCallResult[TaskResponse]:
        """Mark every task of a project as complete."""
        pass

    @abstractmethod
    async def delete_by_project(
        self, project_code: str, timeout: Optional[float] = None
    ) -> RemoteCallResult[TaskResponse]:
        """Delete every task of a project."""
        pass
