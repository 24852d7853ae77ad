"""HTTP Task Client Implementation

Concrete implementation of TaskClient using httpx. One request per call, no
retries: failures are reported in the returned RemoteCallResult.
"""
import logging
import httpx
from typing import Optional
from urllib.parse import quote
from pydantic import ValidationError
from libs.result import RemoteCallResult, Return
from src.app.services.task_client import (
    TaskClient,
    TransportError,
    RemoteError,
    DecodingError,
)
from src.app.services.task_dtos import TaskResponse
from src.app.services.service_resolver import ServiceResolver, ServiceNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8383/api/v1/task"
DEFAULT_SERVICE_NAME = "task-service"


class HttpTaskClient(TaskClient):
    """
    HTTP implementation of TaskClient using httpx.

    Endpoints (relative to the base URL):
    - GET    /count/project/{projectCode}
    - PUT    /complete/project/{projectCode}
    - DELETE /delete/project/{projectCode}
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
        resolver: Optional[ServiceResolver] = None,
        service_name: str = DEFAULT_SERVICE_NAME,
    ):
        """
        Initialize HTTP task client.

        Args:
            base_url: Base URL of the task endpoints; DEFAULT_BASE_URL when None
            timeout: Request timeout in seconds when a call gives none, also applied
                to an injected client (default: 5.0)
            client: Optional httpx.AsyncClient to send requests with; not closed by close()
            resolver: Optional resolver asked for the base URL on every request
            service_name: Logical name passed to the resolver
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.resolver = resolver
        self.service_name = service_name
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def get_counts_by_project(
        self, project_code: str, timeout: Optional[float] = None
    ) -> RemoteCallResult[TaskResponse]:
        return await self._call("GET", "/count/project", project_code, timeout)

    async def complete_by_project(
        self, project_code: str, timeout: Optional[float] = None
    ) -> RemoteCallResult[TaskResponse]:
        return await self._call("PUT", "/complete/project", project_code, timeout)

    async def delete_by_project(
        self, project_code: str, timeout: Optional[float] = None
    ) -> RemoteCallResult[TaskResponse]:
        return await self._call("DELETE", "/delete/project", project_code, timeout)

    @staticmethod
    def _encode_project_code(project_code: str) -> str:
        """Percent-encode a project code as a single path segment."""
        if not isinstance(project_code, str) or not project_code.strip():
            raise ValueError("project_code must be a non-empty string")
        # Dot segments would be collapsed by URL normalization
        if project_code in (".", ".."):
            raise ValueError(f"project_code cannot be '{project_code}'")
        return quote(project_code, safe="")

    def _resolve_base_url(self) -> str:
        if self.resolver is None:
            return self.base_url
        return self.resolver.resolve(self.service_name).rstrip("/")

    async def _send_request(
        self, method: str, url: str, timeout: Optional[float] = None
    ) -> httpx.Response:
        """
        Send exactly one request.

        Raises:
            TransportError: When no response was received
            DecodingError: When the body cannot be read, e.g. a broken Content-Encoding
        """
        request_timeout = timeout if timeout is not None else self.timeout
        try:
            return await self.client.request(method, url, timeout=request_timeout)
        except httpx.TimeoutException as e:
            logger.error(f"Task service request timed out: {method} {url}: {e}")
            raise TransportError(f"Request to task service timed out: {e}", cause=e)
        except httpx.TransportError as e:
            logger.error(f"Task service unreachable: {method} {url}: {e}")
            raise TransportError(f"Task service unreachable: {e}", cause=e)
        except httpx.DecodingError as e:
            logger.error(f"Cannot read task service response body: {method} {url}: {e}")
            raise DecodingError(f"Response body could not be read: {e}")

    def _decode(self, response: httpx.Response) -> TaskResponse:
        try:
            payload = response.json()
        except ValueError as e:
            raise DecodingError(
                f"Response body is not valid JSON: {e}",
                status_code=response.status_code,
                content=response.text,
            )
        try:
            return TaskResponse.model_validate(payload)
        except ValidationError as e:
            raise DecodingError(
                f"Response body does not match TaskResponse: {e}",
                status_code=response.status_code,
                content=response.text,
            )

    async def _call(
        self, method: str, prefix: str, project_code: str, timeout: Optional[float]
    ) -> RemoteCallResult[TaskResponse]:
        segment = self._encode_project_code(project_code)

        try:
            base_url = self._resolve_base_url()
        except ServiceNotFoundError as e:
            logger.error(f"Cannot resolve task service: {e}")
            return Return.err(TransportError(str(e), cause=e))

        url = f"{base_url}{prefix}/{segment}"
        logger.debug(f"Task service request: {method} {url}")

        try:
            response = await self._send_request(method, url, timeout=timeout)
        except (TransportError, DecodingError) as e:
            return Return.err(e)

        status_code = response.status_code

        # Non-2xx: keep the envelope if the body decodes
        if not 200 <= status_code < 300:
            body = None
            if response.content:
                try:
                    body = self._decode(response)
                except DecodingError:
                    body = None
            logger.warning(f"Task service returned {status_code} for {method} {url}")
            return Return.err(
                RemoteError(
                    f"Task service returned {status_code}",
                    status_code=status_code,
                    body=body,
                ),
                status_code=status_code,
            )

        if status_code == 204:
            return Return.ok(None, status_code=status_code)

        try:
            return Return.ok(self._decode(response), status_code=status_code)
        except DecodingError as e:
            logger.error(f"Cannot decode task service response for {method} {url}: {e.message}")
            return Return.err(e, status_code=status_code)

    async def close(self):
        """Close the HTTP client connection if this instance created it"""
        if self._owns_client:
            await self.client.aclose()
