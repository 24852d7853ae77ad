import logging
from typing import Optional
import httpx
from config import ApplicationConfig
from src.adapter.services.http_task_client import HttpTaskClient
from src.adapter.services.service_resolver import StaticServiceResolver
from src.app.services.service_resolver import ServiceResolver


def configure_logging(level: Optional[str] = None) -> None:
    """Apply LOG_LEVEL from config to the root logger"""
    logging.basicConfig(
        level=(level or ApplicationConfig.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_service_resolver() -> StaticServiceResolver:
    """Resolver seeded with the configured task service URL"""
    return StaticServiceResolver(
        {ApplicationConfig.TASK_SERVICE_NAME: ApplicationConfig.TASK_SERVICE_URL}
    )


def get_task_client(
    client: Optional[httpx.AsyncClient] = None,
    resolver: Optional[ServiceResolver] = None,
) -> HttpTaskClient:
    """Task client with configured base URL and timeout"""
    return HttpTaskClient(
        base_url=ApplicationConfig.TASK_SERVICE_URL,
        timeout=ApplicationConfig.TASK_SERVICE_TIMEOUT,
        client=client,
        resolver=resolver,
        service_name=ApplicationConfig.TASK_SERVICE_NAME,
    )
