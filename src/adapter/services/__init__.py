from src.adapter.services.http_task_client import HttpTaskClient
from src.adapter.services.service_resolver import StaticServiceResolver

__all__ = ["HttpTaskClient", "StaticServiceResolver"]
