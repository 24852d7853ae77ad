import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("TASK_CLIENT_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default):
    # Environment variables take precedence over env.yaml
    return os.environ.get(key, data.get(key, default))


class ApplicationConfig:
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    # Task Service Integration
    TASK_SERVICE_URL = _get("TASK_SERVICE_URL", "http://localhost:8383/api/v1/task")
    TASK_SERVICE_NAME = _get("TASK_SERVICE_NAME", "task-service")
    TASK_SERVICE_TIMEOUT = float(_get("TASK_SERVICE_TIMEOUT", 5.0))
