"""
Service context extraction for logging.

Identifies which process produced a log line, e.g.
``ticket-sales@local_dev:4242``.
"""

import os
from functools import lru_cache

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', settings.SERVICE_NAME)
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
