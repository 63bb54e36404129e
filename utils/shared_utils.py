"""
Shared utility functions for routers and services
"""
import json
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def log_endpoint_event(endpoint: str, user_id: Optional[str] = None, result: str = "success", details: Optional[dict] = None):
    """Write one log line per endpoint call; failures are logged at WARNING"""
    level = logging.INFO if result == "success" else logging.WARNING
    logger.log(level, f"{endpoint} | user={user_id or 'anonymous'} | {result} | {json.dumps(details or {}, default=str)}")
