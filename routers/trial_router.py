"""
Trial Router - API endpoints for trial status and the upgrade prompt hook
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query

from backend.utils.responses import success_response, error_response
from services.trial_service import trial_service
from utils.shared_utils import log_endpoint_event

logger = logging.getLogger(__name__)

# Create trial router
trial_router = APIRouter(prefix="/api/trial", tags=["trial"])


@trial_router.post("/status")
async def get_trial_status(
    profile: Optional[Dict[str, Any]] = Body(default=None),
    now: Optional[datetime] = Query(default=None),
):
    """
    Evaluate the trial status for a profile supplied by the auth/backend client.

    The body is the raw profile row (subscription_status, trial_ends_at, ...).
    A missing body is treated as no profile. `now` pins the evaluation time.
    """
    user_id = str(profile.get("id")) if profile and profile.get("id") is not None else None
    try:
        trial_status = trial_service.evaluate(profile, now)
        messages = trial_service.format_messages(trial_status)
    except Exception as e:
        logger.error(f"Trial status evaluation failed: {e}", exc_info=True)
        log_endpoint_event("/trial/status", user_id, "error", {"error": str(e)})
        return error_response("TRIAL_STATUS_FAILED", status=500, message=f"Trial status failed: {str(e)}")

    log_endpoint_event("/trial/status", user_id, "success", {
        "status": trial_status.status.value,
        "days_remaining": trial_status.days_remaining,
    })
    return success_response(
        data={
            **trial_status.model_dump(by_alias=True, mode="json"),
            "messages": messages.model_dump(),
        },
        message="Trial status retrieved successfully"
    )


@trial_router.post("/upgrade-prompt")
async def upgrade_prompt(reason: str = Query(default="generic")):
    """Upgrade modal hook: nothing is displayed, the request is only logged"""
    trial_service.trigger_upgrade_prompt(reason)
    log_endpoint_event("/trial/upgrade-prompt", None, "success", {"reason": reason})
    return success_response(
        data={"shown": False, "reason": reason},
        message="Upgrade prompt suppressed"
    )
