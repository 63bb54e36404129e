"""
Trial Service for deriving a profile's trial status and the text shown for it
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from config.settings import Settings, settings
from models.trial import ProfileSnapshot, TrialMessages, TrialState, TrialStatus

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)

DEFAULT_MESSAGES = TrialMessages(
    title="Plan Information",
    message="We could not verify the status of your plan.",
    icon="fas fa-info-circle",
)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are stored as UTC by the profile backend
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_trial_end(value: Any) -> Optional[datetime]:
    """
    Parse a trial end timestamp into an aware datetime.

    Returns None for anything that is not a datetime or an ISO-8601 string.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _as_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def _ceil_days(delta: timedelta) -> int:
    # Exact ceiling: a partial day still counts as a remaining day
    return -((-delta) // ONE_DAY)


class TrialService:
    """
    Service for evaluating user trial periods.
    Pure over its inputs: never fetches profiles and never reads the clock
    unless the caller leaves `now` out.
    """

    def __init__(self, config: Settings = settings):
        """
        Initialize the trial service with application settings.

        Args:
            config: Settings instance providing the trial rules
        """
        self.config = config

    def evaluate(
        self,
        profile: Any,
        now: Optional[datetime] = None,
    ) -> TrialStatus:
        """
        Derive the trial status for a profile.

        Checks run in a fixed order and the first match wins:
        1. No profile -> inactive
        2. Premium subscription -> premium
        3. No trial end date (or one that cannot be parsed) -> inactive
        4. Whole days left, rounded up: <= 0 expired, up to the warning
           threshold warning, otherwise active

        Args:
            profile: ProfileSnapshot, raw profile mapping or row object, or None
            now: Evaluation time; defaults to the current UTC time

        Returns:
            TrialStatus with status and days remaining
        """
        snapshot = self._coerce_profile(profile)
        if snapshot is None:
            return TrialStatus(status=TrialState.INACTIVE, days_remaining=0)

        if snapshot.subscription_status == self.config.premium_status:
            return TrialStatus(status=TrialState.PREMIUM, days_remaining=0)

        if not snapshot.trial_ends_at:
            return TrialStatus(status=TrialState.INACTIVE, days_remaining=0)

        trial_end = parse_trial_end(snapshot.trial_ends_at)
        if trial_end is None:
            logger.warning(f"Unparseable trial_ends_at {snapshot.trial_ends_at!r}; treating trial as inactive")
            return TrialStatus(status=TrialState.INACTIVE, days_remaining=0)

        current = _as_utc(now) if now is not None else datetime.now(timezone.utc)
        diff_days = _ceil_days(trial_end - current)

        if diff_days <= 0:
            return TrialStatus(status=TrialState.EXPIRED, days_remaining=0)

        if diff_days <= self.config.trial_warning_days:
            return TrialStatus(status=TrialState.WARNING, days_remaining=diff_days)

        return TrialStatus(status=TrialState.ACTIVE, days_remaining=diff_days)

    def format_messages(self, trial_status: Union[TrialStatus, Mapping[str, Any]]) -> TrialMessages:
        """
        Build the title, message and icon for the trial alert bar.

        Unknown or missing statuses fall back to a generic plan notice.
        """
        if isinstance(trial_status, TrialStatus):
            status = trial_status.status.value
            days = trial_status.days_remaining
        elif isinstance(trial_status, Mapping):
            status = trial_status.get("status")
            if isinstance(status, TrialState):
                status = status.value
            days = trial_status.get("days_remaining", trial_status.get("daysRemaining", 0))
        else:
            return DEFAULT_MESSAGES

        if status == TrialState.PREMIUM.value:
            return TrialMessages(
                title="Premium Plan Active",
                message="You have access to every feature. Thank you!",
                icon="fas fa-star",
            )
        if status == TrialState.EXPIRED.value:
            return TrialMessages(
                title="Trial Period Expired",
                message=f"Your {self.config.trial_length_days}-day trial has ended.",
                icon="fas fa-exclamation-circle",
            )
        if status == TrialState.WARNING.value:
            return TrialMessages(
                title="Your Trial Is Ending Soon!",
                message=f"Only {days} day(s) left to enjoy it.",
                icon="fas fa-exclamation-triangle",
            )
        if status == TrialState.ACTIVE.value:
            return TrialMessages(
                title="Trial Period",
                message=f"You have {days} day(s) remaining.",
                icon="fas fa-clock",
            )
        if status == TrialState.INACTIVE.value:
            return TrialMessages(
                title="No Active Trial",
                message="Start a trial or upgrade to unlock every feature.",
                icon="fas fa-lock",
            )
        return DEFAULT_MESSAGES

    def trigger_upgrade_prompt(self, reason: Any = "generic") -> None:
        """
        Hook point for the upgrade modal.
        Intentionally shows nothing; the request is only logged.
        """
        logger.info(f"Upgrade prompt requested (reason: {reason}); display suppressed")

    @staticmethod
    def _coerce_profile(profile: Any) -> Optional[ProfileSnapshot]:
        if profile is None or isinstance(profile, ProfileSnapshot):
            return profile
        if isinstance(profile, (str, bytes)):
            logger.warning(f"Profile of type {type(profile).__name__} cannot be read, treating trial as inactive")
            return None
        # Mappings are read by key; ORM rows and other objects by attribute
        source = dict(profile) if isinstance(profile, Mapping) else profile
        try:
            return ProfileSnapshot.model_validate(source)
        except ValidationError as e:
            logger.warning(f"Profile could not be read, treating trial as inactive: {e}")
            return None


# Module-level service bound to the application settings
trial_service = TrialService()


def evaluate(
    profile: Any,
    now: Optional[datetime] = None,
) -> TrialStatus:
    return trial_service.evaluate(profile, now)


def format_messages(trial_status: Union[TrialStatus, Mapping[str, Any]]) -> TrialMessages:
    return trial_service.format_messages(trial_status)


def trigger_upgrade_prompt(reason: Any = "generic") -> None:
    trial_service.trigger_upgrade_prompt(reason)
