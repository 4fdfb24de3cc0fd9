"""Periodic Counter Engine - Pure logic for daily/weekly repeatable actions.

Each repeatable action is a small two-state automaton: within-period or
expired. Expiry is detected lazily when the action is touched; there is no
timer. ``reset_date`` anchors the current period.

Reset rules:
- Daily: the local calendar date of ``now`` differs from ``reset_date``'s
- Weekly, "elapsed" mode: at least 7 days have passed since ``reset_date``
- Weekly, "calendar" mode: the start of ``now``'s week (``week_start``) is
  after ``reset_date``'s local date

ARCHITECTURE: All functions are static methods that operate on passed-in
data and return new dicts. ``now`` and the timezone are always passed in.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from .. import const
from ..utils.dt_utils import dt_parse, dt_to_iso, local_date, start_of_week
from ..utils.math_utils import calculate_percentage

if TYPE_CHECKING:
    from ..type_defs import RepeatableActionData


class PeriodicCounterEngine:
    """Pure logic engine for repeatable action counters.

    All methods are static - no instance state.
    """

    @staticmethod
    def should_reset(
        action: Mapping[str, Any],
        now: datetime,
        tz: ZoneInfo | None = None,
        weekly_mode: str = const.DEFAULT_WEEKLY_RESET_MODE,
        week_start: str = const.DEFAULT_WEEK_START,
    ) -> bool:
        """Return True if the action's period has expired at ``now``.

        Args:
            action: Repeatable action dict
            now: Reference moment (aware)
            tz: Zone in which calendar dates are taken
            weekly_mode: "elapsed" or "calendar"
            week_start: Weekday name used by calendar mode

        Returns:
            True if the counter must be zeroed before the next increment.
            An action without a parseable reset_date is always expired.
        """
        reset_at = dt_parse(action.get(const.DATA_REPEATABLE_RESET_DATE))
        if reset_at is None:
            return True

        if action.get(const.DATA_REPEATABLE_IS_DAILY):
            return local_date(now, tz) != local_date(reset_at, tz)

        if action.get(const.DATA_REPEATABLE_IS_WEEKLY):
            if weekly_mode == const.WEEKLY_RESET_MODE_CALENDAR:
                week_began = start_of_week(local_date(now, tz), week_start)
                return week_began > local_date(reset_at, tz)
            return now - reset_at >= timedelta(days=const.WEEKLY_PERIOD_DAYS)

        return False

    @staticmethod
    def reset(action: RepeatableActionData, now: datetime) -> RepeatableActionData:
        """Zero the counter and re-anchor the period at ``now``."""
        updated: RepeatableActionData = {**action}
        updated[const.DATA_REPEATABLE_CURRENT_COUNT] = 0
        updated[const.DATA_REPEATABLE_RESET_DATE] = dt_to_iso(now)
        return updated

    @staticmethod
    def increment(
        action: RepeatableActionData,
        now: datetime,
        tz: ZoneInfo | None = None,
        weekly_mode: str = const.DEFAULT_WEEKLY_RESET_MODE,
        week_start: str = const.DEFAULT_WEEK_START,
    ) -> RepeatableActionData:
        """Increment the counter, resetting first if the period expired.

        The count saturates at ``target_count``; calling this on a completed
        action is safe but grants nothing new (callers short-circuit before
        rewarding).
        """
        if PeriodicCounterEngine.should_reset(
            action, now, tz, weekly_mode, week_start
        ):
            action = PeriodicCounterEngine.reset(action, now)

        updated: RepeatableActionData = {**action}
        target = updated.get(const.DATA_REPEATABLE_TARGET_COUNT, 1)
        updated[const.DATA_REPEATABLE_CURRENT_COUNT] = min(
            updated.get(const.DATA_REPEATABLE_CURRENT_COUNT, 0) + 1, target
        )
        updated[const.DATA_REPEATABLE_LAST_COMPLETED_DATE] = dt_to_iso(now)
        return updated

    @staticmethod
    def is_completed(action: Mapping[str, Any]) -> bool:
        """Completion means current_count has reached target_count."""
        return action.get(const.DATA_REPEATABLE_CURRENT_COUNT, 0) >= action.get(
            const.DATA_REPEATABLE_TARGET_COUNT, 1
        )

    @staticmethod
    def current_count(
        action: Mapping[str, Any],
        now: datetime,
        tz: ZoneInfo | None = None,
        weekly_mode: str = const.DEFAULT_WEEKLY_RESET_MODE,
        week_start: str = const.DEFAULT_WEEK_START,
    ) -> int:
        """Return the count as seen at ``now`` (0 if the period expired)."""
        if PeriodicCounterEngine.should_reset(
            action, now, tz, weekly_mode, week_start
        ):
            return 0
        return action.get(const.DATA_REPEATABLE_CURRENT_COUNT, 0)

    @staticmethod
    def progress_percentage(action: Mapping[str, Any]) -> float:
        """Return progress toward the period target, capped at 100."""
        return min(
            calculate_percentage(
                action.get(const.DATA_REPEATABLE_CURRENT_COUNT, 0),
                action.get(const.DATA_REPEATABLE_TARGET_COUNT, 1),
            ),
            100.0,
        )

    @staticmethod
    def counter_text(action: Mapping[str, Any]) -> str:
        """Return display text such as "2/3 today" or "1/2 this week"."""
        text = (
            f"{action.get(const.DATA_REPEATABLE_CURRENT_COUNT, 0)}"
            f"/{action.get(const.DATA_REPEATABLE_TARGET_COUNT, 1)}"
        )
        if action.get(const.DATA_REPEATABLE_IS_DAILY):
            return f"{text} today"
        if action.get(const.DATA_REPEATABLE_IS_WEEKLY):
            return f"{text} this week"
        return text

    @staticmethod
    def next_reset_at(
        action: Mapping[str, Any],
        now: datetime,
        tz: ZoneInfo | None = None,
        weekly_mode: str = const.DEFAULT_WEEKLY_RESET_MODE,
        week_start: str = const.DEFAULT_WEEK_START,
    ) -> datetime | None:
        """Return the moment the current period expires, or None.

        Daily periods end at the next local midnight. Weekly periods end
        7 days after reset_date ("elapsed") or at the next week start
        ("calendar"). Actions with neither flag never reset.
        """
        tz_info = tz or ZoneInfo(const.DEFAULT_TIMEZONE)
        if action.get(const.DATA_REPEATABLE_IS_DAILY):
            tomorrow = local_date(now, tz_info) + timedelta(days=1)
            return datetime.combine(tomorrow, datetime.min.time(), tzinfo=tz_info)

        if action.get(const.DATA_REPEATABLE_IS_WEEKLY):
            if weekly_mode == const.WEEKLY_RESET_MODE_CALENDAR:
                next_start = start_of_week(local_date(now, tz_info), week_start) + (
                    timedelta(days=const.WEEKLY_PERIOD_DAYS)
                )
                return datetime.combine(
                    next_start, datetime.min.time(), tzinfo=tz_info
                )
            reset_at = dt_parse(action.get(const.DATA_REPEATABLE_RESET_DATE)) or now
            return reset_at + timedelta(days=const.WEEKLY_PERIOD_DAYS)

        return None
