"""Unit tests for PeriodicCounterEngine - daily/weekly repeatable actions.

Test Categories:
- Daily reset boundaries (local calendar date)
- Weekly reset: elapsed vs calendar mode
- Increment saturation and completion
- Read-only views (current_count, counter_text, progress, next reset)
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from questkeeper import const
from questkeeper.engines.counter_engine import PeriodicCounterEngine
from questkeeper.utils.dt_utils import dt_to_iso

# Wednesday
NOW = datetime(2026, 3, 11, 12, 0, tzinfo=UTC)
WARSAW = ZoneInfo("Europe/Warsaw")


def anchored(action: dict[str, Any], reset_at: datetime, **fields: Any) -> Any:
    return {**action, const.DATA_REPEATABLE_RESET_DATE: dt_to_iso(reset_at), **fields}


# =============================================================================
# Test: Daily Reset
# =============================================================================


class TestDailyReset:
    """Tests for daily periods."""

    def test_same_day_no_reset(self, make_repeatable_action: Any) -> None:
        """Within the same local date the period is current."""
        action = anchored(make_repeatable_action(), NOW - timedelta(hours=2))
        assert not PeriodicCounterEngine.should_reset(action, NOW)

    def test_midnight_crossing_resets(self, make_repeatable_action: Any) -> None:
        """Crossing local midnight expires the period."""
        action = anchored(
            make_repeatable_action(),
            datetime(2026, 3, 10, 23, 30, tzinfo=UTC),
        )
        now = datetime(2026, 3, 11, 0, 30, tzinfo=UTC)
        assert PeriodicCounterEngine.should_reset(action, now)

    def test_timezone_decides_the_date(self, make_repeatable_action: Any) -> None:
        """23:30Z and 00:30Z are both March 11 in Warsaw (UTC+1)."""
        action = anchored(
            make_repeatable_action(),
            datetime(2026, 3, 10, 23, 30, tzinfo=UTC),
        )
        now = datetime(2026, 3, 11, 0, 30, tzinfo=UTC)
        assert not PeriodicCounterEngine.should_reset(action, now, WARSAW)

    def test_missing_anchor_always_expired(self, make_repeatable_action: Any) -> None:
        """An action without reset_date is treated as expired."""
        action = {
            **make_repeatable_action(),
            const.DATA_REPEATABLE_RESET_DATE: None,
        }
        assert PeriodicCounterEngine.should_reset(action, NOW)

    def test_no_period_never_resets(self, make_repeatable_action: Any) -> None:
        """Actions that are neither daily nor weekly never expire."""
        action = anchored(
            make_repeatable_action(),
            NOW - timedelta(days=30),
            is_daily=False,
            is_weekly=False,
        )
        assert not PeriodicCounterEngine.should_reset(action, NOW)


# =============================================================================
# Test: Weekly Reset
# =============================================================================


class TestWeeklyReset:
    """Tests for elapsed and calendar weekly modes."""

    @pytest.fixture
    def weekly(self, make_repeatable_action: Any) -> dict[str, Any]:
        return make_repeatable_action(is_weekly=True)

    def test_elapsed_under_seven_days(self, weekly: dict[str, Any]) -> None:
        """6 days 23 hours is still the same period."""
        action = anchored(weekly, NOW - timedelta(days=6, hours=23))
        assert not PeriodicCounterEngine.should_reset(action, NOW)

    def test_elapsed_seven_days(self, weekly: dict[str, Any]) -> None:
        """Exactly 7 days expires the period."""
        action = anchored(weekly, NOW - timedelta(days=7))
        assert PeriodicCounterEngine.should_reset(action, NOW)

    def test_calendar_same_week(self, weekly: dict[str, Any]) -> None:
        """Anchored on Monday, checked Wednesday: same calendar week."""
        action = anchored(weekly, datetime(2026, 3, 9, 8, 0, tzinfo=UTC))
        assert not PeriodicCounterEngine.should_reset(
            action, NOW, weekly_mode=const.WEEKLY_RESET_MODE_CALENDAR
        )

    def test_calendar_new_week(self, weekly: dict[str, Any]) -> None:
        """Anchored on Sunday, checked Wednesday: a new week began Monday."""
        action = anchored(weekly, datetime(2026, 3, 8, 20, 0, tzinfo=UTC))
        assert PeriodicCounterEngine.should_reset(
            action, NOW, weekly_mode=const.WEEKLY_RESET_MODE_CALENDAR
        )
        # Only 3 days elapsed
        assert not PeriodicCounterEngine.should_reset(action, NOW)

    def test_calendar_week_start_setting(self, weekly: dict[str, Any]) -> None:
        """With Sunday week starts, Sunday and Wednesday share a week."""
        action = anchored(weekly, datetime(2026, 3, 8, 20, 0, tzinfo=UTC))
        assert not PeriodicCounterEngine.should_reset(
            action,
            NOW,
            weekly_mode=const.WEEKLY_RESET_MODE_CALENDAR,
            week_start="sunday",
        )


# =============================================================================
# Test: Increment
# =============================================================================


class TestIncrement:
    """Tests for increment, reset and completion."""

    def test_increment_to_target_then_saturate(
        self, make_repeatable_action: Any
    ) -> None:
        """2 -> 3 completes; a further increment stays at 3."""
        action = anchored(
            make_repeatable_action(),
            NOW - timedelta(hours=1),
            current_count=2,
        )
        action = PeriodicCounterEngine.increment(action, NOW)
        assert action[const.DATA_REPEATABLE_CURRENT_COUNT] == 3
        assert PeriodicCounterEngine.is_completed(action)
        assert action[const.DATA_REPEATABLE_LAST_COMPLETED_DATE] == NOW.isoformat()

        action = PeriodicCounterEngine.increment(action, NOW + timedelta(minutes=5))
        assert action[const.DATA_REPEATABLE_CURRENT_COUNT] == 3

    def test_increment_after_expiry_starts_fresh(
        self, make_repeatable_action: Any
    ) -> None:
        """A completed daily action counts 1 on the next day."""
        yesterday = datetime(2026, 3, 10, 23, 0, tzinfo=UTC)
        action = anchored(
            make_repeatable_action(target_count=1),
            yesterday,
            current_count=1,
        )
        now = datetime(2026, 3, 11, 0, 30, tzinfo=UTC)

        updated = PeriodicCounterEngine.increment(action, now)

        assert updated[const.DATA_REPEATABLE_CURRENT_COUNT] == 1
        assert updated[const.DATA_REPEATABLE_RESET_DATE] == now.isoformat()

    def test_reset(self, make_repeatable_action: Any) -> None:
        """reset zeroes the counter and re-anchors the period."""
        action = anchored(make_repeatable_action(), NOW, current_count=2)
        later = NOW + timedelta(hours=3)
        reset = PeriodicCounterEngine.reset(action, later)

        assert reset[const.DATA_REPEATABLE_CURRENT_COUNT] == 0
        assert reset[const.DATA_REPEATABLE_RESET_DATE] == later.isoformat()
        assert action[const.DATA_REPEATABLE_CURRENT_COUNT] == 2


# =============================================================================
# Test: Read-only Views
# =============================================================================


class TestViews:
    """Tests for derived counter fields."""

    def test_current_count_hides_expired_progress(
        self, make_repeatable_action: Any
    ) -> None:
        """An expired period reads as 0 without touching the action."""
        action = anchored(
            make_repeatable_action(), NOW - timedelta(days=1), current_count=2
        )
        assert PeriodicCounterEngine.current_count(action, NOW) == 0
        assert action[const.DATA_REPEATABLE_CURRENT_COUNT] == 2

    def test_counter_text(self, make_repeatable_action: Any) -> None:
        """Text reflects the period kind."""
        daily = {**make_repeatable_action(), const.DATA_REPEATABLE_CURRENT_COUNT: 2}
        weekly = {
            **make_repeatable_action(is_weekly=True, target_count=2),
            const.DATA_REPEATABLE_CURRENT_COUNT: 1,
        }
        neither = {
            **make_repeatable_action(target_count=1, is_daily=False),
            const.DATA_REPEATABLE_CURRENT_COUNT: 0,
        }

        assert PeriodicCounterEngine.counter_text(daily) == "2/3 today"
        assert PeriodicCounterEngine.counter_text(weekly) == "1/2 this week"
        assert PeriodicCounterEngine.counter_text(neither) == "0/1"

    def test_progress_percentage(self, make_repeatable_action: Any) -> None:
        """Progress is count / target, capped at 100."""
        action = {**make_repeatable_action(), const.DATA_REPEATABLE_CURRENT_COUNT: 2}
        assert PeriodicCounterEngine.progress_percentage(action) == 66.67

        action[const.DATA_REPEATABLE_CURRENT_COUNT] = 5
        assert PeriodicCounterEngine.progress_percentage(action) == 100.0

    def test_next_reset_daily(self, make_repeatable_action: Any) -> None:
        """Daily periods end at the next local midnight."""
        action = anchored(make_repeatable_action(), NOW)
        assert PeriodicCounterEngine.next_reset_at(action, NOW) == datetime(
            2026, 3, 12, tzinfo=UTC
        )
        assert PeriodicCounterEngine.next_reset_at(action, NOW, WARSAW) == datetime(
            2026, 3, 12, tzinfo=WARSAW
        )

    def test_next_reset_weekly(self, make_repeatable_action: Any) -> None:
        """Weekly periods end 7 days after the anchor or at the next week start."""
        anchor = datetime(2026, 3, 9, 8, 0, tzinfo=UTC)
        action = anchored(make_repeatable_action(is_weekly=True), anchor)

        assert PeriodicCounterEngine.next_reset_at(action, NOW) == anchor + timedelta(
            days=7
        )
        assert PeriodicCounterEngine.next_reset_at(
            action, NOW, weekly_mode=const.WEEKLY_RESET_MODE_CALENDAR
        ) == datetime(2026, 3, 16, tzinfo=UTC)

    def test_next_reset_none_without_period(
        self, make_repeatable_action: Any
    ) -> None:
        """Actions without a period never reset."""
        action = make_repeatable_action(is_daily=False)
        assert PeriodicCounterEngine.next_reset_at(action, NOW) is None
