"""Streak Engine - Pure logic for streak challenges and the player daily streak.

This engine provides stateless, pure Python functions for:
- The streak challenge automaton (start, stop, daily check-in)
- Milestone reward lookup (newly earned, earned, next)
- Challenge statistics (overall and trailing-week success rates)
- The player's daily activity streak and streak-goal reward claims

Challenge states: inactive → active → (active, checked-in-today)* → inactive

Check-in rules:
- At most one check-in per local calendar date (matched by date, not time)
- Success: current_streak += 1; failure: current_streak = 0
- longest_streak = max(longest_streak, current_streak) always holds
- A milestone is newly earned iff current_streak == days_milestone exactly

ARCHITECTURE: All functions are static methods that operate on passed-in
data and return new dicts. ``now`` and the timezone are always passed in.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from .. import const
from ..exceptions import EntityConflictError, UnknownEntityError
from ..utils.dt_utils import dt_parse_date, dt_to_iso, local_date
from ..utils.math_utils import calculate_percentage

if TYPE_CHECKING:
    from ..type_defs import (
        ChallengeStats,
        CheckInData,
        MilestoneRewardData,
        PlayerData,
        StreakChallengeData,
    )


class StreakEngine:
    """Pure logic engine for streaks and streak challenges.

    All methods are static - no instance state.
    """

    # =========================================================================
    # CHALLENGE LOOKUP & LIFECYCLE
    # =========================================================================

    @staticmethod
    def get_challenge(
        challenges: Mapping[str, StreakChallengeData], challenge_id: str
    ) -> StreakChallengeData:
        """Look up a challenge by id.

        Raises:
            UnknownEntityError: If the id is not present
        """
        challenge = challenges.get(challenge_id)
        if challenge is None:
            raise UnknownEntityError(const.ENTITY_STREAK_CHALLENGE, challenge_id)
        return challenge

    @staticmethod
    def start(challenge: StreakChallengeData, now: datetime) -> StreakChallengeData:
        """Activate a challenge: zero the streak and clear the check-in history.

        longest_streak survives restarts.

        Raises:
            EntityConflictError: ``already_active`` if the challenge is running
        """
        if challenge.get(const.DATA_CHALLENGE_IS_ACTIVE):
            raise EntityConflictError(
                const.CONFLICT_ALREADY_ACTIVE, challenge[const.DATA_CHALLENGE_ID]
            )
        updated: StreakChallengeData = {**challenge}
        updated[const.DATA_CHALLENGE_IS_ACTIVE] = True
        updated[const.DATA_CHALLENGE_CURRENT_STREAK] = 0
        updated[const.DATA_CHALLENGE_CHECK_INS] = []
        updated[const.DATA_CHALLENGE_START_DATE] = dt_to_iso(now)
        return updated

    @staticmethod
    def stop(challenge: StreakChallengeData) -> StreakChallengeData:
        """Deactivate a challenge, preserving history and longest_streak.

        Raises:
            EntityConflictError: ``challenge_inactive`` if already stopped
        """
        if not challenge.get(const.DATA_CHALLENGE_IS_ACTIVE):
            raise EntityConflictError(
                const.CONFLICT_CHALLENGE_INACTIVE, challenge[const.DATA_CHALLENGE_ID]
            )
        updated: StreakChallengeData = {**challenge}
        updated[const.DATA_CHALLENGE_IS_ACTIVE] = False
        return updated

    # =========================================================================
    # CHECK-INS
    # =========================================================================

    @staticmethod
    def has_checked_in(challenge: Mapping[str, Any], day: date) -> bool:
        """Return True if any check-in is recorded for calendar date ``day``."""
        return any(
            dt_parse_date(check_in.get(const.DATA_CHECK_IN_DATE)) == day
            for check_in in challenge.get(const.DATA_CHALLENGE_CHECK_INS, [])
        )

    @staticmethod
    def check_in(
        challenge: StreakChallengeData,
        success: bool,
        now: datetime,
        tz: ZoneInfo | None = None,
        notes: str | None = None,
    ) -> tuple[StreakChallengeData, list[MilestoneRewardData]]:
        """Record today's check-in.

        Args:
            challenge: Active challenge (not mutated)
            success: Whether the day was a success
            now: Reference moment; its local date is the check-in date
            tz: Zone in which calendar dates are taken
            notes: Optional free text

        Returns:
            Tuple of (updated challenge, milestones newly earned by this
            check-in). Failed check-ins never earn milestones.

        Raises:
            EntityConflictError: ``challenge_inactive`` if not started,
                ``already_checked_in`` if today already has a check-in
        """
        challenge_id = challenge[const.DATA_CHALLENGE_ID]
        if not challenge.get(const.DATA_CHALLENGE_IS_ACTIVE):
            raise EntityConflictError(const.CONFLICT_CHALLENGE_INACTIVE, challenge_id)

        today = local_date(now, tz)
        if StreakEngine.has_checked_in(challenge, today):
            raise EntityConflictError(
                const.CONFLICT_ALREADY_CHECKED_IN,
                challenge_id,
                f"Already checked in to {challenge_id} on {today.isoformat()}",
            )

        entry: CheckInData = {
            const.DATA_CHECK_IN_DATE: today.isoformat(),
            const.DATA_CHECK_IN_SUCCESS: bool(success),
            const.DATA_CHECK_IN_NOTES: notes,
        }

        if success:
            current_streak = challenge.get(const.DATA_CHALLENGE_CURRENT_STREAK, 0) + 1
        else:
            current_streak = 0

        updated: StreakChallengeData = {**challenge}
        updated[const.DATA_CHALLENGE_CURRENT_STREAK] = current_streak
        updated[const.DATA_CHALLENGE_LONGEST_STREAK] = max(
            challenge.get(const.DATA_CHALLENGE_LONGEST_STREAK, 0), current_streak
        )
        updated[const.DATA_CHALLENGE_CHECK_INS] = [
            *challenge.get(const.DATA_CHALLENGE_CHECK_INS, []),
            entry,
        ]

        earned = StreakEngine.newly_earned_rewards(updated) if success else []
        return updated, earned

    # =========================================================================
    # MILESTONES
    # =========================================================================

    @staticmethod
    def _sorted_rewards(challenge: Mapping[str, Any]) -> list[MilestoneRewardData]:
        return sorted(
            challenge.get(const.DATA_CHALLENGE_REWARDS, []),
            key=lambda reward: reward[const.DATA_MILESTONE_DAYS],
        )

    @staticmethod
    def newly_earned_rewards(challenge: Mapping[str, Any]) -> list[MilestoneRewardData]:
        """Milestones whose threshold equals the current streak exactly.

        Exact equality means a milestone is granted once per crossing, not on
        every later day past it.
        """
        streak = challenge.get(const.DATA_CHALLENGE_CURRENT_STREAK, 0)
        return [
            reward
            for reward in StreakEngine._sorted_rewards(challenge)
            if reward[const.DATA_MILESTONE_DAYS] == streak
        ]

    @staticmethod
    def earned_rewards(challenge: Mapping[str, Any]) -> list[MilestoneRewardData]:
        """All milestones at or below the current streak, ascending."""
        streak = challenge.get(const.DATA_CHALLENGE_CURRENT_STREAK, 0)
        return [
            reward
            for reward in StreakEngine._sorted_rewards(challenge)
            if reward[const.DATA_MILESTONE_DAYS] <= streak
        ]

    @staticmethod
    def next_reward(challenge: Mapping[str, Any]) -> MilestoneRewardData | None:
        """Smallest milestone still ahead of the current streak, if any."""
        streak = challenge.get(const.DATA_CHALLENGE_CURRENT_STREAK, 0)
        for reward in StreakEngine._sorted_rewards(challenge):
            if reward[const.DATA_MILESTONE_DAYS] > streak:
                return reward
        return None

    # =========================================================================
    # STATISTICS
    # =========================================================================

    @staticmethod
    def challenge_stats(
        challenge: Mapping[str, Any],
        now: datetime,
        tz: ZoneInfo | None = None,
    ) -> ChallengeStats:
        """Derive success rates from the check-in history.

        The weekly window covers the 7 calendar days ending today.
        """
        check_ins = challenge.get(const.DATA_CHALLENGE_CHECK_INS, [])
        successful = [c for c in check_ins if c.get(const.DATA_CHECK_IN_SUCCESS)]

        window_start = local_date(now, tz) - timedelta(
            days=const.ANALYTICS_WEEK_DAYS - 1
        )
        weekly = []
        for check_in in check_ins:
            day = dt_parse_date(check_in.get(const.DATA_CHECK_IN_DATE))
            if day is not None and day >= window_start:
                weekly.append(check_in)
        weekly_successful = [c for c in weekly if c.get(const.DATA_CHECK_IN_SUCCESS)]

        return {
            "total_check_ins": len(check_ins),
            "successful_check_ins": len(successful),
            "success_rate": calculate_percentage(len(successful), len(check_ins)),
            "weekly_check_ins": len(weekly),
            "weekly_success_rate": calculate_percentage(
                len(weekly_successful), len(weekly)
            ),
        }

    # =========================================================================
    # PLAYER DAILY STREAK
    # =========================================================================

    @staticmethod
    def update_daily_streak(
        player: PlayerData, now: datetime, tz: ZoneInfo | None = None
    ) -> PlayerData:
        """Update the player's activity streak for ``now``'s local date.

        Streak logic:
        - Same day as last activity: No change (already counted)
        - Day after last activity (yesterday): Increment streak
        - Any other case: Reset streak to 1
        """
        today = local_date(now, tz)
        last_active = dt_parse_date(player.get(const.DATA_PLAYER_LAST_ACTIVE_DATE))
        current_streak = player.get(const.DATA_PLAYER_CURRENT_STREAK, 0)

        if last_active == today:
            new_streak = current_streak
        elif last_active == today - timedelta(days=1):
            new_streak = current_streak + 1
        else:
            new_streak = 1

        updated: PlayerData = {**player}
        updated[const.DATA_PLAYER_CURRENT_STREAK] = new_streak
        updated[const.DATA_PLAYER_LONGEST_STREAK] = max(
            player.get(const.DATA_PLAYER_LONGEST_STREAK, 0), new_streak
        )
        updated[const.DATA_PLAYER_LAST_ACTIVE_DATE] = today.isoformat()
        return updated

    @staticmethod
    def claim_streak_reward(
        player: PlayerData, streak_count: int
    ) -> tuple[PlayerData, int]:
        """Grant the streak-goal gold reward for ``streak_count``.

        A claim is valid when streak_count reaches the goal, is backed by the
        current streak, and exceeds the last claimed count.

        Returns:
            Tuple of (player with last claim recorded, gold to grant)

        Raises:
            EntityConflictError: ``reward_not_available`` otherwise
        """
        goal = player.get(const.DATA_PLAYER_STREAK_GOAL, const.DEFAULT_STREAK_GOAL)
        current = player.get(const.DATA_PLAYER_CURRENT_STREAK, 0)
        last_claimed = player.get(const.DATA_PLAYER_LAST_STREAK_REWARD_CLAIMED, 0)
        if not (goal <= streak_count <= current and streak_count > last_claimed):
            raise EntityConflictError(
                const.CONFLICT_REWARD_NOT_AVAILABLE,
                str(streak_count),
                f"Streak reward for {streak_count} days is not available "
                f"(goal={goal}, current={current}, last_claimed={last_claimed})",
            )
        updated: PlayerData = {**player}
        updated[const.DATA_PLAYER_LAST_STREAK_REWARD_CLAIMED] = streak_count
        return updated, player.get(
            const.DATA_PLAYER_STREAK_REWARD, const.DEFAULT_STREAK_REWARD
        )
