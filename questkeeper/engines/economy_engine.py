"""Economy Engine - Pure logic for XP, levels, gold, health and the activity log.

This engine provides stateless, pure Python functions for:
- XP arithmetic with the level-up loop and the xp_to_next_level curve
- Gold deposits and withdrawals (sufficient funds validation)
- Skill point spending
- Health meter clamping
- Activity log entry creation and pruning

Level curve (per level-up):

    xp -= xp_to_next_level
    level += 1
    skill_points += skill_points_per_level
    xp_to_next_level = max(previous, round(previous * xp_curve_multiplier))

ARCHITECTURE: All functions are static methods that operate on passed-in
data and return new dicts. State management belongs in GameManager.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any
import uuid

from .. import const
from ..exceptions import InsufficientGoldError, InsufficientSkillPointsError
from ..utils.dt_utils import dt_to_iso
from ..utils.math_utils import calculate_percentage, clamp, round_reward

if TYPE_CHECKING:
    from ..type_defs import ActivityLogEntry, HealthBarData, PlayerData


class EconomyEngine:
    """Pure logic engine for the progression economy.

    All methods are static - no instance state. ``settings`` arguments are
    mappings keyed by the ``const.CONF_*`` names; missing keys fall back to
    the ``const.DEFAULT_*`` values.
    """

    DEFAULT_MAX_ACTIVITY_LOG_ENTRIES: int = const.DEFAULT_MAX_ACTIVITY_LOG_ENTRIES

    # =========================================================================
    # XP & LEVELS
    # =========================================================================

    @staticmethod
    def next_level_threshold(previous: int, multiplier: float) -> int:
        """Return xp_to_next_level for the following level.

        The curve is monotonically non-decreasing for any multiplier.

        Examples:
            next_level_threshold(100, 1.2) → 120
            next_level_threshold(120, 1.2) → 144
        """
        return max(previous, round_reward(previous * multiplier))

    @staticmethod
    def add_xp(
        player: PlayerData,
        amount: int,
        settings: Mapping[str, Any] | None = None,
    ) -> tuple[PlayerData, int]:
        """Add (or remove) XP and apply any resulting level-ups.

        Negative amounts floor xp at 0 and never remove levels.

        Args:
            player: Player block (not mutated)
            amount: XP delta, already rounded
            settings: Optional CONF_* mapping

        Returns:
            Tuple of (new player, levels gained)
        """
        settings = settings or {}
        multiplier = float(
            settings.get(
                const.CONF_XP_CURVE_MULTIPLIER, const.DEFAULT_XP_CURVE_MULTIPLIER
            )
        )
        points_per_level = int(
            settings.get(
                const.CONF_SKILL_POINTS_PER_LEVEL,
                const.DEFAULT_SKILL_POINTS_PER_LEVEL,
            )
        )

        updated: PlayerData = {**player}
        xp = updated.get(const.DATA_PLAYER_XP, 0) + amount
        if xp <= 0:
            updated[const.DATA_PLAYER_XP] = 0
            return updated, 0

        threshold = max(
            const.MIN_REWARD,
            int(
                updated.get(
                    const.DATA_PLAYER_XP_TO_NEXT_LEVEL,
                    settings.get(
                        const.CONF_BASE_XP_TO_NEXT_LEVEL,
                        const.DEFAULT_BASE_XP_TO_NEXT_LEVEL,
                    ),
                )
            ),
        )
        levels_gained = 0
        while xp >= threshold:
            xp -= threshold
            levels_gained += 1
            threshold = EconomyEngine.next_level_threshold(threshold, multiplier)

        updated[const.DATA_PLAYER_XP] = xp
        updated[const.DATA_PLAYER_XP_TO_NEXT_LEVEL] = threshold
        if levels_gained:
            updated[const.DATA_PLAYER_LEVEL] = (
                updated.get(const.DATA_PLAYER_LEVEL, 1) + levels_gained
            )
            updated[const.DATA_PLAYER_SKILL_POINTS] = (
                updated.get(const.DATA_PLAYER_SKILL_POINTS, 0)
                + levels_gained * points_per_level
            )
        return updated, levels_gained

    @staticmethod
    def xp_progress_percentage(player: Mapping[str, Any]) -> float:
        """Return progress toward the next level as a percentage."""
        return calculate_percentage(
            player.get(const.DATA_PLAYER_XP, 0),
            player.get(const.DATA_PLAYER_XP_TO_NEXT_LEVEL, 0),
        )

    # =========================================================================
    # GOLD & SKILL POINTS
    # =========================================================================

    @staticmethod
    def validate_sufficient_funds(balance: int, cost: int) -> bool:
        """Return True if balance >= cost."""
        return balance >= cost

    @staticmethod
    def add_gold(player: PlayerData, amount: int) -> PlayerData:
        """Deposit gold. The balance never drops below zero."""
        updated: PlayerData = {**player}
        updated[const.DATA_PLAYER_GOLD] = max(
            0, updated.get(const.DATA_PLAYER_GOLD, 0) + amount
        )
        return updated

    @staticmethod
    def spend_gold(player: PlayerData, amount: int) -> PlayerData:
        """Withdraw gold.

        Raises:
            InsufficientGoldError: If the balance is below ``amount``
        """
        balance = player.get(const.DATA_PLAYER_GOLD, 0)
        if not EconomyEngine.validate_sufficient_funds(balance, amount):
            raise InsufficientGoldError(balance, amount)
        updated: PlayerData = {**player}
        updated[const.DATA_PLAYER_GOLD] = balance - amount
        return updated

    @staticmethod
    def spend_skill_points(player: PlayerData, skill_id: str, cost: int) -> PlayerData:
        """Deduct skill points for an unlock.

        Raises:
            InsufficientSkillPointsError: Carries the shortfall so the caller
                can tell the user how many more points are needed
        """
        available = player.get(const.DATA_PLAYER_SKILL_POINTS, 0)
        if not EconomyEngine.validate_sufficient_funds(available, cost):
            raise InsufficientSkillPointsError(skill_id, available, cost)
        updated: PlayerData = {**player}
        updated[const.DATA_PLAYER_SKILL_POINTS] = available - cost
        return updated

    # =========================================================================
    # HEALTH
    # =========================================================================

    @staticmethod
    def apply_health_change(
        health_bar: HealthBarData, delta: int, now: datetime
    ) -> HealthBarData:
        """Return a health bar with ``delta`` applied, clamped to [0, maximum]."""
        updated: HealthBarData = {**health_bar}
        maximum = updated.get(const.DATA_METER_MAXIMUM, const.DEFAULT_MAX_HEALTH)
        updated[const.DATA_METER_CURRENT] = int(
            clamp(updated.get(const.DATA_METER_CURRENT, maximum) + delta, 0, maximum)
        )
        updated[const.DATA_METER_LAST_UPDATED] = dt_to_iso(now)
        return updated

    @staticmethod
    def health_percentage(health_bar: Mapping[str, Any]) -> float:
        """Return current health as a percentage of the maximum."""
        return calculate_percentage(
            health_bar.get(const.DATA_METER_CURRENT, 0),
            health_bar.get(const.DATA_METER_MAXIMUM, 0),
        )

    # =========================================================================
    # ACTIVITY LOG
    # =========================================================================

    @staticmethod
    def create_activity_entry(
        activity_type: str, description: str, now: datetime
    ) -> ActivityLogEntry:
        """Create an activity log entry.

        Args:
            activity_type: One of the const.ACTIVITY_TYPE_* values
            description: Human-readable line for the feed
            now: Timestamp of the action

        Returns:
            ActivityLogEntry TypedDict
        """
        return {
            const.DATA_ACTIVITY_ID: str(uuid.uuid4()),
            const.DATA_ACTIVITY_TYPE: activity_type,
            const.DATA_ACTIVITY_DESCRIPTION: description,
            const.DATA_ACTIVITY_TIMESTAMP: dt_to_iso(now),
        }

    @staticmethod
    def prune_activity_log(
        activity_log: list[ActivityLogEntry],
        max_entries: int = DEFAULT_MAX_ACTIVITY_LOG_ENTRIES,
    ) -> list[ActivityLogEntry]:
        """Trim the log to ``max_entries``, keeping the most recent.

        Modifies the list in place and returns it for convenience.
        Newest entries are at the END of the list (append order).
        """
        if len(activity_log) > max_entries:
            # Remove oldest entries (beginning of list)
            del activity_log[: len(activity_log) - max_entries]
        return activity_log
