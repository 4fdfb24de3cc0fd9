"""Reward Engine - Pure logic for quest gold and XP rewards.

This engine provides stateless, pure Python functions for:
- Resolving the gold-reward override contract (explicit value vs computed)
- The gold formula driven by quest type, difficulty and priority
- Quest XP through the skill modifier pipeline, streak multiplier and
  bonus window

Gold formula (computed rewards only):

    gold = floor(5 * type_mul * (difficulty * 0.5) * priority_mul)
    return max(1, gold)

XP is authored on the quest and never recomputed from a formula; it is
only passed through the modifiers at completion time. The streak
multiplier reads the player streak as it stands before the completion
extends it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
import math
from typing import TYPE_CHECKING, Any

from .. import const
from ..utils.math_utils import round_reward
from .modifier_engine import ModifierEngine

if TYPE_CHECKING:
    from ..type_defs import QuestData, RewardContext, SkillDefinition


# =============================================================================
# REWARD OVERRIDE SUM TYPE
# =============================================================================


@dataclass(frozen=True)
class ExplicitReward:
    """User-specified reward; always wins over the formula."""

    value: int


@dataclass(frozen=True)
class ComputedReward:
    """No override; derive the reward from quest metadata."""


RewardOverride = ExplicitReward | ComputedReward


# =============================================================================
# REWARD ENGINE
# =============================================================================


class RewardEngine:
    """Pure logic engine for quest reward calculation.

    All methods are static - no instance state.
    """

    @staticmethod
    def gold_override(quest: Mapping[str, Any]) -> RewardOverride:
        """Map the stored ``gold_reward`` field onto the override sum type.

        A stored value of None (or a missing key) means "compute".
        """
        value = quest.get(const.DATA_QUEST_GOLD_REWARD)
        if value is None:
            return ComputedReward()
        return ExplicitReward(int(value))

    @staticmethod
    def computed_gold(
        quest_type: str,
        difficulty_level: int,
        priority: str,
    ) -> int:
        """Apply the gold formula.

        Args:
            quest_type: main | side | daily | weekly
            difficulty_level: 1-5
            priority: low | medium | high | urgent

        Returns:
            Gold reward, never below 1

        Example:
            computed_gold("main", 3, "high") → floor(5*5*1.5*1.5) = 56
        """
        type_mul = const.GOLD_TYPE_MULTIPLIERS.get(quest_type, 1)
        diff_mul = difficulty_level * const.GOLD_DIFFICULTY_FACTOR
        prio_mul = const.GOLD_PRIORITY_MULTIPLIERS.get(priority, 1.0)
        # Drift guard before flooring (e.g. 4.999999999 must stay 5)
        raw = round(const.GOLD_BASE * type_mul * diff_mul * prio_mul, 6)
        return max(const.MIN_REWARD, math.floor(raw))

    @classmethod
    def gold_reward(cls, quest: Mapping[str, Any]) -> int:
        """Return the gold a quest pays on completion.

        An explicit override is returned unchanged regardless of
        type/priority/difficulty.
        """
        override = cls.gold_override(quest)
        match override:
            case ExplicitReward(value=value):
                return value
            case ComputedReward():
                return cls.computed_gold(
                    str(quest.get(const.DATA_QUEST_TYPE, const.QUEST_TYPE_SIDE)),
                    int(quest.get(const.DATA_QUEST_DIFFICULTY_LEVEL, 1)),
                    str(quest.get(const.DATA_QUEST_PRIORITY, const.QUEST_PRIORITY_LOW)),
                )
        raise TypeError(f"Unsupported reward override: {override!r}")

    @staticmethod
    def _modified_xp(
        base: float,
        state: Mapping[str, Any],
        context: RewardContext,
        unlocked_skills: Iterable[str],
        skills: Sequence[SkillDefinition],
        now: datetime,
    ) -> int:
        unlocked = list(unlocked_skills)
        amount = base + ModifierEngine.xp_bonus(
            base, state, context, unlocked, skills
        )
        amount = ModifierEngine.apply_modifiers(
            amount, state, context, unlocked, skills
        )
        amount = ModifierEngine.apply_streak_multiplier(amount, state)
        amount = ModifierEngine.apply_bonus_window(
            amount, state.get(const.DATA_BONUS_XP_ACTIVE), now
        )
        return round_reward(amount)

    @staticmethod
    def quest_xp(
        quest: QuestData,
        state: Mapping[str, Any],
        unlocked_skills: Iterable[str],
        skills: Sequence[SkillDefinition],
        now: datetime,
    ) -> int:
        """Return the XP a quest grants after modifiers, rounded.

        Order: stored xp_reward + flat skill bonuses → skill pipeline →
        streak multiplier → bonus window → round.
        """
        context: RewardContext = {"quest": quest, "health_activity": None}
        return RewardEngine._modified_xp(
            quest.get(const.DATA_QUEST_XP_REWARD, 0),
            state,
            context,
            unlocked_skills,
            skills,
            now,
        )

    @staticmethod
    def health_activity_xp(
        activity: Mapping[str, Any],
        state: Mapping[str, Any],
        unlocked_skills: Iterable[str],
        skills: Sequence[SkillDefinition],
        now: datetime,
    ) -> int:
        """Return the (possibly negative) XP change of a health activity."""
        context: RewardContext = {"quest": None, "health_activity": activity}
        return RewardEngine._modified_xp(
            activity.get(const.DATA_HEALTH_ACTIVITY_XP_CHANGE, 0),
            state,
            context,
            unlocked_skills,
            skills,
            now,
        )
