"""Modifier Engine - Pure logic for the skill-effect reward pipeline.

This engine provides stateless, pure Python functions for:
- Folding unlocked skill effects over a base reward (left-fold composition)
- Flat XP and health bonuses granted alongside skill-boosted rewards
- The daily streak XP multiplier
- The temporary bonus-XP window multiplier

ARCHITECTURE: Skill definitions reference their effect by id; the effect
functions live in a registry here, so persisted state never holds callables.
Effects are applied in skill DEFINITION order (not unlock order) and each
effect receives the output of the previous one:

    amount_0 = base + flat skill bonuses
    amount_i = effect_i(state, amount_{i-1}, context)

Effects are total: a skill whose condition is not met returns its input.
Flat skill bonuses are added before the fold, so the fold itself is a
product of multipliers and definition order does not change its result.
Nothing here rounds; rounding is the caller's responsibility.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime
import math
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .. import const
from ..utils.dt_utils import dt_parse

if TYPE_CHECKING:
    from ..type_defs import BonusXPData, RewardContext, SkillDefinition


# =============================================================================
# TYPE ALIASES
# =============================================================================

# Effect signature: (state, amount, context) -> adjusted amount
SkillEffect = Callable[[Mapping[str, Any], float, "RewardContext"], float]

# Flat XP bonus signature: (state, base amount, context) -> extra XP
XPBonus = Callable[[Mapping[str, Any], float, "RewardContext"], float]

# Health bonus signature: (state, context) -> extra health points
HealthBonus = Callable[[Mapping[str, Any], "RewardContext"], int]


# =============================================================================
# CONDITIONS
# =============================================================================


def _quest_is_quick(context: RewardContext) -> bool:
    quest = context.get("quest")
    if not quest:
        return False
    estimated = quest.get(const.DATA_QUEST_ESTIMATED_TIME)
    return estimated is not None and estimated <= const.QUICK_TASK_MAX_MINUTES


def _quest_is_daunting(context: RewardContext) -> bool:
    quest = context.get("quest")
    if not quest:
        return False
    return quest.get(const.DATA_QUEST_ANXIETY_LEVEL) == const.ANXIETY_LEVEL_DAUNTING


def _activity_is_creative(context: RewardContext) -> bool:
    activity = context.get("health_activity")
    if not activity:
        return False
    category = activity.get(const.DATA_HEALTH_ACTIVITY_CATEGORY)
    if category == const.CREATIVE_RECHARGE_CATEGORY:
        return True
    activity_id = activity.get(const.DATA_HEALTH_ACTIVITY_ID)
    return activity_id in const.CREATIVE_RECHARGE_ACTIVITY_IDS


# =============================================================================
# EFFECTS
# =============================================================================


def _adaptive_focus(
    state: Mapping[str, Any], amount: float, context: RewardContext
) -> float:
    """Quick quests (estimated time <= 15 min) grant +20% XP."""
    if _quest_is_quick(context):
        return amount * const.ADAPTIVE_FOCUS_MULTIPLIER
    return amount


def _identity(
    state: Mapping[str, Any], amount: float, context: RewardContext
) -> float:
    """Skills that do not scale rewards."""
    return amount


def _anti_procrastination_xp(
    state: Mapping[str, Any], base: float, context: RewardContext
) -> float:
    """Daunting quests grant an extra 10% of their authored XP, floored."""
    if base > 0 and _quest_is_daunting(context):
        return math.floor(base * const.ANTI_PROCRASTINATION_XP_RATIO)
    return 0


def _creative_recharge_xp(
    state: Mapping[str, Any], base: float, context: RewardContext
) -> float:
    if _activity_is_creative(context):
        return const.CREATIVE_RECHARGE_XP_BONUS
    return 0


def _anti_procrastination_health(
    state: Mapping[str, Any], context: RewardContext
) -> int:
    if _quest_is_daunting(context):
        return const.ANTI_PROCRASTINATION_HEALTH_BONUS
    return 0


def _creative_recharge_health(
    state: Mapping[str, Any], context: RewardContext
) -> int:
    if _activity_is_creative(context):
        return const.CREATIVE_RECHARGE_HEALTH_BONUS
    return 0


# =============================================================================
# MODIFIER ENGINE
# =============================================================================


class ModifierEngine:
    """Pure logic engine for reward modifiers.

    All methods are static or class-level - no instance state.

    Registries:
    - EFFECTS: effect id -> reward modifier
    - XP_BONUSES: effect id -> flat XP added to the base before the fold
    - HEALTH_BONUSES: effect id -> extra health granted with the reward

    The registries are read-only; callers needing custom rule sets pass an
    ``effects`` mapping instead.
    """

    EFFECTS: Mapping[str, SkillEffect] = MappingProxyType(
        {
            const.SKILL_ADAPTIVE_FOCUS: _adaptive_focus,
            const.SKILL_BOREDOM_DETECTOR: _identity,
            const.SKILL_ANTI_PROCRASTINATION_AURA: _identity,
            const.SKILL_CREATIVE_RECHARGE: _identity,
        }
    )

    XP_BONUSES: Mapping[str, XPBonus] = MappingProxyType(
        {
            const.SKILL_ANTI_PROCRASTINATION_AURA: _anti_procrastination_xp,
            const.SKILL_CREATIVE_RECHARGE: _creative_recharge_xp,
        }
    )

    HEALTH_BONUSES: Mapping[str, HealthBonus] = MappingProxyType(
        {
            const.SKILL_ANTI_PROCRASTINATION_AURA: _anti_procrastination_health,
            const.SKILL_CREATIVE_RECHARGE: _creative_recharge_health,
        }
    )

    @staticmethod
    def active_skills(
        unlocked_skills: Iterable[str],
        skills: Sequence[SkillDefinition],
    ) -> list[SkillDefinition]:
        """Return unlocked skill definitions in DEFINITION order.

        Args:
            unlocked_skills: Ids the player has purchased (any order)
            skills: Skill definition table (declaration order)

        Returns:
            Definitions whose id is unlocked, ordered as declared
        """
        unlocked = set(unlocked_skills)
        return [skill for skill in skills if skill[const.DATA_SKILL_ID] in unlocked]

    @classmethod
    def apply_modifiers(
        cls,
        base_amount: float,
        state: Mapping[str, Any],
        context: RewardContext,
        unlocked_skills: Iterable[str],
        skills: Sequence[SkillDefinition],
        effects: Mapping[str, SkillEffect] | None = None,
    ) -> float:
        """Fold unlocked skill effects over ``base_amount``.

        Args:
            base_amount: Reward before modifiers
            state: Current game state (read-only)
            context: Quest and/or health activity triggering the reward
            unlocked_skills: Ids the player has purchased
            skills: Skill definition table, folded in declaration order
            effects: Optional effect registry override (defaults to EFFECTS)

        Returns:
            Modified amount, unrounded
        """
        registry = cls.EFFECTS if effects is None else effects
        amount = float(base_amount)
        for skill in cls.active_skills(unlocked_skills, skills):
            effect_id = skill.get(const.DATA_SKILL_EFFECT, skill[const.DATA_SKILL_ID])
            effect = registry.get(effect_id)
            if effect is None:
                const.LOGGER.warning(
                    "Unknown skill effect '%s' for skill %s, skipping",
                    effect_id,
                    skill[const.DATA_SKILL_ID],
                )
                continue
            amount = effect(state, amount, context)
        return amount

    @classmethod
    def xp_bonus(
        cls,
        base_amount: float,
        state: Mapping[str, Any],
        context: RewardContext,
        unlocked_skills: Iterable[str],
        skills: Sequence[SkillDefinition],
    ) -> float:
        """Sum the flat XP bonuses of unlocked skills whose condition holds."""
        total = 0.0
        for skill in cls.active_skills(unlocked_skills, skills):
            effect_id = skill.get(const.DATA_SKILL_EFFECT, skill[const.DATA_SKILL_ID])
            bonus = cls.XP_BONUSES.get(effect_id)
            if bonus is not None:
                total += bonus(state, base_amount, context)
        return total

    @classmethod
    def health_bonus(
        cls,
        state: Mapping[str, Any],
        context: RewardContext,
        unlocked_skills: Iterable[str],
        skills: Sequence[SkillDefinition],
    ) -> int:
        """Sum the health bonuses of unlocked skills whose condition holds."""
        total = 0
        for skill in cls.active_skills(unlocked_skills, skills):
            effect_id = skill.get(const.DATA_SKILL_EFFECT, skill[const.DATA_SKILL_ID])
            bonus = cls.HEALTH_BONUSES.get(effect_id)
            if bonus is not None:
                total += bonus(state, context)
        return total

    @staticmethod
    def streak_multiplier(current_streak: int) -> int:
        """Return the XP multiplier earned by a daily streak.

        Examples:
            >>> ModifierEngine.streak_multiplier(2)
            1
            >>> ModifierEngine.streak_multiplier(3)
            2
            >>> ModifierEngine.streak_multiplier(7)
            3
        """
        for min_streak, multiplier in const.STREAK_XP_MULTIPLIERS:
            if current_streak >= min_streak:
                return multiplier
        return 1

    @classmethod
    def apply_streak_multiplier(
        cls, amount: float, state: Mapping[str, Any]
    ) -> float:
        """Multiply positive ``amount`` by the player's streak multiplier."""
        if amount <= 0:
            return amount
        player = state.get(const.DATA_PLAYER) or {}
        streak = int(player.get(const.DATA_PLAYER_CURRENT_STREAK, 0) or 0)
        return amount * cls.streak_multiplier(streak)

    @staticmethod
    def bonus_is_active(bonus: BonusXPData | None, now: datetime) -> bool:
        """Return True if a bonus-XP window exists and has not expired."""
        if not bonus:
            return False
        expires_at = dt_parse(bonus.get(const.DATA_BONUS_XP_EXPIRES_AT))
        return expires_at is not None and now < expires_at

    @classmethod
    def apply_bonus_window(
        cls,
        amount: float,
        bonus: BonusXPData | None,
        now: datetime,
    ) -> float:
        """Multiply positive ``amount`` by an active bonus-XP multiplier."""
        if bonus is None or amount <= 0 or not cls.bonus_is_active(bonus, now):
            return amount
        return amount * float(bonus.get(const.DATA_BONUS_XP_MULTIPLIER, 1.0))
