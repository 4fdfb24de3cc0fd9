"""Unit tests for ModifierEngine - the skill-effect reward pipeline.

Test Categories:
- Individual skill effects and their conditions
- Flat XP bonuses
- Fold order (definition order, not unlock order)
- Unknown effect ids
- Health bonuses
- Streak multiplier
- Bonus XP window
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
import logging
from typing import Any

import pytest

from questkeeper import const
from questkeeper.data import HEALTH_ACTIVITY_DEFINITIONS, SKILL_DEFINITIONS
from questkeeper.engines.modifier_engine import ModifierEngine
from questkeeper.type_defs import BonusXPData
from questkeeper.utils.dt_utils import dt_to_iso

NOW = datetime(2026, 3, 11, 12, 0, tzinfo=UTC)

ACTIVITIES = {a[const.DATA_HEALTH_ACTIVITY_ID]: a for a in HEALTH_ACTIVITY_DEFINITIONS}


def quest_context(
    estimated_time: int = 30, anxiety: str = const.ANXIETY_LEVEL_COMFORTABLE
) -> dict[str, Any]:
    return {
        "quest": {
            const.DATA_QUEST_ESTIMATED_TIME: estimated_time,
            const.DATA_QUEST_ANXIETY_LEVEL: anxiety,
        },
        "health_activity": None,
    }


def activity_context(activity_id: str) -> dict[str, Any]:
    return {"quest": None, "health_activity": ACTIVITIES[activity_id]}


# =============================================================================
# Test: Skill Effects
# =============================================================================


class TestSkillEffects:
    """Tests for the shipped skill effects."""

    def test_no_skills_returns_base(self) -> None:
        """Without unlocked skills the base amount passes through."""
        amount = ModifierEngine.apply_modifiers(
            50, {}, quest_context(10), [], SKILL_DEFINITIONS
        )
        assert amount == 50.0

    def test_adaptive_focus_boosts_quick_quest(self) -> None:
        """Quests of 15 minutes or less get +20%."""
        amount = ModifierEngine.apply_modifiers(
            50, {}, quest_context(15), [const.SKILL_ADAPTIVE_FOCUS], SKILL_DEFINITIONS
        )
        assert amount == pytest.approx(60.0)

    def test_adaptive_focus_ignores_long_quest(self) -> None:
        """A 16 minute quest is not quick."""
        amount = ModifierEngine.apply_modifiers(
            50, {}, quest_context(16), [const.SKILL_ADAPTIVE_FOCUS], SKILL_DEFINITIONS
        )
        assert amount == 50.0

    def test_boredom_detector_is_identity(self) -> None:
        """Boredom detector only affects suggestions."""
        amount = ModifierEngine.apply_modifiers(
            50,
            {},
            quest_context(5),
            [const.SKILL_BOREDOM_DETECTOR],
            SKILL_DEFINITIONS,
        )
        assert amount == 50.0

    def test_flat_bonus_skills_do_not_scale(self) -> None:
        """Aura and recharge leave the multiplicative fold untouched."""
        amount = ModifierEngine.apply_modifiers(
            100,
            {},
            quest_context(10, const.ANXIETY_LEVEL_DAUNTING),
            [const.SKILL_ANTI_PROCRASTINATION_AURA, const.SKILL_CREATIVE_RECHARGE],
            SKILL_DEFINITIONS,
        )
        assert amount == 100.0


# =============================================================================
# Test: Flat XP Bonuses
# =============================================================================


class TestXPBonus:
    """Tests for flat XP added to the base before the fold."""

    @pytest.mark.parametrize("estimated_time", [10, 120])
    def test_aura_adds_tenth_of_daunting_xp(self, estimated_time: int) -> None:
        """Daunting quests get floor(10%) extra XP whatever their length."""
        bonus = ModifierEngine.xp_bonus(
            105,
            {},
            quest_context(estimated_time, const.ANXIETY_LEVEL_DAUNTING),
            [const.SKILL_ANTI_PROCRASTINATION_AURA],
            SKILL_DEFINITIONS,
        )
        assert bonus == 10

    def test_aura_ignores_milder_quests(self) -> None:
        """Mild quests earn no aura bonus."""
        bonus = ModifierEngine.xp_bonus(
            100,
            {},
            quest_context(10, const.ANXIETY_LEVEL_MILD),
            [const.SKILL_ANTI_PROCRASTINATION_AURA],
            SKILL_DEFINITIONS,
        )
        assert bonus == 0

    @pytest.mark.parametrize("activity_id", ["creative_activity", "learning"])
    def test_creative_recharge_adds_flat_xp(self, activity_id: str) -> None:
        """Creative and learning activities get +10 XP."""
        activity = ACTIVITIES[activity_id]
        bonus = ModifierEngine.xp_bonus(
            activity[const.DATA_HEALTH_ACTIVITY_XP_CHANGE],
            {},
            activity_context(activity_id),
            [const.SKILL_CREATIVE_RECHARGE],
            SKILL_DEFINITIONS,
        )
        assert bonus == 10

    def test_creative_recharge_ignores_other_activities(self) -> None:
        """Meditation is neither creative nor learning."""
        bonus = ModifierEngine.xp_bonus(
            5,
            {},
            activity_context("meditation"),
            [const.SKILL_CREATIVE_RECHARGE],
            SKILL_DEFINITIONS,
        )
        assert bonus == 0

    def test_locked_skills_add_nothing(self) -> None:
        """Bonuses need the skill to be unlocked."""
        bonus = ModifierEngine.xp_bonus(
            100,
            {},
            quest_context(10, const.ANXIETY_LEVEL_DAUNTING),
            [const.SKILL_ADAPTIVE_FOCUS],
            SKILL_DEFINITIONS,
        )
        assert bonus == 0


# =============================================================================
# Test: Fold Order
# =============================================================================


class TestFoldOrder:
    """Tests for left-fold composition in definition order."""

    CUSTOM_SKILLS = [
        {const.DATA_SKILL_ID: "plus_ten", const.DATA_SKILL_EFFECT: "add"},
        {const.DATA_SKILL_ID: "double", const.DATA_SKILL_EFFECT: "double"},
    ]
    CUSTOM_EFFECTS = {
        "add": lambda state, amount, context: amount + 10,
        "double": lambda state, amount, context: amount * 2,
    }

    def test_definition_order_wins_over_unlock_order(self) -> None:
        """Effects run in table order whatever order they were bought in."""
        amount = ModifierEngine.apply_modifiers(
            5,
            {},
            quest_context(),
            ["double", "plus_ten"],
            self.CUSTOM_SKILLS,
            effects=self.CUSTOM_EFFECTS,
        )
        assert amount == 30.0  # (5 + 10) * 2

    def test_reordered_definitions_change_result(self) -> None:
        """Swapping definitions swaps the fold."""
        amount = ModifierEngine.apply_modifiers(
            5,
            {},
            quest_context(),
            ["plus_ten", "double"],
            list(reversed(self.CUSTOM_SKILLS)),
            effects=self.CUSTOM_EFFECTS,
        )
        assert amount == 20.0  # 5 * 2 + 10

    def test_shipped_effects_compose(self) -> None:
        """The aura bonus joins the base before adaptive focus scales it."""
        context = quest_context(10, const.ANXIETY_LEVEL_DAUNTING)
        results = []
        for unlocked in (
            [const.SKILL_ADAPTIVE_FOCUS, const.SKILL_ANTI_PROCRASTINATION_AURA],
            [const.SKILL_ANTI_PROCRASTINATION_AURA, const.SKILL_ADAPTIVE_FOCUS],
        ):
            base = 100 + ModifierEngine.xp_bonus(
                100, {}, context, unlocked, SKILL_DEFINITIONS
            )
            results.append(
                ModifierEngine.apply_modifiers(
                    base, {}, context, unlocked, SKILL_DEFINITIONS
                )
            )
        assert results[0] == pytest.approx(132.0)
        assert results[0] == results[1]

    def test_active_skills_keeps_definition_order(self) -> None:
        """Unlocked ids are returned as declared in the table."""
        active = ModifierEngine.active_skills(
            [const.SKILL_CREATIVE_RECHARGE, const.SKILL_ADAPTIVE_FOCUS],
            SKILL_DEFINITIONS,
        )
        assert [skill[const.DATA_SKILL_ID] for skill in active] == [
            const.SKILL_ADAPTIVE_FOCUS,
            const.SKILL_CREATIVE_RECHARGE,
        ]

    def test_unknown_effect_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """A skill pointing at an unregistered effect is logged and ignored."""
        skills = [{const.DATA_SKILL_ID: "mystery", const.DATA_SKILL_EFFECT: "nope"}]
        with caplog.at_level(logging.WARNING, logger="questkeeper"):
            amount = ModifierEngine.apply_modifiers(
                40,
                {},
                quest_context(),
                ["mystery"],
                skills,
            )
        assert amount == 40.0
        assert "Unknown skill effect 'nope'" in caplog.text


# =============================================================================
# Test: Health Bonuses
# =============================================================================


class TestHealthBonus:
    """Tests for health granted alongside boosted rewards."""

    def test_aura_grants_health_on_daunting_quest(self) -> None:
        """Anti-procrastination aura adds +10 health."""
        bonus = ModifierEngine.health_bonus(
            {},
            quest_context(60, const.ANXIETY_LEVEL_DAUNTING),
            [const.SKILL_ANTI_PROCRASTINATION_AURA],
            SKILL_DEFINITIONS,
        )
        assert bonus == 10

    def test_creative_recharge_grants_health(self) -> None:
        """Creative recharge adds +5 health."""
        bonus = ModifierEngine.health_bonus(
            {},
            activity_context("creative_activity"),
            [const.SKILL_CREATIVE_RECHARGE],
            SKILL_DEFINITIONS,
        )
        assert bonus == 5

    def test_no_bonus_when_condition_fails(self) -> None:
        """Skills without a satisfied condition add nothing."""
        bonus = ModifierEngine.health_bonus(
            {},
            quest_context(10, const.ANXIETY_LEVEL_COMFORTABLE),
            [const.SKILL_ANTI_PROCRASTINATION_AURA, const.SKILL_ADAPTIVE_FOCUS],
            SKILL_DEFINITIONS,
        )
        assert bonus == 0


# =============================================================================
# Test: Streak Multiplier
# =============================================================================


class TestStreakMultiplier:
    """Tests for the daily streak XP multiplier."""

    @pytest.mark.parametrize(
        ("streak", "expected"),
        [(0, 1), (2, 1), (3, 2), (6, 2), (7, 3), (30, 3)],
    )
    def test_thresholds(self, streak: int, expected: int) -> None:
        """Three days doubles XP, seven days triples it."""
        assert ModifierEngine.streak_multiplier(streak) == expected

    def test_reads_player_streak(self) -> None:
        """The multiplier comes from the player's current streak."""
        state = {const.DATA_PLAYER: {const.DATA_PLAYER_CURRENT_STREAK: 7}}
        assert ModifierEngine.apply_streak_multiplier(20, state) == 60

    def test_missing_player_means_no_multiplier(self) -> None:
        """State without a player leaves the amount alone."""
        assert ModifierEngine.apply_streak_multiplier(20, {}) == 20

    def test_negative_amounts_not_multiplied(self) -> None:
        """XP losses are never scaled by a streak."""
        state = {const.DATA_PLAYER: {const.DATA_PLAYER_CURRENT_STREAK: 10}}
        assert ModifierEngine.apply_streak_multiplier(-10, state) == -10


# =============================================================================
# Test: Bonus XP Window
# =============================================================================


class TestBonusWindow:
    """Tests for the temporary bonus XP multiplier."""

    @staticmethod
    def _bonus(expires_at: datetime, multiplier: float = 2.0) -> BonusXPData:
        return {
            const.DATA_BONUS_XP_MULTIPLIER: multiplier,
            const.DATA_BONUS_XP_EXPIRES_AT: dt_to_iso(expires_at),
            const.DATA_BONUS_XP_REASON: "weekend",
        }

    def test_active_bonus_multiplies(self) -> None:
        """An unexpired bonus multiplies positive amounts."""
        bonus = self._bonus(NOW + timedelta(hours=1))
        assert ModifierEngine.apply_bonus_window(25, bonus, NOW) == 50.0

    def test_expiry_is_exclusive(self) -> None:
        """At the exact expiry moment the bonus no longer applies."""
        bonus = self._bonus(NOW)
        assert not ModifierEngine.bonus_is_active(bonus, NOW)
        assert ModifierEngine.apply_bonus_window(25, bonus, NOW) == 25

    def test_no_bonus(self) -> None:
        """None means no window."""
        assert not ModifierEngine.bonus_is_active(None, NOW)
        assert ModifierEngine.apply_bonus_window(25, None, NOW) == 25

    def test_negative_amounts_not_multiplied(self) -> None:
        """XP losses are never doubled."""
        bonus = self._bonus(NOW + timedelta(hours=1))
        assert ModifierEngine.apply_bonus_window(-10, bonus, NOW) == -10
