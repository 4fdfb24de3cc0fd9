"""Unit tests for RewardEngine - quest gold and XP calculation.

Test Categories:
- Gold formula (type x difficulty x priority, floored, minimum 1)
- Explicit gold override vs computed gold
- Quest XP through skills, streak multiplier, bonus window and rounding
- Health activity XP
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
import itertools
from typing import Any

import pytest

from questkeeper import const
from questkeeper.data import HEALTH_ACTIVITY_DEFINITIONS, SKILL_DEFINITIONS
from questkeeper.engines.reward_engine import (
    ComputedReward,
    ExplicitReward,
    RewardEngine,
)
from questkeeper.utils.dt_utils import dt_to_iso

NOW = datetime(2026, 3, 11, 12, 0, tzinfo=UTC)

ACTIVITIES = {a[const.DATA_HEALTH_ACTIVITY_ID]: a for a in HEALTH_ACTIVITY_DEFINITIONS}


def bonus_state(multiplier: float = 2.0) -> dict[str, Any]:
    return {
        const.DATA_BONUS_XP_ACTIVE: {
            const.DATA_BONUS_XP_MULTIPLIER: multiplier,
            const.DATA_BONUS_XP_EXPIRES_AT: dt_to_iso(NOW + timedelta(hours=1)),
            const.DATA_BONUS_XP_REASON: "",
        }
    }


# =============================================================================
# Test: Gold Formula
# =============================================================================


class TestComputedGold:
    """Tests for floor(5 * type * difficulty/2 * priority)."""

    @pytest.mark.parametrize(
        ("quest_type", "difficulty", "priority", "expected"),
        [
            (const.QUEST_TYPE_MAIN, 3, const.QUEST_PRIORITY_HIGH, 56),
            (const.QUEST_TYPE_SIDE, 1, const.QUEST_PRIORITY_LOW, 7),
            (const.QUEST_TYPE_DAILY, 1, const.QUEST_PRIORITY_LOW, 5),
            (const.QUEST_TYPE_WEEKLY, 2, const.QUEST_PRIORITY_MEDIUM, 25),
            (const.QUEST_TYPE_MAIN, 5, const.QUEST_PRIORITY_URGENT, 125),
            (const.QUEST_TYPE_SIDE, 3, const.QUEST_PRIORITY_MEDIUM, 28),
        ],
    )
    def test_formula(
        self, quest_type: str, difficulty: int, priority: str, expected: int
    ) -> None:
        """Known values of the gold formula."""
        assert RewardEngine.computed_gold(quest_type, difficulty, priority) == expected

    def test_every_combination_pays_at_least_one(self) -> None:
        """No valid combination produces less than 1 gold."""
        for quest_type, difficulty, priority in itertools.product(
            const.QUEST_TYPE_OPTIONS,
            range(const.MIN_DIFFICULTY_LEVEL, const.MAX_DIFFICULTY_LEVEL + 1),
            const.QUEST_PRIORITY_OPTIONS,
        ):
            assert RewardEngine.computed_gold(quest_type, difficulty, priority) >= 1

    def test_floor_never_below_minimum(self) -> None:
        """A zero product is lifted to the minimum reward."""
        assert RewardEngine.computed_gold(const.QUEST_TYPE_SIDE, 0, "low") == 1


# =============================================================================
# Test: Gold Override
# =============================================================================


class TestGoldOverride:
    """Tests for explicit vs computed gold."""

    def test_missing_gold_is_computed(self) -> None:
        """None (or a missing key) means compute."""
        assert RewardEngine.gold_override({}) == ComputedReward()
        assert RewardEngine.gold_override(
            {const.DATA_QUEST_GOLD_REWARD: None}
        ) == ComputedReward()

    def test_explicit_gold_is_wrapped(self) -> None:
        """A stored value becomes an ExplicitReward."""
        assert RewardEngine.gold_override(
            {const.DATA_QUEST_GOLD_REWARD: 3}
        ) == ExplicitReward(3)

    def test_explicit_gold_returned_unchanged(self) -> None:
        """The override wins regardless of type, priority and difficulty."""
        quest = {
            const.DATA_QUEST_TYPE: const.QUEST_TYPE_MAIN,
            const.DATA_QUEST_DIFFICULTY_LEVEL: 5,
            const.DATA_QUEST_PRIORITY: const.QUEST_PRIORITY_URGENT,
            const.DATA_QUEST_GOLD_REWARD: 3,
        }
        assert RewardEngine.gold_reward(quest) == 3

    def test_computed_gold_uses_quest_metadata(self) -> None:
        """Without an override the formula applies."""
        quest = {
            const.DATA_QUEST_TYPE: const.QUEST_TYPE_MAIN,
            const.DATA_QUEST_DIFFICULTY_LEVEL: 3,
            const.DATA_QUEST_PRIORITY: const.QUEST_PRIORITY_HIGH,
            const.DATA_QUEST_GOLD_REWARD: None,
        }
        assert RewardEngine.gold_reward(quest) == 56


# =============================================================================
# Test: Quest XP
# =============================================================================


class TestQuestXP:
    """Tests for stored xp -> skills -> streak -> bonus window -> round."""

    def test_plain_xp(self, make_quest: Any) -> None:
        """Without skills or bonus the stored XP is granted."""
        quest = make_quest(xp_reward=50)
        assert RewardEngine.quest_xp(quest, {}, [], SKILL_DEFINITIONS, NOW) == 50

    def test_skill_then_bonus(self, make_quest: Any) -> None:
        """Skill modifiers apply before the bonus multiplier."""
        quest = make_quest(xp_reward=25, estimated_time=10)
        xp = RewardEngine.quest_xp(
            quest,
            bonus_state(2.0),
            [const.SKILL_ADAPTIVE_FOCUS],
            SKILL_DEFINITIONS,
            NOW,
        )
        assert xp == 60  # 25 * 1.2 * 2

    def test_rounds_half_up(self, make_quest: Any) -> None:
        """(25 + 2 aura) * 1.5 = 40.5 rounds to 41."""
        quest = make_quest(
            xp_reward=25,
            estimated_time=60,
            anxiety_level=const.ANXIETY_LEVEL_DAUNTING,
        )
        xp = RewardEngine.quest_xp(
            quest,
            bonus_state(1.5),
            [const.SKILL_ANTI_PROCRASTINATION_AURA],
            SKILL_DEFINITIONS,
            NOW,
        )
        assert xp == 41

    def test_rounds_to_nearest(self, make_quest: Any) -> None:
        """13 * 1.2 = 15.6 rounds to 16."""
        quest = make_quest(xp_reward=13, estimated_time=5)
        xp = RewardEngine.quest_xp(
            quest, {}, [const.SKILL_ADAPTIVE_FOCUS], SKILL_DEFINITIONS, NOW
        )
        assert xp == 16

    @pytest.mark.parametrize(("streak", "expected"), [(2, 40), (3, 80), (7, 120)])
    def test_streak_multiplier(
        self, make_quest: Any, streak: int, expected: int
    ) -> None:
        """A 3 day streak doubles quest XP and a 7 day streak triples it."""
        quest = make_quest(xp_reward=40)
        state = {const.DATA_PLAYER: {const.DATA_PLAYER_CURRENT_STREAK: streak}}
        xp = RewardEngine.quest_xp(quest, state, [], SKILL_DEFINITIONS, NOW)
        assert xp == expected

    def test_full_order(self, make_quest: Any) -> None:
        """Skills, then streak, then the bonus window."""
        quest = make_quest(xp_reward=25, estimated_time=10)
        state = {
            **bonus_state(2.0),
            const.DATA_PLAYER: {const.DATA_PLAYER_CURRENT_STREAK: 3},
        }
        xp = RewardEngine.quest_xp(
            quest, state, [const.SKILL_ADAPTIVE_FOCUS], SKILL_DEFINITIONS, NOW
        )
        assert xp == 120  # 25 * 1.2 * 2 * 2


# =============================================================================
# Test: Health Activity XP
# =============================================================================


class TestHealthActivityXP:
    """Tests for XP granted (or lost) by health activities."""

    def test_positive_activity(self) -> None:
        """Meditation grants its authored XP."""
        xp = RewardEngine.health_activity_xp(
            ACTIVITIES["meditation"], {}, [], SKILL_DEFINITIONS, NOW
        )
        assert xp == 5

    def test_negative_activity_ignores_bonus(self) -> None:
        """Losses are not multiplied by an active bonus."""
        xp = RewardEngine.health_activity_xp(
            ACTIVITIES["poor_sleep"], bonus_state(3.0), [], SKILL_DEFINITIONS, NOW
        )
        assert xp == -10

    def test_positive_activity_uses_bonus(self) -> None:
        """Gains are multiplied by an active bonus."""
        xp = RewardEngine.health_activity_xp(
            ACTIVITIES["nature_walk"], bonus_state(1.5), [], SKILL_DEFINITIONS, NOW
        )
        assert xp == 8  # 5 * 1.5 = 7.5 -> 8

    def test_creative_recharge_adds_flat_xp(self) -> None:
        """Creative expression grants 7 + 10 XP with the skill."""
        xp = RewardEngine.health_activity_xp(
            ACTIVITIES["creative_activity"],
            {},
            [const.SKILL_CREATIVE_RECHARGE],
            SKILL_DEFINITIONS,
            NOW,
        )
        assert xp == 17

    def test_streak_scales_gains_only(self) -> None:
        """A 7 day streak triples gains and leaves losses alone."""
        state = {const.DATA_PLAYER: {const.DATA_PLAYER_CURRENT_STREAK: 7}}
        gain = RewardEngine.health_activity_xp(
            ACTIVITIES["nature_walk"], state, [], SKILL_DEFINITIONS, NOW
        )
        loss = RewardEngine.health_activity_xp(
            ACTIVITIES["poor_sleep"], state, [], SKILL_DEFINITIONS, NOW
        )
        assert gain == 15
        assert loss == -10
