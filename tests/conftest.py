"""Shared fixtures for QuestKeeper tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from questkeeper import GameManager, const, data_builders as db
from questkeeper.type_defs import (
    GameState,
    QuestData,
    RepeatableActionData,
    StreakChallengeData,
)

# Wednesday, well away from any DST switch
FIXED_NOW = datetime(2026, 3, 11, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Reference moment shared by a test and the objects it builds."""
    return FIXED_NOW


@pytest.fixture
def manager() -> GameManager:
    """GameManager with default settings (UTC, elapsed weekly resets)."""
    return GameManager()


@pytest.fixture
def game_state(manager: GameManager, now: datetime) -> GameState:
    """Fresh game state with the default actions and challenges seeded."""
    return manager.new_game(now, player_name="Tester")


@pytest.fixture
def make_quest(now: datetime) -> Callable[..., QuestData]:
    """Factory for active quests; keyword arguments override DATA_* fields."""

    def _make(**overrides: Any) -> QuestData:
        user_input = {
            const.DATA_QUEST_TITLE: "Write report",
            const.DATA_QUEST_XP_REWARD: 50,
            const.DATA_QUEST_TYPE: const.QUEST_TYPE_SIDE,
            const.DATA_QUEST_PRIORITY: const.QUEST_PRIORITY_MEDIUM,
            const.DATA_QUEST_DIFFICULTY_LEVEL: 2,
            const.DATA_QUEST_ESTIMATED_TIME: 30,
        }
        user_input.update(overrides)
        return db.build_quest(user_input, now=now)

    return _make


@pytest.fixture
def make_repeatable_action(now: datetime) -> Callable[..., RepeatableActionData]:
    """Factory for repeatable actions anchored at ``now``."""

    def _make(**overrides: Any) -> RepeatableActionData:
        user_input = {
            const.DATA_REPEATABLE_ID: "water",
            const.DATA_REPEATABLE_TITLE: "Drink water",
            const.DATA_REPEATABLE_TARGET_COUNT: 3,
            const.DATA_REPEATABLE_XP_PER_COMPLETION: 10,
            const.DATA_REPEATABLE_GOLD_PER_COMPLETION: 2,
        }
        user_input.update(overrides)
        return db.build_repeatable_action(user_input, now=now)

    return _make


@pytest.fixture
def make_challenge() -> Callable[..., StreakChallengeData]:
    """Factory for inactive challenges with 3/7 day milestones."""

    def _make(**overrides: Any) -> StreakChallengeData:
        user_input = {
            const.DATA_CHALLENGE_ID: "no_snacks",
            const.DATA_CHALLENGE_NAME: "No Snacks",
            const.DATA_CHALLENGE_REWARDS: [
                {
                    const.DATA_MILESTONE_DAYS: 7,
                    const.DATA_MILESTONE_XP_REWARD: 150,
                    const.DATA_MILESTONE_GOLD_REWARD: 75,
                    const.DATA_MILESTONE_TITLE: "One Week",
                },
                {
                    const.DATA_MILESTONE_DAYS: 3,
                    const.DATA_MILESTONE_XP_REWARD: 50,
                    const.DATA_MILESTONE_GOLD_REWARD: 25,
                    const.DATA_MILESTONE_TITLE: "Three Days",
                },
            ],
        }
        user_input.update(overrides)
        return db.build_streak_challenge(user_input)

    return _make
