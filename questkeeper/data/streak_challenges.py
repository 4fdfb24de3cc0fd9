"""Default streak challenges and their milestone tables."""

from __future__ import annotations

from typing import Any

from .. import const
from ..type_defs import MilestoneRewardData


def _milestone(days: int, xp: int, gold: int, title: str) -> MilestoneRewardData:
    return {
        const.DATA_MILESTONE_DAYS: days,
        const.DATA_MILESTONE_XP_REWARD: xp,
        const.DATA_MILESTONE_GOLD_REWARD: gold,
        const.DATA_MILESTONE_TITLE: title,
    }


DEFAULT_STREAK_CHALLENGES: tuple[dict[str, Any], ...] = (
    {
        const.DATA_CHALLENGE_ID: "no_sugar_challenge",
        const.DATA_CHALLENGE_NAME: "No Sugar Challenge",
        const.DATA_CHALLENGE_DESCRIPTION: (
            "Eliminate added sugars for better health and energy"
        ),
        const.DATA_CHALLENGE_CATEGORY: "no_sugar",
        const.DATA_CHALLENGE_DIFFICULTY: "medium",
        const.DATA_CHALLENGE_REWARDS: [
            _milestone(3, 50, 25, "Sugar Warrior"),
            _milestone(7, 150, 75, "Sweet Victory"),
            _milestone(21, 500, 250, "Sugar Slayer"),
            _milestone(30, 1000, 500, "Sugar-Free Legend"),
        ],
    },
    {
        const.DATA_CHALLENGE_ID: "no_alcohol_challenge",
        const.DATA_CHALLENGE_NAME: "No Alcohol Challenge",
        const.DATA_CHALLENGE_DESCRIPTION: (
            "Improve health and mental clarity by avoiding alcohol"
        ),
        const.DATA_CHALLENGE_CATEGORY: "no_alcohol",
        const.DATA_CHALLENGE_DIFFICULTY: "hard",
        const.DATA_CHALLENGE_REWARDS: [
            _milestone(7, 200, 100, "Clear Mind"),
            _milestone(30, 1000, 500, "Alcohol-Free Month"),
            _milestone(90, 3000, 1500, "Sobriety Champion"),
        ],
    },
    {
        const.DATA_CHALLENGE_ID: "no_processed_food_challenge",
        const.DATA_CHALLENGE_NAME: "No Processed Food",
        const.DATA_CHALLENGE_DESCRIPTION: (
            "Eat whole, natural foods for optimal nutrition"
        ),
        const.DATA_CHALLENGE_CATEGORY: "no_processed_food",
        const.DATA_CHALLENGE_DIFFICULTY: "hard",
        const.DATA_CHALLENGE_REWARDS: [
            _milestone(7, 200, 100, "Whole Food Warrior"),
            _milestone(21, 750, 375, "Natural Nutrition Master"),
            _milestone(60, 2000, 1000, "Clean Eating Legend"),
        ],
    },
    {
        const.DATA_CHALLENGE_ID: "daily_exercise_challenge",
        const.DATA_CHALLENGE_NAME: "Daily Exercise",
        const.DATA_CHALLENGE_DESCRIPTION: (
            "Move your body every day for physical and mental health"
        ),
        const.DATA_CHALLENGE_CATEGORY: "exercise",
        const.DATA_CHALLENGE_DIFFICULTY: "medium",
        const.DATA_CHALLENGE_REWARDS: [
            _milestone(7, 150, 75, "Fitness Starter"),
            _milestone(30, 750, 375, "Exercise Habit Master"),
            _milestone(100, 3000, 1500, "Fitness Legend"),
        ],
    },
)
