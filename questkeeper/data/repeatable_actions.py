"""Default repeatable actions seeded into a new game.

Entries hold the user-facing fields only; ``build_repeatable_action`` adds
ids, counters and the period anchor.
"""

from __future__ import annotations

from typing import Any

from .. import const

DEFAULT_REPEATABLE_ACTIONS: tuple[dict[str, Any], ...] = (
    {
        const.DATA_REPEATABLE_ID: "meditation_daily",
        const.DATA_REPEATABLE_TITLE: "Daily Meditation",
        const.DATA_REPEATABLE_DESCRIPTION: "Meditate for peace of mind",
        const.DATA_REPEATABLE_ICON: "mdi:meditation",
        const.DATA_REPEATABLE_CATEGORY: "health",
        const.DATA_REPEATABLE_TARGET_COUNT: 1,
        const.DATA_REPEATABLE_IS_DAILY: True,
        const.DATA_REPEATABLE_XP_PER_COMPLETION: 25,
        const.DATA_REPEATABLE_GOLD_PER_COMPLETION: 5,
    },
    {
        const.DATA_REPEATABLE_ID: "exercise_daily",
        const.DATA_REPEATABLE_TITLE: "Exercise",
        const.DATA_REPEATABLE_DESCRIPTION: "Physical activity for health",
        const.DATA_REPEATABLE_ICON: "mdi:arm-flex",
        const.DATA_REPEATABLE_CATEGORY: "health",
        const.DATA_REPEATABLE_TARGET_COUNT: 1,
        const.DATA_REPEATABLE_IS_DAILY: True,
        const.DATA_REPEATABLE_XP_PER_COMPLETION: 30,
        const.DATA_REPEATABLE_GOLD_PER_COMPLETION: 8,
    },
    {
        const.DATA_REPEATABLE_ID: "reading_daily",
        const.DATA_REPEATABLE_TITLE: "Reading",
        const.DATA_REPEATABLE_DESCRIPTION: "Read for knowledge and growth",
        const.DATA_REPEATABLE_ICON: "mdi:book-open-variant",
        const.DATA_REPEATABLE_CATEGORY: "learning",
        const.DATA_REPEATABLE_TARGET_COUNT: 3,
        const.DATA_REPEATABLE_IS_DAILY: True,
        const.DATA_REPEATABLE_XP_PER_COMPLETION: 15,
        const.DATA_REPEATABLE_GOLD_PER_COMPLETION: 3,
    },
    {
        const.DATA_REPEATABLE_ID: "gratitude_daily",
        const.DATA_REPEATABLE_TITLE: "Gratitude Journal",
        const.DATA_REPEATABLE_DESCRIPTION: "Write things you are grateful for",
        const.DATA_REPEATABLE_ICON: "mdi:hand-heart",
        const.DATA_REPEATABLE_CATEGORY: "personal",
        const.DATA_REPEATABLE_TARGET_COUNT: 1,
        const.DATA_REPEATABLE_IS_DAILY: True,
        const.DATA_REPEATABLE_XP_PER_COMPLETION: 10,
        const.DATA_REPEATABLE_GOLD_PER_COMPLETION: 2,
    },
    {
        const.DATA_REPEATABLE_ID: "social_weekly",
        const.DATA_REPEATABLE_TITLE: "Social Connection",
        const.DATA_REPEATABLE_DESCRIPTION: "Connect with friends or family",
        const.DATA_REPEATABLE_ICON: "mdi:account-group",
        const.DATA_REPEATABLE_CATEGORY: "social",
        const.DATA_REPEATABLE_TARGET_COUNT: 3,
        const.DATA_REPEATABLE_IS_WEEKLY: True,
        const.DATA_REPEATABLE_XP_PER_COMPLETION: 20,
        const.DATA_REPEATABLE_GOLD_PER_COMPLETION: 5,
    },
    {
        const.DATA_REPEATABLE_ID: "creative_weekly",
        const.DATA_REPEATABLE_TITLE: "Creative Expression",
        const.DATA_REPEATABLE_DESCRIPTION: "Engage in creative activities",
        const.DATA_REPEATABLE_ICON: "mdi:palette",
        const.DATA_REPEATABLE_CATEGORY: "creative",
        const.DATA_REPEATABLE_TARGET_COUNT: 2,
        const.DATA_REPEATABLE_IS_WEEKLY: True,
        const.DATA_REPEATABLE_XP_PER_COMPLETION: 25,
        const.DATA_REPEATABLE_GOLD_PER_COMPLETION: 6,
    },
)
