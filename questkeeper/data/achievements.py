"""Shipped achievement definitions.

Each criterion is declarative: ``type`` selects a handler registered in
GamificationEngine and ``threshold`` is the value to reach.
"""

from __future__ import annotations

from .. import const
from ..type_defs import AchievementDefinition


def _achievement(
    achievement_id: str,
    name: str,
    description: str,
    icon: str,
    category: str,
    criterion_type: str,
    threshold: int,
) -> AchievementDefinition:
    return {
        const.DATA_ACHIEVEMENT_ID: achievement_id,
        const.DATA_ACHIEVEMENT_NAME: name,
        const.DATA_ACHIEVEMENT_DESCRIPTION: description,
        const.DATA_ACHIEVEMENT_ICON: icon,
        const.DATA_ACHIEVEMENT_CATEGORY: category,
        const.DATA_ACHIEVEMENT_CRITERION: {
            const.DATA_ACHIEVEMENT_CRITERION_TYPE: criterion_type,
            const.DATA_ACHIEVEMENT_CRITERION_THRESHOLD: threshold,
        },
    }


ACHIEVEMENT_DEFINITIONS: tuple[AchievementDefinition, ...] = (
    _achievement(
        "first_quest_completed",
        "First Step",
        "Complete your very first quest.",
        "mdi:star-four-points",
        const.ACHIEVEMENT_CATEGORY_MILESTONE,
        const.ACHIEVEMENT_CRITERION_QUESTS_COMPLETED,
        1,
    ),
    _achievement(
        "reach_level_5",
        "Novice Adventurer",
        "Reach player level 5.",
        "mdi:star",
        const.ACHIEVEMENT_CATEGORY_MILESTONE,
        const.ACHIEVEMENT_CRITERION_PLAYER_LEVEL,
        5,
    ),
    _achievement(
        "three_day_streak",
        "Consistent Effort",
        "Maintain a 3-day streak.",
        "mdi:fire",
        const.ACHIEVEMENT_CATEGORY_CONSISTENCY,
        const.ACHIEVEMENT_CRITERION_LONGEST_STREAK,
        3,
    ),
    _achievement(
        "log_5_health_activities",
        "Wellness Warrior",
        "Log 5 health activities.",
        "mdi:heart-pulse",
        const.ACHIEVEMENT_CATEGORY_WELLNESS,
        const.ACHIEVEMENT_CRITERION_HEALTH_ACTIVITIES,
        5,
    ),
    _achievement(
        "reach_level_10",
        "Experienced Explorer",
        "Reach player level 10.",
        "mdi:trophy",
        const.ACHIEVEMENT_CATEGORY_MILESTONE,
        const.ACHIEVEMENT_CRITERION_PLAYER_LEVEL,
        10,
    ),
    _achievement(
        "seven_day_streak",
        "Unstoppable Momentum",
        "Maintain a 7-day streak.",
        "mdi:rocket-launch",
        const.ACHIEVEMENT_CATEGORY_CONSISTENCY,
        const.ACHIEVEMENT_CRITERION_LONGEST_STREAK,
        7,
    ),
    _achievement(
        "complete_10_quests",
        "Quest Master",
        "Complete 10 quests.",
        "mdi:script-text",
        const.ACHIEVEMENT_CATEGORY_MILESTONE,
        const.ACHIEVEMENT_CRITERION_QUESTS_COMPLETED,
        10,
    ),
    _achievement(
        "speedrun_novice",
        "Speedrun Novice",
        "Complete 10 quick tasks (15 minutes or less).",
        "mdi:lightning-bolt",
        const.ACHIEVEMENT_CATEGORY_GAMER,
        const.ACHIEVEMENT_CRITERION_QUICK_TASKS,
        10,
    ),
    _achievement(
        "boss_battle_winner",
        "Boss Battle Winner",
        "Complete a maximum-difficulty quest.",
        "mdi:sword-cross",
        const.ACHIEVEMENT_CATEGORY_GAMER,
        const.ACHIEVEMENT_CRITERION_BIG_TASKS,
        1,
    ),
    _achievement(
        "skill_collector",
        "Skill Collector",
        "Unlock 2 skills.",
        "mdi:book-open-variant",
        const.ACHIEVEMENT_CATEGORY_GAMER,
        const.ACHIEVEMENT_CRITERION_SKILLS_UNLOCKED,
        2,
    ),
)
