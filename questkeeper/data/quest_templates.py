"""Quest templates for quick creation.

Templates carry authored XP but no gold: quests built from a template
leave ``gold_reward`` unset so the gold formula applies.
"""

from __future__ import annotations

from typing import Any

from .. import const


def _template(
    template_id: str,
    title: str,
    description: str,
    category: str,
    quest_type: str,
    xp_reward: int,
    priority: str,
    estimated_time: int,
    difficulty_level: int,
    energy_required: str,
    anxiety_level: str,
    tags: list[str],
) -> dict[str, Any]:
    return {
        const.DATA_QUEST_ID: template_id,
        const.DATA_QUEST_TITLE: title,
        const.DATA_QUEST_DESCRIPTION: description,
        const.DATA_QUEST_CATEGORY: category,
        const.DATA_QUEST_TYPE: quest_type,
        const.DATA_QUEST_XP_REWARD: xp_reward,
        const.DATA_QUEST_PRIORITY: priority,
        const.DATA_QUEST_ESTIMATED_TIME: estimated_time,
        const.DATA_QUEST_DIFFICULTY_LEVEL: difficulty_level,
        const.DATA_QUEST_ENERGY_REQUIRED: energy_required,
        const.DATA_QUEST_ANXIETY_LEVEL: anxiety_level,
        const.DATA_QUEST_TAGS: tags,
    }


QUEST_TEMPLATES: tuple[dict[str, Any], ...] = (
    # Work
    _template(
        "work_daily_standup",
        "Attend Daily Standup",
        "Participate in team daily standup meeting",
        "work",
        const.QUEST_TYPE_DAILY,
        15,
        const.QUEST_PRIORITY_MEDIUM,
        15,
        1,
        "low",
        const.ANXIETY_LEVEL_COMFORTABLE,
        ["meeting", "team", "communication"],
    ),
    _template(
        "work_complete_project",
        "Complete Project Milestone",
        "Finish a significant project milestone or deliverable",
        "work",
        const.QUEST_TYPE_MAIN,
        100,
        const.QUEST_PRIORITY_HIGH,
        240,
        4,
        "high",
        const.ANXIETY_LEVEL_CHALLENGING,
        ["project", "milestone", "delivery"],
    ),
    _template(
        "work_email_cleanup",
        "Clean Email Inbox",
        "Process and organize email inbox to zero",
        "work",
        const.QUEST_TYPE_SIDE,
        20,
        const.QUEST_PRIORITY_LOW,
        30,
        2,
        "medium",
        const.ANXIETY_LEVEL_MILD,
        ["organization", "productivity", "email"],
    ),
    # Health
    _template(
        "health_morning_workout",
        "Morning Workout",
        "Complete 30-minute morning exercise routine",
        "health",
        const.QUEST_TYPE_DAILY,
        30,
        const.QUEST_PRIORITY_HIGH,
        30,
        3,
        "high",
        const.ANXIETY_LEVEL_MILD,
        ["exercise", "fitness", "morning"],
    ),
    _template(
        "health_drink_water",
        "Drink 8 Glasses of Water",
        "Stay hydrated throughout the day",
        "health",
        const.QUEST_TYPE_DAILY,
        10,
        const.QUEST_PRIORITY_MEDIUM,
        5,
        1,
        "low",
        const.ANXIETY_LEVEL_COMFORTABLE,
        ["hydration", "health", "wellness"],
    ),
    _template(
        "health_meditation",
        "10-Minute Meditation",
        "Practice mindfulness meditation",
        "health",
        const.QUEST_TYPE_DAILY,
        25,
        const.QUEST_PRIORITY_MEDIUM,
        10,
        2,
        "low",
        const.ANXIETY_LEVEL_COMFORTABLE,
        ["mindfulness", "mental health", "meditation"],
    ),
    # Learning
    _template(
        "learning_read_article",
        "Read Educational Article",
        "Read an article about a topic you want to learn",
        "learning",
        const.QUEST_TYPE_DAILY,
        20,
        const.QUEST_PRIORITY_MEDIUM,
        20,
        2,
        "medium",
        const.ANXIETY_LEVEL_COMFORTABLE,
        ["reading", "education", "knowledge"],
    ),
    _template(
        "learning_online_course",
        "Complete Course Module",
        "Finish one module of an online course",
        "learning",
        const.QUEST_TYPE_SIDE,
        50,
        const.QUEST_PRIORITY_MEDIUM,
        60,
        3,
        "medium",
        const.ANXIETY_LEVEL_MILD,
        ["course", "skill development", "learning"],
    ),
    # Personal
    _template(
        "personal_clean_room",
        "Organize Living Space",
        "Tidy up and organize your room or workspace",
        "personal",
        const.QUEST_TYPE_SIDE,
        25,
        const.QUEST_PRIORITY_MEDIUM,
        45,
        2,
        "medium",
        const.ANXIETY_LEVEL_MILD,
        ["organization", "cleaning", "environment"],
    ),
    _template(
        "personal_meal_prep",
        "Meal Preparation",
        "Prepare healthy meals for the week",
        "personal",
        const.QUEST_TYPE_WEEKLY,
        40,
        const.QUEST_PRIORITY_MEDIUM,
        90,
        3,
        "medium",
        const.ANXIETY_LEVEL_MILD,
        ["cooking", "health", "preparation"],
    ),
    # Creative
    _template(
        "creative_sketch",
        "Daily Sketch",
        "Draw something for 15 minutes",
        "creative",
        const.QUEST_TYPE_DAILY,
        20,
        const.QUEST_PRIORITY_LOW,
        15,
        2,
        "medium",
        const.ANXIETY_LEVEL_COMFORTABLE,
        ["art", "creativity", "drawing"],
    ),
    # Social
    _template(
        "social_call_friend",
        "Call a Friend",
        "Have a meaningful conversation with a friend",
        "social",
        const.QUEST_TYPE_SIDE,
        30,
        const.QUEST_PRIORITY_MEDIUM,
        20,
        2,
        "medium",
        const.ANXIETY_LEVEL_MILD,
        ["friendship", "communication", "social"],
    ),
)


def get_templates_by_category(category: str) -> list[dict[str, Any]]:
    """Return the templates in ``category``."""
    return [t for t in QUEST_TEMPLATES if t[const.DATA_QUEST_CATEGORY] == category]


def get_template(template_id: str) -> dict[str, Any] | None:
    """Return the template with ``template_id``, or None."""
    for template in QUEST_TEMPLATES:
        if template[const.DATA_QUEST_ID] == template_id:
            return template
    return None
