"""Shipped, read-only definition tables.

Managers receive these as constructor inputs; nothing here is mutated at
runtime.
"""

from .achievements import ACHIEVEMENT_DEFINITIONS
from .health_activities import HEALTH_ACTIVITY_DEFINITIONS
from .journals import DEFAULT_JOURNALS
from .quest_templates import QUEST_TEMPLATES, get_template, get_templates_by_category
from .repeatable_actions import DEFAULT_REPEATABLE_ACTIONS
from .skills import SKILL_DEFINITIONS
from .streak_challenges import DEFAULT_STREAK_CHALLENGES

__all__ = [
    "ACHIEVEMENT_DEFINITIONS",
    "DEFAULT_JOURNALS",
    "DEFAULT_REPEATABLE_ACTIONS",
    "DEFAULT_STREAK_CHALLENGES",
    "HEALTH_ACTIVITY_DEFINITIONS",
    "QUEST_TEMPLATES",
    "SKILL_DEFINITIONS",
    "get_template",
    "get_templates_by_category",
]
