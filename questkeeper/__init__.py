"""QuestKeeper progression and rewards engine.

Turns user actions (quests, health activities, habits, check-ins) into
role-playing-game progression: XP, levels, gold, health, skills and
achievements.

Usage:
    manager = GameManager({"timezone": "Europe/Warsaw"})
    state = manager.new_game(now)
    result = manager.dispatch(state, ACTION_ADD_QUEST, {...}, now)
    state = result.state
"""

from .const import (
    ACTION_ACTIVATE_BONUS_XP,
    ACTION_ADD_GOLD,
    ACTION_ADD_JOURNAL_ENTRY,
    ACTION_ADD_QUEST,
    ACTION_ADD_REPEATABLE_ACTION,
    ACTION_ADD_STREAK_CHALLENGE,
    ACTION_ADD_XP,
    ACTION_CHECK_IN_STREAK_CHALLENGE,
    ACTION_CLAIM_STREAK_REWARD,
    ACTION_COMPLETE_QUEST,
    ACTION_DELETE_QUEST,
    ACTION_EDIT_QUEST,
    ACTION_GET_PLAYER_STATUS,
    ACTION_INCREMENT_REPEATABLE_ACTION,
    ACTION_INITIALIZE_JOURNALS,
    ACTION_LOG_HEALTH_ACTIVITY,
    ACTION_REMOVE_REPEATABLE_ACTION,
    ACTION_RESET_REPEATABLE_ACTION,
    ACTION_SPEND_GOLD,
    ACTION_START_STREAK_CHALLENGE,
    ACTION_STOP_STREAK_CHALLENGE,
    ACTION_UNLOCK_ACHIEVEMENT,
    ACTION_UNLOCK_SKILL,
    ACTION_UPDATE_ENERGY_SYSTEM,
    ACTION_UPDATE_STREAK,
)
from .exceptions import (
    ActionValidationError,
    EntityConflictError,
    InsufficientGoldError,
    InsufficientSkillPointsError,
    QuestKeeperError,
    UnknownEntityError,
)
from .managers import ActionResult, GameManager

__version__ = "0.1.0"

__all__ = [
    "ACTION_ACTIVATE_BONUS_XP",
    "ACTION_ADD_GOLD",
    "ACTION_ADD_JOURNAL_ENTRY",
    "ACTION_ADD_QUEST",
    "ACTION_ADD_REPEATABLE_ACTION",
    "ACTION_ADD_STREAK_CHALLENGE",
    "ACTION_ADD_XP",
    "ACTION_CHECK_IN_STREAK_CHALLENGE",
    "ACTION_CLAIM_STREAK_REWARD",
    "ACTION_COMPLETE_QUEST",
    "ACTION_DELETE_QUEST",
    "ACTION_EDIT_QUEST",
    "ACTION_GET_PLAYER_STATUS",
    "ACTION_INCREMENT_REPEATABLE_ACTION",
    "ACTION_INITIALIZE_JOURNALS",
    "ACTION_LOG_HEALTH_ACTIVITY",
    "ACTION_REMOVE_REPEATABLE_ACTION",
    "ACTION_RESET_REPEATABLE_ACTION",
    "ACTION_SPEND_GOLD",
    "ACTION_START_STREAK_CHALLENGE",
    "ACTION_STOP_STREAK_CHALLENGE",
    "ACTION_UNLOCK_ACHIEVEMENT",
    "ACTION_UNLOCK_SKILL",
    "ACTION_UPDATE_ENERGY_SYSTEM",
    "ACTION_UPDATE_STREAK",
    "ActionResult",
    "ActionValidationError",
    "EntityConflictError",
    "GameManager",
    "InsufficientGoldError",
    "InsufficientSkillPointsError",
    "QuestKeeperError",
    "UnknownEntityError",
]
