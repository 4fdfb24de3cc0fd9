"""Voluptuous schemas for QuestKeeper settings and action payloads.

``GameManager.dispatch`` validates every payload against the schema
registered for its action in ``ACTION_SCHEMAS`` before touching state;
``vol.Invalid`` becomes a ``rejected`` result.
"""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from . import const
from .utils.dt_utils import get_timezone


def _timezone(value: Any) -> str:
    """Validate an IANA timezone name."""
    name = str(value)
    try:
        get_timezone(name)
    except ValueError as err:
        raise vol.Invalid(str(err)) from err
    return name


def _tags(value: Any) -> list[str]:
    """Accept a single tag or a list of tags."""
    if isinstance(value, str):
        return [value] if value else []
    if not isinstance(value, (list, tuple)):
        raise vol.Invalid("tags must be a string or a list of strings")
    return [vol.Schema(str)(tag) for tag in value]


def _integer(value: Any) -> int:
    """Coerce integral numbers and numeric strings; reject fractions."""
    if isinstance(value, bool):
        raise vol.Invalid("expected an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if value.lstrip("+-").isdigit():
            return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError) as err:
        raise vol.Invalid("expected an integer") from err
    if not number.is_integer():
        raise vol.Invalid(f"expected a whole number, got {value}")
    return int(number)


# Non-empty, stripped text
_TEXT = vol.All(str, vol.Strip, vol.Length(min=1))
_OPTIONAL_TEXT = vol.Any(None, vol.All(str, vol.Strip))
_POSITIVE_INT = vol.All(_integer, vol.Range(min=1))
_NON_NEGATIVE_INT = vol.All(_integer, vol.Range(min=0))
_TAGS = _tags

# ==============================================================================
# SETTINGS
# ==============================================================================

SETTINGS_SCHEMA = vol.Schema(
    {
        vol.Optional(const.CONF_TIMEZONE, default=const.DEFAULT_TIMEZONE): _timezone,
        vol.Optional(
            const.CONF_BASE_XP_TO_NEXT_LEVEL,
            default=const.DEFAULT_BASE_XP_TO_NEXT_LEVEL,
        ): _POSITIVE_INT,
        vol.Optional(
            const.CONF_XP_CURVE_MULTIPLIER, default=const.DEFAULT_XP_CURVE_MULTIPLIER
        ): vol.All(vol.Coerce(float), vol.Range(min=1.0)),
        vol.Optional(
            const.CONF_SKILL_POINTS_PER_LEVEL,
            default=const.DEFAULT_SKILL_POINTS_PER_LEVEL,
        ): _NON_NEGATIVE_INT,
        vol.Optional(const.CONF_MAX_HEALTH, default=const.DEFAULT_MAX_HEALTH): (
            _POSITIVE_INT
        ),
        vol.Optional(const.CONF_MAX_ENERGY, default=const.DEFAULT_MAX_ENERGY): (
            _POSITIVE_INT
        ),
        vol.Optional(
            const.CONF_WEEKLY_RESET_MODE, default=const.DEFAULT_WEEKLY_RESET_MODE
        ): vol.In(const.WEEKLY_RESET_MODE_OPTIONS),
        vol.Optional(const.CONF_WEEK_START, default=const.DEFAULT_WEEK_START): vol.All(
            str, vol.Lower, vol.In(const.WEEKDAY_OPTIONS)
        ),
        vol.Optional(
            const.CONF_MAX_ACTIVITY_LOG_ENTRIES,
            default=const.DEFAULT_MAX_ACTIVITY_LOG_ENTRIES,
        ): _POSITIVE_INT,
    }
)

# ==============================================================================
# QUESTS
# ==============================================================================

_QUEST_FIELDS = {
    vol.Optional(const.DATA_QUEST_DESCRIPTION): _OPTIONAL_TEXT,
    vol.Optional(const.DATA_QUEST_TYPE): vol.In(const.QUEST_TYPE_OPTIONS),
    vol.Optional(const.DATA_QUEST_CATEGORY): _TEXT,
    vol.Optional(const.DATA_QUEST_PRIORITY): vol.In(const.QUEST_PRIORITY_OPTIONS),
    vol.Optional(const.DATA_QUEST_GOLD_REWARD): vol.Any(
        None, vol.All(_integer, vol.Range(min=const.MIN_REWARD))
    ),
    vol.Optional(const.DATA_QUEST_DIFFICULTY_LEVEL): vol.All(
        _integer,
        vol.Range(min=const.MIN_DIFFICULTY_LEVEL, max=const.MAX_DIFFICULTY_LEVEL),
    ),
    vol.Optional(const.DATA_QUEST_ESTIMATED_TIME): vol.All(
        _integer, vol.Range(min=const.MIN_ESTIMATED_TIME)
    ),
    vol.Optional(const.DATA_QUEST_ENERGY_REQUIRED): vol.In(
        const.ENERGY_LEVEL_OPTIONS
    ),
    vol.Optional(const.DATA_QUEST_ANXIETY_LEVEL): vol.In(const.ANXIETY_LEVEL_OPTIONS),
    vol.Optional(const.DATA_QUEST_TAGS): _TAGS,
}

# Title and xp_reward may come from a template; the builder enforces them
ADD_QUEST_SCHEMA = vol.Schema(
    {
        vol.Optional(const.FIELD_TEMPLATE_ID): _TEXT,
        vol.Optional(const.DATA_QUEST_TITLE): _TEXT,
        vol.Optional(const.DATA_QUEST_XP_REWARD): vol.All(
            _integer, vol.Range(min=const.MIN_REWARD)
        ),
        **_QUEST_FIELDS,
    }
)

EDIT_QUEST_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_QUEST_ID): _TEXT,
        vol.Optional(const.DATA_QUEST_TITLE): _TEXT,
        vol.Optional(const.DATA_QUEST_XP_REWARD): vol.All(
            _integer, vol.Range(min=const.MIN_REWARD)
        ),
        **_QUEST_FIELDS,
    }
)

QUEST_ID_SCHEMA = vol.Schema({vol.Required(const.FIELD_QUEST_ID): _TEXT})

# ==============================================================================
# PLAYER & ECONOMY
# ==============================================================================

EMPTY_SCHEMA = vol.Schema({})

LOG_HEALTH_ACTIVITY_SCHEMA = vol.Schema(
    {vol.Required(const.FIELD_ACTIVITY_ID): _TEXT}
)

ADD_XP_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_AMOUNT): _integer,
        vol.Optional(const.FIELD_REASON): _OPTIONAL_TEXT,
    }
)

ADD_GOLD_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_AMOUNT): _integer,
        vol.Optional(const.FIELD_REASON): _OPTIONAL_TEXT,
    }
)

SPEND_GOLD_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_AMOUNT): _POSITIVE_INT,
        vol.Optional(const.FIELD_REASON): _OPTIONAL_TEXT,
    }
)

CLAIM_STREAK_REWARD_SCHEMA = vol.Schema(
    {vol.Required(const.FIELD_STREAK_COUNT): _POSITIVE_INT}
)

ACTIVATE_BONUS_XP_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_MULTIPLIER): vol.All(
            vol.Coerce(float), vol.Range(min=1.0)
        ),
        vol.Required(const.FIELD_DURATION): _POSITIVE_INT,
        vol.Optional(const.FIELD_REASON, default=const.SENTINEL_EMPTY): vol.All(
            str, vol.Strip
        ),
    }
)

UPDATE_ENERGY_SYSTEM_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_METER_CURRENT): _NON_NEGATIVE_INT,
        vol.Optional(const.DATA_ENERGY_DAILY_RATING): vol.All(
            _integer, vol.Range(min=1, max=5)
        ),
        vol.Optional(const.DATA_ENERGY_SLEEP_HOURS): vol.All(
            vol.Coerce(float), vol.Range(min=0, max=24)
        ),
        vol.Optional(const.DATA_ENERGY_MOOD_LEVEL): vol.All(
            _integer, vol.Range(min=1, max=10)
        ),
        vol.Optional(const.DATA_ENERGY_ANXIETY_LEVEL): vol.All(
            _integer, vol.Range(min=1, max=10)
        ),
        vol.Optional(const.DATA_ENERGY_STRESS_LEVEL): vol.All(
            _integer, vol.Range(min=1, max=10)
        ),
    }
)

UNLOCK_SKILL_SCHEMA = vol.Schema({vol.Required(const.FIELD_SKILL_ID): _TEXT})

UNLOCK_ACHIEVEMENT_SCHEMA = vol.Schema(
    {vol.Required(const.FIELD_ACHIEVEMENT_ID): _TEXT}
)

# ==============================================================================
# REPEATABLE ACTIONS
# ==============================================================================

ADD_REPEATABLE_ACTION_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_REPEATABLE_TITLE): _TEXT,
        vol.Optional(const.DATA_REPEATABLE_DESCRIPTION): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_REPEATABLE_ICON): _TEXT,
        vol.Optional(const.DATA_REPEATABLE_CATEGORY): _TEXT,
        vol.Optional(const.DATA_REPEATABLE_TARGET_COUNT): _POSITIVE_INT,
        vol.Optional(const.DATA_REPEATABLE_IS_DAILY): bool,
        vol.Optional(const.DATA_REPEATABLE_IS_WEEKLY): bool,
        vol.Optional(const.DATA_REPEATABLE_XP_PER_COMPLETION): _NON_NEGATIVE_INT,
        vol.Optional(const.DATA_REPEATABLE_GOLD_PER_COMPLETION): _NON_NEGATIVE_INT,
    }
)

REPEATABLE_ACTION_ID_SCHEMA = vol.Schema(
    {vol.Required(const.FIELD_ACTION_ID): _TEXT}
)

# ==============================================================================
# STREAK CHALLENGES
# ==============================================================================

_MILESTONE_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_MILESTONE_DAYS): _POSITIVE_INT,
        vol.Optional(const.DATA_MILESTONE_XP_REWARD, default=0): _NON_NEGATIVE_INT,
        vol.Optional(const.DATA_MILESTONE_GOLD_REWARD, default=0): _NON_NEGATIVE_INT,
        vol.Optional(const.DATA_MILESTONE_TITLE, default=const.SENTINEL_EMPTY): str,
    }
)

ADD_STREAK_CHALLENGE_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_CHALLENGE_NAME): _TEXT,
        vol.Optional(const.DATA_CHALLENGE_DESCRIPTION): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_CHALLENGE_CATEGORY): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_CHALLENGE_DIFFICULTY): vol.In(
            const.CHALLENGE_DIFFICULTY_OPTIONS
        ),
        vol.Optional(const.DATA_CHALLENGE_REWARDS, default=list): [_MILESTONE_SCHEMA],
    }
)

CHALLENGE_ID_SCHEMA = vol.Schema({vol.Required(const.FIELD_CHALLENGE_ID): _TEXT})

CHECK_IN_STREAK_CHALLENGE_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_CHALLENGE_ID): _TEXT,
        vol.Required(const.FIELD_SUCCESS): bool,
        vol.Optional(const.FIELD_NOTES): _OPTIONAL_TEXT,
    }
)

# ==============================================================================
# JOURNALS
# ==============================================================================

ADD_JOURNAL_ENTRY_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_JOURNAL_ID): _TEXT,
        vol.Optional(const.DATA_ENTRY_TITLE): _OPTIONAL_TEXT,
        vol.Required(const.DATA_ENTRY_CONTENT): _TEXT,
        vol.Optional(const.DATA_ENTRY_MOOD): vol.Any(
            None,
            vol.All(
                _integer, vol.Range(min=const.MIN_MOOD, max=const.MAX_MOOD)
            ),
        ),
        vol.Optional(const.DATA_ENTRY_AMOUNT): vol.Any(
            None, vol.All(vol.Coerce(float), vol.Range(min=0))
        ),
        vol.Optional(const.DATA_ENTRY_TAGS): _TAGS,
    }
)

# ==============================================================================
# ACTION REGISTRY
# ==============================================================================

ACTION_SCHEMAS: dict[str, vol.Schema] = {
    const.ACTION_ADD_QUEST: ADD_QUEST_SCHEMA,
    const.ACTION_EDIT_QUEST: EDIT_QUEST_SCHEMA,
    const.ACTION_DELETE_QUEST: QUEST_ID_SCHEMA,
    const.ACTION_COMPLETE_QUEST: QUEST_ID_SCHEMA,
    const.ACTION_LOG_HEALTH_ACTIVITY: LOG_HEALTH_ACTIVITY_SCHEMA,
    const.ACTION_GET_PLAYER_STATUS: EMPTY_SCHEMA,
    const.ACTION_ADD_XP: ADD_XP_SCHEMA,
    const.ACTION_ADD_GOLD: ADD_GOLD_SCHEMA,
    const.ACTION_SPEND_GOLD: SPEND_GOLD_SCHEMA,
    const.ACTION_UPDATE_STREAK: EMPTY_SCHEMA,
    const.ACTION_CLAIM_STREAK_REWARD: CLAIM_STREAK_REWARD_SCHEMA,
    const.ACTION_ACTIVATE_BONUS_XP: ACTIVATE_BONUS_XP_SCHEMA,
    const.ACTION_UPDATE_ENERGY_SYSTEM: UPDATE_ENERGY_SYSTEM_SCHEMA,
    const.ACTION_UNLOCK_SKILL: UNLOCK_SKILL_SCHEMA,
    const.ACTION_UNLOCK_ACHIEVEMENT: UNLOCK_ACHIEVEMENT_SCHEMA,
    const.ACTION_ADD_REPEATABLE_ACTION: ADD_REPEATABLE_ACTION_SCHEMA,
    const.ACTION_INCREMENT_REPEATABLE_ACTION: REPEATABLE_ACTION_ID_SCHEMA,
    const.ACTION_RESET_REPEATABLE_ACTION: REPEATABLE_ACTION_ID_SCHEMA,
    const.ACTION_REMOVE_REPEATABLE_ACTION: REPEATABLE_ACTION_ID_SCHEMA,
    const.ACTION_ADD_STREAK_CHALLENGE: ADD_STREAK_CHALLENGE_SCHEMA,
    const.ACTION_START_STREAK_CHALLENGE: CHALLENGE_ID_SCHEMA,
    const.ACTION_STOP_STREAK_CHALLENGE: CHALLENGE_ID_SCHEMA,
    const.ACTION_CHECK_IN_STREAK_CHALLENGE: CHECK_IN_STREAK_CHALLENGE_SCHEMA,
    const.ACTION_INITIALIZE_JOURNALS: EMPTY_SCHEMA,
    const.ACTION_ADD_JOURNAL_ENTRY: ADD_JOURNAL_ENTRY_SCHEMA,
}
