"""Entity lifecycle management helpers.

This module is the SINGLE SOURCE OF TRUTH for:
- Entity field defaults
- Business logic validation
- Complete entity structure building

### Build Functions
Each entity type has a `build_<entity>()` function that:
- Takes user_input (DATA_* keys, possibly partial)
- Generates internal_id (UUID) for new entities
- Sets timestamps (created_at, reset_date...)
- Applies field defaults
- Returns a complete entity dict ready to be placed in the game state

### Validation Functions
Entity types with business rules have a `validate_<entity>_data()` function
that returns a dict of errors ``{field: reason}`` (empty if valid). Build
functions call them and raise ActionValidationError on the first error.

Consumers:
- managers/game_manager.py (action handlers)
- tests (state fixtures)
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any
import uuid

from . import const
from .data import DEFAULT_REPEATABLE_ACTIONS, DEFAULT_STREAK_CHALLENGES
from .exceptions import ActionValidationError
from .type_defs import (
    EnergySystemData,
    GameState,
    HealthBarData,
    JournalData,
    JournalEntryData,
    PlayerData,
    QuestData,
    RepeatableActionData,
    StatisticsData,
    StreakChallengeData,
)
from .utils.dt_utils import dt_now_utc, dt_to_iso

# ==============================================================================
# HELPER FUNCTIONS FOR FIELD NORMALIZATION
# ==============================================================================


def _normalize_list_field(value: Any) -> list[Any]:
    """Normalize a field that should be a list.

    Handles cases where the value might be:
    - Already a list → return a copy
    - None → return empty list
    - A single string → wrap it (never iterate character by character)
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return list(value)


def _make_field_getter(
    user_input: Mapping[str, Any], existing: Mapping[str, Any] | None
) -> Any:
    def get_field(data_key: str, default: Any) -> Any:
        """Get field value: user_input > existing > default.

        Priority:
        1. If data_key in user_input → use user_input value
        2. If existing is not None → use existing value (update mode)
        3. Fall back to default (create mode)
        """
        if data_key in user_input:
            return user_input[data_key]
        if existing is not None:
            return existing.get(data_key, default)
        return default

    return get_field


def _raise_first(errors: Mapping[str, str]) -> None:
    if errors:
        field, reason = next(iter(errors.items()))
        raise ActionValidationError(reason, field=field)


def _clean_text(value: Any) -> str:
    return str(value).strip() if value else ""


# ==============================================================================
# QUESTS
# ==============================================================================


def validate_quest_data(
    data: Mapping[str, Any],
    *,
    is_update: bool = False,
) -> dict[str, str]:
    """Validate quest business rules.

    Args:
        data: Quest data with DATA_* keys
        is_update: True if updating; only fields present in data are checked

    Returns:
        Dict of errors: {field: reason}. Empty dict means validation passed.

    Validation Rules:
        1. Title not empty
        2. xp_reward >= 1
        3. gold_reward is None (computed) or >= 1
        4. estimated_time >= 1
        5. difficulty_level within 1-5
        6. type/priority/energy/anxiety are known options
    """
    errors: dict[str, str] = {}

    def present(key: str) -> bool:
        return key in data or not is_update

    # === 1. Title ===
    if present(const.DATA_QUEST_TITLE) and not _clean_text(
        data.get(const.DATA_QUEST_TITLE)
    ):
        errors[const.DATA_QUEST_TITLE] = "Quest title is required"
        return errors

    # === 2-4. Numeric minimums ===
    numeric_rules = (
        (const.DATA_QUEST_XP_REWARD, const.MIN_REWARD, "XP reward must be at least 1"),
        (
            const.DATA_QUEST_ESTIMATED_TIME,
            const.MIN_ESTIMATED_TIME,
            "Estimated time must be at least 1 minute",
        ),
    )
    for key, minimum, reason in numeric_rules:
        if key in data and (data[key] is None or data[key] < minimum):
            errors[key] = reason
            return errors

    gold = data.get(const.DATA_QUEST_GOLD_REWARD)
    if gold is not None and gold < const.MIN_REWARD:
        errors[const.DATA_QUEST_GOLD_REWARD] = "Gold reward must be at least 1"
        return errors

    # === 5. Difficulty ===
    if const.DATA_QUEST_DIFFICULTY_LEVEL in data:
        difficulty = data[const.DATA_QUEST_DIFFICULTY_LEVEL]
        if not (
            isinstance(difficulty, int)
            and const.MIN_DIFFICULTY_LEVEL <= difficulty <= const.MAX_DIFFICULTY_LEVEL
        ):
            errors[const.DATA_QUEST_DIFFICULTY_LEVEL] = (
                "Difficulty level must be between 1 and 5"
            )
            return errors

    # === 6. Enumerations ===
    option_rules = (
        (const.DATA_QUEST_TYPE, const.QUEST_TYPE_OPTIONS),
        (const.DATA_QUEST_PRIORITY, const.QUEST_PRIORITY_OPTIONS),
        (const.DATA_QUEST_ENERGY_REQUIRED, const.ENERGY_LEVEL_OPTIONS),
        (const.DATA_QUEST_ANXIETY_LEVEL, const.ANXIETY_LEVEL_OPTIONS),
    )
    for key, options in option_rules:
        if key in data and data[key] not in options:
            errors[key] = f"Invalid {key}: {data[key]}"
            return errors

    return errors


def build_quest(
    user_input: Mapping[str, Any],
    existing: QuestData | None = None,
    now: datetime | None = None,
) -> QuestData:
    """Build quest data for create or update operations.

    One function handles both create (existing=None) and update.

    Args:
        user_input: Data with DATA_* keys (may have missing fields)
        existing: None for create, existing QuestData for update
        now: Creation timestamp (defaults to the current UTC time)

    Returns:
        Complete QuestData TypedDict

    Raises:
        ActionValidationError: If any business rule fails

    Examples:
        # CREATE mode - generates UUID, applies const.DEFAULT_* for missing fields
        quest = build_quest({DATA_QUEST_TITLE: "Report", DATA_QUEST_XP_REWARD: 50})

        # UPDATE mode - preserves existing fields not in user_input
        quest = build_quest({DATA_QUEST_PRIORITY: "high"}, existing=old_quest)
    """
    _raise_first(validate_quest_data(user_input, is_update=existing is not None))
    get_field = _make_field_getter(user_input, existing)

    if existing is None:
        internal_id = str(uuid.uuid4())
        created_at = dt_to_iso(now or dt_now_utc())
    else:
        internal_id = existing[const.DATA_QUEST_ID]
        created_at = existing.get(const.DATA_QUEST_CREATED_AT) or dt_to_iso(
            now or dt_now_utc()
        )

    gold_reward = get_field(const.DATA_QUEST_GOLD_REWARD, None)

    quest: QuestData = {
        const.DATA_QUEST_ID: internal_id,
        const.DATA_QUEST_TITLE: _clean_text(get_field(const.DATA_QUEST_TITLE, "")),
        const.DATA_QUEST_DESCRIPTION: _clean_text(
            get_field(const.DATA_QUEST_DESCRIPTION, const.SENTINEL_EMPTY)
        ),
        const.DATA_QUEST_TYPE: get_field(const.DATA_QUEST_TYPE, const.QUEST_TYPE_SIDE),
        const.DATA_QUEST_CATEGORY: get_field(
            const.DATA_QUEST_CATEGORY, const.DEFAULT_QUEST_CATEGORY
        ),
        const.DATA_QUEST_PRIORITY: get_field(
            const.DATA_QUEST_PRIORITY, const.QUEST_PRIORITY_MEDIUM
        ),
        const.DATA_QUEST_STATUS: get_field(
            const.DATA_QUEST_STATUS, const.QUEST_STATUS_ACTIVE
        ),
        const.DATA_QUEST_XP_REWARD: int(get_field(const.DATA_QUEST_XP_REWARD, 0)),
        const.DATA_QUEST_GOLD_REWARD: (
            int(gold_reward) if gold_reward is not None else None
        ),
        const.DATA_QUEST_DIFFICULTY_LEVEL: int(
            get_field(const.DATA_QUEST_DIFFICULTY_LEVEL, const.MIN_DIFFICULTY_LEVEL)
        ),
        const.DATA_QUEST_ESTIMATED_TIME: int(
            get_field(const.DATA_QUEST_ESTIMATED_TIME, 30)
        ),
        const.DATA_QUEST_ENERGY_REQUIRED: get_field(
            const.DATA_QUEST_ENERGY_REQUIRED, const.DEFAULT_ENERGY_REQUIRED
        ),
        const.DATA_QUEST_ANXIETY_LEVEL: get_field(
            const.DATA_QUEST_ANXIETY_LEVEL, const.DEFAULT_ANXIETY_LEVEL
        ),
        const.DATA_QUEST_TAGS: _normalize_list_field(
            get_field(const.DATA_QUEST_TAGS, [])
        ),
        const.DATA_QUEST_CREATED_AT: created_at,
    }

    # Required on create; enforced after defaults so partial updates pass
    if quest[const.DATA_QUEST_XP_REWARD] < const.MIN_REWARD:
        raise ActionValidationError(
            "XP reward must be at least 1", field=const.DATA_QUEST_XP_REWARD
        )

    if existing is not None and const.DATA_QUEST_COMPLETED_AT in existing:
        quest[const.DATA_QUEST_COMPLETED_AT] = existing[const.DATA_QUEST_COMPLETED_AT]
    return quest


def build_quest_from_template(
    template: Mapping[str, Any],
    overrides: Mapping[str, Any] | None = None,
    now: datetime | None = None,
) -> QuestData:
    """Create an active quest from a template.

    The template id is not reused; gold stays computed unless ``overrides``
    sets it explicitly.
    """
    user_input = {
        key: value for key, value in template.items() if key != const.DATA_QUEST_ID
    }
    user_input.update(overrides or {})
    return build_quest(user_input, now=now)


# ==============================================================================
# PLAYER & METERS
# ==============================================================================


def build_player(
    settings: Mapping[str, Any] | None = None,
    name: str = const.DEFAULT_PLAYER_NAME,
) -> PlayerData:
    """Build a level-1 player."""
    settings = settings or {}
    return {
        const.DATA_PLAYER_NAME: name,
        const.DATA_PLAYER_LEVEL: 1,
        const.DATA_PLAYER_XP: 0,
        const.DATA_PLAYER_XP_TO_NEXT_LEVEL: int(
            settings.get(
                const.CONF_BASE_XP_TO_NEXT_LEVEL, const.DEFAULT_BASE_XP_TO_NEXT_LEVEL
            )
        ),
        const.DATA_PLAYER_GOLD: 0,
        const.DATA_PLAYER_SKILL_POINTS: 0,
        const.DATA_PLAYER_CURRENT_STREAK: 0,
        const.DATA_PLAYER_LONGEST_STREAK: 0,
        const.DATA_PLAYER_STREAK_GOAL: const.DEFAULT_STREAK_GOAL,
        const.DATA_PLAYER_STREAK_REWARD: const.DEFAULT_STREAK_REWARD,
        const.DATA_PLAYER_LAST_STREAK_REWARD_CLAIMED: 0,
        const.DATA_PLAYER_LAST_ACTIVE_DATE: None,
    }


def build_health_bar(
    settings: Mapping[str, Any] | None = None, now: datetime | None = None
) -> HealthBarData:
    """Build a full health bar."""
    maximum = int(
        (settings or {}).get(const.CONF_MAX_HEALTH, const.DEFAULT_MAX_HEALTH)
    )
    return {
        const.DATA_METER_CURRENT: maximum,
        const.DATA_METER_MAXIMUM: maximum,
        const.DATA_METER_LAST_UPDATED: dt_to_iso(now or dt_now_utc()),
    }


def build_energy_system(
    user_input: Mapping[str, Any] | None = None,
    existing: EnergySystemData | None = None,
    settings: Mapping[str, Any] | None = None,
    now: datetime | None = None,
) -> EnergySystemData:
    """Build (or replace fields of) the energy snapshot.

    Raises:
        ActionValidationError: If current energy exceeds the maximum
    """
    get_field = _make_field_getter(user_input or {}, existing)
    maximum = int(
        get_field(
            const.DATA_METER_MAXIMUM,
            (settings or {}).get(const.CONF_MAX_ENERGY, const.DEFAULT_MAX_ENERGY),
        )
    )
    current = int(get_field(const.DATA_METER_CURRENT, const.DEFAULT_ENERGY_CURRENT))
    if not 0 <= current <= maximum:
        raise ActionValidationError(
            f"Energy must be between 0 and {maximum}", field=const.DATA_METER_CURRENT
        )
    return {
        const.DATA_METER_CURRENT: current,
        const.DATA_METER_MAXIMUM: maximum,
        const.DATA_ENERGY_DAILY_RATING: int(
            get_field(const.DATA_ENERGY_DAILY_RATING, const.DEFAULT_ENERGY_DAILY_RATING)
        ),
        const.DATA_ENERGY_SLEEP_HOURS: float(
            get_field(const.DATA_ENERGY_SLEEP_HOURS, const.DEFAULT_ENERGY_SLEEP_HOURS)
        ),
        const.DATA_ENERGY_MOOD_LEVEL: int(
            get_field(const.DATA_ENERGY_MOOD_LEVEL, const.DEFAULT_ENERGY_MOOD_LEVEL)
        ),
        const.DATA_ENERGY_ANXIETY_LEVEL: int(
            get_field(
                const.DATA_ENERGY_ANXIETY_LEVEL, const.DEFAULT_ENERGY_ANXIETY_LEVEL
            )
        ),
        const.DATA_ENERGY_STRESS_LEVEL: int(
            get_field(const.DATA_ENERGY_STRESS_LEVEL, const.DEFAULT_ENERGY_STRESS_LEVEL)
        ),
        const.DATA_METER_LAST_UPDATED: dt_to_iso(now or dt_now_utc()),
    }


def build_statistics() -> StatisticsData:
    """Build zeroed lifetime counters."""
    return {
        const.DATA_STATS_TOTAL_XP_EARNED: 0,
        const.DATA_STATS_TOTAL_GOLD_EARNED: 0,
        const.DATA_STATS_TOTAL_QUESTS_COMPLETED: 0,
        const.DATA_STATS_HEALTH_ACTIVITIES_LOGGED: 0,
        const.DATA_STATS_QUICK_TASKS_COMPLETED: 0,
        const.DATA_STATS_BIG_TASKS_COMPLETED: 0,
        const.DATA_STATS_LAST_COMPLETED_DIFFICULTY: 0,
        const.DATA_STATS_REPEATABLE_COMPLETIONS: 0,
    }


# ==============================================================================
# REPEATABLE ACTIONS
# ==============================================================================


def validate_repeatable_action_data(
    data: Mapping[str, Any],
    *,
    is_update: bool = False,
) -> dict[str, str]:
    """Validate repeatable action business rules.

    Validation Rules:
        1. Title not empty
        2. target_count >= 1
        3. Resets daily or weekly, never both and never neither
        4. Rewards >= 0
    """
    errors: dict[str, str] = {}

    if (const.DATA_REPEATABLE_TITLE in data or not is_update) and not _clean_text(
        data.get(const.DATA_REPEATABLE_TITLE)
    ):
        errors[const.DATA_REPEATABLE_TITLE] = "Action title is required"
        return errors

    target = data.get(const.DATA_REPEATABLE_TARGET_COUNT)
    if target is not None and target < 1:
        errors[const.DATA_REPEATABLE_TARGET_COUNT] = "Target count must be at least 1"
        return errors

    if data.get(const.DATA_REPEATABLE_IS_DAILY) and data.get(
        const.DATA_REPEATABLE_IS_WEEKLY
    ):
        errors[const.DATA_REPEATABLE_IS_WEEKLY] = (
            "An action resets either daily or weekly, not both"
        )
        return errors

    if not is_update or (
        const.DATA_REPEATABLE_IS_DAILY in data
        and const.DATA_REPEATABLE_IS_WEEKLY in data
    ):
        is_weekly = bool(data.get(const.DATA_REPEATABLE_IS_WEEKLY, False))
        is_daily = bool(data.get(const.DATA_REPEATABLE_IS_DAILY, not is_weekly))
        if not (is_daily or is_weekly):
            errors[const.DATA_REPEATABLE_IS_DAILY] = (
                "An action must reset daily or weekly"
            )
            return errors

    for key in (
        const.DATA_REPEATABLE_XP_PER_COMPLETION,
        const.DATA_REPEATABLE_GOLD_PER_COMPLETION,
    ):
        value = data.get(key)
        if value is not None and value < 0:
            errors[key] = f"{key} cannot be negative"
            return errors

    return errors


def build_repeatable_action(
    user_input: Mapping[str, Any],
    existing: RepeatableActionData | None = None,
    now: datetime | None = None,
) -> RepeatableActionData:
    """Build repeatable action data for create or update operations.

    A given internal_id (default actions) is kept; otherwise a UUID is
    generated. New actions start a fresh period anchored at ``now``.

    Raises:
        ActionValidationError: If any business rule fails
    """
    _raise_first(
        validate_repeatable_action_data(user_input, is_update=existing is not None)
    )
    get_field = _make_field_getter(user_input, existing)
    now_iso = dt_to_iso(now or dt_now_utc())

    is_weekly = bool(get_field(const.DATA_REPEATABLE_IS_WEEKLY, False))
    is_daily = bool(get_field(const.DATA_REPEATABLE_IS_DAILY, not is_weekly))

    return {
        const.DATA_REPEATABLE_ID: str(
            get_field(const.DATA_REPEATABLE_ID, None) or uuid.uuid4()
        ),
        const.DATA_REPEATABLE_TITLE: _clean_text(
            get_field(const.DATA_REPEATABLE_TITLE, "")
        ),
        const.DATA_REPEATABLE_DESCRIPTION: _clean_text(
            get_field(const.DATA_REPEATABLE_DESCRIPTION, const.SENTINEL_EMPTY)
        ),
        const.DATA_REPEATABLE_ICON: str(
            get_field(const.DATA_REPEATABLE_ICON, "mdi:repeat")
        ),
        const.DATA_REPEATABLE_CATEGORY: get_field(
            const.DATA_REPEATABLE_CATEGORY, const.DEFAULT_QUEST_CATEGORY
        ),
        const.DATA_REPEATABLE_TARGET_COUNT: int(
            get_field(
                const.DATA_REPEATABLE_TARGET_COUNT,
                const.DEFAULT_REPEATABLE_TARGET_COUNT,
            )
        ),
        const.DATA_REPEATABLE_CURRENT_COUNT: int(
            get_field(const.DATA_REPEATABLE_CURRENT_COUNT, 0)
        ),
        const.DATA_REPEATABLE_IS_DAILY: is_daily,
        const.DATA_REPEATABLE_IS_WEEKLY: is_weekly,
        const.DATA_REPEATABLE_RESET_DATE: get_field(
            const.DATA_REPEATABLE_RESET_DATE, now_iso
        ),
        const.DATA_REPEATABLE_LAST_COMPLETED_DATE: get_field(
            const.DATA_REPEATABLE_LAST_COMPLETED_DATE, None
        ),
        const.DATA_REPEATABLE_XP_PER_COMPLETION: int(
            get_field(
                const.DATA_REPEATABLE_XP_PER_COMPLETION,
                const.DEFAULT_REPEATABLE_XP_PER_COMPLETION,
            )
        ),
        const.DATA_REPEATABLE_GOLD_PER_COMPLETION: int(
            get_field(
                const.DATA_REPEATABLE_GOLD_PER_COMPLETION,
                const.DEFAULT_REPEATABLE_GOLD_PER_COMPLETION,
            )
        ),
    }


# ==============================================================================
# STREAK CHALLENGES
# ==============================================================================


def validate_streak_challenge_data(data: Mapping[str, Any]) -> dict[str, str]:
    """Validate streak challenge business rules.

    Validation Rules:
        1. Name not empty
        2. Difficulty is a known option
        3. Milestones have days >= 1 and non-negative rewards
    """
    errors: dict[str, str] = {}

    if not _clean_text(data.get(const.DATA_CHALLENGE_NAME)):
        errors[const.DATA_CHALLENGE_NAME] = "Challenge name is required"
        return errors

    difficulty = data.get(const.DATA_CHALLENGE_DIFFICULTY)
    if difficulty is not None and difficulty not in const.CHALLENGE_DIFFICULTY_OPTIONS:
        errors[const.DATA_CHALLENGE_DIFFICULTY] = f"Invalid difficulty: {difficulty}"
        return errors

    for reward in data.get(const.DATA_CHALLENGE_REWARDS) or []:
        if reward.get(const.DATA_MILESTONE_DAYS, 0) < 1:
            errors[const.DATA_CHALLENGE_REWARDS] = "Milestone days must be at least 1"
            return errors
        if (
            reward.get(const.DATA_MILESTONE_XP_REWARD, 0) < 0
            or reward.get(const.DATA_MILESTONE_GOLD_REWARD, 0) < 0
        ):
            errors[const.DATA_CHALLENGE_REWARDS] = (
                "Milestone rewards cannot be negative"
            )
            return errors

    return errors


def build_streak_challenge(user_input: Mapping[str, Any]) -> StreakChallengeData:
    """Build an inactive streak challenge.

    Milestones are stored sorted ascending by days_milestone.

    Raises:
        ActionValidationError: If any business rule fails
    """
    _raise_first(validate_streak_challenge_data(user_input))
    rewards = sorted(
        (dict(reward) for reward in user_input.get(const.DATA_CHALLENGE_REWARDS) or []),
        key=lambda reward: reward[const.DATA_MILESTONE_DAYS],
    )
    return {
        const.DATA_CHALLENGE_ID: str(
            user_input.get(const.DATA_CHALLENGE_ID) or uuid.uuid4()
        ),
        const.DATA_CHALLENGE_NAME: _clean_text(user_input[const.DATA_CHALLENGE_NAME]),
        const.DATA_CHALLENGE_DESCRIPTION: _clean_text(
            user_input.get(const.DATA_CHALLENGE_DESCRIPTION, const.SENTINEL_EMPTY)
        ),
        const.DATA_CHALLENGE_CATEGORY: _clean_text(
            user_input.get(const.DATA_CHALLENGE_CATEGORY, const.SENTINEL_EMPTY)
        ),
        const.DATA_CHALLENGE_DIFFICULTY: user_input.get(
            const.DATA_CHALLENGE_DIFFICULTY, const.DEFAULT_CHALLENGE_DIFFICULTY
        ),
        const.DATA_CHALLENGE_CURRENT_STREAK: 0,
        const.DATA_CHALLENGE_LONGEST_STREAK: 0,
        const.DATA_CHALLENGE_IS_ACTIVE: False,
        const.DATA_CHALLENGE_START_DATE: None,
        const.DATA_CHALLENGE_CHECK_INS: [],
        const.DATA_CHALLENGE_REWARDS: rewards,  # type: ignore[typeddict-item]
    }


# ==============================================================================
# JOURNALS
# ==============================================================================


def build_journal(
    user_input: Mapping[str, Any], now: datetime | None = None
) -> JournalData:
    """Build an empty journal.

    Raises:
        ActionValidationError: If the name is empty or the type unknown
    """
    name = _clean_text(user_input.get(const.DATA_JOURNAL_NAME))
    if not name:
        raise ActionValidationError(
            "Journal name is required", field=const.DATA_JOURNAL_NAME
        )
    journal_type = user_input.get(const.DATA_JOURNAL_TYPE)
    if journal_type not in const.JOURNAL_TYPE_OPTIONS:
        raise ActionValidationError(
            f"Invalid journal type: {journal_type}", field=const.DATA_JOURNAL_TYPE
        )
    return {
        const.DATA_JOURNAL_ID: str(
            user_input.get(const.DATA_JOURNAL_ID) or uuid.uuid4()
        ),
        const.DATA_JOURNAL_NAME: name,
        const.DATA_JOURNAL_TYPE: journal_type,
        const.DATA_JOURNAL_DESCRIPTION: _clean_text(
            user_input.get(const.DATA_JOURNAL_DESCRIPTION, const.SENTINEL_EMPTY)
        ),
        const.DATA_JOURNAL_ENTRIES: [],
        const.DATA_JOURNAL_CREATED_AT: dt_to_iso(now or dt_now_utc()),
    }


def build_journal_entry(
    journal_type: str,
    user_input: Mapping[str, Any],
    now: datetime | None = None,
) -> JournalEntryData:
    """Build an immutable journal entry.

    ``mood`` is only kept for mood-tracking journals (gratitude, reflection)
    and ``amount`` only for savings journals.

    Raises:
        ActionValidationError: On empty content or out-of-range mood/amount
    """
    content = _clean_text(user_input.get(const.DATA_ENTRY_CONTENT))
    if not content:
        raise ActionValidationError(
            "Entry content is required", field=const.DATA_ENTRY_CONTENT
        )

    mood = user_input.get(const.DATA_ENTRY_MOOD)
    if journal_type not in const.JOURNAL_MOOD_TYPES:
        mood = None
    elif mood is not None and not const.MIN_MOOD <= mood <= const.MAX_MOOD:
        raise ActionValidationError(
            "Mood must be between 1 and 10", field=const.DATA_ENTRY_MOOD
        )

    amount = user_input.get(const.DATA_ENTRY_AMOUNT)
    if journal_type != const.JOURNAL_TYPE_SAVINGS:
        amount = None
    elif amount is not None and amount < 0:
        raise ActionValidationError(
            "Amount cannot be negative", field=const.DATA_ENTRY_AMOUNT
        )

    return {
        const.DATA_ENTRY_ID: str(uuid.uuid4()),
        const.DATA_ENTRY_TITLE: _clean_text(user_input.get(const.DATA_ENTRY_TITLE)),
        const.DATA_ENTRY_CONTENT: content,
        const.DATA_ENTRY_DATE: dt_to_iso(now or dt_now_utc()),
        const.DATA_ENTRY_MOOD: mood,
        const.DATA_ENTRY_AMOUNT: float(amount) if amount is not None else None,
        const.DATA_ENTRY_TAGS: _normalize_list_field(
            user_input.get(const.DATA_ENTRY_TAGS)
        ),
    }


# ==============================================================================
# GAME STATE
# ==============================================================================


def build_initial_state(
    settings: Mapping[str, Any] | None = None,
    now: datetime | None = None,
    player_name: str = const.DEFAULT_PLAYER_NAME,
) -> GameState:
    """Build a brand-new game state with the shipped defaults seeded.

    Args:
        settings: Optional CONF_* mapping (xp curve, meter maximums)
        now: Timestamp used for anchors and created_at fields
        player_name: Display name of the player

    Returns:
        Complete GameState ready for GameManager.dispatch
    """
    now = now or dt_now_utc()
    repeatable_actions = [
        build_repeatable_action(template, now=now)
        for template in DEFAULT_REPEATABLE_ACTIONS
    ]
    challenges = [
        build_streak_challenge(template) for template in DEFAULT_STREAK_CHALLENGES
    ]
    return {
        const.DATA_PLAYER: build_player(settings, player_name),
        const.DATA_HEALTH_BAR: build_health_bar(settings, now),
        const.DATA_ENERGY_SYSTEM: build_energy_system(settings=settings, now=now),
        const.DATA_QUESTS: {},
        const.DATA_REPEATABLE_ACTIONS: {
            action[const.DATA_REPEATABLE_ID]: action for action in repeatable_actions
        },
        const.DATA_STREAK_CHALLENGES: {
            challenge[const.DATA_CHALLENGE_ID]: challenge for challenge in challenges
        },
        const.DATA_JOURNALS: {},
        const.DATA_STATISTICS: build_statistics(),
        const.DATA_UNLOCKED_SKILLS: [],
        const.DATA_UNLOCKED_ACHIEVEMENTS: [],
        const.DATA_BONUS_XP_ACTIVE: None,
        const.DATA_RECENT_ACTIVITY: [],
    }
