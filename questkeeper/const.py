# File: const.py
"""Constants for the QuestKeeper progression engine.

This file centralizes state keys, enumerations, defaults, action names and
result codes for consistency across engines, managers and data tables.
"""

import logging

# ------------------------------------------------------------------------------------------------
# General
# ------------------------------------------------------------------------------------------------
# Logger
LOGGER = logging.getLogger(__package__)

# Sentinel values
SENTINEL_EMPTY = ""

# ------------------------------------------------------------------------------------------------
# Settings Keys & Defaults
# ------------------------------------------------------------------------------------------------
CONF_TIMEZONE = "timezone"
CONF_BASE_XP_TO_NEXT_LEVEL = "base_xp_to_next_level"
CONF_XP_CURVE_MULTIPLIER = "xp_curve_multiplier"
CONF_SKILL_POINTS_PER_LEVEL = "skill_points_per_level"
CONF_MAX_HEALTH = "max_health"
CONF_MAX_ENERGY = "max_energy"
CONF_WEEKLY_RESET_MODE = "weekly_reset_mode"
CONF_WEEK_START = "week_start"
CONF_MAX_ACTIVITY_LOG_ENTRIES = "max_activity_log_entries"

DEFAULT_TIMEZONE = "UTC"
DEFAULT_BASE_XP_TO_NEXT_LEVEL = 100
DEFAULT_XP_CURVE_MULTIPLIER = 1.2
DEFAULT_SKILL_POINTS_PER_LEVEL = 1
DEFAULT_MAX_HEALTH = 100
DEFAULT_MAX_ENERGY = 100
DEFAULT_MAX_ACTIVITY_LOG_ENTRIES = 50

WEEKLY_RESET_MODE_ELAPSED = "elapsed"
WEEKLY_RESET_MODE_CALENDAR = "calendar"
WEEKLY_RESET_MODE_OPTIONS = [WEEKLY_RESET_MODE_ELAPSED, WEEKLY_RESET_MODE_CALENDAR]
DEFAULT_WEEKLY_RESET_MODE = WEEKLY_RESET_MODE_ELAPSED

WEEKDAY_OPTIONS = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]
DEFAULT_WEEK_START = "monday"

# ------------------------------------------------------------------------------------------------
# Game State Keys
# ------------------------------------------------------------------------------------------------
DATA_PLAYER = "player"
DATA_HEALTH_BAR = "health_bar"
DATA_ENERGY_SYSTEM = "energy_system"
DATA_QUESTS = "quests"
DATA_REPEATABLE_ACTIONS = "repeatable_actions"
DATA_STREAK_CHALLENGES = "streak_challenges"
DATA_JOURNALS = "journals"
DATA_STATISTICS = "statistics"
DATA_UNLOCKED_SKILLS = "unlocked_skills"
DATA_UNLOCKED_ACHIEVEMENTS = "unlocked_achievements"
DATA_BONUS_XP_ACTIVE = "bonus_xp_active"
DATA_RECENT_ACTIVITY = "recent_activity"

# Player
DATA_PLAYER_NAME = "name"
DATA_PLAYER_LEVEL = "level"
DATA_PLAYER_XP = "xp"
DATA_PLAYER_XP_TO_NEXT_LEVEL = "xp_to_next_level"
DATA_PLAYER_GOLD = "gold"
DATA_PLAYER_SKILL_POINTS = "skill_points"
DATA_PLAYER_CURRENT_STREAK = "current_streak"
DATA_PLAYER_LONGEST_STREAK = "longest_streak"
DATA_PLAYER_STREAK_GOAL = "streak_goal"
DATA_PLAYER_STREAK_REWARD = "streak_reward"
DATA_PLAYER_LAST_STREAK_REWARD_CLAIMED = "last_streak_reward_claimed"
DATA_PLAYER_LAST_ACTIVE_DATE = "last_active_date"

DEFAULT_PLAYER_NAME = "Hero"
DEFAULT_STREAK_GOAL = 7
DEFAULT_STREAK_REWARD = 50

# Health bar / energy system
DATA_METER_CURRENT = "current"
DATA_METER_MAXIMUM = "maximum"
DATA_METER_LAST_UPDATED = "last_updated"
DATA_ENERGY_DAILY_RATING = "daily_rating"
DATA_ENERGY_SLEEP_HOURS = "sleep_hours"
DATA_ENERGY_MOOD_LEVEL = "mood_level"
DATA_ENERGY_ANXIETY_LEVEL = "anxiety_level"
DATA_ENERGY_STRESS_LEVEL = "stress_level"

DEFAULT_ENERGY_CURRENT = 80
DEFAULT_ENERGY_DAILY_RATING = 4
DEFAULT_ENERGY_SLEEP_HOURS = 7
DEFAULT_ENERGY_MOOD_LEVEL = 7
DEFAULT_ENERGY_ANXIETY_LEVEL = 3
DEFAULT_ENERGY_STRESS_LEVEL = 4

# Statistics
DATA_STATS_TOTAL_XP_EARNED = "total_xp_earned"
DATA_STATS_TOTAL_GOLD_EARNED = "total_gold_earned"
DATA_STATS_TOTAL_QUESTS_COMPLETED = "total_quests_completed"
DATA_STATS_HEALTH_ACTIVITIES_LOGGED = "health_activities_logged"
DATA_STATS_QUICK_TASKS_COMPLETED = "quick_tasks_completed"
DATA_STATS_BIG_TASKS_COMPLETED = "big_tasks_completed"
DATA_STATS_LAST_COMPLETED_DIFFICULTY = "last_completed_difficulty"
DATA_STATS_REPEATABLE_COMPLETIONS = "repeatable_completions"

# Bonus XP window
DATA_BONUS_XP_MULTIPLIER = "multiplier"
DATA_BONUS_XP_EXPIRES_AT = "expires_at"
DATA_BONUS_XP_REASON = "reason"

# Activity log
DATA_ACTIVITY_ID = "internal_id"
DATA_ACTIVITY_TYPE = "type"
DATA_ACTIVITY_DESCRIPTION = "description"
DATA_ACTIVITY_TIMESTAMP = "timestamp"

ACTIVITY_TYPE_QUEST_COMPLETED = "quest_completed"
ACTIVITY_TYPE_HEALTH_LOGGED = "health_logged"
ACTIVITY_TYPE_LEVEL_UP = "level_up"
ACTIVITY_TYPE_ACHIEVEMENT_UNLOCKED = "achievement_unlocked"
ACTIVITY_TYPE_SKILL_UNLOCKED = "skill_unlocked"
ACTIVITY_TYPE_GOLD = "gold"
ACTIVITY_TYPE_XP = "xp"
ACTIVITY_TYPE_REPEATABLE = "repeatable_action"
ACTIVITY_TYPE_CHALLENGE = "streak_challenge"
ACTIVITY_TYPE_JOURNAL = "journal"

# ------------------------------------------------------------------------------------------------
# Quests
# ------------------------------------------------------------------------------------------------
DATA_QUEST_ID = "internal_id"
DATA_QUEST_TITLE = "title"
DATA_QUEST_DESCRIPTION = "description"
DATA_QUEST_TYPE = "type"
DATA_QUEST_CATEGORY = "category"
DATA_QUEST_PRIORITY = "priority"
DATA_QUEST_STATUS = "status"
DATA_QUEST_XP_REWARD = "xp_reward"
DATA_QUEST_GOLD_REWARD = "gold_reward"
DATA_QUEST_DIFFICULTY_LEVEL = "difficulty_level"
DATA_QUEST_ESTIMATED_TIME = "estimated_time"
DATA_QUEST_ENERGY_REQUIRED = "energy_required"
DATA_QUEST_ANXIETY_LEVEL = "anxiety_level"
DATA_QUEST_TAGS = "tags"
DATA_QUEST_CREATED_AT = "created_at"
DATA_QUEST_COMPLETED_AT = "completed_at"

QUEST_TYPE_MAIN = "main"
QUEST_TYPE_SIDE = "side"
QUEST_TYPE_DAILY = "daily"
QUEST_TYPE_WEEKLY = "weekly"
QUEST_TYPE_OPTIONS = [
    QUEST_TYPE_MAIN,
    QUEST_TYPE_SIDE,
    QUEST_TYPE_DAILY,
    QUEST_TYPE_WEEKLY,
]

QUEST_PRIORITY_LOW = "low"
QUEST_PRIORITY_MEDIUM = "medium"
QUEST_PRIORITY_HIGH = "high"
QUEST_PRIORITY_URGENT = "urgent"
QUEST_PRIORITY_OPTIONS = [
    QUEST_PRIORITY_LOW,
    QUEST_PRIORITY_MEDIUM,
    QUEST_PRIORITY_HIGH,
    QUEST_PRIORITY_URGENT,
]

QUEST_STATUS_ACTIVE = "active"
QUEST_STATUS_COMPLETED = "completed"

DEFAULT_QUEST_CATEGORY = "personal"

ENERGY_LEVEL_OPTIONS = ["low", "medium", "high"]
DEFAULT_ENERGY_REQUIRED = "medium"

ANXIETY_LEVEL_COMFORTABLE = "comfortable"
ANXIETY_LEVEL_MILD = "mild"
ANXIETY_LEVEL_CHALLENGING = "challenging"
ANXIETY_LEVEL_DAUNTING = "daunting"
ANXIETY_LEVEL_OPTIONS = [
    ANXIETY_LEVEL_COMFORTABLE,
    ANXIETY_LEVEL_MILD,
    ANXIETY_LEVEL_CHALLENGING,
    ANXIETY_LEVEL_DAUNTING,
]
DEFAULT_ANXIETY_LEVEL = ANXIETY_LEVEL_COMFORTABLE

MIN_DIFFICULTY_LEVEL = 1
MAX_DIFFICULTY_LEVEL = 5
MIN_REWARD = 1
MIN_ESTIMATED_TIME = 1

# Gold reward formula
GOLD_BASE = 5
GOLD_TYPE_MULTIPLIERS: dict[str, float] = {
    QUEST_TYPE_MAIN: 5,
    QUEST_TYPE_SIDE: 3,
    QUEST_TYPE_DAILY: 2,
    QUEST_TYPE_WEEKLY: 4,
}
GOLD_DIFFICULTY_FACTOR = 0.5
GOLD_PRIORITY_MULTIPLIERS: dict[str, float] = {
    QUEST_PRIORITY_URGENT: 2.0,
    QUEST_PRIORITY_HIGH: 1.5,
    QUEST_PRIORITY_MEDIUM: 1.25,
    QUEST_PRIORITY_LOW: 1.0,
}

# Quest classification thresholds
QUICK_TASK_MAX_MINUTES = 15
BIG_TASK_DIFFICULTY = 5

# ------------------------------------------------------------------------------------------------
# Skills
# ------------------------------------------------------------------------------------------------
DATA_SKILL_ID = "internal_id"
DATA_SKILL_NAME = "name"
DATA_SKILL_DESCRIPTION = "description"
DATA_SKILL_ICON = "icon"
DATA_SKILL_COST = "cost"
DATA_SKILL_EFFECT = "effect"

SKILL_ADAPTIVE_FOCUS = "adaptive_focus"
SKILL_BOREDOM_DETECTOR = "boredom_detector"
SKILL_ANTI_PROCRASTINATION_AURA = "anti_procrastination_aura"
SKILL_CREATIVE_RECHARGE = "creative_recharge"

ADAPTIVE_FOCUS_MULTIPLIER = 1.2
ANTI_PROCRASTINATION_XP_RATIO = 0.10
ANTI_PROCRASTINATION_HEALTH_BONUS = 10
CREATIVE_RECHARGE_XP_BONUS = 10
CREATIVE_RECHARGE_HEALTH_BONUS = 5
CREATIVE_RECHARGE_CATEGORY = "creative"
CREATIVE_RECHARGE_ACTIVITY_IDS = frozenset({"learning"})

# Daily streak XP multipliers as (minimum streak, multiplier), highest first
STREAK_XP_MULTIPLIERS: tuple[tuple[int, int], ...] = ((7, 3), (3, 2))

# ------------------------------------------------------------------------------------------------
# Health Activities
# ------------------------------------------------------------------------------------------------
DATA_HEALTH_ACTIVITY_ID = "internal_id"
DATA_HEALTH_ACTIVITY_NAME = "name"
DATA_HEALTH_ACTIVITY_HEALTH_CHANGE = "health_change"
DATA_HEALTH_ACTIVITY_XP_CHANGE = "xp_change"
DATA_HEALTH_ACTIVITY_CATEGORY = "category"
DATA_HEALTH_ACTIVITY_DURATION = "duration"
DATA_HEALTH_ACTIVITY_DESCRIPTION = "description"
DATA_HEALTH_ACTIVITY_ICON = "icon"
DATA_HEALTH_ACTIVITY_IS_POSITIVE = "is_positive"

# ------------------------------------------------------------------------------------------------
# Achievements
# ------------------------------------------------------------------------------------------------
DATA_ACHIEVEMENT_ID = "internal_id"
DATA_ACHIEVEMENT_NAME = "name"
DATA_ACHIEVEMENT_DESCRIPTION = "description"
DATA_ACHIEVEMENT_ICON = "icon"
DATA_ACHIEVEMENT_CATEGORY = "category"
DATA_ACHIEVEMENT_CRITERION = "criterion"
DATA_ACHIEVEMENT_CRITERION_TYPE = "type"
DATA_ACHIEVEMENT_CRITERION_THRESHOLD = "threshold"

ACHIEVEMENT_CRITERION_QUESTS_COMPLETED = "quests_completed"
ACHIEVEMENT_CRITERION_PLAYER_LEVEL = "player_level"
ACHIEVEMENT_CRITERION_LONGEST_STREAK = "longest_streak"
ACHIEVEMENT_CRITERION_HEALTH_ACTIVITIES = "health_activities_logged"
ACHIEVEMENT_CRITERION_QUICK_TASKS = "quick_tasks_completed"
ACHIEVEMENT_CRITERION_BIG_TASKS = "big_tasks_completed"
ACHIEVEMENT_CRITERION_TOTAL_XP = "total_xp_earned"
ACHIEVEMENT_CRITERION_SKILLS_UNLOCKED = "skills_unlocked"
ACHIEVEMENT_CRITERION_GOLD = "gold"

ACHIEVEMENT_CATEGORY_MILESTONE = "milestone"
ACHIEVEMENT_CATEGORY_CONSISTENCY = "consistency"
ACHIEVEMENT_CATEGORY_WELLNESS = "wellness"
ACHIEVEMENT_CATEGORY_GAMER = "gamer"

# ------------------------------------------------------------------------------------------------
# Repeatable Actions
# ------------------------------------------------------------------------------------------------
DATA_REPEATABLE_ID = "internal_id"
DATA_REPEATABLE_TITLE = "title"
DATA_REPEATABLE_DESCRIPTION = "description"
DATA_REPEATABLE_ICON = "icon"
DATA_REPEATABLE_CATEGORY = "category"
DATA_REPEATABLE_TARGET_COUNT = "target_count"
DATA_REPEATABLE_CURRENT_COUNT = "current_count"
DATA_REPEATABLE_IS_DAILY = "is_daily"
DATA_REPEATABLE_IS_WEEKLY = "is_weekly"
DATA_REPEATABLE_RESET_DATE = "reset_date"
DATA_REPEATABLE_LAST_COMPLETED_DATE = "last_completed_date"
DATA_REPEATABLE_XP_PER_COMPLETION = "xp_per_completion"
DATA_REPEATABLE_GOLD_PER_COMPLETION = "gold_per_completion"

DEFAULT_REPEATABLE_TARGET_COUNT = 1
DEFAULT_REPEATABLE_XP_PER_COMPLETION = 10
DEFAULT_REPEATABLE_GOLD_PER_COMPLETION = 5

WEEKLY_PERIOD_DAYS = 7

# ------------------------------------------------------------------------------------------------
# Streak Challenges
# ------------------------------------------------------------------------------------------------
DATA_CHALLENGE_ID = "internal_id"
DATA_CHALLENGE_NAME = "name"
DATA_CHALLENGE_DESCRIPTION = "description"
DATA_CHALLENGE_CATEGORY = "category"
DATA_CHALLENGE_DIFFICULTY = "difficulty"
DATA_CHALLENGE_CURRENT_STREAK = "current_streak"
DATA_CHALLENGE_LONGEST_STREAK = "longest_streak"
DATA_CHALLENGE_IS_ACTIVE = "is_active"
DATA_CHALLENGE_START_DATE = "start_date"
DATA_CHALLENGE_CHECK_INS = "daily_check_ins"
DATA_CHALLENGE_REWARDS = "rewards"

DATA_CHECK_IN_DATE = "date"
DATA_CHECK_IN_SUCCESS = "success"
DATA_CHECK_IN_NOTES = "notes"

DATA_MILESTONE_DAYS = "days_milestone"
DATA_MILESTONE_XP_REWARD = "xp_reward"
DATA_MILESTONE_GOLD_REWARD = "gold_reward"
DATA_MILESTONE_TITLE = "title"

CHALLENGE_DIFFICULTY_OPTIONS = ["easy", "medium", "hard", "extreme"]
DEFAULT_CHALLENGE_DIFFICULTY = "medium"

# ------------------------------------------------------------------------------------------------
# Journals
# ------------------------------------------------------------------------------------------------
DATA_JOURNAL_ID = "internal_id"
DATA_JOURNAL_NAME = "name"
DATA_JOURNAL_TYPE = "type"
DATA_JOURNAL_DESCRIPTION = "description"
DATA_JOURNAL_ENTRIES = "entries"
DATA_JOURNAL_CREATED_AT = "created_at"

DATA_ENTRY_ID = "internal_id"
DATA_ENTRY_TITLE = "title"
DATA_ENTRY_CONTENT = "content"
DATA_ENTRY_DATE = "date"
DATA_ENTRY_MOOD = "mood"
DATA_ENTRY_AMOUNT = "amount"
DATA_ENTRY_TAGS = "tags"

JOURNAL_TYPE_GRATITUDE = "gratitude"
JOURNAL_TYPE_GOOD_DEEDS = "good_deeds"
JOURNAL_TYPE_SAVINGS = "savings"
JOURNAL_TYPE_IDEAS = "ideas"
JOURNAL_TYPE_REFLECTION = "reflection"
JOURNAL_TYPE_GOALS = "goals"
JOURNAL_TYPE_OPTIONS = [
    JOURNAL_TYPE_GRATITUDE,
    JOURNAL_TYPE_GOOD_DEEDS,
    JOURNAL_TYPE_SAVINGS,
    JOURNAL_TYPE_IDEAS,
    JOURNAL_TYPE_REFLECTION,
    JOURNAL_TYPE_GOALS,
]
JOURNAL_MOOD_TYPES = frozenset({JOURNAL_TYPE_GRATITUDE, JOURNAL_TYPE_REFLECTION})

MIN_MOOD = 1
MAX_MOOD = 10

ANALYTICS_WEEK_DAYS = 7

# ------------------------------------------------------------------------------------------------
# Actions (dispatch vocabulary)
# ------------------------------------------------------------------------------------------------
ACTION_ADD_QUEST = "add_quest"
ACTION_EDIT_QUEST = "edit_quest"
ACTION_DELETE_QUEST = "delete_quest"
ACTION_COMPLETE_QUEST = "complete_quest"
ACTION_LOG_HEALTH_ACTIVITY = "log_health_activity"
ACTION_GET_PLAYER_STATUS = "get_player_status"
ACTION_ADD_XP = "add_xp"
ACTION_ADD_GOLD = "add_gold"
ACTION_SPEND_GOLD = "spend_gold"
ACTION_UPDATE_STREAK = "update_streak"
ACTION_CLAIM_STREAK_REWARD = "claim_streak_reward"
ACTION_ACTIVATE_BONUS_XP = "activate_bonus_xp"
ACTION_UPDATE_ENERGY_SYSTEM = "update_energy_system"
ACTION_UNLOCK_SKILL = "unlock_skill"
ACTION_UNLOCK_ACHIEVEMENT = "unlock_achievement"
ACTION_ADD_REPEATABLE_ACTION = "add_repeatable_action"
ACTION_INCREMENT_REPEATABLE_ACTION = "increment_repeatable_action"
ACTION_RESET_REPEATABLE_ACTION = "reset_repeatable_action"
ACTION_REMOVE_REPEATABLE_ACTION = "remove_repeatable_action"
ACTION_ADD_STREAK_CHALLENGE = "add_streak_challenge"
ACTION_START_STREAK_CHALLENGE = "start_streak_challenge"
ACTION_STOP_STREAK_CHALLENGE = "stop_streak_challenge"
ACTION_CHECK_IN_STREAK_CHALLENGE = "check_in_streak_challenge"
ACTION_INITIALIZE_JOURNALS = "initialize_journals"
ACTION_ADD_JOURNAL_ENTRY = "add_journal_entry"

# Payload fields not covered by entity DATA_* keys
FIELD_QUEST_ID = "quest_id"
FIELD_TEMPLATE_ID = "template_id"
FIELD_SKILL_ID = "skill_id"
FIELD_ACHIEVEMENT_ID = "achievement_id"
FIELD_ACTION_ID = "action_id"
FIELD_CHALLENGE_ID = "challenge_id"
FIELD_JOURNAL_ID = "journal_id"
FIELD_ACTIVITY_ID = "activity_id"
FIELD_AMOUNT = "amount"
FIELD_REASON = "reason"
FIELD_MULTIPLIER = "multiplier"
FIELD_DURATION = "duration"
FIELD_STREAK_COUNT = "streak_count"
FIELD_SUCCESS = "success"
FIELD_NOTES = "notes"

# ------------------------------------------------------------------------------------------------
# Action Results
# ------------------------------------------------------------------------------------------------
RESULT_APPLIED = "applied"
RESULT_REJECTED = "rejected"
RESULT_NOOP = "noop"
RESULT_INSUFFICIENT = "insufficient"
RESULT_UNKNOWN_ENTITY = "unknown_entity"

CONFLICT_ALREADY_COMPLETED = "already_completed"
CONFLICT_ALREADY_CHECKED_IN = "already_checked_in"
CONFLICT_TARGET_REACHED = "target_reached"
CONFLICT_ALREADY_UNLOCKED = "already_unlocked"
CONFLICT_CHALLENGE_INACTIVE = "challenge_inactive"
CONFLICT_ALREADY_ACTIVE = "already_active"
CONFLICT_REWARD_NOT_AVAILABLE = "reward_not_available"
CONFLICT_ALREADY_INITIALIZED = "already_initialized"

ERROR_VALIDATION = "validation"
ERROR_INSUFFICIENT_SKILL_POINTS = "insufficient_skill_points"
ERROR_INSUFFICIENT_GOLD = "insufficient_gold"
ERROR_UNKNOWN_ENTITY = "unknown_entity"

ENTITY_QUEST = "quest"
ENTITY_QUEST_TEMPLATE = "quest_template"
ENTITY_SKILL = "skill"
ENTITY_ACHIEVEMENT = "achievement"
ENTITY_REPEATABLE_ACTION = "repeatable_action"
ENTITY_STREAK_CHALLENGE = "streak_challenge"
ENTITY_JOURNAL = "journal"
ENTITY_HEALTH_ACTIVITY = "health_activity"
