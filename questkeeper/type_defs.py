"""Type definitions for QuestKeeper data structures.

State is stored as plain dicts keyed by the ``const.DATA_*`` strings so the
persistence collaborator can serialize it to JSON without custom encoders.
The TypedDicts below describe those dicts for static analysis only.

1. **TypedDict for STATIC structures** (fixed keys known at design time):
   player, quests, repeatable actions, streak challenges, journals.

2. **dict[str, Any] for DYNAMIC structures** (keys determined at runtime):
   evaluation contexts and definition tables supplied by callers.

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime defaults (``.get()``) remain
in the engines and managers.

IMPORTANT: This file must NOT import from managers or engines.
"""

from typing import Any, NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

QuestId = str  # UUID string
SkillId = str
AchievementId = str
ISODatetime = str  # ISO 8601 datetime string "2026-01-18T12:30:00+00:00"
ISODate = str  # ISO 8601 date string (no time) "2026-01-18"


# =============================================================================
# Player & Meters
# =============================================================================


class PlayerData(TypedDict):
    """Progression block mutated only by the GameManager."""

    name: str
    level: int
    xp: int
    xp_to_next_level: int
    gold: int
    skill_points: int
    current_streak: int
    longest_streak: int
    streak_goal: int
    streak_reward: int
    last_streak_reward_claimed: int
    last_active_date: ISODate | None


class HealthBarData(TypedDict):
    """Health meter clamped to [0, maximum]."""

    current: int
    maximum: int
    last_updated: ISODatetime


class EnergySystemData(TypedDict):
    """Self-reported energy snapshot."""

    current: int
    maximum: int
    daily_rating: int
    sleep_hours: float
    mood_level: int
    anxiety_level: int
    stress_level: int
    last_updated: ISODatetime


class StatisticsData(TypedDict):
    """Lifetime counters read by achievement criteria."""

    total_xp_earned: int
    total_gold_earned: int
    total_quests_completed: int
    health_activities_logged: int
    quick_tasks_completed: int
    big_tasks_completed: int
    last_completed_difficulty: int
    repeatable_completions: int


class BonusXPData(TypedDict):
    """Temporary XP multiplier window."""

    multiplier: float
    expires_at: ISODatetime
    reason: str


class ActivityLogEntry(TypedDict):
    """One line of the recent activity feed."""

    internal_id: str
    type: str
    description: str
    timestamp: ISODatetime


# =============================================================================
# Quests & Definitions
# =============================================================================


class QuestData(TypedDict):
    """Quest entity.

    ``gold_reward`` of None means the reward is computed from
    type/difficulty/priority at completion time.
    """

    internal_id: QuestId
    title: str
    description: str
    type: str
    category: str
    priority: str
    status: str
    xp_reward: int
    gold_reward: int | None
    difficulty_level: int
    estimated_time: int
    energy_required: str
    anxiety_level: str
    tags: list[str]
    created_at: ISODatetime
    completed_at: NotRequired[ISODatetime | None]


class SkillDefinition(TypedDict):
    """Shipped skill definition. ``effect`` names a registered modifier."""

    internal_id: SkillId
    name: str
    description: str
    icon: str
    cost: int
    effect: str


class AchievementCriterion(TypedDict):
    """Criterion descriptor resolved by the GamificationEngine registry."""

    type: str
    threshold: float


class AchievementDefinition(TypedDict):
    """Shipped achievement definition."""

    internal_id: AchievementId
    name: str
    description: str
    icon: str
    category: str
    criterion: AchievementCriterion


class HealthActivityData(TypedDict):
    """Health activity type (positive or negative)."""

    internal_id: str
    name: str
    health_change: int
    xp_change: int
    category: str
    duration: int
    description: str
    icon: str
    is_positive: bool


# =============================================================================
# Repeatable Actions & Streak Challenges
# =============================================================================


class RepeatableActionData(TypedDict):
    """Counter-based habit tracked against a daily or weekly target."""

    internal_id: str
    title: str
    description: str
    icon: str
    category: str
    target_count: int
    current_count: int
    is_daily: bool
    is_weekly: bool
    reset_date: ISODatetime
    last_completed_date: ISODatetime | None
    xp_per_completion: int
    gold_per_completion: int


class CheckInData(TypedDict):
    """Single daily check-in."""

    date: ISODate
    success: bool
    notes: NotRequired[str | None]


class MilestoneRewardData(TypedDict):
    """Reward granted when the streak first reaches ``days_milestone``."""

    days_milestone: int
    xp_reward: int
    gold_reward: int
    title: str


class StreakChallengeData(TypedDict):
    """Per-challenge daily check-in automaton state."""

    internal_id: str
    name: str
    description: str
    category: str
    difficulty: str
    current_streak: int
    longest_streak: int
    is_active: bool
    start_date: ISODatetime | None
    daily_check_ins: list[CheckInData]
    rewards: list[MilestoneRewardData]


class ChallengeStats(TypedDict):
    """Derived check-in statistics for a challenge."""

    total_check_ins: int
    successful_check_ins: int
    success_rate: float
    weekly_check_ins: int
    weekly_success_rate: float


# =============================================================================
# Journals
# =============================================================================


class JournalEntryData(TypedDict):
    """Immutable journal entry."""

    internal_id: str
    title: str
    content: str
    date: ISODatetime
    mood: int | None
    amount: float | None
    tags: list[str]


class JournalData(TypedDict):
    """Journal exclusively owning its entries list."""

    internal_id: str
    name: str
    type: str
    description: str
    entries: list[JournalEntryData]
    created_at: ISODatetime


class JournalStats(TypedDict):
    """Read-only statistics derived from a journal's entries."""

    total_entries: int
    today_entries: int
    week_entries: int
    month_entries: int
    avg_mood: float
    total_saved: float
    current_streak: int
    longest_streak: int


# =============================================================================
# Game State
# =============================================================================


class GameState(TypedDict):
    """Full state graph consumed and produced by the GameManager."""

    player: PlayerData
    health_bar: HealthBarData
    energy_system: EnergySystemData
    quests: dict[QuestId, QuestData]
    repeatable_actions: dict[str, RepeatableActionData]
    streak_challenges: dict[str, StreakChallengeData]
    journals: dict[str, JournalData]
    statistics: StatisticsData
    unlocked_skills: list[SkillId]
    unlocked_achievements: list[AchievementId]
    bonus_xp_active: BonusXPData | None
    recent_activity: list[ActivityLogEntry]


# =============================================================================
# Engine Results
# =============================================================================


class CriterionResult(TypedDict):
    """Result of evaluating a single achievement criterion."""

    criterion_type: str
    met: bool
    progress: float
    threshold: float
    current_value: float
    reason: str


class EvaluationResult(TypedDict):
    """Result of evaluating one achievement."""

    entity_id: str
    entity_name: str
    criteria_met: bool
    overall_progress: float
    criterion_result: CriterionResult


class RewardContext(TypedDict, total=False):
    """What triggered a reward; passed to skill modifiers."""

    quest: QuestData | None
    health_activity: HealthActivityData | dict[str, Any] | None
