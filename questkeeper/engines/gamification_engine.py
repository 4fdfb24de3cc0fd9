"""Gamification Engine - Pure logic for achievement evaluation.

This engine provides stateless, pure Python functions for:
- Criterion evaluation against a post-mutation state snapshot
- Newly-unlocked achievement detection (monotonic, idempotent)
- Per-achievement progress for read paths

ARCHITECTURE: Achievement definitions carry a declarative criterion
``{"type": ..., "threshold": ...}`` instead of a predicate closure. The
engine maps ``type`` to a handler through a registry, so definition tables
stay plain data and tests can supply their own.

PURITY REQUIREMENT: Handlers read only the state they are given. They must
not depend on each other or on evaluation order.

Criterion types:
- quests_completed, health_activities_logged, quick_tasks_completed,
  big_tasks_completed, total_xp_earned: lifetime statistics counters
- player_level, longest_streak, gold: player block values
- skills_unlocked: number of purchased skills
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from .. import const

if TYPE_CHECKING:
    from ..type_defs import AchievementDefinition, CriterionResult, EvaluationResult


# =============================================================================
# TYPE ALIASES
# =============================================================================

# Handler function signature: (state, criterion) -> CriterionResult
CriterionHandler = Callable[[Mapping[str, Any], Mapping[str, Any]], "CriterionResult"]


# =============================================================================
# GAMIFICATION ENGINE
# =============================================================================


class GamificationEngine:
    """Pure logic engine for achievement evaluation.

    All methods are static or class-level - no instance state.

    Evaluation Flow:
        1. GameManager applies an action to its working copy of the state
        2. evaluate() runs every locked achievement's criterion on that copy
        3. GameManager merges the returned ids into unlocked_achievements

    Unknown criterion types never unlock; they are logged and reported with
    zero progress.
    """

    # =========================================================================
    # CRITERION HANDLER REGISTRY
    # =========================================================================

    # Maps criterion type to handler function
    _CRITERION_HANDLERS: dict[str, CriterionHandler] = {}

    @classmethod
    def _register_handlers(cls) -> None:
        """Register all criterion handlers.

        Called lazily on first evaluation to populate _CRITERION_HANDLERS.
        """
        if cls._CRITERION_HANDLERS:
            return  # Already registered

        cls._CRITERION_HANDLERS = {
            # Lifetime statistics
            const.ACHIEVEMENT_CRITERION_QUESTS_COMPLETED: (
                cls._evaluate_quests_completed
            ),
            const.ACHIEVEMENT_CRITERION_HEALTH_ACTIVITIES: (
                cls._evaluate_health_activities
            ),
            const.ACHIEVEMENT_CRITERION_QUICK_TASKS: cls._evaluate_quick_tasks,
            const.ACHIEVEMENT_CRITERION_BIG_TASKS: cls._evaluate_big_tasks,
            const.ACHIEVEMENT_CRITERION_TOTAL_XP: cls._evaluate_total_xp,
            # Player block
            const.ACHIEVEMENT_CRITERION_PLAYER_LEVEL: cls._evaluate_player_level,
            const.ACHIEVEMENT_CRITERION_LONGEST_STREAK: cls._evaluate_longest_streak,
            const.ACHIEVEMENT_CRITERION_GOLD: cls._evaluate_gold,
            # Skills
            const.ACHIEVEMENT_CRITERION_SKILLS_UNLOCKED: (
                cls._evaluate_skills_unlocked
            ),
        }

    @classmethod
    def supported_criteria(cls) -> frozenset[str]:
        """Return the criterion types the registry can evaluate."""
        cls._register_handlers()
        return frozenset(cls._CRITERION_HANDLERS)

    # =========================================================================
    # MAIN EVALUATION METHODS
    # =========================================================================

    @classmethod
    def evaluate_achievement(
        cls,
        state: Mapping[str, Any],
        achievement_data: Mapping[str, Any],
    ) -> EvaluationResult:
        """Evaluate a single achievement against ``state``.

        Pure function - no side effects.

        Args:
            state: Post-mutation game state snapshot
            achievement_data: Achievement definition

        Returns:
            EvaluationResult with criteria_met, overall_progress and the
            criterion result
        """
        cls._register_handlers()

        achievement_id = achievement_data.get(const.DATA_ACHIEVEMENT_ID, "unknown")
        achievement_name = achievement_data.get(
            const.DATA_ACHIEVEMENT_NAME, "Unknown Achievement"
        )
        criterion = achievement_data.get(const.DATA_ACHIEVEMENT_CRITERION) or {}
        criterion_type = criterion.get(const.DATA_ACHIEVEMENT_CRITERION_TYPE)

        handler = cls._CRITERION_HANDLERS.get(criterion_type)
        if handler is None:
            const.LOGGER.warning(
                "Unknown achievement criterion type: %s for achievement %s",
                criterion_type,
                achievement_id,
            )
            result = cls._make_criterion_result(
                criterion_type=criterion_type or "unknown",
                met=False,
                progress=0.0,
                threshold=criterion.get(const.DATA_ACHIEVEMENT_CRITERION_THRESHOLD, 0),
                current_value=0,
                reason=f"Unknown criterion type: {criterion_type}",
            )
        else:
            result = handler(state, criterion)

        return cls._make_result(
            entity_id=achievement_id,
            entity_name=achievement_name,
            criteria_met=result["met"],
            overall_progress=result["progress"],
            criterion_result=result,
        )

    @classmethod
    def evaluate(
        cls,
        state: Mapping[str, Any],
        achievements: Sequence[AchievementDefinition],
    ) -> list[str]:
        """Return ids of achievements newly satisfied by ``state``.

        Achievements already in unlocked_achievements are skipped, so
        repeated evaluation never re-reports an id.
        """
        unlocked = set(state.get(const.DATA_UNLOCKED_ACHIEVEMENTS, []))
        newly_unlocked: list[str] = []
        for achievement in achievements:
            achievement_id = achievement[const.DATA_ACHIEVEMENT_ID]
            if achievement_id in unlocked:
                continue
            if cls.evaluate_achievement(state, achievement)["criteria_met"]:
                newly_unlocked.append(achievement_id)
        return newly_unlocked

    @classmethod
    def evaluate_progress(
        cls,
        state: Mapping[str, Any],
        achievements: Sequence[AchievementDefinition],
    ) -> dict[str, EvaluationResult]:
        """Return the evaluation result of every achievement, keyed by id."""
        return {
            achievement[const.DATA_ACHIEVEMENT_ID]: cls.evaluate_achievement(
                state, achievement
            )
            for achievement in achievements
        }

    @staticmethod
    def merge_unlocked(unlocked: Iterable[str], new_ids: Iterable[str]) -> list[str]:
        """Set-union ``new_ids`` into ``unlocked``, preserving unlock order."""
        merged = list(unlocked)
        seen = set(merged)
        for achievement_id in new_ids:
            if achievement_id not in seen:
                merged.append(achievement_id)
                seen.add(achievement_id)
        return merged

    # =========================================================================
    # CRITERION HANDLERS
    # =========================================================================

    @staticmethod
    def _evaluate_statistic(
        state: Mapping[str, Any],
        criterion: Mapping[str, Any],
        criterion_type: str,
        statistic_key: str,
        label: str,
    ) -> CriterionResult:
        statistics = state.get(const.DATA_STATISTICS) or {}
        return GamificationEngine._threshold_result(
            criterion_type,
            statistics.get(statistic_key, 0),
            criterion.get(const.DATA_ACHIEVEMENT_CRITERION_THRESHOLD, 0),
            label,
        )

    @staticmethod
    def _evaluate_player_value(
        state: Mapping[str, Any],
        criterion: Mapping[str, Any],
        criterion_type: str,
        player_key: str,
        label: str,
    ) -> CriterionResult:
        player = state.get(const.DATA_PLAYER) or {}
        return GamificationEngine._threshold_result(
            criterion_type,
            player.get(player_key, 0),
            criterion.get(const.DATA_ACHIEVEMENT_CRITERION_THRESHOLD, 0),
            label,
        )

    @staticmethod
    def _evaluate_quests_completed(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._evaluate_statistic(
            state,
            criterion,
            const.ACHIEVEMENT_CRITERION_QUESTS_COMPLETED,
            const.DATA_STATS_TOTAL_QUESTS_COMPLETED,
            "Quests",
        )

    @staticmethod
    def _evaluate_health_activities(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._evaluate_statistic(
            state,
            criterion,
            const.ACHIEVEMENT_CRITERION_HEALTH_ACTIVITIES,
            const.DATA_STATS_HEALTH_ACTIVITIES_LOGGED,
            "Health activities",
        )

    @staticmethod
    def _evaluate_quick_tasks(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._evaluate_statistic(
            state,
            criterion,
            const.ACHIEVEMENT_CRITERION_QUICK_TASKS,
            const.DATA_STATS_QUICK_TASKS_COMPLETED,
            "Quick tasks",
        )

    @staticmethod
    def _evaluate_big_tasks(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._evaluate_statistic(
            state,
            criterion,
            const.ACHIEVEMENT_CRITERION_BIG_TASKS,
            const.DATA_STATS_BIG_TASKS_COMPLETED,
            "Big tasks",
        )

    @staticmethod
    def _evaluate_total_xp(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._evaluate_statistic(
            state,
            criterion,
            const.ACHIEVEMENT_CRITERION_TOTAL_XP,
            const.DATA_STATS_TOTAL_XP_EARNED,
            "Total XP",
        )

    @staticmethod
    def _evaluate_player_level(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._evaluate_player_value(
            state,
            criterion,
            const.ACHIEVEMENT_CRITERION_PLAYER_LEVEL,
            const.DATA_PLAYER_LEVEL,
            "Level",
        )

    @staticmethod
    def _evaluate_longest_streak(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._evaluate_player_value(
            state,
            criterion,
            const.ACHIEVEMENT_CRITERION_LONGEST_STREAK,
            const.DATA_PLAYER_LONGEST_STREAK,
            "Streak",
        )

    @staticmethod
    def _evaluate_gold(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._evaluate_player_value(
            state,
            criterion,
            const.ACHIEVEMENT_CRITERION_GOLD,
            const.DATA_PLAYER_GOLD,
            "Gold",
        )

    @staticmethod
    def _evaluate_skills_unlocked(
        state: Mapping[str, Any], criterion: Mapping[str, Any]
    ) -> CriterionResult:
        return GamificationEngine._threshold_result(
            const.ACHIEVEMENT_CRITERION_SKILLS_UNLOCKED,
            len(state.get(const.DATA_UNLOCKED_SKILLS, [])),
            criterion.get(const.DATA_ACHIEVEMENT_CRITERION_THRESHOLD, 0),
            "Skills",
        )

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    @staticmethod
    def _threshold_result(
        criterion_type: str,
        current_value: float,
        threshold: float,
        label: str,
    ) -> CriterionResult:
        """Build a ``current >= threshold`` criterion result."""
        progress = min(1.0, current_value / threshold) if threshold > 0 else 0.0
        return GamificationEngine._make_criterion_result(
            criterion_type=criterion_type,
            met=current_value >= threshold,
            progress=progress,
            threshold=threshold,
            current_value=current_value,
            reason=f"{label}: {current_value}/{threshold}",
        )

    @staticmethod
    def _make_result(
        entity_id: str,
        entity_name: str,
        criteria_met: bool,
        overall_progress: float,
        criterion_result: CriterionResult,
    ) -> EvaluationResult:
        """Create a standardized EvaluationResult.

        Args:
            entity_id: Achievement ID
            entity_name: Display name
            criteria_met: Whether the criterion is satisfied
            overall_progress: Progress toward the threshold (0.0-1.0)
            criterion_result: The individual criterion result

        Returns:
            EvaluationResult TypedDict
        """
        return {
            "entity_id": entity_id,
            "entity_name": entity_name,
            "criteria_met": criteria_met,
            "overall_progress": overall_progress,
            "criterion_result": criterion_result,
        }

    @staticmethod
    def _make_criterion_result(
        criterion_type: str,
        met: bool,
        progress: float,
        threshold: float,
        current_value: float,
        reason: str = "",
    ) -> CriterionResult:
        """Create a standardized CriterionResult.

        Args:
            criterion_type: Type of criterion (e.g., "player_level")
            met: Whether this criterion is satisfied
            progress: Progress toward threshold (0.0-1.0)
            threshold: Target value to reach
            current_value: Current achieved value
            reason: Human-readable explanation

        Returns:
            CriterionResult TypedDict
        """
        return {
            "criterion_type": criterion_type,
            "met": met,
            "progress": progress,
            "threshold": threshold,
            "current_value": current_value,
            "reason": reason,
        }
