"""Game Manager - Progression orchestrator and action dispatcher.

This manager is the single writer of game state:
- Validates each action payload (voluptuous schemas)
- Applies the action to a deep copy of the incoming snapshot
- Calls engines in order (rewards → counters/streaks → player fields)
- Re-evaluates achievements on the post-mutation snapshot
- Records the activity log and lifetime statistics
- Converts engine exceptions into an ActionResult

ARCHITECTURE:
- GameManager = STATEFUL only in its configuration (settings and the
  definition tables it was constructed with); game state is always passed in
- Engines = pure logic (STATELESS), never read the clock
- ``dispatch`` is a reducer: ``(state, action, payload, now) → ActionResult``

For every non-applied result the returned state is the very object passed
in, so callers can detect "nothing happened" by identity.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import copy
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from .. import const, data_builders as db
from ..data import (
    ACHIEVEMENT_DEFINITIONS,
    DEFAULT_JOURNALS,
    HEALTH_ACTIVITY_DEFINITIONS,
    SKILL_DEFINITIONS,
    get_template,
)
from ..engines import (
    EconomyEngine,
    GamificationEngine,
    ModifierEngine,
    PeriodicCounterEngine,
    QuestEngine,
    RewardEngine,
    StatisticsEngine,
    StreakEngine,
)
from ..exceptions import (
    ActionValidationError,
    EntityConflictError,
    InsufficientGoldError,
    InsufficientSkillPointsError,
    UnknownEntityError,
)
from ..schemas import ACTION_SCHEMAS, SETTINGS_SCHEMA
from ..utils.dt_utils import dt_to_iso, get_timezone, local_date

if TYPE_CHECKING:
    from ..type_defs import (
        AchievementDefinition,
        EvaluationResult,
        GameState,
        HealthActivityData,
        JournalEntryData,
        JournalStats,
        RewardContext,
        SkillDefinition,
    )

# Handler signature: (state, payload, now, rewards) -> confirmation message
ActionHandler = Callable[
    ["GameState", dict[str, Any], datetime, dict[str, Any]], str
]


@dataclass
class ActionResult:
    """Outcome of one dispatched action.

    Attributes:
        state: Next state (the input object itself unless status is applied)
        status: One of the const.RESULT_* values
        code: Error/conflict code for non-applied results
        message: Human-readable confirmation or rejection reason
        rewards: Granted xp/gold/health/levels/milestones
        unlocked_achievements: Ids newly unlocked by this action
        data: Derived fields for read paths and ids of created entities
    """

    state: GameState
    status: str
    code: str | None = None
    message: str = ""
    rewards: dict[str, Any] = field(default_factory=dict)
    unlocked_achievements: list[str] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def applied(self) -> bool:
        """Return True if the action changed state."""
        return self.status == const.RESULT_APPLIED


class GameManager:
    """Progression orchestrator.

    Responsibilities:
    - Dispatch the action vocabulary (const.ACTION_*)
    - Sequence engine calls and reward grants
    - Achievement evaluation after every mutation
    - Read paths (player status, journal analytics, progress views)

    NOT responsible for:
    - Persistence (callers store the returned state)
    - Presentation (derived fields are returned as plain data)
    """

    def __init__(
        self,
        settings: Mapping[str, Any] | None = None,
        *,
        skills: Sequence[SkillDefinition] = SKILL_DEFINITIONS,
        achievements: Sequence[AchievementDefinition] = ACHIEVEMENT_DEFINITIONS,
        health_activities: Sequence[HealthActivityData] = HEALTH_ACTIVITY_DEFINITIONS,
    ) -> None:
        """Initialize the GameManager.

        Args:
            settings: Optional CONF_* mapping, validated by SETTINGS_SCHEMA
            skills: Skill definitions in pipeline order
            achievements: Achievement definitions
            health_activities: Health activity types that can be logged

        Raises:
            vol.Invalid: If settings are invalid
        """
        self.settings: dict[str, Any] = SETTINGS_SCHEMA(dict(settings or {}))
        self.tz = get_timezone(self.settings[const.CONF_TIMEZONE])
        self.skills = tuple(skills)
        self.achievements = tuple(achievements)
        self._skills_by_id = {skill[const.DATA_SKILL_ID]: skill for skill in skills}
        self._achievements_by_id = {
            achievement[const.DATA_ACHIEVEMENT_ID]: achievement
            for achievement in achievements
        }
        self._health_activities = {
            activity[const.DATA_HEALTH_ACTIVITY_ID]: activity
            for activity in health_activities
        }
        self._handlers: dict[str, ActionHandler] = {
            const.ACTION_ADD_QUEST: self._handle_add_quest,
            const.ACTION_EDIT_QUEST: self._handle_edit_quest,
            const.ACTION_DELETE_QUEST: self._handle_delete_quest,
            const.ACTION_COMPLETE_QUEST: self._handle_complete_quest,
            const.ACTION_LOG_HEALTH_ACTIVITY: self._handle_log_health_activity,
            const.ACTION_ADD_XP: self._handle_add_xp,
            const.ACTION_ADD_GOLD: self._handle_add_gold,
            const.ACTION_SPEND_GOLD: self._handle_spend_gold,
            const.ACTION_UPDATE_STREAK: self._handle_update_streak,
            const.ACTION_CLAIM_STREAK_REWARD: self._handle_claim_streak_reward,
            const.ACTION_ACTIVATE_BONUS_XP: self._handle_activate_bonus_xp,
            const.ACTION_UPDATE_ENERGY_SYSTEM: self._handle_update_energy_system,
            const.ACTION_UNLOCK_SKILL: self._handle_unlock_skill,
            const.ACTION_UNLOCK_ACHIEVEMENT: self._handle_unlock_achievement,
            const.ACTION_ADD_REPEATABLE_ACTION: self._handle_add_repeatable_action,
            const.ACTION_INCREMENT_REPEATABLE_ACTION: (
                self._handle_increment_repeatable_action
            ),
            const.ACTION_RESET_REPEATABLE_ACTION: (
                self._handle_reset_repeatable_action
            ),
            const.ACTION_REMOVE_REPEATABLE_ACTION: (
                self._handle_remove_repeatable_action
            ),
            const.ACTION_ADD_STREAK_CHALLENGE: self._handle_add_streak_challenge,
            const.ACTION_START_STREAK_CHALLENGE: self._handle_start_streak_challenge,
            const.ACTION_STOP_STREAK_CHALLENGE: self._handle_stop_streak_challenge,
            const.ACTION_CHECK_IN_STREAK_CHALLENGE: (
                self._handle_check_in_streak_challenge
            ),
            const.ACTION_INITIALIZE_JOURNALS: self._handle_initialize_journals,
            const.ACTION_ADD_JOURNAL_ENTRY: self._handle_add_journal_entry,
        }

    # =========================================================================
    # STATE CREATION
    # =========================================================================

    def new_game(
        self, now: datetime, player_name: str = const.DEFAULT_PLAYER_NAME
    ) -> GameState:
        """Build a fresh game state using this manager's settings."""
        return db.build_initial_state(self.settings, now, player_name)

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def dispatch(
        self,
        state: GameState,
        action: str,
        payload: Mapping[str, Any] | None,
        now: datetime,
    ) -> ActionResult:
        """Apply one action to ``state``.

        Args:
            state: Current snapshot (never mutated)
            action: One of the const.ACTION_* names
            payload: Action payload, validated against ACTION_SCHEMAS
            now: Wall-clock reference for every date boundary in this action

        Returns:
            ActionResult. Errors are reported through ``status``/``code``
            rather than raised.
        """
        try:
            if action == const.ACTION_GET_PLAYER_STATUS:
                ACTION_SCHEMAS[action](dict(payload or {}))
                status = self.get_player_status(state, now)
                return ActionResult(
                    state=state,
                    status=const.RESULT_APPLIED,
                    message=self._status_message(status),
                    data=status,
                )

            handler = self._handlers.get(action)
            if handler is None:
                raise ActionValidationError(f"Unknown action: {action}", field="action")
            data = ACTION_SCHEMAS[action](dict(payload or {}))

            working: GameState = copy.deepcopy(state)
            rewards: dict[str, Any] = {}
            message = handler(working, data, now, rewards)
            unlocked = self._finalize(working, now, rewards)

        except vol.Invalid as err:
            return self._failure(
                state, action, const.RESULT_REJECTED, const.ERROR_VALIDATION, str(err)
            )
        except ActionValidationError as err:
            return self._failure(
                state, action, const.RESULT_REJECTED, err.code, err.reason
            )
        except EntityConflictError as err:
            return self._failure(state, action, const.RESULT_NOOP, err.code, str(err))
        except (InsufficientSkillPointsError, InsufficientGoldError) as err:
            return self._failure(
                state,
                action,
                const.RESULT_INSUFFICIENT,
                err.code,
                str(err),
                data={"shortfall": err.shortfall},
            )
        except UnknownEntityError as err:
            return self._failure(
                state, action, const.RESULT_UNKNOWN_ENTITY, err.code, str(err)
            )

        const.LOGGER.debug(
            "Applied action %s: rewards=%s, unlocked=%s", action, rewards, unlocked
        )
        created = rewards.pop("created_id", None)
        return ActionResult(
            state=working,
            status=const.RESULT_APPLIED,
            message=message,
            rewards=rewards,
            unlocked_achievements=unlocked,
            data={"id": created} if created else {},
        )

    @staticmethod
    def _failure(
        state: GameState,
        action: str,
        status: str,
        code: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> ActionResult:
        const.LOGGER.warning("Action %s %s (%s): %s", action, status, code, message)
        return ActionResult(
            state=state, status=status, code=code, message=message, data=data or {}
        )

    def _finalize(
        self, state: GameState, now: datetime, rewards: dict[str, Any]
    ) -> list[str]:
        """Post-mutation bookkeeping shared by every applied action.

        Clears an expired bonus window, merges newly satisfied achievements
        and prunes the activity log.
        """
        bonus = state.get(const.DATA_BONUS_XP_ACTIVE)
        if bonus and not ModifierEngine.bonus_is_active(bonus, now):
            const.LOGGER.debug("Bonus XP window expired at %s", now)
            state[const.DATA_BONUS_XP_ACTIVE] = None

        already_unlocked = set(state.get(const.DATA_UNLOCKED_ACHIEVEMENTS, []))
        candidates = dict.fromkeys(
            [
                *rewards.pop("manual_unlocks", []),
                *GamificationEngine.evaluate(state, self.achievements),
            ]
        )
        newly_unlocked = [
            achievement_id
            for achievement_id in candidates
            if achievement_id not in already_unlocked
        ]
        state[const.DATA_UNLOCKED_ACHIEVEMENTS] = GamificationEngine.merge_unlocked(
            state.get(const.DATA_UNLOCKED_ACHIEVEMENTS, []), newly_unlocked
        )
        for achievement_id in newly_unlocked:
            name = self._achievements_by_id[achievement_id][const.DATA_ACHIEVEMENT_NAME]
            const.LOGGER.info("Achievement unlocked: %s", name)
            self._log_activity(
                state,
                const.ACTIVITY_TYPE_ACHIEVEMENT_UNLOCKED,
                f"Achievement unlocked: {name}",
                now,
            )

        EconomyEngine.prune_activity_log(
            state[const.DATA_RECENT_ACTIVITY],
            self.settings[const.CONF_MAX_ACTIVITY_LOG_ENTRIES],
        )
        return newly_unlocked

    # =========================================================================
    # SHARED GRANTS
    # =========================================================================

    def _grant_xp(
        self,
        state: GameState,
        amount: int,
        now: datetime,
        rewards: dict[str, Any],
    ) -> None:
        """Apply an XP delta (already modified and rounded) and level-ups."""
        player, levels = EconomyEngine.add_xp(
            state[const.DATA_PLAYER], amount, self.settings
        )
        state[const.DATA_PLAYER] = player
        rewards["xp"] = rewards.get("xp", 0) + amount
        if amount > 0:
            state[const.DATA_STATISTICS] = StatisticsEngine.record(
                state[const.DATA_STATISTICS],
                {const.DATA_STATS_TOTAL_XP_EARNED: amount},
            )
        if levels:
            level = player[const.DATA_PLAYER_LEVEL]
            rewards["levels_gained"] = rewards.get("levels_gained", 0) + levels
            const.LOGGER.info("Level up! Now level %s (+%s)", level, levels)
            self._log_activity(
                state, const.ACTIVITY_TYPE_LEVEL_UP, f"Reached level {level}", now
            )

    @staticmethod
    def _grant_gold(state: GameState, amount: int, rewards: dict[str, Any]) -> None:
        state[const.DATA_PLAYER] = EconomyEngine.add_gold(
            state[const.DATA_PLAYER], amount
        )
        rewards["gold"] = rewards.get("gold", 0) + amount
        if amount > 0:
            state[const.DATA_STATISTICS] = StatisticsEngine.record(
                state[const.DATA_STATISTICS],
                {const.DATA_STATS_TOTAL_GOLD_EARNED: amount},
            )

    @staticmethod
    def _change_health(
        state: GameState, delta: int, now: datetime, rewards: dict[str, Any]
    ) -> None:
        if not delta:
            return
        state[const.DATA_HEALTH_BAR] = EconomyEngine.apply_health_change(
            state[const.DATA_HEALTH_BAR], delta, now
        )
        rewards["health"] = rewards.get("health", 0) + delta

    @staticmethod
    def _log_activity(
        state: GameState, activity_type: str, description: str, now: datetime
    ) -> None:
        state.setdefault(const.DATA_RECENT_ACTIVITY, []).append(
            EconomyEngine.create_activity_entry(activity_type, description, now)
        )

    def _counter_options(self) -> dict[str, Any]:
        return {
            "tz": self.tz,
            "weekly_mode": self.settings[const.CONF_WEEKLY_RESET_MODE],
            "week_start": self.settings[const.CONF_WEEK_START],
        }

    # =========================================================================
    # QUEST HANDLERS
    # =========================================================================

    def _handle_add_quest(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        template_id = data.pop(const.FIELD_TEMPLATE_ID, None)
        if template_id is not None:
            template = get_template(template_id)
            if template is None:
                raise UnknownEntityError(const.ENTITY_QUEST_TEMPLATE, template_id)
            quest = db.build_quest_from_template(template, overrides=data, now=now)
        else:
            quest = db.build_quest(data, now=now)

        quest_id = quest[const.DATA_QUEST_ID]
        state[const.DATA_QUESTS][quest_id] = quest
        rewards["created_id"] = quest_id
        return f"Quest '{quest[const.DATA_QUEST_TITLE]}' added"

    def _handle_edit_quest(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        quest_id = data.pop(const.FIELD_QUEST_ID)
        existing = QuestEngine.get_quest(state[const.DATA_QUESTS], quest_id)
        if not QuestEngine.is_active(existing):
            raise EntityConflictError(
                const.CONFLICT_ALREADY_COMPLETED,
                quest_id,
                "Completed quests cannot be edited",
            )
        quest = db.build_quest(data, existing=existing, now=now)
        state[const.DATA_QUESTS][quest_id] = quest
        return f"Quest '{quest[const.DATA_QUEST_TITLE]}' updated"

    def _handle_delete_quest(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        quest_id = data[const.FIELD_QUEST_ID]
        quest = QuestEngine.get_quest(state[const.DATA_QUESTS], quest_id)
        del state[const.DATA_QUESTS][quest_id]
        return f"Quest '{quest[const.DATA_QUEST_TITLE]}' deleted"

    def _handle_complete_quest(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        """Complete a quest: one-shot transition, then rewards.

        Rewards are computed against the pre-completion snapshot: skill
        pipeline → streak multiplier → bonus window for XP,
        override-or-formula for gold.
        """
        quest_id = data[const.FIELD_QUEST_ID]
        quest = QuestEngine.get_quest(state[const.DATA_QUESTS], quest_id)
        completed = QuestEngine.complete(quest, now)

        unlocked_skills = state.get(const.DATA_UNLOCKED_SKILLS, [])
        context: RewardContext = {"quest": quest, "health_activity": None}
        xp = RewardEngine.quest_xp(quest, state, unlocked_skills, self.skills, now)
        gold = RewardEngine.gold_reward(quest)
        health = ModifierEngine.health_bonus(
            state, context, unlocked_skills, self.skills
        )
        const.LOGGER.debug(
            "Quest %s rewards: xp=%s gold=%s health=%s", quest_id, xp, gold, health
        )

        state[const.DATA_QUESTS][quest_id] = completed
        stats = StatisticsEngine.record(
            state[const.DATA_STATISTICS],
            {
                const.DATA_STATS_TOTAL_QUESTS_COMPLETED: 1,
                const.DATA_STATS_QUICK_TASKS_COMPLETED: int(
                    QuestEngine.is_quick_task(quest)
                ),
                const.DATA_STATS_BIG_TASKS_COMPLETED: int(
                    QuestEngine.is_big_task(quest)
                ),
            },
        )
        stats[const.DATA_STATS_LAST_COMPLETED_DIFFICULTY] = quest.get(
            const.DATA_QUEST_DIFFICULTY_LEVEL, 0
        )
        state[const.DATA_STATISTICS] = stats

        self._grant_xp(state, xp, now, rewards)
        self._grant_gold(state, gold, rewards)
        self._change_health(state, health, now, rewards)
        state[const.DATA_PLAYER] = StreakEngine.update_daily_streak(
            state[const.DATA_PLAYER], now, self.tz
        )

        title = quest[const.DATA_QUEST_TITLE]
        self._log_activity(
            state,
            const.ACTIVITY_TYPE_QUEST_COMPLETED,
            f"Completed '{title}' (+{xp} XP, +{gold} gold)",
            now,
        )
        return f"Quest '{title}' completed! +{xp} XP, +{gold} gold"

    # =========================================================================
    # PLAYER & ECONOMY HANDLERS
    # =========================================================================

    def _handle_log_health_activity(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        activity_id = data[const.FIELD_ACTIVITY_ID]
        activity = self._health_activities.get(activity_id)
        if activity is None:
            raise UnknownEntityError(const.ENTITY_HEALTH_ACTIVITY, activity_id)

        unlocked_skills = state.get(const.DATA_UNLOCKED_SKILLS, [])
        context: RewardContext = {"quest": None, "health_activity": activity}
        xp = RewardEngine.health_activity_xp(
            activity, state, unlocked_skills, self.skills, now
        )
        health = activity.get(
            const.DATA_HEALTH_ACTIVITY_HEALTH_CHANGE, 0
        ) + ModifierEngine.health_bonus(state, context, unlocked_skills, self.skills)

        self._grant_xp(state, xp, now, rewards)
        self._change_health(state, health, now, rewards)
        state[const.DATA_STATISTICS] = StatisticsEngine.record(
            state[const.DATA_STATISTICS],
            {const.DATA_STATS_HEALTH_ACTIVITIES_LOGGED: 1},
        )

        name = activity[const.DATA_HEALTH_ACTIVITY_NAME]
        self._log_activity(
            state,
            const.ACTIVITY_TYPE_HEALTH_LOGGED,
            f"{name} ({health:+d} health, {xp:+d} XP)",
            now,
        )
        return f"Logged {name}: {health:+d} health, {xp:+d} XP"

    def _handle_add_xp(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        amount = data[const.FIELD_AMOUNT]
        self._grant_xp(state, amount, now, rewards)
        reason = data.get(const.FIELD_REASON) or "manual adjustment"
        self._log_activity(
            state, const.ACTIVITY_TYPE_XP, f"{amount:+d} XP ({reason})", now
        )
        return f"{amount:+d} XP"

    def _handle_add_gold(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        amount = data[const.FIELD_AMOUNT]
        self._grant_gold(state, amount, rewards)
        reason = data.get(const.FIELD_REASON) or "manual adjustment"
        self._log_activity(
            state, const.ACTIVITY_TYPE_GOLD, f"{amount:+d} gold ({reason})", now
        )
        return f"{amount:+d} gold"

    def _handle_spend_gold(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        amount = data[const.FIELD_AMOUNT]
        state[const.DATA_PLAYER] = EconomyEngine.spend_gold(
            state[const.DATA_PLAYER], amount
        )
        rewards["gold"] = -amount
        reason = data.get(const.FIELD_REASON) or "purchase"
        self._log_activity(
            state, const.ACTIVITY_TYPE_GOLD, f"Spent {amount} gold ({reason})", now
        )
        return f"Spent {amount} gold"

    def _handle_update_streak(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        player = StreakEngine.update_daily_streak(
            state[const.DATA_PLAYER], now, self.tz
        )
        state[const.DATA_PLAYER] = player
        return f"Streak: {player[const.DATA_PLAYER_CURRENT_STREAK]} days"

    def _handle_claim_streak_reward(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        streak_count = data[const.FIELD_STREAK_COUNT]
        player, gold = StreakEngine.claim_streak_reward(
            state[const.DATA_PLAYER], streak_count
        )
        state[const.DATA_PLAYER] = player
        self._grant_gold(state, gold, rewards)
        const.LOGGER.info(
            "Streak reward claimed for %s days: %s gold", streak_count, gold
        )
        self._log_activity(
            state,
            const.ACTIVITY_TYPE_GOLD,
            f"{streak_count}-day streak reward (+{gold} gold)",
            now,
        )
        return f"Streak reward claimed: +{gold} gold"

    def _handle_activate_bonus_xp(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        multiplier = data[const.FIELD_MULTIPLIER]
        expires_at = now + timedelta(minutes=data[const.FIELD_DURATION])
        state[const.DATA_BONUS_XP_ACTIVE] = {
            const.DATA_BONUS_XP_MULTIPLIER: multiplier,
            const.DATA_BONUS_XP_EXPIRES_AT: dt_to_iso(expires_at),
            const.DATA_BONUS_XP_REASON: data[const.FIELD_REASON],
        }
        return f"Bonus XP x{multiplier:g} active until {dt_to_iso(expires_at)}"

    def _handle_update_energy_system(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        energy = db.build_energy_system(
            data,
            existing=state[const.DATA_ENERGY_SYSTEM],
            settings=self.settings,
            now=now,
        )
        state[const.DATA_ENERGY_SYSTEM] = energy
        return f"Energy updated: {energy[const.DATA_METER_CURRENT]}"

    def _handle_unlock_skill(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        skill_id = data[const.FIELD_SKILL_ID]
        skill = self._skills_by_id.get(skill_id)
        if skill is None:
            raise UnknownEntityError(const.ENTITY_SKILL, skill_id)
        if skill_id in state.get(const.DATA_UNLOCKED_SKILLS, []):
            raise EntityConflictError(const.CONFLICT_ALREADY_UNLOCKED, skill_id)

        state[const.DATA_PLAYER] = EconomyEngine.spend_skill_points(
            state[const.DATA_PLAYER], skill_id, skill[const.DATA_SKILL_COST]
        )
        state[const.DATA_UNLOCKED_SKILLS] = [
            *state.get(const.DATA_UNLOCKED_SKILLS, []),
            skill_id,
        ]
        name = skill[const.DATA_SKILL_NAME]
        const.LOGGER.info("Skill unlocked: %s", name)
        self._log_activity(
            state, const.ACTIVITY_TYPE_SKILL_UNLOCKED, f"Skill unlocked: {name}", now
        )
        return f"Skill '{name}' unlocked"

    def _handle_unlock_achievement(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        achievement_id = data[const.FIELD_ACHIEVEMENT_ID]
        achievement = self._achievements_by_id.get(achievement_id)
        if achievement is None:
            raise UnknownEntityError(const.ENTITY_ACHIEVEMENT, achievement_id)
        if achievement_id in state.get(const.DATA_UNLOCKED_ACHIEVEMENTS, []):
            raise EntityConflictError(const.CONFLICT_ALREADY_UNLOCKED, achievement_id)
        # Merged by _finalize together with evaluated unlocks
        rewards["manual_unlocks"] = [achievement_id]
        return f"Achievement '{achievement[const.DATA_ACHIEVEMENT_NAME]}' unlocked"

    # =========================================================================
    # REPEATABLE ACTION HANDLERS
    # =========================================================================

    @staticmethod
    def _get_repeatable_action(state: GameState, action_id: str) -> Any:
        action = state[const.DATA_REPEATABLE_ACTIONS].get(action_id)
        if action is None:
            raise UnknownEntityError(const.ENTITY_REPEATABLE_ACTION, action_id)
        return action

    def _handle_add_repeatable_action(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        action = db.build_repeatable_action(data, now=now)
        action_id = action[const.DATA_REPEATABLE_ID]
        state[const.DATA_REPEATABLE_ACTIONS][action_id] = action
        rewards["created_id"] = action_id
        return f"Repeatable action '{action[const.DATA_REPEATABLE_TITLE]}' added"

    def _handle_increment_repeatable_action(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        """Count one completion and grant its rewards.

        An expired period is reset before the completion guard, so the first
        increment of a new day/week always counts.
        """
        action_id = data[const.FIELD_ACTION_ID]
        action = self._get_repeatable_action(state, action_id)
        options = self._counter_options()
        if PeriodicCounterEngine.should_reset(action, now, **options):
            action = PeriodicCounterEngine.reset(action, now)
        if PeriodicCounterEngine.is_completed(action):
            raise EntityConflictError(
                const.CONFLICT_TARGET_REACHED,
                action_id,
                f"'{action[const.DATA_REPEATABLE_TITLE]}' already reached its "
                f"target ({PeriodicCounterEngine.counter_text(action)})",
            )

        action = PeriodicCounterEngine.increment(action, now, **options)
        state[const.DATA_REPEATABLE_ACTIONS][action_id] = action

        # Flat per-completion rewards, no skill modifiers
        self._grant_xp(
            state, action.get(const.DATA_REPEATABLE_XP_PER_COMPLETION, 0), now, rewards
        )
        self._grant_gold(
            state, action.get(const.DATA_REPEATABLE_GOLD_PER_COMPLETION, 0), rewards
        )
        state[const.DATA_STATISTICS] = StatisticsEngine.record(
            state[const.DATA_STATISTICS],
            {const.DATA_STATS_REPEATABLE_COMPLETIONS: 1},
        )

        counter = PeriodicCounterEngine.counter_text(action)
        title = action[const.DATA_REPEATABLE_TITLE]
        self._log_activity(
            state, const.ACTIVITY_TYPE_REPEATABLE, f"{title}: {counter}", now
        )
        return f"{title}: {counter}"

    def _handle_reset_repeatable_action(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        action_id = data[const.FIELD_ACTION_ID]
        action = PeriodicCounterEngine.reset(
            self._get_repeatable_action(state, action_id), now
        )
        state[const.DATA_REPEATABLE_ACTIONS][action_id] = action
        return f"'{action[const.DATA_REPEATABLE_TITLE]}' reset"

    def _handle_remove_repeatable_action(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        action_id = data[const.FIELD_ACTION_ID]
        action = self._get_repeatable_action(state, action_id)
        del state[const.DATA_REPEATABLE_ACTIONS][action_id]
        return f"'{action[const.DATA_REPEATABLE_TITLE]}' removed"

    # =========================================================================
    # STREAK CHALLENGE HANDLERS
    # =========================================================================

    def _handle_add_streak_challenge(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        challenge = db.build_streak_challenge(data)
        challenge_id = challenge[const.DATA_CHALLENGE_ID]
        state[const.DATA_STREAK_CHALLENGES][challenge_id] = challenge
        rewards["created_id"] = challenge_id
        return f"Challenge '{challenge[const.DATA_CHALLENGE_NAME]}' added"

    def _handle_start_streak_challenge(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        challenges = state[const.DATA_STREAK_CHALLENGES]
        challenge_id = data[const.FIELD_CHALLENGE_ID]
        challenge = StreakEngine.start(
            StreakEngine.get_challenge(challenges, challenge_id), now
        )
        challenges[challenge_id] = challenge
        name = challenge[const.DATA_CHALLENGE_NAME]
        self._log_activity(
            state, const.ACTIVITY_TYPE_CHALLENGE, f"Started '{name}'", now
        )
        return f"Challenge '{name}' started"

    def _handle_stop_streak_challenge(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        challenges = state[const.DATA_STREAK_CHALLENGES]
        challenge_id = data[const.FIELD_CHALLENGE_ID]
        challenge = StreakEngine.stop(
            StreakEngine.get_challenge(challenges, challenge_id)
        )
        challenges[challenge_id] = challenge
        name = challenge[const.DATA_CHALLENGE_NAME]
        self._log_activity(
            state, const.ACTIVITY_TYPE_CHALLENGE, f"Stopped '{name}'", now
        )
        return f"Challenge '{name}' stopped"

    def _handle_check_in_streak_challenge(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        challenges = state[const.DATA_STREAK_CHALLENGES]
        challenge_id = data[const.FIELD_CHALLENGE_ID]
        challenge, earned = StreakEngine.check_in(
            StreakEngine.get_challenge(challenges, challenge_id),
            data[const.FIELD_SUCCESS],
            now,
            self.tz,
            data.get(const.FIELD_NOTES),
        )
        challenges[challenge_id] = challenge

        name = challenge[const.DATA_CHALLENGE_NAME]
        streak = challenge[const.DATA_CHALLENGE_CURRENT_STREAK]
        milestones = []
        for milestone in earned:
            title = milestone[const.DATA_MILESTONE_TITLE]
            const.LOGGER.info("Milestone reached for %s: %s", name, title)
            self._grant_xp(
                state, milestone[const.DATA_MILESTONE_XP_REWARD], now, rewards
            )
            self._grant_gold(
                state, milestone[const.DATA_MILESTONE_GOLD_REWARD], rewards
            )
            milestones.append(title)
        if milestones:
            rewards["milestones"] = milestones

        outcome = "success" if data[const.FIELD_SUCCESS] else "failure"
        self._log_activity(
            state,
            const.ACTIVITY_TYPE_CHALLENGE,
            f"'{name}' check-in: {outcome} (streak {streak})",
            now,
        )
        if milestones:
            return f"Day {streak} of '{name}'! Milestone: {', '.join(milestones)}"
        return f"'{name}' check-in recorded ({outcome}, streak {streak})"

    # =========================================================================
    # JOURNAL HANDLERS
    # =========================================================================

    def _handle_initialize_journals(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        journals = state.setdefault(const.DATA_JOURNALS, {})
        missing = [
            template
            for template in DEFAULT_JOURNALS
            if template[const.DATA_JOURNAL_ID] not in journals
        ]
        if not missing:
            raise EntityConflictError(
                const.CONFLICT_ALREADY_INITIALIZED,
                const.DATA_JOURNALS,
                "Default journals already exist",
            )
        for template in missing:
            journal = db.build_journal(template, now)
            journals[journal[const.DATA_JOURNAL_ID]] = journal
        return f"Created {len(missing)} journals"

    def _handle_add_journal_entry(
        self,
        state: GameState,
        data: dict[str, Any],
        now: datetime,
        rewards: dict[str, Any],
    ) -> str:
        journal_id = data.pop(const.FIELD_JOURNAL_ID)
        journal = self._get_journal(state, journal_id)
        entry = db.build_journal_entry(journal[const.DATA_JOURNAL_TYPE], data, now)
        journal[const.DATA_JOURNAL_ENTRIES].append(entry)
        rewards["created_id"] = entry[const.DATA_ENTRY_ID]
        name = journal[const.DATA_JOURNAL_NAME]
        self._log_activity(
            state, const.ACTIVITY_TYPE_JOURNAL, f"New entry in {name}", now
        )
        return f"Entry added to {name}"

    @staticmethod
    def _get_journal(state: Mapping[str, Any], journal_id: str) -> Any:
        journal = state.get(const.DATA_JOURNALS, {}).get(journal_id)
        if journal is None:
            raise UnknownEntityError(const.ENTITY_JOURNAL, journal_id)
        return journal

    # =========================================================================
    # READ PATHS
    # =========================================================================

    def get_player_status(
        self, state: Mapping[str, Any], now: datetime
    ) -> dict[str, Any]:
        """Return the player block plus presentation-derived fields."""
        player = state[const.DATA_PLAYER]
        health_bar = state[const.DATA_HEALTH_BAR]
        bonus = state.get(const.DATA_BONUS_XP_ACTIVE)
        return {
            **player,
            "xp_progress_percentage": EconomyEngine.xp_progress_percentage(player),
            "health": health_bar[const.DATA_METER_CURRENT],
            "max_health": health_bar[const.DATA_METER_MAXIMUM],
            "health_percentage": EconomyEngine.health_percentage(health_bar),
            "energy": state[const.DATA_ENERGY_SYSTEM][const.DATA_METER_CURRENT],
            "bonus_xp_active": ModifierEngine.bonus_is_active(bonus, now),
            "unlocked_skills": list(state.get(const.DATA_UNLOCKED_SKILLS, [])),
            "unlocked_achievements": list(
                state.get(const.DATA_UNLOCKED_ACHIEVEMENTS, [])
            ),
        }

    @staticmethod
    def _status_message(status: Mapping[str, Any]) -> str:
        xp = status[const.DATA_PLAYER_XP]
        xp_needed = status[const.DATA_PLAYER_XP_TO_NEXT_LEVEL]
        return (
            f"{status[const.DATA_PLAYER_NAME]} is level "
            f"{status[const.DATA_PLAYER_LEVEL]} ({xp}/{xp_needed} XP), "
            f"{status[const.DATA_PLAYER_GOLD]} gold, "
            f"{status['health']}/{status['max_health']} health, "
            f"{status[const.DATA_PLAYER_CURRENT_STREAK]}-day streak"
        )

    def achievement_progress(
        self, state: Mapping[str, Any]
    ) -> dict[str, EvaluationResult]:
        """Return per-achievement progress for every definition."""
        return GamificationEngine.evaluate_progress(state, self.achievements)

    def repeatable_action_status(
        self, state: Mapping[str, Any], action_id: str, now: datetime
    ) -> dict[str, Any]:
        """Return the counter as seen at ``now`` without resetting anything.

        Raises:
            UnknownEntityError: If the action does not exist
        """
        action = state[const.DATA_REPEATABLE_ACTIONS].get(action_id)
        if action is None:
            raise UnknownEntityError(const.ENTITY_REPEATABLE_ACTION, action_id)
        options = self._counter_options()
        view = {
            **action,
            const.DATA_REPEATABLE_CURRENT_COUNT: PeriodicCounterEngine.current_count(
                action, now, **options
            ),
        }
        return {
            "current_count": view[const.DATA_REPEATABLE_CURRENT_COUNT],
            "is_completed": PeriodicCounterEngine.is_completed(view),
            "counter_text": PeriodicCounterEngine.counter_text(view),
            "progress_percentage": PeriodicCounterEngine.progress_percentage(view),
            "next_reset_at": PeriodicCounterEngine.next_reset_at(
                action, now, **options
            ),
        }

    def challenge_status(
        self, state: Mapping[str, Any], challenge_id: str, now: datetime
    ) -> dict[str, Any]:
        """Return check-in statistics and milestone progress for a challenge."""
        challenge = StreakEngine.get_challenge(
            state[const.DATA_STREAK_CHALLENGES], challenge_id
        )
        return {
            **StreakEngine.challenge_stats(challenge, now, self.tz),
            "checked_in_today": StreakEngine.has_checked_in(
                challenge, local_date(now, self.tz)
            ),
            "earned_rewards": StreakEngine.earned_rewards(challenge),
            "next_reward": StreakEngine.next_reward(challenge),
        }

    def get_journal_stats(
        self, state: Mapping[str, Any], journal_id: str, now: datetime
    ) -> JournalStats:
        """Return derived statistics for one journal.

        Raises:
            UnknownEntityError: If the journal does not exist
        """
        journal = self._get_journal(state, journal_id)
        return StatisticsEngine.journal_stats(journal, now, self.tz)

    def get_journal_insights(
        self, state: Mapping[str, Any], journal_id: str, now: datetime
    ) -> list[str]:
        """Return matching insight messages, highest priority first."""
        journal = self._get_journal(state, journal_id)
        return StatisticsEngine.journal_insights(journal, now, self.tz)

    @staticmethod
    def search_journal_entries(
        state: Mapping[str, Any], query: str
    ) -> list[JournalEntryData]:
        """Search every journal's entries, newest first."""
        return StatisticsEngine.search_entries(
            state.get(const.DATA_JOURNALS, {}).values(), query
        )


__all__ = ["ActionResult", "GameManager"]
