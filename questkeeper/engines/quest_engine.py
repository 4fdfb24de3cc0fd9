"""Quest Engine - Pure logic for quest lifecycle transitions.

This engine provides stateless, pure Python functions for:
- State transition validation (active → completed is one-way)
- The completion transition itself
- Query helpers used by statistics and achievements (quick/big tasks)

ARCHITECTURE: All functions are static methods that operate on passed-in
data and return new dicts. State management belongs in GameManager.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from .. import const
from ..exceptions import EntityConflictError, UnknownEntityError
from ..utils.dt_utils import dt_to_iso

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..type_defs import QuestData


class QuestEngine:
    """Pure logic engine for quest state transitions.

    All methods are static - no instance state.
    """

    # Valid state transitions (from_state -> list of valid to_states)
    VALID_TRANSITIONS: dict[str, list[str]] = {
        const.QUEST_STATUS_ACTIVE: [const.QUEST_STATUS_COMPLETED],
        const.QUEST_STATUS_COMPLETED: [],
    }

    @staticmethod
    def can_transition(current_state: str, target_state: str) -> bool:
        """Check if a state transition is valid.

        Args:
            current_state: Current quest status
            target_state: Desired quest status

        Returns:
            True if transition is allowed, False otherwise
        """
        valid_targets = QuestEngine.VALID_TRANSITIONS.get(current_state, [])
        return target_state in valid_targets

    @staticmethod
    def get_quest(
        quests: Mapping[str, QuestData], quest_id: str
    ) -> QuestData:
        """Look up a quest by id.

        Raises:
            UnknownEntityError: If the id is not present
        """
        quest = quests.get(quest_id)
        if quest is None:
            raise UnknownEntityError(const.ENTITY_QUEST, quest_id)
        return quest

    @staticmethod
    def complete(quest: QuestData, now: datetime) -> QuestData:
        """Return a completed copy of ``quest``.

        Raises:
            EntityConflictError: ``already_completed`` when the quest is not
                active (completion is realized exactly once)
        """
        current = quest.get(const.DATA_QUEST_STATUS, const.QUEST_STATUS_ACTIVE)
        if not QuestEngine.can_transition(current, const.QUEST_STATUS_COMPLETED):
            raise EntityConflictError(
                const.CONFLICT_ALREADY_COMPLETED,
                quest[const.DATA_QUEST_ID],
                f"Quest '{quest.get(const.DATA_QUEST_TITLE)}' is already completed",
            )
        completed: QuestData = {**quest}
        completed[const.DATA_QUEST_STATUS] = const.QUEST_STATUS_COMPLETED
        completed[const.DATA_QUEST_COMPLETED_AT] = dt_to_iso(now)
        return completed

    @staticmethod
    def is_active(quest: Mapping[str, Any]) -> bool:
        """Return True if the quest can still be completed."""
        return quest.get(const.DATA_QUEST_STATUS) == const.QUEST_STATUS_ACTIVE

    @staticmethod
    def is_quick_task(quest: Mapping[str, Any]) -> bool:
        """Quests estimated at 15 minutes or less count as quick tasks."""
        estimated = quest.get(const.DATA_QUEST_ESTIMATED_TIME)
        return estimated is not None and estimated <= const.QUICK_TASK_MAX_MINUTES

    @staticmethod
    def is_big_task(quest: Mapping[str, Any]) -> bool:
        """Max-difficulty quests count as big tasks ("boss battles")."""
        return quest.get(const.DATA_QUEST_DIFFICULTY_LEVEL) == const.BIG_TASK_DIFFICULTY
