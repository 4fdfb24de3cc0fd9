"""Exceptions raised by QuestKeeper engines and managers.

Engines raise these; ``GameManager.dispatch`` converts them into an
``ActionResult`` so callers get a status instead of a traceback.
"""

from __future__ import annotations

from . import const


class QuestKeeperError(Exception):
    """Base class for all QuestKeeper errors."""

    code: str = const.ERROR_VALIDATION


class ActionValidationError(QuestKeeperError):
    """Payload or entity failed validation; state must stay unchanged."""

    code = const.ERROR_VALIDATION

    def __init__(self, reason: str, field: str | None = None) -> None:
        """Initialize ActionValidationError.

        Args:
            reason: Human-readable rejection reason
            field: Optional name of the offending field
        """
        self.reason = reason
        self.field = field
        super().__init__(reason)


class UnknownEntityError(QuestKeeperError):
    """Referenced id does not exist (caller or data-sync bug)."""

    code = const.ERROR_UNKNOWN_ENTITY

    def __init__(self, entity_type: str, entity_id: str) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"Unknown {entity_type}: {entity_id}")


class EntityConflictError(QuestKeeperError):
    """Benign double-dispatch against an entity already in the target state.

    Attributes:
        code: One of the const.CONFLICT_* values
        entity_id: The entity the action was aimed at
    """

    def __init__(self, code: str, entity_id: str, message: str | None = None) -> None:
        self.code = code
        self.entity_id = entity_id
        super().__init__(message or f"{code}: {entity_id}")


class InsufficientSkillPointsError(QuestKeeperError):
    """Raised when a skill costs more points than the player has.

    Attributes:
        skill_id: The skill being unlocked
        available: Skill points the player has
        cost: Skill points required
        shortfall: How many more points are needed (cost - available)
    """

    code = const.ERROR_INSUFFICIENT_SKILL_POINTS

    def __init__(self, skill_id: str, available: int, cost: int) -> None:
        self.skill_id = skill_id
        self.available = available
        self.cost = cost
        self.shortfall = cost - available
        super().__init__(
            f"Insufficient skill points for {skill_id}: "
            f"available={available}, cost={cost}, shortfall={self.shortfall}"
        )


class InsufficientGoldError(QuestKeeperError):
    """Raised when a gold withdrawal would make the balance negative."""

    code = const.ERROR_INSUFFICIENT_GOLD

    def __init__(self, current_balance: int, requested_amount: int) -> None:
        self.current_balance = current_balance
        self.requested_amount = requested_amount
        self.shortfall = requested_amount - current_balance
        super().__init__(
            f"Insufficient gold: balance={current_balance}, "
            f"requested={requested_amount}, shortfall={self.shortfall}"
        )
