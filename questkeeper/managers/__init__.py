"""Manager modules for QuestKeeper.

Managers orchestrate workflows and coordinate between engines.
They own action dispatch, reward sequencing and cross-cutting concerns.
"""

from .game_manager import ActionResult, GameManager

__all__ = [
    "ActionResult",
    "GameManager",
]
