"""Engine modules for QuestKeeper.

Contains specialized computation engines:
- modifier_engine: Skill-effect reward pipeline and bonus XP window
- reward_engine: Quest gold formula and modified XP
- quest_engine: Quest lifecycle transitions
- economy_engine: XP/levels, gold, health and activity log
- counter_engine: Daily/weekly repeatable action counters
- streak_engine: Streak challenges and the player daily streak
- gamification_engine: Achievement evaluation
- statistics_engine: Lifetime counters and journal analytics
"""

# Use relative imports within package to avoid mypy module resolution issues
from .counter_engine import PeriodicCounterEngine
from .economy_engine import EconomyEngine
from .gamification_engine import GamificationEngine
from .modifier_engine import ModifierEngine
from .quest_engine import QuestEngine
from .reward_engine import ComputedReward, ExplicitReward, RewardEngine
from .statistics_engine import StatisticsEngine
from .streak_engine import StreakEngine

__all__ = [
    "ComputedReward",
    "EconomyEngine",
    "ExplicitReward",
    "GamificationEngine",
    "ModifierEngine",
    "PeriodicCounterEngine",
    "QuestEngine",
    "RewardEngine",
    "StatisticsEngine",
    "StreakEngine",
]
