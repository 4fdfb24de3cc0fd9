# File: utils/__init__.py
"""Pure Python utilities for QuestKeeper.

Submodules:
    - dt_utils: Date/time parsing, conversion and calendar arithmetic
    - math_utils: Reward rounding, percentages and clamping

Usage:
    from . import dt_utils
    from .math_utils import round_reward
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
