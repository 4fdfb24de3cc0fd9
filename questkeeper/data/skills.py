"""Shipped skill definitions.

Order matters: the modifier pipeline folds unlocked skills in the order
they are declared here, regardless of the order they were purchased.
"""

from __future__ import annotations

from .. import const
from ..type_defs import SkillDefinition

SKILL_DEFINITIONS: tuple[SkillDefinition, ...] = (
    {
        const.DATA_SKILL_ID: const.SKILL_ADAPTIVE_FOCUS,
        const.DATA_SKILL_NAME: "Adaptive Focus",
        const.DATA_SKILL_DESCRIPTION: (
            "Tasks with estimated time under 15 minutes grant +20% XP."
        ),
        const.DATA_SKILL_ICON: "mdi:brain",
        const.DATA_SKILL_COST: 1,
        const.DATA_SKILL_EFFECT: const.SKILL_ADAPTIVE_FOCUS,
    },
    {
        const.DATA_SKILL_ID: const.SKILL_BOREDOM_DETECTOR,
        const.DATA_SKILL_NAME: "Boredom Detector",
        const.DATA_SKILL_DESCRIPTION: (
            "Suggests a change of activity after prolonged inactivity "
            "or abandoning tasks."
        ),
        const.DATA_SKILL_ICON: "mdi:alarm",
        const.DATA_SKILL_COST: 2,
        const.DATA_SKILL_EFFECT: const.SKILL_BOREDOM_DETECTOR,
    },
    {
        const.DATA_SKILL_ID: const.SKILL_ANTI_PROCRASTINATION_AURA,
        const.DATA_SKILL_NAME: "Anti-Procrastination Aura",
        const.DATA_SKILL_DESCRIPTION: (
            'Completing a "daunting" task grants bonus HP and 10% bonus XP.'
        ),
        const.DATA_SKILL_ICON: "mdi:shield-star",
        const.DATA_SKILL_COST: 3,
        const.DATA_SKILL_EFFECT: const.SKILL_ANTI_PROCRASTINATION_AURA,
    },
    {
        const.DATA_SKILL_ID: const.SKILL_CREATIVE_RECHARGE,
        const.DATA_SKILL_NAME: "Creative Recharge",
        const.DATA_SKILL_DESCRIPTION: (
            "Creative and learning activities grant additional HP and XP."
        ),
        const.DATA_SKILL_ICON: "mdi:palette",
        const.DATA_SKILL_COST: 2,
        const.DATA_SKILL_EFFECT: const.SKILL_CREATIVE_RECHARGE,
    },
)
