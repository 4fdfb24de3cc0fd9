"""Shipped health activity types.

Positive activities restore health and grant XP; negative ones are logged
for honest tracking and cost both.
"""

from __future__ import annotations

from .. import const
from ..type_defs import HealthActivityData


def _activity(
    activity_id: str,
    name: str,
    health_change: int,
    xp_change: int,
    category: str,
    duration: int,
    description: str,
    icon: str,
) -> HealthActivityData:
    return {
        const.DATA_HEALTH_ACTIVITY_ID: activity_id,
        const.DATA_HEALTH_ACTIVITY_NAME: name,
        const.DATA_HEALTH_ACTIVITY_HEALTH_CHANGE: health_change,
        const.DATA_HEALTH_ACTIVITY_XP_CHANGE: xp_change,
        const.DATA_HEALTH_ACTIVITY_CATEGORY: category,
        const.DATA_HEALTH_ACTIVITY_DURATION: duration,
        const.DATA_HEALTH_ACTIVITY_DESCRIPTION: description,
        const.DATA_HEALTH_ACTIVITY_ICON: icon,
        const.DATA_HEALTH_ACTIVITY_IS_POSITIVE: health_change > 0,
    }


HEALTH_ACTIVITY_DEFINITIONS: tuple[HealthActivityData, ...] = (
    # Positive
    _activity(
        "meditation",
        "10-min Meditation",
        15,
        5,
        "mental",
        10,
        "Calm your mind and reduce stress",
        "mdi:meditation",
    ),
    _activity(
        "nature_walk",
        "Nature Walk",
        10,
        5,
        "physical",
        20,
        "Get fresh air and gentle movement",
        "mdi:walk",
    ),
    _activity(
        "good_sleep",
        "Full Night Sleep",
        20,
        10,
        "physical",
        480,
        "7-8 hours of quality sleep",
        "mdi:sleep",
    ),
    _activity(
        "exercise",
        "Exercise Session",
        15,
        8,
        "physical",
        30,
        "Any form of physical exercise",
        "mdi:arm-flex",
    ),
    _activity(
        "social_connection",
        "Quality Social Time",
        12,
        7,
        "social",
        60,
        "Meaningful conversation with someone",
        "mdi:account-group",
    ),
    _activity(
        "creative_activity",
        "Creative Expression",
        10,
        7,
        "creative",
        30,
        "Art, music, writing, or crafts",
        "mdi:palette",
    ),
    _activity(
        "healthy_meal",
        "Nutritious Meal",
        8,
        3,
        "nutrition",
        15,
        "Balanced, wholesome food",
        "mdi:food-apple",
    ),
    _activity(
        "learning",
        "Learning Session",
        10,
        8,
        "mental",
        45,
        "Engaging with new knowledge",
        "mdi:book-open-page-variant",
    ),
    # Negative
    _activity(
        "social_media_binge",
        "Social Media Binge",
        -8,
        -5,
        "mental",
        60,
        "Extended mindless scrolling",
        "mdi:cellphone",
    ),
    _activity(
        "poor_sleep",
        "Poor Sleep Night",
        -15,
        -10,
        "physical",
        0,
        "Less than 5 hours or restless sleep",
        "mdi:sleep-off",
    ),
    _activity(
        "junk_food",
        "Junk Food Binge",
        -5,
        -3,
        "nutrition",
        0,
        "Excessive processed or sugary food",
        "mdi:food",
    ),
    _activity(
        "isolation",
        "Social Isolation",
        -10,
        -5,
        "social",
        0,
        "Avoiding social connections",
        "mdi:account-off",
    ),
    _activity(
        "overwork",
        "Overworking",
        -12,
        -7,
        "mental",
        0,
        "Working beyond healthy limits",
        "mdi:briefcase-clock",
    ),
    _activity(
        "procrastination_spiral",
        "Procrastination Spiral",
        -8,
        -5,
        "mental",
        0,
        "Avoiding important tasks",
        "mdi:timer-sand",
    ),
)
