"""Default journals, one per journal type."""

from __future__ import annotations

from typing import Any

from .. import const

DEFAULT_JOURNALS: tuple[dict[str, Any], ...] = (
    {
        const.DATA_JOURNAL_ID: "gratitude_journal",
        const.DATA_JOURNAL_NAME: "Gratitude Journal",
        const.DATA_JOURNAL_TYPE: const.JOURNAL_TYPE_GRATITUDE,
        const.DATA_JOURNAL_DESCRIPTION: (
            "Daily gratitude practice for better mental health"
        ),
    },
    {
        const.DATA_JOURNAL_ID: "good_deeds_log",
        const.DATA_JOURNAL_NAME: "Good Deeds Log",
        const.DATA_JOURNAL_TYPE: const.JOURNAL_TYPE_GOOD_DEEDS,
        const.DATA_JOURNAL_DESCRIPTION: "Track acts of kindness and helping others",
    },
    {
        const.DATA_JOURNAL_ID: "savings_tracker",
        const.DATA_JOURNAL_NAME: "Savings Tracker",
        const.DATA_JOURNAL_TYPE: const.JOURNAL_TYPE_SAVINGS,
        const.DATA_JOURNAL_DESCRIPTION: "Track money saved and financial goals",
    },
    {
        const.DATA_JOURNAL_ID: "ideas_notebook",
        const.DATA_JOURNAL_NAME: "Ideas & Plans",
        const.DATA_JOURNAL_TYPE: const.JOURNAL_TYPE_IDEAS,
        const.DATA_JOURNAL_DESCRIPTION: "Capture creative ideas and future plans",
    },
    {
        const.DATA_JOURNAL_ID: "reflection_journal",
        const.DATA_JOURNAL_NAME: "Daily Reflection",
        const.DATA_JOURNAL_TYPE: const.JOURNAL_TYPE_REFLECTION,
        const.DATA_JOURNAL_DESCRIPTION: "Look back on the day and how it felt",
    },
    {
        const.DATA_JOURNAL_ID: "goals_journal",
        const.DATA_JOURNAL_NAME: "Goals",
        const.DATA_JOURNAL_TYPE: const.JOURNAL_TYPE_GOALS,
        const.DATA_JOURNAL_DESCRIPTION: "Write down goals and track how they evolve",
    },
)
