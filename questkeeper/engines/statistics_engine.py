"""Statistics Engine - Lifetime counters and journal analytics.

This engine provides stateless, pure Python functions for:
- Recording lifetime statistics counters after applied actions
- Deriving journal statistics (entry counts, mood, savings, streaks)
- Prioritized insight messages built from those statistics
- Entry search across journals

Journal analytics are read-only: they are computed on demand by read paths
and never during mutation.

Windows (local calendar, ``now`` passed in):
- today: entries whose local date equals today's
- week: entries at or after ``now - 7 days``
- month: entries at or after ``now - 1 month`` (dateutil relativedelta)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from .. import const
from ..utils.dt_utils import dt_parse, local_date
from ..utils.math_utils import round_points

if TYPE_CHECKING:
    from ..type_defs import JournalEntryData, JournalStats, StatisticsData


# Insight thresholds
INSIGHT_LONG_STREAK_DAYS = 7
INSIGHT_STREAK_DAYS = 3
INSIGHT_HIGH_MOOD = 8
INSIGHT_SAVINGS_MILESTONE = 100
INSIGHT_ACTIVE_WEEK_ENTRIES = 5


class StatisticsEngine:
    """Pure logic engine for statistics and journal analytics.

    All methods are static - no instance state.
    """

    # =========================================================================
    # LIFETIME COUNTERS
    # =========================================================================

    @staticmethod
    def record(
        statistics: StatisticsData, increments: Mapping[str, int]
    ) -> StatisticsData:
        """Return statistics with each counter in ``increments`` added.

        Example:
            record(stats, {"total_quests_completed": 1, "total_xp_earned": 50})
        """
        updated: StatisticsData = {**statistics}
        for key, value in increments.items():
            updated[key] = updated.get(key, 0) + value  # type: ignore[literal-required]
        return updated

    # =========================================================================
    # JOURNAL STATISTICS
    # =========================================================================

    @staticmethod
    def _entry_moments(
        entries: Iterable[Mapping[str, Any]],
    ) -> list[datetime]:
        moments = []
        for entry in entries:
            moment = dt_parse(entry.get(const.DATA_ENTRY_DATE))
            if moment is not None:
                moments.append(moment)
        return moments

    @staticmethod
    def current_streak(days: set[date], today: date) -> int:
        """Count consecutive days ending today that have at least one entry.

        Returns 0 when there is no entry today.
        """
        streak = 0
        day = today
        while day in days:
            streak += 1
            day -= timedelta(days=1)
        return streak

    @staticmethod
    def longest_streak(days: set[date]) -> int:
        """Return the longest run of consecutive dates in ``days``."""
        if not days:
            return 0
        ordered = sorted(days)
        longest = current = 1
        for previous, day in zip(ordered, ordered[1:]):
            if day - previous == timedelta(days=1):
                current += 1
                longest = max(longest, current)
            else:
                current = 1
        return longest

    @staticmethod
    def journal_stats(
        journal: Mapping[str, Any],
        now: datetime,
        tz: ZoneInfo | None = None,
    ) -> JournalStats:
        """Derive read-only statistics from a journal's entries.

        Args:
            journal: Journal dict owning its entries list
            now: Reference moment
            tz: Zone in which calendar dates are taken

        Returns:
            JournalStats TypedDict
        """
        entries: list[JournalEntryData] = journal.get(const.DATA_JOURNAL_ENTRIES, [])
        moments = StatisticsEngine._entry_moments(entries)
        today = local_date(now, tz)
        days = {local_date(moment, tz) for moment in moments}

        week_start = now - timedelta(days=const.ANALYTICS_WEEK_DAYS)
        month_start = now - relativedelta(months=1)

        moods = [
            entry[const.DATA_ENTRY_MOOD]
            for entry in entries
            if entry.get(const.DATA_ENTRY_MOOD) is not None
        ]
        avg_mood = round_points(sum(moods) / len(moods), 1) if moods else 0.0

        total_saved = 0.0
        if journal.get(const.DATA_JOURNAL_TYPE) == const.JOURNAL_TYPE_SAVINGS:
            total_saved = round_points(
                sum(entry.get(const.DATA_ENTRY_AMOUNT) or 0 for entry in entries)
            )

        return {
            "total_entries": len(entries),
            "today_entries": sum(1 for m in moments if local_date(m, tz) == today),
            "week_entries": sum(1 for m in moments if m >= week_start),
            "month_entries": sum(1 for m in moments if m >= month_start),
            "avg_mood": avg_mood,
            "total_saved": total_saved,
            "current_streak": StatisticsEngine.current_streak(days, today),
            "longest_streak": StatisticsEngine.longest_streak(days),
        }

    # =========================================================================
    # INSIGHTS
    # =========================================================================

    @staticmethod
    def journal_insights(
        journal: Mapping[str, Any],
        now: datetime,
        tz: ZoneInfo | None = None,
    ) -> list[str]:
        """Return every matching insight message, highest priority first.

        Priority: 7+ day streak, 3+ day streak, average mood >= 8,
        savings >= 100, 5+ entries this week, nothing written today.
        """
        stats = StatisticsEngine.journal_stats(journal, now, tz)
        insights: list[str] = []

        if stats["current_streak"] >= INSIGHT_LONG_STREAK_DAYS:
            insights.append(
                f"Incredible! {stats['current_streak']} days in a row. "
                "This is a real habit now."
            )
        elif stats["current_streak"] >= INSIGHT_STREAK_DAYS:
            insights.append(
                f"You're on a {stats['current_streak']}-day streak. Keep it going!"
            )

        if stats["avg_mood"] >= INSIGHT_HIGH_MOOD:
            insights.append(
                "Your mood ratings are excellent! Keep doing what you're doing."
            )

        if (
            journal.get(const.DATA_JOURNAL_TYPE) == const.JOURNAL_TYPE_SAVINGS
            and stats["total_saved"] >= INSIGHT_SAVINGS_MILESTONE
        ):
            insights.append(
                f"You've saved {stats['total_saved']:g}! "
                "Every bit counts toward your goals."
            )

        if stats["week_entries"] >= INSIGHT_ACTIVE_WEEK_ENTRIES:
            insights.append(
                f"{stats['week_entries']} entries this week. Great consistency!"
            )

        if stats["today_entries"] == 0:
            insights.append("No entry yet today. Even one line makes a difference!")

        return insights

    @staticmethod
    def top_insight(
        journal: Mapping[str, Any],
        now: datetime,
        tz: ZoneInfo | None = None,
    ) -> str | None:
        """Return the highest-priority insight, or None."""
        insights = StatisticsEngine.journal_insights(journal, now, tz)
        return insights[0] if insights else None

    # =========================================================================
    # SEARCH
    # =========================================================================

    @staticmethod
    def search_entries(
        journals: Iterable[Mapping[str, Any]], query: str
    ) -> list[JournalEntryData]:
        """Case-insensitive search over entry title, content and tags.

        Returns:
            Matching entries across all journals, newest first
        """
        needle = query.lower()
        results: list[JournalEntryData] = []
        for journal in journals:
            for entry in journal.get(const.DATA_JOURNAL_ENTRIES, []):
                haystack = [
                    entry.get(const.DATA_ENTRY_TITLE, ""),
                    entry.get(const.DATA_ENTRY_CONTENT, ""),
                    *entry.get(const.DATA_ENTRY_TAGS, []),
                ]
                if any(needle in text.lower() for text in haystack):
                    results.append(entry)
        results.sort(
            key=lambda e: dt_parse(e.get(const.DATA_ENTRY_DATE))
            or datetime.min.replace(tzinfo=ZoneInfo(const.DEFAULT_TIMEZONE)),
            reverse=True,
        )
        return results
