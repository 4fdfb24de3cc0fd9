"""Unit tests for StatisticsEngine - lifetime counters and journal analytics.

Test Categories:
- Lifetime counter recording
- Journal statistics (windows, mood, savings, streaks)
- Insight priority
- Entry search
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from questkeeper import const, data_builders as db
from questkeeper.engines.statistics_engine import StatisticsEngine

NOW = datetime(2026, 3, 11, 12, 0, tzinfo=UTC)


def journal_with(journal_type: str, entries: list[tuple[int, dict[str, Any]]]) -> Any:
    """Build a journal holding one entry per (days_ago, fields) pair."""
    journal = db.build_journal(
        {const.DATA_JOURNAL_NAME: "Test", const.DATA_JOURNAL_TYPE: journal_type},
        now=NOW - timedelta(days=60),
    )
    for days_ago, fields in entries:
        entry = db.build_journal_entry(
            journal_type,
            {const.DATA_ENTRY_CONTENT: "entry", **fields},
            now=NOW - timedelta(days=days_ago),
        )
        journal[const.DATA_JOURNAL_ENTRIES].append(entry)
    return journal


@pytest.fixture
def savings_journal() -> Any:
    return journal_with(
        const.JOURNAL_TYPE_SAVINGS,
        [
            (40, {const.DATA_ENTRY_AMOUNT: 5}),
            (10, {const.DATA_ENTRY_AMOUNT: 10}),
            (2, {const.DATA_ENTRY_AMOUNT: 25}),
            (1, {const.DATA_ENTRY_AMOUNT: 30}),
            (0, {const.DATA_ENTRY_AMOUNT: 50}),
        ],
    )


# =============================================================================
# Test: Lifetime Counters
# =============================================================================


class TestRecord:
    """Tests for StatisticsEngine.record."""

    def test_increments_counters(self) -> None:
        """Each listed counter is increased; others are untouched."""
        stats = StatisticsEngine.record(
            db.build_statistics(),
            {
                const.DATA_STATS_TOTAL_QUESTS_COMPLETED: 1,
                const.DATA_STATS_TOTAL_XP_EARNED: 50,
            },
        )
        stats = StatisticsEngine.record(stats, {const.DATA_STATS_TOTAL_XP_EARNED: 25})

        assert stats[const.DATA_STATS_TOTAL_QUESTS_COMPLETED] == 1
        assert stats[const.DATA_STATS_TOTAL_XP_EARNED] == 75
        assert stats[const.DATA_STATS_TOTAL_GOLD_EARNED] == 0

    def test_input_not_mutated(self) -> None:
        """record returns a new dict."""
        original = db.build_statistics()
        StatisticsEngine.record(original, {const.DATA_STATS_TOTAL_XP_EARNED: 5})
        assert original[const.DATA_STATS_TOTAL_XP_EARNED] == 0


# =============================================================================
# Test: Journal Statistics
# =============================================================================


class TestJournalStats:
    """Tests for journal_stats windows and aggregates."""

    def test_windows_and_totals(self, savings_journal: Any) -> None:
        """Today, week and month windows count the right entries."""
        stats = StatisticsEngine.journal_stats(savings_journal, NOW)

        assert stats["total_entries"] == 5
        assert stats["today_entries"] == 1
        assert stats["week_entries"] == 3
        # 40 days ago falls before 2026-02-11
        assert stats["month_entries"] == 4
        assert stats["total_saved"] == 120.0
        assert stats["avg_mood"] == 0.0

    def test_streaks(self, savings_journal: Any) -> None:
        """Consecutive days ending today form the current streak."""
        stats = StatisticsEngine.journal_stats(savings_journal, NOW)
        assert stats["current_streak"] == 3
        assert stats["longest_streak"] == 3

    def test_no_entry_today_breaks_current_streak(self) -> None:
        """Yesterday's run does not count as current."""
        journal = journal_with(
            const.JOURNAL_TYPE_GRATITUDE,
            [(2, {const.DATA_ENTRY_MOOD: 9}), (1, {const.DATA_ENTRY_MOOD: 8})],
        )
        stats = StatisticsEngine.journal_stats(journal, NOW)

        assert stats["current_streak"] == 0
        assert stats["longest_streak"] == 2
        assert stats["avg_mood"] == 8.5

    def test_savings_only_for_savings_journals(self) -> None:
        """Amounts are ignored outside savings journals."""
        journal = journal_with(
            const.JOURNAL_TYPE_IDEAS, [(0, {const.DATA_ENTRY_AMOUNT: 500})]
        )
        assert StatisticsEngine.journal_stats(journal, NOW)["total_saved"] == 0.0

    def test_empty_journal(self) -> None:
        """An empty journal reports zeros."""
        stats = StatisticsEngine.journal_stats(
            journal_with(const.JOURNAL_TYPE_GOALS, []), NOW
        )
        assert stats["total_entries"] == 0
        assert stats["current_streak"] == 0
        assert stats["longest_streak"] == 0

    def test_longest_streak_helper(self) -> None:
        """The longest run is found anywhere in the history."""
        start = NOW.date()
        days = {start - timedelta(days=n) for n in (0, 5, 6, 7, 8, 20)}
        assert StatisticsEngine.longest_streak(days) == 4
        assert StatisticsEngine.current_streak(days, start) == 1


# =============================================================================
# Test: Insights
# =============================================================================


class TestInsights:
    """Tests for prioritized insight messages."""

    def test_streak_and_savings(self, savings_journal: Any) -> None:
        """A 3-day streak comes before the savings message."""
        insights = StatisticsEngine.journal_insights(savings_journal, NOW)
        assert insights == [
            "You're on a 3-day streak. Keep it going!",
            "You've saved 120! Every bit counts toward your goals.",
        ]

    def test_long_streak_and_active_week(self) -> None:
        """Seven days in a row beats the short-streak message."""
        journal = journal_with(
            const.JOURNAL_TYPE_GOOD_DEEDS, [(n, {}) for n in range(7)]
        )
        insights = StatisticsEngine.journal_insights(journal, NOW)

        assert insights[0].startswith("Incredible! 7 days in a row.")
        assert "7 entries this week. Great consistency!" in insights
        assert not any("-day streak" in insight for insight in insights)

    def test_mood_and_missing_today(self) -> None:
        """High mood and an empty today both produce messages."""
        journal = journal_with(
            const.JOURNAL_TYPE_GRATITUDE,
            [(2, {const.DATA_ENTRY_MOOD: 9}), (1, {const.DATA_ENTRY_MOOD: 8})],
        )
        assert StatisticsEngine.journal_insights(journal, NOW) == [
            "Your mood ratings are excellent! Keep doing what you're doing.",
            "No entry yet today. Even one line makes a difference!",
        ]

    def test_top_insight(self) -> None:
        """top_insight returns the first message."""
        journal = journal_with(const.JOURNAL_TYPE_IDEAS, [])
        assert (
            StatisticsEngine.top_insight(journal, NOW)
            == "No entry yet today. Even one line makes a difference!"
        )

    def test_no_insight(self) -> None:
        """A quiet journal with today's entry has nothing to say."""
        journal = journal_with(const.JOURNAL_TYPE_IDEAS, [(0, {})])
        assert StatisticsEngine.top_insight(journal, NOW) is None


# =============================================================================
# Test: Search
# =============================================================================


class TestSearch:
    """Tests for cross-journal entry search."""

    @pytest.fixture
    def journals(self) -> list[Any]:
        walks = journal_with(
            const.JOURNAL_TYPE_GRATITUDE,
            [
                (
                    3,
                    {
                        const.DATA_ENTRY_TITLE: "Morning walk",
                        const.DATA_ENTRY_CONTENT: "Saw a heron by the river",
                        const.DATA_ENTRY_TAGS: ["nature"],
                    },
                )
            ],
        )
        savings = journal_with(
            const.JOURNAL_TYPE_SAVINGS,
            [
                (
                    1,
                    {
                        const.DATA_ENTRY_TITLE: "Budget",
                        const.DATA_ENTRY_CONTENT: "Skipped the cafe",
                        const.DATA_ENTRY_TAGS: ["Coffee"],
                    },
                ),
                (
                    0,
                    {
                        const.DATA_ENTRY_CONTENT: "Walked instead of a taxi",
                    },
                ),
            ],
        )
        return [walks, savings]

    def test_case_insensitive_tag_match(self, journals: list[Any]) -> None:
        """Tags match regardless of case."""
        results = StatisticsEngine.search_entries(journals, "COFFEE")
        assert [r[const.DATA_ENTRY_TITLE] for r in results] == ["Budget"]

    def test_matches_across_journals_newest_first(
        self, journals: list[Any]
    ) -> None:
        """Title and content matches from every journal, newest first."""
        results = StatisticsEngine.search_entries(journals, "walk")
        assert [r[const.DATA_ENTRY_CONTENT] for r in results] == [
            "Walked instead of a taxi",
            "Saw a heron by the river",
        ]

    def test_no_match(self, journals: list[Any]) -> None:
        """Unmatched queries return an empty list."""
        assert StatisticsEngine.search_entries(journals, "volcano") == []
