"""Tests for the voluptuous settings and payload schemas.

Test Categories:
- Settings defaults and normalization
- Quest payloads (coercion, whole numbers, ranges, tags)
- Strict payloads (extra keys, booleans)
- Action registry coverage
"""

from __future__ import annotations

import pytest
import voluptuous as vol

from questkeeper import const
from questkeeper.schemas import (
    ACTION_SCHEMAS,
    ACTIVATE_BONUS_XP_SCHEMA,
    ADD_JOURNAL_ENTRY_SCHEMA,
    ADD_QUEST_SCHEMA,
    ADD_STREAK_CHALLENGE_SCHEMA,
    CHECK_IN_STREAK_CHALLENGE_SCHEMA,
    SETTINGS_SCHEMA,
    SPEND_GOLD_SCHEMA,
)

# =============================================================================
# Test: Settings
# =============================================================================


class TestSettingsSchema:
    """Tests for SETTINGS_SCHEMA."""

    def test_defaults(self) -> None:
        """An empty mapping gets every default."""
        settings = SETTINGS_SCHEMA({})

        assert settings[const.CONF_TIMEZONE] == "UTC"
        assert settings[const.CONF_BASE_XP_TO_NEXT_LEVEL] == 100
        assert settings[const.CONF_XP_CURVE_MULTIPLIER] == 1.2
        assert settings[const.CONF_WEEKLY_RESET_MODE] == const.WEEKLY_RESET_MODE_ELAPSED
        assert settings[const.CONF_WEEK_START] == "monday"

    def test_week_start_lowercased(self) -> None:
        """Weekday names are case-insensitive."""
        settings = SETTINGS_SCHEMA({const.CONF_WEEK_START: "Sunday"})
        assert settings[const.CONF_WEEK_START] == "sunday"

    def test_known_timezone(self) -> None:
        """IANA names are accepted."""
        settings = SETTINGS_SCHEMA({const.CONF_TIMEZONE: "Europe/Warsaw"})
        assert settings[const.CONF_TIMEZONE] == "Europe/Warsaw"

    @pytest.mark.parametrize(
        "settings",
        [
            {const.CONF_TIMEZONE: "Mars/Olympus_Mons"},
            {const.CONF_XP_CURVE_MULTIPLIER: 0.5},
            {const.CONF_WEEKLY_RESET_MODE: "monthly"},
            {const.CONF_WEEK_START: "someday"},
            {"unknown_option": True},
        ],
    )
    def test_invalid_settings(self, settings: dict[str, object]) -> None:
        """Bad values and unknown keys are rejected."""
        with pytest.raises(vol.Invalid):
            SETTINGS_SCHEMA(settings)


# =============================================================================
# Test: Quest Payloads
# =============================================================================


class TestQuestPayloads:
    """Tests for ADD_QUEST_SCHEMA."""

    def test_coerces_numbers_and_strips_text(self) -> None:
        """String numbers are coerced; text is stripped."""
        payload = ADD_QUEST_SCHEMA(
            {
                const.DATA_QUEST_TITLE: "  Plan trip ",
                const.DATA_QUEST_XP_REWARD: "40",
                const.DATA_QUEST_DIFFICULTY_LEVEL: "3",
            }
        )
        assert payload[const.DATA_QUEST_TITLE] == "Plan trip"
        assert payload[const.DATA_QUEST_XP_REWARD] == 40
        assert payload[const.DATA_QUEST_DIFFICULTY_LEVEL] == 3

    def test_single_tag_wrapped(self) -> None:
        """A lone tag becomes a list."""
        payload = ADD_QUEST_SCHEMA({const.DATA_QUEST_TAGS: "travel"})
        assert payload[const.DATA_QUEST_TAGS] == ["travel"]

    def test_gold_may_be_none(self) -> None:
        """None requests computed gold."""
        payload = ADD_QUEST_SCHEMA({const.DATA_QUEST_GOLD_REWARD: None})
        assert payload[const.DATA_QUEST_GOLD_REWARD] is None

    @pytest.mark.parametrize(
        "payload",
        [
            {const.DATA_QUEST_TITLE: "   "},
            {const.DATA_QUEST_XP_REWARD: 0},
            {const.DATA_QUEST_DIFFICULTY_LEVEL: 6},
            {const.DATA_QUEST_TYPE: "epic"},
            {const.DATA_QUEST_TAGS: 5},
            {"status": "completed"},
        ],
    )
    def test_rejected(self, payload: dict[str, object]) -> None:
        """Out-of-range values and unknown keys are rejected."""
        with pytest.raises(vol.Invalid):
            ADD_QUEST_SCHEMA(payload)

    @pytest.mark.parametrize(
        "payload",
        [
            {const.DATA_QUEST_DIFFICULTY_LEVEL: 3.7},
            {const.DATA_QUEST_ESTIMATED_TIME: 0.9},
            {const.DATA_QUEST_XP_REWARD: "12.5"},
            {const.DATA_QUEST_DIFFICULTY_LEVEL: True},
        ],
    )
    def test_fractional_numbers_rejected(self, payload: dict[str, object]) -> None:
        """Fractions are rejected instead of truncated."""
        with pytest.raises(vol.Invalid):
            ADD_QUEST_SCHEMA(payload)

    def test_whole_floats_accepted(self) -> None:
        """A float with no fractional part is a valid integer."""
        payload = ADD_QUEST_SCHEMA(
            {
                const.DATA_QUEST_DIFFICULTY_LEVEL: 4.0,
                const.DATA_QUEST_ESTIMATED_TIME: "30.0",
            }
        )
        assert payload[const.DATA_QUEST_DIFFICULTY_LEVEL] == 4
        assert payload[const.DATA_QUEST_ESTIMATED_TIME] == 30


# =============================================================================
# Test: Other Payloads
# =============================================================================


class TestOtherPayloads:
    """Tests for strictness of the remaining payload schemas."""

    def test_check_in_requires_real_bool(self) -> None:
        """The string "yes" is not coerced to True."""
        with pytest.raises(vol.Invalid):
            CHECK_IN_STREAK_CHALLENGE_SCHEMA(
                {
                    const.FIELD_CHALLENGE_ID: "no_sugar_challenge",
                    const.FIELD_SUCCESS: "yes",
                }
            )

    def test_spend_gold_must_be_positive(self) -> None:
        """Zero and negative spends are rejected."""
        with pytest.raises(vol.Invalid):
            SPEND_GOLD_SCHEMA({const.FIELD_AMOUNT: 0})

    def test_bonus_defaults_reason(self) -> None:
        """The bonus reason defaults to an empty string."""
        payload = ACTIVATE_BONUS_XP_SCHEMA(
            {const.FIELD_MULTIPLIER: "1.5", const.FIELD_DURATION: 30}
        )
        assert payload[const.FIELD_MULTIPLIER] == 1.5
        assert payload[const.FIELD_REASON] == ""

    def test_bonus_multiplier_at_least_one(self) -> None:
        """A bonus cannot reduce XP."""
        with pytest.raises(vol.Invalid):
            ACTIVATE_BONUS_XP_SCHEMA(
                {const.FIELD_MULTIPLIER: 0.5, const.FIELD_DURATION: 30}
            )

    def test_challenge_milestone_defaults(self) -> None:
        """Milestones get zero rewards and an empty title by default."""
        payload = ADD_STREAK_CHALLENGE_SCHEMA(
            {
                const.DATA_CHALLENGE_NAME: "No Phone In Bed",
                const.DATA_CHALLENGE_REWARDS: [{const.DATA_MILESTONE_DAYS: 5}],
            }
        )
        milestone = payload[const.DATA_CHALLENGE_REWARDS][0]
        assert milestone[const.DATA_MILESTONE_XP_REWARD] == 0
        assert milestone[const.DATA_MILESTONE_GOLD_REWARD] == 0
        assert milestone[const.DATA_MILESTONE_TITLE] == ""

    def test_journal_entry_mood_range(self) -> None:
        """Mood must be 1-10."""
        with pytest.raises(vol.Invalid):
            ADD_JOURNAL_ENTRY_SCHEMA(
                {
                    const.FIELD_JOURNAL_ID: "gratitude_journal",
                    const.DATA_ENTRY_CONTENT: "Good coffee",
                    const.DATA_ENTRY_MOOD: 0,
                }
            )

    def test_every_action_has_a_schema(self) -> None:
        """The registry covers all dispatchable actions."""
        assert set(ACTION_SCHEMAS) == {
            value
            for name, value in vars(const).items()
            if name.startswith("ACTION_") and isinstance(value, str)
        }
