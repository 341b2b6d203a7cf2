"""Tests for reminder composition."""

from __future__ import annotations

from datetime import date

from dottime.config.schema import NotificationSettings
from dottime.core.timecalc import TimeData, compute_time_data
from dottime.notify.reminders import (
    QUOTES,
    WELCOME_MESSAGES,
    build_daily_reminder,
    make_rng,
    random_quote,
    random_welcome,
    reminder_title,
)


class TestMessages:
    def test_counts(self) -> None:
        assert len(QUOTES) == 25
        assert len(WELCOME_MESSAGES) == 10

    def test_seeded_choice_is_reproducible(self) -> None:
        assert random_quote(make_rng(7)) == random_quote(make_rng(7))
        assert random_welcome(make_rng(7)) == random_welcome(make_rng(7))

    def test_choices_come_from_lists(self) -> None:
        rng = make_rng(0)
        for _ in range(50):
            assert random_quote(rng) in QUOTES
            assert random_welcome(rng) in WELCOME_MESSAGES


class TestDailyReminder:
    def test_month_title(self) -> None:
        td = compute_time_data("month", 1990, date(2024, 2, 10))
        assert reminder_title(td) == "20 days left this month"

    def test_build(self) -> None:
        td = compute_time_data("year", 1990, date(2023, 1, 1))
        settings = NotificationSettings(enabled=True, hour=9, minute=5)
        reminder = build_daily_reminder(td, settings, QUOTES[0])
        assert reminder.title == "365 days left this year"
        assert reminder.body == QUOTES[0]
        assert (reminder.hour, reminder.minute) == (9, 5)

    def test_empty_label(self) -> None:
        assert reminder_title(TimeData.empty()) == "0"
