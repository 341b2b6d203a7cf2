"""Daily reminder and welcome message composition.

Only the text is built here. Delivering the reminder is up to the host
platform.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.random import PCG64DXSM, Generator

from dottime.config.schema import NotificationSettings
from dottime.core.timecalc import TimeData

QUOTES: tuple[str, ...] = (
    "Make today count. You only have so many.",
    "Every day is a gift. Use it wisely.",
    "Time is your most valuable currency.",
    "The days are long but the years are short.",
    "Don't count the days, make the days count.",
    "Your time is limited. Don't waste it living someone else's life.",
    "Yesterday is gone. Tomorrow is not promised. Today is yours.",
    "The best time to start was yesterday. The next best time is now.",
    "Life is what happens when you're busy making other plans.",
    "Time you enjoy wasting is not wasted time.",
    "Seize the day. Every moment matters.",
    "You are exactly where you need to be.",
    "Progress, not perfection.",
    "Today is the youngest you'll ever be.",
    "Be present. Be grateful. Be alive.",
    "Small steps lead to big changes.",
    "You have more time than you think. Use it.",
    "This moment is all you have. Make it beautiful.",
    "Breathe. You're doing better than you know.",
    "The dots behind you are proof you've made it this far.",
    "Each day is a new dot. Fill it with intention.",
    "Your future self will thank you for what you do today.",
    "Life isn't about waiting for the storm to pass...",
    "Every sunrise is an invitation to brighten someone's day.",
    "You are the author of your own story.",
)

WELCOME_MESSAGES: tuple[str, ...] = (
    "Welcome back",
    "Your time matters",
    "Make today count",
    "Keep going",
    "You've got this",
    "Stay focused",
    "Every day is a gift",
    "Carpe diem",
    "Seize the moment",
    "Time is precious",
)


@dataclass(frozen=True, slots=True)
class Reminder:
    """A daily reminder ready to hand to a notification scheduler."""

    title: str
    body: str
    hour: int
    minute: int


def make_rng(seed: int | None = None) -> Generator:
    """Create a numpy Generator; seeded runs pick the same messages."""
    return Generator(PCG64DXSM(seed))


def random_quote(rng: Generator) -> str:
    return QUOTES[int(rng.integers(len(QUOTES)))]


def random_welcome(rng: Generator) -> str:
    return WELCOME_MESSAGES[int(rng.integers(len(WELCOME_MESSAGES)))]


def reminder_title(time_data: TimeData) -> str:
    """Headline such as ``"20 days left this month"``."""
    return f"{time_data.remaining_units} {time_data.label}".strip()


def build_daily_reminder(
    time_data: TimeData,
    settings: NotificationSettings,
    quote: str,
) -> Reminder:
    """Compose the daily reminder for the given period summary."""
    return Reminder(
        title=reminder_title(time_data),
        body=quote,
        hour=settings.hour,
        minute=settings.minute,
    )
