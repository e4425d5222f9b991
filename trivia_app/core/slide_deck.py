"""Flatten an event into the linear slide sequence shown during a presentation."""

from __future__ import annotations

from datetime import date
from typing import NamedTuple

from trivia_app.core.models import (
    CoverSlide,
    Event,
    QuestionSlide,
    RoundInfo,
    RoundIntroSlide,
    Slide,
)

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class SlideDeck(NamedTuple):
    """Immutable slides plus the per-round index into them."""

    slides: tuple[Slide, ...]
    rounds: tuple[RoundInfo, ...]

    def find_round(self, number: int) -> RoundInfo:
        for info in self.rounds:
            if info.number == number:
                return info
        raise KeyError(number)

    def has_round(self, number: int) -> bool:
        return any(info.number == number for info in self.rounds)

    @property
    def last_index(self) -> int:
        return len(self.slides) - 1


def build_slide_deck(event: Event) -> SlideDeck:
    """Build the cover, round-intro and question slides for an event.

    Rounds and questions must already be sorted by position; nothing here
    reorders or validates them.
    """
    slides: list[Slide] = [CoverSlide(title=event.title, date=format_event_date(event.date))]
    rounds: list[RoundInfo] = []

    for round_ in event.rounds:
        start_index = len(slides)
        slides.append(RoundIntroSlide(round_number=round_.position, round_title=round_.title))
        for question in round_.questions:
            slides.append(
                QuestionSlide(
                    round_number=round_.position,
                    question_number=question.position,
                    question_text=question.text,
                    answer=question.answer,
                )
            )
        rounds.append(
            RoundInfo(
                number=round_.position,
                title=round_.title,
                start_index=start_index,
                question_count=len(round_.questions),
            )
        )

    return SlideDeck(slides=tuple(slides), rounds=tuple(rounds))


def format_event_date(value: date | str) -> str:
    """Format an event date as e.g. ``Saturday, March 1, 2025``."""
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return f"{_WEEKDAYS[value.weekday()]}, {_MONTHS[value.month - 1]} {value.day}, {value.year}"
