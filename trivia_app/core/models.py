"""Domain models for the trivia application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar, Union


@dataclass(slots=True)
class Question:
    """A single trivia question with its answer."""

    text: str
    answer: str
    position: int = 1


@dataclass(slots=True)
class Round:
    """Titled group of questions, ordered by position within an event."""

    title: str
    position: int
    questions: list[Question] = field(default_factory=list)
    topic: str | None = None


@dataclass(slots=True)
class Event:
    """A trivia night: a title, a date and its ordered rounds."""

    title: str
    date: date | str
    rounds: list[Round] = field(default_factory=list)


@dataclass(slots=True)
class QuestionDraft:
    """Unsaved question/answer pair produced while authoring a round."""

    text: str
    answer: str
    id: str | None = None
    is_new: bool = True


@dataclass(frozen=True, slots=True)
class CoverSlide:
    kind: ClassVar[str] = "cover"

    title: str
    date: str

    @property
    def round_number(self) -> int | None:
        return None


@dataclass(frozen=True, slots=True)
class RoundIntroSlide:
    kind: ClassVar[str] = "round-intro"

    round_number: int
    round_title: str


@dataclass(frozen=True, slots=True)
class QuestionSlide:
    kind: ClassVar[str] = "question"

    round_number: int
    question_number: int
    question_text: str
    answer: str


Slide = Union[CoverSlide, RoundIntroSlide, QuestionSlide]


@dataclass(frozen=True, slots=True)
class RoundInfo:
    """Navigation metadata for one round of a slide deck."""

    number: int
    title: str
    start_index: int
    question_count: int


@dataclass(frozen=True, slots=True)
class PresentationState:
    """Cursor, review mode and reveal flag of a running presentation."""

    current_slide: int = 0
    reviewing_round: int | None = None
    answer_revealed: bool = False
