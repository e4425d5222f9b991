"""In-process store for questions, rounds and events.

Stands in for the hosted database: rounds reference questions by id, events
reference rounds by id, and positions are implied by list order. The whole
library can be written to and read from a JSON file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
import logging
from pathlib import Path
from uuid import uuid4

from pydantic import BaseModel, ValidationError

from trivia_app.core.models import Event, Question, QuestionDraft, Round

logger = logging.getLogger(__name__)


class EventNotFoundError(LookupError):
    """Raised when an event id is unknown."""


class RoundNotFoundError(LookupError):
    """Raised when a round id is unknown."""


class LibraryFormatError(Exception):
    """Raised when a library file cannot be read."""


@dataclass(slots=True)
class StoredQuestion:
    id: str
    text: str
    answer: str


@dataclass(slots=True)
class StoredRound:
    id: str
    title: str
    topic: str | None = None
    question_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class StoredEvent:
    id: str
    title: str
    date: date
    round_ids: list[str] = field(default_factory=list)


class _QuestionRecord(BaseModel):
    id: str
    text: str
    answer: str


class _RoundRecord(BaseModel):
    id: str
    title: str
    topic: str | None = None
    question_ids: list[str] = []


class _EventRecord(BaseModel):
    id: str
    title: str
    date: date
    round_ids: list[str] = []


class _LibraryFile(BaseModel):
    questions: list[_QuestionRecord] = []
    rounds: list[_RoundRecord] = []
    events: list[_EventRecord] = []


class TriviaRepository:
    """Manages stored questions, rounds and events."""

    def __init__(self) -> None:
        self._questions: dict[str, StoredQuestion] = {}
        self._rounds: dict[str, StoredRound] = {}
        self._events: dict[str, StoredEvent] = {}

    # --- Rounds ---

    def save_round(
        self,
        title: str,
        drafts: list[QuestionDraft],
        topic: str | None = None,
        round_id: str | None = None,
    ) -> str:
        """Create or replace a round and its questions; returns the round id.

        New drafts get an id assigned in place. Question positions follow the
        order of ``drafts``.
        """
        if round_id is None:
            stored_round = StoredRound(id=uuid4().hex, title=title, topic=topic)
            self._rounds[stored_round.id] = stored_round
        else:
            stored_round = self._get_stored_round(round_id)
            stored_round.title = title
            stored_round.topic = topic

        question_ids: list[str] = []
        for draft in drafts:
            if draft.is_new or draft.id is None:
                draft.id = uuid4().hex
            self._questions[draft.id] = StoredQuestion(id=draft.id, text=draft.text, answer=draft.answer)
            draft.is_new = False
            question_ids.append(draft.id)
        stored_round.question_ids = question_ids

        logger.info("Saved round %r with %d questions", title, len(question_ids))
        return stored_round.id

    def get_round(self, round_id: str) -> StoredRound:
        return self._get_stored_round(round_id)

    def get_round_drafts(self, round_id: str) -> list[QuestionDraft]:
        """Return the round's questions as editable (already saved) drafts."""
        stored_round = self._get_stored_round(round_id)
        return [
            QuestionDraft(text=question.text, answer=question.answer, id=question.id, is_new=False)
            for question in self._questions_of(stored_round)
        ]

    def list_rounds(self) -> list[StoredRound]:
        return list(self._rounds.values())

    def delete_round(self, round_id: str) -> None:
        stored_round = self._get_stored_round(round_id)
        del self._rounds[round_id]
        for event in self._events.values():
            event.round_ids = [rid for rid in event.round_ids if rid != round_id]
        still_used = {qid for other in self._rounds.values() for qid in other.question_ids}
        for question_id in stored_round.question_ids:
            if question_id not in still_used:
                self._questions.pop(question_id, None)

    # --- Events ---

    def create_event(self, title: str, event_date: date, round_ids: list[str]) -> str:
        for round_id in round_ids:
            self._get_stored_round(round_id)
        cleaned_title = title.strip()
        if not cleaned_title:
            raise ValueError("Event title must not be empty.")
        event = StoredEvent(id=uuid4().hex, title=cleaned_title, date=event_date, round_ids=list(round_ids))
        self._events[event.id] = event
        return event.id

    def get_event(self, event_id: str) -> StoredEvent:
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(f"Event {event_id} does not exist.")
        return event

    def list_events(self) -> list[StoredEvent]:
        return sorted(self._events.values(), key=lambda e: e.date)

    def delete_event(self, event_id: str) -> None:
        self.get_event(event_id)
        del self._events[event_id]

    def fetch_presentation_input(self, event_id: str) -> Event:
        """Return the event with rounds and questions in ascending position order."""
        stored_event = self.get_event(event_id)
        rounds: list[Round] = []
        for round_position, round_id in enumerate(stored_event.round_ids, start=1):
            stored_round = self._get_stored_round(round_id)
            questions = [
                Question(text=question.text, answer=question.answer, position=question_position)
                for question_position, question in enumerate(self._questions_of(stored_round), start=1)
            ]
            rounds.append(
                Round(
                    title=stored_round.title,
                    position=round_position,
                    questions=questions,
                    topic=stored_round.topic,
                )
            )
        return Event(title=stored_event.title, date=stored_event.date, rounds=rounds)

    # --- Library files ---

    def save_library(self, file_path: Path) -> None:
        library = _LibraryFile(
            questions=[_QuestionRecord(id=q.id, text=q.text, answer=q.answer) for q in self._questions.values()],
            rounds=[
                _RoundRecord(id=r.id, title=r.title, topic=r.topic, question_ids=list(r.question_ids))
                for r in self._rounds.values()
            ],
            events=[
                _EventRecord(id=e.id, title=e.title, date=e.date, round_ids=list(e.round_ids))
                for e in self._events.values()
            ],
        )
        file_path = file_path.resolve()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(library.model_dump_json(indent=2), encoding="utf-8")

    @classmethod
    def load_library(cls, file_path: Path) -> TriviaRepository:
        try:
            library = _LibraryFile.model_validate_json(file_path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise LibraryFormatError(f"{file_path} is not a valid trivia library: {exc}") from exc

        repository = cls()
        for record in library.questions:
            repository._questions[record.id] = StoredQuestion(id=record.id, text=record.text, answer=record.answer)
        for record in library.rounds:
            missing = [qid for qid in record.question_ids if qid not in repository._questions]
            if missing:
                raise LibraryFormatError(f"Round {record.title!r} references unknown questions: {missing}")
            repository._rounds[record.id] = StoredRound(
                id=record.id, title=record.title, topic=record.topic, question_ids=list(record.question_ids)
            )
        for record in library.events:
            missing = [rid for rid in record.round_ids if rid not in repository._rounds]
            if missing:
                raise LibraryFormatError(f"Event {record.title!r} references unknown rounds: {missing}")
            repository._events[record.id] = StoredEvent(
                id=record.id, title=record.title, date=record.date, round_ids=list(record.round_ids)
            )
        logger.info(
            "Loaded library %s: %d rounds, %d events", file_path, len(repository._rounds), len(repository._events)
        )
        return repository

    def _get_stored_round(self, round_id: str) -> StoredRound:
        stored_round = self._rounds.get(round_id)
        if stored_round is None:
            raise RoundNotFoundError(f"Round {round_id} does not exist.")
        return stored_round

    def _questions_of(self, stored_round: StoredRound) -> list[StoredQuestion]:
        return [self._questions[question_id] for question_id in stored_round.question_ids]
