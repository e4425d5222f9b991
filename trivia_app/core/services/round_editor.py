"""Service for the editing session of a single round."""

from __future__ import annotations

from typing import Literal

from trivia_app.core.models import QuestionDraft
from trivia_app.core.question_text_parser import parse_question_text, serialize_drafts
from trivia_app.core.services.trivia_repository import TriviaRepository

DraftField = Literal["text", "answer"]
MoveDirection = Literal["up", "down"]


class DraftValidationError(ValueError):
    """Raised when a round is not complete enough to be saved."""


class RoundEditor:
    """Holds the drafts of one round until they are saved or abandoned."""

    def __init__(self, title: str = "", topic: str = "", round_id: str | None = None) -> None:
        self.title = title
        self.topic = topic
        self.round_id = round_id
        self._drafts: list[QuestionDraft] = []
        self._dirty: bool = False

    @classmethod
    def for_existing_round(cls, repository: TriviaRepository, round_id: str) -> RoundEditor:
        stored_round = repository.get_round(round_id)
        editor = cls(title=stored_round.title, topic=stored_round.topic or "", round_id=round_id)
        editor._drafts = repository.get_round_drafts(round_id)
        return editor

    def get_drafts(self) -> list[QuestionDraft]:
        return list(self._drafts)

    def get_question_count(self) -> int:
        return len(self._drafts)

    def has_unsaved_changes(self) -> bool:
        return self._dirty

    def set_details(self, title: str, topic: str) -> None:
        if (title, topic) != (self.title, self.topic):
            self.title = title
            self.topic = topic
            self._dirty = True

    def add_question(self) -> QuestionDraft:
        draft = QuestionDraft(text="", answer="", is_new=True)
        self._drafts.append(draft)
        self._dirty = True
        return draft

    def update_question(self, index: int, field: DraftField, value: str) -> None:
        draft = self._draft_at(index)
        if field == "text":
            draft.text = value
        elif field == "answer":
            draft.answer = value
        else:
            raise ValueError(f"Unknown draft field {field!r}.")
        self._dirty = True

    def remove_question(self, index: int) -> None:
        self._draft_at(index)
        self._drafts.pop(index)
        self._dirty = True

    def move_question(self, index: int, direction: MoveDirection) -> int:
        """Swap a draft with its neighbour; returns the draft's new index."""
        self._draft_at(index)
        if direction not in ("up", "down"):
            raise ValueError(f"Unknown move direction {direction!r}.")
        target = index - 1 if direction == "up" else index + 1
        if not 0 <= target < len(self._drafts):
            return index
        self._drafts[index], self._drafts[target] = self._drafts[target], self._drafts[index]
        self._dirty = True
        return target

    def load_text(self, text: str, replace: bool = True) -> int:
        """Parse authored text into drafts; returns how many were found."""
        return self.load_drafts(parse_question_text(text), replace=replace)

    def load_drafts(self, drafts: list[QuestionDraft], replace: bool = True) -> int:
        if replace:
            self._drafts = list(drafts)
        else:
            self._drafts.extend(drafts)
        self._dirty = True
        return len(drafts)

    def to_text(self) -> str:
        return serialize_drafts(self._drafts)

    def validate(self) -> None:
        if not self.title.strip():
            raise DraftValidationError("Round title is required")
        if not self._drafts:
            raise DraftValidationError("Add at least one question")
        for draft in self._drafts:
            if not draft.text.strip() or not draft.answer.strip():
                raise DraftValidationError("All questions must have text and an answer")

    def save(self, repository: TriviaRepository) -> str:
        """Validate and persist the round; returns its id."""
        self.validate()
        self.round_id = repository.save_round(
            title=self.title.strip(),
            drafts=self._drafts,
            topic=self.topic.strip() or None,
            round_id=self.round_id,
        )
        self._dirty = False
        return self.round_id

    def _draft_at(self, index: int) -> QuestionDraft:
        if not 0 <= index < len(self._drafts):
            raise IndexError(f"Question index {index} out of range")
        return self._drafts[index]
