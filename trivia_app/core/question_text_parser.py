"""Parse and write the numbered text format used to author trivia rounds.

Format (one block per question, blocks separated by a blank line):

    1. Question text. Additional lines until the answer line are treated
       as part of the question.
    Answer: answer text

    2. Which planet is known as the Red Planet?
    A) Venus B) Mars C) Jupiter D) Saturn
    Answer: Mars

The parser is a best-effort extractor: text before the first numbered line is
dropped, and a question without an ``Answer:`` line keeps an empty answer.
Completeness checks belong to whoever saves the drafts.

Architecture note:
    This is the same convention produced by AI assistants and by people
    pasting from documents, so saved content must stay readable by this
    parser. Numbering in the source is ignored; writing renumbers from 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from trivia_app.core.models import QuestionDraft

_ANSWER_KEYWORD = "answer:"
_DIGITS = "0123456789"


class QuestionImportError(Exception):
    """Raised when an authored text file yields no questions."""


@dataclass(slots=True)
class ImportedDrafts:
    """Container for drafts read from an authored text file."""

    source_path: Path
    drafts: list[QuestionDraft]


def parse_question_text(text: str) -> list[QuestionDraft]:
    """Split authored text into ordered question drafts."""
    drafts: list[QuestionDraft] = []
    question_lines: list[str] | None = None

    for raw_line in text.splitlines():
        line = raw_line.strip()

        numbered_rest = _strip_question_number(line)
        if numbered_rest is not None:
            if question_lines is not None:
                drafts.append(_make_draft(question_lines, ""))
            question_lines = [numbered_rest.strip()]
            continue

        if question_lines is None:
            continue

        if line[: len(_ANSWER_KEYWORD)].lower() == _ANSWER_KEYWORD:
            drafts.append(_make_draft(question_lines, line[len(_ANSWER_KEYWORD):].strip()))
            question_lines = None
            continue

        question_lines.append(line)

    if question_lines is not None:
        drafts.append(_make_draft(question_lines, ""))
    return drafts


def serialize_drafts(drafts: Iterable[QuestionDraft]) -> str:
    """Write drafts back to the canonical numbered text format."""
    blocks = [
        f"{number}. {draft.text}\nAnswer: {draft.answer}"
        for number, draft in enumerate(drafts, start=1)
    ]
    return "\n\n".join(blocks)


def load_drafts_from_file(file_path: Path) -> ImportedDrafts:
    text = file_path.read_text(encoding="utf-8")
    drafts = parse_question_text(text)
    if not drafts:
        raise QuestionImportError("File did not contain any numbered questions.")
    return ImportedDrafts(source_path=file_path, drafts=drafts)


def save_drafts_to_file(file_path: Path, drafts: list[QuestionDraft]) -> None:
    """Persist drafts to disk in the authored text format."""

    if not drafts:
        raise ValueError("Cannot export a round without questions.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_drafts(drafts) + "\n", encoding="utf-8")


def _strip_question_number(line: str) -> str | None:
    """Return the text after ``N.`` when the line opens a question block."""
    digit_count = 0
    while digit_count < len(line) and line[digit_count] in _DIGITS:
        digit_count += 1
    if digit_count == 0 or digit_count >= len(line) or line[digit_count] != ".":
        return None
    rest = line[digit_count + 1:]
    # "3.14 ..." is a number, not a question marker
    if rest[:1] and rest[0] in _DIGITS:
        return None
    return rest


def _make_draft(question_lines: list[str], answer: str) -> QuestionDraft:
    question_text = "\n".join(question_lines).strip()
    return QuestionDraft(text=question_text, answer=answer, is_new=True)
