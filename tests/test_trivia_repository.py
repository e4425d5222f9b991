"""
Unit Tests for the in-process trivia repository and library files
"""

import json
from datetime import date

import pytest

from trivia_app.core.models import QuestionDraft
from trivia_app.core.services.trivia_repository import (
    EventNotFoundError,
    LibraryFormatError,
    RoundNotFoundError,
    TriviaRepository,
)


def _drafts(*pairs):
    return [QuestionDraft(text=text, answer=answer) for text, answer in pairs]


@pytest.fixture
def repository():
    return TriviaRepository()


class TestRounds:
    """Tests for storing rounds."""

    def test_save_round_when_new_then_ids_assigned_to_drafts(self, repository):
        drafts = _drafts(("Q1?", "A1"), ("Q2?", "A2"))
        round_id = repository.save_round("Round", drafts)

        assert all(draft.id and not draft.is_new for draft in drafts)
        assert repository.get_round(round_id).question_ids == [draft.id for draft in drafts]

    def test_get_round_when_unknown_then_raises(self, repository):
        with pytest.raises(RoundNotFoundError):
            repository.get_round("missing")

    def test_delete_round_when_used_by_event_then_reference_pruned(self, repository):
        keep = repository.save_round("Keep", _drafts(("Q?", "A")))
        drop = repository.save_round("Drop", _drafts(("Q?", "A")))
        event_id = repository.create_event("Night", date(2025, 5, 1), [keep, drop])

        repository.delete_round(drop)
        assert repository.get_event(event_id).round_ids == [keep]
        assert [r.id for r in repository.list_rounds()] == [keep]


class TestEvents:
    """Tests for events and presentation input."""

    def test_create_event_when_round_unknown_then_raises(self, repository):
        with pytest.raises(RoundNotFoundError):
            repository.create_event("Night", date(2025, 5, 1), ["nope"])

    def test_create_event_when_title_blank_then_raises_value_error(self, repository):
        round_id = repository.save_round("R", _drafts(("Q?", "A")))
        with pytest.raises(ValueError):
            repository.create_event("   ", date(2025, 5, 1), [round_id])

    def test_list_events_when_several_then_sorted_by_date(self, repository):
        round_id = repository.save_round("R", _drafts(("Q?", "A")))
        repository.create_event("Later", date(2025, 6, 1), [round_id])
        repository.create_event("Sooner", date(2025, 1, 1), [round_id])
        assert [event.title for event in repository.list_events()] == ["Sooner", "Later"]

    def test_fetch_presentation_input_when_event_known_then_positions_ascending(self, repository):
        first = repository.save_round("First", _drafts(("A?", "a"), ("B?", "b")))
        second = repository.save_round("Second", _drafts(("C?", "c")), topic="Misc")
        event_id = repository.create_event("Night", date(2025, 5, 1), [second, first])

        event = repository.fetch_presentation_input(event_id)
        assert [(r.position, r.title) for r in event.rounds] == [(1, "Second"), (2, "First")]
        assert [(q.position, q.text) for q in event.rounds[1].questions] == [(1, "A?"), (2, "B?")]
        assert event.rounds[0].topic == "Misc"

    def test_fetch_presentation_input_when_unknown_then_not_found(self, repository):
        with pytest.raises(EventNotFoundError):
            repository.fetch_presentation_input("missing")

    def test_delete_event_when_known_then_removed(self, repository):
        round_id = repository.save_round("R", _drafts(("Q?", "A")))
        event_id = repository.create_event("Night", date(2025, 5, 1), [round_id])
        repository.delete_event(event_id)
        with pytest.raises(EventNotFoundError):
            repository.get_event(event_id)


class TestLibraryFiles:
    """Tests for save_library() and load_library()."""

    def test_load_library_when_saved_then_contents_restored(self, repository, tmp_path):
        round_id = repository.save_round("R", _drafts(("Q?", "A")), topic="T")
        event_id = repository.create_event("Night", date(2025, 5, 1), [round_id])
        path = tmp_path / "library.json"
        repository.save_library(path)

        loaded = TriviaRepository.load_library(path)
        assert loaded.get_event(event_id).date == date(2025, 5, 1)
        assert loaded.get_round(round_id).topic == "T"
        assert [(d.text, d.answer) for d in loaded.get_round_drafts(round_id)] == [("Q?", "A")]

    def test_load_library_when_not_json_then_format_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LibraryFormatError):
            TriviaRepository.load_library(path)

    def test_load_library_when_dangling_reference_then_format_error(self, tmp_path):
        path = tmp_path / "dangling.json"
        path.write_text(
            json.dumps({"rounds": [{"id": "r1", "title": "R", "question_ids": ["q-missing"]}]}),
            encoding="utf-8",
        )
        with pytest.raises(LibraryFormatError):
            TriviaRepository.load_library(path)
