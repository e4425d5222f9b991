"""
Unit Tests for the round editing session
"""

import pytest

from trivia_app.core.models import QuestionDraft
from trivia_app.core.services.round_editor import DraftValidationError, RoundEditor
from trivia_app.core.services.trivia_repository import TriviaRepository


class TestRoundEditorDrafts:
    """Tests for editing drafts in memory."""

    def test_load_text_when_parsed_then_drafts_replaced(self):
        editor = RoundEditor(title="Music")
        editor.add_question()
        count = editor.load_text("1. Who sang Hello?\nAnswer: Adele\n\n2. Band of Freddie Mercury?\nAnswer: Queen")
        assert count == 2
        assert [d.answer for d in editor.get_drafts()] == ["Adele", "Queen"]
        assert editor.has_unsaved_changes()

    def test_load_text_when_not_replacing_then_appends(self):
        editor = RoundEditor()
        editor.load_text("1. A?\nAnswer: a")
        editor.load_text("1. B?\nAnswer: b", replace=False)
        assert [d.text for d in editor.get_drafts()] == ["A?", "B?"]

    def test_update_question_when_field_known_then_value_set(self):
        editor = RoundEditor()
        editor.add_question()
        editor.update_question(0, "text", "New text")
        editor.update_question(0, "answer", "New answer")
        assert (editor.get_drafts()[0].text, editor.get_drafts()[0].answer) == ("New text", "New answer")

    def test_update_question_when_field_unknown_then_raises_value_error(self):
        editor = RoundEditor()
        editor.add_question()
        with pytest.raises(ValueError):
            editor.update_question(0, "topic", "x")  # type: ignore[arg-type]

    def test_update_question_when_index_out_of_range_then_raises_index_error(self):
        with pytest.raises(IndexError):
            RoundEditor().update_question(0, "text", "x")

    def test_move_question_when_up_then_swapped_and_new_index_returned(self):
        editor = RoundEditor()
        editor.load_text("1. A?\nAnswer: a\n2. B?\nAnswer: b")
        assert editor.move_question(1, "up") == 0
        assert [d.text for d in editor.get_drafts()] == ["B?", "A?"]

    def test_move_question_when_at_edge_then_unchanged(self):
        editor = RoundEditor()
        editor.load_text("1. A?\nAnswer: a\n2. B?\nAnswer: b")
        assert editor.move_question(0, "up") == 0
        assert editor.move_question(1, "down") == 1
        assert [d.text for d in editor.get_drafts()] == ["A?", "B?"]

    def test_remove_question_when_valid_index_then_removed(self):
        editor = RoundEditor()
        editor.load_text("1. A?\nAnswer: a\n2. B?\nAnswer: b")
        editor.remove_question(0)
        assert [d.text for d in editor.get_drafts()] == ["B?"]

    def test_to_text_when_drafts_then_canonical_format(self):
        editor = RoundEditor()
        editor.load_drafts([QuestionDraft(text="Q?", answer="A")])
        assert editor.to_text() == "1. Q?\nAnswer: A"

    def test_set_details_when_unchanged_then_not_dirty(self):
        editor = RoundEditor(title="T", topic="")
        editor.set_details("T", "")
        assert not editor.has_unsaved_changes()
        editor.set_details("T2", "")
        assert editor.has_unsaved_changes()


class TestRoundEditorSave:
    """Tests for validation and persistence."""

    def test_validate_when_no_title_then_raises(self):
        editor = RoundEditor()
        editor.load_text("1. Q?\nAnswer: A")
        with pytest.raises(DraftValidationError, match="Round title is required"):
            editor.validate()

    def test_validate_when_no_questions_then_raises(self):
        with pytest.raises(DraftValidationError, match="Add at least one question"):
            RoundEditor(title="T").validate()

    def test_validate_when_answer_missing_then_raises(self):
        editor = RoundEditor(title="T")
        editor.load_text("1. Orphan question")
        with pytest.raises(DraftValidationError, match="text and an answer"):
            editor.validate()

    def test_save_when_valid_then_round_stored_and_clean(self):
        repository = TriviaRepository()
        editor = RoundEditor(title="  Science ", topic="")
        editor.load_text("1. H2O?\nAnswer: Water")

        round_id = editor.save(repository)
        stored = repository.get_round(round_id)
        assert stored.title == "Science"
        assert stored.topic is None
        assert not editor.has_unsaved_changes()
        assert all(not draft.is_new for draft in editor.get_drafts())

    def test_save_when_invalid_then_nothing_stored(self):
        repository = TriviaRepository()
        with pytest.raises(DraftValidationError):
            RoundEditor().save(repository)
        assert repository.list_rounds() == []

    def test_for_existing_round_when_loaded_then_saving_updates_same_round(self):
        repository = TriviaRepository()
        first = RoundEditor(title="History")
        first.load_text("1. Year of Hastings?\nAnswer: 1066")
        round_id = first.save(repository)

        editor = RoundEditor.for_existing_round(repository, round_id)
        assert not editor.has_unsaved_changes()
        editor.update_question(0, "answer", "AD 1066")
        editor.save(repository)

        assert len(repository.list_rounds()) == 1
        assert repository.get_round_drafts(round_id)[0].answer == "AD 1066"
