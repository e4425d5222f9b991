"""
Unit Tests for slide deck construction
"""

from datetime import date

import pytest

from trivia_app.core.models import CoverSlide, Event, QuestionSlide, Round, RoundIntroSlide
from trivia_app.core.slide_deck import build_slide_deck, format_event_date


class TestBuildSlideDeck:
    """Tests for build_slide_deck()."""

    def test_build_when_rounds_of_two_and_one_then_six_slides(self, sample_deck):
        assert len(sample_deck.slides) == 6
        assert sample_deck.rounds[0].start_index == 1
        assert sample_deck.rounds[1].start_index == 4

    def test_build_when_called_then_slide_kinds_in_order(self, sample_deck):
        kinds = [slide.kind for slide in sample_deck.slides]
        assert kinds == ["cover", "round-intro", "question", "question", "round-intro", "question"]

    def test_build_when_called_then_cover_has_title_and_formatted_date(self, sample_deck):
        cover = sample_deck.slides[0]
        assert isinstance(cover, CoverSlide)
        assert cover.title == "Pub Quiz"
        assert cover.date == "Saturday, March 1, 2025"

    def test_build_when_called_then_question_slides_carry_numbers(self, sample_deck):
        slide = sample_deck.slides[3]
        assert isinstance(slide, QuestionSlide)
        assert (slide.round_number, slide.question_number) == (1, 2)
        assert slide.question_text == "Longest river?"
        assert slide.answer == "Nile"

    def test_build_when_called_then_round_index_has_titles_and_counts(self, sample_deck):
        summary = [(info.number, info.title, info.question_count) for info in sample_deck.rounds]
        assert summary == [(1, "Geography", 2), (2, "Science", 1)]

    def test_build_when_round_empty_then_only_intro_slide(self):
        event = Event(title="Tiny", date=date(2025, 1, 1), rounds=[Round(title="Empty", position=1)])
        deck = build_slide_deck(event)
        assert len(deck.slides) == 2
        assert isinstance(deck.slides[1], RoundIntroSlide)
        assert deck.rounds[0].question_count == 0

    def test_build_when_no_rounds_then_cover_only(self):
        deck = build_slide_deck(Event(title="Nothing", date=date(2025, 1, 1)))
        assert len(deck.slides) == 1
        assert deck.rounds == ()
        assert deck.last_index == 0

    def test_find_round_when_unknown_then_raises_key_error(self, sample_deck):
        with pytest.raises(KeyError):
            sample_deck.find_round(3)
        assert sample_deck.has_round(2)
        assert not sample_deck.has_round(3)


class TestFormatEventDate:
    """Tests for format_event_date()."""

    def test_format_when_date_then_long_form(self):
        assert format_event_date(date(2024, 12, 25)) == "Wednesday, December 25, 2024"

    def test_format_when_iso_string_then_parsed(self):
        assert format_event_date("2025-03-01") == "Saturday, March 1, 2025"
