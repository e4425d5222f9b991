"""
Unit Tests for inline multiple-choice option splitting
"""

from trivia_app.core.option_parser import split_options


class TestSplitOptions:
    """Tests for split_options()."""

    def test_split_when_two_options_then_stem_and_options(self):
        result = split_options("Capital of France? A) Paris B) Lyon")
        assert result.stem == "Capital of France?"
        assert result.options == ["A) Paris", "B) Lyon"]

    def test_split_when_no_markers_then_text_unchanged(self):
        result = split_options("No options here")
        assert result.stem == "No options here"
        assert result.options == []

    def test_split_when_dot_markers_on_new_lines_then_split(self):
        result = split_options("Largest planet?\nA. Mars\nB. Jupiter\nC. Venus\nD. Earth")
        assert result.stem == "Largest planet?"
        assert result.options == ["A. Mars", "B. Jupiter", "C. Venus", "D. Earth"]

    def test_split_when_fifth_label_then_absorbed_into_previous_option(self):
        """Only A-D are labels; 'E)' stays part of the D option."""
        result = split_options("Pick one A) a B) b C) c D) d E) e")
        assert result.options == ["A) a", "B) b", "C) c", "D) d E) e"]

    def test_split_when_letter_inside_word_then_not_a_marker(self):
        """A label glued to the preceding word is not a marker."""
        result = split_options("Who wrote AB) tests?")
        assert result.options == []

    def test_split_when_text_starts_with_marker_then_stem_is_empty(self):
        result = split_options("A) yes B) no")
        assert result.stem == ""
        assert result.options == ["A) yes", "B) no"]

    def test_split_when_empty_text_then_no_options(self):
        result = split_options("")
        assert result.stem == ""
        assert result.options == []

    def test_split_when_first_label_follows_punctuation_then_still_a_marker(self):
        """A label right after a colon starts the options."""
        result = split_options("Pick one:A) x B) y")
        assert result.stem == "Pick one:"
        assert result.options == ["A) x", "B) y"]

    def test_split_when_label_follows_digit_then_not_a_marker(self):
        result = split_options("Is 2D. flat? A) yes B) no")
        assert result.stem == "Is 2D. flat?"
        assert result.options == ["A) yes", "B) no"]
