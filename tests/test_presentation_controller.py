"""
Unit Tests for the presentation controller and its host interaction
"""

import pytest

from conftest import FakeHost
from trivia_app.core.models import PresentationState, QuestionSlide
from trivia_app.core.presentation_controller import PresentationController, command_for_key
from trivia_app.core.presentation_state import PresentationCommand, PresentationUsageError


class TestCommandForKey:
    """Tests for command_for_key()."""

    @pytest.mark.parametrize("key", ["ArrowRight", "Space", "Enter"])
    def test_key_when_forward_key_then_advance(self, key):
        assert command_for_key(key) is PresentationCommand.ADVANCE

    def test_key_when_arrow_left_then_retreat(self):
        assert command_for_key("ArrowLeft") is PresentationCommand.RETREAT

    def test_key_when_escape_then_exit(self):
        assert command_for_key("Escape") is PresentationCommand.EXIT

    def test_key_when_unbound_then_none(self):
        assert command_for_key("KeyQ") is None


class TestActivate:
    """Tests for entering the presentation."""

    def test_activate_when_called_then_requests_exclusive_display(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        controller.activate()
        assert fake_host.calls == ["request"]
        assert fake_host.exclusive
        assert len(fake_host.ended_callbacks) == 1

    def test_activate_when_called_twice_then_requests_once(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        controller.activate()
        controller.activate()
        assert fake_host.calls == ["request"]

    def test_activate_when_host_refuses_then_presentation_still_works(self, sample_deck):
        host = FakeHost(fail_request=True)
        controller = PresentationController(sample_deck, host)
        controller.activate()
        assert controller.advance().current_slide == 1


class TestNavigation:
    """Tests for state changes through the controller."""

    def test_advance_when_called_then_listeners_notified(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        seen: list[PresentationState] = []
        controller.add_listener(seen.append)

        controller.advance()
        assert [state.current_slide for state in seen] == [1]

    def test_retreat_when_at_start_then_listeners_not_notified(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        seen: list[PresentationState] = []
        controller.add_listener(seen.append)

        controller.retreat()
        assert seen == []

    def test_review_when_advanced_then_answer_visible(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        controller.review_round(2)
        assert isinstance(controller.current_slide, QuestionSlide)
        assert controller.is_review_slide()
        assert not controller.is_answer_visible()

        controller.advance()
        assert controller.is_answer_visible()
        assert controller.state.current_slide == 5

    def test_jump_when_unknown_round_then_state_untouched(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        controller.advance()
        with pytest.raises(PresentationUsageError):
            controller.jump_to_round(7)
        assert controller.state.current_slide == 1

    def test_handle_command_when_advance_then_moves(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        assert controller.handle_command(PresentationCommand.ADVANCE).current_slide == 1


class TestExit:
    """Tests for leaving the presentation."""

    def test_exit_when_called_twice_then_leaves_once(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        controller.activate()

        controller.exit()
        controller.exit()
        assert fake_host.calls.count("leave") == 1
        assert controller.has_exited()

    def test_exit_when_exclusive_then_released_before_leaving(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        controller.activate()
        controller.exit()
        assert fake_host.calls == ["request", "release", "leave"]

    def test_exit_when_display_already_ended_then_no_release(self, sample_deck, fake_host):
        """Leaving full screen externally exits without releasing again."""
        controller = PresentationController(sample_deck, fake_host)
        controller.activate()

        fake_host.end_display()
        assert fake_host.calls == ["request", "leave"]

    def test_exit_when_escape_and_display_signal_then_leaves_once(self, sample_deck, fake_host):
        controller = PresentationController(sample_deck, fake_host)
        controller.activate()

        controller.handle_command(PresentationCommand.EXIT)
        fake_host.end_display()
        assert fake_host.calls.count("leave") == 1
