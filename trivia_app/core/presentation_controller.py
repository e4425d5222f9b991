"""Stateful presentation engine driven by discrete input commands."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from trivia_app.constants.presentation_constants import ADVANCE_KEYS, EXIT_KEYS, RETREAT_KEYS
from trivia_app.core import presentation_state as transitions
from trivia_app.core.models import PresentationState, Slide
from trivia_app.core.presentation_state import INITIAL_STATE, PresentationCommand
from trivia_app.core.slide_deck import SlideDeck

logger = logging.getLogger(__name__)

StateListener = Callable[[PresentationState], None]


class PresentationHost(Protocol):
    """Display capabilities the controller needs from whatever shows the slides."""

    def request_exclusive_display(self) -> None: ...

    def release_exclusive_display(self) -> None: ...

    def is_exclusive_display_active(self) -> bool: ...

    def on_exclusive_display_ended(self, callback: Callable[[], None]) -> None: ...

    def leave_presentation(self) -> None: ...


def command_for_key(key_name: str) -> PresentationCommand | None:
    """Map a logical key name (``"ArrowRight"``, ``"Escape"``...) to a command."""
    if key_name in ADVANCE_KEYS:
        return PresentationCommand.ADVANCE
    if key_name in RETREAT_KEYS:
        return PresentationCommand.RETREAT
    if key_name in EXIT_KEYS:
        return PresentationCommand.EXIT
    return None


class PresentationController:
    """Owns the presentation state for one deck and talks to the host."""

    def __init__(self, deck: SlideDeck, host: PresentationHost) -> None:
        self._deck = deck
        self._host = host
        self._state: PresentationState = INITIAL_STATE
        self._listeners: list[StateListener] = []
        self._active: bool = False
        self._exited: bool = False

    @property
    def deck(self) -> SlideDeck:
        return self._deck

    @property
    def state(self) -> PresentationState:
        return self._state

    @property
    def current_slide(self) -> Slide:
        return self._deck.slides[self._state.current_slide]

    def is_review_slide(self) -> bool:
        return transitions.is_review_slide(self._state, self._deck)

    def is_answer_visible(self) -> bool:
        return transitions.is_answer_visible(self._state, self._deck)

    def has_exited(self) -> bool:
        return self._exited

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def activate(self) -> None:
        """Enter exclusive display (best effort) and watch for it ending."""
        if self._active:
            return
        self._active = True
        self._host.on_exclusive_display_ended(self.exit)
        try:
            self._host.request_exclusive_display()
        except Exception:  # noqa: BLE001 - the presentation works without it
            logger.debug("Exclusive display request failed", exc_info=True)

    def advance(self) -> PresentationState:
        return self._set_state(transitions.advance(self._state, self._deck))

    def retreat(self) -> PresentationState:
        return self._set_state(transitions.retreat(self._state, self._deck))

    def jump_to_round(self, round_number: int) -> PresentationState:
        return self._set_state(transitions.jump_to_round(self._state, self._deck, round_number))

    def review_round(self, round_number: int) -> PresentationState:
        return self._set_state(transitions.review_round(self._state, self._deck, round_number))

    def handle_command(self, command: PresentationCommand) -> PresentationState:
        if command is PresentationCommand.EXIT:
            self.exit()
            return self._state
        return self._set_state(transitions.apply_command(self._state, self._deck, command))

    def exit(self) -> None:
        """Leave the presentation. Later calls are ignored."""
        if self._exited:
            return
        self._exited = True
        logger.info("Leaving presentation at slide %d", self._state.current_slide + 1)
        if self._host.is_exclusive_display_active():
            self._host.release_exclusive_display()
        self._host.leave_presentation()

    def _set_state(self, new_state: PresentationState) -> PresentationState:
        if new_state == self._state:
            return self._state
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state
