"""Pure transition functions for the presentation state machine.

Every function takes the current ``PresentationState`` and the deck it points
into and returns the next state; nothing is mutated. The controller owns the
current value and the renderer draws whatever state it is handed.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from trivia_app.core.models import PresentationState, QuestionSlide, RoundInfo
from trivia_app.core.slide_deck import SlideDeck

INITIAL_STATE = PresentationState()


class PresentationUsageError(ValueError):
    """Raised when a caller asks for a round the deck cannot navigate to."""


class EmptyRoundError(PresentationUsageError):
    """Raised when reviewing a round that has no question slides."""


class PresentationCommand(Enum):
    """Logical input commands understood by the presentation."""

    ADVANCE = "advance"
    RETREAT = "retreat"
    EXIT = "exit"


def advance(state: PresentationState, deck: SlideDeck) -> PresentationState:
    """Reveal the reviewed answer first, otherwise move one slide forward."""
    if is_review_slide(state, deck) and not state.answer_revealed:
        return replace(state, answer_revealed=True)

    if state.current_slide >= deck.last_index:
        return state

    next_index = state.current_slide + 1
    reviewing_round = state.reviewing_round
    if reviewing_round is not None and deck.slides[next_index].round_number != reviewing_round:
        reviewing_round = None
    return PresentationState(
        current_slide=next_index,
        reviewing_round=reviewing_round,
        answer_revealed=False,
    )


def retreat(state: PresentationState, deck: SlideDeck) -> PresentationState:
    """Step one slide back. Review mode is kept even outside its round."""
    if state.current_slide <= 0:
        return state
    return replace(state, current_slide=state.current_slide - 1, answer_revealed=False)


def jump_to_round(state: PresentationState, deck: SlideDeck, round_number: int) -> PresentationState:
    info = _require_round(deck, round_number)
    return PresentationState(current_slide=info.start_index, reviewing_round=None, answer_revealed=False)


def review_round(state: PresentationState, deck: SlideDeck, round_number: int) -> PresentationState:
    """Go to the first question of a round with answers hidden until revealed."""
    info = _require_round(deck, round_number)
    if info.question_count == 0:
        raise EmptyRoundError(f"Round {round_number} has no questions to review.")
    return PresentationState(
        current_slide=info.start_index + 1,
        reviewing_round=round_number,
        answer_revealed=False,
    )


def apply_command(
    state: PresentationState,
    deck: SlideDeck,
    command: PresentationCommand,
) -> PresentationState:
    if command is PresentationCommand.ADVANCE:
        return advance(state, deck)
    if command is PresentationCommand.RETREAT:
        return retreat(state, deck)
    raise PresentationUsageError(f"{command.value!r} is not a state transition.")


def is_review_slide(state: PresentationState, deck: SlideDeck) -> bool:
    """True when the cursor is on a question of the round under review."""
    if state.reviewing_round is None:
        return False
    slide = deck.slides[state.current_slide]
    return isinstance(slide, QuestionSlide) and slide.round_number == state.reviewing_round


def is_answer_visible(state: PresentationState, deck: SlideDeck) -> bool:
    return state.answer_revealed and is_review_slide(state, deck)


def _require_round(deck: SlideDeck, round_number: int) -> RoundInfo:
    try:
        return deck.find_round(round_number)
    except KeyError:
        raise PresentationUsageError(f"Round {round_number} is not part of this presentation.") from None
