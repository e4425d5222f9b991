"""Business logic for the running presentation shared between UI and API."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from threading import RLock

from trivia_app.core.markdown_renderer import renderer
from trivia_app.core.models import (
    CoverSlide,
    PresentationState,
    QuestionSlide,
    RoundInfo,
    RoundIntroSlide,
    Slide,
)
from trivia_app.core.option_parser import split_options
from trivia_app.core.presentation_controller import PresentationController, PresentationHost
from trivia_app.core.presentation_state import PresentationCommand
from trivia_app.core.services.trivia_repository import TriviaRepository
from trivia_app.core.slide_deck import build_slide_deck
from trivia_app.core.slide_renderer import slide_caption

logger = logging.getLogger(__name__)


class NoPresentationError(RuntimeError):
    """Raised when navigation is requested while nothing is being presented."""


@dataclass(frozen=True, slots=True)
class SlideView:
    """Consistent read of the presentation for one render."""

    state: PresentationState
    slide: Slide
    slide_count: int
    rounds: tuple[RoundInfo, ...]
    answer_visible: bool
    in_review: bool


class PresentationManager:
    """Facade over the repository and the active presentation controller.

    Qt input and HTTP requests arrive on different threads; every call goes
    through one re-entrant lock so transitions are applied one at a time. The
    lock is re-entrant because exiting calls back into ``stop_presentation``.
    """

    def __init__(self, repository: TriviaRepository) -> None:
        self._lock = RLock()
        self._repository = repository
        self._controller: PresentationController | None = None
        self._event_id: str | None = None

    @property
    def repository(self) -> TriviaRepository:
        return self._repository

    def set_repository(self, repository: TriviaRepository) -> None:
        """Swap the library; refused while a presentation is running."""
        with self._lock:
            if self._controller is not None:
                raise RuntimeError("Cannot replace the library while presenting.")
            self._repository = repository

    # --- Session lifecycle ---

    def start_presentation(self, event_id: str, host: PresentationHost) -> PresentationController:
        """Build the deck for an event and activate a controller on ``host``.

        Raises ``EventNotFoundError`` when the event is unknown.
        """
        with self._lock:
            event = self._repository.fetch_presentation_input(event_id)
            deck = build_slide_deck(event)
            controller = PresentationController(deck, host)
            controller.add_listener(self._log_state)
            self._controller = controller
            self._event_id = event_id
            logger.info("Presenting %r: %d slides, %d rounds", event.title, len(deck.slides), len(deck.rounds))
            controller.activate()
            return controller

    def stop_presentation(self) -> None:
        with self._lock:
            self._controller = None
            self._event_id = None

    def is_presenting(self) -> bool:
        with self._lock:
            return self._controller is not None

    def get_event_id(self) -> str | None:
        with self._lock:
            return self._event_id

    # --- Navigation delegation ---

    def advance(self) -> PresentationState:
        with self._lock:
            return self._require_controller().advance()

    def retreat(self) -> PresentationState:
        with self._lock:
            return self._require_controller().retreat()

    def jump_to_round(self, round_number: int) -> PresentationState:
        with self._lock:
            return self._require_controller().jump_to_round(round_number)

    def review_round(self, round_number: int) -> PresentationState:
        with self._lock:
            return self._require_controller().review_round(round_number)

    def handle_command(self, command: PresentationCommand) -> PresentationState:
        with self._lock:
            return self._require_controller().handle_command(command)

    def exit_presentation(self) -> None:
        with self._lock:
            if self._controller is not None:
                self._controller.exit()

    def get_state(self) -> PresentationState:
        with self._lock:
            return self._require_controller().state

    def get_rounds(self) -> list[RoundInfo]:
        with self._lock:
            return list(self._require_controller().deck.rounds)

    # --- Audience view ---

    def get_current_view(self) -> SlideView | None:
        """Return the current slide with its reveal flags, or None when idle."""
        with self._lock:
            controller = self._controller
            if controller is None:
                return None
            return SlideView(
                state=controller.state,
                slide=controller.current_slide,
                slide_count=len(controller.deck.slides),
                rounds=controller.deck.rounds,
                answer_visible=controller.is_answer_visible(),
                in_review=controller.is_review_slide(),
            )

    def get_slide_snapshot(self) -> dict[str, object]:
        """Describe the current slide for the audience page.

        The answer is only included once it has been revealed in review mode.
        """
        view = self.get_current_view()
        if view is None:
            return {"active": False, "kind": None, "slide_index": None, "slide_count": 0}

        slide = view.slide
        snapshot: dict[str, object] = {
            "active": True,
            "kind": slide.kind,
            "slide_index": view.state.current_slide,
            "slide_count": view.slide_count,
            "reviewing_round": view.state.reviewing_round,
            "in_review": view.in_review,
            "answer_visible": view.answer_visible,
        }
        if isinstance(slide, CoverSlide):
            snapshot.update(title=slide.title, date=slide.date)
        elif isinstance(slide, RoundIntroSlide):
            snapshot.update(round_number=slide.round_number, round_title=slide.round_title)
        elif isinstance(slide, QuestionSlide):
            parsed = split_options(slide.question_text)
            snapshot.update(
                round_number=slide.round_number,
                question_number=slide.question_number,
                caption=slide_caption(slide, view.in_review),
                question_html=renderer.render_fragment(parsed.stem),
                options=parsed.options,
                answer=slide.answer if view.answer_visible else None,
            )
        return snapshot

    def _require_controller(self) -> PresentationController:
        if self._controller is None:
            raise NoPresentationError("No presentation is running.")
        return self._controller

    @staticmethod
    def _log_state(state: PresentationState) -> None:
        logger.debug(
            "Slide %d, reviewing=%s, revealed=%s",
            state.current_slide,
            state.reviewing_round,
            state.answer_revealed,
        )
