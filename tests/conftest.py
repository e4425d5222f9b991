import pytest
from datetime import date
from typing import Callable

from trivia_app.core.models import Event, Question, Round
from trivia_app.core.slide_deck import build_slide_deck


class FakeHost:
    """Presentation host that records every call made by the controller."""

    def __init__(self, fail_request: bool = False) -> None:
        self.fail_request = fail_request
        self.exclusive = False
        self.calls: list[str] = []
        self.ended_callbacks: list[Callable[[], None]] = []

    def request_exclusive_display(self) -> None:
        self.calls.append("request")
        if self.fail_request:
            raise RuntimeError("full screen denied")
        self.exclusive = True

    def release_exclusive_display(self) -> None:
        self.calls.append("release")
        self.exclusive = False

    def is_exclusive_display_active(self) -> bool:
        return self.exclusive

    def on_exclusive_display_ended(self, callback: Callable[[], None]) -> None:
        self.ended_callbacks.append(callback)

    def leave_presentation(self) -> None:
        self.calls.append("leave")

    def end_display(self) -> None:
        """Simulate the user leaving full screen outside the app."""
        self.exclusive = False
        for callback in list(self.ended_callbacks):
            callback()


# Common test fixtures
@pytest.fixture
def sample_event() -> Event:
    """Two rounds with two and one questions."""
    return Event(
        title="Pub Quiz",
        date=date(2025, 3, 1),
        rounds=[
            Round(
                title="Geography",
                position=1,
                questions=[
                    Question(text="Capital of France? A) Paris B) Lyon", answer="Paris", position=1),
                    Question(text="Longest river?", answer="Nile", position=2),
                ],
            ),
            Round(
                title="Science",
                position=2,
                questions=[Question(text="What is H2O?", answer="Water", position=1)],
            ),
        ],
    )


@pytest.fixture
def sample_deck(sample_event):
    return build_slide_deck(sample_event)


@pytest.fixture
def fake_host() -> FakeHost:
    return FakeHost()
