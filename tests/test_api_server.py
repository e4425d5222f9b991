"""
Integration Tests for the audience and remote HTTP API
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from conftest import FakeHost
from trivia_app.core.models import QuestionDraft
from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.core.services.trivia_repository import TriviaRepository
from trivia_app.server.api_server import create_api_app


@pytest.fixture
def manager():
    repository = TriviaRepository()
    round_id = repository.save_round(
        "Science",
        [
            QuestionDraft(text="What is H2O?", answer="Water"),
            QuestionDraft(text="Closest star?", answer="The Sun"),
        ],
    )
    repository.create_event("Pub Quiz", date(2025, 3, 1), [round_id])
    return PresentationManager(repository)


@pytest.fixture
def client(manager):
    return TestClient(create_api_app(manager))


@pytest.fixture
def presenting(manager):
    event_id = manager.repository.list_events()[0].id
    manager.start_presentation(event_id, FakeHost())
    return manager


class TestAudienceEndpoints:
    """Tests for the read-only audience view."""

    def test_index_when_requested_then_serves_html(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "/slide" in response.text

    def test_slide_when_idle_then_inactive(self, client):
        assert client.get("/slide").json()["active"] is False

    def test_slide_when_presenting_then_cover(self, client, presenting):
        data = client.get("/slide").json()
        assert data["active"] is True
        assert data["kind"] == "cover"
        assert data["title"] == "Pub Quiz"


class TestRemoteEndpoints:
    """Tests for the presenter remote."""

    def test_rounds_when_idle_then_conflict(self, client):
        assert client.get("/rounds").status_code == 409

    def test_rounds_when_presenting_then_round_index(self, client, presenting):
        assert client.get("/rounds").json() == [
            {"number": 1, "title": "Science", "start_index": 1, "question_count": 2},
        ]

    def test_command_when_advance_then_returns_new_slide(self, client, presenting):
        response = client.post("/command", json={"command": "advance"})
        assert response.status_code == 200
        assert response.json()["kind"] == "round-intro"

    def test_command_when_exit_then_rejected(self, client, presenting):
        response = client.post("/command", json={"command": "exit"})
        assert response.status_code == 422
        assert presenting.is_presenting()

    def test_command_when_unknown_then_validation_error(self, client, presenting):
        assert client.post("/command", json={"command": "fly"}).status_code == 422

    def test_command_when_idle_then_conflict(self, client):
        assert client.post("/command", json={"command": "advance"}).status_code == 409

    def test_jump_when_round_known_then_on_intro(self, client, presenting):
        data = client.post("/rounds/1/jump").json()
        assert data["slide_index"] == 1

    def test_jump_when_round_unknown_then_not_found(self, client, presenting):
        assert client.post("/rounds/5/jump").status_code == 404

    def test_review_when_advanced_then_answer_revealed(self, client, presenting):
        first = client.post("/rounds/1/review").json()
        assert first["answer"] is None
        revealed = client.post("/command", json={"command": "advance"}).json()
        assert revealed["slide_index"] == first["slide_index"]
        assert revealed["answer"] == "Water"

    def test_review_when_round_unknown_then_not_found(self, client, presenting):
        assert client.post("/rounds/5/review").status_code == 404

    def test_review_when_round_empty_then_unprocessable(self):
        """An existing round without questions cannot be reviewed, but it is not missing either."""
        repository = TriviaRepository()
        empty_id = repository.save_round("Warm-up", [])
        full_id = repository.save_round("Music", [QuestionDraft(text="Who sang Hello?", answer="Adele")])
        event_id = repository.create_event("Mixed", date(2025, 3, 1), [empty_id, full_id])
        manager = PresentationManager(repository)
        manager.start_presentation(event_id, FakeHost())
        client = TestClient(create_api_app(manager))

        response = client.post("/rounds/1/review")
        assert response.status_code == 422
        assert "no questions" in response.json()["detail"]
        assert client.post("/rounds/2/review").status_code == 200


class TestTextEndpoints:
    """Tests for the parse and serialize helpers."""

    def test_parse_when_text_then_questions(self, client):
        response = client.post("/parse", json={"text": "1. What is 2+2?\nAnswer: 4"})
        assert response.json() == {"questions": [{"text": "What is 2+2?", "answer": "4"}]}

    def test_serialize_when_questions_then_canonical_text(self, client):
        response = client.post(
            "/serialize",
            json={"questions": [{"text": "Q?", "answer": "A"}, {"text": "R?"}]},
        )
        assert response.json() == {"text": "1. Q?\nAnswer: A\n\n2. R?\nAnswer: "}
