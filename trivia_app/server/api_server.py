"""FastAPI server exposing the audience view and a presenter remote."""

from __future__ import annotations

from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from trivia_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_app.core.models import QuestionDraft
from trivia_app.core.presentation_manager import NoPresentationError, PresentationManager
from trivia_app.core.presentation_state import (
    EmptyRoundError,
    PresentationCommand,
    PresentationUsageError,
)
from trivia_app.core.question_text_parser import parse_question_text, serialize_drafts

_AUDIENCE_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>TriviaQt</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #ffffff; color: #111827; }
      body { margin: 0; min-height: 100vh; display: flex; align-items: center; justify-content: center; }
      main { max-width: 900px; padding: 2rem; text-align: center; }
      .caption { color: #6b7280; font-size: 1rem; margin-bottom: 2rem; }
      .title { font-size: 3rem; font-weight: 700; }
      .subtitle { font-size: 1.5rem; color: #6b7280; }
      .question { font-size: 2rem; text-align: left; white-space: pre-wrap; }
      .options { font-size: 1.6rem; text-align: left; margin-top: 1.5rem; }
      .answer { font-size: 1.6rem; color: #1f9aa5; margin-top: 3rem; }
      .counter { position: fixed; top: 1rem; right: 1rem; color: #9ca3af; font-size: 0.9rem; }
    </style>
  </head>
  <body>
    <span class=\"counter\" id=\"counter\"></span>
    <main id=\"slide\"><p class=\"subtitle\">Waiting for the presentation to start…</p></main>
    <script>
      const slideEl = document.getElementById('slide');
      const counterEl = document.getElementById('counter');
      let lastKey = null;

      function text(value) {
        const span = document.createElement('span');
        span.textContent = value ?? '';
        return span.innerHTML;
      }

      function render(data) {
        if (!data.active) {
          counterEl.textContent = '';
          return '<p class=\"subtitle\">Waiting for the presentation to start…</p>';
        }
        counterEl.textContent = `${data.slide_index + 1} / ${data.slide_count}`;
        if (data.kind === 'cover') {
          return `<div class=\"title\">${text(data.title)}</div><p class=\"subtitle\">${text(data.date)}</p>`;
        }
        if (data.kind === 'round-intro') {
          return `<p class=\"subtitle\">Round ${data.round_number}</p><div class=\"title\">${text(data.round_title)}</div>`;
        }
        const options = (data.options || []).map((o) => `<div>${text(o)}</div>`).join('');
        const answer = data.answer_visible ? `<div class=\"answer\">Answer: ${text(data.answer)}</div>` : '';
        return `<p class=\"caption\">${text(data.caption)}</p><div class=\"question\">${data.question_html}</div>` +
          (options ? `<div class=\"options\">${options}</div>` : '') + answer;
      }

      async function poll() {
        try {
          const response = await fetch('/slide', { cache: 'no-store' });
          if (response.ok) {
            const data = await response.json();
            const key = JSON.stringify(data);
            if (key !== lastKey) {
              lastKey = key;
              slideEl.innerHTML = render(data);
            }
          }
        } catch (error) {
          console.warn('Slide poll failed', error);
        }
      }

      poll();
      setInterval(poll, 1000);
    </script>
  </body>
</html>
"""


class CommandPayload(BaseModel):
    """Payload schema for presenter remote commands."""

    command: PresentationCommand


class ParsePayload(BaseModel):
    """Authored text to split into drafts."""

    text: str


class DraftPayload(BaseModel):
    text: str
    answer: str = ""


class SerializePayload(BaseModel):
    """Drafts to write back to the authored text format."""

    questions: list[DraftPayload]


def _get_manager_dependency(manager: PresentationManager):
    def dependency() -> PresentationManager:
        return manager

    return dependency


def create_api_app(manager: PresentationManager) -> FastAPI:
    """Create a FastAPI application wired to the provided presentation manager."""
    app = FastAPI(title="TriviaQt API", version="0.1.0")
    manager_dep = _get_manager_dependency(manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_audience_page() -> str:
        return _AUDIENCE_PAGE_HTML

    @app.get("/slide")
    def get_slide(presentation: PresentationManager = Depends(manager_dep)) -> dict[str, object]:
        return presentation.get_slide_snapshot()

    @app.get("/rounds")
    def get_rounds(presentation: PresentationManager = Depends(manager_dep)) -> list[dict[str, object]]:
        try:
            rounds = presentation.get_rounds()
        except NoPresentationError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return [
            {
                "number": info.number,
                "title": info.title,
                "start_index": info.start_index,
                "question_count": info.question_count,
            }
            for info in rounds
        ]

    @app.post("/command")
    def send_command(
        payload: CommandPayload,
        presentation: PresentationManager = Depends(manager_dep),
    ) -> dict[str, object]:
        if payload.command is PresentationCommand.EXIT:
            # Leaving full screen has to happen on the presenting machine
            raise HTTPException(status_code=422, detail="Exit is not available remotely.")
        try:
            presentation.handle_command(payload.command)
        except NoPresentationError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return presentation.get_slide_snapshot()

    @app.post("/rounds/{round_number}/jump")
    def jump_to_round(
        round_number: int,
        presentation: PresentationManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            presentation.jump_to_round(round_number)
        except NoPresentationError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except PresentationUsageError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return presentation.get_slide_snapshot()

    @app.post("/rounds/{round_number}/review")
    def review_round(
        round_number: int,
        presentation: PresentationManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            presentation.review_round(round_number)
        except NoPresentationError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except EmptyRoundError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except PresentationUsageError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return presentation.get_slide_snapshot()

    @app.post("/parse")
    def parse_text(payload: ParsePayload) -> dict[str, object]:
        drafts = parse_question_text(payload.text)
        return {
            "questions": [{"text": draft.text, "answer": draft.answer} for draft in drafts],
        }

    @app.post("/serialize")
    def serialize_text(payload: SerializePayload) -> dict[str, str]:
        drafts = [QuestionDraft(text=item.text, answer=item.answer) for item in payload.questions]
        return {"text": serialize_drafts(drafts)}

    return app


def start_api_server(
    manager: PresentationManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="TriviaApiServer", daemon=True)
    thread.start()
    return thread
