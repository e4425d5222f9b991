"""Static metadata describing TriviaQt."""

APP_NAME = "TriviaQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "TriviaQt is a trivia night companion built with Qt and FastAPI. "
    "Write rounds as plain numbered text, group them into events and present them full screen, "
    "with an audience page that mirrors the current slide."
)

HELP_TEXT = (
    "Write or paste questions in the round editor using the numbered format, then press "
    "'Parse Text' to split them into questions:\n\n"
    "1. What is the capital of Australia?\n"
    "Answer: Canberra\n\n"
    "2. Which planet is known as the Red Planet?\n"
    "A) Venus B) Mars C) Jupiter D) Saturn\n"
    "Answer: Mars\n\n"
    "Options written as A) to D) are shown on separate lines during the presentation.\n\n"
    "While presenting: → / Space / Enter or a click advances, ← goes back, Esc exits. "
    "'Review n' replays a round with each answer revealed on the next advance."
)
