"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "TriviaQt"
PRESENTATION_WINDOW_TITLE: str = "TriviaQt Presentation"
AUDIENCE_URL_PLACEHOLDER: str = "http://<host-ip>:8000/"
DEFAULT_LIBRARY_FILE: str = "trivia_library.json"

MODE_BUTTON_ROUNDS: str = "Rounds"
MODE_BUTTON_EVENTS: str = "Events"
MODE_BUTTON_OPEN_LIBRARY: str = "Open Library"
MODE_BUTTON_SAVE_LIBRARY: str = "Save Library"

EDITOR_NEW_ROUND_BUTTON: str = "New Round"
EDITOR_PARSE_BUTTON: str = "Parse Text"
EDITOR_FORMAT_BUTTON: str = "Format Text"
EDITOR_ADD_BUTTON: str = "+ Add Question"
EDITOR_SAVE_BUTTON: str = "Save Round"
EDITOR_IMPORT_BUTTON: str = "Import Text File"
EDITOR_EXPORT_BUTTON: str = "Export Text File"
PLACEHOLDER_ROUND_TITLE: str = "Round Title (e.g., Classic Cars)"
PLACEHOLDER_ROUND_TOPIC: str = "Topic (optional)"
PLACEHOLDER_ROUND_TEXT: str = "1. Question text (include multiple choice options if applicable)\nAnswer: answer"
PLACEHOLDER_QUESTION: str = "Question text"
PLACEHOLDER_ANSWER: str = "Answer"

EVENT_CREATE_BUTTON: str = "Create Event"
EVENT_PRESENT_BUTTON: str = "Start Presentation"
EVENT_DELETE_BUTTON: str = "Delete Event"
PLACEHOLDER_EVENT_TITLE: str = "Event Title"

TEXT_DIALOG_TITLE: str = "Select question text file"
TEXT_FILE_FILTER: str = "Text files (*.txt);;All files (*.*)"
LIBRARY_DIALOG_TITLE: str = "Select trivia library"
LIBRARY_FILE_FILTER: str = "Trivia library (*.json);;All files (*.*)"

NO_EVENT_SELECTED_MESSAGE: str = "Select an event first."
ROUND_SAVED_MESSAGE: str = "Round saved."
