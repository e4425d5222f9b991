"""Key bindings and captions for the live presentation."""

ADVANCE_KEYS: frozenset[str] = frozenset({"ArrowRight", "Space", "Enter"})
RETREAT_KEYS: frozenset[str] = frozenset({"ArrowLeft"})
EXIT_KEYS: frozenset[str] = frozenset({"Escape"})

NAVIGATION_HINT: str = "Press → or click to advance · Press ← to go back · Press Esc to exit"
ROUND_BUTTON_TEMPLATE: str = "Round {number}"
REVIEW_BUTTON_TEMPLATE: str = "Review {number}"
SLIDE_COUNTER_TEMPLATE: str = "{current} / {total}"
