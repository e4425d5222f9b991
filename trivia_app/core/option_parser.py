"""Split inline multiple-choice options out of a question's display text.

Authors write options inline, for example::

    Capital of France? A) Paris B) Lyon C) Nice D) Lille

A marker is one of the letters A-D followed by ``)`` or ``.``, unless the letter
continues a word or number. Everything before the first marker is the stem;
the rest is cut in front of every marker. Only four labels exist, so an
``E)`` stays inside the ``D)`` option.
"""

from __future__ import annotations

from dataclasses import dataclass, field

_OPTION_LABELS = ("A", "B", "C", "D")
_MARKER_CLOSERS = (")", ".")


@dataclass(frozen=True, slots=True)
class SplitQuestion:
    """Question stem plus its ordered option lines (empty when none)."""

    stem: str
    options: list[str] = field(default_factory=list)


def split_options(text: str) -> SplitQuestion:
    marker_positions = _find_marker_positions(text)
    if not marker_positions:
        return SplitQuestion(stem=text, options=[])

    stem = text[: marker_positions[0]].strip()
    boundaries = marker_positions + [len(text)]
    options: list[str] = []
    for start, end in zip(boundaries, boundaries[1:]):
        option = text[start:end].strip()
        if option:
            options.append(option)
    return SplitQuestion(stem=stem, options=options)


def _find_marker_positions(text: str) -> list[int]:
    positions: list[int] = []
    for index in range(len(text) - 1):
        if text[index] not in _OPTION_LABELS or text[index + 1] not in _MARKER_CLOSERS:
            continue
        # A label glued to a letter or digit is part of a word ("AB)", "2D.")
        if index == 0 or not text[index - 1].isalnum():
            positions.append(index)
    return positions
