"""Slide rendering utilities for the presentation views."""

from __future__ import annotations

from html import escape

from trivia_app.core.markdown_renderer import renderer
from trivia_app.core.models import CoverSlide, QuestionSlide, RoundIntroSlide, Slide
from trivia_app.core.option_parser import split_options


def render_slide_html(
    slide: Slide,
    answer_visible: bool = False,
    in_review: bool = False,
    font_size: int = 28,
) -> str:
    """Render one slide as an HTML fragment.

    Args:
        slide: The slide to draw
        answer_visible: Whether the answer line is shown (question slides only)
        in_review: Whether the caption carries the review marker
        font_size: Base font size in points for the slide body

    Returns:
        HTML string usable by Qt rich text widgets and the audience page
    """
    if isinstance(slide, CoverSlide):
        return (
            f'<div align="center" style="font-size: {font_size * 2}pt; font-weight: bold;">'
            f"{escape(slide.title)}</div>"
            f'<div align="center" style="font-size: {font_size}pt; color: #666666;">'
            f"{escape(slide.date)}</div>"
        )

    if isinstance(slide, RoundIntroSlide):
        return (
            f'<div align="center" style="font-size: {font_size}pt; color: #666666;">'
            f"Round {slide.round_number}</div>"
            f'<div align="center" style="font-size: {font_size * 2}pt; font-weight: bold;">'
            f"{escape(slide.round_title)}</div>"
        )

    return _render_question(slide, answer_visible, in_review, font_size)


def slide_caption(slide: QuestionSlide, in_review: bool = False) -> str:
    caption = f"Round {slide.round_number} · Question {slide.question_number}"
    if in_review:
        caption += " · Review"
    return caption


def _render_question(slide: QuestionSlide, answer_visible: bool, in_review: bool, font_size: int) -> str:
    parsed = split_options(slide.question_text)
    parts = [
        f'<div align="center" style="font-size: {max(font_size // 2, 10)}pt; color: #666666;">'
        f"{escape(slide_caption(slide, in_review))}</div>",
        f'<div style="font-size: {font_size}pt; font-weight: 500;">'
        f"{renderer.render_fragment(parsed.stem)}</div>",
    ]
    if parsed.options:
        option_lines = "".join(
            f"<div>{renderer.render_inline(option)}</div>" for option in parsed.options
        )
        parts.append(f'<div style="font-size: {max(font_size - 6, 10)}pt;">{option_lines}</div>')
    if answer_visible:
        parts.append(
            f'<div align="center" style="font-size: {max(font_size - 6, 10)}pt; color: #1f9aa5;">'
            f'<span style="color: #666666;">Answer:</span> {escape(slide.answer)}</div>'
        )
    return "".join(parts)
