"""
Module: movie_pdf.layout.wrapper

Purpose:
    Measure and word-wrap text using the standard PDF font metrics.

Key Functions:
    - measure_text(): Width of a string in points
    - wrap_text(): Greedy whitespace word-wrap to a maximum width

Algorithm:
    1. Split the text on runs of whitespace
    2. Append each word to the candidate line if the measured line
       still fits, otherwise close the line and start a new one
    3. A word wider than the limit sits alone on its own line

Dependencies:
    - reportlab: Font metrics (pdfmetrics.stringWidth)

Used By:
    - movie_pdf.layout.cursor: Centering and wrapped writes
"""

from __future__ import annotations

from typing import List

from reportlab.pdfbase import pdfmetrics


def measure_text(text: str, font_name: str, font_size: float) -> float:
    """
    Measure rendered width of text.

    Width is the sum of glyph advances (in 1/1000 em units) scaled by
    font_size / 1000.

    Args:
        text: Text to measure
        font_name: Registered font name, e.g. "Helvetica"
        font_size: Font size in points

    Returns:
        Width in points

    Example:
        >>> measure_text("", "Helvetica", 14)
        0.0
    """
    return float(pdfmetrics.stringWidth(text, font_name, font_size))


def wrap_text(
    text: str,
    max_width: float,
    font_name: str,
    font_size: float,
) -> List[str]:
    """
    Split text into lines no wider than max_width.

    Words are never split. Joining the result with single spaces gives
    back the input with its whitespace collapsed.

    Args:
        text: Text to wrap
        max_width: Maximum line width in points
        font_name: Font used for measuring
        font_size: Font size in points

    Returns:
        List of lines (empty for blank input)

    Example:
        >>> wrap_text("a b", 1000, "Helvetica", 14)
        ['a b']
    """
    lines: List[str] = []
    current: List[str] = []

    for word in text.split():
        candidate = " ".join(current + [word])
        if current and measure_text(candidate, font_name, font_size) > max_width:
            lines.append(" ".join(current))
            current = [word]
        else:
            current.append(word)

    if current:
        lines.append(" ".join(current))

    return lines
