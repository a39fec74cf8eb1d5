"""
Module: movie_pdf.layout.cursor

Purpose:
    Track the vertical writing position on a reportlab canvas and start
    a new page whenever the next line would fall below the bottom margin.

Key Classes:
    - LayoutCursor: Mutable page/position state

Key Functions:
    - page_surface(): Scoped acquisition of the drawing surface

Algorithm:
    Before every line:
    1. If y < bottom margin, finalize the page (showPage), reset y to
       top_start and reapply the active font
    2. Draw the line as a single text object
    3. Move y down by line_height

Dependencies:
    - reportlab: Canvas drawing
    - movie_pdf.layout.wrapper: Measuring and wrapping

Used By:
    - movie_pdf.output.renderer: Document assembly
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from reportlab.pdfgen import canvas

from .config import LayoutConfig
from .wrapper import measure_text, wrap_text

logger = logging.getLogger(__name__)


class LayoutCursor:
    """
    Vertical position and page state for one document.

    The cursor owns exactly one open page at a time. Pages are closed
    in order and never revisited.

    Attributes:
        config: Layout configuration
        y: Current baseline position in points (bottom-up)
        page_count: Number of pages opened so far (the current one included)
    """

    def __init__(self, c: canvas.Canvas, config: LayoutConfig):
        self._canvas = c
        self.config = config
        self.y: float = config.top_start
        self.page_count = 1
        self._font: Optional[Tuple[str, float]] = None

    @property
    def canvas(self) -> canvas.Canvas:
        return self._canvas

    @property
    def needs_page_break(self) -> bool:
        """True if the next line would sit below the bottom margin."""
        return self.y < self.config.margin_bottom

    def set_font(self, font_name: str, font_size: float) -> None:
        """Apply a font to the canvas and remember it for later pages."""
        self._font = (font_name, font_size)
        self._canvas.setFont(font_name, font_size)

    def new_page(self) -> None:
        """
        Finalize the current page and open the next one.

        reportlab resets the graphics state on showPage(), so the active
        font is applied again on the fresh page.
        """
        self._canvas.showPage()
        self.page_count += 1
        self.y = self.config.top_start
        if self._font is not None:
            self._canvas.setFont(*self._font)
        logger.debug(f"Started page {self.page_count}")

    def write_line(self, text: str, font_name: str, font_size: float) -> None:
        """
        Draw text at the left margin and move down one line.

        Args:
            text: Single line of text (not wrapped here)
            font_name: Font name
            font_size: Font size in points
        """
        self._break_if_needed(font_name, font_size)
        self._draw(text, self.config.margin, font_name, font_size)
        self.y -= self.config.line_height

    def write_centered_line(
        self,
        text: str,
        font_name: str,
        font_size: float,
        advance: Optional[float] = None,
    ) -> None:
        """
        Draw text horizontally centered on the page.

        Performs the same overflow check as write_line().

        Args:
            text: Single line of text
            font_name: Font name
            font_size: Font size in points
            advance: Vertical advance after drawing (defaults to line_height)
        """
        self._break_if_needed(font_name, font_size)
        width = measure_text(text, font_name, font_size)
        x = (self.config.page_width - width) / 2
        self._draw(text, x, font_name, font_size)
        self.y -= self.config.line_height if advance is None else advance

    def write_wrapped(self, text: str, font_name: str, font_size: float) -> int:
        """
        Wrap text to the content width and write each line.

        Returns:
            Number of lines written
        """
        lines = wrap_text(text, self.config.content_width, font_name, font_size)
        for line in lines:
            self.write_line(line, font_name, font_size)
        return len(lines)

    def reserve(self, height: float) -> float:
        """
        Make sure a block of the given height fits above the bottom margin.

        Starts a new page first when it does not fit (unless the page is
        still empty, where nothing better is possible).

        Args:
            height: Block height in points

        Returns:
            Y coordinate of the block's top edge
        """
        at_page_top = self.y == self.config.top_start
        if self.y - height < self.config.margin_bottom and not at_page_top:
            self.new_page()
        return self.y

    def advance(self, amount: float) -> None:
        """Move the cursor down by amount points."""
        self.y -= amount

    def _break_if_needed(self, font_name: str, font_size: float) -> None:
        if self.needs_page_break:
            self.new_page()
        if self._font != (font_name, font_size):
            self.set_font(font_name, font_size)

    def _draw(self, text: str, x: float, font_name: str, font_size: float) -> None:
        # One self-contained text object per draw
        text_obj = self._canvas.beginText(x, self.y)
        text_obj.setFont(font_name, font_size)
        text_obj.textLine(text)
        self._canvas.drawText(text_obj)


@contextmanager
def page_surface(c: canvas.Canvas, config: LayoutConfig) -> Iterator[LayoutCursor]:
    """
    Yield a cursor over the canvas and finalize the open page on exit.

    The last page is closed even when drawing raises, so the canvas is
    always left with no half-open page.

    Example:
        >>> with page_surface(c, LayoutConfig()) as cursor:
        ...     cursor.write_line("Hello", "Helvetica", 14)
        >>> c.save()
    """
    cursor = LayoutCursor(c, config)
    try:
        yield cursor
    finally:
        c.showPage()
