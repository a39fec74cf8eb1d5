"""
Module: movie_pdf.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page dimensions, margins, fonts and spacing. The layout is
    deliberately fixed; every run uses the defaults unless a test
    overrides them.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)
    - reportlab: Standard page sizes

Used By:
    - movie_pdf.layout.cursor: Pagination
    - movie_pdf.output.renderer: Document assembly
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import letter


# US Letter in PDF points (1/72 inch)
DEFAULT_PAGE_WIDTH_PT, DEFAULT_PAGE_HEIGHT_PT = letter


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    All distances are PDF points with the origin at the bottom-left
    corner of the page, so the cursor moves *down* by decreasing y.

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        margin: Left/right margin and the bottom limit for text lines
        top_start: Y position of the first line on every page
        line_height: Vertical advance after each text line
        heading_font / heading_size: Title font
        body_font / body_size: Field and description font
        title_gap: Vertical advance after the title line
        image_width / image_height: Fixed poster box
        image_gap: Extra space left below the poster

    Example:
        >>> config = LayoutConfig()
        >>> config.content_width
        512.0
    """

    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT

    # Margins
    margin: float = 50
    top_start: float = 750

    # Text
    line_height: float = 20
    heading_font: str = "Helvetica-Bold"
    heading_size: float = 24
    body_font: str = "Helvetica"
    body_size: float = 14
    title_gap: float = 50

    # Poster
    image_width: float = 200
    image_height: float = 300
    image_gap: float = 30

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.content_width <= 0:
            raise ValueError("Margins exceed page width")
        if not self.margin < self.top_start <= self.page_height:
            raise ValueError(
                f"top_start must lie between margin and page height: {self.top_start}"
            )
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")

    @property
    def content_width(self) -> float:
        """Width available for wrapped text (excluding margins)."""
        return self.page_width - 2 * self.margin

    @property
    def margin_bottom(self) -> float:
        """Lowest y a text line may be drawn at."""
        return self.margin

    @property
    def lines_per_page(self) -> int:
        """Number of body lines a fresh page can hold."""
        return int((self.top_start - self.margin_bottom) // self.line_height) + 1
