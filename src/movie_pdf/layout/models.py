"""
Module: movie_pdf.layout.models

Purpose:
    Data models for page layout.
    Immutable content blocks produced per movie and consumed once by
    the renderer.

Key Classes:
    - BlockKind: Kind of renderable unit
    - ContentBlock: One heading, field line, paragraph or poster

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - movie_pdf.layout.composer: Creates ContentBlocks
    - movie_pdf.output.renderer: Draws ContentBlocks
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BlockKind(Enum):
    """Kind of content block, which decides how it is drawn."""
    HEADING = "heading"      # centered, bold, single line
    FIELD = "field"          # "<label>: <value>", wrapped
    PARAGRAPH = "paragraph"  # free text, wrapped
    IMAGE = "image"          # poster fetched from a URL


@dataclass(frozen=True)
class ContentBlock:
    """
    Renderable content block (immutable).

    Attributes:
        kind: How the block is laid out
        text: Text to draw (empty for images)
        label: Field label (only for FIELD blocks)
        image_url: Poster URL (only for IMAGE blocks)

    Example:
        >>> block = ContentBlock.field("Year", "2010")
        >>> block.display_text
        'Year: 2010'
    """

    kind: BlockKind
    text: str = ""
    label: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def heading(cls, text: str) -> "ContentBlock":
        return cls(kind=BlockKind.HEADING, text=text)

    @classmethod
    def field(cls, label: str, value: str) -> "ContentBlock":
        return cls(kind=BlockKind.FIELD, text=value, label=label)

    @classmethod
    def paragraph(cls, text: str) -> "ContentBlock":
        return cls(kind=BlockKind.PARAGRAPH, text=text)

    @classmethod
    def image(cls, url: str) -> "ContentBlock":
        return cls(kind=BlockKind.IMAGE, image_url=url)

    @property
    def display_text(self) -> str:
        """Text as it appears on the page, label included."""
        if self.kind is BlockKind.FIELD:
            return f"{self.label}: {self.text}" if self.text else f"{self.label}:"
        return self.text
