"""
Module: movie_pdf.output

Purpose:
    PDF rendering for movie sheets.

Key Functions:
    - render_movie_pdf(): Render one movie to PDF

Dependencies:
    - reportlab: PDF generation
    - movie_pdf.layout: Layout engine

Used By:
    - movie_pdf.controller: Batch orchestration
"""

from .renderer import render_movie_pdf, RenderError

__all__ = [
    "render_movie_pdf",
    "RenderError",
]
