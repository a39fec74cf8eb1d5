"""
Module: movie_pdf.images.provider

Purpose:
    Download a poster image and decode it into something reportlab can
    embed.

Key Functions:
    - fetch_thumbnail(): URL -> ImageReader
    - decode_image(): Bytes -> ImageReader

Key Classes:
    - ImageFetchError: Exception for download or decode failures

Dependencies:
    - requests: HTTP download
    - PIL: Image decoding
    - reportlab: ImageReader wrapper

Used By:
    - movie_pdf.output.renderer: Poster placement
"""

from __future__ import annotations

import io
import logging

import requests
from PIL import Image, UnidentifiedImageError
from reportlab.lib.utils import ImageReader

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ImageFetchError(Exception):
    """Poster could not be downloaded or decoded."""
    pass


def fetch_thumbnail(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> ImageReader:
    """
    Download and decode a poster image.

    Args:
        url: HTTP(S) URL of the image
        timeout: Seconds to wait for the server

    Returns:
        ImageReader ready for canvas.drawImage()

    Raises:
        ImageFetchError: If the request fails, the server answers with
            an error status, or the body is not a decodable image
    """
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise ImageFetchError(f"Could not download {url}: {e}") from e

    logger.debug(f"Downloaded {len(resp.content)} bytes from {url}")
    return decode_image(resp.content)


def decode_image(data: bytes) -> ImageReader:
    """
    Decode raw image bytes into a reportlab ImageReader.

    The image is fully loaded with Pillow first so corrupt data fails
    here rather than when the PDF is written. It is re-encoded as PNG.

    Raises:
        ImageFetchError: If the data is not a supported image
    """
    if not data:
        raise ImageFetchError("Empty image data")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            if img.mode not in ("RGB", "RGBA", "L"):
                img = img.convert("RGB")
            buf = io.BytesIO()
            img.save(buf, format="PNG")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        raise ImageFetchError(f"Could not decode image: {e}") from e

    buf.seek(0)
    return ImageReader(buf)
