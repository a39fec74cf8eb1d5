"""
Unit tests for poster download and decoding.
"""

import pytest
import requests
from unittest.mock import MagicMock, patch

from movie_pdf.images import ImageFetchError, decode_image, fetch_thumbnail

URL = "https://example.org/posters/inception.jpg"


def _response(content=b"", status_error=None):
    resp = MagicMock()
    resp.content = content
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    return resp


class TestFetchThumbnail:
    """Tests for fetch_thumbnail()."""

    def test_fetch_when_png_then_reader_with_image_size(self, png_bytes):
        # Arrange
        with patch("movie_pdf.images.provider.requests.get", return_value=_response(png_bytes)) as get:
            # Act
            reader = fetch_thumbnail(URL, timeout=3)

        # Assert
        get.assert_called_once_with(URL, timeout=3)
        assert reader.getSize() == (40, 60)

    def test_fetch_when_connection_fails_then_image_fetch_error(self):
        with patch(
            "movie_pdf.images.provider.requests.get",
            side_effect=requests.ConnectionError("unreachable"),
        ):
            with pytest.raises(ImageFetchError, match="Could not download"):
                fetch_thumbnail(URL)

    def test_fetch_when_timeout_then_image_fetch_error(self):
        with patch("movie_pdf.images.provider.requests.get", side_effect=requests.Timeout()):
            with pytest.raises(ImageFetchError):
                fetch_thumbnail(URL)

    def test_fetch_when_http_404_then_image_fetch_error(self):
        resp = _response(b"not found", status_error=requests.HTTPError("404 Client Error"))

        with patch("movie_pdf.images.provider.requests.get", return_value=resp):
            with pytest.raises(ImageFetchError, match="404"):
                fetch_thumbnail(URL)

    def test_fetch_when_html_body_then_decode_error(self):
        resp = _response(b"<html>poster moved</html>")

        with patch("movie_pdf.images.provider.requests.get", return_value=resp):
            with pytest.raises(ImageFetchError, match="decode"):
                fetch_thumbnail(URL)


class TestDecodeImage:
    """Tests for decode_image()."""

    def test_decode_when_empty_then_raises(self):
        with pytest.raises(ImageFetchError, match="Empty"):
            decode_image(b"")

    def test_decode_when_truncated_png_then_raises(self, png_bytes):
        with pytest.raises(ImageFetchError):
            decode_image(png_bytes[: len(png_bytes) // 2])

    def test_decode_when_palette_image_then_converted(self):
        import io
        from PIL import Image

        img = Image.new("P", (10, 20))
        buf = io.BytesIO()
        img.save(buf, format="GIF")

        reader = decode_image(buf.getvalue())

        assert reader.getSize() == (10, 20)

    def test_decode_when_decompression_bomb_then_raises(self, png_bytes, monkeypatch):
        from PIL import Image

        # 40x60 is more than twice this limit, so Pillow refuses it outright
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        with pytest.raises(ImageFetchError, match="decode"):
            decode_image(png_bytes)
