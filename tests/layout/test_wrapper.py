"""
Unit tests for text measurement and word wrapping.
"""

import pytest

from movie_pdf.layout import measure_text, wrap_text

FONT = "Helvetica"
SIZE = 14

LOREM = (
    "A thief who steals corporate secrets through the use of dream-sharing "
    "technology is given the inverse task of planting an idea into the mind "
    "of a C.E.O., but his tragic past may doom the project and his team to "
    "disaster. Directed by Christopher Nolan, the film follows a team of "
    "specialists who enter layered dreams, each level slower than the one "
    "above, while a projection of a dead wife sabotages every plan."
)


class TestMeasureText:
    """Tests for measure_text()."""

    def test_measure_when_empty_then_zero(self):
        assert measure_text("", FONT, SIZE) == 0.0

    def test_measure_when_size_doubles_then_width_doubles(self):
        """Width scales linearly with font size (size / 1000 convention)."""
        single = measure_text("Inception", FONT, 10)
        double = measure_text("Inception", FONT, 20)

        assert double == pytest.approx(2 * single)

    def test_measure_when_helvetica_a_then_uses_afm_advance(self):
        """Helvetica 'a' has an advance of 556/1000 em."""
        assert measure_text("a", FONT, 10) == pytest.approx(5.56)

    def test_measure_when_bold_then_wider(self):
        assert measure_text("Inception", "Helvetica-Bold", SIZE) > measure_text("Inception", FONT, SIZE)


class TestWrapText:
    """Tests for wrap_text()."""

    def test_wrap_when_empty_then_no_lines(self):
        assert wrap_text("", 200, FONT, SIZE) == []

    def test_wrap_when_only_whitespace_then_no_lines(self):
        assert wrap_text("   \n\t  ", 200, FONT, SIZE) == []

    def test_wrap_when_short_text_then_single_line(self):
        assert wrap_text("Inception", 200, FONT, SIZE) == ["Inception"]

    def test_wrap_when_repeated_whitespace_then_collapsed(self):
        """Runs of spaces, tabs and newlines act as one separator."""
        assert wrap_text("a   b\n\tc", 1000, FONT, SIZE) == ["a b c"]

    def test_wrap_when_line_exactly_fits_then_kept_together(self):
        """A line whose width equals max_width is accepted."""
        # Arrange
        width = measure_text("aa aa", FONT, 10)

        # Act & Assert
        assert wrap_text("aa aa", width, FONT, 10) == ["aa aa"]

    def test_wrap_when_line_slightly_too_wide_then_breaks(self):
        width = measure_text("aa aa", FONT, 10)

        assert wrap_text("aa aa", width - 0.01, FONT, 10) == ["aa", "aa"]

    def test_wrap_when_word_wider_than_limit_then_alone_on_line(self):
        """Oversized words are never split and never produce empty lines."""
        # Act
        lines = wrap_text("to Supercalifragilisticexpialidocious and back", 60, FONT, SIZE)

        # Assert
        assert lines == ["to", "Supercalifragilisticexpialidocious", "and back"]
        assert all(lines)

    def test_wrap_when_first_word_oversized_then_no_leading_empty_line(self):
        lines = wrap_text("Supercalifragilisticexpialidocious", 10, FONT, SIZE)

        assert lines == ["Supercalifragilisticexpialidocious"]

    @pytest.mark.parametrize("max_width", [120, 200, 350, 512])
    def test_wrap_when_paragraph_then_every_line_fits(self, max_width):
        """With max_width above the widest word, every line fits."""
        # Arrange
        widest = max(measure_text(w, FONT, SIZE) for w in LOREM.split())
        assert max_width >= widest

        # Act
        lines = wrap_text(LOREM, max_width, FONT, SIZE)

        # Assert
        assert len(lines) > 1
        for line in lines:
            assert measure_text(line, FONT, SIZE) <= max_width

    @pytest.mark.parametrize("max_width", [120, 200, 512])
    def test_wrap_when_joined_then_reproduces_collapsed_text(self, max_width):
        lines = wrap_text(LOREM, max_width, FONT, SIZE)

        assert " ".join(lines) == " ".join(LOREM.split())

    @pytest.mark.parametrize("max_width", [120, 200, 512])
    def test_wrap_when_rewrapped_then_same_lines(self, max_width):
        """Wrapping already-wrapped output is idempotent."""
        # Arrange
        lines = wrap_text(LOREM, max_width, FONT, SIZE)

        # Act
        rewrapped = wrap_text(" ".join(lines), max_width, FONT, SIZE)

        # Assert
        assert rewrapped == lines

    def test_wrap_when_called_twice_then_same_result(self):
        """Result is a plain list, so it can be iterated repeatedly."""
        lines = wrap_text(LOREM, 200, FONT, SIZE)

        assert isinstance(lines, list)
        assert list(lines) == list(lines)
        assert wrap_text(LOREM, 200, FONT, SIZE) == lines

    def test_wrap_when_greedy_then_next_word_would_not_fit(self):
        """Each line is closed only because the following word overflowed."""
        # Arrange
        max_width = 200
        lines = wrap_text(LOREM, max_width, FONT, SIZE)

        # Act & Assert
        for line, following in zip(lines, lines[1:]):
            next_word = following.split()[0]
            assert measure_text(f"{line} {next_word}", FONT, SIZE) > max_width
