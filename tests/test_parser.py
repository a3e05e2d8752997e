"""Tests for histogram text parsing."""

import pytest

from dominant_colors.core.errors import MalformedHistogramLine
from dominant_colors.histogram.parser import HistogramParser, parse_histogram, parse_line


class TestParseLine:
    def test_compact_line(self):
        """Test a line with no whitespace."""
        rec = parse_line("100:(255,0,0,255)#FF0000FF")

        assert rec.pixel_count == 100
        assert (rec.r, rec.g, rec.b) == (255, 0, 0)
        assert rec.alpha == 1.0
        assert rec.hex == "#FF0000FF"

    def test_imagemagick_formatted_line(self):
        """Test the padded layout ImageMagick prints, including the color name."""
        rec = parse_line("      12: (  0,128, 64,128) #00804080 srgba(0,128,64,0.501961)")

        assert rec.pixel_count == 12
        assert rec.rgb == (0, 128, 64)
        assert rec.alpha == 0.5
        assert rec.hex == "#00804080"

    def test_alpha_rounded_to_two_places(self):
        rec = parse_line("1:(0,0,0,64)#00000040")
        assert rec.alpha == 0.25  # 64 / 255 = 0.2509...

    def test_missing_alpha_defaults_to_opaque(self):
        """Histograms of images without alpha still yield an alpha value."""
        rec = parse_line("5: (10, 20, 30) #0A141E srgb(10,20,30)")

        assert rec.alpha == 1.0
        assert rec.hex == "#0A141E"

    def test_trailing_color_name_starting_with_hex_letters(self):
        """Lowercase names such as "black" are not read as hex digits."""
        rec = parse_line("    40: (  0,  0,  0,255) #000000FF black")
        assert rec.hex == "#000000FF"

    def test_hex_kept_verbatim(self):
        """The hex literal is not recomputed from the channel values."""
        rec = parse_line("7:(255,0,0,255)#FE0001FF")
        assert rec.hex == "#FE0001FF"

    @pytest.mark.parametrize(
        "line",
        [
            "abc",
            "100:(255,0,0,255)",
            "100(255,0,0,255)#FF0000FF",
            ":(255,0,0,255)#FF0000FF",
            "100:(255,0,255)FF0000",
            "100:(256,0,0,255)#FF0000FF",
            "100:(255,0,0,300)#FF0000FF",
            "100:(255,0,0,255)#FFFF00000000FFFF",
            "100:(255,0,0,255)#FFF",
            "100:(255,0,0,255)#ff0000ff",
        ],
    )
    def test_malformed_lines(self, line):
        with pytest.raises(MalformedHistogramLine) as exc_info:
            parse_line(line)
        assert exc_info.value.line == line


class TestParseHistogram:
    def test_preserves_line_order(self):
        """Records come back in input order, not sorted."""
        text = "1:(0,0,0,255)#000000FF\n9:(255,255,255,255)#FFFFFFFF\n5:(255,0,0,255)#FF0000FF"
        records = parse_histogram(text)

        assert [r.pixel_count for r in records] == [1, 9, 5]

    def test_skips_blank_lines(self):
        text = "\n  10:(1,2,3,255)#010203FF\n\n   \n20:(4,5,6,255)#040506FF\n"
        records = parse_histogram(text)

        assert len(records) == 2

    def test_empty_text(self):
        assert parse_histogram("") == []

    def test_malformed_line_aborts(self):
        """A bad line fails the whole parse instead of being skipped."""
        text = "10:(1,2,3,255)#010203FF\nabc\n20:(4,5,6,255)#040506FF"

        with pytest.raises(MalformedHistogramLine) as exc_info:
            parse_histogram(text)
        assert exc_info.value.line == "abc"

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            parse_histogram("abc")


class TestHistogramParser:
    def test_parse(self):
        parser = HistogramParser()
        records = parser.parse("3:(1,1,1,255)#010101FF")
        assert records[0].pixel_count == 3

    def test_parse_entries(self):
        """Already-decoded tuples bypass text parsing."""
        parser = HistogramParser()
        records = parser.parse_entries([
            (100, 255, 0, 0, 0.5, "#FF000080"),
            (50, 0, 0, 255, "#0000FF"),
        ])

        assert records[0].alpha == 0.5
        assert records[1].alpha == 1.0
        assert records[1].hex == "#0000FF"
