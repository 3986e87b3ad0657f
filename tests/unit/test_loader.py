"""Unit tests for the font sheet loader.

Tests for load_bitmap, parse_glyphs and load_bitmap_font.
"""

import io
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from gridfont.config import GridConfig, GridFontSettings, RenderConfig
from gridfont.domain import BitmapFont, Glyph
from gridfont.exceptions import FontLoadError, GridGeometryError
from gridfont.io import load_bitmap, load_bitmap_font, load_bitmap_font_from_settings, parse_glyphs


def make_sheet(cols: int, rows: int, cell_w: int, cell_h: int, extra: tuple[int, int] = (0, 0)):
    """Build a sheet where every cell is a distinct solid color."""
    sheet = Image.new("RGBA", (cols * cell_w + extra[0], rows * cell_h + extra[1]), (0, 0, 0, 0))
    draw = ImageDraw.Draw(sheet)
    for row in range(rows):
        for col in range(cols):
            index = row * cols + col
            left, top = col * cell_w, row * cell_h
            draw.rectangle(
                (left, top, left + cell_w - 1, top + cell_h - 1),
                fill=(index * 10 % 256, 255 - index, 40, 255),
            )
    return sheet


class TestLoadBitmap:
    """Tests for load_bitmap."""

    def test_load_from_path(self, tmp_path: Path):
        """Test decoding a PNG file from a path."""
        path = tmp_path / "sheet.png"
        make_sheet(2, 2, 4, 4).save(path)

        image = load_bitmap(path)

        assert image.size == (8, 8)
        assert image.mode == "RGBA"

    def test_load_from_str_path(self, tmp_path: Path):
        """Test paths given as strings are accepted."""
        path = tmp_path / "sheet.png"
        make_sheet(1, 1, 4, 4).save(path)

        assert load_bitmap(str(path)).size == (4, 4)

    def test_load_from_stream(self):
        """Test decoding from a binary stream."""
        buffer = io.BytesIO()
        make_sheet(3, 1, 4, 4).save(buffer, format="PNG")
        buffer.seek(0)

        assert load_bitmap(buffer).size == (12, 4)

    def test_converts_to_rgba(self, tmp_path: Path):
        """Test non-RGBA images are converted."""
        path = tmp_path / "gray.png"
        Image.new("L", (4, 4), 128).save(path)

        image = load_bitmap(path)

        assert image.mode == "RGBA"
        assert image.getpixel((0, 0)) == (128, 128, 128, 255)

    def test_missing_file(self, tmp_path: Path):
        """Test a missing file raises FontLoadError."""
        path = tmp_path / "missing.png"
        with pytest.raises(FontLoadError) as exc_info:
            load_bitmap(path)
        assert exc_info.value.path == str(path)

    def test_undecodable_file(self, tmp_path: Path):
        """Test garbage data raises FontLoadError instead of returning None."""
        path = tmp_path / "garbage.png"
        path.write_bytes(b"definitely not an image")

        with pytest.raises(FontLoadError, match="garbage.png"):
            load_bitmap(path)

    def test_undecodable_stream(self):
        """Test garbage stream data raises FontLoadError."""
        with pytest.raises(FontLoadError):
            load_bitmap(io.BytesIO(b"\x00\x01\x02"))


class TestParseGlyphs:
    """Tests for parse_glyphs."""

    def test_glyph_count(self):
        """Test an exact grid yields cols * rows + 1 glyphs."""
        glyphs = parse_glyphs(make_sheet(4, 3, 8, 12), 8, 12)
        assert len(glyphs) == 13

    def test_placeholder_at_index_zero(self):
        """Test glyph 0 is a transparent cell of the grid size."""
        glyphs = parse_glyphs(make_sheet(2, 2, 8, 12), 8, 12)

        assert (glyphs[0].width, glyphs[0].height) == (8, 12)
        assert glyphs[0].image.getchannel("A").getextrema() == (0, 0)

    def test_row_major_order(self):
        """Test each cell lands at index row * cols + col + 1."""
        sheet = make_sheet(4, 3, 8, 12)
        glyphs = parse_glyphs(sheet, 8, 12)

        for row in range(3):
            for col in range(4):
                expected = sheet.crop((col * 8, row * 12, col * 8 + 8, row * 12 + 12))
                assert glyphs[row * 4 + col + 1] == Glyph(expected)

    def test_all_glyphs_share_cell_size(self):
        """Test every glyph has the cell size."""
        glyphs = parse_glyphs(make_sheet(3, 2, 5, 7), 5, 7)
        assert all((g.width, g.height) == (5, 7) for g in glyphs)

    def test_leftover_pixels_discarded(self):
        """Test partial cells at the right and bottom are ignored."""
        sheet = make_sheet(4, 2, 8, 12, extra=(3, 1))
        glyphs = parse_glyphs(sheet, 8, 12)

        assert len(glyphs) == 9
        assert all((g.width, g.height) == (8, 12) for g in glyphs)

    @pytest.mark.parametrize(("width", "height"), [(0, 8), (8, 0), (-1, 8), (8, -4)])
    def test_invalid_cell_size(self, width, height):
        """Test non-positive cell sizes raise GridGeometryError."""
        with pytest.raises(GridGeometryError):
            parse_glyphs(make_sheet(2, 2, 8, 8), width, height)

    def test_image_smaller_than_cell(self):
        """Test an image smaller than one cell raises GridGeometryError."""
        with pytest.raises(GridGeometryError, match="smaller than one"):
            parse_glyphs(Image.new("RGBA", (7, 20)), 8, 8)

    def test_parse_does_not_modify_image(self):
        """Test the source image is left as it was."""
        sheet = make_sheet(2, 1, 4, 4)
        before = sheet.tobytes()
        parse_glyphs(sheet, 4, 4)
        assert sheet.tobytes() == before


class TestLoadBitmapFont:
    """Tests for load_bitmap_font."""

    def test_load_font(self, tmp_path: Path):
        """Test loading a sheet builds a font with the cell size."""
        path = tmp_path / "font.png"
        make_sheet(16, 2, 8, 12).save(path)

        font = load_bitmap_font("sheet", path, 8, 12)

        assert isinstance(font, BitmapFont)
        assert font.name == "sheet"
        assert (font.width, font.height) == (8, 12)
        assert len(font) == 33

    def test_load_font_with_config(self, tmp_path: Path):
        """Test render config is attached to the font."""
        path = tmp_path / "font.png"
        make_sheet(2, 2, 8, 8).save(path)
        config = RenderConfig(tab_cells=3)

        font = load_bitmap_font("sheet", path, 8, 8, config)

        assert font.config is config

    def test_load_font_decode_failure(self, tmp_path: Path):
        """Test decode failures propagate instead of building a font."""
        path = tmp_path / "broken.png"
        path.write_bytes(b"not a png")

        with pytest.raises(FontLoadError):
            load_bitmap_font("broken", path, 8, 8)

    def test_load_font_bad_geometry(self, tmp_path: Path):
        """Test geometry errors propagate to the caller."""
        path = tmp_path / "font.png"
        make_sheet(1, 1, 4, 4).save(path)

        with pytest.raises(GridGeometryError):
            load_bitmap_font("tiny", path, 8, 8)

    def test_load_font_from_settings(self, tmp_path: Path):
        """Test cell size and render options come from settings."""
        path = tmp_path / "font.png"
        make_sheet(4, 4, 6, 10).save(path)
        settings = GridFontSettings(
            grid=GridConfig(glyph_width=6, glyph_height=10),
            render=RenderConfig(tab_cells=1),
        )

        font = load_bitmap_font_from_settings("configured", path, settings)

        assert (font.width, font.height) == (6, 10)
        assert len(font) == 17
        assert font.config.tab_cells == 1
