"""Tests for the AutoCAD color index."""

import pytest

from dxfparse import colors


class TestLookup:
    """Test the color index lookup."""

    def test_table_size(self):
        """Test that the table covers all 256 indices."""
        assert len(colors.AUTOCAD_COLOR_INDEX) == 256

    @pytest.mark.parametrize(
        "index, expected",
        [
            (1, 0xFF0000),
            (2, 0xFFFF00),
            (3, 0x00FF00),
            (5, 0x0000FF),
            (7, 0xFFFFFF),
            (255, 0xFFFFFF),
        ],
    )
    def test_real_colors(self, index, expected):
        """Test some well known colors."""
        assert colors.lookup(index) == expected

    @pytest.mark.parametrize("index", [colors.BY_BLOCK, colors.BY_LAYER])
    def test_sentinels_are_not_colors(self, index):
        """Test that BYBLOCK and BYLAYER are not resolved."""
        assert colors.is_inherited(index)
        assert colors.lookup(index) is None

    @pytest.mark.parametrize("index", [-3, 300])
    def test_out_of_range(self, index):
        """Test indices outside the table."""
        assert colors.lookup(index) is None

    def test_to_rgb(self):
        """Test splitting a true color into its components."""
        rgb = colors.to_rgb(0xFF8001)

        assert tuple(rgb) == (255, 128, 1)
        assert rgb.r == 255
