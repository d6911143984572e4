"""Tests for svg_theme.core.raster — PIL previews and sampling them back."""

import pytest
from PIL import Image
from svg_theme.core.builder import DEFAULT_THEME
from svg_theme.core.raster import render_theme, sample_theme


class TestRenderTheme:
    def test_size(self, apollo_theme):
        assert render_theme(apollo_theme).size == (96, 64)

    def test_scaled_size(self, apollo_theme):
        assert render_theme(apollo_theme, scale=4).size == (384, 256)

    def test_mode(self, apollo_theme):
        assert render_theme(apollo_theme).mode == 'RGB'

    def test_background_corner(self, apollo_theme):
        image = render_theme(apollo_theme)
        assert image.getpixel((0, 0)) == tuple(apollo_theme.background)
        assert image.getpixel((95, 63)) == tuple(apollo_theme.background)

    def test_circle_centres(self, apollo_theme):
        image = render_theme(apollo_theme)
        assert image.getpixel((24, 24)) == tuple(apollo_theme.f_high)
        assert image.getpixel((72, 40)) == tuple(apollo_theme.b_inv)

    def test_bad_scale(self, apollo_theme):
        with pytest.raises(ValueError):
            render_theme(apollo_theme, scale=0)


class TestSampleTheme:
    @pytest.mark.parametrize('scale', [1, 2, 5])
    def test_recovers_theme(self, apollo_theme, scale):
        assert sample_theme(render_theme(apollo_theme, scale=scale), scale=scale) == apollo_theme

    def test_default_theme(self):
        assert sample_theme(render_theme(DEFAULT_THEME)) == DEFAULT_THEME

    def test_from_saved_png(self, tmp_path, apollo_theme):
        path = tmp_path / 'preview.png'
        render_theme(apollo_theme, scale=2).save(path)
        with Image.open(path) as image:
            assert sample_theme(image, scale=2) == apollo_theme

    def test_accepts_rgba(self, apollo_theme):
        image = render_theme(apollo_theme).convert('RGBA')
        assert sample_theme(image) == apollo_theme

    def test_wrong_size(self, apollo_theme):
        with pytest.raises(ValueError, match='96x64'):
            sample_theme(render_theme(apollo_theme, scale=2))
