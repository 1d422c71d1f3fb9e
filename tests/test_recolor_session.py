"""
Tests for RecolorSession and RecolorConfig.

Tests cover:
- Touch-to-fill scenarios
- Touches in the letterbox padding
- Re-tinting without compounding
- Image loading, copying and downsampling
- Configuration round trips
"""

import unittest

import numpy as np
import pytest
from PIL import Image

from RR_Libs.ImageEditingLib.image_models import PixelCoordinate, RecolorStatus
from RR_Libs.ImageEditingLib.recolor_session import RecolorConfig, RecolorSession
from RR_Libs.constants import PAINT_PALETTE

from conftest import GRAY, RED, make_black_square_image, make_gray_image

BLUE = (0, 0, 255)
GREEN = (0, 255, 0)


class TestFillAt(unittest.TestCase):
    """Test filling from display-surface touches."""

    def setUp(self):
        self.session = RecolorSession()

    def test_uniform_gray_becomes_half_red(self):
        self.session.load_image(make_gray_image())
        result = self.session.fill_at((50, 50), (100, 100), RED, tolerance=40)

        self.assertTrue(result.ok)
        self.assertEqual(result.seed, PixelCoordinate(50, 50))
        self.assertEqual(result.filled_pixels, 10000)
        pixels = np.asarray(result.image).reshape(-1, 3)
        self.assertTrue(np.all(np.abs(pixels - np.array([191, 64, 64])) <= 1))

    def test_black_square_only(self):
        self.session.load_image(make_black_square_image())
        result = self.session.fill_at((5, 5), (100, 100), RED, tolerance=10)

        self.assertTrue(result.ok)
        self.assertEqual(result.filled_pixels, 100)
        pixels = np.asarray(result.image)
        self.assertTrue(np.all(pixels[:10, :10] == (128, 0, 0)))
        self.assertTrue(np.all(pixels[10:, :] == GRAY))
        self.assertTrue(np.all(pixels[:, 10:] == GRAY))

    def test_scaled_display(self):
        # 100x100 image shown in a 300x500 view: scale 3, 100px letterbox
        self.session.load_image(make_black_square_image())
        result = self.session.fill_at((15, 115), (300, 500), RED, tolerance=10)
        self.assertEqual(result.seed, PixelCoordinate(5, 5))
        self.assertEqual(result.filled_pixels, 100)

    def test_touch_in_padding_is_ignored(self):
        self.session.load_image(make_gray_image())
        result = self.session.fill_at((50, 20), (100, 200), RED)

        self.assertEqual(result.status, RecolorStatus.OUTSIDE_IMAGE)
        self.assertFalse(result.ok)
        self.assertIsNone(result.image)
        self.assertIsNone(self.session.fill_state)

    def test_touch_in_padding_keeps_previous_state(self):
        self.session.load_image(make_black_square_image())
        self.session.fill_at((5, 55), (100, 200), RED, tolerance=10)
        state = self.session.fill_state
        image = self.session.current_image

        result = self.session.fill_at((5, 10), (100, 200), BLUE)

        self.assertEqual(result.status, RecolorStatus.OUTSIDE_IMAGE)
        self.assertIs(self.session.fill_state, state)
        self.assertIs(self.session.current_image, image)

    def test_fill_without_image(self):
        result = self.session.fill_at((1, 1), (10, 10), RED)
        self.assertEqual(result.status, RecolorStatus.NO_IMAGE)

    def test_default_color_from_config(self):
        session = RecolorSession(RecolorConfig(default_color="Navy"))
        session.load_image(make_gray_image((10, 10)))
        result = session.fill_at_pixel((0, 0))
        self.assertEqual(session.fill_state.color, PAINT_PALETTE["Navy"])
        self.assertTrue(result.ok)

    def test_palette_name_color(self):
        self.session.load_image(make_gray_image((10, 10)))
        self.session.fill_at_pixel((0, 0), "Sage Green")
        self.assertEqual(self.session.fill_state.color, PAINT_PALETTE["Sage Green"])

    def test_fill_at_pixel_out_of_bounds(self):
        self.session.load_image(make_gray_image((10, 10)))
        result = self.session.fill_at_pixel((10, 0), RED)
        self.assertEqual(result.status, RecolorStatus.OUTSIDE_IMAGE)
        self.assertFalse(self.session.can_recolor)

    def test_new_fill_starts_from_original(self):
        pixels = np.zeros((10, 20, 3), dtype=np.uint8)
        pixels[:, 10:] = 255
        self.session.load_image(Image.fromarray(pixels, mode="RGB"))

        self.session.fill_at_pixel((2, 2), RED, tolerance=10)
        result = self.session.fill_at_pixel((15, 2), BLUE, tolerance=10)

        out = np.asarray(result.image)
        self.assertTrue(np.all(out[:, :10] == 0))
        self.assertEqual(tuple(out[0, 15]), (128, 128, 255))
        self.assertEqual(self.session.fill_state.seed, PixelCoordinate(15, 2))


class TestRecolor(unittest.TestCase):
    """Test re-tinting the last filled region."""

    def setUp(self):
        self.session = RecolorSession()
        self.session.load_image(make_black_square_image())

    def test_recolor_without_fill(self):
        result = self.session.recolor(BLUE)
        self.assertEqual(result.status, RecolorStatus.NO_PRIOR_FILL)
        self.assertIsNone(self.session.fill_state)

    def test_recolor_before_image_loaded(self):
        result = RecolorSession().recolor(BLUE)
        self.assertEqual(result.status, RecolorStatus.NO_PRIOR_FILL)

    def test_recolor_reuses_seed(self):
        self.session.fill_at((5, 5), (100, 100), RED, tolerance=10)
        result = self.session.recolor(BLUE)

        self.assertTrue(result.ok)
        self.assertEqual(result.seed, PixelCoordinate(5, 5))
        self.assertEqual(result.image.getpixel((0, 0)), (0, 0, 128))
        self.assertEqual(result.image.getpixel((50, 50)), GRAY)

    def test_recolor_does_not_compound(self):
        self.session.fill_at((5, 5), (100, 100), RED, tolerance=10)
        self.session.recolor(GREEN)
        chained = self.session.recolor(BLUE)

        fresh = RecolorSession()
        fresh.load_image(make_black_square_image())
        direct = fresh.fill_at((5, 5), (100, 100), BLUE, tolerance=10)

        self.assertEqual(chained.image.tobytes(), direct.image.tobytes())

    def test_repeated_recolor_is_stable(self):
        self.session.fill_at_pixel((50, 50), RED)
        first = self.session.recolor(GREEN).image.tobytes()
        for _ in range(5):
            again = self.session.recolor(GREEN).image.tobytes()
            self.assertEqual(again, first)

    def test_recolor_keeps_fill_tolerance(self):
        self.session.fill_at_pixel((5, 5), RED, tolerance=(10, 10, 10))
        self.session.recolor(BLUE)
        self.assertEqual(self.session.fill_state.tolerance, (10, 10, 10))
        self.assertEqual(self.session.fill_state.pixel_count, 100)

    def test_recolor_ignores_later_changes_to_tolerance_list(self):
        pixels = np.full((10, 10, 3), 128, dtype=np.uint8)
        pixels[:, 5:, 0] = 140
        self.session.load_image(Image.fromarray(pixels, mode="RGB"))

        tolerance = [0, 0, 0]
        first = self.session.fill_at_pixel((1, 1), RED, tolerance=tolerance)
        tolerance[0] = 40
        again = self.session.recolor(RED)

        self.assertEqual(first.filled_pixels, 50)
        self.assertEqual(again.filled_pixels, 50)
        self.assertEqual(self.session.fill_state.tolerance, (0, 0, 0))

    def test_recolor_updates_state_as_pair(self):
        self.session.fill_at_pixel((5, 5), RED, tolerance=10)
        result = self.session.recolor(BLUE)
        state = self.session.fill_state
        self.assertIs(state.image, result.image)
        self.assertEqual(state.seed, result.seed)
        self.assertEqual(state.color, BLUE)


class TestLoadImage:
    """Tests for image loading and session lifecycle."""

    def test_load_clears_previous_fill(self):
        session = RecolorSession()
        session.load_image(make_gray_image())
        session.fill_at_pixel((1, 1), RED)
        assert session.can_recolor

        session.load_image(make_gray_image((30, 30)))

        assert not session.can_recolor
        assert session.recolor(BLUE).status == RecolorStatus.NO_PRIOR_FILL
        assert session.current_image.size == (30, 30)

    def test_load_copies_caller_image(self, gray_image):
        session = RecolorSession()
        session.load_image(gray_image)
        gray_image.putpixel((0, 0), RED)

        assert session.original is not gray_image
        assert session.original.getpixel((0, 0)) == GRAY

    def test_fill_never_mutates_original(self, black_square_image):
        session = RecolorSession()
        session.load_image(black_square_image)
        before = session.original.tobytes()

        session.fill_at_pixel((5, 5), RED, tolerance=10)
        session.recolor(BLUE)

        assert session.original.tobytes() == before

    def test_large_image_is_downsampled(self):
        session = RecolorSession(RecolorConfig(max_dimension=256))
        stored = session.load_image(Image.new("RGB", (1024, 600), GRAY))
        assert max(stored.size) <= 256

    def test_downsampling_can_be_disabled(self):
        session = RecolorSession(RecolorConfig(max_dimension=None))
        stored = session.load_image(Image.new("RGB", (1500, 20), GRAY))
        assert stored.size == (1500, 20)

    def test_palette_image_is_normalised(self):
        session = RecolorSession()
        stored = session.load_image(Image.new("P", (8, 8)))
        assert stored.mode == "RGBA"

    def test_reset_keeps_image(self, gray_image):
        session = RecolorSession()
        session.load_image(gray_image)
        session.fill_at_pixel((1, 1), RED)
        session.reset()

        assert session.has_image
        assert not session.can_recolor
        assert session.current_image is session.original


class TestRecolorConfig:
    """Tests for RecolorConfig."""

    def test_defaults(self):
        config = RecolorConfig()
        assert config.tolerance == 40
        assert config.blend_ratio == 0.5
        assert config.connectivity == 4
        assert config.max_dimension == 1024
        assert config.default_color == (255, 0, 0)

    def test_dict_round_trip(self):
        config = RecolorConfig(tolerance=(10, 20, 30), blend_ratio=0.3, connectivity=8)
        restored = RecolorConfig.from_dict(config.to_dict())
        assert restored == config

    def test_from_dict_ignores_unknown_keys(self):
        config = RecolorConfig.from_dict({"tolerance": 12, "theme": "dark"})
        assert config.tolerance == 12

    def test_from_dict_accepts_lists(self):
        config = RecolorConfig.from_dict({"tolerance": [5, 6, 7], "default_color": [1, 2, 3]})
        assert config.tolerance == (5, 6, 7)
        assert config.default_color == (1, 2, 3)

    @pytest.mark.parametrize(
        "kwargs",
        [{"blend_ratio": 1.2}, {"connectivity": 5}, {"backend": "gpu"}, {"default_color": "nope"}],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            RecolorConfig(**kwargs)

    def test_blend_ratio_is_used(self):
        session = RecolorSession(RecolorConfig(blend_ratio=1.0))
        session.load_image(make_gray_image((4, 4)))
        result = session.fill_at_pixel((0, 0), RED)
        assert result.image.getpixel((0, 0)) == RED


if __name__ == "__main__":
    unittest.main()
