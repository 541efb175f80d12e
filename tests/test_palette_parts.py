"""
Unit tests for the pieces the palette loop is built from: band sampling, tone scales,
text selection and variant pairs.
Run from project root: python -m pytest tests/ -v
"""
import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestSampler(unittest.TestCase):
    """Seed colors stay inside their band's HSL ranges."""

    def test_sample_hsl_within_bounds(self):
        from a11y_palette.palette.sampler import BANDS, sample_hsl

        rng = random.Random(11)
        for band, ranges in BANDS.items():
            for _ in range(200):
                hsl = sample_hsl(band, rng)
                for value, (lo, hi) in zip(hsl, ranges):
                    self.assertTrue(lo <= value <= hi, msg=f"{band}: {hsl}")
                    self.assertIsInstance(value, int)

    def test_sample_band_lightness_matches_band(self):
        from a11y_palette.color.convert import hex_to_hsl, normalize_hex
        from a11y_palette.palette.sampler import BANDS, sample_band

        rng = random.Random(5)
        for band, (_, _, (l_lo, l_hi)) in BANDS.items():
            for _ in range(200):
                seed = sample_band(band, rng)
                self.assertEqual(seed, normalize_hex(seed))
                # 8-bit rounding moves lightness by well under one percent
                lightness = hex_to_hsl(seed)[2]
                self.assertTrue(l_lo - 1 <= lightness <= l_hi + 1, msg=f"{band}: {seed} L={lightness:.1f}")

    def test_same_seed_same_samples(self):
        from a11y_palette.palette.sampler import sample_band

        a = [sample_band("pastel", random.Random(3)) for _ in range(3)]
        rng1, rng2 = random.Random(9), random.Random(9)
        self.assertEqual(len(set(a)), 1)
        self.assertEqual(
            [sample_band("light", rng1) for _ in range(10)],
            [sample_band("light", rng2) for _ in range(10)],
        )

    def test_make_rng(self):
        from a11y_palette.palette.sampler import sample_band
        from a11y_palette.random_utils import make_rng, randint_inclusive

        self.assertEqual(sample_band("dark", make_rng(12)), sample_band("dark", make_rng(12)))
        self.assertIn(randint_inclusive(3, 3, make_rng()), {3})
        with self.assertRaises(ValueError):
            randint_inclusive(5, 4)

    def test_unknown_band(self):
        from a11y_palette.palette.sampler import sample_band

        with self.assertRaises(ValueError):
            sample_band("neon", random.Random(0))


class TestThemeBuilder(unittest.TestCase):
    """Tone scales built around a seed."""

    def test_color_keys(self):
        from a11y_palette.color.convert import hex_to_hsl
        from a11y_palette.palette.theme import color_keys

        keys = color_keys("#336699")
        self.assertEqual(len(keys), 3)
        self.assertEqual(keys[1], "#336699")
        self.assertGreater(hex_to_hsl(keys[0])[2], hex_to_hsl(keys[1])[2])
        self.assertLess(hex_to_hsl(keys[2])[2], hex_to_hsl(keys[1])[2])
        self.assertEqual(color_keys("#abc")[1], "#AABBCC")

    def test_build_theme_shape(self):
        from a11y_palette.palette.schema import SCALE_RATIOS, ThemeConfig
        from a11y_palette.palette.theme import build_theme

        result = build_theme("#336699")
        self.assertEqual(result.base, "#FFFFFF")
        self.assertEqual(len(result.theme.colors), len(SCALE_RATIOS))
        self.assertEqual(len(result.theme.inverse), len(SCALE_RATIOS))
        self.assertEqual([v["value"] for v in result.raw["values"]], result.theme.colors)
        self.assertEqual([v["value"] for v in result.raw["inverse"]], result.theme.inverse)

        custom = build_theme("#336699", ThemeConfig(base_color="#336699"))
        self.assertEqual(custom.base, "#336699")

    def test_scales_sit_on_opposite_sides_of_their_backgrounds(self):
        from a11y_palette.color.contrast import relative_luminance
        from a11y_palette.palette.theme import build_theme

        theme = build_theme("#2A6F4E").theme
        # Light scale is darker than the brightness-95 background, inverse lighter than brightness-20
        for color in theme.colors:
            self.assertLessEqual(relative_luminance(color), relative_luminance("#F2F2F2"))
        for color in theme.inverse:
            self.assertGreaterEqual(relative_luminance(color), relative_luminance("#333333"))
        self.assertGreater(relative_luminance(theme.inverse[-1]), relative_luminance(theme.colors[-1]))

    def test_malformed_seed_propagates(self):
        from a11y_palette.palette.theme import build_theme

        with self.assertRaises(ValueError):
            build_theme("not-a-color")


class TestSelector(unittest.TestCase):
    """First-qualifying text color selection."""

    CANDIDATES = ["#FFFFFF", "#777777", "#595959", "#000000"]

    def test_valid_contrast_keeps_order(self):
        from a11y_palette.palette.selector import valid_contrast

        self.assertEqual(valid_contrast("#FFFFFF", self.CANDIDATES), ["#595959", "#000000"])

    def test_select_first_qualifying(self):
        from a11y_palette.palette.selector import select_text

        self.assertEqual(select_text("#FFFFFF", self.CANDIDATES), "#595959")
        # #777777 is 4.48:1 on white
        self.assertEqual(select_text("#FFFFFF", self.CANDIDATES, threshold=4.4), "#777777")

    def test_select_is_stable(self):
        from a11y_palette.palette.selector import select_text

        results = {select_text("#1E2A38", ["#223344", "#8899AA", "#DDEEFF"]) for _ in range(20)}
        self.assertEqual(len(results), 1)

    def test_none_when_nothing_qualifies(self):
        from a11y_palette.palette.selector import select_text

        self.assertIsNone(select_text("#FFFFFF", ["#EEEEEE", "#DDDDDD"]))
        self.assertIsNone(select_text("#FFFFFF", []))

    def test_fallback_index(self):
        from a11y_palette.palette.schema import FALLBACK_TEXT_INDEX
        from a11y_palette.palette.selector import select_text

        scale = [f"#{v:02X}{v:02X}{v:02X}" for v in range(250, 205, -5)]
        self.assertEqual(len(scale), 9)
        self.assertEqual(select_text("#FFFFFF", scale, fallback_index=FALLBACK_TEXT_INDEX), scale[4])


class TestVariantGenerator(unittest.TestCase):
    """Normal/inverted pairs and gradient expansion."""

    def setUp(self):
        from a11y_palette.color.convert import hsl_to_hex

        self.dark_seed = hsl_to_hex(200, 50, 10)

    def test_dark_seed_uses_inverse_scale(self):
        from a11y_palette.color.contrast import contrast_ratio, relative_luminance
        from a11y_palette.color.convert import hex_to_hsl
        from a11y_palette.palette.variant import generate_variant

        normal, inverted = generate_variant(self.dark_seed, use_inverse=True)
        self.assertIsNotNone(normal.text)
        self.assertIn(normal.text, normal.theme.inverse)
        self.assertGreater(relative_luminance(normal.text), relative_luminance(self.dark_seed))
        self.assertGreater(hex_to_hsl(normal.text)[2], 40)
        self.assertGreaterEqual(contrast_ratio(normal.bg, normal.text), 4.5)

    def test_inverted_swaps_roles(self):
        from a11y_palette.palette.variant import generate_variant

        normal, inverted = generate_variant(self.dark_seed, use_inverse=True)
        self.assertEqual(normal.bg, self.dark_seed)
        self.assertEqual(inverted.bg, normal.text)
        self.assertEqual(inverted.text, normal.bg)
        self.assertIs(inverted.theme, normal.theme)

    def test_bg_gradient(self):
        from a11y_palette.color.convert import darken, lighten
        from a11y_palette.palette.schema import GradientOptions
        from a11y_palette.palette.variant import generate_variant

        normal, inverted = generate_variant(self.dark_seed, use_inverse=True, gradient=GradientOptions(steps=4, bg=True))
        self.assertEqual(len(normal.bg), 4)
        self.assertEqual(normal.bg[0], self.dark_seed)
        self.assertEqual(normal.bg[-1], darken(0.2, self.dark_seed))
        self.assertIsInstance(normal.text, str)
        self.assertEqual(len(inverted.bg), 4)
        self.assertEqual(inverted.bg[0], normal.text)
        self.assertEqual(inverted.bg[-1], lighten(0.2, normal.text))

    def test_single_step_gradient(self):
        from a11y_palette.palette.schema import GradientOptions
        from a11y_palette.palette.variant import generate_variant

        normal, _ = generate_variant(self.dark_seed, use_inverse=True, gradient=GradientOptions(steps=1, bg=True))
        self.assertEqual(normal.bg, [self.dark_seed])

    def test_text_gradient(self):
        from a11y_palette.color.convert import darken, lighten
        from a11y_palette.palette.schema import GradientOptions
        from a11y_palette.palette.variant import generate_variant

        normal, inverted = generate_variant(self.dark_seed, use_inverse=True, gradient=GradientOptions(steps=3, text=True))
        self.assertIsInstance(normal.bg, str)
        self.assertEqual(len(normal.text), 3)
        self.assertEqual(normal.text[-1], lighten(0.2, normal.text[0]))
        self.assertEqual(inverted.text[0], self.dark_seed)
        self.assertEqual(inverted.text[-1], darken(0.2, self.dark_seed))

    def test_failure_leaves_text_unset(self):
        from a11y_palette.palette.schema import GradientOptions
        from a11y_palette.palette.variant import generate_variant

        normal, inverted = generate_variant(
            self.dark_seed, use_inverse=True, gradient=GradientOptions(steps=3, bg=True), threshold=30
        )
        self.assertIsNone(normal.text)
        self.assertIsNone(inverted.text)
        self.assertFalse(normal.is_valid)
        self.assertEqual(normal.bg, self.dark_seed)

    def test_gradient_stops_direction(self):
        from a11y_palette.palette.variant import gradient_stops

        self.assertEqual(gradient_stops("#000000", 2, "lighten"), ["#000000", "#333333"])
        with self.assertRaises(ValueError):
            gradient_stops("#000000", 2, "sideways")


if __name__ == "__main__":
    unittest.main()
