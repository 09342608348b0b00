from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from console_plot import DEFAULT_OPTIONS, PlotOptions, ValidationError
from console_plot.adapters import normalize_series
from console_plot.options import resolve_plot_options
from console_plot.scales import compute_bounding_box, compute_extent, format_number


class NormalizeSeriesTests(unittest.TestCase):
    def test_lists_are_coerced_to_float_arrays(self) -> None:
        data = normalize_series([1, 2, 3], (4, 5, 6))
        self.assertEqual(data.x.dtype, np.float64)
        self.assertEqual(data.y.tolist(), [4.0, 5.0, 6.0])
        self.assertIsNone(data.z)
        self.assertFalse(data.is_3d)
        self.assertEqual(data.size, 3)

    def test_accepts_ranges_decimals_and_ndarrays(self) -> None:
        data = normalize_series(range(3), [Decimal("0.5"), 1, np.float32(2.0)])
        self.assertEqual(data.x.tolist(), [0.0, 1.0, 2.0])
        self.assertEqual(data.y.tolist(), [0.5, 1.0, 2.0])

    def test_length_mismatch_is_rejected(self) -> None:
        with self.assertRaisesRegex(ValidationError, "length mismatch"):
            normalize_series([1, 2], [1, 2, 3])

    def test_z_length_mismatch_is_rejected(self) -> None:
        with self.assertRaisesRegex(ValidationError, "x and z"):
            normalize_series([1, 2], [1, 2], [1])

    def test_empty_series_is_rejected(self) -> None:
        with self.assertRaisesRegex(ValidationError, "empty"):
            normalize_series([], [])

    def test_non_finite_values_are_rejected(self) -> None:
        with self.assertRaisesRegex(ValidationError, "index 1"):
            normalize_series([1.0, float("nan")], [1.0, 2.0])

    def test_non_numeric_values_are_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            normalize_series([1, "2"], [1, 2])
        with self.assertRaises(ValidationError):
            normalize_series([1, None], [1, 2])
        with self.assertRaises(ValidationError):
            normalize_series("12", "12")

    def test_two_dimensional_arrays_are_rejected(self) -> None:
        with self.assertRaisesRegex(ValidationError, "1-D"):
            normalize_series(np.zeros((2, 2)), [1, 2])

    @unittest.skipIf(importlib.util.find_spec("pandas") is None, "pandas not installed")
    def test_pandas_series_input(self) -> None:
        import pandas as pd

        data = normalize_series(pd.Series([3, 1, 2]), pd.Series([0.5, 1.5, 2.5]))
        self.assertEqual(data.x.tolist(), [3.0, 1.0, 2.0])

    @unittest.skipIf(importlib.util.find_spec("torch") is None, "torch not installed")
    def test_torch_tensor_input(self) -> None:
        import torch

        data = normalize_series(torch.tensor([1.0, 2.0]), torch.tensor([3, 4]))
        self.assertEqual(data.y.tolist(), [3.0, 4.0])


class ExtentTests(unittest.TestCase):
    def test_extent_bounds_every_element_and_hits_both_ends(self) -> None:
        rng = np.random.default_rng(7)
        for _ in range(20):
            values = rng.normal(size=int(rng.integers(1, 50))) * 100
            extent = compute_extent(values)
            self.assertTrue(np.all(values >= extent.min))
            self.assertTrue(np.all(values <= extent.max))
            self.assertIn(extent.min, values.tolist())
            self.assertIn(extent.max, values.tolist())

    def test_empty_series_fails_fast(self) -> None:
        with self.assertRaises(ValidationError):
            compute_extent([])

    def test_non_numeric_series_raises_validation_error(self) -> None:
        with self.assertRaisesRegex(ValidationError, "non-numeric"):
            compute_extent(["a", "b"])

    def test_nan_series_raises_validation_error(self) -> None:
        with self.assertRaisesRegex(ValidationError, "non-finite"):
            compute_extent([1.0, float("nan")])

    def test_two_dimensional_series_raises_validation_error(self) -> None:
        with self.assertRaisesRegex(ValidationError, "1-D"):
            compute_extent(np.asarray([[1, 2], [3, 4]]))
        with self.assertRaises(ValidationError):
            compute_extent([[1, 2], [3, 4]])

    def test_bounding_box_dimensions(self) -> None:
        bbox = compute_bounding_box(normalize_series([1, 2, 3], [4, 5, 6]))
        self.assertEqual((bbox.x.min, bbox.x.max), (1.0, 3.0))
        self.assertEqual((bbox.y.min, bbox.y.max), (4.0, 6.0))
        self.assertEqual((bbox.width, bbox.height), (2.0, 2.0))
        self.assertIsNone(bbox.depth)

    def test_bounding_box_includes_depth_for_z(self) -> None:
        bbox = compute_bounding_box(normalize_series([0, 1], [0, 1], [-2, 5]))
        self.assertEqual(bbox.depth, 7.0)

    def test_single_point_has_zero_size(self) -> None:
        bbox = compute_bounding_box(normalize_series([4], [-1]))
        self.assertEqual((bbox.width, bbox.height), (0.0, 0.0))


class FormatNumberTests(unittest.TestCase):
    def test_integral_values_drop_fraction(self) -> None:
        self.assertEqual(format_number(3.0), "3")
        self.assertEqual(format_number(-19), "-19")

    def test_negative_zero_prints_as_zero(self) -> None:
        self.assertEqual(format_number(-0.0), "0")

    def test_fractions_use_shortest_repr(self) -> None:
        self.assertEqual(format_number(2.5), "2.5")
        self.assertEqual(format_number(0.125), "0.125")

    def test_small_and_large_values_print_like_javascript(self) -> None:
        self.assertEqual(format_number(1e-5), "0.00001")
        self.assertEqual(format_number(1e-6), "0.000001")
        self.assertEqual(format_number(-2.5e-4), "-0.00025")
        self.assertEqual(format_number(1e20), "100000000000000000000")
        self.assertEqual(format_number(1e16), "10000000000000000")
        self.assertEqual(format_number(0.1 + 0.2), "0.30000000000000004")

    def test_exponent_notation_outside_plain_range(self) -> None:
        self.assertEqual(format_number(1e-7), "1e-7")
        self.assertEqual(format_number(1.5e-7), "1.5e-7")
        self.assertEqual(format_number(1e21), "1e+21")
        self.assertEqual(format_number(-1.25e22), "-1.25e+22")

    def test_non_finite_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            format_number(float("inf"))


class PlotOptionsTests(unittest.TestCase):
    def test_none_resolves_to_defaults(self) -> None:
        options = resolve_plot_options(None)
        self.assertIs(options, DEFAULT_OPTIONS)
        self.assertEqual(options, PlotOptions(padding=20.0, xaxis=0.0, yaxis=0.0, type="scatter"))

    def test_mapping_overrides_merge_with_defaults(self) -> None:
        options = resolve_plot_options({"padding": 5, "xaxis": 10})
        self.assertEqual(options.padding, 5.0)
        self.assertEqual(options.xaxis, 10.0)
        self.assertEqual(options.yaxis, 0.0)

    def test_zero_padding_is_honoured(self) -> None:
        self.assertEqual(resolve_plot_options({"padding": 0}).padding, 0.0)

    def test_plot_options_instance_is_validated(self) -> None:
        with self.assertRaises(ValidationError):
            resolve_plot_options(PlotOptions(padding=-1.0))

    def test_unknown_option_is_rejected(self) -> None:
        with self.assertRaisesRegex(ValidationError, "Unknown plot option"):
            resolve_plot_options({"pading": 5})

    def test_invalid_values_are_rejected(self) -> None:
        for overrides in ({"padding": -1}, {"xaxis": True}, {"yaxis": "3"}, {"xaxis": float("nan")}):
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValidationError):
                    resolve_plot_options(overrides)

    def test_only_scatter_type_is_supported(self) -> None:
        with self.assertRaisesRegex(ValidationError, "Unsupported plot type"):
            resolve_plot_options({"type": "line"})

    def test_non_mapping_options_are_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            resolve_plot_options([("padding", 5)])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
