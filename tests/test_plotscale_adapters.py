from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from plotscale.adapters.normalize import classify_values
from plotscale.errors import PlotScaleDataError
from plotscale.values import Categorical, CategoricalBatch, Numeric, NumericBatch


HAS_PANDAS = importlib.util.find_spec("pandas") is not None
HAS_TORCH = importlib.util.find_spec("torch") is not None


class ClassifyValuesTests(unittest.TestCase):
    def test_strings_are_categorical(self) -> None:
        batch = classify_values(["a", None, "b"])
        self.assertIsInstance(batch, CategoricalBatch)
        self.assertEqual(batch.labels, ("a", None, "b"))
        self.assertEqual(list(batch.items()), [Categorical("a"), None, Categorical("b")])

    def test_numbers_are_numeric(self) -> None:
        batch = classify_values([1, 2.5, Decimal("3.5"), None])
        self.assertIsInstance(batch, NumericBatch)
        np.testing.assert_allclose(batch.values[:3], [1.0, 2.5, 3.5])
        self.assertTrue(np.isnan(batch.values[3]))
        self.assertEqual(next(batch.items()), Numeric(1.0))

    def test_booleans_are_categorical(self) -> None:
        batch = classify_values(np.asarray([True, False]))
        self.assertEqual(batch, CategoricalBatch(labels=("True", "False")))

    def test_narrow_float_nan_is_missing(self) -> None:
        batch = classify_values(np.asarray(["a", np.float32("nan"), np.float16("nan")], dtype=object))
        self.assertEqual(batch.labels, ("a", None, None))

    def test_invalid_utf8_bytes_raise_data_error(self) -> None:
        with self.assertRaises(PlotScaleDataError):
            classify_values(np.asarray([b"\xff", b"a"]))
        self.assertEqual(classify_values(np.asarray([b"a"])).labels, ("a",))

    def test_mixed_column_is_categorical(self) -> None:
        batch = classify_values(["a", 1])
        self.assertEqual(batch.labels, ("a", "1"))

    def test_scalar_inputs_are_wrapped(self) -> None:
        self.assertEqual(classify_values("a").labels, ("a",))
        self.assertIsInstance(classify_values(2.0), NumericBatch)

    def test_existing_batch_passes_through(self) -> None:
        batch = CategoricalBatch(labels=("a",))
        self.assertIs(classify_values(batch), batch)

    def test_rejects_unsupported_input(self) -> None:
        with self.assertRaises(PlotScaleDataError):
            classify_values(np.zeros((2, 2)))
        with self.assertRaises(PlotScaleDataError):
            classify_values({"a": 1})

    @unittest.skipUnless(HAS_PANDAS, "pandas not installed")
    def test_pandas_categorical_keeps_declared_levels(self) -> None:
        import pandas as pd

        series = pd.Series(pd.Categorical(["hi", None, "lo"], categories=["lo", "mid", "hi"]))
        batch = classify_values(series)
        self.assertIsInstance(batch, CategoricalBatch)
        self.assertEqual(batch.labels, ("hi", None, "lo"))
        self.assertEqual(batch.levels, ("lo", "mid", "hi"))

    @unittest.skipUnless(HAS_PANDAS, "pandas not installed")
    def test_pandas_numeric_and_object_series(self) -> None:
        import pandas as pd

        self.assertIsInstance(classify_values(pd.Series([1, 2, 3])), NumericBatch)
        batch = classify_values(pd.Series(["x", np.nan, "y"]))
        self.assertEqual(batch.labels, ("x", None, "y"))

    @unittest.skipUnless(HAS_TORCH, "torch not installed")
    def test_torch_tensors(self) -> None:
        import torch

        numeric = classify_values(torch.tensor([1.0, 2.0]))
        self.assertIsInstance(numeric, NumericBatch)
        np.testing.assert_allclose(numeric.values, [1.0, 2.0])
        flags = classify_values(torch.tensor([True, False]))
        self.assertEqual(flags.labels, ("True", "False"))
        with self.assertRaises(PlotScaleDataError):
            classify_values(torch.zeros((2, 2)))


if __name__ == "__main__":
    unittest.main()
