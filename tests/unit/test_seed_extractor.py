from datetime import datetime, timezone
from decimal import Decimal
import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pseudo_random import Symbol, to_seed_int
from pseudo_random.application.services.seed_extractor import MAX_SEED, fold_digest, seed_for
from pseudo_random.domain.errors import StructuralLimitError
from pseudo_random.domain.values import NULL, TRUE, ArrayValue, IntegerValue, MapValue


# Computed once from the FNV-1a digest of each fixture's canonical bytes.
GOLDEN_SEEDS = [
    (None, 694295357),
    (True, 694283247),
    (False, 694301077),
    (0, 1038817579),
    (5, 1038811181),
    (-1, 1038819288),
    (300, 2770057),
    (2**63, 513404166),
    (0.0, 1613155237),
    (-0.0, 1579251880),
    (1.5, 737413044),
    ("", 1034020033),
    ("hello", 869365218),
    ("test", 945469805),
    (Symbol("test"), 341132808),
    ([], 1038029795),
    ({}, 1038390866),
    ([1, 2, 3], 1172251188),
    ([3, 2, 1], 100258991),
    ({"a": 1, "b": 2}, 632171394),
    (datetime(2024, 1, 1, tzinfo=timezone.utc), 238837280),
    (datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc), 563210035),
    (Decimal("1.5"), 294812467),
]


class FoldDigestTests(unittest.TestCase):
    def test_fold_xors_halves_and_clears_sign_bit(self) -> None:
        self.assertEqual(0, fold_digest(0))
        self.assertEqual(0, fold_digest(0x0000_0001_0000_0001))
        self.assertEqual(0x7FFF_FFFF, fold_digest(0xFFFF_FFFF_0000_0000))
        self.assertEqual(0x1234_5678, fold_digest(0x1234_5678))


class SeedForTests(unittest.TestCase):
    def test_golden_seeds_for_value_model(self) -> None:
        self.assertEqual(694295357, seed_for(NULL))
        self.assertEqual(694283247, seed_for(TRUE))
        self.assertEqual(1038811181, seed_for(IntegerValue(5)))
        self.assertEqual(1038029795, seed_for(ArrayValue(())))
        self.assertEqual(1038390866, seed_for(MapValue(())))

    def test_golden_seeds_for_host_values(self) -> None:
        for value, expected in GOLDEN_SEEDS:
            with self.subTest(value=value):
                self.assertEqual(expected, to_seed_int(value))

    def test_seed_is_repeatable_and_in_range(self) -> None:
        samples = [None, 7, -7, 3.25, "x", [1, [2, [3]]], {"k": {"nested": [True, None]}}]
        for sample in samples:
            with self.subTest(sample=sample):
                first = to_seed_int(sample)
                self.assertEqual(first, to_seed_int(sample))
                self.assertGreaterEqual(first, 0)
                self.assertLessEqual(first, MAX_SEED)

    def test_zero_and_negative_zero_differ(self) -> None:
        self.assertNotEqual(to_seed_int(0.0), to_seed_int(-0.0))

    def test_depth_limit_applies(self) -> None:
        nested = ArrayValue((ArrayValue((NULL,)),))
        self.assertGreaterEqual(seed_for(nested, max_depth=2), 0)
        with self.assertRaises(StructuralLimitError):
            seed_for(nested, max_depth=1)


if __name__ == "__main__":
    unittest.main()
