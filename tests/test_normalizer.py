import unittest
from decimal import Decimal

from spread_sim.config import AssetRef
from spread_sim.normalizer import normalize, normalize_quote, to_decimal_price

SOL = AssetRef(symbol="SOL", mint="sol-mint", decimals=9)
USDC = AssetRef(symbol="USDC", mint="usdc-mint", decimals=6)


class NormalizeTests(unittest.TestCase):
    def test_one_unit_request_scales_by_output_decimals(self) -> None:
        price = normalize(150_000_000, 6, 1_000_000_000, 9)
        self.assertEqual(price, Decimal("150"))
        self.assertEqual(f"{price:.4f}", "150.0000")

    def test_request_sizing_is_divided_out(self) -> None:
        # 2 SOL in, 300 USDC out
        self.assertEqual(normalize(300_000_000, 6, 2_000_000_000, 9), Decimal("150"))
        # half a USDC in, 0.0033 SOL out
        self.assertEqual(normalize(3_300_000, 9, 500_000, 6), Decimal("0.0066"))

    def test_absent_or_non_positive_amounts_are_absent(self) -> None:
        for raw in (None, 0, -1, -150_000_000):
            with self.subTest(raw=raw):
                self.assertIsNone(normalize(raw, 6, 1_000_000_000, 9))

    def test_non_integer_amounts_are_absent(self) -> None:
        for raw in ("150", 1.5, True, float("nan")):
            with self.subTest(raw=raw):
                self.assertIsNone(normalize(raw, 6, 1_000_000_000, 9))

    def test_monotonic_in_raw_amount(self) -> None:
        amounts = [1, 2, 999, 1_000, 149_999_999, 150_000_000, 150_000_001, 10**18]
        for decimals in (0, 6, 9, 18):
            prices = [normalize(raw, decimals, 10**9, 9) for raw in amounts]
            for lower, higher in zip(prices, prices[1:]):
                self.assertLess(lower, higher)

    def test_invalid_sizing_raises(self) -> None:
        with self.assertRaises(ValueError):
            normalize(100, 6, 0, 9)
        with self.assertRaises(ValueError):
            normalize(100, -1, 1, 0)

    def test_normalize_quote_tags_units(self) -> None:
        price = normalize_quote(150_000_000, SOL, USDC, SOL.one_unit, "jupiter")
        self.assertEqual(price.value, Decimal("150"))
        self.assertEqual((price.base, price.quote, price.venue), ("SOL", "USDC", "jupiter"))
        self.assertIsNone(normalize_quote(None, SOL, USDC, SOL.one_unit, "jupiter"))


class DecimalPriceTests(unittest.TestCase):
    def test_parses_strings_and_floats(self) -> None:
        self.assertEqual(to_decimal_price("151.25"), Decimal("151.25"))
        self.assertEqual(to_decimal_price(0.5), Decimal("0.5"))

    def test_rejects_junk_and_non_positive(self) -> None:
        for raw in (None, "", "abc", "0", 0, -3, "NaN", "Infinity", True):
            with self.subTest(raw=raw):
                self.assertIsNone(to_decimal_price(raw))


if __name__ == "__main__":
    unittest.main()
