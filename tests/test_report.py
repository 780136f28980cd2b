import unittest
from decimal import Decimal

from spread_sim.models import PoolPriceSnapshot, RoundTrip, SimulationReport, UnitPrice
from spread_sim.report import format_price, to_text
from spread_sim.spread import evaluate


def price(value: str, base: str, quote: str, venue: str) -> UnitPrice:
    return UnitPrice(value=Decimal(value), base=base, quote=quote, venue=venue)


class ReportTests(unittest.TestCase):
    def test_format_price(self) -> None:
        self.assertEqual(format_price(None), "N/A")
        self.assertEqual(format_price(price("150", "SOL", "USDC", "jupiter")), "150.0000 USDC")

    def test_to_text_renders_prices_and_verdicts(self) -> None:
        forward = price("150", "SOL", "USDC", "jupiter")
        pool = PoolPriceSnapshot(
            base_to_quote=price("151", "SOL", "USDC", "orca"),
            quote_to_base=price("0.0068", "USDC", "SOL", "orca"),
            pool_key="SOL/USDC",
        )
        report = SimulationReport(
            pair="SOL/USDC",
            quote_base_to_quote=forward,
            quote_quote_to_base=None,
            pool=pool,
            round_trips=[
                RoundTrip("jupiter -> orca", forward, pool.quote_to_base, evaluate(forward, pool.quote_to_base, "jupiter -> orca")),
                RoundTrip("orca -> jupiter", pool.base_to_quote, None, None),
            ],
        )

        text = to_text(report)

        self.assertIn("Arbitrage simulation for SOL/USDC", text)
        self.assertIn("- SOL -> USDC: 150.0000 USDC", text)
        self.assertIn("- USDC -> SOL: N/A", text)
        self.assertIn("Pool prices (SOL/USDC):", text)
        self.assertIn("Hypothetical: buy 1 SOL on jupiter -> sell on orca", text)
        self.assertIn("Spread: 2.00% PROFITABLE", text)
        self.assertIn("orca -> jupiter: not computable (sell price missing)", text)
        self.assertNotIn("units mismatch", text)
        self.assertTrue(text.endswith("Simulation complete."))

    def test_to_text_notes_unit_mismatch(self) -> None:
        buy = price("150", "SOL", "USDC", "jupiter")
        sell = price("151", "SOL", "USDC", "orca")
        with self.assertLogs("spread_sim.spread", level="WARNING"):
            result = evaluate(buy, sell, "jupiter -> orca")
        report = SimulationReport(
            pair="SOL/USDC",
            quote_base_to_quote=buy,
            quote_quote_to_base=None,
            pool=PoolPriceSnapshot(),
            round_trips=[RoundTrip("jupiter -> orca", buy, sell, result)],
        )

        text = to_text(report)

        self.assertIn("Note: units mismatch (USDC per SOL vs USDC per SOL)", text)
        self.assertIn("Pool prices:", text)


if __name__ == "__main__":
    unittest.main()
