from typing import List, Optional

from .models import RoundTrip, SimulationReport, UnitPrice


def format_price(price: Optional[UnitPrice]) -> str:
    if price is None:
        return "N/A"
    return f"{price.value:.4f} {price.quote}"


def _round_trip_lines(trip: RoundTrip) -> List[str]:
    result = trip.result
    if result is None:
        reason = " and ".join(trip.missing) + " price missing" if trip.missing else "buy price not positive"
        return [f"{trip.label}: not computable ({reason})"]

    verdict = "PROFITABLE" if result.profitable else "Not profitable"
    lines = [
        f"Hypothetical: buy 1 {result.buy_price.base} on {result.buy_venue} -> sell on {result.sell_venue}",
        f"  Spread: {result.spread_pct:.2f}% {verdict}",
    ]
    if not result.units_consistent:
        lines.append(
            f"  Note: units mismatch ({result.buy_price.quote} per {result.buy_price.base}"
            f" vs {result.sell_price.quote} per {result.sell_price.base})"
        )
    return lines


def to_text(report: SimulationReport) -> str:
    base, quote = report.pair.split("/", 1)
    title = f"Arbitrage simulation for {report.pair}"
    pool_title = f"Pool prices ({report.pool.pool_key}):" if report.pool.pool_key else "Pool prices:"
    lines: List[str] = [
        title,
        "=" * len(title),
        "Swap quote prices:",
        f"- {base} -> {quote}: {format_price(report.quote_base_to_quote)}",
        f"- {quote} -> {base}: {format_price(report.quote_quote_to_base)}",
        "",
        pool_title,
        f"- {base} -> {quote}: {format_price(report.pool.base_to_quote)}",
        f"- {quote} -> {base}: {format_price(report.pool.quote_to_base)}",
        "",
    ]
    for trip in report.round_trips:
        lines.extend(_round_trip_lines(trip))
        lines.append("")
    lines.append("Simulation complete.")
    return "\n".join(lines)
