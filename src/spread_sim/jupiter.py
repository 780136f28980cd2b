from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional


class JupiterClient:
    def __init__(self, endpoint: str) -> None:
        self.endpoint = endpoint.rstrip("/")

    def quote_params(self, in_mint: str, out_mint: str, amount: int, slippage_pct: Decimal) -> Dict[str, str]:
        slippage_bps = (Decimal(slippage_pct) * Decimal(100)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return {
            "inputMint": in_mint,
            "outputMint": out_mint,
            "amount": str(amount),
            "slippageBps": str(int(slippage_bps)),
            "swapMode": "ExactIn",
        }

    def parse_out_amount(self, response: Dict[str, Any]) -> Optional[int]:
        if not isinstance(response, dict):
            raise ValueError("Jupiter quote response is not an object")

        out_amount = response.get("outAmount")
        if out_amount is None:
            # v4 responses nest routes under "data"
            routes = response.get("data")
            if isinstance(routes, list) and routes and isinstance(routes[0], dict):
                out_amount = routes[0].get("outAmount")
        if out_amount is None:
            return None

        if isinstance(out_amount, (bool, float)):
            raise ValueError("Jupiter outAmount is not an integer")
        try:
            return int(out_amount)
        except (TypeError, ValueError):
            raise ValueError("Jupiter outAmount is not parseable as int") from None
