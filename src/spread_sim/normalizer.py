"""Conversion of raw provider outputs into directional unit prices."""

from decimal import Decimal, InvalidOperation
from numbers import Integral
from typing import Any, Optional

from .config import AssetRef
from .models import UnitPrice


def normalize(raw_amount_out: Optional[int], output_decimals: int, input_amount: int, input_decimals: int) -> Optional[Decimal]:
    """Return output units received per 1 whole input unit, or ``None``.

    ``raw_amount_out`` is the swap output in smallest units of the output
    asset for a request of ``input_amount`` smallest units of the input asset.
    A missing or non-positive amount means there is no usable quote.
    """
    if output_decimals < 0 or input_decimals < 0:
        raise ValueError("decimals must not be negative")
    if input_amount <= 0:
        raise ValueError("input_amount must be positive")

    if raw_amount_out is None or isinstance(raw_amount_out, bool) or not isinstance(raw_amount_out, Integral):
        return None
    if raw_amount_out <= 0:
        return None

    amount_out = Decimal(int(raw_amount_out)).scaleb(-output_decimals)
    amount_in = Decimal(int(input_amount)).scaleb(-input_decimals)
    return amount_out / amount_in


def normalize_quote(
    raw_amount_out: Optional[int],
    input_asset: AssetRef,
    output_asset: AssetRef,
    input_amount: int,
    venue: str,
) -> Optional[UnitPrice]:
    value = normalize(raw_amount_out, output_asset.decimals, input_amount, input_asset.decimals)
    if value is None:
        return None
    return UnitPrice(value=value, base=input_asset.symbol, quote=output_asset.symbol, venue=venue)


def to_decimal_price(raw: Any) -> Optional[Decimal]:
    """Parse a provider-reported decimal price; non-positive or junk is ``None``."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return None
    if not value.is_finite() or value <= 0:
        return None
    return value
