"""Token amount parsing and scaling."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, localcontext

_AMOUNT_RE = re.compile(r"\d*\.?\d+")

UINT256_MAX = 2**256 - 1


def parse_decimal(amount: object) -> Decimal | None:
    """Parse a plain decimal string; no sign, exponent or separators."""
    if not isinstance(amount, str) or not _AMOUNT_RE.fullmatch(amount):
        return None
    try:
        return Decimal(amount)
    except InvalidOperation:
        return None


def is_valid_amount(amount: object) -> bool:
    value = parse_decimal(amount)
    return value is not None and value > 0


def parse_token_amount(amount: str, decimals: int) -> int:
    """Convert a human amount into the token's smallest unit.

    Raises ValueError when the amount is malformed, has more fractional
    digits than ``decimals`` allows, or does not fit in a uint256.
    """
    if decimals < 0 or decimals > 255:
        raise ValueError("Token decimals must be 0..255.")
    value = parse_decimal(amount)
    if value is None:
        raise ValueError(f"Invalid amount format {amount!r}.")
    with localcontext() as ctx:
        ctx.prec = 100
        units = value.scaleb(decimals)
    if units != units.to_integral_value():
        raise ValueError(f"Amount {amount} has more than {decimals} decimal places.")
    result = int(units)
    if result > UINT256_MAX:
        raise ValueError("Amount exceeds uint256.")
    return result


def format_units(units: int, decimals: int) -> str:
    """Render smallest-unit integers back into a human amount."""
    with localcontext() as ctx:
        ctx.prec = 100
        text = format(Decimal(units).scaleb(-decimals), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"
