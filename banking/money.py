# -*- coding: utf-8 -*-
"""
Money Handling Utilities.

Purpose:
- Keeps every balance and amount as a 2dp `Decimal`, never a float.
- Turns raw console text into a validated, strictly positive amount within
  MIN_TRANSACTION and MAX_TRANSACTION from config.
- Formats amounts for display with the configured currency symbol.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN

import banking.config as cfg
from .errors import InvalidAmount


def as_money(value) -> Decimal:
    """
    Normalize any input to Decimal with 2 fractional digits.

    Going through `str()` keeps float inputs from dragging their binary
    representation error into the balance (0.1 stays 0.10).
    """
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)


def as_decimal(value) -> Decimal:
    """Exact Decimal for any numeric input; no quantizing, so large values are safe."""
    return value if isinstance(value, Decimal) else Decimal(str(value))


def validate_amount_positive_in_limits(amount) -> Decimal:
    """
    Validate that the amount is within allowed limits and return normalized Decimal.

    Rules:
    - Must be finite.
    - Must be >= MIN_TRANSACTION once rounded to 2dp (e.g., 0.01).
    - Must be <= MAX_TRANSACTION (business maximum).
    - Raises InvalidAmount if validation fails.
    """
    value = Decimal(str(amount))
    if not value.is_finite():
        raise InvalidAmount("Amount must be a finite number")
    # Limit checks run before quantizing: huge exponents cannot be quantized.
    if value > Decimal(cfg.MAX_TRANSACTION):
        raise InvalidAmount(f"Amount must be <= {cfg.MAX_TRANSACTION}")
    if value <= 0:
        raise InvalidAmount(f"Amount must be >= {cfg.MIN_TRANSACTION}")
    amt = as_money(value)
    if amt < as_money(cfg.MIN_TRANSACTION):
        raise InvalidAmount(f"Amount must be >= {cfg.MIN_TRANSACTION}")
    return amt


def parse_amount(text: str) -> Decimal:
    """Parse user-typed text into a validated positive amount."""
    raw = (text or "").strip().replace(",", "")
    if not raw:
        raise InvalidAmount("Amount is required")
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise InvalidAmount(f"Not a number: {text!r}") from None
    return validate_amount_positive_in_limits(value)


def fmt_money(x) -> str:
    symbol = cfg.CURRENCY_SYMBOLS.get(cfg.CURRENCY, "$")
    amount = as_decimal(x)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
