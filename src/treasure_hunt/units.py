"""
treasure_hunt.units — Ether/wei conversion
==========================================

All amounts inside the engine are integer wei. These helpers turn
human-readable ether amounts into wei and back.
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Union

WEI_PER_ETHER = 10 ** 18


def parse_ether(value: Union[str, int, Decimal]) -> int:
    """
    Convert an ether amount to wei.

    Accepts "0.01", "0.01 ether", Decimal("0.01") or an int number of
    ether. Amounts finer than one wei are rejected.

    Raises:
        ValueError: The value is not a non-negative ether amount
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text.endswith("ether"):
            text = text[: -len("ether")].strip()
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise ValueError(f"Not an ether amount: {value!r}") from None
    else:
        amount = Decimal(value)

    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Ether amount must be finite and non-negative: {value!r}")

    wei = amount * WEI_PER_ETHER
    if wei != wei.to_integral_value():
        raise ValueError(f"Ether amount is finer than one wei: {value!r}")
    return int(wei)


def format_ether(wei: int) -> str:
    """Render a wei amount as ether without trailing zeros, e.g. '0.018'."""
    amount = Decimal(wei) / WEI_PER_ETHER
    return format(amount.normalize(), "f")
