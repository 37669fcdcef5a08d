"""Nigerian Naira amount helpers for display code."""

from __future__ import annotations

from typing import Any

from pyride._normalize import round_half_up, safe_float

NAIRA_SIGN = "₦"


def coerce_amount(amount: Any) -> float:
    """Return *amount* as a float, treating missing or unparsable values as 0."""
    parsed = safe_float(amount)
    return 0.0 if parsed is None else parsed


def format_naira(amount: Any, *, fallback: str | None = None, with_symbol: bool = True) -> str:
    """Format *amount* as whole Naira with thousands separators (``₦1,500``).

    When the amount is zero and *fallback* is given, *fallback* is returned.
    """
    value = coerce_amount(amount)
    if value == 0 and fallback is not None:
        return fallback
    text = f"{round_half_up(value):,}"
    if not with_symbol:
        return text
    if text.startswith("-"):
        return f"-{NAIRA_SIGN}{text[1:]}"
    return f"{NAIRA_SIGN}{text}"
