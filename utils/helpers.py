# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional, Union


def parse_iso_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD string into a date.

    Returns:
        date, or None when the value is empty or not a valid ISO date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def format_money(
    value: Optional[Union[Decimal, int, str]],
    symbol: str = "$",
    decimals: int = 2
) -> str:
    """
    Format a monetary amount with thousands separator, e.g. "$1,250.00".

    Args:
        value: Amount (Decimal preferred; floats are formatted via str())
        symbol: Currency symbol prefix
        decimals: Decimal places

    Returns:
        Formatted amount or empty string
    """
    if value is None:
        return ""

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (ArithmeticError, ValueError):
        return str(value)

    quantum = Decimal(1).scaleb(-decimals)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount).quantize(quantum):,}"
