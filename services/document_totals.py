# -*- coding: utf-8 -*-
"""
Derived document amounts.

Line totals and the grand total are computed in Decimal; the preview and
finalization both go through calculate_grand_total.
"""

from decimal import Decimal
from typing import Any, Iterable, Mapping, Union

from models.document import LineItem, to_decimal

ItemLike = Union[LineItem, Mapping[str, Any]]


def line_total(item: ItemLike) -> Decimal:
    """quantity x unit_price for a LineItem or an item dict."""
    if isinstance(item, LineItem):
        return item.line_total
    quantity = item.get("quantity") or 0
    unit_price = item.get("unit_price") or 0
    return int(quantity) * to_decimal(unit_price)


def calculate_grand_total(items: Iterable[ItemLike]) -> Decimal:
    """Sum of line totals in list order; 0 for no items."""
    total = Decimal("0")
    for item in items or ():
        total += line_total(item)
    return total
