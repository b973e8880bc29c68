from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


def q_usd(x: Decimal) -> Decimal:
    """Round to cents. Amounts too large to carry cents count as zero."""
    try:
        return x.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        logger.warning("amount %s out of range; treated as zero", x)
        return ZERO


def to_decimal(value: Any) -> Decimal:
    """
    Coerce a stored/user value to Decimal.
    None, blanks, non-numeric text, NaN and infinities all count as zero.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        d = value
    else:
        try:
            d = Decimal(str(value).strip().replace(",", "").lstrip("$") or "0")
        except InvalidOperation:
            return Decimal("0")
    if not d.is_finite():
        return Decimal("0")
    return d


def sum_usd(values: Iterable[Any]) -> Decimal:
    return q_usd(sum((to_decimal(v) for v in values), Decimal("0")))
