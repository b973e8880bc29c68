from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from casedesk.services.money import q_usd, to_decimal
from casedesk.services.statute import parse_date

_NON_DIGITS = re.compile(r"\D")


def format_date(value: Any) -> str:
    """Month D, YYYY -- the one date format used in every generated document."""
    d = parse_date(value)
    if d is None:
        return "N/A"
    return f"{d:%B} {d.day}, {d.year}"


def format_currency(amount: Any) -> str:
    if amount is None:
        return "$0.00"
    value = q_usd(to_decimal(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def money_number(amount: Any) -> float:
    return float(q_usd(to_decimal(amount)))


def format_percentage(value: Any) -> str:
    d = to_decimal(value).normalize()
    if d == d.to_integral_value():
        d = d.quantize(Decimal("1"))
    return f"{d}%"


def format_ssn(ssn: str | None) -> str:
    if not ssn:
        return "N/A"
    digits = _NON_DIGITS.sub("", ssn)
    if len(digits) == 9:
        return f"{digits[:3]}-{digits[3:5]}-{digits[5:]}"
    return ssn


def yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def case_name(clients: Sequence[Any]) -> str:
    """Primary client's name (client_number 1, else first listed)."""
    if not clients:
        return "Unknown Case"
    primary = next((c for c in clients if getattr(c, "client_number", None) == 1), clients[0])
    name = getattr(primary, "short_name", "") or ""
    if name:
        return name
    return "Unknown Client" if len(clients) == 1 else "Multiple Clients"
