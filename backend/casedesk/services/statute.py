from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

STATUTE_YEARS = 2

_FILL_A = dt.datetime(2000, 1, 1)
_FILL_B = dt.datetime(2001, 12, 28)


def parse_date(value: Any) -> dt.date | None:
    """Best-effort date parsing; None for blanks and garbage (logged)."""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return dt.date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        first = date_parser.parse(text, default=_FILL_A).date()
        second = date_parser.parse(text, default=_FILL_B).date()
    except (ValueError, OverflowError) as e:
        logger.warning("unparseable date %r: %s", text, e)
        return None
    # a partial date resolves differently under each fill
    if first != second:
        logger.warning("incomplete date %r", text)
        return None
    return first


def statute_deadline(date_of_loss: Any, *, years: int = STATUTE_YEARS) -> dt.date | None:
    """
    date_of_loss + N calendar years.
    Feb 29 rolls back to Feb 28 in non-leap target years (relativedelta semantics).
    Missing/unparseable -> None, never an exception.
    """
    loss = parse_date(date_of_loss)
    if loss is None:
        return None
    return loss + relativedelta(years=years)


def statute_days_left(deadline: dt.date | None, *, today: dt.date | None = None) -> int | None:
    if deadline is None:
        return None
    return (deadline - (today or dt.date.today())).days
