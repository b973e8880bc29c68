import datetime as dt
from decimal import Decimal
from types import SimpleNamespace

from casedesk.services.formatting import case_name, format_currency, format_date, format_percentage, format_ssn


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(-100) == "-$100.00"
    assert format_currency(None) == "$0.00"


def test_format_date():
    assert format_date(dt.date(2025, 3, 15)) == "March 15, 2025"
    assert format_date("2025-03-05") == "March 5, 2025"
    assert format_date(None) == "N/A"
    assert format_date("garbage") == "N/A"


def test_format_percentage():
    assert format_percentage(Decimal("90.00")) == "90%"
    assert format_percentage(Decimal("33.33")) == "33.33%"


def test_format_ssn():
    assert format_ssn("123456789") == "123-45-6789"
    assert format_ssn(None) == "N/A"


def test_case_name_uses_primary_client():
    clients = [
        SimpleNamespace(client_number=2, short_name="Ben Reyes"),
        SimpleNamespace(client_number=1, short_name="Ana Reyes"),
    ]
    assert case_name(clients) == "Ana Reyes"
    assert case_name([]) == "Unknown Case"
    assert case_name([SimpleNamespace(client_number=1, short_name="")]) == "Unknown Client"


def test_format_date_rejects_partial_dates():
    assert format_date("March") == "N/A"
