from decimal import Decimal
from types import SimpleNamespace

from casedesk.services.liability import liability_summary


def _defendants(*shares):
    return [SimpleNamespace(liability_percentage=Decimal(s)) for s in shares]


def test_under_100_is_flagged():
    s = liability_summary(_defendants("60", "30"))
    assert s.status == "under"
    assert s.message == "Total liability is 90% (under 100%)"


def test_over_100_is_flagged():
    s = liability_summary(_defendants("60", "50"))
    assert s.status == "exceeds"
    assert "exceeds 100%" in s.message


def test_exactly_100_is_balanced():
    s = liability_summary(_defendants("66.67", "33.33"))
    assert s.status == "balanced"
    assert s.message is None


def test_no_defendants():
    assert liability_summary([]).status == "under"
