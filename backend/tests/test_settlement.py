import datetime as dt
from decimal import Decimal

import pytest
from fastapi import HTTPException

from casedesk.core.config import settings
from casedesk.models import Case, Settlement
from casedesk.schemas.settlement import SettlementIn
from casedesk.services.settlement import get_current_settlement, save_settlement, split_settlement


def test_split_standard_contingency():
    s = split_settlement(Decimal("10000"), Decimal("33.33"), Decimal("500"), Decimal("1000"))
    assert s.attorney_fee == Decimal("3333.00")
    assert s.client_net == Decimal("5167.00")


def test_client_net_floors_at_zero():
    s = split_settlement(Decimal("1000"), Decimal("50"), Decimal("600"), Decimal("0"))
    assert s.attorney_fee == Decimal("500.00")
    assert s.client_net == Decimal("0.00")


def test_split_defaults_percentage_and_zero_inputs():
    s = split_settlement("3000")
    assert s.attorney_fee_percentage == Decimal("33.33")
    assert s.attorney_fee == Decimal("999.90")
    assert s.client_net == Decimal("2000.10")


def test_split_rounds_half_up_to_cents():
    s = split_settlement(Decimal("100.01"), Decimal("50"))
    assert s.attorney_fee == Decimal("50.01")  # 50.005 -> 50.01


def test_save_settlement_recomputes_and_overwrites(db):
    c = Case()
    db.add(c)
    db.commit()

    first = save_settlement(db, case_id=c.id, payload=SettlementIn(gross_settlement=Decimal("10000")))
    assert first.attorney_fee_percentage == Decimal("33.33")
    assert first.attorney_fee == Decimal("3333.00")

    second = save_settlement(
        db,
        case_id=c.id,
        payload=SettlementIn(
            gross_settlement=Decimal("20000"),
            attorney_fee_percentage=Decimal("40"),
            case_expenses=Decimal("1000"),
            settlement_date=dt.date(2025, 6, 1),
        ),
    )
    assert second.id == first.id
    assert second.attorney_fee == Decimal("8000.00")
    assert second.client_net == Decimal("11000.00")
    assert db.query(Settlement).filter(Settlement.case_id == c.id).count() == 1


def test_current_settlement_prefers_latest_date(db):
    c = Case()
    db.add(c)
    db.flush()
    older = Settlement(case_id=c.id, settlement_date=dt.date(2024, 1, 1))
    undated = Settlement(case_id=c.id, settlement_date=None)
    newer = Settlement(case_id=c.id, settlement_date=dt.date(2025, 1, 1))
    db.add_all([older, undated, newer])
    db.commit()
    assert get_current_settlement(db, c.id).id == newer.id


def test_save_settlement_unknown_case(db):
    with pytest.raises(HTTPException) as e:
        save_settlement(db, case_id=999, payload=SettlementIn())
    assert e.value.status_code == 404


def test_default_percentage_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "default_attorney_fee_percentage", Decimal("40"))
    s = split_settlement("1000")
    assert s.attorney_fee_percentage == Decimal("40")
    assert s.attorney_fee == Decimal("400.00")


def test_out_of_range_amount_counts_as_zero():
    s = split_settlement("1e30", "33.33")
    assert s.gross_settlement == Decimal("0.00")
    assert s.client_net == Decimal("0.00")
