from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, Numeric, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casedesk.db.session import Base
from casedesk.models.enums import SettlementStatus


class Settlement(Base):
    __tablename__ = "settlements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    case_id: Mapped[int] = mapped_column(ForeignKey("cases.id", ondelete="CASCADE"), index=True)

    gross_settlement: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0.00"))
    attorney_fee_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2), default=Decimal("33.33"))
    case_expenses: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0.00"))
    medical_liens: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0.00"))

    # Derived; always recomputed together before a write.
    attorney_fee: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0.00"))
    client_net: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0.00"))

    settlement_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True, index=True)
    status: Mapped[SettlementStatus] = mapped_column(Enum(SettlementStatus), default=SettlementStatus.PENDING)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    case = relationship("Case", back_populates="settlements")
