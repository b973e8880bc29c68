from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casedesk.db.session import Base


class Defendant(Base):
    __tablename__ = "defendants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    case_id: Mapped[int] = mapped_column(ForeignKey("cases.id", ondelete="CASCADE"), index=True)
    defendant_number: Mapped[int] = mapped_column(Integer, default=1)

    first_name: Mapped[str] = mapped_column(String(80))
    last_name: Mapped[str] = mapped_column(String(80))
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Advisory only: the case total is expected to be 100 but is never enforced.
    liability_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2), default=Decimal("100.00"))

    is_policyholder: Mapped[bool] = mapped_column(Boolean, default=True)
    policyholder_first_name: Mapped[str | None] = mapped_column(String(80), nullable=True)
    policyholder_last_name: Mapped[str | None] = mapped_column(String(80), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    case = relationship("Case", back_populates="defendants")
    third_party_claims = relationship("ThirdPartyClaim", back_populates="defendant", cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        parts = (self.first_name, self.last_name)
        return " ".join(p.strip() for p in parts if p and p.strip())

    @property
    def policyholder_name(self) -> str:
        if self.is_policyholder:
            return self.full_name
        parts = (self.policyholder_first_name, self.policyholder_last_name)
        return " ".join(p.strip() for p in parts if p and p.strip())
