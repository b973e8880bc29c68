from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casedesk.db.session import Base


class InsuranceCarrier(Base):
    __tablename__ = "insurance_carriers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), index=True)
    kind: Mapped[str] = mapped_column(String(16), default="auto", index=True)  # auto | health
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    fax: Mapped[str | None] = mapped_column(String(32), nullable=True)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    street_address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    city: Mapped[str | None] = mapped_column(String(120), nullable=True)
    state: Mapped[str | None] = mapped_column(String(32), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(16), nullable=True)

    adjusters = relationship("Adjuster", back_populates="carrier")


class Adjuster(Base):
    """Contact record; may be shared by several claims."""

    __tablename__ = "adjusters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    carrier_id: Mapped[int | None] = mapped_column(
        ForeignKey("insurance_carriers.id", ondelete="SET NULL"), nullable=True, index=True
    )
    first_name: Mapped[str] = mapped_column(String(80))
    last_name: Mapped[str] = mapped_column(String(80))
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    fax: Mapped[str | None] = mapped_column(String(32), nullable=True)
    street_address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    city: Mapped[str | None] = mapped_column(String(120), nullable=True)
    state: Mapped[str | None] = mapped_column(String(32), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(16), nullable=True)

    carrier = relationship("InsuranceCarrier", back_populates="adjusters")

    @property
    def full_name(self) -> str:
        parts = (self.first_name, self.last_name)
        return " ".join(p.strip() for p in parts if p and p.strip())


class FirstPartyClaim(Base):
    __tablename__ = "first_party_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    client_id: Mapped[int] = mapped_column(ForeignKey("clients.id", ondelete="CASCADE"), index=True)
    carrier_id: Mapped[int | None] = mapped_column(ForeignKey("insurance_carriers.id"), nullable=True)
    adjuster_id: Mapped[int | None] = mapped_column(ForeignKey("adjusters.id", ondelete="SET NULL"), nullable=True)

    policy_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    claim_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    policy_limits: Mapped[str | None] = mapped_column(String(64), nullable=True)

    pip_available: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    pip_used: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    med_pay_available: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    med_pay_used: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    um_uim_coverage: Mapped[str | None] = mapped_column(String(64), nullable=True)
    property_damage: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    client = relationship("Client")
    carrier = relationship("InsuranceCarrier")
    adjuster = relationship("Adjuster")


class ThirdPartyClaim(Base):
    __tablename__ = "third_party_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    defendant_id: Mapped[int] = mapped_column(ForeignKey("defendants.id", ondelete="CASCADE"), index=True)
    carrier_id: Mapped[int | None] = mapped_column(ForeignKey("insurance_carriers.id"), nullable=True)
    adjuster_id: Mapped[int | None] = mapped_column(ForeignKey("adjusters.id", ondelete="SET NULL"), nullable=True)

    policy_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    claim_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    policy_limits: Mapped[str | None] = mapped_column(String(64), nullable=True)
    liability_disputed: Mapped[bool] = mapped_column(Boolean, default=False)

    demand_amount: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    offer_amount: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    settlement_amount: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    demand_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    offer_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    settlement_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)

    lor_sent: Mapped[bool] = mapped_column(Boolean, default=False)
    lor_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    defendant = relationship("Defendant", back_populates="third_party_claims")
    carrier = relationship("InsuranceCarrier")
    adjuster = relationship("Adjuster")


class HealthClaim(Base):
    __tablename__ = "health_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    client_id: Mapped[int] = mapped_column(ForeignKey("clients.id", ondelete="CASCADE"), index=True)
    carrier_id: Mapped[int | None] = mapped_column(ForeignKey("insurance_carriers.id"), nullable=True)
    adjuster_id: Mapped[int | None] = mapped_column(ForeignKey("adjusters.id", ondelete="SET NULL"), nullable=True)

    member_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    policy_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    group_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    claim_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    amount_billed: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    amount_paid: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    client = relationship("Client")
    carrier = relationship("InsuranceCarrier")
    adjuster = relationship("Adjuster")
