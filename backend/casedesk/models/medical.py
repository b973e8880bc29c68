from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, Date, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casedesk.db.session import Base
from casedesk.models.enums import RequestMethod


class MedicalProvider(Base):
    __tablename__ = "medical_providers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), index=True)
    type: Mapped[str | None] = mapped_column(String(80), nullable=True)
    street_address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    city: Mapped[str | None] = mapped_column(String(120), nullable=True)
    state: Mapped[str | None] = mapped_column(String(32), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(16), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    fax: Mapped[str | None] = mapped_column(String(32), nullable=True)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    request_method: Mapped[RequestMethod] = mapped_column(Enum(RequestMethod), default=RequestMethod.FAX)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class MedicalBill(Base):
    __tablename__ = "medical_bills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    client_id: Mapped[int] = mapped_column(ForeignKey("clients.id", ondelete="CASCADE"), index=True)
    medical_provider_id: Mapped[int | None] = mapped_column(
        ForeignKey("medical_providers.id", ondelete="SET NULL"), nullable=True, index=True
    )

    hipaa_sent: Mapped[bool] = mapped_column(Boolean, default=False)
    bill_received: Mapped[bool] = mapped_column(Boolean, default=False)
    records_received: Mapped[bool] = mapped_column(Boolean, default=False)

    # Every figure is independently optional; aggregation treats None as zero.
    amount_billed: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    insurance_paid: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    insurance_adjusted: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    medpay_paid: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    patient_paid: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    reduction_amount: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    pi_expense: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    balance_due: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)

    service_type: Mapped[str | None] = mapped_column(String(80), nullable=True)
    date_of_service: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    bill_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    client = relationship("Client", back_populates="medical_bills")
    medical_provider = relationship("MedicalProvider")
