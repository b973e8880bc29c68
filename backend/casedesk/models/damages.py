from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casedesk.db.session import Base


class GeneralDamages(Base):
    """Non-economic damages; one row per case."""

    __tablename__ = "general_damages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    case_id: Mapped[int] = mapped_column(ForeignKey("cases.id", ondelete="CASCADE"), unique=True, index=True)

    emotional_distress: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    duties_under_duress: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    pain_and_suffering: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    loss_of_enjoyment: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    loss_of_consortium: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)

    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    case = relationship("Case", back_populates="general_damages")


class MileageLog(Base):
    __tablename__ = "mileage_log"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    case_id: Mapped[int] = mapped_column(ForeignKey("cases.id", ondelete="CASCADE"), index=True)

    trip_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)
    miles: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    rate_per_mile: Mapped[Decimal] = mapped_column(Numeric(8, 4))
    total: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)  # miles * rate, at save time

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    case = relationship("Case", back_populates="mileage_logs")
