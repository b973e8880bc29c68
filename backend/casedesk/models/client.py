from __future__ import annotations

import datetime as dt

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casedesk.db.session import Base


class Client(Base):
    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    case_id: Mapped[int] = mapped_column(ForeignKey("cases.id", ondelete="CASCADE"), index=True)
    client_number: Mapped[int] = mapped_column(Integer, default=1)  # 1 = primary client

    first_name: Mapped[str] = mapped_column(String(80))
    middle_name: Mapped[str | None] = mapped_column(String(80), nullable=True)
    last_name: Mapped[str] = mapped_column(String(80))
    date_of_birth: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    ssn: Mapped[str | None] = mapped_column(String(16), nullable=True)
    marital_status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    is_driver: Mapped[bool] = mapped_column(Boolean, default=False)

    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    primary_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    secondary_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    street_address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    city: Mapped[str | None] = mapped_column(String(120), nullable=True)
    state: Mapped[str | None] = mapped_column(String(32), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(16), nullable=True)

    injury_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    prior_accidents: Mapped[str | None] = mapped_column(Text, nullable=True)
    prior_injuries: Mapped[str | None] = mapped_column(Text, nullable=True)
    work_impact: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    case = relationship("Case", back_populates="clients")
    medical_bills = relationship("MedicalBill", back_populates="client", cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        parts = (self.first_name, self.middle_name, self.last_name)
        return " ".join(p.strip() for p in parts if p and p.strip())

    @property
    def short_name(self) -> str:
        parts = (self.first_name, self.last_name)
        return " ".join(p.strip() for p in parts if p and p.strip())
