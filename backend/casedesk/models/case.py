from __future__ import annotations

import datetime as dt

from sqlalchemy import Boolean, Date, DateTime, Enum, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casedesk.db.session import Base
from casedesk.models.enums import CaseStage


class Case(Base):
    __tablename__ = "cases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    date_of_loss: Mapped[dt.date | None] = mapped_column(Date, nullable=True, index=True)
    stage: Mapped[CaseStage] = mapped_column(Enum(CaseStage), default=CaseStage.INTAKE, index=True)
    status: Mapped[str] = mapped_column(String(64), default="New", index=True)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, index=True)

    # Wreck / jurisdiction
    time_of_wreck: Mapped[str | None] = mapped_column(String(32), nullable=True)
    wreck_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    wreck_street: Mapped[str | None] = mapped_column(String(200), nullable=True)
    wreck_city: Mapped[str | None] = mapped_column(String(120), nullable=True)
    wreck_county: Mapped[str | None] = mapped_column(String(120), nullable=True)
    wreck_state: Mapped[str | None] = mapped_column(String(32), nullable=True)
    police_report_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    vehicle_description: Mapped[str | None] = mapped_column(String(200), nullable=True)
    damage_level: Mapped[str | None] = mapped_column(String(64), nullable=True)
    wreck_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    wreck_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    clients = relationship("Client", back_populates="case", cascade="all, delete-orphan", order_by="Client.client_number")
    defendants = relationship(
        "Defendant", back_populates="case", cascade="all, delete-orphan", order_by="Defendant.defendant_number"
    )
    mileage_logs = relationship("MileageLog", back_populates="case", cascade="all, delete-orphan")
    general_damages = relationship("GeneralDamages", back_populates="case", uselist=False, cascade="all, delete-orphan")
    settlements = relationship("Settlement", back_populates="case", cascade="all, delete-orphan")
    documents = relationship("Document", back_populates="case", cascade="all, delete-orphan")
