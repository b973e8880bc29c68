from __future__ import annotations

import json
from decimal import Decimal
from typing import Annotated

from pydantic import AnyUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings import NoDecode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "CaseDesk"
    environment: str = Field(default="development")  # development | production
    log_level: str = Field(default="INFO")

    database_url: str = Field(default="sqlite+pysqlite:///./casedesk.db")

    @field_validator("database_url", mode="before")
    @classmethod
    def _normalize_postgres_url(cls, v: str | None) -> str | None:
        # Hosted Postgres hands out postgresql://... which makes SQLAlchemy pick psycopg2.
        # We install psycopg (v3), so force that driver when none is given.
        if v and v.startswith("postgres://"):
            v = "postgresql://" + v[len("postgres://") :]
        if v and v.startswith("postgresql://") and "+" not in v.split("?")[0]:
            return "postgresql+psycopg://" + v[len("postgresql://") :]
        return v

    # String (single URL or comma-separated) or JSON list.
    # NoDecode stops pydantic-settings from JSON-parsing before the validator runs.
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias="CORS_ORIGINS",
    )

    # Document rendering workflow (webhook). Unset -> generation is refused up front.
    renderer_webhook_url: str | None = Field(default=None)
    renderer_timeout_seconds: float | None = Field(default=None)  # None = wait indefinitely
    artifact_fetch_attempts: int = Field(default=3, ge=1)

    # Generated artifacts
    document_storage_dir: str = Field(default="data/case-documents")
    document_public_base_url: AnyUrl | None = Field(default=None)

    # Case math
    default_attorney_fee_percentage: Decimal = Field(default=Decimal("33.33"), ge=0, le=100)
    statute_years: int = Field(default=2, ge=1)
    mileage_rate: Decimal = Field(default=Decimal("0.70"), ge=0)  # USD per mile

    # Letterhead
    firm_name: str = Field(default="Law Office")
    firm_attorney: str = Field(default="")
    firm_processing_company: str = Field(default="")
    firm_mailing_address: str = Field(default="")
    firm_city: str = Field(default="")
    firm_state: str = Field(default="OK")
    firm_zip: str = Field(default="")
    firm_phone: str = Field(default="")
    firm_fax: str = Field(default="")
    firm_email: str = Field(default="")
    firm_logo_url: str = Field(default="")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):  # noqa: ANN001
        """
        Accept: string, comma-separated, or JSON list.
        """
        if v is None:
            return v
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except ValueError:
                    parsed = None
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
            return [p.strip() for p in s.split(",") if p.strip()]
        if isinstance(v, (list, tuple, set)):
            return [str(x).strip() for x in v if str(x).strip()]
        return v


settings = Settings()
