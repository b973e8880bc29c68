from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from casedesk.db.session import Base

logger = logging.getLogger(__name__)


def ensure_schema(bind: Engine) -> None:
    """
    Local-dev helper: create tables without Alembic.
    Only meant for SQLite; Postgres deployments run `alembic upgrade head`.
    """
    import casedesk.models  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("schema ensured on %s", bind.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    from casedesk.db.session import engine

    ensure_schema(engine)
    print("Created tables.")
