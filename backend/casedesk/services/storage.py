from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from casedesk.core.config import settings

logger = logging.getLogger(__name__)

_UNSAFE = re.compile(r"[^a-zA-Z0-9._-]")


class StorageError(RuntimeError):
    pass


@dataclass(frozen=True)
class StoredArtifact:
    storage_path: str  # relative to the storage root
    size: int
    url: str | None


def sanitize_filename(filename: str) -> str:
    return _UNSAFE.sub("_", filename.strip()) or "document"


def artifact_path(case_id: int, filename: str, *, now: dt.datetime | None = None) -> str:
    """case-<id>/<sanitized stem>_<UTC timestamp><suffix>"""
    now = now or dt.datetime.now(dt.timezone.utc)
    name = Path(sanitize_filename(filename))
    suffix = name.suffix or ".pdf"
    return f"case-{case_id}/{name.stem}_{now:%Y%m%dT%H%M%S%f}{suffix}"


def save_artifact(case_id: int, filename: str, content: bytes, *, root: str | Path | None = None) -> StoredArtifact:
    rel = artifact_path(case_id, filename)
    base = Path(root or settings.document_storage_dir)
    target = base / rel
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
    except OSError as e:
        raise StorageError(f"Could not store {rel}: {e}") from e

    url = None
    if settings.document_public_base_url:
        url = f"{str(settings.document_public_base_url).rstrip('/')}/{rel}"
    logger.info("stored artifact %s (%d bytes)", rel, len(content))
    return StoredArtifact(storage_path=rel, size=len(content), url=url)
