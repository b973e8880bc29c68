from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from tenacity import RetryError, retry, retry_if_exception_type, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)

BINARY_CONTENT_TYPES = ("application/pdf", "application/octet-stream")
BASE64_KEYS = ("pdf_base64", "pdf", "data")
URL_KEYS = ("pdf_url", "url")


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class RenderedDocument:
    content: bytes
    filename: str
    content_type: str = "application/pdf"

    @property
    def size(self) -> int:
        return len(self.content)


def _error_message(r: httpx.Response) -> str:
    message = f"HTTP {r.status_code}: {r.reason_phrase}"
    try:
        body = r.json()
    except ValueError:
        return message
    if isinstance(body, dict) and body.get("message"):
        message = str(body["message"])
        if body.get("code") == 404 and "not registered" in message:
            message = "Renderer webhook is not active. Activate the rendering workflow and try again."
    return message


def _decode_base64(data: Any) -> bytes:
    text = str(data).strip()
    if text.startswith("data:") and "," in text:
        text = text.split(",", 1)[1]
    # line-wrapped base64 (MIME style) is still valid content
    text = "".join(text.split())
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise RenderError(f"Renderer returned invalid base64 content: {e}") from e


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
    retry=retry_if_exception_type(httpx.TransportError),
)
def _fetch_artifact(client: httpx.Client, url: str) -> bytes:
    r = client.get(url)
    if r.status_code != 200:
        raise RenderError(f"Artifact download failed: {r.status_code} {r.text[:200]}")
    return r.content


def _parse_body(r: httpx.Response) -> dict[str, Any]:
    text = r.text
    if not text.strip():
        raise RenderError("Renderer returned an empty response; the rendering workflow may not be active.")
    try:
        body = json.loads(text)
    except ValueError:
        if "application/json" in r.headers.get("content-type", ""):
            raise RenderError("Renderer returned invalid JSON.") from None
        raise RenderError(f"Renderer response is neither JSON nor a PDF: {text[:100]}") from None
    if not isinstance(body, dict):
        raise RenderError("Renderer returned an unexpected JSON document.")
    return body


def call_renderer(
    url: str,
    payload: dict[str, Any],
    *,
    timeout: float | None = None,
    fetch_attempts: int = 3,
    transport: httpx.BaseTransport | None = None,
) -> RenderedDocument:
    """
    POST the payload to the rendering workflow and return the produced file.

    Accepted responses: a binary PDF body; JSON carrying base64 content under
    pdf_base64/pdf/data or file.data; JSON carrying pdf_url/url to download.
    The render POST itself is never retried. Only the artifact download is.
    """
    default_name = f"{payload.get('template_type') or 'document'}.pdf"
    with httpx.Client(timeout=timeout, transport=transport) as client:
        try:
            r = client.post(url, json=payload, headers={"Accept": "application/json, application/pdf"})
        except httpx.InvalidURL as e:
            raise RenderError(f"Renderer webhook URL is invalid: {e}") from e
        if not r.is_success:
            raise RenderError(_error_message(r))

        content_type = r.headers.get("content-type", "").lower()
        if any(t in content_type for t in BINARY_CONTENT_TYPES):
            if not r.content:
                raise RenderError("Renderer returned an empty file.")
            return RenderedDocument(content=r.content, filename=default_name)

        body = _parse_body(r)
        filename = str(body.get("filename") or default_name)

        for key in BASE64_KEYS:
            if body.get(key):
                return RenderedDocument(content=_decode_base64(body[key]), filename=filename)

        remote = next((body[k] for k in URL_KEYS if body.get(k)), None)
        if remote:
            try:
                content = _fetch_artifact.retry_with(stop=stop_after_attempt(max(1, fetch_attempts)))(client, str(remote))
            except RetryError as e:
                raise RenderError(f"Artifact download failed after {fetch_attempts} attempts: {e.last_attempt.exception()}") from e
            except httpx.InvalidURL as e:
                raise RenderError(f"Renderer returned an invalid document URL: {e}") from e
            return RenderedDocument(content=content, filename=filename)

        file_obj = body.get("file")
        if isinstance(file_obj, dict) and file_obj.get("data"):
            return RenderedDocument(
                content=_decode_base64(file_obj["data"]),
                filename=str(file_obj.get("filename") or filename),
            )

    logger.warning("renderer response had no usable file; keys=%s", sorted(body))
    raise RenderError("Renderer response did not contain a document.")
