import base64
import json

import httpx
import pytest

from casedesk.services.renderer import RenderError, call_renderer

URL = "https://render.test/webhook/doc"
PDF = b"%PDF-1.7 fake"
B64 = base64.b64encode(PDF).decode()


def _transport(handler):
    return httpx.MockTransport(handler)


def _render(handler, **kw):
    return call_renderer(URL, {"template_type": "third_party_lor"}, transport=_transport(handler), **kw)


def test_raw_pdf_response():
    doc = _render(lambda req: httpx.Response(200, content=PDF, headers={"content-type": "application/pdf"}))
    assert doc.content == PDF
    assert doc.filename == "third_party_lor.pdf"


def test_json_base64_response():
    doc = _render(lambda req: httpx.Response(200, json={"pdf_base64": B64, "filename": "lor.pdf"}))
    assert doc.content == PDF
    assert doc.filename == "lor.pdf"


def test_data_uri_prefix_is_stripped():
    doc = _render(lambda req: httpx.Response(200, json={"data": f"data:application/pdf;base64,{B64}"}))
    assert doc.content == PDF


def test_nested_file_response():
    doc = _render(lambda req: httpx.Response(200, json={"file": {"data": B64, "filename": "nested.pdf"}}))
    assert doc.filename == "nested.pdf"
    assert doc.content == PDF


def test_remote_url_response_is_downloaded():
    def handler(req):
        if req.method == "POST":
            return httpx.Response(200, json={"pdf_url": "https://files.test/out.pdf", "filename": "remote.pdf"})
        return httpx.Response(200, content=PDF)

    doc = _render(handler)
    assert doc.content == PDF
    assert doc.filename == "remote.pdf"


def test_payload_is_posted_as_json():
    seen = {}

    def handler(req):
        seen["body"] = json.loads(req.content)
        return httpx.Response(200, json={"pdf": B64})

    _render(handler)
    assert seen["body"] == {"template_type": "third_party_lor"}


def test_non_2xx_uses_error_message():
    with pytest.raises(RenderError, match="workflow exploded"):
        _render(lambda req: httpx.Response(500, json={"message": "workflow exploded"}))


def test_unregistered_webhook_message():
    body = {"code": 404, "message": 'The requested webhook "doc" is not registered.'}
    with pytest.raises(RenderError, match="not active"):
        _render(lambda req: httpx.Response(404, json=body))


def test_empty_body_is_an_error():
    with pytest.raises(RenderError, match="empty"):
        _render(lambda req: httpx.Response(200, content=b"", headers={"content-type": "application/json"}))


def test_unrecognised_envelope_is_an_error():
    with pytest.raises(RenderError, match="did not contain"):
        _render(lambda req: httpx.Response(200, json={"ok": True}))


def test_invalid_base64_is_an_error():
    with pytest.raises(RenderError, match="base64"):
        _render(lambda req: httpx.Response(200, json={"pdf_base64": "***"}))


def test_plain_text_is_an_error():
    with pytest.raises(RenderError, match="neither JSON nor a PDF"):
        _render(lambda req: httpx.Response(200, text="hello", headers={"content-type": "text/plain"}))


def test_artifact_download_is_retried_then_reported():
    calls = {"get": 0}

    def handler(req):
        if req.method == "POST":
            return httpx.Response(200, json={"url": "https://files.test/out.pdf"})
        calls["get"] += 1
        raise httpx.ConnectError("boom", request=req)

    with pytest.raises(RenderError, match="after 2 attempts"):
        _render(handler, fetch_attempts=2)
    assert calls["get"] == 2


def test_line_wrapped_base64_is_accepted():
    wrapped = base64.encodebytes(PDF * 20).decode()
    assert "\n" in wrapped.strip()
    doc = _render(lambda req: httpx.Response(200, json={"pdf_base64": wrapped}))
    assert doc.content == PDF * 20


def test_malformed_document_url_is_an_error():
    with pytest.raises(RenderError, match="invalid document URL"):
        _render(lambda req: httpx.Response(200, json={"url": "http://[::1"}))
