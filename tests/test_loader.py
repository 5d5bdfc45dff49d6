import pytest
import requests

from summarizer import loader
from summarizer.errors import DocumentReadError


class _FakeResponse:
    def __init__(self, content=b"", status=200, chunk=4):
        self.content = content
        self.status_code = status
        self.chunk = chunk
        self.served = 0
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), self.chunk):
            self.served += 1
            yield self.content[i : i + self.chunk]

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_is_url():
    assert loader.is_url("https://example.com/a")
    assert loader.is_url("HTTP://example.com")
    assert not loader.is_url("notes/http.txt")
    assert not loader.is_url("")


def test_read_document_caps_size(tmp_path):
    path = tmp_path / "big.txt"
    path.write_bytes(b"a" * (loader.MAX_INPUT_SIZE + 100))
    raw = loader.read_document(path)
    assert len(raw) == loader.MAX_INPUT_BYTES


def test_fetch_document_sends_user_agent(monkeypatch):
    seen = {}

    def fake_get(url, headers=None, timeout=None, stream=False):
        seen.update(url=url, headers=headers, timeout=timeout, stream=stream)
        return _FakeResponse(b"Fetched text.")

    monkeypatch.setattr(loader.requests, "get", fake_get)
    assert loader.load_source("https://example.com/doc") == b"Fetched text."
    assert seen["url"] == "https://example.com/doc"
    assert "FishSummarizer" in seen["headers"]["User-Agent"]
    assert seen["timeout"] == loader.FISH_HTTP_TIMEOUT
    assert seen["stream"] is True


def test_fetch_document_http_error(monkeypatch):
    monkeypatch.setattr(loader.requests, "get", lambda *a, **k: _FakeResponse(status=404))
    with pytest.raises(DocumentReadError):
        loader.fetch_document("https://example.com/missing")


def test_fetch_document_connection_error(monkeypatch):
    def boom(*a, **k):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(loader.requests, "get", boom)
    with pytest.raises(DocumentReadError):
        loader.fetch_document("https://example.com/")


def test_decode_document_replaces_bad_bytes():
    assert loader.decode_document(b"caf\xc3\xa9") == "café"
    assert loader.decode_document(b"abc\xc3") == "abc�"


def test_html_to_text_one_node_per_line():
    html = """
    <html><body>
      <h2>Item 7. Results</h2>
      <p>Revenue increased due to new products.</p>
      <script>ignored()</script>
      <p>Margins improved.</p>
    </body></html>
    """
    text = loader.html_to_text(html)
    assert text.splitlines() == [
        "Item 7. Results",
        "Revenue increased due to new products.",
        "Margins improved.",
    ]


def test_fetch_document_stops_reading_past_cap(monkeypatch):
    chunk = 64 * 1024
    resp = _FakeResponse(b"b" * (loader.MAX_INPUT_SIZE * 4), chunk=chunk)
    monkeypatch.setattr(loader.requests, "get", lambda *a, **k: resp)

    raw = loader.fetch_document("https://example.com/huge")
    assert len(raw) == loader.MAX_INPUT_BYTES
    # four 64 KiB chunks already pass the cap; nothing more is pulled
    assert resp.served == loader.MAX_INPUT_SIZE // chunk
    assert resp.closed
