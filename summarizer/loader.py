"""
Document loading for the summarizer.

- Local files are read as raw bytes, capped at the input buffer size.
- http(s) URLs are fetched with requests and capped the same way.
- HTML can be reduced to text with BeautifulSoup before segmentation.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Union

import requests
from bs4 import BeautifulSoup  # type: ignore

from fish_core.config import FISH_HTTP_TIMEOUT, FISH_USER_AGENT
from summarizer.errors import DocumentReadError

_LOG = logging.getLogger(__name__)

# 256 KiB input buffer, last byte reserved
MAX_INPUT_SIZE = 256 * 1024
MAX_INPUT_BYTES = MAX_INPUT_SIZE - 1

DEFAULT_REQUEST_HEADERS = {
    "User-Agent": FISH_USER_AGENT,
    "Accept": "text/plain, text/html",
    "Accept-Encoding": "gzip, deflate",
}

_URL_RE = re.compile(r"^https?://", re.I)


def is_url(source: str) -> bool:
    return bool(_URL_RE.match(source or ""))


def _truncate(raw: bytes, source: str) -> bytes:
    if len(raw) > MAX_INPUT_BYTES:
        _LOG.info(
            "Input %s is %d bytes; only the first %d are summarized",
            source,
            len(raw),
            MAX_INPUT_BYTES,
        )
        return raw[:MAX_INPUT_BYTES]
    return raw


def read_document(path: Union[str, Path]) -> bytes:
    """Read at most MAX_INPUT_BYTES from a local file."""
    try:
        with open(path, "rb") as fh:
            raw = fh.read(MAX_INPUT_BYTES + 1)
    except OSError as e:
        raise DocumentReadError(f"cannot open '{path}': {e}") from e
    return _truncate(raw, str(path))


def fetch_document(url: str) -> bytes:
    """GET a URL and return its body, capped like a local file."""
    chunks = []
    size = 0
    try:
        with requests.get(
            url, headers=DEFAULT_REQUEST_HEADERS, timeout=FISH_HTTP_TIMEOUT, stream=True
        ) as resp:
            resp.raise_for_status()
            # Stop once past the cap; the rest of the body is never downloaded.
            for chunk in resp.iter_content(chunk_size=64 * 1024):
                chunks.append(chunk)
                size += len(chunk)
                if size > MAX_INPUT_BYTES:
                    break
    except requests.RequestException as e:
        raise DocumentReadError(f"cannot fetch '{url}': {e}") from e
    return _truncate(b"".join(chunks), url)


def load_source(source: Union[str, Path]) -> bytes:
    """Accept either a local path or an http(s) URL."""
    if isinstance(source, str) and is_url(source):
        return fetch_document(source)
    return read_document(source)


def decode_document(raw: bytes) -> str:
    # A cut at the size cap can split a multi-byte sequence; replace, don't fail.
    return raw.decode("utf-8", errors="replace")


def html_to_text(html: str) -> str:
    """
    Flatten HTML to plain text, one text node per line.
    Newlines end sentences, so block boundaries stay sentence boundaries.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    return soup.get_text("\n", strip=True)
