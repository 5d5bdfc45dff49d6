import shutil
import tempfile
from pathlib import Path

from fish_core.report_template import render_page
from summarizer.engine import Summary
from summarizer.report import render_summary


def test_render_page_creates_file_and_content():
    tmpdir = Path(tempfile.mkdtemp())
    try:
        out_file = render_page(
            page_title="Test Report",
            body_html="<p>Hello World</p>",
            output_path=tmpdir / "nested" / "index.html",
        )
        assert out_file == tmpdir / "nested" / "index.html"
        assert out_file.exists(), "Expected index.html to be created"
        html = out_file.read_text(encoding="utf-8")
        assert "Hello World" in html
        assert "Test Report" in html
    finally:
        shutil.rmtree(tmpdir)


def test_render_summary_escapes_and_lists_sentences():
    tmpdir = Path(tempfile.mkdtemp())
    try:
        summary = Summary(
            sentences=["Use <b> tags & co.", "Second pick."],
            depth=2,
            sentence_count=9,
            elapsed=0.0123,
        )
        out_file = render_summary(summary, "notes.txt", tmpdir / "index.html")
        html = out_file.read_text(encoding="utf-8")
        assert "Use &lt;b&gt; tags &amp; co." in html
        assert "<li>Second pick.</li>" in html
        assert "<strong>Sentences:</strong> 9" in html
        assert "0.0123 s" in html
        assert "Summary · notes.txt" in html
    finally:
        shutil.rmtree(tmpdir)


def test_render_summary_empty():
    tmpdir = Path(tempfile.mkdtemp())
    try:
        out_file = render_summary(Summary(sentences=[], depth=1), "blank.txt", tmpdir / "index.html")
        html = out_file.read_text(encoding="utf-8")
        assert "no sentences to summarize" in html
        assert "Time:" not in html
    finally:
        shutil.rmtree(tmpdir)
