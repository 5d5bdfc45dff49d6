# summarizer/report.py
from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Union

from fish_core.config import FISH_REPORT_PATH
from fish_core.report_template import render_page
from summarizer.engine import Summary


def _fmt_list(items):
    if not items:
        return "<em>Empty document: no sentences to summarize.</em>"
    return '<ol class="summary">' + "".join(f"<li>{escape(s)}</li>" for s in items) + "</ol>"


def render_summary(
    summary: Summary,
    source: str,
    output_path: Union[str, Path] = FISH_REPORT_PATH,
) -> Path:
    """Write the summary as an HTML page and return the path written."""
    timing = ""
    if summary.elapsed is not None:
        timing = f"<div><strong>Time:</strong> {summary.elapsed:.4f} s</div>"

    body = f"""
      <h2>Extractive Summary</h2>
      <p><code>{escape(str(source))}</code></p>
      <div class="kpi">
        <div><strong>Depth:</strong> {summary.depth}</div>
        <div><strong>Sentences:</strong> {summary.sentence_count}</div>
        <div><strong>Selected:</strong> {summary.k}</div>
        {timing}
      </div>

      <h3 style="margin-top:1.25rem;">Highlights</h3>
      {_fmt_list(summary.sentences)}
    """
    title = escape(Path(str(source)).name or str(source))
    return render_page(f"Summary · {title}", body, output_path)
