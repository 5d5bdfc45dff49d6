from datetime import datetime, timezone
from pathlib import Path
from typing import Union


def render_page(
    page_title: str,
    body_html: str,
    output_path: Union[str, Path],
) -> Path:
    """
    Writes a complete HTML page to `output_path` (parents are created).
    Callers supply only the page-specific `body_html`.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    html = f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>{page_title} · Fish Summarizer</title>
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <style>
    :root {{ --bg:#fff; --fg:#111; --muted:#666; --border:#eee; --accent:#0b8a6d; }}
    * {{ box-sizing: border-box; }}
    body {{ background:var(--bg); color:var(--fg); font-family: system-ui, Arial, sans-serif; margin: 2rem; line-height:1.5; }}
    header, footer {{ color:var(--muted); }}
    .card {{ border:1px solid var(--border); border-radius:12px; padding:1rem; box-shadow:0 1px 2px rgba(0,0,0,.04); }}
    .kpi {{ display:flex; gap:1rem; flex-wrap:wrap; }}
    .kpi > div {{ border:1px solid var(--border); border-radius:10px; padding:.6rem .8rem; min-width: 120px; }}
    ol.summary li {{ margin-bottom:.75rem; }}
    ol.summary li::marker {{ color:var(--accent); }}
  </style>
</head>
<body>
  <header>
    <h1>Fish Summarizer</h1>
  </header>

  <main class="card">
    {body_html}
  </main>

  <footer>
    <p style="margin-top:1rem;">Generated: {datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")}</p>
  </footer>
</body>
</html>"""
    output_path.write_text(html, encoding="utf-8")
    return output_path
