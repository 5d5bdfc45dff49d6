import os

from dotenv import load_dotenv

# Load variables from .env (repo root)
load_dotenv()

# === HTTP settings (URL sources) ===
FISH_CONTACT_EMAIL = os.getenv("FISH_CONTACT_EMAIL", "change-me@example.com")
FISH_USER_AGENT = f"FishSummarizer/0.1 (Contact: {FISH_CONTACT_EMAIL})"
FISH_HTTP_TIMEOUT = float(os.getenv("FISH_HTTP_TIMEOUT", "30"))

# === Project defaults ===
FISH_DEFAULT_DEPTH = int(os.getenv("FISH_DEFAULT_DEPTH", "1"))
FISH_REPORT_PATH = os.getenv("FISH_REPORT_PATH", "docs/summary/index.html")

CONFIG = {
    "FISH_CONTACT_EMAIL": FISH_CONTACT_EMAIL,
    "FISH_USER_AGENT": FISH_USER_AGENT,
    "FISH_HTTP_TIMEOUT": FISH_HTTP_TIMEOUT,
    "FISH_DEFAULT_DEPTH": FISH_DEFAULT_DEPTH,
    "FISH_REPORT_PATH": FISH_REPORT_PATH,
}
