"""
Application settings, read from the environment.

main.py calls load_dotenv() before importing anything that reads this module,
so values in a local .env take effect:
  SESSION_COOKIE_NAME=session_id
  CLI_USER_AGENTS=curl,wget,httpie
"""

import os

# ─── Session cookie ────────────────────────────────────────────────────

SESSION_COOKIE_NAME = os.environ.get("SESSION_COOKIE_NAME", "session_id")

# Logout backdates the cookie's Expires by this many seconds
LOGOUT_EXPIRY_OFFSET_SECONDS = int(os.environ.get("LOGOUT_EXPIRY_OFFSET_SECONDS", "5"))


# ─── Rendering / negotiation ───────────────────────────────────────────

TEMPLATES_DIR = os.environ.get(
    "TEMPLATES_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "web", "templates"),
)

# User-Agent substrings that identify command-line clients (case-insensitive)
CLI_USER_AGENTS = [
    ua.strip().lower()
    for ua in os.environ.get("CLI_USER_AGENTS", "curl,wget,httpie").split(",")
    if ua.strip()
]


# ─── Server ────────────────────────────────────────────────────────────

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "3000"))
