"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
# Chat that receives the daily briefing (0 disables the job)
TELEGRAM_CHAT_ID: int = int(os.getenv("TELEGRAM_CHAT_ID", "0") or 0)

# ── News API ──────────────────────────────────────────────
NEWS_API_KEY: str = os.getenv("NEWS_API_KEY", "")
NEWS_API_BASE_URL: str = os.getenv("NEWS_API_BASE_URL", "https://newsapi.org/v2")
NEWS_HEADLINES_COUNTRY: str = os.getenv("NEWS_HEADLINES_COUNTRY", "us")
NEWS_PAGE_SIZE: int = int(os.getenv("NEWS_PAGE_SIZE", "7"))

# ── Weather API ───────────────────────────────────────────
WEATHER_API_KEY: str = os.getenv("WEATHER_API_KEY", "")
WEATHER_API_URL: str = os.getenv(
    "WEATHER_API_URL", "https://api.openweathermap.org/data/2.5/weather"
)
WEATHER_CITY: str = os.getenv("WEATHER_CITY", "Chisinau")

# ── Quotes API ────────────────────────────────────────────
QUOTES_API_URL: str = os.getenv("QUOTES_API_URL", "https://zenquotes.io/api/random")

# ── HTTP ──────────────────────────────────────────────────
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
USER_AGENT: str = os.getenv("USER_AGENT", "MyTelegramBot/1.0")

# ── Daily briefing schedule ───────────────────────────────
DAILY_JOB_HOUR: int = int(os.getenv("DAILY_JOB_HOUR", "21"))
DAILY_JOB_MINUTE: int = int(os.getenv("DAILY_JOB_MINUTE", "38"))
TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

# ── Security ──────────────────────────────────────────────
_raw_ids = os.getenv("ALLOWED_USER_IDS", "")
ALLOWED_USER_IDS: list[int] = (
    [int(uid.strip()) for uid in _raw_ids.split(",") if uid.strip()]
    if _raw_ids
    else []
)

# ── Rate Limiting ─────────────────────────────────────────
RATE_LIMIT_MESSAGES: int = int(os.getenv("RATE_LIMIT_MESSAGES", "30"))
RATE_LIMIT_WINDOW_SECONDS: int = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
