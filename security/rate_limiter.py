"""
security/rate_limiter.py
-------------------------
Rate limiting middleware for inbound updates.
Limits the number of messages and button taps a user can send within a time window.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import RATE_LIMIT_MESSAGES, RATE_LIMIT_WINDOW_SECONDS
from security.auth import notify_user
from utils.logger import get_logger

logger = get_logger(__name__)

# In-memory storage for rate tracking: {user_id: [timestamp1, timestamp2, ...]}
_user_timestamps: dict[int, list[float]] = defaultdict(list)


def _cleanup(user_id: int, now: float) -> None:
    """Remove expired timestamps for a user."""
    cutoff = now - RATE_LIMIT_WINDOW_SECONDS
    _user_timestamps[user_id] = [
        t for t in _user_timestamps[user_id] if t > cutoff
    ]


def is_rate_limited(user_id: int) -> bool:
    """Record one update for ``user_id``; True if it exceeds the window budget."""
    now = time.monotonic()
    _cleanup(user_id, now)
    if len(_user_timestamps[user_id]) >= RATE_LIMIT_MESSAGES:
        return True
    _user_timestamps[user_id].append(now)
    return False


def reset() -> None:
    """Forget all tracked timestamps."""
    _user_timestamps.clear()


def rate_limited(func: Callable):
    """
    Decorator that enforces rate limiting per user.

    Configuration (via .env):
        RATE_LIMIT_MESSAGES: Max updates per window (default: 30).
        RATE_LIMIT_WINDOW_SECONDS: Window duration in seconds (default: 60).

    Behavior:
        - Tracks update timestamps per user.
        - If exceeded, warns the user and blocks the handler.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if is_rate_limited(user.id):
            logger.warning(f"⚠️ Rate limit hit for user {user.id}")
            await notify_user(update, "⚠️ Too many requests. Please wait a bit and try again.")
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
