"""
services/ - Business Logic Layer
================================
Fetch orchestration, message rendering, update routing and the daily briefing.
Services talk to providers and repositories, never to Telegram directly.
"""
