"""
models/ - Domain Models
=======================
Plain dataclasses shared by every layer: news items and pages, weather
reports, quotes, callback tokens and outbound message descriptions.
"""
