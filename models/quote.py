"""
models/quote.py
---------------
Domain model for a motivational quote.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    text: str
    author: str

    def __str__(self) -> str:
        return f"\"{self.text}\" - {self.author}"
