"""
KOTO - A Japanese vocabulary notebook with furigana.

This package provides:
- Furigana token model and ruby rendering of a focused term
- Query parsing for word, word[reading] and sentence[word] input
- Gemini-generated readings and Japanese definitions
- SQLite-backed vocabulary storage
"""

__version__ = "0.1.0"

# Make key components available at package level
from koto.core import FuriganaToken, VocabularyEntry, parse_reading, serialize_tokens
from koto.services import normalize_tokens, parse_input, render_with_ruby

__all__ = [
    "FuriganaToken",
    "VocabularyEntry",
    "parse_reading",
    "serialize_tokens",
    "normalize_tokens",
    "parse_input",
    "render_with_ruby",
]
