"""Domain layer - Pure entities for furigana tokens and vocabulary entries."""

from .furigana_token import (
    FuriganaToken,
    TokenViolation,
    find_token_violations,
    is_kana_only,
    replace_token_reading,
    tokens_from_payload,
    tokens_to_payload,
)
from .reading import FlatReading, Reading, TokenSequence, parse_reading, serialize_tokens
from .vocabulary_entities import ParsedInput, VocabularyDraft, VocabularyEntry

__all__ = [
    "FuriganaToken",
    "TokenViolation",
    "find_token_violations",
    "is_kana_only",
    "replace_token_reading",
    "tokens_from_payload",
    "tokens_to_payload",
    "FlatReading",
    "TokenSequence",
    "Reading",
    "parse_reading",
    "serialize_tokens",
    "ParsedInput",
    "VocabularyDraft",
    "VocabularyEntry",
]
