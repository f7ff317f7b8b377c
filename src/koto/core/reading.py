"""Persisted reading field - flat legacy string or serialized token sequence."""

import json
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .furigana_token import FuriganaToken, tokens_from_payload, tokens_to_payload


@dataclass(frozen=True)
class FlatReading:
    """Legacy reading: one phonetic string for the whole target."""

    text: str


@dataclass(frozen=True)
class TokenSequence:
    """Current reading: ordered tokens covering the target."""

    tokens: Tuple[FuriganaToken, ...]

    def __bool__(self) -> bool:
        return bool(self.tokens)


Reading = Union[FlatReading, TokenSequence]


def parse_reading(raw: Optional[str]) -> Reading:
    """Decode a stored reading field. Never raises.

    Anything that is not a JSON array of {text, furigana} objects is a
    FlatReading holding the raw string, including input nested too deeply
    for the JSON decoder.
    """
    raw = raw or ""
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError):
        return FlatReading(raw)

    tokens = tokens_from_payload(payload)
    if tokens is None:
        return FlatReading(raw)
    return TokenSequence(tuple(tokens))


def serialize_tokens(tokens: Sequence[FuriganaToken]) -> str:
    """Encode tokens for the reading column."""
    return json.dumps(tokens_to_payload(tokens), ensure_ascii=False)
