"""FuriganaToken entity - one segmented unit of text with an optional reading."""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

HIRAGANA_RANGE = (0x3040, 0x309F)
KATAKANA_RANGE = (0x30A0, 0x30FF)

EMPTY_TEXT = "empty-text"
KANA_WITH_FURIGANA = "kana-with-furigana"
CONCATENATION_MISMATCH = "concatenation-mismatch"


@dataclass(frozen=True)
class FuriganaToken:
    """A unit of surface text and the reading shown above it.

    Attributes:
        text: Literal surface text (a kanji compound, a particle, a loanword...).
        furigana: Phonetic reading, or None when the unit needs no annotation.
            None is distinct from the empty string.
    """

    text: str
    furigana: Optional[str] = None

    @property
    def has_furigana(self) -> bool:
        return self.furigana is not None


@dataclass(frozen=True)
class TokenViolation:
    """A broken token invariant. index is None for sequence-level problems."""

    index: Optional[int]
    reason: str


def _is_kana_char(char: str) -> bool:
    code = ord(char)
    return (
        (HIRAGANA_RANGE[0] <= code <= HIRAGANA_RANGE[1]) or
        (KATAKANA_RANGE[0] <= code <= KATAKANA_RANGE[1])
    )


def is_kana_only(text: str) -> bool:
    """Return True when text is non-empty and every character is hiragana or katakana."""
    return bool(text) and all(_is_kana_char(char) for char in text)


def find_token_violations(
    tokens: Sequence[FuriganaToken], source: Optional[str] = None
) -> List[TokenViolation]:
    """Check a token sequence against the token invariants.

    Args:
        tokens: Sequence to check.
        source: Text the tokens are supposed to cover. When given, the
            concatenated token texts must reproduce it exactly.

    Returns:
        Violations in token order, followed by the concatenation check.
        An empty list means the sequence is valid.
    """
    violations: List[TokenViolation] = []
    for index, token in enumerate(tokens):
        if not token.text:
            violations.append(TokenViolation(index, EMPTY_TEXT))
        elif is_kana_only(token.text) and token.furigana is not None:
            violations.append(TokenViolation(index, KANA_WITH_FURIGANA))

    if source is not None and "".join(token.text for token in tokens) != source:
        violations.append(TokenViolation(None, CONCATENATION_MISMATCH))
    return violations


def replace_token_reading(
    tokens: Sequence[FuriganaToken], index: int, value: Optional[str]
) -> Tuple[FuriganaToken, ...]:
    """Return a new sequence with the reading of one token replaced.

    An empty value clears the reading.

    Raises:
        IndexError: if index is out of range.
    """
    if not 0 <= index < len(tokens):
        raise IndexError(f"Token index {index} out of range for {len(tokens)} tokens")
    updated = list(tokens)
    updated[index] = replace(updated[index], furigana=value or None)
    return tuple(updated)


def tokens_to_payload(tokens: Sequence[FuriganaToken]) -> List[Dict[str, Optional[str]]]:
    return [{"text": token.text, "furigana": token.furigana} for token in tokens]


def tokens_from_payload(payload: Any) -> Optional[List[FuriganaToken]]:
    """Build tokens from decoded JSON, or return None if the shape is wrong.

    Every item must be an object with a string "text" and a "furigana" key
    holding a string or null.
    """
    if not isinstance(payload, list):
        return None

    tokens: List[FuriganaToken] = []
    for item in payload:
        if not isinstance(item, dict) or "furigana" not in item:
            return None
        text = item.get("text")
        furigana = item["furigana"]
        if not isinstance(text, str):
            return None
        if furigana is not None and not isinstance(furigana, str):
            return None
        tokens.append(FuriganaToken(text=text, furigana=furigana))
    return tokens
