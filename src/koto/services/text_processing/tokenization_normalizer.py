"""Tokenization Normalizer - enforces the kana invariant on model-produced tokens."""

from dataclasses import replace
from typing import Iterable, List

from koto.core import FuriganaToken, is_kana_only


def normalize_tokens(tokens: Iterable[FuriganaToken]) -> List[FuriganaToken]:
    """
    Clear the reading of every kana-only token.

    Tokens containing any non-kana character keep whatever reading they
    came with, including a missing one. Length and order are preserved.

    Args:
        tokens: Raw token sequence from the generation model.

    Returns:
        New list satisfying the kana invariant.
    """
    normalized = []
    for token in tokens:
        if is_kana_only(token.text) and token.furigana is not None:
            token = replace(token, furigana=None)
        normalized.append(token)
    return normalized
