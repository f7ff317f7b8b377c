"""Locate a target inside free text and split the text around it."""

from typing import NamedTuple, Optional


class TargetSplit(NamedTuple):
    before: str
    match: str
    after: str


def split_around_target(text: str, target: str) -> Optional[TargetSplit]:
    """
    Split text around the first occurrence of target.

    Plain substring search; later occurrences stay inside `after`.

    Returns:
        TargetSplit, or None when target is empty or does not occur in text.
    """
    if not text or not target:
        return None

    index = text.find(target)
    if index == -1:
        return None

    end = index + len(target)
    return TargetSplit(before=text[:index], match=text[index:end], after=text[end:])
