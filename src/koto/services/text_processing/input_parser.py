"""Input Parser - classifies a freeform query into target, reading and sentence."""

import re

from koto.core import ParsedInput

# "...text[target]more text..." -> the bracketed word inside a sentence
BRACKET_IN_SENTENCE = re.compile(r"(.+)\[(.+?)\](.+)")
# "target[reading]"
BRACKET_READING = re.compile(r"(.+?)\[(.+?)\]")


def _has_text_after_bracket(text: str) -> bool:
    """True when some "]" is followed by a character on its line."""
    return any("]" in line[:-1] for line in text.split("\n"))


def parse_input(text: str) -> ParsedInput:
    """
    Classify a query string. Patterns are tried in priority order:

    1. prefix[target]suffix: brackets stripped, target kept in the sentence.
    2. target[reading]: a word with its reading.
    3. anything else: the whole string is the target.

    Args:
        text: Raw query typed by the user.

    Returns:
        ParsedInput with stripped fields; reading and sentence are None
        when the pattern does not provide them.
    """
    if "[" not in text or "]" not in text:
        return ParsedInput(target=text.strip())

    sentence_match = _has_text_after_bracket(text) and BRACKET_IN_SENTENCE.search(text)
    if sentence_match:
        before, target, after = sentence_match.groups()
        return ParsedInput(
            target=target.strip(),
            sentence=(before + target + after).strip(),
        )

    reading_match = BRACKET_READING.fullmatch(text)
    if reading_match:
        target, reading = reading_match.groups()
        return ParsedInput(target=target.strip(), reading=reading.strip())

    return ParsedInput(target=text.strip())
