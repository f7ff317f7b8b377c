"""Ruby Renderer - annotates the focused term of a text with its furigana."""

from dataclasses import dataclass
from html import escape
from typing import List, Optional, Sequence

from koto.core import FlatReading, TokenSequence, parse_reading
from koto.services.text_processing.legacy_extractor import split_around_target


@dataclass(frozen=True)
class RenderedSpan:
    """A run of output text.

    Attributes:
        text: Base text of the span.
        reading: Ruby text to show above `text`, or None.
        focused: True for spans that belong to the annotated term.
    """

    text: str
    reading: Optional[str] = None
    focused: bool = False

    @property
    def is_annotated(self) -> bool:
        return self.reading is not None


def render_with_ruby(
    content: Optional[str],
    focused_term: Optional[str],
    reading: Optional[str],
) -> Optional[List[RenderedSpan]]:
    """
    Render content with its focused term annotated.

    The reading may be a serialized token sequence or a legacy flat string.
    Tokens are rendered one span each, in order, and are trusted to cover
    the focused term. Anything that does not decode to a non-empty token
    sequence falls back to a single annotated span over the whole term.

    Args:
        content: Full source text.
        focused_term: Sub-string of content to annotate. None or empty
            annotates the whole content.
        reading: Stored reading field in either encoding.

    Returns:
        Spans in display order, or None when content is empty. If the term
        does not occur in content, a single plain span holding content.
    """
    if not content:
        return None

    target = focused_term or content
    split = split_around_target(content, target)
    if split is None:
        return [RenderedSpan(content)]

    spans: List[RenderedSpan] = []
    if split.before:
        spans.append(RenderedSpan(split.before))

    parsed = parse_reading(reading)
    if isinstance(parsed, TokenSequence) and parsed:
        for token in parsed.tokens:
            spans.append(RenderedSpan(token.text, token.furigana, focused=True))
    else:
        flat = parsed.text if isinstance(parsed, FlatReading) else ""
        spans.append(RenderedSpan(split.match, flat or None, focused=True))

    if split.after:
        spans.append(RenderedSpan(split.after))
    return spans


def spans_to_html(spans: Optional[Sequence[RenderedSpan]]) -> str:
    """Render spans as HTML with <ruby> markup for annotated spans."""
    if not spans:
        return ""

    html_parts = []
    for span in spans:
        text = escape(span.text)
        if span.is_annotated:
            css_class = ' class="focused"' if span.focused else ""
            html_parts.append(f"<ruby{css_class}>{text}<rt>{escape(span.reading)}</rt></ruby>")
        elif span.focused:
            html_parts.append(f"<b>{text}</b>")
        else:
            html_parts.append(text)
    return "".join(html_parts)


def spans_to_text(spans: Optional[Sequence[RenderedSpan]]) -> str:
    """Render spans as plain text with readings in brackets, e.g. 金[きん]メダル."""
    if not spans:
        return ""
    return "".join(
        f"{span.text}[{span.reading}]" if span.is_annotated else span.text
        for span in spans
    )
