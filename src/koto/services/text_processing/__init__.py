"""Text processing services - token normalization, ruby rendering and query parsing."""

from koto.services.text_processing.input_parser import parse_input
from koto.services.text_processing.legacy_extractor import TargetSplit, split_around_target
from koto.services.text_processing.ruby_renderer import (
    RenderedSpan,
    render_with_ruby,
    spans_to_html,
    spans_to_text,
)
from koto.services.text_processing.tokenization_normalizer import normalize_tokens

__all__ = [
    "parse_input",
    "TargetSplit",
    "split_around_target",
    "RenderedSpan",
    "render_with_ruby",
    "spans_to_html",
    "spans_to_text",
    "normalize_tokens",
]
