"""Services layer - business logic and external integrations."""

# Text processing services
from koto.services.text_processing import (
    RenderedSpan,
    TargetSplit,
    normalize_tokens,
    parse_input,
    render_with_ruby,
    spans_to_html,
    spans_to_text,
    split_around_target,
)

# Generation services
from koto.services.generation import EntryGenerationService, GenerationResult, GeminiEntryGenerationService

from koto.services.settings_manager import SettingsManager
from koto.services.vocabulary_service import VocabularyService

__all__ = [
    "RenderedSpan",
    "TargetSplit",
    "normalize_tokens",
    "parse_input",
    "render_with_ruby",
    "spans_to_html",
    "spans_to_text",
    "split_around_target",
    "EntryGenerationService",
    "GenerationResult",
    "GeminiEntryGenerationService",
    "SettingsManager",
    "VocabularyService",
]
