"""Generation services - abstract interface and Gemini implementation."""

from koto.services.generation.entry_generation_service import EntryGenerationService, GenerationResult
from koto.services.generation.gemini_entry_generation_service import GeminiEntryGenerationService

__all__ = [
    "EntryGenerationService",
    "GenerationResult",
    "GeminiEntryGenerationService",
]
