"""Entry Generation Service - abstract interface for AI-filled readings and definitions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from koto.core import FuriganaToken


@dataclass
class GenerationResult:
    """Result of a generation request."""

    tokens: List[FuriganaToken] = field(default_factory=list)
    meaning: Optional[str] = None
    model: Optional[str] = None
    error: Optional[str] = None

    def is_success(self) -> bool:
        """Return True when the call produced tokens and a definition."""
        return self.error is None and bool(self.tokens) and self.meaning is not None


class EntryGenerationService(ABC):
    """
    Abstract service that fills in the reading and meaning of a term.

    Implementations (e.g., GeminiEntryGenerationService) handle API calls and
    must return normalized tokens.
    """

    @abstractmethod
    def generate(self, target: str, context: Optional[str], api_key: str) -> GenerationResult:
        """Segment target into furigana tokens and define it.

        Args:
            target: Term to annotate.
            context: Full sentence the term appears in, used to choose the
                right reading for homographs. None when target is standalone.
            api_key: Gemini API key for authentication.

        Returns:
            GenerationResult with tokens and meaning, or an error message.
        """
        pass
