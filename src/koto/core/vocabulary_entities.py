"""Vocabulary entities used across services and persistence."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class VocabularyEntry:
    id: Optional[int]
    content: str
    focused_term: Optional[str]
    reading: str
    meaning: str
    created_at: Optional[str] = None

    @property
    def subject(self) -> str:
        """The annotated term: the focused term, or the whole content."""
        return self.focused_term or self.content


@dataclass
class ParsedInput:
    """Result of classifying a freeform query typed by the user."""

    target: str
    reading: Optional[str] = None
    sentence: Optional[str] = None


@dataclass
class VocabularyDraft:
    """Unsaved entry fields, prefilled from a query or an existing entry."""

    content: str
    focused_term: Optional[str] = None
    reading: Optional[str] = None

    @property
    def subject(self) -> str:
        return self.focused_term or self.content
