"""Vocabulary Service - orchestrates drafting, generating, saving and rendering entries."""

import logging
from typing import List, Optional, Sequence

from koto.core import (
    FuriganaToken,
    TokenSequence,
    VocabularyDraft,
    VocabularyEntry,
    parse_reading,
    serialize_tokens,
)
from koto.io import DatabaseManager
from koto.services.generation import EntryGenerationService, GenerationResult
from koto.services.text_processing import (
    RenderedSpan,
    normalize_tokens,
    parse_input,
    render_with_ruby,
    spans_to_html,
)

logger = logging.getLogger(__name__)


class VocabularyService:
    """Application service for vocabulary notes.

    Depends on DatabaseManager for persistence and, optionally, an
    EntryGenerationService for AI-filled readings and meanings.
    """

    def __init__(
        self,
        db: DatabaseManager,
        generator: Optional[EntryGenerationService] = None,
        api_key: Optional[str] = None,
    ) -> None:
        self._db = db
        self._generator = generator
        self._api_key = api_key

    def draft_from_query(self, query: str) -> VocabularyDraft:
        """Turn a freeform query into unsaved entry fields.

        A bracketed word inside a sentence becomes the focused term of that
        sentence; a bare word (with or without a bracket reading) becomes the
        whole content.
        """
        parsed = parse_input(query)
        if parsed.sentence:
            return VocabularyDraft(content=parsed.sentence, focused_term=parsed.target)
        return VocabularyDraft(content=parsed.target, reading=parsed.reading)

    def generate(self, draft: VocabularyDraft) -> GenerationResult:
        """Ask the generator for tokens and meaning of the draft's subject."""
        if self._generator is None or not self._api_key:
            return GenerationResult(error="AI generation is not configured")
        if not draft.content.strip():
            return GenerationResult(error="Nothing to generate for empty content")

        context = draft.content if draft.focused_term else None
        result = self._generator.generate(draft.subject, context, self._api_key)
        if not result.is_success():
            logger.warning("Generation for %r returned no data: %s", draft.subject, result.error)
        return result

    def save(
        self,
        draft: VocabularyDraft,
        tokens: Sequence[FuriganaToken],
        meaning: str,
        entry_id: Optional[int] = None,
    ) -> VocabularyEntry:
        """Validate and persist an entry, replacing it when entry_id is given.

        Tokens are normalized and stored as the serialized reading.

        Raises:
            ValueError: if content, tokens or meaning is missing, or entry_id is unknown.
        """
        if not draft.content.strip():
            raise ValueError("Content is required")
        if not tokens:
            raise ValueError("Furigana tokens are required; generate or enter a reading first")
        if not meaning.strip():
            raise ValueError("Meaning is required")

        reading = serialize_tokens(normalize_tokens(tokens))
        focused_term = draft.focused_term or None
        if entry_id is None:
            return self._db.insert_entry(draft.content, focused_term, reading, meaning)
        return self._db.update_entry(entry_id, draft.content, focused_term, reading, meaning)

    def draft_from_entry(self, entry: VocabularyEntry) -> VocabularyDraft:
        return VocabularyDraft(content=entry.content, focused_term=entry.focused_term)

    def tokens_for_editing(self, entry: VocabularyEntry) -> List[FuriganaToken]:
        """Tokens of a stored entry; empty for legacy flat readings."""
        parsed = parse_reading(entry.reading)
        if isinstance(parsed, TokenSequence):
            return list(parsed.tokens)
        return []

    def get_entry(self, entry_id: int) -> Optional[VocabularyEntry]:
        return self._db.get_entry(entry_id)

    def list_entries(self) -> List[VocabularyEntry]:
        return self._db.list_entries()

    def search(self, query: str) -> List[VocabularyEntry]:
        """
        Find entries containing the query.

        The query may be typed the way entries are added: "春[はる]" looks
        for 春 and "明日[あした]は晴れる" for the whole sentence. Whitespace
        runs, including the ideographic space, collapse to one space.
        """
        parsed = parse_input(query)
        needle = " ".join((parsed.sentence or parsed.target).split())
        return self._db.search_entries(needle)

    def delete(self, entry_id: int) -> None:
        self._db.delete_entry(entry_id)

    def render(self, entry: VocabularyEntry) -> Optional[List[RenderedSpan]]:
        return render_with_ruby(entry.content, entry.focused_term, entry.reading)

    def render_html(self, entry: VocabularyEntry) -> str:
        return spans_to_html(self.render(entry))
