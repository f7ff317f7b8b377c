"""SQLite-backed vocabulary persistence."""

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional

from koto.core import VocabularyEntry

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns SQLite connection, schema, and vocabulary persistence helpers.

    The reading column stores either a flat legacy reading or a serialized
    token sequence; it is passed through untouched.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self.connection = sqlite3.connect(self.db_path)
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create tables and indexes if they do not exist."""
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS vocabulary (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                content TEXT NOT NULL,
                focused_term TEXT,
                reading TEXT NOT NULL DEFAULT '',
                meaning TEXT NOT NULL DEFAULT '',
                created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        cur.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_vocabulary_created_at
            ON vocabulary(created_at);
            """
        )
        self.connection.commit()

    def insert_entry(
        self,
        content: str,
        focused_term: Optional[str],
        reading: str,
        meaning: str,
    ) -> VocabularyEntry:
        cur = self.connection.cursor()
        cur.execute(
            """
            INSERT INTO vocabulary (content, focused_term, reading, meaning)
            VALUES (?, ?, ?, ?)
            """,
            (content, focused_term or None, reading or "", meaning or ""),
        )
        self.connection.commit()
        logger.debug("Inserted vocabulary entry %s", cur.lastrowid)
        return self.get_entry(cur.lastrowid)

    def update_entry(
        self,
        entry_id: int,
        content: str,
        focused_term: Optional[str],
        reading: str,
        meaning: str,
    ) -> VocabularyEntry:
        """Replace every editable field of an entry.

        Raises:
            ValueError: if no entry has this id.
        """
        cur = self.connection.cursor()
        cur.execute(
            """
            UPDATE vocabulary
            SET content = ?, focused_term = ?, reading = ?, meaning = ?
            WHERE id = ?
            """,
            (content, focused_term or None, reading or "", meaning or "", entry_id),
        )
        if cur.rowcount == 0:
            self.connection.rollback()
            raise ValueError(f"Vocabulary entry {entry_id} not found")
        self.connection.commit()
        logger.debug("Updated vocabulary entry %s", entry_id)
        return self.get_entry(entry_id)

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry.

        Raises:
            ValueError: if no entry has this id.
        """
        cur = self.connection.cursor()
        cur.execute("DELETE FROM vocabulary WHERE id = ?", (entry_id,))
        if cur.rowcount == 0:
            self.connection.rollback()
            raise ValueError(f"Vocabulary entry {entry_id} not found")
        self.connection.commit()
        logger.debug("Deleted vocabulary entry %s", entry_id)

    def get_entry(self, entry_id: int) -> Optional[VocabularyEntry]:
        cur = self.connection.cursor()
        cur.execute(
            """
            SELECT id, content, focused_term, reading, meaning, created_at
            FROM vocabulary
            WHERE id = ?
            """,
            (entry_id,),
        )
        row = cur.fetchone()
        return self._row_to_entry(row) if row else None

    def list_entries(self) -> List[VocabularyEntry]:
        cur = self.connection.cursor()
        cur.execute(
            """
            SELECT id, content, focused_term, reading, meaning, created_at
            FROM vocabulary
            ORDER BY created_at DESC, id DESC
            """
        )
        return [self._row_to_entry(row) for row in cur.fetchall()]

    def search_entries(self, query: str) -> List[VocabularyEntry]:
        """Entries whose content, focused term, reading or meaning contain query.

        Matching is a case-sensitive substring test; a blank query returns
        every entry.
        """
        if not query:
            return self.list_entries()
        cur = self.connection.cursor()
        cur.execute(
            """
            SELECT id, content, focused_term, reading, meaning, created_at
            FROM vocabulary
            WHERE instr(content, :q) > 0
               OR instr(COALESCE(focused_term, ''), :q) > 0
               OR instr(reading, :q) > 0
               OR instr(meaning, :q) > 0
            ORDER BY created_at DESC, id DESC
            """,
            {"q": query},
        )
        return [self._row_to_entry(row) for row in cur.fetchall()]

    def close(self) -> None:
        self.connection.close()

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> VocabularyEntry:
        return VocabularyEntry(
            id=row["id"],
            content=row["content"],
            focused_term=row["focused_term"],
            reading=row["reading"],
            meaning=row["meaning"],
            created_at=row["created_at"],
        )
