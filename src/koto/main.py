"""Main entry point for the KOTO vocabulary notebook."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from koto.core import FuriganaToken, VocabularyEntry, replace_token_reading
from koto.io import DatabaseManager
from koto.services import (
    GeminiEntryGenerationService,
    SettingsManager,
    VocabularyService,
    spans_to_text,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="koto", description="Japanese vocabulary notes with furigana.")
    parser.add_argument("--db", type=Path, help="SQLite database path (default: KOTO_DB_PATH or ./koto.db)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Add a word or a sentence with a [bracketed] word")
    add.add_argument("query", help='e.g. "桜", "春[はる]" or "明日[あした]は晴れる"')
    add.add_argument("--meaning", help="Definition to store instead of the generated one")
    add.add_argument("--no-ai", action="store_true", help="Do not call Gemini; needs a [reading] and --meaning")

    subparsers.add_parser("list", help="List entries, newest first")

    search = subparsers.add_parser("search", help="Search content, reading and meaning")
    search.add_argument("query")

    show = subparsers.add_parser("show", help="Show one entry")
    show.add_argument("entry_id", type=int)
    show.add_argument("--html", action="store_true", help="Print <ruby> markup")

    set_reading = subparsers.add_parser("set-reading", help="Replace the reading of one token")
    set_reading.add_argument("entry_id", type=int)
    set_reading.add_argument("index", type=int, help="0-based token index")
    set_reading.add_argument("value", nargs="?", default="", help="New reading; omit to clear")

    delete = subparsers.add_parser("delete", help="Delete an entry")
    delete.add_argument("entry_id", type=int)
    return parser


def resolve_log_level(name: str) -> int:
    """Map a level name such as "DEBUG" to its number; unknown names give WARNING."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def format_entry(service: VocabularyService, entry: VocabularyEntry) -> str:
    return f"#{entry.id} {spans_to_text(service.render(entry))}\n    {entry.meaning}"


def _add(service: VocabularyService, args: argparse.Namespace) -> VocabularyEntry:
    draft = service.draft_from_query(args.query)
    tokens: List[FuriganaToken] = []
    meaning = args.meaning or ""

    if not args.no_ai:
        result = service.generate(draft)
        if result.is_success():
            tokens = result.tokens
            meaning = args.meaning or result.meaning
        else:
            print(f"AI generation failed: {result.error}", file=sys.stderr)

    if not tokens and draft.reading:
        tokens = [FuriganaToken(draft.subject, draft.reading)]
    return service.save(draft, tokens, meaning)


def _set_reading(service: VocabularyService, args: argparse.Namespace) -> VocabularyEntry:
    entry = service.get_entry(args.entry_id)
    if entry is None:
        raise ValueError(f"Vocabulary entry {args.entry_id} not found")
    tokens = service.tokens_for_editing(entry)
    if not tokens:
        raise ValueError(f"Entry {entry.id} has a legacy reading; regenerate it before editing tokens")
    tokens = replace_token_reading(tokens, args.index, args.value)
    return service.save(service.draft_from_entry(entry), tokens, entry.meaning, entry_id=entry.id)


def run(args: argparse.Namespace, service: VocabularyService) -> int:
    try:
        if args.command == "add":
            print(format_entry(service, _add(service, args)))
        elif args.command == "list":
            for entry in service.list_entries():
                print(format_entry(service, entry))
        elif args.command == "search":
            for entry in service.search(args.query):
                print(format_entry(service, entry))
        elif args.command == "show":
            entry = service.get_entry(args.entry_id)
            if entry is None:
                raise ValueError(f"Vocabulary entry {args.entry_id} not found")
            print(service.render_html(entry) if args.html else format_entry(service, entry))
        elif args.command == "set-reading":
            print(format_entry(service, _set_reading(service, args)))
        elif args.command == "delete":
            service.delete(args.entry_id)
            print(f"Deleted #{args.entry_id}")
    except (ValueError, IndexError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    args = build_parser().parse_args(argv)

    # 1. Configuration and logging
    settings = SettingsManager(project_root=Path.cwd())
    logging.basicConfig(
        level=resolve_log_level(settings.get_log_level()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Infrastructure
    db = DatabaseManager(args.db or settings.get_database_path())
    db.ensure_schema()

    # 3. Services (Dependency Injection)
    service = VocabularyService(
        db,
        generator=GeminiEntryGenerationService(),
        api_key=settings.get_gemini_api_key(),
    )

    try:
        return run(args, service)
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
