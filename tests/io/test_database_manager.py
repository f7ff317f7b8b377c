import pytest

from koto.io import DatabaseManager

TOKEN_READING = '[{"text": "桜", "furigana": "さくら"}]'


@pytest.fixture
def manager(tmp_path):
    db_path = tmp_path / "koto.db"
    db_manager = DatabaseManager(db_path)
    db_manager.ensure_schema()
    yield db_manager
    db_manager.close()


def test_schema_created(manager):
    cur = manager.connection.cursor()
    cur.execute("SELECT name FROM sqlite_master WHERE type='table'")
    table_names = {row["name"] for row in cur.fetchall()}
    assert "vocabulary" in table_names


def test_ensure_schema_is_idempotent(manager):
    manager.ensure_schema()
    assert manager.list_entries() == []


def test_insert_entry_roundtrips_both_reading_encodings(manager):
    legacy = manager.insert_entry("後の祭り", "後", "あと", "のち。")
    current = manager.insert_entry("桜", None, TOKEN_READING, "春に咲く花。")

    assert manager.get_entry(legacy.id).reading == "あと"
    assert manager.get_entry(current.id).reading == TOKEN_READING
    assert current.focused_term is None
    assert current.created_at is not None


def test_empty_focused_term_stored_as_null(manager):
    entry = manager.insert_entry("桜", "", TOKEN_READING, "花。")
    assert entry.focused_term is None


def test_update_entry_replaces_fields(manager):
    entry = manager.insert_entry("桜", None, "さくら", "花。")
    updated = manager.update_entry(entry.id, "桜の木", "桜", TOKEN_READING, "春に咲く花。")

    assert updated.id == entry.id
    assert updated.content == "桜の木"
    assert updated.focused_term == "桜"
    assert updated.reading == TOKEN_READING
    assert updated.meaning == "春に咲く花。"


def test_update_unknown_entry_raises(manager):
    with pytest.raises(ValueError, match="not found"):
        manager.update_entry(999, "桜", None, "", "")


def test_delete_entry(manager):
    entry = manager.insert_entry("桜", None, "さくら", "花。")
    manager.delete_entry(entry.id)
    assert manager.get_entry(entry.id) is None

    with pytest.raises(ValueError, match="not found"):
        manager.delete_entry(entry.id)


def test_list_entries_returns_latest_first(manager):
    manager.insert_entry("春", None, "はる", "季節。")
    manager.insert_entry("夏", None, "なつ", "季節。")

    contents = [entry.content for entry in manager.list_entries()]
    assert contents == ["夏", "春"]


def test_search_entries_matches_any_field(manager):
    manager.insert_entry("明日は晴れる", "明日", '[{"text": "明日", "furigana": "あした"}]', "今日の次の日。")
    manager.insert_entry("桜", None, "さくら", "春に咲く花。")

    assert [e.content for e in manager.search_entries("晴れ")] == ["明日は晴れる"]
    assert [e.content for e in manager.search_entries("あした")] == ["明日は晴れる"]
    assert [e.content for e in manager.search_entries("咲く")] == ["桜"]
    assert manager.search_entries("雪") == []
    assert len(manager.search_entries("")) == 2
