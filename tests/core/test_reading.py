"""Unit tests for decoding and encoding the stored reading field."""

from koto.core import FlatReading, FuriganaToken, TokenSequence, parse_reading, serialize_tokens


def test_flat_reading():
    assert parse_reading("あとのまつり") == FlatReading("あとのまつり")


def test_token_sequence():
    raw = '[{"text":"金","furigana":"きん"},{"text":"メダル","furigana":null}]'
    assert parse_reading(raw) == TokenSequence(
        (FuriganaToken("金", "きん"), FuriganaToken("メダル", None))
    )


def test_malformed_json_is_flat():
    raw = '[{"text":"金",'
    assert parse_reading(raw) == FlatReading(raw)


def test_json_of_other_shape_is_flat():
    assert parse_reading('{"text": "金"}') == FlatReading('{"text": "金"}')
    assert parse_reading("42") == FlatReading("42")


def test_none_and_empty_are_empty_flat():
    assert parse_reading(None) == FlatReading("")
    assert parse_reading("") == FlatReading("")


def test_empty_array_is_empty_sequence():
    parsed = parse_reading("[]")
    assert isinstance(parsed, TokenSequence)
    assert not parsed


def test_serialize_keeps_japanese_and_null():
    raw = serialize_tokens([FuriganaToken("級", "きゅう"), FuriganaToken("の", None)])
    assert raw == '[{"text": "級", "furigana": "きゅう"}, {"text": "の", "furigana": null}]'


def test_serialize_parse_roundtrip_preserves_empty_string_and_none():
    tokens = (FuriganaToken("春", ""), FuriganaToken("は", None))
    assert parse_reading(serialize_tokens(tokens)) == TokenSequence(tokens)


def test_deeply_nested_json_is_flat():
    raw = "[" * 100000 + "]" * 100000
    assert parse_reading(raw) == FlatReading(raw)
