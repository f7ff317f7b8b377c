"""Unit tests for ruby rendering of the focused term."""

import pytest

from koto.services import RenderedSpan, render_with_ruby, spans_to_html, spans_to_text

MEDAL_READING = (
    '[{"text":"金","furigana":"きん"},'
    '{"text":"メダル","furigana":null},'
    '{"text":"級","furigana":"きゅう"}]'
)
NESTED_READING = "[" * 100000 + "]" * 100000


class TestLegacyFlatReading:
    """Flat reading strings annotate the whole focused term."""

    def test_first_character_annotated(self):
        spans = render_with_ruby("後の祭り", "後", "あと")
        assert spans == [
            RenderedSpan("後", "あと", focused=True),
            RenderedSpan("の祭り"),
        ]

    def test_before_and_after_kept_plain(self):
        spans = render_with_ruby("今日は後の祭りだ", "後の祭り", "あとのまつり")
        assert spans == [
            RenderedSpan("今日は"),
            RenderedSpan("後の祭り", "あとのまつり", focused=True),
            RenderedSpan("だ"),
        ]

    def test_malformed_json_used_as_flat_reading(self):
        spans = render_with_ruby("桜", None, '[{"text":')
        assert spans == [RenderedSpan("桜", '[{"text":', focused=True)]

    def test_empty_reading_leaves_term_unannotated(self):
        assert render_with_ruby("桜", None, "") == [RenderedSpan("桜", None, focused=True)]

    def test_empty_token_list_leaves_term_unannotated(self):
        assert render_with_ruby("桜", None, "[]") == [RenderedSpan("桜", None, focused=True)]


class TestTokenizedReading:
    """Serialized token sequences annotate token by token."""

    def test_whole_content_tokens(self):
        spans = render_with_ruby("金メダル級", None, MEDAL_READING)
        assert spans == [
            RenderedSpan("金", "きん", focused=True),
            RenderedSpan("メダル", None, focused=True),
            RenderedSpan("級", "きゅう", focused=True),
        ]

    def test_focused_term_inside_sentence(self):
        reading = '[{"text":"明日","furigana":"あした"}]'
        spans = render_with_ruby("明日は晴れる", "明日", reading)
        assert spans == [
            RenderedSpan("明日", "あした", focused=True),
            RenderedSpan("は晴れる"),
        ]

    def test_stale_tokens_rendered_verbatim(self):
        reading = '[{"text":"昨日","furigana":"きのう"}]'
        spans = render_with_ruby("明日は晴れる", "明日", reading)
        assert spans[0] == RenderedSpan("昨日", "きのう", focused=True)
        assert spans[1] == RenderedSpan("は晴れる")


class TestDegradation:
    """Edge cases that never raise."""

    def test_empty_content_renders_nothing(self):
        assert render_with_ruby("", "後", "あと") is None
        assert render_with_ruby(None, None, None) is None

    def test_focused_term_not_found(self):
        assert render_with_ruby("こんにちは", "さようなら", "さようなら") == [RenderedSpan("こんにちは")]

    def test_empty_focused_term_targets_whole_content(self):
        assert render_with_ruby("桜", "", "さくら") == [RenderedSpan("桜", "さくら", focused=True)]

    def test_only_first_occurrence_annotated(self):
        spans = render_with_ruby("猫と猫", "猫", "ねこ")
        assert spans == [RenderedSpan("猫", "ねこ", focused=True), RenderedSpan("と猫")]

    @pytest.mark.parametrize("reading", [
        None, "", "[", "null", "{}", "[1, 2]", '[{"text": "a"}]', "あ",
        pytest.param(NESTED_READING, id="nested"),
        pytest.param("[" * 5000, id="unclosed"),
        pytest.param("あ" * 10000, id="long"),
    ])
    def test_total_over_odd_readings(self, reading):
        spans = render_with_ruby("後の祭り", "後", reading)
        assert spans is not None
        assert "".join(span.text for span in spans) == "後の祭り"

    def test_deeply_nested_reading_falls_back_to_flat(self):
        spans = render_with_ruby("後の祭り", "後", NESTED_READING)
        assert spans == [RenderedSpan("後", NESTED_READING, focused=True), RenderedSpan("の祭り")]


class TestSpanOutput:
    """HTML and bracket text rendering of spans."""

    def test_html_output(self):
        spans = render_with_ruby("金メダル級です", "金メダル級", MEDAL_READING)
        assert spans_to_html(spans) == (
            '<ruby class="focused">金<rt>きん</rt></ruby>'
            "<b>メダル</b>"
            '<ruby class="focused">級<rt>きゅう</rt></ruby>'
            "です"
        )

    def test_html_escapes_text(self):
        spans = render_with_ruby("<b>", None, "&")
        assert spans_to_html(spans) == '<ruby class="focused">&lt;b&gt;<rt>&amp;</rt></ruby>'

    def test_html_of_nothing(self):
        assert spans_to_html(None) == ""

    def test_bracket_text(self):
        spans = render_with_ruby("金メダル級", None, MEDAL_READING)
        assert spans_to_text(spans) == "金[きん]メダル級[きゅう]"
