import pytest

from furigana_ruby.core.models import FuriganaSegment, segments_text
from furigana_ruby.core.segmentation import build_groups, distribute_furigana, kana_segments, segmentize


def _pairs(segments):
    return [(segment.text, segment.reading) for segment in segments]


def test_build_groups_splits_on_kana_boundaries():
    groups = build_groups("振り仮名")

    assert [(group.is_kana, group.text) for group in groups] == [
        (False, "振"),
        (True, "り"),
        (False, "仮名"),
    ]
    assert groups[0].text_normalized is None
    assert groups[1].text_normalized == "り"


def test_kana_groups_are_normalised():
    groups = build_groups("お茶カップ")

    assert groups[-1].text == "カップ"
    assert groups[-1].text_normalized == "かっぷ"


def test_distribute_anchors_on_kana():
    assert _pairs(distribute_furigana("振り仮名", "ふりがな")) == [
        ("振", "ふ"),
        ("り", ""),
        ("仮名", "がな"),
    ]


def test_distribute_trailing_okurigana():
    assert _pairs(distribute_furigana("食べる", "たべる")) == [("食", "た"), ("べる", "")]


def test_distribute_single_kanji_group():
    assert _pairs(distribute_furigana("猫", "ねこ")) == [("猫", "ねこ")]


@pytest.mark.parametrize("text", ["ねこ", "", "漢字", "カタカナ"])
def test_identical_term_and_reading_short_circuit(text):
    assert distribute_furigana(text, text) == [FuriganaSegment(text, "")]


def test_kana_that_only_matches_after_normalisation_is_annotated():
    assert _pairs(distribute_furigana("お茶", "オチャ")) == [("お", "オ"), ("茶", "チャ")]


def test_ambiguous_split_falls_back_to_whole_word():
    # 木 could read き or きの before the の anchor.
    assert _pairs(distribute_furigana("木の木", "きののき")) == [("木の木", "きののき")]


def test_unmatched_kana_falls_back_to_whole_word():
    assert _pairs(distribute_furigana("見る", "みた")) == [("見る", "みた")]


def test_kana_segments_split_matching_and_differing_runs():
    assert _pairs(kana_segments("おかあさん", "おかーさん")) == [
        ("おか", ""),
        ("あ", "ー"),
        ("さん", ""),
    ]


def test_segmentize_requires_full_consumption():
    assert segmentize("", "", [], 0) == []
    assert segmentize("あ", "あ", [], 0) is None


@pytest.mark.parametrize(
    "term, reading",
    [
        ("振り仮名", "ふりがな"),
        ("漢字", ""),
        ("", "かな"),
        ("ヵ月", "かげつ"),
        ("木の木", "きののき"),
        ("お茶", "オチャ"),
        ("abc", "えーびーしー"),
        ("取り扱い", "とりあつかい"),
        ("😀の猫", "のねこ"),
    ],
)
def test_distribute_is_lossless(term, reading):
    assert segments_text(distribute_furigana(term, reading)) == term
