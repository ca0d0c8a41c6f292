import pytest

from furigana_ruby.core.inflection import distribute_furigana_inflected, stem_length
from furigana_ruby.core.models import segments_text


def _pairs(segments):
    return [(segment.text, segment.reading) for segment in segments]


def test_stem_length_counts_code_points():
    assert stem_length("たべる", "たべた") == 2
    assert stem_length("", "た") == 0
    assert stem_length("😀a", "😀b") == 1
    assert stem_length("同じ", "同じ") == 2


def test_inflected_tail_is_plain_text():
    assert _pairs(distribute_furigana_inflected("見る", "みる", "見ます")) == [
        ("見", "み"),
        ("ます", ""),
    ]


def test_tail_merges_into_trailing_plain_segment():
    assert _pairs(distribute_furigana_inflected("食べる", "たべる", "食べた")) == [
        ("食", "た"),
        ("べた", ""),
    ]


def test_kana_surface_aligns_with_reading():
    assert _pairs(distribute_furigana_inflected("食べる", "たべる", "たべた")) == [("たべた", "")]


def test_katakana_surface_needs_no_ruby():
    assert _pairs(distribute_furigana_inflected("猫", "ねこ", "ネコ")) == [("ネコ", "")]


def test_uninflected_surface_matches_plain_distribution():
    assert _pairs(distribute_furigana_inflected("振り仮名", "ふりがな", "振り仮名")) == [
        ("振", "ふ"),
        ("り", ""),
        ("仮名", "がな"),
    ]


def test_segment_crossing_the_stem_is_truncated_without_reading():
    assert _pairs(distribute_furigana_inflected("仮名", "かな", "仮")) == [("仮", "")]


def test_no_common_stem_leaves_surface_unannotated():
    assert _pairs(distribute_furigana_inflected("猫", "ねこ", "犬")) == [("犬", "")]


@pytest.mark.parametrize(
    "headword, reading, source",
    [
        ("見る", "みる", "見ます"),
        ("行く", "いく", "行った"),
        ("食べる", "たべる", "食べさせられた"),
        ("コーヒー", "こーひー", "コーヒー"),
        ("猫", "ねこ", "犬"),
        ("ヵ月", "かげつ", "ヵ月間"),
    ],
)
def test_inflected_distribution_is_lossless(headword, reading, source):
    assert segments_text(distribute_furigana_inflected(headword, reading, source)) == source
