import pytest

from furigana_ruby.core.kana import is_kana, prolonged_hiragana, to_hiragana


@pytest.mark.parametrize(
    "char, expected",
    [
        ("あ", True),
        ("ア", True),
        ("ー", True),
        ("぀", True),
        ("ヿ", True),
        ("㄀", False),
        ("漢", False),
        ("a", False),
    ],
)
def test_is_kana_covers_both_blocks(char, expected):
    assert is_kana(ord(char)) is expected


def test_katakana_is_shifted_to_hiragana():
    assert to_hiragana("カタカナ") == "かたかな"
    assert to_hiragana("漢字カナ") == "漢字かな"


def test_prolonged_marks_follow_previous_vowel():
    # "o" lengthens with う, matching dictionary spelling.
    assert to_hiragana("コーヒー") == "こうひい"
    assert to_hiragana("カード") == "かあど"
    assert to_hiragana("ケーキ") == "けえき"


def test_prolonged_marks_can_be_kept():
    assert to_hiragana("コーヒー", keep_prolonged_marks=True) == "こーひー"


def test_prolonged_mark_without_known_vowel_passes_through():
    assert to_hiragana("ー") == "ー"
    assert to_hiragana("ンー") == "んー"
    assert to_hiragana("ーア") == "ーあ"


def test_small_ka_and_ke_are_dropped():
    assert to_hiragana("ヵ月") == "月"
    assert to_hiragana("一ヶ所") == "一所"


def test_empty_input():
    assert to_hiragana("") == ""


@pytest.mark.parametrize("text", ["ひらがな", "カタカナ", "コーヒー", "ンー", "ヵヶ", "漢字とカナ", "ーー"])
def test_conversion_is_idempotent(text):
    once = to_hiragana(text)
    assert to_hiragana(once) == once


def test_prolonged_hiragana_lookup():
    assert prolonged_hiragana("か") == "あ"
    assert prolonged_hiragana("と") == "う"
    assert prolonged_hiragana("ん") is None
