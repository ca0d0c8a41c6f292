"""Kana classification and katakana to hiragana normalisation."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

CodePointRange = Tuple[int, int]

HIRAGANA_RANGE: CodePointRange = (0x3040, 0x309F)
KATAKANA_RANGE: CodePointRange = (0x30A0, 0x30FF)
KANA_RANGES: Tuple[CodePointRange, ...] = (HIRAGANA_RANGE, KATAKANA_RANGE)

KATAKANA_CONVERSION_RANGE: CodePointRange = (0x30A1, 0x30F6)
HIRAGANA_CONVERSION_RANGE: CodePointRange = (0x3041, 0x3096)
_CONVERSION_OFFSET = HIRAGANA_CONVERSION_RANGE[0] - KATAKANA_CONVERSION_RANGE[0]

KATAKANA_SMALL_KA = 0x30F5
KATAKANA_SMALL_KE = 0x30F6
PROLONGED_SOUND_MARK = 0x30FC


def _build_vowel_table() -> Mapping[str, str]:
    rows = {
        "a": "あかがさざただなはばぱまやらわ",
        "i": "いきぎしじちぢにひびぴみり",
        "u": "うくぐすずつづぬふぶぷむゆる",
        "e": "えけげせぜてでねへべぺめれ",
        "o": "おこごそぞとどのほぼぽもよろを",
    }
    return MappingProxyType({char: vowel for vowel, chars in rows.items() for char in chars})


KANA_TO_VOWEL: Mapping[str, str] = _build_vowel_table()

# Dictionary convention: a prolonged "o" sound is spelled with う.
PROLONGED_VOWEL_KANA: Mapping[str, str] = MappingProxyType(
    {"a": "あ", "i": "い", "u": "う", "e": "え", "o": "う"}
)


def _in_range(code_point: int, bounds: CodePointRange) -> bool:
    return bounds[0] <= code_point <= bounds[1]


def is_kana(code_point: int) -> bool:
    """Return ``True`` when ``code_point`` is in the hiragana or katakana block."""

    return any(_in_range(code_point, bounds) for bounds in KANA_RANGES)


def is_kana_char(char: str) -> bool:
    return len(char) == 1 and is_kana(ord(char))


def prolonged_hiragana(previous: str) -> Optional[str]:
    """Return the vowel kana that lengthens ``previous``, if it has one."""

    vowel = KANA_TO_VOWEL.get(previous)
    if vowel is None:
        return None
    return PROLONGED_VOWEL_KANA[vowel]


def to_hiragana(text: str, keep_prolonged_marks: bool = False) -> str:
    """Convert katakana in ``text`` to hiragana.

    ``ヵ`` and ``ヶ`` are dropped. Unless ``keep_prolonged_marks`` is set, ``ー``
    is replaced by the vowel of the preceding output character when that
    character has a known vowel. Everything else passes through unchanged.
    """

    result: list[str] = []
    for char in text:
        code_point = ord(char)
        if code_point in (KATAKANA_SMALL_KA, KATAKANA_SMALL_KE):
            continue
        if code_point == PROLONGED_SOUND_MARK:
            if not keep_prolonged_marks and result:
                replacement = prolonged_hiragana(result[-1])
                if replacement is not None:
                    char = replacement
        elif _in_range(code_point, KATAKANA_CONVERSION_RANGE):
            char = chr(code_point + _CONVERSION_OFFSET)
        result.append(char)
    return "".join(result)


__all__ = [
    "HIRAGANA_RANGE",
    "KATAKANA_CONVERSION_RANGE",
    "KATAKANA_RANGE",
    "is_kana",
    "is_kana_char",
    "prolonged_hiragana",
    "to_hiragana",
]
