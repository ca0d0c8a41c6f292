"""Alignment of dictionary headwords with inflected surface forms."""

from __future__ import annotations

import logging
from typing import List

from .kana import to_hiragana
from .models import FuriganaSegment
from .segmentation import distribute_furigana

logger = logging.getLogger(__name__)


def stem_length(text1: str, text2: str) -> int:
    """Return the length in code points of the common prefix of two strings."""

    length = 0
    for char1, char2 in zip(text1, text2):
        if char1 != char2:
            break
        length += 1
    return length


def distribute_furigana_inflected(headword: str, reading: str, source: str) -> List[FuriganaSegment]:
    """Annotate ``source``, an inflected form of ``headword`` read as ``reading``.

    The stem shared with the headword (or with its reading, when that matches
    at least as far) is distributed with :func:`distribute_furigana`; the
    inflected tail of ``source`` is appended without a reading.
    """

    headword_normalized = to_hiragana(headword)
    reading_normalized = to_hiragana(reading)
    source_normalized = to_hiragana(source)

    main_text = headword
    stem = stem_length(headword_normalized, source_normalized)

    reading_stem = stem_length(reading_normalized, source_normalized)
    if reading_stem > 0 and reading_stem >= stem:
        main_text = reading
        stem = reading_stem
        reading = source[:stem] + reading[stem:]

    segments: List[FuriganaSegment] = []
    if stem > 0:
        main_text = source[:stem] + main_text[stem:]
        consumed = 0
        for segment in distribute_furigana(main_text, reading):
            start = consumed
            consumed += len(segment.text)
            if consumed < stem:
                segments.append(segment)
                continue
            if consumed == stem:
                segments.append(segment)
            elif start < stem:
                segments.append(FuriganaSegment(main_text[start:stem], ""))
            break
    else:
        logger.debug("No common stem between %r and %r", headword, source)

    if stem < len(source):
        tail = source[stem:]
        if segments and not segments[-1].reading:
            segments[-1].text += tail
        else:
            segments.append(FuriganaSegment(tail, ""))

    return segments


__all__ = ["distribute_furigana_inflected", "stem_length"]
