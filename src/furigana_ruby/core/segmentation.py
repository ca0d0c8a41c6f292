"""Distribution of a reading over the kanji and kana runs of a written term."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .kana import is_kana, to_hiragana
from .models import FuriganaGroup, FuriganaSegment

logger = logging.getLogger(__name__)


def build_groups(term: str) -> List[FuriganaGroup]:
    """Split ``term`` into alternating kana and non-kana groups."""

    groups: List[FuriganaGroup] = []
    for char in term:
        kana = is_kana(ord(char))
        if groups and groups[-1].is_kana == kana:
            groups[-1].text += char
        else:
            groups.append(FuriganaGroup(is_kana=kana, text=char))
    for group in groups:
        if group.is_kana:
            group.text_normalized = to_hiragana(group.text)
    return groups


def kana_segments(text: str, reading: str) -> List[FuriganaSegment]:
    """Split a kana run into pieces that match ``reading`` and pieces that differ.

    Matching pieces get an empty reading, differing pieces the corresponding
    slice of ``reading``.
    """

    segments: List[FuriganaSegment] = []
    start = 0
    same = reading[:1] == text[:1]
    for index in range(1, len(text)):
        now_same = reading[index : index + 1] == text[index]
        if now_same == same:
            continue
        segments.append(FuriganaSegment(text[start:index], "" if same else reading[start:index]))
        same = now_same
        start = index
    segments.append(FuriganaSegment(text[start:], "" if same else reading[start : len(text)]))
    return segments


def segmentize(
    reading: str,
    reading_normalized: str,
    groups: Sequence[FuriganaGroup],
    start_index: int = 0,
) -> Optional[List[FuriganaSegment]]:
    """Assign a slice of ``reading`` to every group from ``start_index`` onwards.

    Returns ``None`` when no partition consumes the whole reading, or when a
    kanji group followed by further groups can be split in more than one way.
    """

    remaining = len(groups) - start_index
    if remaining <= 0:
        return [] if not reading else None

    group = groups[start_index]
    text = group.text
    length = len(text)

    if group.is_kana:
        normalized = group.text_normalized
        if normalized is None or not reading_normalized.startswith(normalized):
            return None
        segments = segmentize(
            reading[length:], reading_normalized[length:], groups, start_index + 1
        )
        if segments is None:
            return None
        if reading.startswith(text):
            head = [FuriganaSegment(text, "")]
        else:
            head = kana_segments(text, reading)
        return head + segments

    result: Optional[List[FuriganaSegment]] = None
    for split in range(len(reading), length - 1, -1):
        segments = segmentize(
            reading[split:], reading_normalized[split:], groups, start_index + 1
        )
        if segments is not None:
            if result is not None:
                return None
            result = [FuriganaSegment(text, reading[:split])] + segments
        if remaining == 1:
            break
    return result


def distribute_furigana(term: str, reading: str) -> List[FuriganaSegment]:
    """Return the segments of ``term`` annotated with the matching parts of ``reading``.

    When no consistent split exists the whole term carries the whole reading.
    """

    if term == reading:
        return [FuriganaSegment(term, "")]

    groups = build_groups(term)
    segments = segmentize(reading, to_hiragana(reading), groups, 0)
    if segments is not None:
        return segments

    logger.debug("No furigana split for %r / %r, annotating as a whole", term, reading)
    return [FuriganaSegment(term, reading)]


__all__ = ["build_groups", "distribute_furigana", "kana_segments", "segmentize"]
