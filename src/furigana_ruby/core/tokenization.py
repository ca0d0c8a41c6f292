"""Tokenisation based lookups built around :mod:`fugashi`."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import List, Optional, Sequence, Tuple

try:  # pragma: no cover - the dependency may be missing in CI
    from fugashi import Tagger
except Exception:  # pragma: no cover - fallback mode
    Tagger = None  # type: ignore

from ..utils.text import char_index
from .inflection import stem_length
from .kana import is_kana_char, to_hiragana
from .models import GroupingMode, LookupResult, TokenData
from .transliteration import KakasiReadings

logger = logging.getLogger(__name__)

TokenSpan = Tuple[int, int, TokenData]


class Tokenizer:
    """Tokenise Japanese text into morphological units."""

    def __init__(self, arguments: str | None = None) -> None:
        self._tagger = None
        if Tagger is None:
            return
        try:
            self._tagger = Tagger(arguments) if arguments else Tagger()
        except Exception as exc:
            logger.warning("Could not initialise fugashi tagger: %s", exc)
            self._tagger = None

    @property
    def available(self) -> bool:
        return self._tagger is not None

    def tokenize(self, text: str) -> List[TokenData]:
        if not text or self._tagger is None:
            return []

        tokens: List[TokenData] = []
        for word in self._tagger(text):
            surface = str(getattr(word, "surface", ""))
            if not surface:
                continue
            reading = self._extract_reading(word)
            tokens.append(
                TokenData(
                    surface=surface,
                    reading=reading,
                    lemma=self._extract_lemma(word),
                    lemma_reading=self._extract_lemma_reading(word),
                )
            )
        return tokens

    def spans(self, text: str) -> List[TokenSpan]:
        """Return ``(start, end, token)`` code point spans for the tokens of ``text``.

        MeCab skips whitespace, so surfaces are located by searching forward.
        """

        spans: List[TokenSpan] = []
        cursor = 0
        for token in self.tokenize(text):
            start = text.find(token.surface, cursor)
            if start < 0:
                continue
            end = start + len(token.surface)
            spans.append((start, end, token))
            cursor = end
        return spans

    @staticmethod
    def _extract_lemma(word) -> str | None:
        features = getattr(word, "feature", None)
        lemma = getattr(features, "lemma", None) or getattr(word, "dictionary_form", None)
        if not isinstance(lemma, str) or not lemma or lemma == "*":
            return None
        # UniDic lemmas may carry a gloss suffix such as ``ノート-note``.
        return lemma.split("-", 1)[0] or None

    @staticmethod
    def _extract_lemma_reading(word) -> str | None:
        features = getattr(word, "feature", None)
        for attr in ("kanaBase", "lForm"):
            value = getattr(features, attr, None)
            if isinstance(value, str) and value and value != "*":
                return value
        return None

    @staticmethod
    def _extract_reading(word) -> str | None:
        reading = getattr(word, "reading", None)
        if isinstance(reading, str) and reading:
            return reading
        features = getattr(word, "feature", None)
        if features is None:
            return None
        for attr in ("kana", "reading", "pron"):
            value = getattr(features, attr, None)
            if isinstance(value, str) and value and value != "*":
                return value
        if isinstance(features, str):
            return Tokenizer._pick_reading_candidate([part.strip() for part in features.split(",")])
        if isinstance(features, Sequence):
            return Tokenizer._pick_reading_candidate(features)
        return None

    @staticmethod
    def _pick_reading_candidate(features: Sequence) -> str | None:
        reading_indexes = (7, 8, 9, 10, 11)
        for index in reading_indexes:
            if index >= len(features):
                break
            value = features[index]
            if not value:
                continue
            text = str(value).strip()
            if not text or text == "*":
                continue
            if any("ぁ" <= ch <= "ゖ" or "ァ" <= ch <= "ヺ" for ch in text):
                return text
        return None


class TokenizerLookup:
    """Lookup collaborator that answers with the token starting at the offset.

    The best candidate pairs the token's dictionary form with its dictionary
    reading, so inflected surfaces align through their stem. Tokens without a
    reading fall back to :class:`KakasiReadings`.
    """

    def __init__(self, tokenizer: Tokenizer | None = None, readings: KakasiReadings | None = None) -> None:
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self.readings = readings
        self._lock = threading.Lock()
        self._cached_text: Optional[str] = None
        self._cached_spans: List[TokenSpan] = []

    async def __call__(
        self,
        text: str,
        byte_offset: int,
        grouping_mode: GroupingMode = "grouped",
        language: Optional[str] = None,
    ) -> List[LookupResult]:
        return await asyncio.to_thread(self.lookup, text, byte_offset, grouping_mode)

    def lookup(self, text: str, byte_offset: int, grouping_mode: GroupingMode = "grouped") -> List[LookupResult]:
        if not self.tokenizer.available:
            return self.readings.lookup(text, byte_offset, grouping_mode) if self.readings else []
        start = char_index(text, byte_offset)
        for span_start, _, token in self._spans_for(text):
            if span_start == start:
                return self._candidates(token, grouping_mode)
            if span_start > start:
                break
        return []

    def _spans_for(self, text: str) -> List[TokenSpan]:
        with self._lock:
            if self._cached_text != text:
                self._cached_spans = self.tokenizer.spans(text)
                self._cached_text = text
            return self._cached_spans

    def _candidates(self, token: TokenData, grouping_mode: GroupingMode) -> List[LookupResult]:
        match_len = len(token.surface.encode("utf-8"))
        pairs: List[Tuple[str, str]] = []
        demoted: List[Tuple[str, str]] = []
        if token.lemma and token.lemma_reading:
            lemma_pair = (token.lemma, self._normalise_reading(token.lemma, token.lemma_reading))
            # UniDic gives proper nouns katakana lemmas (東京 -> トウキョウ).
            if self._shares_stem(lemma_pair, token.surface):
                pairs.append(lemma_pair)
            else:
                demoted.append(lemma_pair)
        surface_reading = token.reading
        if not surface_reading and self.readings is not None:
            surface_reading = self.readings.reading_for(token.surface)
        if surface_reading:
            pairs.append((token.surface, self._normalise_reading(token.surface, surface_reading)))
        pairs.extend(demoted)

        results: List[LookupResult] = []
        for headword, reading in pairs:
            candidate = LookupResult(headword=headword, reading=reading, match_len=match_len)
            if candidate not in results:
                results.append(candidate)
        if not results:
            results.append(LookupResult(match_len=match_len))
        if grouping_mode == "grouped":
            return results[:1]
        return results

    @staticmethod
    def _shares_stem(pair: Tuple[str, str], surface: str) -> bool:
        surface_normalized = to_hiragana(surface)
        return any(stem_length(to_hiragana(text), surface_normalized) > 0 for text in pair)

    @staticmethod
    def _normalise_reading(headword: str, reading: str) -> str:
        if all(is_kana_char(char) for char in headword):
            return headword
        return to_hiragana(reading, keep_prolonged_marks=True)


__all__ = ["Tokenizer", "TokenizerLookup"]
