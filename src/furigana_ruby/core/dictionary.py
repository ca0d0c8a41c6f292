"""Dictionary lookups built on top of :mod:`jamdict`."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, List, Optional, Sequence

try:  # pragma: no cover - optional dependency in tests
    from jamdict import Jamdict
except Exception:  # pragma: no cover - fallback mode
    Jamdict = None  # type: ignore

from ..utils.text import char_index
from .models import GroupingMode, LookupResult

logger = logging.getLogger(__name__)

# Characters jamdict treats as query wildcards.
WILDCARDS = frozenset("%_@")


class JamdictLookup:
    """Longest-prefix JMdict lookup that satisfies the annotator's lookup contract.

    Candidates are tried from ``max_match_length`` characters down to one; the
    first length with any entries wins. ``match_len`` is reported in UTF-8
    bytes.
    """

    def __init__(self, search_limit: int = 3, max_match_length: int = 12) -> None:
        self.search_limit = search_limit
        self.max_match_length = max_match_length
        self._thread_local = threading.local()
        self._initialisation_failed = False

    async def __call__(
        self,
        text: str,
        byte_offset: int,
        grouping_mode: GroupingMode = "grouped",
        language: Optional[str] = None,
    ) -> List[LookupResult]:
        return await asyncio.to_thread(self.lookup, text, byte_offset, grouping_mode)

    def lookup(self, text: str, byte_offset: int, grouping_mode: GroupingMode = "grouped") -> List[LookupResult]:
        start = char_index(text, byte_offset)
        if start >= len(text):
            return []
        longest = min(self.max_match_length, len(text) - start)
        for length in range(longest, 0, -1):
            candidate = text[start : start + length]
            if any(char in WILDCARDS for char in candidate):
                continue
            entries = self._query(candidate)
            if not entries:
                continue
            match_len = len(candidate.encode("utf-8"))
            return self._build_results(candidate, entries, match_len, grouping_mode)
        return []

    def _query(self, surface: str) -> Sequence[Any]:
        client = self._get_client()
        if client is None:
            return []
        try:
            result = client.lookup(surface, lookup_chars=False, lookup_ne=False)
        except AttributeError as exc:
            # ``Jamdict`` stores DB handles on a thread local object.  When the
            # instance created in one thread is re-used from another thread the
            # attribute access can fail with ``_thread._local`` errors.  Reset the
            # client for the current thread and retry once.
            if "_thread._local" not in str(exc):
                raise
            self._reset_client()
            client = self._get_client()
            if client is None:
                return []
            result = client.lookup(surface, lookup_chars=False, lookup_ne=False)
        return list(getattr(result, "entries", []) or [])[: self.search_limit]

    def _build_results(
        self,
        candidate: str,
        entries: Sequence[Any],
        match_len: int,
        grouping_mode: GroupingMode,
    ) -> List[LookupResult]:
        results: List[LookupResult] = []
        seen: set[tuple[str, str]] = set()
        for entry in entries:
            readings = self._extract_readings(entry)
            if not readings:
                continue
            headword = self._extract_headword(entry, candidate)
            if grouping_mode == "grouped":
                readings = readings[:1]
            for reading in readings:
                key = (headword, reading)
                if key in seen:
                    continue
                seen.add(key)
                results.append(LookupResult(headword=headword, reading=reading, match_len=match_len))
        return results

    def _get_client(self) -> Any | None:
        if self._initialisation_failed or Jamdict is None:
            return None
        client = getattr(self._thread_local, "jamdict", None)
        if client is not None:
            return client
        try:
            client = Jamdict()
        except Exception as exc:
            logger.warning("Could not initialise jamdict: %s", exc)
            self._initialisation_failed = True
            return None
        if not client.is_available():
            logger.warning("jamdict database is not available; install the jamdict-data extra")
            self._initialisation_failed = True
            return None
        self._thread_local.jamdict = client
        return client

    def _reset_client(self) -> None:
        if hasattr(self._thread_local, "jamdict"):
            delattr(self._thread_local, "jamdict")

    @staticmethod
    def _form_texts(entry, attribute: str) -> List[str]:
        texts: List[str] = []
        for form in getattr(entry, attribute, None) or []:
            text = getattr(form, "text", None)
            if text:
                texts.append(str(text))
        return texts

    @staticmethod
    def _extract_headword(entry, candidate: str) -> str:
        kanji_forms = JamdictLookup._form_texts(entry, "kanji_forms")
        kana_forms = JamdictLookup._form_texts(entry, "kana_forms")
        if candidate in kanji_forms or candidate in kana_forms:
            return candidate
        if kanji_forms:
            return kanji_forms[0]
        if kana_forms:
            return kana_forms[0]
        return candidate

    @staticmethod
    def _extract_readings(entry) -> List[str]:
        return JamdictLookup._form_texts(entry, "kana_forms")


__all__ = ["JamdictLookup"]
