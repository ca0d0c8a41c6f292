"""Reading generation helpers."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

try:  # pragma: no cover - optional dependency import guard
    from pykakasi import kakasi
except Exception:  # pragma: no cover - fallback mode
    kakasi = None  # type: ignore

from ..utils.text import char_index
from .models import GroupingMode, LookupResult

logger = logging.getLogger(__name__)

ConversionUnit = Tuple[int, Dict[str, Any]]


class KakasiReadings:
    """Generate Hiragana readings for Japanese text using :mod:`pykakasi`.

    Also usable as a lookup collaborator: each conversion unit that starts at
    the queried offset becomes a single candidate.
    """

    def __init__(self) -> None:
        self._kakasi = None
        self._lock = threading.Lock()
        self._cached_text: Optional[str] = None
        self._cached_units: List[ConversionUnit] = []
        if kakasi is None:
            return
        try:
            self._kakasi = kakasi()
        except Exception as exc:
            logger.warning("Could not initialise pykakasi: %s", exc)
            self._kakasi = None

    @property
    def available(self) -> bool:
        return self._kakasi is not None

    def reading_for(self, text: str) -> Optional[str]:
        if not text or self._kakasi is None:
            return None
        readings = [part.get("hira") for part in self._kakasi.convert(text) if part.get("hira")]
        if not readings:
            return None
        return "".join(readings)

    def lookup(self, text: str, byte_offset: int, grouping_mode: GroupingMode = "grouped") -> List[LookupResult]:
        start = char_index(text, byte_offset)
        if start >= len(text) or self._kakasi is None:
            return []
        for unit_start, part in self._units_for(text):
            if unit_start > start:
                break
            if unit_start < start:
                continue
            original = part.get("orig") or ""
            if not original.strip():
                return []
            return [
                LookupResult(
                    headword=original,
                    reading=part.get("hira") or None,
                    match_len=len(original.encode("utf-8")),
                )
            ]
        return []

    def _units_for(self, text: str) -> List[ConversionUnit]:
        """Convert ``text`` once and remember where each unit starts."""

        with self._lock:
            if self._cached_text != text:
                units: List[ConversionUnit] = []
                cursor = 0
                for part in self._kakasi.convert(text):
                    original = part.get("orig") or ""
                    start = text.find(original, cursor) if original else -1
                    if start < 0:
                        continue
                    units.append((start, part))
                    cursor = start + len(original)
                self._cached_units = units
                self._cached_text = text
            return self._cached_units

    async def __call__(
        self,
        text: str,
        byte_offset: int,
        grouping_mode: GroupingMode = "grouped",
        language: Optional[str] = None,
    ) -> List[LookupResult]:
        return await asyncio.to_thread(self.lookup, text, byte_offset, grouping_mode)


__all__ = ["KakasiReadings"]
