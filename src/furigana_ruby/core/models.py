"""Data models shared across the furigana engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Literal, Mapping, Optional, Protocol, Sequence, Union

GroupingMode = Literal["grouped", "flat"]
"""How a lookup collaborator should group its candidates."""

LOADING = "loading"
"""Sentinel returned by a lookup collaborator whose backing data is not ready yet."""


@dataclass(slots=True)
class FuriganaGroup:
    """A maximal run of a written term that is uniformly kana or non-kana."""

    is_kana: bool
    text: str
    text_normalized: Optional[str] = None
    """Hiragana form of ``text``; only filled for kana groups."""


@dataclass(slots=True)
class FuriganaSegment:
    """A span of written text and the reading shown above it.

    An empty ``reading`` means the span needs no annotation.
    """

    text: str
    reading: str = ""

    def needs_ruby(self) -> bool:
        return bool(self.reading) and self.reading != self.text


@dataclass(slots=True)
class LookupResult:
    """A single dictionary candidate at a text offset.

    ``match_len`` is measured in UTF-8 bytes from the queried offset.
    """

    headword: Optional[str] = None
    reading: Optional[str] = None
    match_len: Optional[int] = None

    @staticmethod
    def coerce(value: Any) -> "LookupResult":
        if isinstance(value, LookupResult):
            return value
        if isinstance(value, Mapping):
            match_len = value.get("matchLen", value.get("match_len"))
            return LookupResult(
                headword=value.get("headword"),
                reading=value.get("reading"),
                match_len=int(match_len) if match_len is not None else None,
            )
        return LookupResult(
            headword=getattr(value, "headword", None),
            reading=getattr(value, "reading", None),
            match_len=getattr(value, "match_len", None),
        )


LookupResponse = Union[Sequence[Union[LookupResult, Mapping[str, Any]]], str]


class LookupFunction(Protocol):
    """Dictionary collaborator consumed by the sentence annotator."""

    def __call__(
        self,
        text: str,
        byte_offset: int,
        grouping_mode: GroupingMode,
        language: Optional[str] = None,
    ) -> Union[LookupResponse, Awaitable[LookupResponse]]:
        """Return best-first candidates at ``byte_offset`` or :data:`LOADING`."""


@dataclass(slots=True)
class TokenData:
    """Result from the tokeniser for a single lexical entry."""

    surface: str
    reading: Optional[str] = None
    lemma: Optional[str] = None
    lemma_reading: Optional[str] = None


def segments_text(segments: Sequence[FuriganaSegment]) -> str:
    """Concatenate the written text of ``segments``."""

    return "".join(segment.text for segment in segments)


__all__ = [
    "FuriganaGroup",
    "FuriganaSegment",
    "GroupingMode",
    "LOADING",
    "LookupFunction",
    "LookupResponse",
    "LookupResult",
    "TokenData",
    "segments_text",
]
