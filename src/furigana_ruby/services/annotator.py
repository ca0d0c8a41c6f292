"""Sentence level furigana annotation driven by a dictionary lookup callback."""

from __future__ import annotations

import html
import inspect
import logging
from dataclasses import dataclass
from typing import Optional

from ..core.inflection import distribute_furigana_inflected
from ..core.models import LOADING, GroupingMode, LookupFunction, LookupResult
from ..core.rendering import render_ruby
from ..utils.text import advance_bytes, byte_offset

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = frozenset({"japanese", "ja", "jpn"})


@dataclass(slots=True)
class AnnotationOptions:
    """Options forwarded to the lookup collaborator."""

    language: Optional[str] = None
    grouping_mode: GroupingMode = "grouped"
    escape: bool = False


def is_supported_language(language: Optional[str]) -> bool:
    return not language or language.lower() in SUPPORTED_LANGUAGES


def _plain(text: str, options: AnnotationOptions) -> str:
    return html.escape(text, quote=False) if options.escape else text


async def annotate_sentence(
    sentence: str,
    lookup: LookupFunction,
    options: Optional[AnnotationOptions] = None,
) -> str:
    """Return ``sentence`` with ruby markup over every word ``lookup`` recognises.

    ``lookup`` is called once per position, strictly in order, with the UTF-8
    byte offset of that position. If it ever answers :data:`LOADING` the
    original sentence is returned untouched. Exceptions raised by ``lookup``
    propagate to the caller.
    """

    options = options or AnnotationOptions()
    if not sentence or not is_supported_language(options.language):
        return sentence

    parts: list[str] = []
    index = 0
    while index < len(sentence):
        response = lookup(sentence, byte_offset(sentence, index), options.grouping_mode, options.language)
        if inspect.isawaitable(response):
            response = await response
        if isinstance(response, str):
            if response == LOADING:
                logger.debug("Lookup still loading, leaving sentence unannotated")
                return sentence
            raise TypeError(f"Unexpected lookup response: {response!r}")

        best = LookupResult.coerce(response[0]) if response else None
        match_len = (best.match_len or 0) if best is not None else 0
        if best is None or match_len <= 0:
            parts.append(_plain(sentence[index], options))
            index += 1
            continue

        end = advance_bytes(sentence, index, match_len)
        source = sentence[index:end]
        if best.headword and best.reading:
            segments = distribute_furigana_inflected(best.headword, best.reading, source)
            parts.append(render_ruby(segments, escape=options.escape))
        else:
            parts.append(_plain(source, options))
        index = end

    return "".join(parts)


__all__ = ["AnnotationOptions", "SUPPORTED_LANGUAGES", "annotate_sentence", "is_supported_language"]
