"""High level orchestration of the lookup -> alignment -> ruby pipeline."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from ..config import BACKENDS, AppConfig
from ..core.dictionary import JamdictLookup
from ..core.models import LookupFunction
from ..core.tokenization import Tokenizer, TokenizerLookup
from ..core.transliteration import KakasiReadings
from .annotator import AnnotationOptions, annotate_sentence


@dataclass
class PipelineDependencies:
    """Convenience container for the collaborating services."""

    lookup: LookupFunction


class ProcessingPipeline:
    """Annotates sentences and multi-line text with ruby markup."""

    def __init__(self, config: AppConfig, deps: PipelineDependencies | None = None) -> None:
        self.config = config
        self.lookup = deps.lookup if deps else self._build_lookup(config.dictionary.backend)

    def _build_lookup(self, backend: str) -> LookupFunction:
        backend = backend.lower()
        if backend not in BACKENDS:
            raise ValueError(f"Unknown lookup backend {backend!r}; expected one of {', '.join(BACKENDS)}")
        if backend == "jamdict":
            return JamdictLookup(
                search_limit=self.config.dictionary.search_limit,
                max_match_length=self.config.dictionary.max_match_length,
            )
        if backend == "kakasi":
            return KakasiReadings()
        tokenizer_cfg = self.config.tokenizer
        return TokenizerLookup(
            Tokenizer(tokenizer_cfg.arguments),
            readings=KakasiReadings() if tokenizer_cfg.kakasi_fallback else None,
        )

    def set_backend(self, backend: str) -> None:
        """Switch the underlying lookup implementation at runtime."""

        self.lookup = self._build_lookup(backend)
        self.config.dictionary.backend = backend

    def options(self) -> AnnotationOptions:
        annotation = self.config.annotation
        return AnnotationOptions(
            language=annotation.language,
            grouping_mode=annotation.grouping_mode,
            escape=annotation.escape,
        )

    async def annotate_sentence(self, sentence: str) -> str:
        return await annotate_sentence(sentence, self.lookup, self.options())

    async def annotate_text(self, text: str) -> str:
        """Annotate ``text`` line by line, keeping its line breaks."""

        lines = text.splitlines(keepends=True)
        annotated = []
        for line in lines:
            body = line.rstrip("\r\n")
            ending = line[len(body) :]
            annotated.append(await self.annotate_sentence(body) + ending)
        return "".join(annotated)

    def annotate(self, text: str) -> str:
        """Synchronous wrapper around :meth:`annotate_text`."""

        return asyncio.run(self.annotate_text(text))


__all__ = ["PipelineDependencies", "ProcessingPipeline"]
