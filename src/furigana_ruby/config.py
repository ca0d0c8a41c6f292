"""Application level configuration objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .core.models import GroupingMode

BACKENDS = ("tokenizer", "jamdict", "kakasi")


@dataclass(slots=True)
class AnnotationConfig:
    """Configuration that controls how sentences are annotated."""

    language: Optional[str] = "japanese"
    """Language passed to the lookup collaborator; anything but Japanese disables annotation."""

    grouping_mode: GroupingMode = "grouped"
    """``"grouped"`` collapses duplicate candidates, ``"flat"`` keeps them all."""

    escape: bool = False
    """HTML-escape text and readings before templating ruby markup."""


@dataclass(slots=True)
class DictionaryConfig:
    """Configuration related to dictionary lookups."""

    backend: str = "tokenizer"
    search_limit: int = 3
    max_match_length: int = 12


@dataclass(slots=True)
class TokenizerConfig:
    """Configuration for the :mod:`fugashi` tagger."""

    arguments: Optional[str] = None
    """MeCab argument string such as ``"-d /path/to/unidic"``."""

    kakasi_fallback: bool = True


@dataclass(slots=True)
class AppConfig:
    """Top level configuration container."""

    annotation: AnnotationConfig = field(default_factory=AnnotationConfig)
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)


__all__ = ["AppConfig", "AnnotationConfig", "BACKENDS", "DictionaryConfig", "TokenizerConfig"]
