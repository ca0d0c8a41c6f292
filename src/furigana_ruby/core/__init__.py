"""Core furigana distribution engine and its lookup collaborators."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "FuriganaGroup",
    "FuriganaSegment",
    "JamdictLookup",
    "KakasiReadings",
    "LOADING",
    "LookupResult",
    "TokenData",
    "Tokenizer",
    "TokenizerLookup",
    "distribute_furigana",
    "distribute_furigana_inflected",
    "is_kana",
    "render_ruby",
    "to_hiragana",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - thin lazy import layer
    if name in __all__:
        module_map = {
            "FuriganaGroup": "models",
            "FuriganaSegment": "models",
            "LOADING": "models",
            "LookupResult": "models",
            "TokenData": "models",
            "JamdictLookup": "dictionary",
            "KakasiReadings": "transliteration",
            "Tokenizer": "tokenization",
            "TokenizerLookup": "tokenization",
            "distribute_furigana": "segmentation",
            "distribute_furigana_inflected": "inflection",
            "is_kana": "kana",
            "render_ruby": "rendering",
            "to_hiragana": "kana",
        }
        module_name = module_map[name]
        module = import_module(f"{__name__}.{module_name}")
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:  # pragma: no cover - aids interactive use
    return sorted(__all__ + list(globals().keys()))
