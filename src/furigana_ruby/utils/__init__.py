"""Shared utility helpers."""

from .text import advance_bytes, byte_offset, char_index, utf8_length

__all__ = ["advance_bytes", "byte_offset", "char_index", "utf8_length"]
