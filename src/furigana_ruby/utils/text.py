"""Conversions between code point indices and UTF-8 byte offsets."""

from __future__ import annotations


def utf8_length(char: str) -> int:
    code_point = ord(char)
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    return 4


def byte_offset(text: str, index: int) -> int:
    """Return the UTF-8 byte offset of the code point at ``index`` in ``text``."""

    return len(text[:index].encode("utf-8", errors="surrogatepass"))


def char_index(text: str, offset: int) -> int:
    """Return the code point index that starts at or after byte ``offset``."""

    consumed = 0
    for index, char in enumerate(text):
        if consumed >= offset:
            return index
        consumed += utf8_length(char)
    return len(text)


def advance_bytes(text: str, start: int, length: int) -> int:
    """Return the code point index reached by consuming ``length`` bytes from ``start``.

    A byte count that ends inside a character consumes the whole character.
    The result never exceeds ``len(text)``.
    """

    end = start
    consumed = 0
    while end < len(text) and consumed < length:
        consumed += utf8_length(text[end])
        end += 1
    return end


__all__ = ["advance_bytes", "byte_offset", "char_index", "utf8_length"]
