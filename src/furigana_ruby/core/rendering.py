"""Ruby markup rendering."""

from __future__ import annotations

import html
from typing import Iterable

from .models import FuriganaSegment

RUBY_TEMPLATE = "<ruby>{text}<rt>{reading}</rt></ruby>"


def render_ruby(segments: Iterable[FuriganaSegment], escape: bool = False) -> str:
    """Render ``segments`` as an HTML fragment.

    Only segments whose reading is non-empty and differs from their text get
    a ``<ruby>`` element. Nothing is escaped unless ``escape`` is set.
    """

    parts = []
    for segment in segments:
        text = html.escape(segment.text, quote=False) if escape else segment.text
        if segment.needs_ruby():
            reading = html.escape(segment.reading, quote=False) if escape else segment.reading
            parts.append(RUBY_TEMPLATE.format(text=text, reading=reading))
        else:
            parts.append(text)
    return "".join(parts)


__all__ = ["RUBY_TEMPLATE", "render_ruby"]
