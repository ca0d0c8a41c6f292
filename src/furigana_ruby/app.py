"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import BACKENDS, AppConfig
from .services.pipeline import ProcessingPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="furigana-ruby",
        description="Annotate Japanese text with <ruby> furigana markup.",
    )
    parser.add_argument("text", nargs="*", help="Text to annotate. Reads stdin when omitted.")
    parser.add_argument("--backend", choices=BACKENDS, default="tokenizer", help="Lookup backend.")
    parser.add_argument("--flat", action="store_true", help="Request ungrouped lookup candidates.")
    parser.add_argument("--language", default="japanese", help="Language of the input text.")
    parser.add_argument("--escape", action="store_true", help="HTML-escape text and readings.")
    parser.add_argument("--mecab-args", default=None, help="Arguments passed to the fugashi tagger.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    config = AppConfig()
    config.annotation.language = args.language
    config.annotation.grouping_mode = "flat" if args.flat else "grouped"
    config.annotation.escape = args.escape
    config.dictionary.backend = args.backend
    config.tokenizer.arguments = args.mecab_args
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point used by both console scripts and ``python -m``."""

    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    text = " ".join(args.text) if args.text else sys.stdin.read()
    try:
        pipeline = ProcessingPipeline(config_from_args(args))
        output = pipeline.annotate(text)
    except Exception as exc:
        logger.debug("Annotation failed", exc_info=True)
        print(f"furigana-ruby: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    if args.text:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
