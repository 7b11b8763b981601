"""
Print keyword frequencies for a text file.
Run from backend directory: python scripts/analyze_file.py article.txt --top 20
"""
import argparse
import logging
import sys
import os

import structlog

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from textfreq.services.frequency import analyze_text
from textfreq.services.normalizer import NormalizationMode


def read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def configure_logging() -> dict:
    """
    Send warnings to stderr as plain lines so stdout stays machine-readable.

    Returns the previous structlog configuration so main() can restore it.
    """
    previous = structlog.get_config()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
    return previous


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count keywords in a text file")
    parser.add_argument("path", help="Text file to analyze ('-' for stdin)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in NormalizationMode],
        default=None,
        help="Normalization mode (default: TEXTFREQ_NORMALIZATION_MODE or hangul_only)",
    )
    parser.add_argument("--top", "-n", type=int, default=None, help="Show only the N most frequent keywords")
    args = parser.parse_args(argv)

    if args.top is not None and args.top < 1:
        parser.error("--top must be >= 1")

    previous = configure_logging()
    try:
        report = analyze_text(read_input(args.path), mode=args.mode, top_n=args.top)
    finally:
        structlog.configure(**previous)

    for record in report.records:
        print(f"{record.count}\t{record.word}")

    print("=" * 40, file=sys.stderr)
    print(f"Mode: {report.mode.value}", file=sys.stderr)
    print(f"Tokens: {report.token_count}", file=sys.stderr)
    print(f"Keyword tokens: {report.keyword_token_count}", file=sys.stderr)
    print(f"Unique keywords: {report.unique_keywords}", file=sys.stderr)
    if report.malformed_token_count:
        print(f"Malformed tokens: {report.malformed_token_count}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
