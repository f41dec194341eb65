"""
Command line entry point for the walkthrough collector.

Loads the walkthrough archive (from the local cache, or by crawling This
Week in Rust) and prints it as a markdown list, or exports the article
pages as plain text.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from walkthrough_archive.core.controller import RunConfig, WalkthroughController, DEFAULT_INDEX_URL
from walkthrough_archive.core.errors import WalkthroughError
from walkthrough_archive.core.logger import initialize_logging
from walkthrough_archive.core.models import flatten_archive, format_markdown_list
from walkthrough_archive.utils.archive_store import default_cache_path


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {value}")
    return number


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be 1 or greater, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="walkthrough-archive",
        description="Collect the 'Rust Walkthroughs' articles of every This Week in Rust issue.",
    )
    parser.add_argument("--force", action="store_true",
                        help="Ignore the local cache and crawl the archive again")
    parser.add_argument("--cache", type=Path, default=default_cache_path(),
                        help="Cache file (default: ~/.rust_walkthrough_articles)")
    parser.add_argument("--index-url", default=DEFAULT_INDEX_URL,
                        help="Archive index page listing every issue")
    parser.add_argument("--concurrency", type=positive_int, default=8,
                        help="Number of pages fetched in parallel")
    parser.add_argument("--isolate-failures", action="store_true",
                        help="Log failed pages and continue instead of aborting the run")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Per-request timeout in seconds (default: none)")
    parser.add_argument("--export", action="store_true",
                        help="Download article pages and write their text to the output directory")
    parser.add_argument("--output-dir", default="output",
                        help="Output directory for --export")
    parser.add_argument("--max-articles", type=non_negative_int, default=None,
                        help="Download at most this many articles with --export")
    parser.add_argument("--log-dir", default="logs", help="Directory for log files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger = initialize_logging(args.log_dir, logging.DEBUG if args.verbose else logging.INFO)

    config = RunConfig(
        index_url=args.index_url,
        cache_path=args.cache,
        output_dir=args.output_dir,
        concurrency=args.concurrency,
        isolate_failures=args.isolate_failures,
        request_timeout=args.timeout,
        max_articles=args.max_articles,
    )
    controller = WalkthroughController(config)

    try:
        archive = controller.load_or_scrape(force=args.force)
        if args.export:
            written = controller.export_contents(archive)
            logger.info(f"Wrote {len(written)} content files to {args.output_dir}")
        else:
            print(format_markdown_list(flatten_archive(archive)))
    except WalkthroughError as e:
        logger.error(f"Run aborted: {e}")
        return 1
    finally:
        controller.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
