"""Command line interface for focloir dictionary lookups"""

import argparse
import json
import sys
from pathlib import Path

from .config.settings import settings
from .core.factory import create_lookup_service
from .core.lookup_service import DictionaryLookupService, LookupResult
from .exceptions import FocloirError
from .logging_config import get_logger, setup_logging
from .utils.error_handler import handle_errors

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Look up English words in the focloir.ie English-Irish dictionary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  focloir dog                       # Look up a word
  focloir dog cat --locale ga       # Irish interface strings
  focloir --file dog.html           # Parse a saved result page, no network
  focloir dog --format json         # Structured output
  focloir dog --keep-unclassified   # Include senses without a part of speech
        """,
    )

    parser.add_argument("words", nargs="*", help="Headwords to look up")
    parser.add_argument(
        "-f",
        "--file",
        dest="files",
        action="append",
        type=Path,
        default=[],
        metavar="PATH",
        help="Saved result page to parse instead of fetching (repeatable)",
    )
    parser.add_argument(
        "-l",
        "--locale",
        choices=["en", "ga"],
        default=settings.fetch.locale,
        help=f"Interface language (default: {settings.fetch.locale})",
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--format",
        choices=["markdown", "json"],
        default="markdown",
        help="Output format (default: markdown)",
    )
    output_group.add_argument(
        "-t",
        "--template",
        type=Path,
        default=None,
        help="Directory with Jinja2 templates overriding the packaged ones",
    )
    output_group.add_argument(
        "--stats", action="store_true", help="Show lookup statistics"
    )

    processing_group = parser.add_argument_group("processing options")
    processing_group.add_argument(
        "--keep-unclassified",
        action="store_true",
        help="Keep senses that have no part of speech instead of dropping them",
    )
    processing_group.add_argument(
        "--interval",
        type=float,
        default=settings.fetch.rate_limit_delay,
        help=f"Delay between lookups in seconds (default: {settings.fetch.rate_limit_delay})",
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    return parser


@handle_errors(default_return=None, operation_name="read_page")
def read_page(path: Path) -> str | None:
    """Read a saved result page; unreadable files are logged and skipped"""
    return path.read_text(encoding="utf-8", errors="replace")


def format_results(
    results: list[LookupResult], service: DictionaryLookupService, fmt: str
) -> str:
    """Format lookup results as Markdown or JSON"""
    if fmt == "json":
        payload = [
            {
                "word": r.word,
                "locale": r.locale,
                "entries": [
                    e.model_dump(mode="json", by_alias=True) for e in r.entries
                ],
                "error": r.error,
            }
            for r in results
        ]
        return json.dumps(payload, ensure_ascii=False, indent=2)

    return "\n".join(service.render(r) for r in results if r.success)


def lookup_main(args: argparse.Namespace) -> int:
    """Run the lookups requested on the command line; returns the exit code"""
    service = create_lookup_service(
        locale=args.locale,
        keep_unclassified=True if args.keep_unclassified else None,
        template_dir=str(args.template) if args.template else None,
    )
    results: list[LookupResult] = []

    for path in args.files:
        raw = read_page(path)
        if raw is None:
            results.append(
                LookupResult(
                    word=path.stem, locale=args.locale, error=f"Cannot read {path}"
                )
            )
            continue
        results.append(service.lookup_page(raw, path.stem, args.locale))

    if args.words:
        batch = service.batch_lookup(args.words, args.locale, delay=args.interval)
        results.extend(batch.results)

    print(format_results(results, service, args.format))

    failed = [r.word for r in results if not r.success]
    if failed:
        logger.error(f"Failed lookups: {', '.join(failed)}")

    if args.stats:
        print("\nLookup statistics:")
        for key, value in service.get_statistics().items():
            print(f"  {key}: {value}")

    return 1 if failed else 0


def main() -> None:
    """Main entry point for the CLI"""
    parser = create_parser()

    if len(sys.argv) == 1:
        parser.print_help()
        sys.exit(0)

    args = parser.parse_args()

    args.debug = args.debug or settings.debug
    args.verbose = args.verbose or settings.verbose
    log_level = "DEBUG" if (args.debug or args.verbose) else settings.logging.level
    log_file = args.log_file or settings.logging.file
    setup_logging(log_level, str(log_file) if log_file else None)

    if not args.words and not args.files:
        parser.error("Provide words to look up and/or --file pages to parse")

    try:
        sys.exit(lookup_main(args))
    except FocloirError as e:
        logger.error(f"Application error: {e}")
        if args.debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug or args.verbose:
            logger.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
