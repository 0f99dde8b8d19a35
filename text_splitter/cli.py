"""Command line interface for the text splitter."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import SplitterServiceConfig
from .exceptions import SplitterError, format_error_chain
from .logging_config import get_logger, setup_logging
from .models import SplitStrategy, SplitterConfig
from .service import SplittingService

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    defaults = SplitterServiceConfig()
    parser = argparse.ArgumentParser(
        prog="text-splitter",
        description="Split a text file into chunks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s notes.txt
  %(prog)s notes.txt --strategy sentence --chunk --chunk-size 256
  %(prog)s notes.txt --strategy character --separator "\\n" -o data/
        """
    )
    parser.add_argument(
        "input_path",
        type=Path,
        help="Path to the UTF-8 text file to split"
    )
    parser.add_argument(
        "-s", "--strategy",
        choices=[s.value for s in SplitStrategy],
        default=defaults.strategy.value,
        help=f"Splitting strategy (default: {defaults.strategy.value})"
    )
    parser.add_argument(
        "--separator",
        default=None,
        help="Literal separator for the character strategy (default: blank line)"
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=defaults.splitter.chunk_size,
        help=f"Target chunk length (default: {defaults.splitter.chunk_size})"
    )
    parser.add_argument(
        "--overlap",
        type=int,
        default=None,
        help=(
            "Overlap budget between chunks (default: a fifth of --chunk-size, "
            f"at most {defaults.splitter.overlap})"
        )
    )
    parser.add_argument(
        "--chunk",
        action="store_true",
        help="Merge pieces into size-bounded chunks"
    )
    parser.add_argument(
        "--chars",
        action="store_true",
        help="Measure length in characters instead of tokens"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Data directory to save the result in (default: print JSON)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed output"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report errors"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logging(level=log_level)

    if not args.input_path.exists():
        logger.error(f"Input file not found: {args.input_path}")
        return 1

    overlap = args.overlap
    if overlap is None:
        overlap = min(SplitterConfig().overlap, args.chunk_size // 5)

    try:
        splitter_config = SplitterConfig(
            chunk_size=args.chunk_size,
            overlap=overlap,
            chunk=args.chunk,
            length_fn=len if args.chars else None,
        )
        config = SplitterServiceConfig(
            strategy=SplitStrategy(args.strategy),
            splitter=splitter_config,
        )
        if args.separator:
            config.separator = args.separator.replace("\\n", "\n").replace("\\t", "\t")
        if args.output:
            config.data_dir = str(args.output)

        service = SplittingService(config)

        if args.output:
            result, output_path = service.split_and_save(str(args.input_path))
            if not args.quiet:
                print(f"{result.total_chunks} chunks -> {output_path}")
        else:
            result = service.split_file(str(args.input_path))
            records = [record.model_dump(mode="json") for record in result.records]
            print(json.dumps(records, ensure_ascii=False, indent=2))
        return 0

    except SplitterError as e:
        logger.error(f"Splitting failed: {format_error_chain(e)}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
