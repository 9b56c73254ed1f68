"""Command-line interface for wordladder."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from wordladder.algorithms.search import find_shortest_path
from wordladder.config import SearchConfig, load_config
from wordladder.io import load_words
from wordladder.logging import get_logger, set_global_log_level
from wordladder.types.base import Algorithm

logger = get_logger(__name__)

ALGORITHM_CHOICES = [str(a) for a in Algorithm]


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.000042 -> "42.0 us"; 0.123 -> "123.0 ms"; 1.234 -> "1.23 s";
        75.2 -> "1m 15.2s".
    """
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f} us"
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordladder",
        description="Find a shortest edit-path between two input words.",
    )
    parser.add_argument("input", type=Path, help="Dictionary file, one word per line")
    parser.add_argument("start", help="Starting word (case-insensitive)")
    parser.add_argument("end", help="Ending word (case-insensitive)")
    parser.add_argument(
        "algorithm",
        nargs="?",
        type=str.lower,
        choices=ALGORITHM_CHOICES,
        default=None,
        help=f"Algorithm used to compute the shortest path (default: {Algorithm.ASTAR!s})",
    )
    parser.add_argument(
        "--algorithm",
        "-a",
        dest="algorithm_option",
        type=str.lower,
        choices=ALGORITHM_CHOICES,
        default=None,
        help="Same as the positional ALGORITHM argument",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="YAML file with search settings",
    )
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Give up after this many node expansions",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    return parser


def _resolve_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> SearchConfig:
    """Merge the config file with command-line overrides."""
    if args.config is not None:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error("Config file not found: %s", args.config)
            raise SystemExit(1) from None
        except ValueError as exc:
            logger.error("Invalid config file %s: %s", args.config, exc)
            raise SystemExit(1) from None
    else:
        config = SearchConfig()

    if (
        args.algorithm is not None
        and args.algorithm_option is not None
        and args.algorithm != args.algorithm_option
    ):
        parser.error(
            f"conflicting algorithms: {args.algorithm} and {args.algorithm_option}"
        )
    chosen = args.algorithm or args.algorithm_option
    if chosen is not None:
        config = replace(config, algorithm=Algorithm.from_string(chosen))

    if args.max_expansions is not None:
        if args.max_expansions < 0:
            parser.error("--max-expansions must be non-negative")
        config = replace(config, max_expansions=args.max_expansions)
    return config


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wordladder`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.

    Raises:
        SystemExit: With code 1 when no ladder is found or an input file
            cannot be read; code 2 on usage errors.
    """
    parser = _build_parser()

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    config = _resolve_config(parser, args)
    start = args.start.lower()
    target = args.end.lower()

    print(
        f"Using input file: {args.input} with {config.algorithm!s} algorithm to "
        f"compute shortest path between {start} and {target}"
    )

    try:
        words = load_words(args.input)
    except FileNotFoundError:
        logger.error("Dictionary file not found: %s", args.input)
        raise SystemExit(1) from None

    # The target is added to the dictionary by the search.
    print(f"{len(words) + 1} words loaded into memory")

    started = perf_counter()
    ladder = find_shortest_path(start, target, words, config=config)
    elapsed = perf_counter() - started

    if ladder is None:
        print("No path found")
        logger.info(
            "No ladder from %s to %s (%s)", start, target, _format_duration(elapsed)
        )
        raise SystemExit(1)

    print(f"Shortest path found in {_format_duration(elapsed)}: {ladder.describe()}")
    logger.debug("Search expanded %d nodes", ladder.expanded)


if __name__ == "__main__":
    main()
