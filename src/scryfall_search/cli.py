"""Command line interface: ``scryfall-search QUERY [MODE]``."""

from __future__ import annotations

import argparse
import logging
import sys

from .client import ScryfallClient
from .config import DEFAULT_TIMEOUT
from .errors import ScryfallError
from .models.page import ResultPage

logger = logging.getLogger("scryfall_search")

PRINT_MODES = ("prices", "names", "full")


def _format_total(results: ResultPage) -> str:
    return f"{results.sum_prices():.2f} EUR"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scryfall-search",
        description="Search Scryfall and print every matching card.",
    )
    parser.add_argument("query", help="search query, already URL-safe")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=PRINT_MODES,
        default="full",
        help="prices: EUR total only; names: one name per line; "
        "full: every card plus the EUR total (default)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout per page request, in seconds",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def print_results(results: ResultPage, mode: str) -> None:
    if mode == "prices":
        print(_format_total(results))
    elif mode == "names":
        for name in results.names():
            print(name)
    else:
        print(results.render())
        print(_format_total(results))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with ScryfallClient(timeout=args.timeout) as client:
            results = client.search(args.query)
        print_results(results, args.mode)
    except ScryfallError as e:
        logger.debug("Search failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
