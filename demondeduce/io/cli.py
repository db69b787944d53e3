"""Command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from demondeduce.core.errors import DeduceError
from demondeduce.core.results import Result, SearchStatus
from demondeduce.core.solver import solve

from . import parser


def setup_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    if verbosity < 0:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def render(result: Result) -> str:
    lines = []
    if result.status is SearchStatus.CONTRADICTORY:
        lines.append("No solutions found: the observations contradict each other.")
    else:
        lines.append(f"Found {result.solution_count} solution(s)")
        if not result.exhaustive:
            lines.append("Search stopped early; the list below may be incomplete.")
        for roles in sorted(result.assignments):
            lines.append(", ".join(roles))
        lines.append("")
        lines.append("Possible roles per position:")
        for seat in range(result.seats):
            tagged = ", ".join(f"{name} ({category.value})" for name, category in result.possible_roles(seat))
            lines.append(f"Position {seat}: {tagged}")
    for caveat in result.caveats:
        lines.append(f"caveat: {caveat}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Demon Bluff deduction solver")
    ap.add_argument("puzzle", type=Path, help="Path to puzzle YAML")
    ap.add_argument("--json", action="store_true", help="Print the result as JSON")
    ap.add_argument("--worlds", action="store_true", default=None,
                    help="Include every kept world in the JSON output")
    ap.add_argument("--strict", action="store_true", default=None,
                    help="Fail on roles or statements the solver cannot check")
    ap.add_argument("--workers", type=int, default=None, help="Worker threads")
    ap.add_argument("--max-worlds", type=int, default=None, help="Stop after exploring this many worlds")
    ap.add_argument("--time-limit", type=float, default=None, help="Stop after this many seconds")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    ap.add_argument("-q", "--quiet", action="store_true")
    args = ap.parse_args(argv)

    setup_logging(-1 if args.quiet else args.verbose)
    try:
        puz = parser.load_puzzle(args.puzzle)
        options = puz.solver_options(
            strict=args.strict,
            workers=args.workers,
            max_worlds=args.max_worlds,
            time_limit=args.time_limit,
            keep_worlds=args.worlds,
        )
        result = solve(puz.deck, puz.counts, puz.cards, options)
    except (DeduceError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(render(result))
    return 0 if result.status is SearchStatus.SOLVED else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
