"""
FARS Command-Line Interface

Exposes three subcommands:

    fars years                                  List bundled accident years
    fars summarize --years <Y> [<Y> ...] [...]  Monthly accident counts per year
    fars map --state <N> --year <Y> [...]       Map accident locations

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _data_dir(args: argparse.Namespace) -> Optional[Path]:
    if args.data_dir is None:
        return None
    data_dir = Path(args.data_dir)
    if not data_dir.is_dir():
        _die(f"Data directory not found: {data_dir}")
    return data_dir


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_years(args: argparse.Namespace) -> None:
    """Print the years that have an accident file available.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.data import available_years

    years = available_years(_data_dir(args))
    if not years:
        _die("No accident files found.")
    for year in years:
        print(year)


def handle_summarize(args: argparse.Namespace) -> None:
    """Print (or save) monthly accident counts for the requested years.

    Years without a file are skipped with a warning; the command only
    fails when none of the years could be loaded.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports import summarize

    summary = summarize(args.years, data_dir=_data_dir(args))
    if summary.empty:
        _die(f"No data loaded for years: {', '.join(args.years)}")

    if args.csv:
        out = Path(args.csv)
        out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(out)
        print(f"✅  Summary written to {out}")
    else:
        print(summary.to_string(na_rep=""))


def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and year.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.analysis import InvalidStateError
    from fars.data import (
        AccidentFileNotFoundError,
        AccidentFileReadError,
        coerce_year,
    )
    from fars.reports import plot_state

    try:
        year = coerce_year(args.year)
    except ValueError as exc:
        _die(str(exc))

    try:
        fig = plot_state(
            args.state,
            year,
            data_dir=_data_dir(args),
            show=not args.no_show,
            output_path=Path(args.html) if args.html else None,
        )
    except (
        AccidentFileNotFoundError,
        AccidentFileReadError,
        InvalidStateError,
    ) as exc:
        _die(str(exc))

    if fig is None:
        print(f"No accidents to plot for state {args.state} in {year}.")
    elif args.html:
        print(f"✅  Map written to {args.html}")


# ===========================================================================
# Parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with all subcommands.

    Returns:
        Configured ``ArgumentParser``.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description="Summarize and map FARS traffic accident records.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )

    # Options shared by every subcommand.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help=(
            "Directory holding accident_<year>.csv.bz2 files "
            "(default: the bundled sample data)."
        ),
    )

    subs = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------------
    # years
    # ------------------------------------------------------------------
    p_years = subs.add_parser(
        "years",
        parents=[common],
        help="List the years with an accident file.",
    )
    p_years.set_defaults(func=handle_years)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        parents=[common],
        help="Count accidents per month for one or more years.",
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="Years to summarize, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--csv",
        default=None,
        metavar="PATH",
        help="Write the summary table to a CSV file instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        parents=[common],
        help="Map accident locations for a state and year.",
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="N",
        help="FARS state code, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YYYY",
        help="Year of accident data to map.",
    )
    p_map.add_argument(
        "--html",
        default=None,
        metavar="PATH",
        help="Also write the map as a standalone HTML file.",
    )
    p_map.add_argument(
        "--no-show",
        action="store_true",
        default=False,
        help="Do not open the map in a browser/viewer.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)

    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        json_format=args.log_json,
        context={"command": args.command},
    )
    args.func(args)


if __name__ == "__main__":
    main()
