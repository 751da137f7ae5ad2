"""
depstat command line.

Usage:
    depstat analyse < deps.txt
    depstat analyse --order fan-in --limit 10 < deps.txt
    depstat analyse --input deps.txt --out stats.json --order volatile

Reads one `"module_a" -> "module_b";` edge per line and writes a JSON
document with fan-in / fan-out statistics per module.
"""
from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from pathlib import Path
from typing import IO, Optional

from depstat.analytics.ranking import ORDER_KEYS
from depstat.config import AnalyseOptions
from depstat.errors import DepstatError, OutputWriteError, ParseError
from depstat.pipeline import analyse
from depstat.readers import iter_file_lines, iter_lines
from depstat.report import serialize_report, write_report

log = logging.getLogger("depstat.cli")

ANALYSE_DESCRIPTION = (
    "Receive module dependency from stdin, do statistics about module dependency "
    "fan-in and fan-out.\n"
    'Module dependency described as ["module_name_A" -> "module_name_B";], one item per line.'
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="depstat", description="Module dependency statistics.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser(
        "analyse",
        help="Analyse module dependency",
        description=ANALYSE_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--order", default=None,
                   help=f"order by [{' | '.join(ORDER_KEYS)}] (default: $DEPSTAT_ORDER)")
    p.add_argument("--limit", type=int, default=None,
                   help="limit output, order should be set. default no limit (or $DEPSTAT_LIMIT)")
    p.add_argument("--input", default=None,
                   help="Edge list file (default: stdin)")
    p.add_argument("--out", default=None,
                   help="Output JSON path (default: stdout)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Print progress to stderr")
    return parser


def write_out_file(out_path: Path, text: str) -> None:
    """Write `text` to a sibling temp file, then move it into place."""
    tmp_path = out_path.with_name(out_path.name + ".tmp")
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(out_path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise OutputWriteError(f"write output {out_path}: {e}") from e


def run_analyse(args: argparse.Namespace, stdin: IO[str], stdout: IO[str]) -> int:
    try:
        options = AnalyseOptions.from_env(order=args.order, limit=args.limit)
    except ValueError as e:
        log.error("%s", e)
        return 2
    lines = iter_file_lines(args.input) if args.input else iter_lines(stdin)

    try:
        report = analyse(lines, options, verbose=args.verbose)
        if args.out:
            write_out_file(Path(args.out), serialize_report(report))
            if args.verbose:
                print(f"  wrote {args.out}", file=sys.stderr, flush=True)
        else:
            write_report(report, stdout)
    except ParseError as e:
        log.error("parse edge line %r error: %s", e.line, e)
        return e.exit_code
    except DepstatError as e:
        log.error("%s", e)
        return e.exit_code
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "analyse":
        return run_analyse(args, sys.stdin, sys.stdout)
    parser.error(f"unknown command {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
