"""Parse an expression given on the command line and print its renderings."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from shunt.core.ast import expr_to_dict
from shunt.render.depth import DEPTH_SWEEPS, render_depth_view
from shunt.render.text import render_plain, render_precedence
from shunt.syntax.parser import parse_text
from shunt.trace import TraceLogger


def _write_trace(path: Path, events: list[dict]) -> None:
    """Best-effort trace dump that never fails the CLI run."""

    try:
        with TraceLogger(str(path)) as logger:
            for event in events:
                logger.append(event)
            logger.flush()
    except OSError as exc:
        print(f"WARNING: parse trace logging failed: {exc}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Parse an expression with the operator-precedence parser and print its "
            f"bracketed form, plain form and {DEPTH_SWEEPS} depth lines."
        ),
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also print the expression tree as JSON.",
    )
    parser.add_argument(
        "--trace",
        help="Append parser trace events as JSONL to this path.",
    )
    parser.add_argument(
        "--strict-nonassoc",
        action="store_true",
        help="Reject chains of equal-precedence non-associative operators.",
    )
    parser.add_argument(
        "words",
        nargs=argparse.REMAINDER,
        help="Expression words; joined with single spaces.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the expression parser CLI."""

    args = build_parser().parse_args(argv)
    text = " ".join(args.words)
    events: list[dict] | None = [] if args.trace else None

    try:
        expr = parse_text(text, strict_nonassoc=args.strict_nonassoc, trace=events)
        lines = [render_precedence(expr), render_plain(expr)]
        lines.extend(render_depth_view(expr))
        if args.json:
            lines.append(json.dumps(expr_to_dict(expr), ensure_ascii=False))
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        if events is not None:
            _write_trace(Path(args.trace), events)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if events is not None:
        _write_trace(Path(args.trace), events)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
