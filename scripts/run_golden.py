"""Run golden regression inputs through the parser and compare rendered snapshots."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shunt.render.text import render_plain, render_precedence
from shunt.syntax.parser import parse_text

GOLDEN_DIR = ROOT / "examples" / "golden"
SNAPSHOT_PATH = GOLDEN_DIR / "snapshots.json"


def _stable_snapshot(text: str) -> dict:
    expr = parse_text(text)
    return {
        "precedence": render_precedence(expr),
        "plain": render_plain(expr),
    }


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(description="Run golden parser regression cases.")
    parser.add_argument(
        "--update-goldens",
        action="store_true",
        help="Refresh snapshot file with current renderings.",
    )
    args = parser.parse_args(argv)

    files = sorted(GOLDEN_DIR.glob("*.txt"))
    snapshots: dict = {}
    if SNAPSHOT_PATH.exists():
        loaded = json.loads(SNAPSHOT_PATH.read_text(encoding="utf-8"))
        if isinstance(loaded, dict):
            snapshots = loaded

    current: dict[str, dict] = {}
    failed: list[str] = []
    for path in files:
        case_id = path.stem
        text = path.read_text(encoding="utf-8").strip()
        try:
            current[case_id] = _stable_snapshot(text)
        except Exception as exc:  # noqa: BLE001 - report and continue
            failed.append(f"{case_id} ({exc})")
            continue

        if not args.update_goldens:
            expected = snapshots.get(case_id)
            if expected is None:
                failed.append(f"{case_id} (missing snapshot)")
            elif expected != current[case_id]:
                failed.append(f"{case_id} (snapshot mismatch)")

    if args.update_goldens:
        SNAPSHOT_PATH.write_text(
            json.dumps(current, indent=2, ensure_ascii=False, sort_keys=True) + "\n",
            encoding="utf-8",
        )

    total = len(files)
    print(f"total={total} passed={total - len(failed)} failed={len(failed)}")
    if failed:
        print("failed cases:")
        for name in failed:
            print(name)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
