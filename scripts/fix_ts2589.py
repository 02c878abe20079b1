#!/usr/bin/env python3
"""Fix TS2589 "Type instantiation is excessively deep" errors in convex/.

Replaces ES imports of `internal` and `api` from `_generated/api` with
`require()` bindings typed as `any`, which tsc does not try to infer.

Usage: python scripts/fix_ts2589.py [--check] [-v]

Without `--root` it works on the `convex/` directory next to `scripts/`.
Runs from a plain checkout or against an installed `ts2589_fix`.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# a plain checkout has only scripts/ on sys.path
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ts2589_fix.cli import main  # noqa: E402


def has_root_arg(argv: list[str]) -> bool:
    return any(arg == "--root" or arg.startswith("--root=") for arg in argv)


if __name__ == "__main__":
    argv = sys.argv[1:]
    if not has_root_arg(argv):
        argv = ["--root", str(ROOT / "convex"), *argv]
    sys.exit(main(argv))
