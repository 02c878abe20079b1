"""Command line entry point: rewrite TS2589-prone imports under a Convex directory.

Running with no arguments rewrites every `.ts` file under `./convex` in place.
Use `--check` to only report the files that would change.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ts2589_fix.files import (
    GENERATED_API,
    TS_EXT,
    find_source_files,
    read_source,
    relative_import_path,
    write_source,
)
from ts2589_fix.rewriter import Outcome, rewrite_source

logger = logging.getLogger(__name__)

DEFAULT_ROOT = Path("convex")


@dataclass
class RunSummary:
    files_checked: int = 0
    fixed: List[Path] = field(default_factory=list)
    skipped: int = 0


def cli(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fix-ts2589",
        description="Replace `internal`/`api` imports from _generated/api with require() to avoid TS2589.",
    )
    parser.add_argument("--root", type=Path, default=DEFAULT_ROOT, help="Convex directory to scan")
    parser.add_argument("--extension", default=TS_EXT, help="File extension to process")
    parser.add_argument("--check", action="store_true", help="Show files that would change but don't write them")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="Show verbose output")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log records to this file")
    return parser.parse_args(args)


def setup_logging(verbose: int = 0, log_file: Optional[Path] = None) -> None:
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.expanduser().parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file.expanduser(), encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def run(root: Path, extension: str = TS_EXT, check: bool = False) -> RunSummary:
    """Process every source file under `root` one after the other.

    I/O errors are not caught: the first unreadable or unwritable file ends the
    run, leaving files processed before it already rewritten.
    """
    root = root.resolve()
    target = root / GENERATED_API
    summary = RunSummary()

    for path in find_source_files(root, extension):
        summary.files_checked += 1
        result = rewrite_source(read_source(path), relative_import_path(path, target))

        if result.outcome is not Outcome.FIXED:
            logger.debug("Skipped %s (%s)", path, result.outcome.value)
            summary.skipped += 1
            continue

        if not check:
            write_source(path, result.text)
        logger.info("%s %s", "Would fix" if check else "Fixed", path)
        summary.fixed.append(path.relative_to(root))

    return summary


def report(summary: RunSummary, check: bool = False, extension: str = TS_EXT) -> None:
    label = "Would fix" if check else "Fixed"
    print(f"Found {summary.files_checked} {extension} files to check\n")
    for path in summary.fixed:
        print(f"{label}: {path.as_posix()}")
    print("\nSummary:")
    print(f"   {label}: {len(summary.fixed)} files")
    print(f"   Skipped: {summary.skipped} files (no imports or already fixed)")
    if not check:
        print("\nDone! Run 'turbo dev' to verify the fixes.")


def main(argv=None) -> int:
    args = cli(argv)
    setup_logging(args.verbose, args.log_file)

    if not args.root.is_dir():
        print(f"fix-ts2589: error: directory not found: {args.root}", file=sys.stderr)
        return 2

    summary = run(args.root, args.extension, check=args.check)
    report(summary, check=args.check, extension=args.extension)
    return 0


if __name__ == "__main__":
    sys.exit(main())
