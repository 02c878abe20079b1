import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

TS_EXT = ".ts"

# generated code and dependency caches, skipped at any depth
EXCLUDED_DIRS = frozenset({"_generated", "node_modules"})

GENERATED_API = Path("_generated") / "api.js"


def file_should_be_processed(path: Path, root: Path, extension: str = TS_EXT) -> bool:
    parts = path.relative_to(root).parts
    if any(part in EXCLUDED_DIRS for part in parts[:-1]):
        return False
    return path.name.endswith(extension) and path.is_file()


def find_source_files(root: Path, extension: str = TS_EXT) -> list[Path]:
    """Recursively list files ending in `extension` under `root`, sorted."""
    files = sorted(
        p for p in root.rglob(f"*{extension}") if file_should_be_processed(p, root, extension)
    )
    logger.debug("Discovered %d %s files under %s", len(files), extension, root)
    return files


# newline="" on both sides so line endings go back to disk exactly as read
def read_source(path: Path) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_source(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def to_module_specifier(relative: str) -> str:
    """Turn a relative filesystem path into a `require()` specifier.

    Separators become forward slashes whatever the host uses, and a bare path
    gets a `./` prefix so Node does not resolve it as a package.
    """
    spec = relative.replace("\\", "/")
    return spec if spec.startswith(".") else f"./{spec}"


def relative_import_path(source_file: Path, target: Path) -> str:
    return to_module_specifier(os.path.relpath(target, source_file.parent))
