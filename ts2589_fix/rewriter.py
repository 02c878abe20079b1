"""Rewrite `internal` / `api` imports from `_generated/api` into `require()` bindings.

Importing `internal` or `api` from Convex's generated API module makes tsc
instantiate the whole function reference tree, which ends in TS2589 ("Type
instantiation is excessively deep"). Loading the module through `require()`
and typing the binding as `any` skips that inference.

Matching is line anchored and regex based, not a TypeScript parser.
"""

import enum
import re
from dataclasses import dataclass

MARKER = "Bypass TS2589"

NAMES = ("internal", "api")

# `from` clause shared by every pattern: any relative depth, optional `.js`,
# optional trailing `;` and comment, stopping before a CRLF `\r`
_FROM_GENERATED_API = r"""\s+from\s+['"]\.\.?/?.*/_generated/api(?:\.js)?['"];?[^\r\n]*(?=\r?$)"""

_HEADER = (
    f"// {MARKER} by using require() which doesn't trigger type inference"
)
_DISABLE = (
    "// eslint-disable-next-line "
    "@typescript-eslint/no-explicit-any, @typescript-eslint/no-require-imports"
)


def _import_re(name: str) -> "re.Pattern[str]":
    return re.compile(
        rf"^import\s+(?:type\s+)?\{{[^}}]*\b{name}\b[^}}]*\}}{_FROM_GENERATED_API}",
        re.MULTILINE,
    )


IMPORT_RES = {name: _import_re(name) for name in NAMES}

# both names inside one pair of braces, in any order
COMBINED_IMPORT_RE = re.compile(
    r"^import\s+(?:type\s+)?\{(?=[^}]*\binternal\b)(?=[^}]*\bapi\b)[^}]*\}"
    + _FROM_GENERATED_API,
    re.MULTILINE,
)


class Outcome(enum.Enum):
    FIXED = "fixed"
    ALREADY_PATCHED = "already_patched"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class RewriteResult:
    text: str
    outcome: Outcome

    @property
    def modified(self) -> bool:
        return self.outcome is Outcome.FIXED


def is_already_patched(text: str) -> bool:
    """Return True if an earlier run (or a hand edit) already applied the fix."""
    return MARKER in text


def has_import(text: str, name: str) -> bool:
    return IMPORT_RES[name].search(text) is not None


def require_line(name: str, import_path: str, newline: str = "\n") -> str:
    return f"{_DISABLE}{newline}const {name} = require('{import_path}').{name} as any;"


def require_block(names, import_path: str, newline: str = "\n") -> str:
    """Build the replacement for one import line, binding each of `names`."""
    lines = newline.join(require_line(name, import_path, newline) for name in names)
    return _HEADER + newline + lines


def _replace(pattern, text: str, replacement: str) -> str:
    # callable replacement so `import_path` is never read as a template
    return pattern.sub(lambda m: replacement, text)


def rewrite_source(text: str, import_path: str) -> RewriteResult:
    """Rewrite the TS2589-prone imports in `text`.

    `import_path` is the module specifier used in the generated `require()`
    calls, already relative to the file and using forward slashes.

    Never raises. A file that already carries the marker is returned untouched
    as ALREADY_PATCHED, and one where nothing was replaced comes back as
    NO_MATCH with the original text.
    """
    if is_already_patched(text):
        return RewriteResult(text, Outcome.ALREADY_PATCHED)

    has_internal = has_import(text, "internal")
    has_api = has_import(text, "api")
    if not (has_internal or has_api):
        return RewriteResult(text, Outcome.NO_MATCH)

    # generated lines follow the file's own line endings
    newline = "\r\n" if "\r\n" in text else "\n"

    if COMBINED_IMPORT_RE.search(text):
        new_text = _replace(
            COMBINED_IMPORT_RE, text, require_block(NAMES, import_path, newline)
        )
    else:
        # separate lines or a single name: each pattern is applied on its own
        new_text = text
        for name, found in (("internal", has_internal), ("api", has_api)):
            if found:
                new_text = _replace(
                    IMPORT_RES[name], new_text, require_block([name], import_path, newline)
                )

    if new_text == text:
        return RewriteResult(text, Outcome.NO_MATCH)
    return RewriteResult(new_text, Outcome.FIXED)
