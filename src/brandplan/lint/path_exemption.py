"""
Per-file rule exemption via ``ignorePaths`` globs.

Glob semantics:
    **      any number of path segments, including none
    *, ?    within a single segment
    [abc]   character class within a single segment

A relative pattern (one that does not start with ``/`` or ``**``) is not
anchored to the filesystem root: ``src/components/ui/**`` exempts
``/project/src/components/ui/card.tsx``. Lint runs do not know the project
root, so relative patterns may start at any directory of the path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from fnmatch import fnmatchcase

logger = logging.getLogger(__name__)

# Identifiers hosts use for sources that did not come from a file
UNKNOWN_FILENAMES = frozenset({"", "<input>", "<text>", "<stdin>"})

GlobMatcher = Callable[[str, Sequence[str]], bool]


def normalize_path(path: str) -> str:
    """Canonicalize path separators to forward slashes."""
    return path.replace("\\", "/")


def is_unknown_filename(file_path: str | None) -> bool:
    """True for a missing filename or a placeholder like ``<input>``."""
    return file_path is None or file_path.strip() in UNKNOWN_FILENAMES


def _match_parts(path_parts: list[str], pattern_parts: list[str]) -> bool:
    if not pattern_parts:
        return not path_parts

    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        while rest and rest[0] == "**":
            rest = rest[1:]
        return any(_match_parts(path_parts[i:], rest) for i in range(len(path_parts) + 1))

    if not path_parts:
        return False
    return fnmatchcase(path_parts[0], head) and _match_parts(path_parts[1:], rest)


def glob_match(path: str, pattern: str) -> bool:
    """Match one canonical path against one glob pattern."""
    pattern = normalize_path(pattern)
    if pattern.startswith("./"):
        pattern = pattern[2:]

    path_parts = path.split("/")
    if _match_parts(path_parts, pattern.split("/")):
        return True

    # Unanchored relative pattern
    if not pattern.startswith(("/", "**")):
        return _match_parts(path_parts, ["**", *pattern.split("/")])
    return False


def matches_any(path: str, patterns: Sequence[str]) -> bool:
    """True if any pattern matches ``path``."""
    return any(glob_match(path, pattern) for pattern in patterns)


def is_exempt(
    file_path: str | None,
    patterns: Sequence[str],
    matcher: GlobMatcher = matches_any,
) -> bool:
    """Decide whether a whole file is exempt from a rule.

    Args:
        file_path: Path of the file being linted, or a placeholder.
        patterns: ``ignorePaths`` globs.
        matcher: Glob implementation, ``(path, patterns) -> bool``.

    Returns:
        False for an empty pattern set or an unknown filename; otherwise
        whether any pattern matches the normalized path.
    """
    if not patterns:
        return False

    if is_unknown_filename(file_path):
        return False

    assert file_path is not None
    exempt = matcher(normalize_path(file_path), patterns)
    if exempt:
        logger.debug("%s matches ignorePaths, skipping", file_path)
    return exempt
