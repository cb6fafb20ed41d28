# src/moonguard_gen/core/sources.py
import glob
import logging
from typing import Iterable, List, Optional

import pathspec

from moonguard_gen.errors import InvalidInputError, NoSourcesFoundError, ResolutionError

logger = logging.getLogger(__name__)


def load_exclude_spec(patterns: Iterable[str]) -> pathspec.GitIgnoreSpec:
    """
    Compiles gitignore-style exclude patterns.
    Raises ResolutionError if any pattern is malformed.
    """
    try:
        return pathspec.GitIgnoreSpec.from_lines(list(patterns))
    except ValueError as e:
        raise ResolutionError(f"invalid exclude pattern: {e}") from e


def check_pattern_syntax(pattern: str) -> None:
    """
    Rejects a pattern with an unclosed character class such as "[a.proto".
    glob would silently treat the bracket as a literal and match nothing.
    """
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] == "[":
            # Same bracket scan as fnmatch: a leading "!" or "]" belongs to the class
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                raise ResolutionError(f"unable to find input sources: syntax error in pattern `{pattern}`")
            i = j
        i += 1


def resolve_sources(pattern: str, exclude: Optional[Iterable[str]] = None) -> List[str]:
    """
    Expands a glob pattern into the protobuf sources to compile.

    Matches are sorted so that an unchanged tree always resolves to the same
    list. Paths matching any of the `exclude` patterns are dropped afterwards.
    An empty result is an error, never an empty success.
    """
    if not pattern:
        raise InvalidInputError("first argument must be your protobuf source path")

    check_pattern_syntax(pattern)

    try:
        # Dotfiles match like any other name
        matches = sorted(glob.glob(pattern, recursive=True, include_hidden=True))
    except (OSError, ValueError) as e:
        raise ResolutionError(f"unable to find input sources: {e}") from e

    logger.debug("pattern %r matched %d path(s)", pattern, len(matches))

    if exclude:
        spec = load_exclude_spec(exclude)
        kept = [m for m in matches if not spec.match_file(m)]
        logger.debug("excluded %d path(s)", len(matches) - len(kept))
        matches = kept

    if not matches:
        raise NoSourcesFoundError(pattern)

    return matches
