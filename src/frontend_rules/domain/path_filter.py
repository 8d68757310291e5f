"""Glob-based path filtering for rule `ignore` / `folders` options."""

import os
from collections.abc import Iterable, Iterator
from pathlib import PurePath

import pathspec


class PathFilter:
    """
    Matches file paths against gitignore-style glob patterns.

    A pattern without a slash matches at any depth (`*.test.tsx`); a pattern
    with one is anchored to the working directory (`src/legacy/**`). Absolute
    paths under the working directory are also tried in relative form.
    """

    def __init__(self, patterns: Iterable[str], root: str | None = None) -> None:
        self.patterns: tuple[str, ...] = tuple(p for p in patterns if isinstance(p, str) and p.strip())
        self._root = root
        self._spec: pathspec.PathSpec | None = (
            pathspec.PathSpec.from_lines("gitwildmatch", self.patterns) if self.patterns else None
        )

    def __bool__(self) -> bool:
        return self._spec is not None

    def matches(self, path: str) -> bool:
        """True if any pattern matches path (raw or working-directory relative)."""
        if self._spec is None or not path:
            return False
        return any(self._spec.match_file(candidate) for candidate in self._candidates(path))

    def _candidates(self, path: str) -> Iterator[str]:
        posix = PurePath(path).as_posix()
        yield posix
        if self._root and os.path.isabs(path):
            try:
                relative = PurePath(path).relative_to(self._root)
            except ValueError:
                return
            yield relative.as_posix()
