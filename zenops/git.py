"""Parsing of git output for the zenops config repository.

Reduces ``git status --porcelain=v2`` output to per-file
:class:`GitFileStatus` entries and interprets the answer of
``git rev-parse --is-inside-work-tree``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from zenops.errors import UnsafeRelativePathError

log = logging.getLogger(__name__)


def safe_relative_path(path: str) -> str:
    """Validate ``path`` as a relative path that stays inside its root.

    Returns the path normalised to ``/``-separated components, with empty
    and ``.`` components dropped. Raises :class:`UnsafeRelativePathError`
    for absolute paths and for any ``..`` component.
    """
    if path.startswith("/"):
        raise UnsafeRelativePathError(path, f"Path {path!r} is absolute")
    parts = []
    for component in path.split("/"):
        if component in ("", "."):
            continue
        if component == "..":
            raise UnsafeRelativePathError(
                path, f"Path {path!r} traverses outside its root"
            )
        parts.append(component)
    return "/".join(parts)


class GitStatusKind(Enum):
    """The reduced state of one file in the working tree."""

    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    UNTRACKED = "untracked"
    OTHER = "other"


@dataclass(frozen=True)
class GitFileStatus:
    """State of a single file reported by ``git status --porcelain=v2``.

    ``code`` holds the raw XY status code and is set only for
    :attr:`GitStatusKind.OTHER`.
    """

    kind: GitStatusKind
    path: str
    code: Optional[str] = None

    def to_json(self) -> dict[str, Any]:
        """Serialise as ``{"kind": ..., "data": ...}``."""
        if self.kind is GitStatusKind.OTHER:
            data: Any = {"code": self.code, "path": self.path}
        else:
            data = self.path
        return {"kind": self.kind.value, "data": data}


def parse_is_inside_work_tree(raw: str) -> bool:
    """Interpret the stdout of ``git rev-parse --is-inside-work-tree``.

    Only ``true`` (after trimming) means inside a work tree; empty output,
    ``false`` and anything unrecognised mean it is not.
    """
    answer = raw.strip()
    if answer == "true":
        return True
    if answer not in ("", "false"):
        log.debug(
            "git rev-parse --is-inside-work-tree: unrecognised output %r", answer
        )
    return False


def status_from_xy(xy: str, path: str) -> GitFileStatus:
    """Reduce a porcelain ``XY`` pair to a :class:`GitFileStatus`.

    The worktree side (Y) wins; when it is ``.`` the index side (X) is used
    so staged-only changes still surface.
    """
    x = xy[0] if len(xy) >= 1 else "."
    y = xy[1] if len(xy) >= 2 else "."
    effective = y if y != "." else x
    if effective in ("M", "T", "R", "C"):
        return GitFileStatus(GitStatusKind.MODIFIED, path)
    if effective == "A":
        return GitFileStatus(GitStatusKind.ADDED, path)
    if effective == "D":
        return GitFileStatus(GitStatusKind.DELETED, path)
    return GitFileStatus(GitStatusKind.OTHER, path, code=xy)


def _take_fields(line: str, rest: str, count: int) -> tuple[list[str], str]:
    """Split ``count`` space-separated fields off ``rest``."""
    fields = []
    for _ in range(count):
        if not rest:
            raise ValueError(f"malformed git status line: {line!r}")
        head, _sep, rest = rest.partition(" ")
        fields.append(head)
    return fields, rest


def _lines(out: str):
    chunks = out.split("\n")
    if chunks and chunks[-1] == "":
        chunks.pop()
    for chunk in chunks:
        yield chunk[:-1] if chunk.endswith("\r") else chunk


def parse_porcelain_v2(out: str) -> list[GitFileStatus]:
    """Parse the stdout of ``git status --porcelain=v2``.

    Renames surface at their new path, unmerged entries become
    :attr:`GitStatusKind.OTHER`, and ignored (``!``) or unknown lines are
    skipped. Raises :class:`UnsafeRelativePathError` for paths that escape
    the repository and :class:`ValueError` for truncated lines.
    """
    entries: list[GitFileStatus] = []
    for line in _lines(out):
        (tag,), rest = _take_fields(line, line, 1)
        if tag == "1":
            (xy, *_meta), rest = _take_fields(line, rest, 7)
            entries.append(status_from_xy(xy, safe_relative_path(rest)))
        elif tag == "2":
            (xy, *_meta), rest = _take_fields(line, rest, 8)
            new_path = rest.partition("\t")[0]
            entries.append(status_from_xy(xy, safe_relative_path(new_path)))
        elif tag == "u":
            (xy, *_meta), rest = _take_fields(line, rest, 9)
            entries.append(
                GitFileStatus(GitStatusKind.OTHER, safe_relative_path(rest), code=xy)
            )
        elif tag == "?":
            entries.append(
                GitFileStatus(GitStatusKind.UNTRACKED, safe_relative_path(rest))
            )
        elif tag == "!":
            continue
        else:
            log.debug("git status --porcelain=v2: unknown line tag %r", tag)
    return entries