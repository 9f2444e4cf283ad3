"""Error types raised by configuration loading and the apply pass.

Every error derives from :class:`ZenopsError`. Two errors are equal when
they are of the same class and carry equal fields. Wrapped OS errors are
compared by errno and exception class, so two ``FileNotFoundError``
instances with different messages still compare equal. Any other wrapped
exception is compared by class and message.
"""

from __future__ import annotations

import os
from typing import Any


def _quoted(path: Any) -> str:
    """Render a filesystem path as a double-quoted, escaped string."""
    text = os.fspath(path) if isinstance(path, os.PathLike) else str(path)
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _describe(cause: BaseException) -> str:
    """Short human-readable description of a wrapped exception."""
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)


def _normalize(value: Any) -> Any:
    """Reduce a field to a hashable value used for equality."""
    if isinstance(value, OSError):
        if value.errno is not None:
            return ("oserror", value.errno, type(value))
        return ("oserror", None, type(value))
    if isinstance(value, BaseException):
        return ("exception", type(value), str(value))
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return value


class ZenopsError(Exception):
    """Base class of every error this package raises."""

    _fields: tuple[str, ...] = ()

    def _key(self) -> tuple[Any, ...]:
        return tuple(_normalize(getattr(self, name)) for name in self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZenopsError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({args})"


class OpenDbError(ZenopsError):
    """Opening ``config.toml`` failed (missing file, permission denied, ...)."""

    _fields = ("path", "cause")

    def __init__(self, path: Any, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f"Failed to open the database file {_quoted(path)}: {_describe(cause)}"
        )
        self.__cause__ = cause


class ParseDbError(ZenopsError):
    """``config.toml`` could not be parsed or failed validation."""

    _fields = ("path", "cause")

    def __init__(self, path: Any, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f"Failed to parse the database from file {_quoted(path)}: {_describe(cause)}"
        )
        self.__cause__ = cause


class FailedToWriteConfigError(ZenopsError):
    """Writing a generated config file to disk failed."""

    _fields = ("path", "cause")

    def __init__(self, path: Any, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write config file {path}: {_describe(cause)}")
        self.__cause__ = cause


class FailedToReadConfigError(ZenopsError):
    """Reading an existing managed file failed."""

    _fields = ("path", "cause")

    def __init__(self, path: Any, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f"Failed to read existing config file {path}: {_describe(cause)}"
        )
        self.__cause__ = cause


class SymlinkProbeFailedError(ZenopsError):
    """Inspecting a managed path failed for a reason other than absence."""

    _fields = ("path", "cause")

    def __init__(self, path: Any, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f"Failed to probe filesystem state at {_quoted(path)}: {_describe(cause)}"
        )
        self.__cause__ = cause


class CreateSymlinkFailedError(ZenopsError):
    """Creating the symlink ``symlink -> real`` failed."""

    _fields = ("real", "symlink", "cause")

    def __init__(self, real: Any, symlink: Any, cause: OSError) -> None:
        self.real = real
        self.symlink = symlink
        self.cause = cause
        super().__init__(
            f"Failed to create symlink {symlink} -> {real}: {_describe(cause)}"
        )
        self.__cause__ = cause


class SymlinkRealPathMissingError(ZenopsError):
    """A managed symlink points at a file missing from the zenops repo."""

    _fields = ("real", "symlink")

    def __init__(self, real: Any, symlink: Any) -> None:
        self.real = real
        self.symlink = symlink
        super().__init__(
            f"Symlink {symlink} -> {real}: {real} does not exist in the zenops repo"
        )


class RefusingToOverwriteOtherWithSymlinkError(ZenopsError):
    """A FIFO, socket or similar entry occupies a managed symlink's path."""

    _fields = ("path",)

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(
            f"Not creating symlink at {path}: a non-file, non-directory entry "
            "(FIFO, socket, etc.) already exists"
        )


class UnsafeRelativePathError(ZenopsError):
    """A path escapes its root or otherwise violates path safety rules."""

    _fields = ("path", "reason")

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(reason)


class RefusingToOverwriteFileWithSymlinkError(ZenopsError):
    """A regular file already exists where a symlink should be created."""

    _fields = ("real", "symlink")

    def __init__(self, real: Any, symlink: Any) -> None:
        self.real = real
        self.symlink = symlink
        super().__init__(
            f"Not creating symlink {symlink} -> {real}: a file already exists"
        )


class RefusingToOverwriteDirectoryWithSymlinkError(ZenopsError):
    """A directory already exists where a symlink should be created."""

    _fields = ("real", "symlink")

    def __init__(self, real: Any, symlink: Any) -> None:
        self.real = real
        self.symlink = symlink
        super().__init__(
            f"Not creating symlink {symlink} -> {real}: a directory already exists"
        )


class CreateDirectoryError(ZenopsError):
    """Creating a parent directory for a managed file failed."""

    _fields = ("path", "cause")

    def __init__(self, path: Any, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f"Failed to create directory {_quoted(path)}: {_describe(cause)}"
        )
        self.__cause__ = cause


class UnresolvedInputError(ZenopsError):
    """A package template references an input that is declared nowhere."""

    _fields = ("pkg", "input")

    def __init__(self, pkg: str, input: str) -> None:  # noqa: A002
        self.pkg = pkg
        self.input = input
        super().__init__(
            f"Package {pkg} references undefined input {input}; mark the action "
            f"optional or set [pkg.{pkg}.inputs].{input}"
        )


class TemplateUnterminatedError(ZenopsError):
    """A package template contains ``${`` with no matching ``}``."""

    _fields = ("pkg",)

    def __init__(self, pkg: str) -> None:
        self.pkg = pkg
        super().__init__(f"Package {pkg} has an unterminated `${{` in a template")


class ApplyNeedsYesOrTtyError(ZenopsError):
    """``apply`` ran without a terminal and without ``--yes``/``--dry-run``."""

    def __init__(self) -> None:
        super().__init__(
            "apply requires a terminal for prompts; pass --yes to apply all changes "
            "non-interactively, or --dry-run to preview"
        )


class DirtyRepoRequiresAllowDirtyError(ZenopsError):
    """``apply --yes`` on a dirty repo without ``--allow-dirty``."""

    _fields = ("path",)

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(
            f"zenops config repo at {_quoted(path)} has uncommitted changes. "
            "Commit them first, or re-run with --allow-dirty to apply anyway."
        )