"""Errors raised by interactive prompts, ``init`` and schema emission."""

from __future__ import annotations

from typing import Any

from zenops.errors import ZenopsError, _describe, _quoted


class PromptReadError(ZenopsError):
    """Reading an answer from stdin failed."""

    _fields = ("cause",)

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"Failed to read confirmation from stdin: {_describe(cause)}")
        self.__cause__ = cause


class PromptInterruptedError(ZenopsError):
    """The user pressed Ctrl-C at an interactive prompt."""

    def __init__(self) -> None:
        super().__init__("Interrupted")


class InitDirNotEmptyError(ZenopsError):
    """The ``init`` clone target exists and is not empty."""

    _fields = ("path",)

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(
            f"Cannot init: {_quoted(path)} already exists and is not empty. "
            "Remove it first, or use `zenops repo pull` if it's already a zenops repo."
        )


class InitDirExistsError(ZenopsError):
    """The bootstrap target already exists."""

    _fields = ("path",)

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(
            f"Cannot init: {_quoted(path)} already exists. Bootstrap refuses to touch "
            "an existing path; remove it first, or pass a URL to clone into it."
        )


class InitGitDirExistsError(ZenopsError):
    """The bootstrap target already contains a ``.git`` directory."""

    _fields = ("path",)

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(
            f"Cannot init: {_quoted(path)} already contains a .git directory. "
            "Looks like a zenops repo already exists; remove it first or skip init."
        )


class InitNeedsTtyError(ZenopsError):
    """Bootstrap was started without a terminal for its prompts."""

    def __init__(self) -> None:
        super().__init__(
            "init bootstrap requires a terminal for prompts; clone with a URL "
            "instead, or run from a TTY"
        )


class InitNoConfigTomlError(ZenopsError):
    """A cloned repository has no ``config.toml`` at its root."""

    _fields = ("path",)

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(
            f"Cloned repo at {_quoted(path)} has no config.toml at its root. "
            "Is this a zenops config repo? The clone was left in place so you can "
            "inspect it."
        )


class InitIoError(ZenopsError):
    """A filesystem operation during ``init`` pre-flight failed."""

    _fields = ("path", "cause")

    def __init__(self, path: Any, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Init I/O error at {_quoted(path)}: {_describe(cause)}")
        self.__cause__ = cause


class CurlNotFoundError(ZenopsError):
    """``curl`` is needed to fetch GitHub keys but is not installed."""

    def __init__(self) -> None:
        super().__init__(
            "curl is required to fetch GitHub SSH keys; install curl or switch the "
            'entry to type = "manual"'
        )


class GithubKeyParseFailedError(ZenopsError):
    """GitHub answered with a body that is not the expected key list."""

    _fields = ("username", "cause")

    def __init__(self, username: str, cause: BaseException) -> None:
        self.username = username
        self.cause = cause
        super().__init__(
            f"Failed to parse SSH signing keys response for GitHub user {username}: "
            f"{_describe(cause)}"
        )
        self.__cause__ = cause


class SchemaEmitError(ZenopsError):
    """Serialising the JSON schema bundle failed."""

    _fields = ("cause",)

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Failed to emit schema: {_describe(cause)}")
        self.__cause__ = cause


class SchemaWriteError(ZenopsError):
    """Writing the serialised schema to stdout failed."""

    _fields = ("cause",)

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"Failed to write schema to stdout: {_describe(cause)}")
        self.__cause__ = cause