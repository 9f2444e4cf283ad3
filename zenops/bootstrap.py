"""Building blocks of ``zenops init``.

Covers the pre-flight checks on the target directory for both the clone and
the bootstrap form, the interactive prompts used by bootstrap, and rendering
and writing the minimal ``config.toml`` it produces.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Optional, Union

from zenops.init_errors import (
    InitDirExistsError,
    InitDirNotEmptyError,
    InitGitDirExistsError,
    InitIoError,
    PromptInterruptedError,
    PromptReadError,
)
from zenops.line_prompter import LinePrompter, OutcomeKind

PathArg = Union[str, "os.PathLike[str]"]

SHELL_RETRY_MESSAGE = "Please answer bash, zsh, or none."


class BootstrapShell(Enum):
    """The shells the bootstrap config writer knows how to spell."""

    BASH = "bash"
    ZSH = "zsh"

    def __str__(self) -> str:
        return self.value


def detect_shell_from_env(shell_var: Optional[str]) -> Optional[BootstrapShell]:
    """Guess the user's shell from the value of ``$SHELL``.

    Only ``bash`` and ``zsh`` are recognised; anything else gives ``None``.
    """
    if not shell_var:
        return None
    name = PurePosixPath(shell_var).name
    try:
        return BootstrapShell(name)
    except ValueError:
        return None


def read_trimmed_line(prompter: LinePrompter, prompt: str) -> Optional[str]:
    """Read one answer, trimmed; blank input and end of input give ``None``.

    Raises :class:`PromptInterruptedError` on Ctrl-C and
    :class:`PromptReadError` if reading fails.
    """
    try:
        outcome = prompter.read_line(prompt)
    except OSError as exc:
        raise PromptReadError(exc) from exc
    if outcome.kind is OutcomeKind.EOF:
        return None
    if outcome.kind is OutcomeKind.INTERRUPTED:
        raise PromptInterruptedError()
    trimmed = (outcome.text or "").strip()
    return trimmed or None


def prompt_with_default(
    prompter: LinePrompter, label: str, default: Optional[str]
) -> Optional[str]:
    """Ask for ``label``, returning ``default`` when the answer is blank."""
    prompt = f"{label} [{default}]: " if default is not None else f"{label}: "
    answer = read_trimmed_line(prompter, prompt)
    return answer if answer is not None else default


def prompt_shell(
    prompter: LinePrompter, default: Optional[BootstrapShell]
) -> Optional[BootstrapShell]:
    """Ask which shell to configure until the answer is bash, zsh or none.

    A blank answer keeps ``default``; ``none`` means no shell.
    """
    shown = default.value if default is not None else "none"
    prompt = f"Shell (bash/zsh/none) [{shown}]: "
    while True:
        answer = read_trimmed_line(prompter, prompt)
        if answer is None:
            return default
        normalized = answer.lower()
        if normalized == "none":
            return None
        try:
            return BootstrapShell(normalized)
        except ValueError:
            try:
                prompter.writeln(SHELL_RETRY_MESSAGE)
            except OSError as exc:
                raise PromptReadError(exc) from exc


def toml_string(s: str) -> str:
    """Quote ``s`` as a TOML basic string, escaping ``\\`` and ``"``."""
    escaped = s.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_bootstrap_config(
    shell: Optional[BootstrapShell], name: Optional[str], email: Optional[str]
) -> str:
    """Render the minimal ``config.toml`` written by bootstrap."""
    sections = []
    if shell is not None:
        sections.append(f'[shell]\ntype = "{shell.value}"\n')
    if name is not None or email is not None:
        user = "[user]\n"
        if name is not None:
            user += f"name = {toml_string(name)}\n"
        if email is not None:
            user += f"email = {toml_string(email)}\n"
        sections.append(user)
    return "\n".join(sections)


def _ensure_parent(path: Path) -> None:
    parent = path.parent
    if parent == path:
        return
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InitIoError(parent, exc) from exc


def preflight_clone(zenops_dir: PathArg) -> None:
    """Prepare ``zenops_dir`` as a clone target.

    An empty existing directory is removed; a missing one gets its parent
    created. Raises :class:`InitDirNotEmptyError` for a populated directory
    and :class:`InitIoError` for any other filesystem failure.
    """
    path = Path(zenops_dir)
    try:
        with os.scandir(path) as entries:
            populated = next(entries, None) is not None
    except FileNotFoundError:
        _ensure_parent(path)
        return
    except OSError as exc:
        raise InitIoError(path, exc) from exc
    if populated:
        raise InitDirNotEmptyError(path)
    try:
        path.rmdir()
    except OSError as exc:
        raise InitIoError(path, exc) from exc


def preflight_bootstrap(zenops_dir: PathArg) -> None:
    """Check that the bootstrap target does not exist, and create its parent.

    Raises :class:`InitGitDirExistsError` when the target holds a ``.git``
    directory, :class:`InitDirExistsError` when it exists at all.
    """
    path = Path(zenops_dir)
    if path.exists():
        if (path / ".git").exists():
            raise InitGitDirExistsError(path)
        raise InitDirExistsError(path)
    _ensure_parent(path)


def write_bootstrap_config(
    zenops_dir: PathArg,
    shell: Optional[BootstrapShell],
    name: Optional[str],
    email: Optional[str],
) -> Path:
    """Create ``zenops_dir`` and write the bootstrap ``config.toml`` into it.

    Returns the path of the written file. Raises :class:`InitIoError` on
    failure.
    """
    path = Path(zenops_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InitIoError(path, exc) from exc
    cfg_path = path / "config.toml"
    body = render_bootstrap_config(shell, name, email)
    try:
        cfg_path.write_text(body, encoding="utf-8")
    except OSError as exc:
        raise InitIoError(cfg_path, exc) from exc
    return cfg_path