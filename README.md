# zenops

Core pieces of a declarative system-configuration manager for shell
config and dotfiles. The package is a library of pure building blocks:
typed errors, line prompts, a colour policy, parsers for git output, and
the logic used to set up a fresh config repository. It never runs
external programs itself.

## What is inside

- `zenops.errors` — `ZenopsError`, the common base class, and one
  exception class per failure mode of loading the config and applying
  it (for example `OpenDbError`, `ParseDbError`,
  `RefusingToOverwriteFileWithSymlinkError`, `UnresolvedInputError`,
  `DirtyRepoRequiresAllowDirtyError`, `UnsafeRelativePathError`). Two
  errors compare equal when they are of the same class and carry equal
  fields; wrapped `OSError`s are compared by class and errno, other
  wrapped exceptions by class and message.
- `zenops.init_errors` — the errors of prompts, repository setup and
  schema output: `PromptReadError`, `PromptInterruptedError`,
  `InitDirNotEmptyError`, `InitDirExistsError`, `InitGitDirExistsError`,
  `InitNeedsTtyError`, `InitNoConfigTomlError`, `InitIoError`,
  `CurlNotFoundError`, `GithubKeyParseFailedError`, `SchemaEmitError`
  and `SchemaWriteError`.
- `zenops.line_prompter` — the `LinePrompter` interface with two
  implementations. `StreamPrompter` writes prompts to one text stream and
  reads lines from another; `ConsolePrompter` uses `input()` (with
  `readline` line editing where available) and maps Ctrl-D to end of
  input and Ctrl-C to an interruption. Each read returns a `LineOutcome`
  whose `kind` (`OutcomeKind.LINE`, `EOF` or `INTERRUPTED`) says what
  happened; for `LINE`, `text` holds the line without its trailing
  newline.
- `zenops.color` — `ColorChoice` (`AUTO`, `ALWAYS`, `NEVER`).
  `ColorChoice.parse` reads `auto`, `always` or `never`;
  `ColorChoice.enabled` resolves the choice to on/off, with `AUTO`
  colouring only for a terminal and only when `NO_COLOR` is unset.
- `zenops.git` — pure parsers for git output. `parse_porcelain_v2` turns
  `git status --porcelain=v2` text into a list of `GitFileStatus`
  entries (`GitStatusKind.MODIFIED`, `ADDED`, `DELETED`, `UNTRACKED`, or
  `OTHER` with the raw status code); renames surface at their new path,
  ignored and unknown lines are skipped. `parse_is_inside_work_tree`
  interprets `git rev-parse --is-inside-work-tree`. `safe_relative_path`
  rejects absolute paths and `..` components with
  `UnsafeRelativePathError`. `GitFileStatus.to_json` gives
  `{"kind": ..., "data": ...}`.
- `zenops.bootstrap` — setting up a fresh config repository:
  `detect_shell_from_env`, `prompt_with_default`, `prompt_shell`,
  `read_trimmed_line`, the pre-flight checks `preflight_clone` and
  `preflight_bootstrap`, `render_bootstrap_config`, `toml_string` and
  `write_bootstrap_config`.

## Examples

Parsing git status output:

```python
from zenops.git import parse_porcelain_v2

entries = parse_porcelain_v2("? notes.txt\n")
for entry in entries:
    print(entry.to_json())
# {'kind': 'untracked', 'data': 'notes.txt'}
```

Rendering a bootstrap config:

```python
from zenops.bootstrap import BootstrapShell, render_bootstrap_config

print(render_bootstrap_config(BootstrapShell.ZSH, "Alice", "alice@example.com"))
# [shell]
# type = "zsh"
#
# [user]
# name = "Alice"
# email = "alice@example.com"
```

Prompting with a default, driven from in-memory streams:

```python
import io
from zenops.line_prompter import StreamPrompter
from zenops.bootstrap import prompt_with_default

prompter = StreamPrompter(io.StringIO("\n"), io.StringIO())
assert prompt_with_default(prompter, "Name", "Alice") == "Alice"
```

Checking a target directory before setting it up:

```python
from zenops.bootstrap import preflight_bootstrap
from zenops.init_errors import InitDirExistsError

try:
    preflight_bootstrap("/tmp/zenops-demo")
except InitDirExistsError as err:
    print(err)
```

Deciding whether to colour output:

```python
import sys
from zenops.color import ColorChoice

use_color = ColorChoice.parse("auto").enabled(sys.stdout.isatty())
```

## What this package does not do

There is no `zenops` command-line tool here, and nothing in the package
runs git or any other program: it parses git output you hand it, but
does not clone, commit, push or query a repository. It does not load or
validate a `config.toml`, generate dotfiles, create symlinks, apply
changes to the system, list packages or emit a JSON schema. The error
classes for those operations are defined so that code built on this
package can raise them.

## Requirements

Python 3.10 or newer. No third-party runtime dependencies; the tests use
pytest (`pip install zenops[test]`).