"""Building blocks for dotfile and shell-config management: errors, prompts, colour policy, git output parsing and repository bootstrap."""

__version__ = "0.12.0"

__all__ = ["bootstrap", "color", "errors", "git", "init_errors", "line_prompter"]