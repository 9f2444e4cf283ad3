"""Colour policy for rendered output and prompts."""

from __future__ import annotations

import os
from enum import Enum
from typing import Union


class ColorChoice(Enum):
    """When to emit ANSI colour, as chosen with ``--color``.

    ``AUTO`` colours only when the target stream is a terminal and the
    ``NO_COLOR`` environment variable is unset. ``ALWAYS`` and ``NEVER``
    ignore both.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value

    def enabled(self, stream_is_terminal: bool) -> bool:
        """Resolve the policy to a concrete on/off decision.

        ``stream_is_terminal`` describes the stream colours will be written
        to, normally stdout.
        """
        if self is ColorChoice.ALWAYS:
            return True
        if self is ColorChoice.NEVER:
            return False
        return "NO_COLOR" not in os.environ and bool(stream_is_terminal)

    @classmethod
    def parse(cls, value: Union[str, "ColorChoice"]) -> "ColorChoice":
        """Parse a ``--color`` value (``auto``, ``always`` or ``never``).

        Raises :class:`ValueError` for anything else.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(choice.value for choice in cls)
            raise ValueError(
                f"invalid color choice {value!r}; expected one of: {choices}"
            ) from None