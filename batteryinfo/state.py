"""Battery charging state."""

from __future__ import annotations

import enum
import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class State(enum.Enum):
    """Possible battery states.

    ``UNKNOWN`` means either the controller reported an unknown state or the
    state could not be retrieved.
    """

    UNKNOWN = "unknown"
    CHARGING = "charging"
    DISCHARGING = "discharging"
    EMPTY = "empty"
    FULL = "full"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> State:
        """Parse a state name, ignoring ASCII case.

        Raises ``ValueError`` for anything that is not a known state.
        """
        try:
            return cls(text.translate(_ASCII_LOWER))
        except ValueError:
            raise ValueError(f"invalid battery state: {text!r}") from None