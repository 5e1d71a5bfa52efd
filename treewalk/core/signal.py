"""Iteration signals for traversal callbacks.

Every callback handed to a traversal may return a Signal. Only
``Signal.STOP`` ends the traversal; anything else (including ``None``,
``False`` or ``0``) means carry on. The check is by identity so that
callbacks returning ordinary domain values never stop a walk by accident.
"""

from enum import Enum
from typing import Any


class Signal(Enum):
    """Control value returned by traversal callbacks."""
    CONTINUE = "continue"
    STOP = "stop"


CONTINUE = Signal.CONTINUE
STOP = Signal.STOP


def should_stop(result: Any) -> bool:
    """Return True if a callback result asks the traversal to end."""
    return result is Signal.STOP
