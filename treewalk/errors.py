"""Exceptions raised by treewalk.

Normal traversals raise nothing. These exist for invalid configuration and
for the opt-in guards in TraversalConfig.
"""


class TraversalError(Exception):
    """Base class for all treewalk errors."""
    pass


class ConfigurationError(TraversalError):
    """Raised when a TraversalConfig fails validation."""
    pass


class MissingChildError(TraversalError):
    """Raised when a children sequence contains None and holes are not allowed."""

    def __init__(self, parent, position: int):
        self.parent = parent
        self.position = position
        super().__init__(
            f"Children of {parent!r} contain None at position {position}"
        )


class TraversalLimitError(TraversalError):
    """Raised when a traversal visits more nodes than max_nodes allows.

    Usually means the children accessor is cyclic or non-deterministic.
    """

    def __init__(self, max_nodes: int):
        self.max_nodes = max_nodes
        super().__init__(
            f"Traversal exceeded max_nodes={max_nodes}; "
            f"check the children accessor for cycles"
        )
