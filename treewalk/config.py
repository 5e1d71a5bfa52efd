"""Configuration system for treewalk.

This module defines how callers tune a traversal: which algorithm to run,
how to treat None entries in a children sequence, how to guard against
runaway accessors, and what to do when an accessor raises.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List

from .error_policies import ErrorPolicy, FailFastPolicy, ContinueOnErrorsPolicy


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    PRE_ORDER = "preorder"      # Parent before children, depth-first
    LEVEL_ORDER = "level"       # Level by level, breadth-first
    PATH = "path"               # Pre-order, yielding root-to-node paths


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    The defaults reproduce the plain behavior of the library: None
    children are skipped, there is no node limit and accessor errors
    propagate unchanged.
    """

    # Child handling
    skip_none_children: bool = True   # False: None entries raise MissingChildError

    # Runaway guard
    max_nodes: Optional[int] = None   # Raise TraversalLimitError past this many visits

    # Error handling
    error_policy: ErrorPolicy = field(default_factory=FailFastPolicy)

    @classmethod
    def strict(cls) -> 'TraversalConfig':
        """Create config that rejects None children and fails fast on errors."""
        return cls(skip_none_children=False, error_policy=FailFastPolicy())

    @classmethod
    def lenient(cls, verbose: bool = False) -> 'TraversalConfig':
        """Create config that treats unreadable nodes as leaves.

        Args:
            verbose: Print a warning to stderr for each accessor error

        Returns:
            TraversalConfig using ContinueOnErrorsPolicy
        """
        return cls(
            skip_none_children=True,
            error_policy=ContinueOnErrorsPolicy(verbose=verbose)
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if not isinstance(self.error_policy, ErrorPolicy):
            errors.append("error_policy must be an ErrorPolicy instance")

        return errors
