"""
Error handling policies for treewalk.

This module decides what happens when a caller-supplied children accessor
raises during a traversal. Policies are pluggable through
TraversalConfig.error_policy.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import sys


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors raised
    by a children accessor.
    """

    @abstractmethod
    def handle(self, error: Exception, method_name: str, node: Any) -> Any:
        """
        Handle an error raised while navigating the tree.

        Args:
            error: The exception that was raised
            method_name: Name of the navigation method that failed (e.g. 'get_children')
            node: The node being expanded when the error occurred

        Returns:
            A replacement result that allows traversal to continue,
            or re-raises the exception to stop traversal.
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping traversal.

    This is the default behavior.
    """

    def handle(self, error: Exception, method_name: str, node: Any) -> Any:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that records errors and continues traversal.

    A node whose children cannot be read is treated as a leaf. Errors are
    collected for later inspection.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.verbose = verbose

    def handle(self, error: Exception, method_name: str, node: Any) -> Any:
        """
        Record the error and return a sensible default.

        Returns:
            - Empty list for get_children
            - None for any other method
        """
        self.errors.append({
            'node': node,
            'method': method_name,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })

        if self.verbose:
            print(f"\nWARNING: Error in {method_name} for '{node}': {error}", file=sys.stderr)

        if method_name == 'get_children':
            return []
        return None

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with the total count and a count per error type
        """
        by_type: Dict[str, int] = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
        return {
            'total_errors': len(self.errors),
            'by_type': by_type,
            'failed_nodes': [record['node'] for record in self.errors],
        }

    def clear(self) -> None:
        """Forget all recorded errors."""
        self.errors.clear()
