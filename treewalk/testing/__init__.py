"""Testing utilities for treewalk consumers."""

from .fixtures import SimpleNode, build_tree, CallRecorder

__all__ = ['SimpleNode', 'build_tree', 'CallRecorder']
