"""Test fixtures for treewalk consumers.

These fixtures make it quick to build small trees and to observe how a
traversal drives its callbacks, without writing a node class or a
counting closure in every test.
"""

from typing import Any, List, Optional, Sequence, Tuple, Union

from ..core.signal import STOP


class SimpleNode:
    """Minimal tree node with a name and a list of children.

    Nodes compare by identity, so two nodes with the same name are still
    distinct. ``children`` may be set to None to model an absent list.
    """

    def __init__(self, name: str, children: Optional[List['SimpleNode']] = None):
        self.name = name
        self.children = children if children is not None else []

    def __repr__(self) -> str:
        return f"SimpleNode({self.name!r})"


TreeShape = Union[str, Tuple[str, Sequence[Any]]]


def build_tree(shape: TreeShape) -> SimpleNode:
    """Build a SimpleNode tree from nested ``(name, [children])`` tuples.

    A bare string is a leaf. None entries in a children list are kept as
    holes so tests can exercise hole handling.

    Example:
        root = build_tree(("A", [("B", ["D"]), "C"]))
        # A -> [B, C], B -> [D]

    Args:
        shape: Nested tuple description of the tree

    Returns:
        The root SimpleNode
    """
    if isinstance(shape, str):
        return SimpleNode(shape)

    name, child_shapes = shape
    root = SimpleNode(name, [])
    pending = [(root, child_shapes)]

    while pending:
        parent, shapes = pending.pop()
        for child_shape in shapes:
            if child_shape is None:
                parent.children.append(None)
            elif isinstance(child_shape, str):
                parent.children.append(SimpleNode(child_shape))
            else:
                child_name, grandchildren = child_shape
                child = SimpleNode(child_name, [])
                parent.children.append(child)
                pending.append((child, grandchildren))

    return root


class CallRecorder:
    """Callable that records its calls and optionally stops a traversal.

    Example:
        recorder = CallRecorder(stop_at=3)
        preorder_traversal(root, 'children', recorder)
        assert len(recorder.calls) == 3

    Args:
        stop_at: 1-based call number on which to return STOP (None = never)
        result: Value returned on every other call
    """

    def __init__(self, stop_at: Optional[int] = None, result: Any = None):
        self.stop_at = stop_at
        self.result = result
        self.calls: List[Tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.stop_at is not None and len(self.calls) == self.stop_at:
            return STOP
        return self.result

    @property
    def first_args(self) -> List[Any]:
        """First positional argument of every recorded call."""
        return [call[0] for call in self.calls]

    def names(self) -> List[Any]:
        """Names of recorded nodes, for SimpleNode or path arguments."""
        names = []
        for value in self.first_args:
            if isinstance(value, list):
                names.append([getattr(n, 'name', n) for n in value])
            else:
                names.append(getattr(value, 'name', value))
        return names
