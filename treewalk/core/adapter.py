"""TreeAdapter abstraction for treewalk.

treewalk never defines a node type. Navigation is delegated to an adapter
that knows how to read the children of a node, so the same traversal code
works for objects with a ``children`` attribute, dicts of adjacency lists,
or anything a function can describe.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional


class TreeAdapter(ABC):
    """Abstract accessor for the children of a node.

    Implementations must be deterministic and side-effect free for the
    duration of a traversal. Returning None or an empty iterable both mean
    the node has no children.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Optional[Iterable[Any]]:
        """Return the ordered children of ``node``.

        Args:
            node: The parent node

        Returns:
            Iterable of child nodes, or None if the node has none
        """
        pass


class CallableAdapter(TreeAdapter):
    """Adapter wrapping a plain ``node -> children`` function."""

    def __init__(self, func: Callable[[Any], Optional[Iterable[Any]]]):
        self.func = func

    def get_children(self, node: Any) -> Optional[Iterable[Any]]:
        return self.func(node)

    def __repr__(self) -> str:
        name = getattr(self.func, '__name__', repr(self.func))
        return f"CallableAdapter({name})"


class AttributeAdapter(TreeAdapter):
    """Adapter reading children from a node attribute.

    Nodes that lack the attribute are treated as leaves.
    """

    def __init__(self, attribute: str = 'children'):
        self.attribute = attribute

    def get_children(self, node: Any) -> Optional[Iterable[Any]]:
        return getattr(node, self.attribute, None)

    def __repr__(self) -> str:
        return f"AttributeAdapter({self.attribute!r})"


class MappingAdapter(TreeAdapter):
    """Adapter over an adjacency mapping of ``node -> children``.

    Nodes missing from the mapping are leaves. Nodes must be hashable.
    """

    def __init__(self, mapping: Mapping):
        self.mapping = mapping

    def get_children(self, node: Any) -> Optional[Iterable[Any]]:
        return self.mapping.get(node)

    def __repr__(self) -> str:
        return f"MappingAdapter({len(self.mapping)} entries)"


def as_adapter(get_children: Any) -> TreeAdapter:
    """Normalize any supported children accessor into a TreeAdapter.

    Args:
        get_children: A TreeAdapter, a callable, an attribute name or a mapping

    Returns:
        TreeAdapter instance

    Raises:
        TypeError: If the accessor type is not recognized
    """
    if isinstance(get_children, TreeAdapter):
        return get_children
    if isinstance(get_children, str):
        return AttributeAdapter(get_children)
    if isinstance(get_children, Mapping):
        return MappingAdapter(get_children)
    if callable(get_children):
        return CallableAdapter(get_children)

    raise TypeError(
        f"Cannot use {type(get_children).__name__} as a children accessor; "
        f"expected a TreeAdapter, callable, attribute name or mapping"
    )
