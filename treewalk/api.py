"""High-level API for treewalk.

This module provides simple, functional interfaces for common tree traversal
operations. These functions wrap the traverser classes for ease of use in
simple cases: pass a root, a children accessor and, where relevant, a
callback.

A children accessor may be a function ``node -> children``, the name of a
children attribute, an adjacency mapping or a TreeAdapter.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from .config import TraversalConfig, TraversalStrategy
from .core.signal import STOP
from .core.traverser import (
    LevelOrderTraverser,
    PathExplorer,
    PreOrderTraverser,
    create_traverser,
)


def preorder_traversal(
    root: Any,
    get_children: Any,
    on_traverse: Optional[Callable[[Any], Any]] = None,
    *,
    config: Optional[TraversalConfig] = None
) -> None:
    """Visit every node depth-first, parent before children.

    Args:
        root: Starting node (must not be None)
        get_children: Children accessor
        on_traverse: Called with each node; return STOP to end the traversal
        config: Optional traversal configuration

    Example:
        >>> visited = []
        >>> preorder_traversal(tree, 'children', visited.append)
    """
    PreOrderTraverser(get_children, config).run(root, on_traverse)


def level_traversal(
    root: Any,
    get_children: Any,
    on_traverse: Optional[Callable[[Any, int, int], Any]] = None,
    on_wrap: Optional[Callable[[List[Any], int], Any]] = None,
    *,
    config: Optional[TraversalConfig] = None
) -> None:
    """Visit every node breadth-first, one level at a time.

    Args:
        root: Starting node (must not be None)
        get_children: Children accessor
        on_traverse: Called as ``on_traverse(node, index, level)`` where index
            counts nodes over the whole traversal and level starts at 1
        on_wrap: Called as ``on_wrap(nodes, level)`` once per level, before the
            level's first node, with a snapshot of that level's nodes
        config: Optional traversal configuration

    Either callback may return STOP to end the traversal immediately.
    """
    LevelOrderTraverser(get_children, config).run(root, on_traverse, on_wrap)


def explore_path(
    root: Any,
    get_children: Any,
    on_progress: Callable[[List[Any]], Any],
    *,
    config: Optional[TraversalConfig] = None
) -> None:
    """Report the root-to-node path of every node, in pre-order.

    Args:
        root: Starting node (must not be None)
        get_children: Children accessor
        on_progress: Called with each path ``[root, ..., node]``; return STOP
            to end the exploration
        config: Optional traversal configuration
    """
    PathExplorer(get_children, config).run(root, on_progress)


def get_leaf_nodes(root: Any, get_children: Any, *,
                   config: Optional[TraversalConfig] = None) -> List[Any]:
    """Get all nodes without children, in pre-order.

    None entries in a children list are holes, not children: a node whose
    children are all None is a leaf.
    """
    return [
        node
        for node, _, children in PreOrderTraverser(get_children, config).walk(root)
        if not children
    ]


def compute_height(root: Any, get_children: Any, *,
                   config: Optional[TraversalConfig] = None) -> int:
    """Return the number of levels in the tree (1 for a single node)."""
    height = 0

    def on_wrap(nodes, level):
        nonlocal height
        height = level

    level_traversal(root, get_children, on_wrap=on_wrap, config=config)
    return height


def compute_degree(root: Any, get_children: Any, *,
                   config: Optional[TraversalConfig] = None) -> int:
    """Return the largest number of children any node has (0 for a single node).

    None entries in a children list are holes and are not counted.
    """
    degree = 0
    for _, _, children in PreOrderTraverser(get_children, config).walk(root):
        degree = max(degree, len(children))
    return degree


def get_descendant_nodes(root: Any, get_children: Any, *,
                         config: Optional[TraversalConfig] = None) -> List[Any]:
    """Get every node of the tree, root included, in pre-order."""
    descendants: List[Any] = []
    preorder_traversal(root, get_children, descendants.append, config=config)
    return descendants


def get_node_path(root: Any, target: Any, get_children: Any, *,
                  config: Optional[TraversalConfig] = None) -> List[Any]:
    """Find the path from root to target.

    Nodes are matched by identity: exploration stops at the first node that
    ``is`` the target. If no node is identical, the path to the first node
    that compares equal is returned instead, so value nodes such as strings
    or ints still resolve.

    Args:
        root: Starting node
        target: Node to look for
        get_children: Children accessor
        config: Optional traversal configuration

    Returns:
        List of nodes ``[root, ..., target]``, or an empty list if target
        is not in the tree

    Example:
        >>> get_node_path(a, d, 'children')
        [a, b, d]
    """
    found: List[Any] = []
    equal: List[Any] = []

    def on_progress(path):
        if path[-1] is target:
            found.extend(path)
            return STOP
        if not equal and path[-1] == target:
            equal.extend(path)

    explore_path(root, get_children, on_progress, config=config)
    return found or equal


def traverse_tree(
    root: Any,
    get_children: Any,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    *,
    config: Optional[TraversalConfig] = None
) -> Iterator[Any]:
    """Simple iterator interface for tree traversal.

    Args:
        root: Starting node
        get_children: Children accessor
        strategy: preorder/dfs, level/bfs, or path (yields paths instead of nodes)
        config: Optional traversal configuration

    Yields:
        Nodes in the chosen order, or root-to-node paths for the path strategy

    Example:
        >>> for node in traverse_tree(tree, 'children', strategy='bfs'):
        ...     print(node)
    """
    traverser = create_traverser(strategy, get_children, config)

    if isinstance(traverser, PathExplorer):
        yield from traverser.traverse(root)
        return

    for node, _ in traverser.traverse(root):
        yield node


def find_node(
    root: Any,
    get_children: Any,
    predicate: Callable[[Any], bool],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    *,
    config: Optional[TraversalConfig] = None
) -> Optional[Any]:
    """Return the first node satisfying ``predicate``, or None.

    The traversal stops as soon as a match is found. With the path
    strategy the predicate still receives nodes (the last element of each
    path) and the matching node is returned.
    """
    traverser = create_traverser(strategy, get_children, config)

    if isinstance(traverser, PathExplorer):
        nodes = (path[-1] for path in traverser.traverse(root))
    else:
        nodes = (node for node, _ in traverser.traverse(root))

    for node in nodes:
        if predicate(node):
            return node
    return None


def count_nodes(root: Any, get_children: Any, *,
                config: Optional[TraversalConfig] = None) -> int:
    """Count the nodes in a tree."""
    count = 0
    for _ in PreOrderTraverser(get_children, config).walk(root):
        count += 1
    return count


def get_tree_stats(root: Any, get_children: Any, *,
                   config: Optional[TraversalConfig] = None) -> Dict[str, Any]:
    """Get statistics about a tree in a single pre-order pass.

    Args:
        root: Starting node
        get_children: Children accessor
        config: Optional traversal configuration

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        degree and nodes_per_level (level -> count, levels start at 1)

    Example:
        >>> stats = get_tree_stats(tree, 'children')
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'degree': 0,
        'nodes_per_level': {},
    }

    for _, level, children in PreOrderTraverser(get_children, config).walk(root):
        stats['total_nodes'] += 1

        if not children:
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], level)
        stats['degree'] = max(stats['degree'], len(children))

        per_level = stats['nodes_per_level']
        per_level[level] = per_level.get(level, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats
