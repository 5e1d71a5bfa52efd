"""Tree traversal strategies for treewalk.

Traversers implement the algorithms for walking through trees. They work
with any TreeAdapter and never recurse: pre-order keeps an explicit stack,
level-order an explicit queue, so arbitrarily deep trees are safe and a
callback can end the walk at any node.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterator, List, NamedTuple, Optional, Tuple, Union

from .adapter import TreeAdapter, as_adapter
from .signal import should_stop
from ..config import TraversalConfig, TraversalStrategy
from ..errors import ConfigurationError, MissingChildError, TraversalLimitError


class LevelWrap(NamedTuple):
    """Emitted once per level, before the level's first node is visited."""
    nodes: List[Any]
    level: int


class NodeVisit(NamedTuple):
    """Emitted for every node visited in level order."""
    node: Any
    index: int
    level: int


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Holds the adapter and config shared by every strategy and normalizes
    what the adapter returns into a plain list of children.
    """

    def __init__(self, adapter: Any, config: Optional[TraversalConfig] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter, or anything as_adapter() accepts
            config: Traversal configuration (defaults to TraversalConfig())

        Raises:
            ConfigurationError: If the config fails validation
        """
        self.adapter: TreeAdapter = as_adapter(adapter)
        self.config = config if config is not None else TraversalConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

    @abstractmethod
    def traverse(self, root: Any) -> Iterator[Any]:
        """Traverse the tree starting from root, yielding as the strategy dictates."""
        pass

    def children_of(self, node: Any) -> List[Any]:
        """Return a fresh list of the node's children.

        None results become an empty list, None entries are dropped (or
        rejected when skip_none_children is off) and accessor errors go
        through the configured error policy.
        """
        try:
            children = self.adapter.get_children(node)
            children = list(children) if children is not None else []
        except Exception as e:
            children = self.config.error_policy.handle(e, 'get_children', node)
            children = list(children) if children is not None else []

        result = []
        for position, child in enumerate(children):
            if child is None:
                if not self.config.skip_none_children:
                    raise MissingChildError(node, position)
                continue
            result.append(child)
        return result

    def _check_root(self, root: Any) -> None:
        if root is None:
            raise ValueError("root node must not be None")

    def _check_limit(self, visited: int) -> None:
        max_nodes = self.config.max_nodes
        if max_nodes is not None and visited > max_nodes:
            raise TraversalLimitError(max_nodes)


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before any of its descendants and siblings left to right.
    Children are pushed onto the stack in reverse so that popping restores
    their original order.
    """

    def walk(self, root: Any) -> Iterator[Tuple[Any, int, List[Any]]]:
        """Walk the tree, yielding ``(node, level, children)``.

        ``level`` is 1-based and ``children`` is the normalized child list
        the walk will descend into. The accessor is called once per node,
        just before that node is yielded. Stop iterating to end the walk.
        """
        self._check_root(root)

        stack: List[Tuple[Any, int]] = [(root, 1)]
        visited = 0

        while stack:
            node, level = stack.pop()

            visited += 1
            self._check_limit(visited)

            children = self.children_of(node)
            yield node, level, children

            for child in reversed(children):
                stack.append((child, level + 1))

    def traverse(self, root: Any) -> Iterator[Tuple[Any, int]]:
        """Yield ``(node, level)`` in pre-order."""
        for node, level, _ in self.walk(root):
            yield node, level

    def run(self, root: Any, on_traverse: Optional[Callable[[Any], Any]] = None) -> None:
        """Visit every node in pre-order until ``on_traverse`` returns STOP."""
        for node, _, _ in self.walk(root):
            if on_traverse is not None and should_stop(on_traverse(node)):
                return


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits every node at level N before any node at level N+1. Level
    boundaries are found without tagging nodes: the queue length is compared
    against a running count of children queued for the next level. Since the
    queue always holds the rest of the current level plus that count, the
    two are equal exactly when the current level is drained.
    """

    def walk(self, root: Any) -> Iterator[Union[LevelWrap, NodeVisit]]:
        """Walk the tree, yielding LevelWrap and NodeVisit events.

        A LevelWrap carrying a snapshot of the whole level precedes the
        first NodeVisit of that level. Levels are 1-based; the visit index
        counts nodes across the entire traversal.
        """
        self._check_root(root)

        queue: Deque[Any] = deque([root])
        index = 0
        level = 0
        next_level_count = len(queue)

        while queue:
            if next_level_count == len(queue):
                level += 1
                next_level_count = 0
                yield LevelWrap(list(queue), level)

            node = queue.popleft()

            self._check_limit(index + 1)
            yield NodeVisit(node, index, level)
            index += 1

            children = self.children_of(node)
            queue.extend(children)
            next_level_count += len(children)

    def traverse(self, root: Any) -> Iterator[Tuple[Any, int]]:
        """Yield ``(node, level)`` in breadth-first order."""
        for event in self.walk(root):
            if isinstance(event, NodeVisit):
                yield event.node, event.level

    def run(self,
            root: Any,
            on_traverse: Optional[Callable[[Any, int, int], Any]] = None,
            on_wrap: Optional[Callable[[List[Any], int], Any]] = None) -> None:
        """Visit every node breadth-first until either callback returns STOP.

        Args:
            root: Starting node
            on_traverse: Called as ``on_traverse(node, index, level)``
            on_wrap: Called as ``on_wrap(nodes, level)`` at each new level
        """
        for event in self.walk(root):
            if isinstance(event, LevelWrap):
                if on_wrap is not None and should_stop(on_wrap(event.nodes, event.level)):
                    return
            elif on_traverse is not None and should_stop(on_traverse(*event)):
                return


class PathExplorer(TreeTraverser):
    """Pre-order traversal that reports the root-to-node path of every node.

    Keeps a stack of paths in lock-step with the pre-order node stack: the
    path for each pending node is materialized when its parent is visited
    and popped when the node itself is reached.
    """

    def __init__(self, adapter: Any, config: Optional[TraversalConfig] = None):
        super().__init__(adapter, config)
        self.preorder = PreOrderTraverser(self.adapter, self.config)

    def traverse(self, root: Any) -> Iterator[List[Any]]:
        """Yield the path ``[root, ..., node]`` for every node in pre-order.

        Each yielded list is independent; mutating it does not affect
        later paths.
        """
        path_stack: List[List[Any]] = [[root]]

        for _, _, children in self.preorder.walk(root):
            if not path_stack:
                continue
            path = path_stack.pop()

            child_paths = [path + [child] for child in reversed(children)]
            yield path
            path_stack.extend(child_paths)

    def run(self, root: Any, on_progress: Callable[[List[Any]], Any]) -> None:
        """Report each path to ``on_progress`` until it returns STOP."""
        for path in self.traverse(root):
            if should_stop(on_progress(path)):
                return


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: Any,
                     config: Optional[TraversalConfig] = None) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or name (preorder, dfs, level, bfs, path, ...)
        adapter: Children accessor for the tree structure
        config: Optional traversal configuration

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        TraversalStrategy.PRE_ORDER: PreOrderTraverser,
        TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
        TraversalStrategy.PATH: PathExplorer,
    }
    aliases = {
        'preorder': TraversalStrategy.PRE_ORDER,
        'pre_order': TraversalStrategy.PRE_ORDER,
        'dfs': TraversalStrategy.PRE_ORDER,
        'dfs_pre': TraversalStrategy.PRE_ORDER,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
        'bfs': TraversalStrategy.LEVEL_ORDER,
        'breadth_first': TraversalStrategy.LEVEL_ORDER,
        'path': TraversalStrategy.PATH,
        'explore': TraversalStrategy.PATH,
    }

    if not isinstance(strategy, TraversalStrategy):
        strategy_lower = str(strategy).lower()
        if strategy_lower not in aliases:
            raise ValueError(
                f"Unknown traversal strategy: {strategy}. "
                f"Choose from: {', '.join(aliases.keys())}"
            )
        strategy = aliases[strategy_lower]

    return strategies[strategy](adapter, config)
