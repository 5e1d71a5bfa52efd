"""treewalk - Generic iterative tree traversal.

treewalk walks any tree you can describe with a children accessor:
pre-order, level-order and root-to-node path exploration, plus a handful
of queries built on them (leaves, height, degree, descendants, node path).

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from treewalk import preorder_traversal, get_node_path, STOP

    preorder_traversal(root, lambda n: n.children, print)
    path = get_node_path(root, target, 'children')
━━━━━━━━━━━━━━━━━━━━━━━━━━

Callbacks return STOP to end a traversal early; any other return value
lets it continue.
"""

__version__ = "0.1.0"

from .core import (
    Signal,
    CONTINUE,
    STOP,
    should_stop,
    TreeAdapter,
    CallableAdapter,
    AttributeAdapter,
    MappingAdapter,
    as_adapter,
    TreeTraverser,
    PreOrderTraverser,
    LevelOrderTraverser,
    PathExplorer,
    LevelWrap,
    NodeVisit,
    create_traverser,
)
from .config import TraversalConfig, TraversalStrategy
from .errors import (
    TraversalError,
    ConfigurationError,
    MissingChildError,
    TraversalLimitError,
)
from .error_policies import ErrorPolicy, FailFastPolicy, ContinueOnErrorsPolicy
from .api import (
    preorder_traversal,
    level_traversal,
    explore_path,
    get_leaf_nodes,
    compute_height,
    compute_degree,
    get_descendant_nodes,
    get_node_path,
    traverse_tree,
    find_node,
    count_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Signals
    'Signal',
    'CONTINUE',
    'STOP',
    'should_stop',
    # Adapters
    'TreeAdapter',
    'CallableAdapter',
    'AttributeAdapter',
    'MappingAdapter',
    'as_adapter',
    # Traversers
    'TreeTraverser',
    'PreOrderTraverser',
    'LevelOrderTraverser',
    'PathExplorer',
    'LevelWrap',
    'NodeVisit',
    'create_traverser',
    # Config and errors
    'TraversalConfig',
    'TraversalStrategy',
    'TraversalError',
    'ConfigurationError',
    'MissingChildError',
    'TraversalLimitError',
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    # API
    'preorder_traversal',
    'level_traversal',
    'explore_path',
    'get_leaf_nodes',
    'compute_height',
    'compute_degree',
    'get_descendant_nodes',
    'get_node_path',
    'traverse_tree',
    'find_node',
    'count_nodes',
    'get_tree_stats',
]
