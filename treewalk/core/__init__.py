"""Core components: signals, adapters and traversers."""

from .signal import Signal, CONTINUE, STOP, should_stop
from .adapter import (
    TreeAdapter,
    CallableAdapter,
    AttributeAdapter,
    MappingAdapter,
    as_adapter,
)
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    LevelOrderTraverser,
    PathExplorer,
    LevelWrap,
    NodeVisit,
    create_traverser,
)

__all__ = [
    'Signal',
    'CONTINUE',
    'STOP',
    'should_stop',
    'TreeAdapter',
    'CallableAdapter',
    'AttributeAdapter',
    'MappingAdapter',
    'as_adapter',
    'TreeTraverser',
    'PreOrderTraverser',
    'LevelOrderTraverser',
    'PathExplorer',
    'LevelWrap',
    'NodeVisit',
    'create_traverser',
]
