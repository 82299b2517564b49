"""Testing utilities for NodeTree consumers."""

from .fixtures import (
    RecordingVisitor,
    binary_node,
    nary_node,
    build_nary,
    build_expression,
)

__all__ = [
    'RecordingVisitor',
    'binary_node',
    'nary_node',
    'build_nary',
    'build_expression',
]
