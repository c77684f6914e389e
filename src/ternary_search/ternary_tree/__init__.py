"""Ternary search tree module: node type, packed symbol field and symbol cursor."""

from .encoding import END_FLAG, MAX_CODE_POINT, SYMBOL_MASK
from .sequence import SymbolCursor, head, tail
from .tree import Tree

__all__ = [
    "END_FLAG",
    "MAX_CODE_POINT",
    "SYMBOL_MASK",
    "SymbolCursor",
    "Tree",
    "head",
    "tail",
]
