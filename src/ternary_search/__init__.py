"""Ternary search tree: a compact ordered trie over strings.

    >>> from ternary_search import Tree
    >>> tst = Tree()
    >>> tst.insert("cr")
    >>> tst.insert("pr")
    >>> tst.words()
    ['cr', 'pr']
"""

from .exceptions import InvalidSymbolError, SerializationError, TernarySearchError
from .ternary_tree import SymbolCursor, Tree

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "InvalidSymbolError",
    "SerializationError",
    "SymbolCursor",
    "TernarySearchError",
    "Tree",
]
