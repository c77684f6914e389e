"""Utility functions for word lists and tree inspection.

This module provides support for:
- Reading word lists and simulating random ones.
- Ordering words before bulk insertion.
- Collecting size and shape statistics of a tree.
"""

from .utils import (
    TreeStats,
    build_tree,
    generate_simulated_words,
    load_word_list,
    order_for_insertion,
    tree_stats,
)

__all__ = [
    "TreeStats",
    "build_tree",
    "generate_simulated_words",
    "load_word_list",
    "order_for_insertion",
    "tree_stats",
]
