"""Utility functions for word lists, bulk loading and tree statistics."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import numpy as np
from numpy.random import default_rng

from ternary_search.config import INSERTION_ORDERS
from ternary_search.ternary_tree import Tree

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = logging.getLogger(__name__)


def load_word_list(path: str | Path, *, strip: bool = True, skip_blank: bool = True) -> list[str]:
    """
    Read one word per line from a UTF-8 text file.

    Args
    -----
        path (str | Path): File to read.
        strip (bool): Remove surrounding whitespace from each line.
        skip_blank (bool): Drop lines that are empty after stripping.

    Returns
    -------
        List of words in file order.
    """
    path = Path(path)
    words: list[str] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip() if strip else line.rstrip("\n")
            if skip_blank and not word:
                continue
            words.append(word)
    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    return words


def generate_simulated_words(
    num_words: int,
    alphabet: str = "abcdefghijklmnopqrstuvwxyz",
    min_length: int = 1,
    max_length: int = 12,
    seed: Optional[int] = None,
) -> list[str]:
    """
    Draw random words with uniformly distributed lengths and characters.

    Args
    -----
        num_words (int): Number of words to draw.
        alphabet (str): Characters to draw from.
        min_length, max_length (int, int): Inclusive word length bounds.
        seed (int | None): Seed for reproducible draws.

    Returns
    -------
        List of words; duplicates are possible.

    Raises
    ------
        ValueError: On a negative count, an empty alphabet or bad bounds.
    """
    if num_words < 0:
        msg = f"num_words must be >= 0, got {num_words}"
        raise ValueError(msg)
    if not alphabet:
        msg = "alphabet must not be empty"
        raise ValueError(msg)
    if not (1 <= min_length <= max_length):
        msg = f"need 1 <= min_length <= max_length, got ({min_length}, {max_length})"
        raise ValueError(msg)
    if num_words == 0:
        return []

    rng = default_rng(seed)
    lengths = rng.integers(min_length, max_length + 1, size=num_words)
    letters = np.array(list(alphabet))
    # One draw for every character of every word, then cut into words
    chars = letters[rng.integers(len(letters), size=int(lengths.sum()))]
    chunks = np.split(chars, np.cumsum(lengths)[:-1])
    return ["".join(chunk.tolist()) for chunk in chunks]


def _balanced_order(words: Iterable[str]) -> list[str]:
    """Median-first breadth order of the sorted, deduplicated words."""
    ordered = sorted(set(words))
    out: list[str] = []
    ranges = deque([(0, len(ordered))])
    while ranges:
        lo, hi = ranges.popleft()
        if lo >= hi:
            continue
        mid = (lo + hi) // 2
        out.append(ordered[mid])
        ranges.append((lo, mid))
        ranges.append((mid + 1, hi))
    return out


def order_for_insertion(
    words: Sequence[str],
    order: str = "given",
    seed: Optional[int] = None,
) -> list[str]:
    """
    Reorder words before inserting them.

    The tree keeps whatever shape its insertion order gives it. Inserting a
    sorted list makes long sibling chains; ``"balanced"`` inserts the median
    of each range first, which keeps those chains short.

    Args
    -----
        words (Sequence[str]): Words to reorder.
        order (str): One of 'given', 'sorted', 'shuffled', 'balanced'.
        seed (int | None): Seed used by 'shuffled'.

    Returns
    -------
        The reordered words. Only 'balanced' drops duplicates.
    """
    if order not in INSERTION_ORDERS:
        msg = f"Unknown insertion order: {order!r}"
        raise ValueError(msg)

    if order == "given":
        return list(words)
    if order == "sorted":
        return sorted(words)
    if order == "shuffled":
        perm = default_rng(seed).permutation(len(words))
        return [words[i] for i in perm]
    return _balanced_order(words)


def build_tree(words: Sequence[str], order: str = "given", seed: Optional[int] = None) -> Tree:
    """Insert ``words`` into a new tree in the requested order."""
    tree = Tree()
    for word in order_for_insertion(words, order, seed):
        tree.insert(word)
    log.info("Built tree from %s words (%s order)", f"{len(words):,}", order)
    return tree


@dataclass(frozen=True)
class TreeStats:
    """Size and shape figures of a tree.

    Attributes
    ----------
        node_count: int
            Nodes holding a symbol.
        word_count: int
            Nodes marking the end of a stored word.
        max_word_length: int
            Length of the longest stored word.
        height: int
            Nodes on the longest path from the root, following any link.
    """

    node_count: int
    word_count: int
    max_word_length: int
    height: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def tree_stats(tree: Tree) -> TreeStats:
    """Walk ``tree`` once and collect its :class:`TreeStats`."""
    node_count = word_count = height = 0
    stack = [] if tree.is_empty() else [(tree, 1)]
    while stack:
        node, depth = stack.pop()
        node_count += 1
        if node.ending:
            word_count += 1
        height = max(height, depth)
        for child in (node.left, node.equal, node.right):
            if child is not None and not child.is_empty():
                stack.append((child, depth + 1))

    return TreeStats(
        node_count=node_count,
        word_count=word_count,
        max_word_length=tree.max_word_length(),
        height=height,
    )
