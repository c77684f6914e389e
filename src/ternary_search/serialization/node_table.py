"""Flat numpy form of a tree.

Every node becomes one row of a structured array::

    code   uint32  packed field (end flag in bit 31, code point below)
    left   int32   row of the left child, -1 if absent
    equal  int32   row of the equal child, -1 if absent
    right  int32   row of the right child, -1 if absent

Rows are in pre-order (node, left subtree, equal subtree, right subtree), so
row 0 is always the root. An empty tree is a table with no rows.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from ternary_search.exceptions import InvalidSymbolError, SerializationError
from ternary_search.ternary_tree import Tree
from ternary_search.ternary_tree.encoding import decode_symbol, is_end

if TYPE_CHECKING:
    from numpy.typing import NDArray

log = logging.getLogger(__name__)

NODE_DTYPE = np.dtype([
    ("code", np.uint32),
    ("left", np.int32),
    ("equal", np.int32),
    ("right", np.int32),
])
NO_CHILD = -1
CHILD_LINKS = ("left", "equal", "right")


def _present(child: Tree | None) -> bool:
    return child is not None and not child.is_empty()


def to_node_table(tree: Tree) -> NDArray[np.void]:
    """Flatten ``tree`` into a structured array of dtype :data:`NODE_DTYPE`."""
    if tree.is_empty():
        return np.zeros(0, dtype=NODE_DTYPE)

    order: list[Tree] = []
    row_of: dict[int, int] = {}
    stack = [tree]
    while stack:
        node = stack.pop()
        row_of[id(node)] = len(order)
        order.append(node)
        # Pushed in reverse so the left subtree is emitted first
        for child in (node.right, node.equal, node.left):
            if _present(child):
                stack.append(child)

    table = np.empty(len(order), dtype=NODE_DTYPE)
    table["code"] = [node.packed for node in order]
    for name in CHILD_LINKS:
        table[name] = [
            row_of[id(getattr(node, name))] if _present(getattr(node, name)) else NO_CHILD
            for node in order
        ]

    log.debug("Flattened %d nodes into a node table", len(order))
    return table


def from_node_table(table: NDArray[np.void]) -> Tree:
    """Rebuild a tree from a node table.

    The table must describe a strict tree: every row other than row 0 is
    referenced by exactly one parent and is reachable from row 0.

    Args
    -----
        table (NDArray): One-dimensional array of dtype :data:`NODE_DTYPE`.

    Returns
    -------
        Tree: The rebuilt tree.

    Raises
    ------
        SerializationError: On a wrong dtype or shape, out-of-range or shared
            child rows, unreachable rows or rows without a valid symbol.
    """
    table = np.asarray(table)
    if table.dtype != NODE_DTYPE:
        msg = f"node table must have dtype {NODE_DTYPE}, got {table.dtype}"
        raise SerializationError(msg)
    if table.ndim != 1:
        msg = f"node table must be one-dimensional, got shape {table.shape}"
        raise SerializationError(msg)

    size = len(table)
    tree = Tree()
    if size == 0:
        return tree

    nodes: list[Tree | None] = [None] * size
    nodes[0] = tree
    visited = 0
    pending = [0]
    while pending:
        row = pending.pop()
        node = nodes[row]
        visited += 1

        code = int(table["code"][row])
        try:
            node.set_symbol(decode_symbol(code))
        except InvalidSymbolError as exc:
            msg = f"row {row} has an invalid symbol code {code:#x}"
            raise SerializationError(msg) from exc
        node.set_end_of_word(is_end(code))

        for name in CHILD_LINKS:
            child_row = int(table[name][row])
            if child_row == NO_CHILD:
                continue
            if not (0 < child_row < size):
                msg = f"row {row} links {name} to out-of-range row {child_row}"
                raise SerializationError(msg)
            if nodes[child_row] is not None:
                msg = f"row {child_row} is linked more than once"
                raise SerializationError(msg)
            child = Tree()
            nodes[child_row] = child
            setattr(node, name, child)
            pending.append(child_row)

    if visited != size:
        msg = f"{size - visited} rows are not reachable from the root"
        raise SerializationError(msg)

    log.debug("Rebuilt %d nodes from a node table", size)
    return tree


def save_node_table(tree: Tree, path: str | Path) -> Path:
    """Write ``tree`` as a ``.npy`` node table and return the written path."""
    path = Path(path)
    if path.suffix.lower() != ".npy":
        path = path.with_name(path.name + ".npy")
    # Written through a file object so numpy keeps the name as given
    with path.open("wb") as f:
        np.save(f, to_node_table(tree), allow_pickle=False)
    return path


def load_node_table(path: str | Path) -> Tree:
    """Read a ``.npy`` node table written by :func:`save_node_table`."""
    table = np.load(Path(path), allow_pickle=False)
    return from_node_table(table)
