"""Nested-mapping form of a tree, with YAML and JSON text encodings.

A node becomes ``{"symbol": "p", "ending": True, "left": {...}, ...}`` with
absent children left out. The mapping is built and consumed with explicit
stacks, but the YAML and JSON libraries nest one level per node, so very
deep trees are better stored as a node table.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import yaml

from ternary_search.exceptions import InvalidSymbolError, SerializationError
from ternary_search.ternary_tree import Tree

log = logging.getLogger(__name__)

CHILD_LINKS = ("left", "equal", "right")


def tree_to_dict(tree: Tree) -> dict[str, Any] | None:
    """Convert ``tree`` to nested dicts, None for an empty tree."""
    if tree.is_empty():
        return None

    root: dict[str, Any] = {}
    stack = [(tree, root)]
    count = 0
    while stack:
        node, out = stack.pop()
        count += 1
        out["symbol"] = node.symbol
        out["ending"] = node.ending
        for name in CHILD_LINKS:
            child = getattr(node, name)
            if child is not None and not child.is_empty():
                out[name] = {}
                stack.append((child, out[name]))

    log.debug("Converted %d nodes to nested mappings", count)
    return root


def tree_from_dict(data: Mapping[str, Any] | None) -> Tree:
    """Rebuild a tree from the output of :func:`tree_to_dict`.

    Args
    -----
        data (Mapping | None): Nested node mappings. None or an empty mapping
            gives an empty tree.

    Returns
    -------
        Tree: The rebuilt tree.

    Raises
    ------
        SerializationError: If an entry is not a mapping, has a missing or
            invalid symbol, or a non-boolean ``ending``.
    """
    tree = Tree()
    if not data:
        return tree

    stack: list[tuple[Any, Tree]] = [(data, tree)]
    while stack:
        entry, node = stack.pop()
        if not isinstance(entry, Mapping):
            msg = f"node entry must be a mapping, got {type(entry).__name__}"
            raise SerializationError(msg)

        symbol = entry.get("symbol")
        if not isinstance(symbol, str):
            msg = f"node symbol must be a string, got {symbol!r}"
            raise SerializationError(msg)
        try:
            node.set_symbol(symbol)
        except InvalidSymbolError as exc:
            msg = f"invalid node symbol {symbol!r}"
            raise SerializationError(msg) from exc

        ending = entry.get("ending", False)
        if not isinstance(ending, bool):
            msg = f"node ending must be a boolean, got {ending!r}"
            raise SerializationError(msg)
        node.set_end_of_word(ending)

        for name in CHILD_LINKS:
            child = entry.get(name)
            if child is None:
                continue
            branch = Tree()
            setattr(node, name, branch)
            stack.append((child, branch))

    return tree


def dump_yaml(tree: Tree) -> str:
    """Dump ``tree`` as a YAML document."""
    return yaml.safe_dump(tree_to_dict(tree), sort_keys=False, allow_unicode=True)


def load_yaml(text: str) -> Tree:
    """Rebuild a tree from a YAML document written by :func:`dump_yaml`."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        msg = "could not parse YAML tree"
        raise SerializationError(msg) from exc
    return tree_from_dict(data)


def dump_json(tree: Tree, indent: int | None = None) -> str:
    """Dump ``tree`` as a JSON document."""
    return json.dumps(tree_to_dict(tree), indent=indent, ensure_ascii=False)


def load_json(text: str) -> Tree:
    """Rebuild a tree from a JSON document written by :func:`dump_json`."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"could not parse JSON tree: {exc.msg}"
        raise SerializationError(msg) from exc
    return tree_from_dict(data)
