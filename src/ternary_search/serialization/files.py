"""Save and load trees, choosing the format from the file suffix."""

from __future__ import annotations

import logging
from pathlib import Path

from ternary_search.config import EXPORT_SUFFIXES
from ternary_search.exceptions import SerializationError
from ternary_search.ternary_tree import Tree

from .nested import dump_json, dump_yaml, load_json, load_yaml
from .node_table import load_node_table, save_node_table

log = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = EXPORT_SUFFIXES


def _suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        msg = f"unsupported tree file suffix {path.suffix!r}, expected one of {SUPPORTED_SUFFIXES}"
        raise SerializationError(msg)
    return suffix


def save(tree: Tree, path: str | Path) -> Path:
    """Write ``tree`` to ``path`` as YAML, JSON or a numpy node table."""
    path = Path(path)
    suffix = _suffix(path)
    if suffix == ".npy":
        path = save_node_table(tree, path)
    else:
        try:
            text = dump_json(tree) if suffix == ".json" else dump_yaml(tree)
        except RecursionError as exc:
            msg = f"tree is too deep to write as {suffix}; save it with a .npy suffix instead"
            raise SerializationError(msg) from exc
        path.write_text(text, encoding="utf-8")
    log.info("Saved tree to %s", path)
    return path


def load(path: str | Path) -> Tree:
    """Read a tree written by :func:`save`."""
    path = Path(path)
    suffix = _suffix(path)
    if suffix == ".npy":
        tree = load_node_table(path)
    else:
        text = path.read_text(encoding="utf-8")
        try:
            tree = load_json(text) if suffix == ".json" else load_yaml(text)
        except RecursionError as exc:
            msg = f"tree in {path} is nested too deeply to read"
            raise SerializationError(msg) from exc
    log.info("Loaded tree from %s", path)
    return tree
