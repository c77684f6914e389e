"""Serializers that rebuild trees from their field-level contents.

The tree itself defines no storage format. These helpers read each node's
symbol, end-of-word flag and child links and write them as:

- nested mappings, dumped as YAML or JSON,
- a flat numpy node table, stored as ``.npy``.
"""

from .files import SUPPORTED_SUFFIXES, load, save
from .nested import (
    dump_json,
    dump_yaml,
    load_json,
    load_yaml,
    tree_from_dict,
    tree_to_dict,
)
from .node_table import (
    NODE_DTYPE,
    NO_CHILD,
    from_node_table,
    load_node_table,
    save_node_table,
    to_node_table,
)

__all__ = [
    # Nested mappings
    "tree_to_dict",
    "tree_from_dict",
    "dump_yaml",
    "load_yaml",
    "dump_json",
    "load_json",

    # Node tables
    "NODE_DTYPE",
    "NO_CHILD",
    "to_node_table",
    "from_node_table",
    "save_node_table",
    "load_node_table",

    # Files
    "SUPPORTED_SUFFIXES",
    "save",
    "load",
]
