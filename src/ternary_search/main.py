"""Build a ternary search tree from a word list and report on it.

Words come from ``--words`` or, without it, from the simulation settings of
the configuration. The tree is built in the configured insertion order,
every input word is looked up again, statistics are logged and the tree is
optionally exported.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from ternary_search.config import Config, ExportConfig
from ternary_search.serialization import save
from ternary_search.utils import (
    build_tree,
    generate_simulated_words,
    load_word_list,
    tree_stats,
)

log = logging.getLogger("ternary_search")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ternary-search",
        description="Build a ternary search tree from a word list.",
    )
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--words", type=Path, help="word list, one word per line")
    parser.add_argument("--export", help="write the tree to this .yaml/.yml/.json/.npy file")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Read the configuration file, if any, and apply command-line overrides."""
    config = Config.from_yaml(args.config) if args.config else Config()
    if args.export:
        config = replace(config, export=ExportConfig(path=args.export))
    if args.verbose:
        config = replace(config, verbose=True)
    return config


def run(config: Config, words_path: Optional[Path] = None) -> int:
    """Build, verify and optionally export a tree. Returns an exit status."""
    if words_path is not None:
        words = load_word_list(words_path)
    else:
        sim = config.simulation
        words = generate_simulated_words(
            sim.num_words,
            alphabet=sim.alphabet,
            min_length=sim.min_length,
            max_length=sim.max_length,
            seed=sim.seed,
        )
        log.info("Simulated %s words", f"{len(words):,}")

    tree = build_tree(words, order=config.tree.insertion_order, seed=config.tree.seed)

    missing = [word for word in words if word and word not in tree]
    if missing:
        log.error("%d words were not found after insertion, first: %r", len(missing), missing[0])
        return 1

    stats = tree_stats(tree)
    for name, value in stats.to_dict().items():
        log.info("%s: %s", name, f"{value:,}")

    if config.export.path is not None:
        save(tree, config.export.path)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    config = load_config(args)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.debug("Configuration:\n%s", config.to_yaml())
    return run(config, args.words)


if __name__ == "__main__":
    sys.exit(main())
