"""Configuration module for building and exporting ternary search trees."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Optional

import yaml

INSERTION_ORDERS = ("given", "sorted", "shuffled", "balanced")
EXPORT_SUFFIXES = (".yaml", ".yml", ".json", ".npy")


@dataclass(frozen=True)
class TreeConfig:
    """How words are fed to the tree.

    Attributes
    ----------
        insertion_order: str
            One of ``INSERTION_ORDERS``. The tree never rebalances, so this
            decides its shape.
        seed: int | None
            Seed for the ``"shuffled"`` order.

    Raises
    ------
        ValueError: If insertion_order is unknown.
    """

    insertion_order: str = "given"
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if self.insertion_order not in INSERTION_ORDERS:
            msg = f"insertion_order must be one of {INSERTION_ORDERS}, got {self.insertion_order!r}"
            raise ValueError(msg)


@dataclass(frozen=True)
class SimulationConfig:
    """Random word lists used when no word file is given.

    Attributes
    ----------
        num_words: int
            Number of words to draw.
        alphabet: str
            Characters words are drawn from.
        min_length: int
            Shortest word length.
        max_length: int
            Longest word length.
        seed: int | None
            Seed for the random generator.

    Raises
    ------
        ValueError: If num_words is negative, the alphabet is empty or
            contains NUL, or the length bounds are not 1 <= min <= max.
    """

    num_words: int = 1000
    alphabet: str = "abcdefghijklmnopqrstuvwxyz"
    min_length: int = 1
    max_length: int = 12
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if self.num_words < 0:
            msg = f"num_words must be >= 0, got {self.num_words}"
            raise ValueError(msg)
        if not self.alphabet or "\0" in self.alphabet:
            msg = "alphabet must be non-empty and must not contain NUL"
            raise ValueError(msg)
        if not (1 <= self.min_length <= self.max_length):
            msg = f"need 1 <= min_length <= max_length, got ({self.min_length}, {self.max_length})"
            raise ValueError(msg)


@dataclass(frozen=True)
class ExportConfig:
    """Where the built tree is written.

    Attributes
    ----------
        path: str | None
            Output file; the suffix picks the format. None skips export.

    Raises
    ------
        ValueError: If the suffix is not one of ``EXPORT_SUFFIXES``.
    """

    path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if self.path is not None and Path(self.path).suffix.lower() not in EXPORT_SUFFIXES:
            msg = f"export path must end in one of {EXPORT_SUFFIXES}, got {self.path!r}"
            raise ValueError(msg)


@dataclass(frozen=True)
class Config:
    """
    Top-level configuration for the ternary search command line.

    Groups
    ----------
        tree: TreeConfig
            Insertion order of the words.
        simulation: SimulationConfig
            Random word generation parameters.
        export: ExportConfig
            Output file for the built tree.
        verbose: bool
            Flag to enable debug logging.

    Raises
    ------
        ValueError: If any of the sub-configs contain invalid values.
    """

    tree: TreeConfig = field(default_factory=TreeConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    verbose: bool = False

    INSERTION_ORDERS: ClassVar[tuple[str, ...]] = INSERTION_ORDERS

    def to_dict(self) -> dict[str, Any]:
        """Recursively convert to plain dict (for logging, serialization)."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Dump entire config as a YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Config:
        """Build Config by unpacking each sub-dict into its sub-config."""
        data = data or {}
        return cls(
            tree=TreeConfig(**(data.get("tree") or {})),
            simulation=SimulationConfig(**(data.get("simulation") or {})),
            export=ExportConfig(**(data.get("export") or {})),
            verbose=data.get("verbose", False),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load a YAML file and return a Config."""
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)
