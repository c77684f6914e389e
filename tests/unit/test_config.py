"""Unit tests for the configuration dataclasses."""

from dataclasses import FrozenInstanceError

import pytest

from ternary_search.config import (
    Config,
    ExportConfig,
    SimulationConfig,
    TreeConfig,
)


@pytest.fixture
def config() -> Config:
    """Provides a default Config instance for tests."""
    return Config()


def test_defaults(config: Config) -> None:
    """Defaults give a usable configuration."""
    assert config.tree.insertion_order == "given"
    assert config.simulation.num_words == 1000
    assert config.export.path is None
    assert config.verbose is False


def test_frozen(config: Config) -> None:
    """Configs cannot be modified after creation."""
    with pytest.raises(FrozenInstanceError):
        config.verbose = True


@pytest.mark.parametrize("factory", [
    lambda: TreeConfig(insertion_order="random"),
    lambda: SimulationConfig(num_words=-1),
    lambda: SimulationConfig(alphabet=""),
    lambda: SimulationConfig(alphabet="ab\0"),
    lambda: SimulationConfig(min_length=0),
    lambda: SimulationConfig(min_length=5, max_length=4),
    lambda: ExportConfig(path="tree.txt"),
])
def test_invalid_values(factory) -> None:
    """Each sub-config validates its fields."""
    with pytest.raises(ValueError):
        factory()


def test_yaml_round_trip(tmp_path) -> None:
    """A dumped config loads back equal."""
    config = Config(
        tree=TreeConfig(insertion_order="balanced", seed=3),
        simulation=SimulationConfig(num_words=10, alphabet="xyz", min_length=2, max_length=4),
        export=ExportConfig(path="out.npy"),
        verbose=True,
    )
    path = tmp_path / "config.yaml"
    path.write_text(config.to_yaml(), encoding="utf-8")
    assert Config.from_yaml(path) == config


def test_partial_dict_uses_defaults() -> None:
    """Missing sections and keys fall back to defaults."""
    config = Config.from_dict({"tree": {"insertion_order": "sorted"}})
    assert config.tree.insertion_order == "sorted"
    assert config.simulation == SimulationConfig()
    assert Config.from_dict(None) == Config()
