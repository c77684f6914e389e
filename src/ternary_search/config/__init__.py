from .config import (
    EXPORT_SUFFIXES,
    INSERTION_ORDERS,
    Config,
    ExportConfig,
    SimulationConfig,
    TreeConfig,
)

__all__ = [
    "EXPORT_SUFFIXES",
    "INSERTION_ORDERS",
    "Config",
    "ExportConfig",
    "SimulationConfig",
    "TreeConfig",
]
