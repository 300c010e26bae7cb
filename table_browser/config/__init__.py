"""
Config package for table_browser.

Responsible for:
- config models (GlobalConfig, DatasetConfig)
- config I/O helpers (load_global_config / load_dataset_registry / load_dataset)
"""

from .model import GlobalConfig, DatasetConfig
from .loader import load_global_config, load_dataset_registry
from .dataset_loader import load_dataset

__all__ = [
    "DatasetConfig",
    "GlobalConfig",
    "load_dataset",
    "load_dataset_registry",
    "load_global_config",
]
