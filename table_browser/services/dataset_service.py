from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping

from table_browser.config.dataset_loader import load_dataset
from table_browser.config.model import DatasetConfig
from table_browser.core.dataset import Dataset
from table_browser.core.exceptions import DatasetLoadError, DatasetSchemaError

logger = logging.getLogger(__name__)


class DatasetManager(Mapping[str, Dataset]):
    """
    Central service for managing datasets.
    Implements the Mapping interface (dict-like) so the UI layer can look
    datasets up by name while files are only read on first access.
    """

    def __init__(self, cfg_by_name: Dict[str, DatasetConfig]):
        self._cfg_by_name = cfg_by_name
        self._loaded: Dict[str, Dataset] = {}

    def __getitem__(self, name: str) -> Dataset:
        # 1. Fast path: already materialised
        if name in self._loaded:
            return self._loaded[name]

        # 2. Check config existence
        cfg = self._cfg_by_name.get(name)
        if cfg is None:
            raise KeyError(f"Unknown dataset '{name}'")

        # 3. Lazy load
        try:
            logger.info("Lazy-loading dataset", extra={"dataset": cfg.name, "path": str(cfg.path)})
            ds = load_dataset(cfg)
        except (DatasetLoadError, DatasetSchemaError) as e:
            logger.error(
                "Dataset could not be loaded",
                extra={"dataset": cfg.name, "error": str(e)},
            )
            raise

        self._loaded[name] = ds
        return ds

    def __iter__(self) -> Iterator[str]:
        return iter(self._cfg_by_name)

    def __len__(self) -> int:
        return len(self._cfg_by_name)

    def get(self, name: str, default=None) -> Dataset | None:
        try:
            return self[name]
        except KeyError:
            return default

    def config(self, name: str) -> DatasetConfig | None:
        return self._cfg_by_name.get(name)

    def is_loaded(self, name: str) -> bool:
        return name in self._loaded

    def refresh_config(self, new_cfg_by_name: Dict[str, DatasetConfig]) -> None:
        """
        Update the configuration map (e.g. after files changed on disk).
        Clears the loaded cache so every dataset is re-read on next access.
        """
        self._cfg_by_name = new_cfg_by_name
        self._loaded.clear()
