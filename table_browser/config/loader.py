from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from table_browser.config.model import DatasetConfig, GlobalConfig
from table_browser.core.exceptions import ConfigError
from table_browser.core.table_state import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS

logger = logging.getLogger(__name__)


def _resolve_data_root(root: Path, raw_value: Optional[str]) -> Optional[Path]:
    if not raw_value:
        return None
    data_root = Path(raw_value)
    if not data_root.is_absolute():
        data_root = (root / data_root).resolve()
    return data_root


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout:

        root/
          global.json
          datasets/*.json
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        # Fallback to defaults if global.json is missing
        raw_global = {}
    else:
        try:
            with global_path.open() as f:
                raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    page_size = raw_global.get("default_page_size", DEFAULT_PAGE_SIZE)
    if page_size not in PAGE_SIZE_OPTIONS:
        raise ConfigError(
            f"default_page_size must be one of {PAGE_SIZE_OPTIONS}, got {page_size!r}"
        )

    data_root = _resolve_data_root(root, raw_global.get("data_root"))

    datasets_dir = root / "datasets"
    datasets: List[DatasetConfig] = []

    if datasets_dir.is_dir():
        logger.info(f"Scanning for dataset configurations in: {datasets_dir}")
        # Sort files for deterministic loading
        files = sorted(datasets_dir.glob("*.json"))
        if not files:
            logger.warning(f"No .json files found in {datasets_dir}")

        for idx, config_file in enumerate(files):
            # Ignore macOS 'Apple Double' files (._*)
            if config_file.name.startswith("._"):
                continue

            logger.info(f"Loading dataset config: {config_file.name}")
            try:
                with config_file.open() as f:
                    raw = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"Failed to load {config_file.name}: {e}")
                continue

            if not isinstance(raw, dict) or "file" not in raw:
                logger.error(f"Skipping {config_file.name}: missing required key 'file'")
                continue

            datasets.append(
                DatasetConfig.from_raw(raw, source_path=config_file, index=idx, data_root=data_root)
            )
    else:
        logger.warning(f"Datasets directory not found at: {datasets_dir}")

    sort_column = raw_global.get("default_sort_column")

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Table Browser"),
        default_dataset=raw_global.get("default_dataset"),
        data_root=data_root,
        default_page_size=page_size,
        reset_page_on_search=bool(raw_global.get("reset_page_on_search", True)),
        default_sort_column=int(sort_column) if sort_column is not None else None,
        datasets=datasets,
    )


def load_dataset_registry(path: Path) -> Tuple[GlobalConfig, Dict[str, DatasetConfig]]:
    """
    Load global config + dataset config objects only (no table data is read).
    Returns mapping of dataset name -> DatasetConfig.
    """
    global_config = load_global_config(path)

    cfg_by_name: Dict[str, DatasetConfig] = {}
    duplicates: List[str] = []

    for ds_cfg in global_config.datasets:
        if ds_cfg.name in cfg_by_name:
            duplicates.append(ds_cfg.name)
            continue
        cfg_by_name[ds_cfg.name] = ds_cfg

    if duplicates:
        raise ConfigError(f"Duplicate dataset names in config: {sorted(set(duplicates))}")

    if not cfg_by_name:
        logger.warning(f"No datasets configured under: {path}")

    logger.info(
        "Dataset registry loaded (lazy mode; datasets not materialised)",
        extra={
            "config_root": str(path),
            "n_dataset_configs": len(cfg_by_name),
            "dataset_names": sorted(cfg_by_name.keys()),
        },
    )

    return global_config, cfg_by_name
