from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from table_browser.config.model import DatasetConfig
from table_browser.core.dataset import Dataset
from table_browser.core.exceptions import DatasetLoadError

logger = logging.getLogger(__name__)


def read_table(path: Path) -> pd.DataFrame:
    """
    Read a CSV file with every column kept as text. Empty fields stay empty
    strings instead of becoming NaN.
    """
    try:
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError(f"Table file {path} is empty (no header row)") from e
    except (OSError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DatasetLoadError(f"Could not read table file {path}: {e}") from e


def load_dataset(cfg: DatasetConfig) -> Dataset:
    """
    Materialise a Dataset from a DatasetConfig.
    """
    path: Path = cfg.path

    if not path.is_file():
        raise DatasetLoadError(f"Table file not found at {path}.")

    df = read_table(path)
    logger.info(
        "Loaded table file",
        extra={"dataset": cfg.name, "path": str(path), "n_rows": len(df), "n_columns": df.shape[1]},
    )
    return Dataset.from_frame(df, name=cfg.name, file_path=path)
