from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from table_browser.core.table_state import DEFAULT_PAGE_SIZE


@dataclass
class DatasetConfig:
    """
    Parsed config entry for a single dataset.
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int
    data_root: Optional[Path] = None

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Dataset {self.index}")

    @property
    def path(self) -> Path:
        path = Path(self.raw["file"])
        if not path.is_absolute() and self.data_root is not None:
            return self.data_root / path
        return path

    @property
    def show_header(self) -> bool:
        return bool(self.raw.get("show_header", True))

    @property
    def show_table_info(self) -> bool:
        return bool(self.raw.get("show_table_info", True))

    @property
    def sort_column(self) -> Optional[int]:
        value = self.raw.get("sort_column")
        return int(value) if value is not None else None

    @classmethod
    def from_raw(
        cls,
        raw: Dict[str, Any],
        source_path: Path,
        index: int,
        data_root: Optional[Path] = None,
    ) -> DatasetConfig:
        return cls(raw=raw, source_path=source_path, index=index, data_root=data_root)


@dataclass
class GlobalConfig:
    ui_title: str = "Table Browser"
    default_dataset: Optional[str] = None
    data_root: Optional[Path] = None
    default_page_size: int = DEFAULT_PAGE_SIZE
    reset_page_on_search: bool = True
    default_sort_column: Optional[int] = None
    datasets: List[DatasetConfig] = field(default_factory=list)
