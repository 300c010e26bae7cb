from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from table_browser.config.model import DatasetConfig, GlobalConfig
from table_browser.core.controller import ControllerOptions
from table_browser.core.dataset import Dataset


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    dataset_names: List[str] = field(default_factory=list)
    dataset_by_name: Mapping[str, Dataset] = field(default_factory=dict)
    config_by_name: Mapping[str, DatasetConfig] = field(default_factory=dict)
    default_dataset_name: Optional[str] = None

    def controller_options(self, dataset_name: Optional[str] = None) -> ControllerOptions:
        """Controller behaviour for one dataset: its own sort column wins over the global default."""
        cfg = self.config_by_name.get(dataset_name) if dataset_name else None
        sort_column = self.global_config.default_sort_column
        if cfg is not None and cfg.sort_column is not None:
            sort_column = cfg.sort_column
        return ControllerOptions(
            reset_page_on_search=self.global_config.reset_page_on_search,
            default_sort_column=sort_column,
            default_page_size=self.global_config.default_page_size,
        )

    def validate(self) -> None:
        """Ensure the default dataset is one the app actually knows about."""
        if self.default_dataset_name is not None and self.default_dataset_name not in self.dataset_names:
            raise RuntimeError(
                f"Default dataset '{self.default_dataset_name}' is not configured."
            )
