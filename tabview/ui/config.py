from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from tabview.config.model import GlobalConfig, TableConfig
from tabview.services.engine_service import EngineManager
from tabview.services.record_source import RecordSourceManager
from tabview.services.sort_spec_provider import SortSpecProvider


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    table_by_name: Dict[str, TableConfig] = field(default_factory=dict)

    records: Optional[RecordSourceManager] = None
    engines: Optional[EngineManager] = None
    sort_specs: Optional[SortSpecProvider] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.records is None:
            raise RuntimeError("AppConfig.records must be initialized.")
        if self.engines is None:
            raise RuntimeError("AppConfig.engines must be initialized.")
        if self.sort_specs is None:
            raise RuntimeError("AppConfig.sort_specs must be initialized.")
