"""Configuration management for cmdbench exports."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import load_dotenv

from cmdbench.report.export import ExportFormat
from cmdbench.units import SortOrder, Unit

load_dotenv()

AUTO_UNIT = "auto"


@dataclass
class ExportConfig:
    """Export options with environment-based defaults."""

    export_format: str = field(default_factory=lambda: os.getenv("CMDBENCH_EXPORT_FORMAT", "markdown"))
    time_unit: str = field(default_factory=lambda: os.getenv("CMDBENCH_TIME_UNIT", AUTO_UNIT))
    sort_order: str = field(default_factory=lambda: os.getenv("CMDBENCH_SORT_ORDER", "command"))

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        # Each accessor raises ValueError on an unknown name
        _ = self.format
        _ = self.unit
        _ = self.sort

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.from_name(self.export_format)

    @property
    def unit(self) -> Optional[Unit]:
        """Explicit display unit, or None to resolve it from the results."""
        if self.time_unit.strip().lower() == AUTO_UNIT:
            return None
        return Unit.from_name(self.time_unit)

    @property
    def sort(self) -> SortOrder:
        return SortOrder.from_name(self.sort_order)


def load_export_config(config_path: Optional[Union[str, Path]] = None, **overrides) -> ExportConfig:
    """Build an ExportConfig from environment, YAML file and overrides.

    Precedence, lowest first: environment variables, keys of the YAML file,
    keyword overrides whose value is not None.

    Args:
        config_path: Optional YAML file with ``export_format``, ``time_unit``
            and/or ``sort_order`` keys
        **overrides: Explicit values, typically from the command line

    Returns:
        Validated ExportConfig
    """
    known = {f.name for f in fields(ExportConfig)}
    values = {}

    if config_path is not None:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys in {config_path}: {sorted(unknown)}")
        values.update({k: str(v) for k, v in data.items()})

    values.update({k: v for k, v in overrides.items() if k in known and v is not None})

    return ExportConfig(**values)
