"""Configuration loading for LiveCharts.

Settings live in ``~/.config/livecharts/config.toml`` under a
``[charting]`` table:

    [charting]
    capacity = 4000
    significant_digits = 5
    live_mode = false
    poll_interval = 1.0
"""

from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from livecharts.charting.series import DEFAULT_CAPACITY

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "livecharts" / "config.toml"


class ChartingConfig(BaseModel):
    """Effective charting settings."""

    capacity: int = Field(
        default=DEFAULT_CAPACITY, ge=0, description="Points buffered per series outside live mode"
    )
    significant_digits: Optional[int] = Field(
        default=None, ge=1, description="Round stored values to this many significant digits"
    )
    live_mode: bool = Field(default=False, description="Bypass series capacity for every point")
    poll_interval: float = Field(
        default=1.0, gt=0, description="Seconds between consumer update pulls"
    )

    model_config = {"frozen": True}


def load_config(config_path: Optional[Path] = None) -> ChartingConfig:
    """Load charting settings.

    Args:
        config_path: Path to a TOML file. Defaults to DEFAULT_CONFIG_PATH.

    Returns:
        Loaded settings, or defaults if the file does not exist.

    Raises:
        ValueError: If the file cannot be parsed or holds invalid settings.
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not path.exists():
        return ChartingConfig()

    try:
        data = toml.load(path)
    except toml.TomlDecodeError as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e

    try:
        return ChartingConfig(**data.get("charting", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid charting settings in {path}: {e}") from e
