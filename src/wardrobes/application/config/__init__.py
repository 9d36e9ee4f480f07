"""Configuration schema and loading system for quotation files.

Public API:
    - QuotationConfiguration: Root configuration model
    - RoomConfig, UnitConfig, BoxConfig: Room and unit models
    - ProductionSettingsConfig: Production sizing settings
    - UnitOverridesConfig, PanelOverrideConfig: Saved operator overrides
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_rooms, config_to_settings, config_to_overrides: Domain adapters

Example:
    >>> from pathlib import Path
    >>> from wardrobes.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("quotation.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wardrobes.application.config.adapter import (
    config_to_overrides,
    config_to_rooms,
    config_to_settings,
    config_to_unit,
)
from wardrobes.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from wardrobes.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoxConfig,
    PanelOverrideConfig,
    ProductionSettingsConfig,
    QuotationConfiguration,
    RoomConfig,
    UnitConfig,
    UnitOverridesConfig,
)

__all__ = [
    "BoxConfig",
    "ConfigError",
    "PanelOverrideConfig",
    "ProductionSettingsConfig",
    "QuotationConfiguration",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "UnitConfig",
    "UnitOverridesConfig",
    "config_to_overrides",
    "config_to_rooms",
    "config_to_settings",
    "config_to_unit",
    "load_config",
    "load_config_from_dict",
]
