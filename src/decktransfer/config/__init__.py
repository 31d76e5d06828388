"""Configuration management for decktransfer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Polygon math tolerances
- DerivationConfig: Centerline/cutline heuristics
- ExportConfig: Interchange file header values
- ImportConfig: Options for the analysis-side transfer
- LoggingConfig: Logging settings
- DeckTransferSettings: Main application settings
"""

from decktransfer.config.settings import (
    DeckTransferSettings,
    DerivationConfig,
    ExportConfig,
    GeometryConfig,
    ImportConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "DeckTransferSettings",
    "DerivationConfig",
    "ExportConfig",
    "GeometryConfig",
    "ImportConfig",
    "LoggingConfig",
    "get_default_settings",
]
