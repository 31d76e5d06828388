"""Configuration settings for decktransfer."""

from pathlib import Path

from pydantic import BaseModel, Field

from decktransfer import __version__


class GeometryConfig(BaseModel):
    """Configuration for polygon math."""

    degenerate_area: float = Field(
        default=1e-10,
        gt=0.0,
        description="Absolute area below which a polygon is treated as degenerate",
    )


class DerivationConfig(BaseModel):
    """Configuration for centerline and cutline derivation.

    The defaults reproduce the heuristics the downstream analysis models were
    calibrated against. Changing them changes where lines are placed.
    """

    tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1e-2,
        description="Tolerance for bounds checks, Y-level grouping and flat segments",
    )
    slab_thickness_ratio: float = Field(
        default=0.1,
        gt=0.0,
        lt=0.5,
        description="Estimated slab thickness as a fraction of section height (solid sections)",
    )
    shared_level_fraction: float = Field(
        default=0.25,
        gt=0.0,
        le=1.0,
        description="Share of void Y samples a level needs to be preferred for a cutline",
    )


class ExportConfig(BaseModel):
    """Header values stamped into every written interchange file."""

    tool: str = Field(default="decktransfer", description="Exporting tool name")
    version: str = Field(default=__version__, description="Exporting tool version")
    units: str = Field(default="Meters", description="Unit label (not converted)")
    coordinate_system: str = Field(default="Local", description="Coordinate system label")


class ImportConfig(BaseModel):
    """Options for handing a section to the analysis-side tool."""

    target_section_name: str = Field(
        default="",
        description="Name of the section in the target tool (empty = use section name)",
    )
    set_reference_point: bool = Field(
        default=True,
        description="Set the section insertion point from the reference point",
    )
    clear_existing_voids: bool = Field(
        default=True,
        description="Remove voids already defined on the target section",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class DeckTransferSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    derivation: DerivationConfig = Field(default_factory=DerivationConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    transfer: ImportConfig = Field(default_factory=ImportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> DeckTransferSettings:
    """Get default application settings."""
    return DeckTransferSettings()
