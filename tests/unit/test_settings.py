"""Tests for configuration and logging utilities."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from decktransfer import __version__
from decktransfer.config import (
    DeckTransferSettings,
    DerivationConfig,
    ExportConfig,
    ImportConfig,
    get_default_settings,
)
from decktransfer.utils import ProcessingStats, TransferLogger, configure_logging
from decktransfer.utils import logging as logging_utils


class TestSettings:
    """Tests for settings models."""

    def test_defaults(self) -> None:
        """Test default settings."""
        settings = get_default_settings()

        assert settings.geometry.degenerate_area == 1e-10
        assert settings.derivation.tolerance == 1e-6
        assert settings.derivation.slab_thickness_ratio == 0.1
        assert settings.derivation.shared_level_fraction == 0.25
        assert settings.export.tool == "decktransfer"
        assert settings.export.version == __version__
        assert settings.transfer == ImportConfig()
        assert settings.logging.log_file is None

    def test_export_labels(self) -> None:
        """Test export header labels."""
        config = ExportConfig()
        assert (config.units, config.coordinate_system) == ("Meters", "Local")

    @pytest.mark.parametrize(
        "field_name, value",
        [
            ("tolerance", 0.0),
            ("tolerance", 0.5),
            ("slab_thickness_ratio", 0.5),
            ("shared_level_fraction", 1.5),
        ],
    )
    def test_derivation_limits(self, field_name: str, value: float) -> None:
        """Test out-of-range derivation values are rejected."""
        with pytest.raises(ValidationError):
            DerivationConfig(**{field_name: value})

    def test_nested_override(self) -> None:
        """Test nested sections can be built from dicts."""
        settings = DeckTransferSettings(transfer={"target_section_name": "Deck1"})
        assert settings.transfer.target_section_name == "Deck1"
        assert settings.transfer.clear_existing_voids


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_no_file_by_default(self) -> None:
        """Test only a console handler is installed without a log file."""
        configure_logging()
        assert len(logging_utils._installed_handlers) == 1
        assert not isinstance(logging_utils._installed_handlers[0], logging.FileHandler)

    def test_reconfigure_replaces_handlers(self, tmp_path: Path) -> None:
        """Test repeated configuration does not stack handlers."""
        log_file = tmp_path / "run.log"
        configure_logging(log_file=log_file)
        configure_logging(log_file=log_file)

        root = logging.getLogger()
        installed = [h for h in root.handlers if h in logging_utils._installed_handlers]
        assert len(installed) == 2
        assert log_file.exists()
        configure_logging()

    def test_quiet(self) -> None:
        """Test quiet raises the console level to ERROR."""
        configure_logging(console_level="DEBUG", quiet=True)
        assert logging_utils._installed_handlers[0].level == logging.ERROR


class TestTransferLogger:
    """Tests for TransferLogger."""

    def test_stats(self) -> None:
        """Test statistics accumulate."""
        logger = MagicMock()
        transfer_logger = TransferLogger(logger)

        transfer_logger.log_section_complete("A", centerlines=5, cutlines=4, duration_ms=1.234)
        transfer_logger.log_section_error("B", ValueError("bad"))
        transfer_logger.log_transfer_warning("A", "void skipped")

        stats = transfer_logger.stats
        assert stats.sections_processed == 1
        assert stats.centerlines_derived == 5
        assert stats.cutlines_derived == 4
        assert stats.error_count == 1
        assert stats.errors == [("B", "bad")]
        assert stats.warning_count == 1
        logger.error.assert_called_once_with(
            "Section processing failed", section="B", error="bad", error_type="ValueError"
        )

    def test_duration(self) -> None:
        """Test duration needs both timestamps."""
        assert ProcessingStats().duration_seconds == 0.0
        assert ProcessingStats(start_time=10.0, end_time=12.5).duration_seconds == 2.5
