"""Logging utilities for decktransfer."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class ProcessingStats:
    """Statistics from a processing run."""

    sections_processed: int = 0
    centerlines_derived: int = 0
    cutlines_derived: int = 0
    error_count: int = 0
    warning_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("decktransfer")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class TransferLogger:
    """Logger for tracking section processing and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_section_start(self, section_name: str, void_count: int) -> None:
        """Log start of section processing."""
        self._logger.debug("Processing section", section=section_name, voids=void_count)

    def log_section_complete(
        self,
        section_name: str,
        centerlines: int,
        cutlines: int,
        duration_ms: float,
    ) -> None:
        """Log successful section processing."""
        self._logger.info(
            "Section processed",
            section=section_name,
            centerlines=centerlines,
            cutlines=cutlines,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.sections_processed += 1
        self._stats.centerlines_derived += centerlines
        self._stats.cutlines_derived += cutlines

    def log_section_error(self, section_name: str, error: Exception) -> None:
        """Log section processing error."""
        self._logger.error(
            "Section processing failed",
            section=section_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((section_name, str(error)))

    def log_file_written(self, path: Path, section_count: int) -> None:
        """Log a written interchange file."""
        self._logger.info("File written", path=str(path), sections=section_count)

    def log_file_loaded(self, path: Path, section_count: int, tool: str) -> None:
        """Log a loaded interchange file."""
        self._logger.info("File loaded", path=str(path), sections=section_count, tool=tool)

    def log_transfer_warning(self, section_name: str, message: str) -> None:
        """Log a non-fatal transfer problem."""
        self._logger.warning("Transfer warning", section=section_name, message=message)
        self._stats.warning_count += 1

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
