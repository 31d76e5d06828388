"""Utility functions for decktransfer.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
"""

from decktransfer.utils.logging import (
    ProcessingStats,
    TransferLogger,
    configure_logging,
)

__all__ = [
    "ProcessingStats",
    "TransferLogger",
    "configure_logging",
]
