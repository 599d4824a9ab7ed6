"""Exception hierarchy for the index coverage model.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class IndexCoverageError(Exception):
    """Base exception for all index coverage errors."""
    pass


class ConfigurationError(IndexCoverageError):
    """Raised when sizing parameters or settings are invalid."""
    pass


class ReportError(IndexCoverageError):
    """Raised when a report cannot be written."""
    pass
