"""
Error classifications for loading price data.

Only source-level failures are raised. Malformed rows and rejected window
edits are handled where they happen and never leave their module.
"""

from typing import Optional


class DataSourceError(Exception):
    """The input artifact could not be read or has no usable header."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source
