"""Foam Radio exceptions.

Only startup configuration problems raise. Session, playlist and radio
operations never raise for invalid or empty input; they are logged no-ops.
"""

from typing import Optional


class FoamRadioError(Exception):
    """Base exception for Foam Radio."""

    pass


class CatalogError(FoamRadioError):
    """Raised when a catalog source cannot be read or fails validation."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)
