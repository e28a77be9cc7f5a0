"""Exception types for PartyMix."""

from typing import Any, Dict


class PartyMixError(Exception):
    """Base class for PartyMix errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Dict[str, Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CatalogError(PartyMixError):
    """Reference data breaks a catalog invariant."""

    def __init__(self, message: str, details: Dict[str, Any] = None):
        super().__init__(
            code="CATALOG_ERROR",
            message=message,
            details=details or {}
        )


class EmptyPoolError(PartyMixError):
    """Nothing to draw from."""

    def __init__(self, message: str = "Cannot draw from an empty pool"):
        super().__init__(code="EMPTY_POOL", message=message)


class ClipboardError(PartyMixError):
    """Clipboard is unavailable or the write was denied."""

    def __init__(self, message: str, details: Dict[str, Any] = None):
        super().__init__(
            code="CLIPBOARD_ERROR",
            message=message,
            details=details or {}
        )
