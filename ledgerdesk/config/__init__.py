"""Configuration module."""

from ledgerdesk.config.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)
from ledgerdesk.config.settings import (
    APISettings,
    PdfSettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "StorageSettings",
    "APISettings",
    "PdfSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
    "bind_request_context",
    "clear_request_context",
]
