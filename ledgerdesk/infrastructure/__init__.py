"""Infrastructure layer implementations."""

from ledgerdesk.infrastructure import pdf, storage

__all__ = ["storage", "pdf"]
