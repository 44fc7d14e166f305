"""
Service factory functions for dependency injection.

Wires the configured document builder and renderer. Use cases
import from here rather than constructing infrastructure directly.
"""

from ledgerdesk.core.interfaces import IDocumentRenderer
from ledgerdesk.core.services import DocumentBuilder

# Singleton service instances
_document_builder: DocumentBuilder | None = None
_document_renderer: IDocumentRenderer | None = None


def get_document_builder() -> DocumentBuilder:
    """Get or create the DocumentBuilder configured from PdfSettings."""
    global _document_builder
    if _document_builder is None:
        _document_builder = DocumentBuilder.from_settings()
    return _document_builder


def get_document_renderer() -> IDocumentRenderer:
    """Get or create the fpdf2 document renderer."""
    global _document_renderer
    if _document_renderer is None:
        from ledgerdesk.infrastructure.pdf import Fpdf2DocumentRenderer

        _document_renderer = Fpdf2DocumentRenderer()
    return _document_renderer


def reset_services() -> None:
    """Drop cached instances (used by tests after settings change)."""
    global _document_builder, _document_renderer
    _document_builder = None
    _document_renderer = None
