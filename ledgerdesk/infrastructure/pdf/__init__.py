"""PDF generation infrastructure."""

from ledgerdesk.infrastructure.pdf.fpdf2_renderer import PAGE_SIZES, Fpdf2DocumentRenderer

__all__ = [
    "Fpdf2DocumentRenderer",
    "PAGE_SIZES",
]
