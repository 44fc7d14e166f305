"""
Shared render step of the export use cases.

Blocks in, bytes out. Nothing is written anywhere; callers stream the
bytes back, so a failed render leaves no partial file behind.
"""

from dataclasses import dataclass

from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.document import DocumentKind, GeneratedDocument
from ledgerdesk.core.exceptions import RenderFailureError
from ledgerdesk.core.interfaces import IDocumentRenderer

logger = get_logger(__name__)


@dataclass
class ExportResult:
    """Result of a document export."""

    pdf_bytes: bytes
    file_name: str
    file_size: int
    block_count: int
    kind: DocumentKind


def render_document(
    renderer: IDocumentRenderer,
    document: GeneratedDocument,
    page_width: float | None = None,
) -> ExportResult:
    """
    Render a generated document.

    Raises:
        RenderFailureError: For any renderer failure, wrapped if needed.
    """
    try:
        pdf_bytes = renderer.render(document.blocks, page_width=page_width)
    except RenderFailureError as e:
        logger.error(
            "export_render_failed",
            kind=document.kind.value,
            file_name=document.file_name,
            error=e.message,
        )
        raise
    except Exception as e:
        logger.error(
            "export_render_failed",
            kind=document.kind.value,
            file_name=document.file_name,
            error=str(e),
        )
        raise RenderFailureError(str(e)) from e

    return ExportResult(
        pdf_bytes=pdf_bytes,
        file_name=document.file_name,
        file_size=len(pdf_bytes),
        block_count=len(document.blocks),
        kind=document.kind,
    )
