"""Abstract interface for document rendering."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ledgerdesk.core.entities.document import Block


class IDocumentRenderer(ABC):
    """Paints an ordered block sequence into a portable document."""

    @abstractmethod
    def render(self, blocks: Sequence[Block], page_width: float | None = None) -> bytes:
        """
        Render blocks in order and return the document bytes.

        Args:
            blocks: Output of the document builder.
            page_width: Optional page width in mm overriding the configured format.

        Raises:
            RenderFailureError: If the underlying engine fails.
        """
        pass
