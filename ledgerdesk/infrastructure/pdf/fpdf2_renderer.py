"""
Fpdf2 implementation of document rendering.

Paints the block sequence produced by the document builder, in order,
with alternating row shading for tables, a bold GRAND TOTAL row,
and a page-number footer configured from PdfSettings.
"""

from collections.abc import Sequence
from datetime import datetime

from fpdf import FPDF
from fpdf.enums import MethodReturnValue, XPos, YPos

from ledgerdesk.config import get_logger
from ledgerdesk.config.settings import PdfSettings, get_settings
from ledgerdesk.core.entities.document import (
    Block,
    ImageBlock,
    KeyValueBlock,
    TableBlock,
    TextBlock,
    TotalBlock,
)
from ledgerdesk.core.exceptions import RenderFailureError
from ledgerdesk.core.interfaces.renderer import IDocumentRenderer
from ledgerdesk.core.services.aggregator import GRAND_TOTAL

logger = get_logger(__name__)

# (width, height) in mm
PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A4": (210.0, 297.0),
    "letter": (215.9, 279.4),
    "legal": (215.9, 355.6),
}

# style -> (font style, size, line height)
_TEXT_STYLES: dict[str, tuple[str, int, float]] = {
    "title": ("B", 18, 12),
    "heading": ("B", 12, 8),
    "body": ("", 10, 6),
    "small": ("", 8, 4),
}

_LOGO_WIDTH = 40
_LABEL_WIDTH = 35
_MIN_COLUMN_CHARS = 8
_MAX_COLUMN_CHARS = 40
_ROW_LINE_HEIGHT = 5


def _safe_text(text: str) -> str:
    """Replace characters the built-in core fonts cannot encode with '?'."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


# ---------------------------------------------------------------------------
# Custom FPDF subclass with page-number footer
# ---------------------------------------------------------------------------

class _LedgerPdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(self, pdf_settings: PdfSettings, page_size: tuple[float, float]) -> None:
        super().__init__(format=page_size)
        self._pdf_settings = pdf_settings
        self._generation_date = datetime.utcnow().strftime("%Y-%m-%d %H:%M UTC")

    # fpdf2 calls this automatically at the bottom of each page.
    def footer(self) -> None:  # noqa: D401
        """Render footer with page numbers and generation date."""
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, _safe_text(self._pdf_settings.footer_text), align="L")
        self.set_x(-70)
        self.cell(
            0,
            5,
            f"Page {self.page_no()} of {{nb}} | {self._generation_date}",
            align="R",
        )


class Fpdf2DocumentRenderer(IDocumentRenderer):
    """Renders document blocks to PDF bytes using fpdf2."""

    def __init__(self, pdf_settings: PdfSettings | None = None) -> None:
        if pdf_settings is None:
            pdf_settings = get_settings().pdf
        self._settings = pdf_settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, blocks: Sequence[Block], page_width: float | None = None) -> bytes:
        """Render blocks into PDF bytes; engine failures become RenderFailureError."""
        current: Block | None = None
        try:
            pdf = _LedgerPdf(self._settings, self._page_size(page_width))
            pdf.alias_nb_pages()
            pdf.set_auto_page_break(auto=True, margin=20)
            pdf.add_page()

            for current in blocks:
                self._render_block(pdf, current)

            return bytes(pdf.output())
        except RenderFailureError:
            raise
        except Exception as e:
            block_kind = type(current).__name__ if current is not None else None
            logger.warning("pdf_render_failed", block_kind=block_kind, error=str(e))
            raise RenderFailureError(str(e), block_kind=block_kind) from e

    def _page_size(self, page_width: float | None) -> tuple[float, float]:
        width, height = PAGE_SIZES[self._settings.page_format]
        if page_width is not None:
            if page_width <= 0:
                raise RenderFailureError(f"Invalid page width: {page_width}")
            width = float(page_width)
        return width, height

    def _render_block(self, pdf: FPDF, block: Block) -> None:
        if isinstance(block, TextBlock):
            self._render_text(pdf, block)
        elif isinstance(block, ImageBlock):
            self._render_image(pdf, block)
        elif isinstance(block, KeyValueBlock):
            self._render_key_value(pdf, block)
        elif isinstance(block, TableBlock):
            self._render_table(pdf, block)
        elif isinstance(block, TotalBlock):
            self._render_total(pdf, block)
        else:
            raise RenderFailureError(
                f"Unsupported block type: {type(block).__name__}",
                block_kind=type(block).__name__,
            )

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    @staticmethod
    def _render_text(pdf: FPDF, block: TextBlock) -> None:
        style, size, height = _TEXT_STYLES[block.style]
        pdf.set_font("Helvetica", style, size)
        if block.style == "title":
            pdf.ln(4)
        pdf.multi_cell(
            0, height, _safe_text(block.text), align=block.align,
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        if block.style in ("title", "heading"):
            pdf.ln(2)

    @staticmethod
    def _render_image(pdf: FPDF, block: ImageBlock) -> None:
        """Logo at the left margin; fpdf2 accepts local paths and URLs."""
        pdf.image(block.source, w=_LOGO_WIDTH)
        pdf.ln(2)

    @staticmethod
    def _render_key_value(pdf: FPDF, block: KeyValueBlock) -> None:
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(_LABEL_WIDTH, 6, _safe_text(f"{block.label}:"))
        pdf.set_font("Helvetica", "", 10)
        pdf.multi_cell(
            0, 6, _safe_text(block.value),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )

    def _render_table(self, pdf: FPDF, block: TableBlock) -> None:
        """Render table with borders, wrapped cells and alternating row shading."""
        widths = self._column_widths(pdf, block)
        pdf.ln(2)
        self._render_table_header(pdf, block, widths)

        for idx, row in enumerate(block.rows, 1):
            is_grand_total = bool(row) and row[0] == GRAND_TOTAL
            # Alternating row background
            fill = is_grand_total or idx % 2 == 0
            self._set_row_style(pdf, is_grand_total)

            texts = [_safe_text(value) for value in row]
            height = _ROW_LINE_HEIGHT * max(
                [1] + [self._line_count(pdf, text, width) for text, width in zip(texts, widths)]
            )
            if pdf.get_y() + height > pdf.page_break_trigger:
                pdf.add_page()
                self._render_table_header(pdf, block, widths)
                self._set_row_style(pdf, is_grand_total)

            x, y = pdf.l_margin, pdf.get_y()
            for column, width, text in zip(block.columns, widths, texts):
                pdf.rect(x, y, width, height, style="DF" if fill else "D")
                pdf.set_xy(x, y)
                pdf.multi_cell(
                    width, _ROW_LINE_HEIGHT, text, align=column.align,
                    new_x=XPos.RIGHT, new_y=YPos.TOP,
                )
                x += width
            pdf.set_xy(pdf.l_margin, y + height)

        pdf.ln(3)

    @staticmethod
    def _render_table_header(pdf: FPDF, block: TableBlock, widths: list[float]) -> None:
        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for column, width in zip(block.columns, widths):
            pdf.cell(width, 7, _safe_text(column.name), border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

    @staticmethod
    def _set_row_style(pdf: FPDF, is_grand_total: bool) -> None:
        if is_grand_total:
            pdf.set_font("Helvetica", "B", 9)
            pdf.set_fill_color(220, 220, 220)
        else:
            pdf.set_font("Helvetica", "", 8)
            pdf.set_fill_color(240, 240, 240)

    @staticmethod
    def _render_total(pdf: FPDF, block: TotalBlock) -> None:
        pdf.set_font("Helvetica", "B", 11)
        label_width = pdf.epw * 0.7
        pdf.cell(label_width, 8, _safe_text(f"{block.label}:"), align="R")
        pdf.cell(
            0, 8, _safe_text(block.amount), align="R",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.ln(3)

    # ------------------------------------------------------------------
    # Layout helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _column_widths(pdf: FPDF, block: TableBlock) -> list[float]:
        """Share the printable width in proportion to column content length."""
        weights = []
        for i, column in enumerate(block.columns):
            longest = max(
                [len(column.name)] + [len(row[i]) for row in block.rows if i < len(row)]
            )
            weights.append(min(max(longest, _MIN_COLUMN_CHARS), _MAX_COLUMN_CHARS))
        total = sum(weights) or 1
        return [pdf.epw * w / total for w in weights]

    @staticmethod
    def _line_count(pdf: FPDF, text: str, width: float) -> int:
        """Number of lines *text* wraps to inside a cell of *width*."""
        lines = pdf.multi_cell(
            width, _ROW_LINE_HEIGHT, text, dry_run=True, output=MethodReturnValue.LINES
        )
        return max(len(lines), 1)
