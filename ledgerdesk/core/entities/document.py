"""
Renderer-independent document model.

A generated document is an ordered sequence of blocks. Block order and
content are the contract between the document builder and any renderer;
layout details belong to the renderer.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Literal

Align = Literal["L", "C", "R"]
TextStyle = Literal["title", "heading", "body", "small"]


class DocumentKind(str, Enum):
    INVOICE = "invoice"
    TAX_REPORT = "tax_report"


@dataclass(frozen=True)
class TextBlock:
    text: str
    style: TextStyle = "body"
    align: Align = "L"


@dataclass(frozen=True)
class ImageBlock:
    """Logo line of a header. ``source`` is a file path or URL."""

    source: str


@dataclass(frozen=True)
class KeyValueBlock:
    label: str
    value: str


@dataclass(frozen=True)
class Column:
    name: str
    align: Align = "L"


@dataclass(frozen=True)
class TableBlock:
    columns: tuple[Column, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]


@dataclass(frozen=True)
class TotalBlock:
    """Single total line of an ungrouped document."""

    label: str
    amount: str


Block = TextBlock | ImageBlock | KeyValueBlock | TableBlock | TotalBlock


@dataclass
class GeneratedDocument:
    """Blocks for one export plus its deterministic file name. Never persisted."""

    kind: DocumentKind
    file_name: str
    blocks: list[Block] = field(default_factory=list)
    total: Decimal | None = None
