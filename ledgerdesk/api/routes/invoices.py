"""Invoice endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from ledgerdesk.api.dependencies import (
    get_export_invoice_pdf_use_case,
    get_inv_store,
    get_save_invoice_use_case,
    get_user_context,
)
from ledgerdesk.application.dto.requests import InvoiceRequest
from ledgerdesk.application.dto.responses import (
    ErrorResponse,
    InvoiceListResponse,
    InvoiceResponse,
)
from ledgerdesk.application.use_cases import (
    ExportInvoicePdfUseCase,
    SaveInvoiceUseCase,
    invoice_to_response,
)
from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.exceptions import NoRecordsToExportError
from ledgerdesk.infrastructure.storage.sqlite import SQLiteInvoiceStore

logger = get_logger(__name__)

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


def pdf_response(pdf_bytes: bytes, file_name: str) -> Response:
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_invoice(
    request: InvoiceRequest,
    ctx: UserContext = Depends(get_user_context),
    use_case: SaveInvoiceUseCase = Depends(get_save_invoice_use_case),
) -> InvoiceResponse:
    """Create an invoice. Zero-item invoices are saved with a warning."""
    result = await use_case.create(ctx, request)
    return use_case.to_response(result)


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteInvoiceStore = Depends(get_inv_store),
) -> InvoiceListResponse:
    """List the caller's invoices, newest first."""
    invoices = await store.list_invoices(ctx, limit=limit, offset=offset)
    return InvoiceListResponse(
        invoices=[invoice_to_response(inv) for inv in invoices],
        total=await store.count_invoices(ctx),
    )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice(
    invoice_id: int,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteInvoiceStore = Depends(get_inv_store),
) -> InvoiceResponse:
    invoice = await store.get_invoice(ctx, invoice_id)
    if invoice is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Invoice not found: {invoice_id}",
        )
    return invoice_to_response(invoice)


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def replace_invoice(
    invoice_id: int,
    request: InvoiceRequest,
    ctx: UserContext = Depends(get_user_context),
    use_case: SaveInvoiceUseCase = Depends(get_save_invoice_use_case),
) -> InvoiceResponse:
    """Replace an invoice, items included."""
    result = await use_case.update(ctx, invoice_id, request)
    return use_case.to_response(result)


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_invoice(
    invoice_id: int,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteInvoiceStore = Depends(get_inv_store),
) -> Response:
    if not await store.delete_invoice(ctx, invoice_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Invoice not found: {invoice_id}",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {"content": {"application/pdf": {}}},
        204: {"description": "Invoice has no line items"},
        404: {"model": ErrorResponse, "description": "Invoice not found"},
        502: {"model": ErrorResponse, "description": "Rendering failed"},
    },
)
async def get_invoice_pdf(
    invoice_id: int,
    ctx: UserContext = Depends(get_user_context),
    use_case: ExportInvoicePdfUseCase = Depends(get_export_invoice_pdf_use_case),
) -> Response:
    """Generate and download the invoice PDF."""
    try:
        result = await use_case.execute(ctx, invoice_id)
    except NoRecordsToExportError:
        logger.info("invoice_pdf_skipped_no_items", invoice_id=invoice_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return pdf_response(result.pdf_bytes, result.file_name)
