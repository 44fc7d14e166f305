"""Tax deduction entry endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from ledgerdesk.api.dependencies import (
    get_export_tax_report_use_case,
    get_tax_store,
    get_user_context,
)
from ledgerdesk.api.routes.invoices import pdf_response
from ledgerdesk.application.dto.requests import TaxEntryRequest
from ledgerdesk.application.dto.responses import (
    ErrorResponse,
    GroupTotalResponse,
    TaxEntryListResponse,
    TaxEntryResponse,
    TaxSummaryResponse,
    TaxYearSummaryResponse,
)
from ledgerdesk.application.use_cases import ExportTaxReportUseCase
from ledgerdesk.config import get_logger
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.entities.tax import TaxEntry
from ledgerdesk.core.exceptions import NoRecordsToExportError
from ledgerdesk.core.money import ZERO, round_money
from ledgerdesk.core.services import GRAND_TOTAL, summarize_tax_entries
from ledgerdesk.infrastructure.storage.sqlite import SQLiteTaxEntryStore

logger = get_logger(__name__)

router = APIRouter(prefix="/api/tax-entries", tags=["tax"])


def _entity_to_response(entry: TaxEntry) -> TaxEntryResponse:
    return TaxEntryResponse(
        id=entry.id,  # type: ignore[arg-type]
        tax_year=entry.tax_year,
        category=entry.category.value,
        amount=entry.amount,
        description=entry.description,
        date_added=entry.date_added,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
    )


def _request_to_entity(request: TaxEntryRequest, entry_id: int | None = None) -> TaxEntry:
    values = request.model_dump(exclude_none=True)
    if entry_id is not None:
        values["id"] = entry_id
    return TaxEntry(**values)


def _not_found(entry_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Tax entry not found: {entry_id}",
    )


@router.post(
    "",
    response_model=TaxEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_tax_entry(
    request: TaxEntryRequest,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteTaxEntryStore = Depends(get_tax_store),
) -> TaxEntryResponse:
    entry = await store.create_entry(ctx, _request_to_entity(request))
    return _entity_to_response(entry)


@router.get("", response_model=TaxEntryListResponse)
async def list_tax_entries(
    tax_year: int | None = None,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteTaxEntryStore = Depends(get_tax_store),
) -> TaxEntryListResponse:
    """List entries, optionally for one tax year."""
    entries = await store.list_entries(ctx, tax_year=tax_year)
    return TaxEntryListResponse(
        entries=[_entity_to_response(e) for e in entries],
        total=len(entries),
    )


@router.get("/summary", response_model=TaxSummaryResponse)
async def tax_summary(
    tax_year: int | None = None,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteTaxEntryStore = Depends(get_tax_store),
) -> TaxSummaryResponse:
    """Per-year category totals, most recent year first."""
    entries = await store.list_entries(ctx, tax_year=tax_year)

    years = []
    for year, totals in summarize_tax_entries(entries).items():
        totals = dict(totals)
        year_total = totals.pop(GRAND_TOTAL)
        years.append(
            TaxYearSummaryResponse(
                tax_year=year,
                categories=[
                    GroupTotalResponse(label=label, amount=amount)
                    for label, amount in totals.items()
                ],
                total=year_total,
            )
        )

    return TaxSummaryResponse(
        years=years,
        grand_total=round_money(sum((y.total for y in years), ZERO)),
    )


@router.get(
    "/report.pdf",
    responses={
        200: {"content": {"application/pdf": {}}},
        204: {"description": "No entries to report"},
        502: {"model": ErrorResponse, "description": "Rendering failed"},
    },
)
async def tax_report_pdf(
    year: int | None = None,
    ctx: UserContext = Depends(get_user_context),
    use_case: ExportTaxReportUseCase = Depends(get_export_tax_report_use_case),
) -> Response:
    """Download the tax report for all years or one year."""
    try:
        result = await use_case.execute(ctx, year=year)
    except NoRecordsToExportError:
        logger.info("tax_report_skipped_no_entries", year=year)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return pdf_response(result.pdf_bytes, result.file_name)


@router.get(
    "/{entry_id}",
    response_model=TaxEntryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_tax_entry(
    entry_id: int,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteTaxEntryStore = Depends(get_tax_store),
) -> TaxEntryResponse:
    entry = await store.get_entry(ctx, entry_id)
    if entry is None:
        raise _not_found(entry_id)
    return _entity_to_response(entry)


@router.put(
    "/{entry_id}",
    response_model=TaxEntryResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def replace_tax_entry(
    entry_id: int,
    request: TaxEntryRequest,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteTaxEntryStore = Depends(get_tax_store),
) -> TaxEntryResponse:
    existing = await store.get_entry(ctx, entry_id)
    if existing is None:
        raise _not_found(entry_id)

    entry = _request_to_entity(request, entry_id=entry_id)
    if request.date_added is None:
        entry.date_added = existing.date_added
    entry.created_at = existing.created_at
    entry = await store.update_entry(ctx, entry)
    return _entity_to_response(entry)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_tax_entry(
    entry_id: int,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteTaxEntryStore = Depends(get_tax_store),
) -> Response:
    if not await store.delete_entry(ctx, entry_id):
        raise _not_found(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
