"""Expense endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from ledgerdesk.api.dependencies import get_exp_store, get_user_context
from ledgerdesk.application.dto.requests import ExpenseRequest, ExpenseStatusRequest
from ledgerdesk.application.dto.responses import (
    ErrorResponse,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseSummaryResponse,
    GroupTotalResponse,
)
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.entities.expense import Expense, ExpenseStatus
from ledgerdesk.core.services import category_totals, compute_expense_total, filter_expenses
from ledgerdesk.infrastructure.storage.sqlite import SQLiteExpenseStore

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


def _entity_to_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(
        id=expense.id,  # type: ignore[arg-type]
        expense_date=expense.expense_date,
        merchant=expense.merchant,
        category=expense.category,
        amount=expense.amount,
        status=expense.status.value,
        receipt_url=expense.receipt_url,
        created_at=expense.created_at,
    )


async def _filtered(
    store: SQLiteExpenseStore,
    ctx: UserContext,
    search: str | None,
    category: str | None,
    status_filter: ExpenseStatus | None,
) -> list[Expense]:
    expenses = await store.list_expenses(ctx)
    return filter_expenses(expenses, search=search, category=category, status=status_filter)


@router.post(
    "",
    response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_expense(
    request: ExpenseRequest,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteExpenseStore = Depends(get_exp_store),
) -> ExpenseResponse:
    expense = await store.create_expense(ctx, Expense(**request.model_dump()))
    return _entity_to_response(expense)


@router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    search: str | None = None,
    category: str | None = None,
    status: ExpenseStatus | None = None,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteExpenseStore = Depends(get_exp_store),
) -> ExpenseListResponse:
    """List expenses; ``search`` matches the merchant, case-insensitively."""
    expenses = await _filtered(store, ctx, search, category, status)
    return ExpenseListResponse(
        expenses=[_entity_to_response(e) for e in expenses],
        total=len(expenses),
    )


@router.get("/summary", response_model=ExpenseSummaryResponse)
async def expense_summary(
    search: str | None = None,
    category: str | None = None,
    status: ExpenseStatus | None = None,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteExpenseStore = Depends(get_exp_store),
) -> ExpenseSummaryResponse:
    """Total and per-category totals of the filtered set."""
    expenses = await _filtered(store, ctx, search, category, status)
    return ExpenseSummaryResponse(
        count=len(expenses),
        total=compute_expense_total(expenses),
        categories=[
            GroupTotalResponse(label=label, amount=amount)
            for label, amount in category_totals(expenses).items()
        ],
    )


@router.patch(
    "/{expense_id}/status",
    response_model=ExpenseResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_expense_status(
    expense_id: int,
    request: ExpenseStatusRequest,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteExpenseStore = Depends(get_exp_store),
) -> ExpenseResponse:
    expense = await store.update_status(ctx, expense_id, request.status)
    return _entity_to_response(expense)


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_expense(
    expense_id: int,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteExpenseStore = Depends(get_exp_store),
) -> Response:
    if not await store.delete_expense(ctx, expense_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Expense not found: {expense_id}",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
