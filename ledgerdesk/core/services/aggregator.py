"""
Totals and groupings over in-memory financial records.

Pure functions over snapshots already fetched from the store. Ordering
rules are part of the contract:

- ``group_by_key`` keeps first-seen key order.
- Tax years are listed most recent first.
- Categories within a year keep first-seen order (not alphabetical).
- ``sum_by_group`` always ends with the synthetic GRAND TOTAL key.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

from ledgerdesk.core.exceptions import InvalidAmountError, ValidationError
from ledgerdesk.core.money import ZERO, round_money, to_decimal

GRAND_TOTAL = "GRAND TOTAL"

R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def _amount_of(record: Any) -> Decimal:
    return to_decimal(record.amount)


def _label(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def compute_line_amount(quantity: Any, unit_price: Any) -> Decimal:
    """
    Line amount = quantity x unit price, rounded half-up to 2 places.

    Raises:
        InvalidAmountError: If quantity or unit price is negative.
        ValidationError: If the product is too large to hold at cent precision.
    """
    qty = to_decimal(quantity)
    price = to_decimal(unit_price)
    if qty < 0:
        raise InvalidAmountError("quantity", quantity)
    if price < 0:
        raise InvalidAmountError("unit_price", unit_price)
    amount = qty * price
    try:
        return round_money(amount)
    except ValueError as e:
        raise ValidationError("amount", str(e), value=amount) from e


def compute_document_total(items: Iterable[Any]) -> Decimal:
    """
    Sum of item amounts, rounded half-up to 2 places.

    An empty sequence totals 0.00; deciding whether that deserves a
    warning is up to the caller.
    """
    return round_money(sum((_amount_of(item) for item in items), ZERO))


def group_by_key(records: Iterable[R], key_fn: Callable[[R], K]) -> dict[K, list[R]]:
    """Partition records by key, keeping first-seen key order."""
    groups: dict[K, list[R]] = {}
    for record in records:
        groups.setdefault(key_fn(record), []).append(record)
    return groups


def sum_by_group(
    groups: Mapping[Any, Sequence[R]],
    amount_fn: Callable[[R], Any] = _amount_of,
) -> dict[Any, Decimal]:
    """
    Total each group, then append GRAND TOTAL as the last key.

    Group order is taken from the mapping as given.
    """
    totals: dict[Any, Decimal] = {}
    for key, records in groups.items():
        totals[key] = round_money(sum((to_decimal(amount_fn(r)) for r in records), ZERO))
    totals[GRAND_TOTAL] = round_money(sum(totals.values(), ZERO))
    return totals


def group_tax_entries_by_year(entries: Iterable[R]) -> dict[int, list[R]]:
    """Group tax entries by tax_year, most recent year first."""
    by_year = group_by_key(entries, lambda e: e.tax_year)
    return {year: by_year[year] for year in sorted(by_year, reverse=True)}


def summarize_tax_entries(entries: Iterable[Any]) -> dict[int, dict[str, Decimal]]:
    """
    Category totals per tax year.

    Years descending; categories in first-seen order within each year;
    each year's mapping ends with GRAND TOTAL.
    """
    summary: dict[int, dict[str, Decimal]] = {}
    for year, year_entries in group_tax_entries_by_year(entries).items():
        by_category = group_by_key(year_entries, lambda e: _label(e.category))
        summary[year] = sum_by_group(by_category)
    return summary


def category_totals(records: Iterable[Any]) -> dict[str, Decimal]:
    """Per-category totals in first-seen order, without a GRAND TOTAL key."""
    totals = sum_by_group(group_by_key(records, lambda r: _label(r.category)))
    totals.pop(GRAND_TOTAL)
    return totals


def compute_expense_total(expenses: Iterable[Any]) -> Decimal:
    return compute_document_total(expenses)


def filter_expenses(
    expenses: Iterable[R],
    search: str | None = None,
    category: str | None = None,
    status: Any = None,
) -> list[R]:
    """
    Filter expenses the way the expense list does.

    ``search`` is a case-insensitive substring match on the merchant;
    ``category`` and ``status`` are exact matches. Empty values match all.
    """
    needle = (search or "").strip().lower()
    wanted_status = _label(status) if status else None

    result = []
    for expense in expenses:
        if needle and needle not in expense.merchant.lower():
            continue
        if category and expense.category != category:
            continue
        if wanted_status and _label(expense.status) != wanted_status:
            continue
        result.append(expense)
    return result


def invoice_totals_by_status(invoices: Iterable[Any]) -> dict[str, Decimal]:
    """
    Invoice totals per status, then GRAND TOTAL.

    Every status of the invoice status enum is listed, in enum order,
    even when it has no invoices.
    """
    from ledgerdesk.core.entities.invoice import InvoiceStatus

    invoices = list(invoices)
    groups: dict[str, list[Any]] = {status.value: [] for status in InvoiceStatus}
    for invoice in invoices:
        groups[_label(invoice.status)].append(invoice)
    return sum_by_group(groups, amount_fn=lambda inv: inv.total_amount)
