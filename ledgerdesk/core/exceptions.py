"""
Domain exceptions for LedgerDesk.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all LedgerDesk errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(LedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidAmountError(ValidationError):
    """A quantity, price or amount is negative or below its minimum."""

    def __init__(self, field: str, value: Any, minimum: str = "0"):
        super().__init__(
            field=field,
            message=f"must be greater than or equal to {minimum}",
            value=value,
        )
        self.code = "INVALID_AMOUNT"
        self.details["minimum"] = minimum


# Export Exceptions
class ExportError(LedgerError):
    """Base exception for document export."""

    pass


class NoRecordsToExportError(ExportError):
    """An export was requested for an empty record collection."""

    def __init__(self, document_kind: str):
        super().__init__(
            f"No records to export for {document_kind}",
            code="NO_RECORDS_TO_EXPORT",
            details={"document_kind": document_kind},
        )


class RenderFailureError(ExportError):
    """The document renderer raised while painting or serializing."""

    def __init__(self, reason: str, block_kind: str | None = None):
        super().__init__(
            f"Document rendering failed: {reason}",
            code="RENDER_FAILURE",
            details={"reason": reason, "block_kind": block_kind},
        )


# Storage Exceptions
class StorageError(LedgerError):
    """Base exception for storage operations."""

    pass


class InvoiceNotFoundError(StorageError):
    """Invoice not found in storage."""

    def __init__(self, invoice_id: int):
        super().__init__(
            f"Invoice not found: {invoice_id}",
            code="INVOICE_NOT_FOUND",
            details={"invoice_id": invoice_id},
        )


class TaxEntryNotFoundError(StorageError):
    """Tax entry not found in storage."""

    def __init__(self, entry_id: int):
        super().__init__(
            f"Tax entry not found: {entry_id}",
            code="TAX_ENTRY_NOT_FOUND",
            details={"entry_id": entry_id},
        )


class ExpenseNotFoundError(StorageError):
    """Expense not found in storage."""

    def __init__(self, expense_id: int):
        super().__init__(
            f"Expense not found: {expense_id}",
            code="EXPENSE_NOT_FOUND",
            details={"expense_id": expense_id},
        )


class CompanyProfileNotFoundError(StorageError):
    """The user has not saved a company profile yet."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Company profile not found for user: {user_id}",
            code="COMPANY_PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class DuplicateInvoiceNumberError(StorageError):
    """Invoice number already used by this user."""

    def __init__(self, invoice_number: str):
        super().__init__(
            f"Invoice number already exists: {invoice_number}",
            code="DUPLICATE_INVOICE_NUMBER",
            details={"invoice_number": invoice_number},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class ConfigurationError(LedgerError):
    """Configuration error."""

    pass
