"""Company profile entity (the business behind the documents)."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


class BusinessType(str, Enum):
    SOLE_PROPRIETORSHIP = "sole-proprietorship"
    PARTNERSHIP = "partnership"
    LLC = "llc"
    CORPORATION = "corporation"


class CompanyProfile(BaseModel):
    """
    One profile per user.

    Used read-only as the header block of generated documents. Optional
    text fields are normalized so that blank strings read as absent.
    """

    id: int | None = None
    user_id: str | None = None

    company_name: str = ""
    logo_url: str | None = None
    address: str | None = None
    email: str | None = None
    phone: str | None = None
    tax_id: str | None = None
    business_type: BusinessType = BusinessType.SOLE_PROPRIETORSHIP

    @field_validator("company_name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("logo_url", "address", "email", "phone", "tax_id", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> str | None:
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("business_type", mode="before")
    @classmethod
    def default_business_type(cls, v: Any) -> Any:
        if v is None or v == "":
            return BusinessType.SOLE_PROPRIETORSHIP
        return v
