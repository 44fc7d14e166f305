"""Company profile endpoints."""

from fastapi import APIRouter, Depends

from ledgerdesk.api.dependencies import get_profile_store, get_user_context
from ledgerdesk.application.dto.requests import CompanyProfileRequest
from ledgerdesk.application.dto.responses import CompanyProfileResponse, ErrorResponse
from ledgerdesk.core.entities.company import CompanyProfile
from ledgerdesk.core.entities.context import UserContext
from ledgerdesk.core.exceptions import CompanyProfileNotFoundError
from ledgerdesk.infrastructure.storage.sqlite import SQLiteCompanyProfileStore

router = APIRouter(prefix="/api/company-profile", tags=["company"])


def _entity_to_response(profile: CompanyProfile) -> CompanyProfileResponse:
    return CompanyProfileResponse(
        id=profile.id,
        company_name=profile.company_name,
        logo_url=profile.logo_url,
        address=profile.address,
        email=profile.email,
        phone=profile.phone,
        tax_id=profile.tax_id,
        business_type=profile.business_type.value,
    )


@router.get(
    "",
    response_model=CompanyProfileResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_company_profile(
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteCompanyProfileStore = Depends(get_profile_store),
) -> CompanyProfileResponse:
    profile = await store.get_profile(ctx)
    if profile is None:
        raise CompanyProfileNotFoundError(ctx.user_id)
    return _entity_to_response(profile)


@router.put("", response_model=CompanyProfileResponse)
async def save_company_profile(
    request: CompanyProfileRequest,
    ctx: UserContext = Depends(get_user_context),
    store: SQLiteCompanyProfileStore = Depends(get_profile_store),
) -> CompanyProfileResponse:
    """Create or replace the caller's profile."""
    profile = await store.upsert_profile(ctx, CompanyProfile(**request.model_dump()))
    return _entity_to_response(profile)
