"""
Maintenance API Routes - Internal Housekeeping Endpoints

Authentication is via Admin API Key, not principal JWTs.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.maintenance import (
    PurgeExpiredResetTokensResponse,
    PurgeExpiredResetTokensUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/internal", tags=["Maintenance"])


@router.post(
    "/reset-tokens/purge",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredResetTokensResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_reset_tokens(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Reset Tokens

    Clears expired reset tokens for users and admins. Expired tokens are
    already unusable; this only removes the stale digests.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = PurgeExpiredResetTokensUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
