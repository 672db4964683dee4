"""Token issuance."""

from fastapi import APIRouter

from bistro.core.routing import ErrorBoundaryRoute
from bistro.dtos import TokenRequest, TokenResponse
from bistro.services.auth_service import create_access_token

router = APIRouter(tags=["Auth"], route_class=ErrorBoundaryRoute)


@router.post("/jwt", response_model=TokenResponse)
def issue_token(payload: TokenRequest):
    """Sign the posted identity into a short-lived bearer token."""
    return TokenResponse(token=create_access_token(payload.to_document()))
