"""Auth router - signup and login endpoints"""

from fastapi import APIRouter, Depends

from ...storage import Stores, get_stores
from .schemas import CredentialsRequest, TokenResponse
from .service import AuthService

router = APIRouter(prefix="/api", tags=["Auth"])


def get_auth_service(stores: Stores = Depends(get_stores)) -> AuthService:
    """Dependency injection for AuthService"""
    return AuthService(stores.users)


@router.post("/signup", response_model=TokenResponse)
async def signup(
    data: CredentialsRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Register with email and password; returns a 7-day bearer token"""
    user = await service.register(data.email, data.password)
    return TokenResponse(token=service.issue_token(user), email=user.email)


@router.post("/login", response_model=TokenResponse)
async def login(
    data: CredentialsRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Exchange email and password for a bearer token"""
    user = await service.authenticate(data.email, data.password)
    return TokenResponse(token=service.issue_token(user), email=user.email)
