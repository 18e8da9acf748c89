from fastapi import APIRouter, Depends, status

from MIP.api.dependencies import get_auth_service, get_bearer_token, get_current_user
from MIP.api.schemas import AuthResponse, LoginRequest, MessageResponse, SignupRequest, UserResponse
from packages.mip_auth.dto import User
from packages.mip_auth.service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: SignupRequest, service: AuthService = Depends(get_auth_service)):
    """
    Register a new user and issue a token.
    Email confirmation is not part of this service.
    """
    user, token = service.signup(payload.email, payload.password, payload.name)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    user, token = service.login(payload.email, payload.password)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return UserResponse.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
def logout(
    token: str = Depends(get_bearer_token),
    user: User = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    service.logout(token)
    return MessageResponse(message="Logged out successfully")
