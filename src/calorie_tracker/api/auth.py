"""Authentication endpoints and the bearer token dependency."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from calorie_tracker.api.models import LoginRequest, SignupRequest
from calorie_tracker.services.errors import (
    InvalidCredentialsError,
    InvalidTokenError,
    UserAlreadyExistsError,
)
from calorie_tracker.services.tokens import TokenService  # noqa: TC001

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer
    from calorie_tracker.domain.models import UserRecord

TOKEN_COOKIE_NAME = "authToken"

router = APIRouter(prefix="/api/auth", tags=["auth"])
_logger = logging.getLogger(__name__)


def _get_token_service(request: Request) -> TokenService:
    container: AppContainer = request.app.state.container
    return container.token_service


def _extract_token(request: Request, authorization: str | None) -> str | None:
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
        return token or None
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
    token_service: TokenService = Depends(_get_token_service),
) -> UUID:
    """Return the id of the user identified by the bearer token."""
    token = _extract_token(request, authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    try:
        claims = token_service.verify(token)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        ) from None
    return claims.user_id


@router.post("/signup")
async def signup(payload: SignupRequest, request: Request) -> dict[str, object]:
    """Register a user and return a bearer token."""
    container: AppContainer = request.app.state.container
    try:
        user = container.user_service.register(
            payload.name, payload.email, payload.password
        )
    except UserAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists"
        ) from None
    return _auth_response(container, user)


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Check credentials and return a bearer token."""
    container: AppContainer = request.app.state.container
    try:
        user = container.user_service.authenticate(payload.email, payload.password)
    except InvalidCredentialsError:
        _logger.info("Rejected login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        ) from None
    return _auth_response(container, user)


@router.get("/verify")
async def verify(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Report whether the caller's token is valid."""
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    return {"authenticated": True, "user": _serialize_user(user)}


def _auth_response(container: AppContainer, user: UserRecord) -> dict[str, object]:
    return {
        "token": container.token_service.issue(user),
        "user": _serialize_user(user),
    }


def _serialize_user(user: UserRecord) -> dict[str, object]:
    return {"id": str(user.id), "name": user.name, "email": user.email}
