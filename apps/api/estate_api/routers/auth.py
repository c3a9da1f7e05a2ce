"""Admin sign-in, sign-out and session check."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import auth as schemas
from ..services import auth as auth_service
from ..services.auth import AdminPrincipal, AuthGate
from .deps import get_auth_gate, require_admin

router = APIRouter(prefix="/auth/admin", tags=["auth"])


@router.post("/login", response_model=schemas.LoginResponse)
async def login(
    payload: schemas.LoginRequest,
    response: Response,
    gate: AuthGate = Depends(get_auth_gate),
    session: AsyncSession = Depends(get_session),
) -> schemas.LoginResponse:
    """Exchange an admin credential for a session token (body and HttpOnly cookie)."""

    body, token = await auth_service.login(gate, payload, session)
    response.set_cookie(
        gate.cookie_name,
        token,
        max_age=gate.ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=gate.cookie_secure,
    )
    return body


@router.post("/logout", response_model=schemas.LogoutResponse)
async def logout(response: Response, gate: AuthGate = Depends(get_auth_gate)) -> schemas.LogoutResponse:
    """Drop the session cookie. Tokens are stateless and simply expire."""

    response.delete_cookie(gate.cookie_name)
    return schemas.LogoutResponse(success=True)


@router.get("/verify", response_model=schemas.VerifyResponse)
async def verify(
    principal: AdminPrincipal = Depends(require_admin),
    session: AsyncSession = Depends(get_session),
) -> schemas.VerifyResponse:
    return await auth_service.verify(principal, session)
