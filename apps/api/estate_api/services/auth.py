"""Admin authentication gate backed by signed session tokens."""
from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from datetime import timedelta

from fastapi import Request
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from ..core.config import Settings
from ..core.errors import AuthError, ValidationFailed, field_error, http_exception_handler
from ..core.security import TokenError, create_session_token, decode_session_token, verify_password
from ..models.user import User, UserRole
from ..repositories import common as records_repo
from ..repositories import users as users_repo
from ..schemas import auth as schemas

logger = logging.getLogger(__name__)

CONFIG_SUBJECT_PREFIX = "config:"
ADMIN_ROLE = UserRole.ADMIN.value


@dataclass(frozen=True, slots=True)
class AdminPrincipal:
    """Identity carried by a verified admin session."""

    subject: str
    username: str
    first_name: str | None = None
    last_name: str | None = None

    @property
    def is_database_user(self) -> bool:
        return not self.subject.startswith(CONFIG_SUBJECT_PREFIX)

    def to_schema(self) -> schemas.AdminUser:
        return schemas.AdminUser(
            id=self.subject,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            role=ADMIN_ROLE,
        )


class AuthGate:
    """Issues admin session tokens and checks them on every admin request."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._ttl = timedelta(minutes=settings.session_ttl_minutes)

    @property
    def cookie_name(self) -> str:
        return self._settings.session_cookie_name

    @property
    def cookie_secure(self) -> bool:
        return self._settings.session_cookie_secure

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    async def authenticate(self, session: AsyncSession, username: str, password: str) -> AdminPrincipal | None:
        """Check a credential against the configured admin, then database admins."""

        if hmac.compare_digest(username.encode(), self._settings.admin_username.encode()) and verify_password(
            password, self._settings.admin_password_hash
        ):
            return AdminPrincipal(subject=f"{CONFIG_SUBJECT_PREFIX}{username}", username=username)

        user = await users_repo.find_admin_by_login(session, username)
        if user is not None and verify_password(password, user.password_hash):
            return _principal_from_user(user)
        return None

    def issue_token(self, principal: AdminPrincipal) -> str:
        claims = {
            "sub": principal.subject,
            "username": principal.username,
            "role": ADMIN_ROLE,
        }
        if principal.first_name:
            claims["first_name"] = principal.first_name
        if principal.last_name:
            claims["last_name"] = principal.last_name
        return create_session_token(claims, secret=self._settings.session_secret, expires_delta=self._ttl)

    def verify_token(self, token: str) -> AdminPrincipal:
        try:
            claims = decode_session_token(token, secret=self._settings.session_secret)
        except TokenError as exc:
            logger.info("Rejected admin token: %s", exc)
            raise AuthError("Invalid or expired session") from exc

        subject = claims.get("sub")
        if not subject or claims.get("role") != ADMIN_ROLE:
            raise AuthError("Invalid session")
        return AdminPrincipal(
            subject=str(subject),
            username=str(claims.get("username") or subject),
            first_name=claims.get("first_name"),
            last_name=claims.get("last_name"),
        )

    def extract_token(self, request: Request) -> str | None:
        """Prefer an ``Authorization: Bearer`` header, fall back to the session cookie."""

        scheme, credentials = get_authorization_scheme_param(request.headers.get("Authorization"))
        if scheme.lower() == "bearer" and credentials:
            return credentials
        return request.cookies.get(self.cookie_name) or None

    def require_admin(self, request: Request) -> AdminPrincipal:
        """Return the caller's principal or raise ``AuthError``. Never touches the store."""

        token = self.extract_token(request)
        if not token:
            raise AuthError()
        return self.verify_token(token)


async def login(
    gate: AuthGate,
    payload: schemas.LoginRequest,
    session: AsyncSession,
) -> tuple[schemas.LoginResponse, str]:
    """Validate a credential and return the response body plus the issued token."""

    errors = []
    if not payload.username or not payload.username.strip():
        errors.append(field_error("username", "Username is required"))
    if not payload.password:
        errors.append(field_error("password", "Password is required"))
    if errors:
        raise ValidationFailed(errors, message="Username and password are required")

    username = payload.username.strip()
    principal = await gate.authenticate(session, username, payload.password)
    if principal is None:
        logger.warning("Failed admin login for %r", username)
        raise AuthError("Invalid username or password")

    token = gate.issue_token(principal)
    logger.info("Admin %s signed in", principal.username)
    return schemas.LoginResponse(success=True, token=token, user=principal.to_schema()), token


async def verify(principal: AdminPrincipal, session: AsyncSession) -> schemas.VerifyResponse:
    """Confirm a session is still backed by an active admin account."""

    if principal.is_database_user:
        user = await records_repo.get_by_id(session, User, principal.subject)
        if user is None or user.role != UserRole.ADMIN or not user.is_active:
            raise AuthError("Invalid session")
        principal = _principal_from_user(user)
    return schemas.VerifyResponse(authenticated=True, user=principal.to_schema())


def _principal_from_user(user: User) -> AdminPrincipal:
    return AdminPrincipal(
        subject=user.id,
        username=user.username or user.email or user.id,
        first_name=user.first_name,
        last_name=user.last_name,
    )


class AdminGateMiddleware(BaseHTTPMiddleware):
    """Answer 401 for admin paths without a valid session, before the body is decoded."""

    def __init__(self, app, *, path_prefix: str) -> None:
        super().__init__(app)
        self._prefix = path_prefix.rstrip("/")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if request.method != "OPTIONS" and (path == self._prefix or path.startswith(self._prefix + "/")):
            gate: AuthGate = request.app.state.auth_gate
            try:
                gate.require_admin(request)
            except AuthError as exc:
                return await http_exception_handler(request, exc)
        return await call_next(request)
