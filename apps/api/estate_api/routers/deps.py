"""Shared router dependencies."""
from __future__ import annotations

from fastapi import Request

from ..services.auth import AdminPrincipal, AuthGate


def get_auth_gate(request: Request) -> AuthGate:
    return request.app.state.auth_gate


async def require_admin(request: Request) -> AdminPrincipal:
    """Reject the request with 401 unless it carries a valid admin session."""

    return get_auth_gate(request).require_admin(request)
