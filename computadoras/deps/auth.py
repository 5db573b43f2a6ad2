from __future__ import annotations

import hmac

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

bearer_scheme = HTTPBearer(auto_error=False)


class AuthContext:
    def __init__(self, *, subject: str, scheme: str) -> None:
        self.subject = subject
        self.scheme = scheme


def _unauthorized(detail: str) -> None:
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _set_principal(request: Request, principal: str) -> None:
    request.state.principal = principal


async def require_bearer(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthContext:
    """Accept the request's bearer token.

    With ``API_TOKEN`` configured the token must match it. Without it the token
    is only recorded for the access log.
    """

    expected = request.app.state.settings.API_TOKEN
    token = credentials.credentials.strip() if credentials else ""

    if expected:
        if not token:
            _unauthorized("Authorization required")
        if not hmac.compare_digest(expected.encode(), token.encode()):
            _unauthorized("Invalid bearer token")
        _set_principal(request, "api-token")
        return AuthContext(subject="api-token", scheme="bearer")

    if token:
        _set_principal(request, "bearer")
        return AuthContext(subject="bearer", scheme="bearer")
    _set_principal(request, "anonymous")
    return AuthContext(subject="anonymous", scheme="open")
