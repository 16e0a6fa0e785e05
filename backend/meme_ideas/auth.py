"""
Caller identity for protected routes.

Credentials are issued elsewhere; this module only verifies a bearer JWT
and turns it into an explicit ``CallerContext`` that routes pass into every
service call. A request without an Authorization header produces an
anonymous context, and the service layer decides that it is unauthenticated.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import jwt
from dotenv import load_dotenv
from fastapi import Header

from meme_ideas.errors import UnauthenticatedError

load_dotenv()


@dataclass(frozen=True)
class UserIdentity:
    id: str
    email: Optional[str] = None


@dataclass(frozen=True)
class CallerContext:
    user: Optional[UserIdentity] = None


_DEV_JWT_SECRET = "dev-only-secret-change-me-before-deploying"


def jwt_secret() -> str:
    # Development default; set JWT_SECRET in production.
    return os.getenv("JWT_SECRET", _DEV_JWT_SECRET).strip() or _DEV_JWT_SECRET


def jwt_algorithm() -> str:
    return os.getenv("JWT_ALG", "HS256").strip() or "HS256"


def decode_access_token(token: str) -> Dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise UnauthenticatedError("Access token is empty.")

    try:
        payload = jwt.decode(raw, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        raise UnauthenticatedError("Invalid access token.") from exc

    subject = str(payload.get("sub") or "").strip()
    if not subject:
        raise UnauthenticatedError("Access token has no subject.")
    return payload


def _extract_bearer_token(authorization: str) -> str:
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2:
        raise UnauthenticatedError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise UnauthenticatedError("Authorization must be: Bearer <token>.")
    return token


def get_caller_context(authorization: Optional[str] = Header(default=None)) -> CallerContext:
    """FastAPI dependency: resolve the caller from the Authorization header."""
    if not authorization or not authorization.strip():
        return CallerContext(user=None)

    payload = decode_access_token(_extract_bearer_token(authorization))
    email = payload.get("email")
    return CallerContext(
        user=UserIdentity(id=str(payload["sub"]).strip(), email=str(email) if email else None)
    )
