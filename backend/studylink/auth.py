from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from studylink.config import settings
from studylink.database import get_db
from studylink.errors import AuthenticationRequired
from studylink.models.user import User


security = HTTPBearer(auto_error=False)

ACCESS_PURPOSE = "access"
SIGNIN_PURPOSE = "signin"


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a single request."""

    user_id: int
    email: str


def _sign(payload: str) -> str:
    return hmac.new(settings.auth_secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()


def _create_token(user_id: int, purpose: str, ttl_seconds: int) -> str:
    exp = int(time.time()) + ttl_seconds
    nonce = secrets.token_hex(6)
    payload = f"{purpose}:{user_id}:{exp}:{nonce}"
    token_raw = f"{payload}:{_sign(payload)}".encode("utf-8")
    return base64.urlsafe_b64encode(token_raw).decode("utf-8").rstrip("=")


def _decode_token(token: str, purpose: str) -> int | None:
    if not token:
        return None
    padding = "=" * (-len(token) % 4)
    try:
        decoded = base64.urlsafe_b64decode((token + padding).encode("utf-8")).decode("utf-8")
        token_purpose, user_id_str, exp_str, nonce, signature = decoded.split(":", 4)
    except (ValueError, UnicodeDecodeError):
        return None

    payload = f"{token_purpose}:{user_id_str}:{exp_str}:{nonce}"
    if not hmac.compare_digest(_sign(payload), signature):
        return None
    if token_purpose != purpose:
        return None

    try:
        exp = int(exp_str)
        user_id = int(user_id_str)
    except ValueError:
        return None
    if exp < int(time.time()):
        return None
    return user_id


def create_access_token(user_id: int) -> str:
    return _create_token(user_id, ACCESS_PURPOSE, settings.auth_token_ttl_seconds)


def decode_access_token(token: str) -> int | None:
    return _decode_token(token, ACCESS_PURPOSE)


def create_signin_token(user_id: int) -> str:
    return _create_token(user_id, SIGNIN_PURPOSE, settings.magic_link_ttl_seconds)


def decode_signin_token(token: str) -> int | None:
    return _decode_token(token, SIGNIN_PURPOSE)


def get_optional_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> Principal | None:
    if credentials is None or credentials.scheme.lower() != "bearer":
        return None

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        return None

    user = db.query(User).filter(User.id == user_id, User.deleted_at.is_(None)).first()
    if not user:
        return None
    return Principal(user_id=user.id, email=user.email)


def get_current_principal(principal: Principal | None = Depends(get_optional_principal)) -> Principal:
    if principal is None:
        raise AuthenticationRequired()
    return principal
