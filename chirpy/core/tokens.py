# chirpy/core/tokens.py
from __future__ import annotations

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError

from chirpy.core.errors import AuthError

ALGO = "HS256"
ISSUER = "chirpy"
ACCESS_TOKEN_TTL = timedelta(hours=1)

def _now() -> datetime:
    return datetime.now(timezone.utc)

def create_access_token(user_id: int, secret: str, expires_delta: Optional[timedelta] = None) -> str:
    """Access token curto, assinado com HMAC-SHA256. O sub é o id do usuário."""
    issued = _now()
    payload: Dict[str, Any] = {
        "iss": ISSUER,
        "iat": int(issued.timestamp()),
        "exp": int((issued + (expires_delta or ACCESS_TOKEN_TTL)).timestamp()),
        "sub": str(user_id),
    }
    return jwt.encode(payload, secret, algorithm=ALGO)

def decode_access(token: str, secret: str) -> int:
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGO], issuer=ISSUER)
    except JWTError as exc:
        raise AuthError(str(exc) or "Invalid token") from exc
    if not isinstance(payload, dict):
        raise AuthError("Invalid token")
    sub = payload.get("sub")
    if not isinstance(sub, str) or not (sub.isascii() and sub.isdigit()):
        raise AuthError("Invalid token subject")
    try:
        return int(sub)
    except ValueError as exc:
        raise AuthError("Invalid token subject") from exc

def make_refresh_token() -> str:
    """64 hex chars from 32 random bytes."""
    return secrets.token_hex(32)
