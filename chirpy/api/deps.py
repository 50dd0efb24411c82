import hmac

from fastapi import Depends, Header, Request

from chirpy.core.context import AppContext
from chirpy.core.errors import AuthError

def get_ctx(request: Request) -> AppContext:
    return request.app.state.ctx

# ----------------------------------------------------------------------
# Authorization: "Bearer <token>" ou "ApiKey <key>"; a primeira palavra
# escolhe o modo
# ----------------------------------------------------------------------
def _split_authorization(authorization: str | None, scheme: str) -> str:
    if not authorization:
        raise AuthError("Missing Authorization header")
    parts = authorization.split()
    if len(parts) != 2 or parts[0] != scheme:
        raise AuthError("Unauthorized")
    return parts[1]

def get_bearer_token(authorization: str | None = Header(None, alias="Authorization")) -> str:
    return _split_authorization(authorization, "Bearer")

def get_current_user_id(
    token: str = Depends(get_bearer_token),
    ctx: AppContext = Depends(get_ctx),
) -> int:
    return ctx.identity.authenticate(token)

def require_polka_key(
    authorization: str | None = Header(None, alias="Authorization"),
    ctx: AppContext = Depends(get_ctx),
) -> None:
    key = _split_authorization(authorization, "ApiKey")
    expected = ctx.settings.POLKA_API_KEY
    if not expected or not hmac.compare_digest(key.encode(), expected.encode()):
        raise AuthError("Unauthorized")
