# chirpy/api/routes/auth.py
from fastapi import APIRouter, Depends, Response

from chirpy.api.deps import get_bearer_token, get_ctx
from chirpy.core.context import AppContext
from chirpy.schemas.user import SignedUserOut, TokenOut, UserCredentials

router = APIRouter()

@router.post("/login", response_model=SignedUserOut)
def login(body: UserCredentials, ctx: AppContext = Depends(get_ctx)):
    return ctx.identity.login(body.email, body.password)

# refresh/revoke recebem o refresh token no header Bearer
@router.post("/refresh", response_model=TokenOut)
def refresh(token: str = Depends(get_bearer_token), ctx: AppContext = Depends(get_ctx)):
    return ctx.identity.refresh(token)

@router.post("/revoke", status_code=204)
def revoke(token: str = Depends(get_bearer_token), ctx: AppContext = Depends(get_ctx)):
    ctx.identity.revoke(token)
    return Response(status_code=204)
