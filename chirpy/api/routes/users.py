# chirpy/api/routes/users.py
from fastapi import APIRouter, Depends

from chirpy.api.deps import get_bearer_token, get_ctx
from chirpy.core.context import AppContext
from chirpy.schemas.user import UserCredentials, UserOut, UserUpdate

router = APIRouter()

@router.post("", response_model=UserOut, status_code=201)
def create_user(body: UserCredentials, ctx: AppContext = Depends(get_ctx)):
    return ctx.identity.register(body.email, body.password)

@router.put("", response_model=UserOut)
def update_user(
    body: UserUpdate,
    token: str = Depends(get_bearer_token),
    ctx: AppContext = Depends(get_ctx),
):
    return ctx.identity.update_profile(token, email=body.email, password=body.password)
