# chirpy/api/routes/chirps.py
from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from chirpy.api.deps import get_ctx, get_current_user_id
from chirpy.core.context import AppContext
from chirpy.core.errors import NotFound
from chirpy.schemas.chirp import ChirpCreate, ChirpOut
from chirpy.services.chirps import parse_author_id

router = APIRouter()

def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise NotFound("Invalid ID")

@router.post("", response_model=ChirpOut, status_code=201)
def create_chirp(
    body: ChirpCreate,
    user_id: int = Depends(get_current_user_id),
    ctx: AppContext = Depends(get_ctx),
):
    return ctx.chirps.create(user_id, body.body)

@router.get("", response_model=List[ChirpOut])
def list_chirps(
    author_id: Optional[str] = Query(None),
    sort: Optional[str] = Query(None, description="asc (default) ou desc"),
    ctx: AppContext = Depends(get_ctx),
):
    return ctx.chirps.list(author_id=parse_author_id(author_id), sort=sort)

@router.get("/{chirp_id}", response_model=ChirpOut)
def get_chirp(chirp_id: str, ctx: AppContext = Depends(get_ctx)):
    return ctx.chirps.get(_parse_id(chirp_id))

@router.delete("/{chirp_id}", status_code=204)
def delete_chirp(
    chirp_id: str,
    user_id: int = Depends(get_current_user_id),
    ctx: AppContext = Depends(get_ctx),
):
    ctx.chirps.delete(_parse_id(chirp_id), user_id)
    return Response(status_code=204)
