# chirpy/schemas/user.py
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class UserCredentials(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    email: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = Field(default=None, min_length=1)


class UserOut(BaseModel):
    """Visão segura: sem hash nem refresh token."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    email: str
    is_premium: bool = Field(default=False, alias="is_chirpy_red")


class SignedUserOut(UserOut):
    token: str
    refresh_token: str


class TokenOut(BaseModel):
    token: str
