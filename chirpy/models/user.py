# chirpy/models/user.py
from __future__ import annotations
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRecord(BaseModel):
    """Linha de usuário como gravada no database.json."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    email: str
    password_hash: str = Field(alias="password")
    refresh_token: str = ""
    refresh_expires_at: datetime = Field(default_factory=_utcnow, alias="RefreshExpiration")
    is_premium: bool = Field(default=False, alias="is_chirpy_red")

    @field_validator("refresh_expires_at")
    @classmethod
    def _as_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    def has_live_refresh_token(self, now: datetime) -> bool:
        return bool(self.refresh_token) and self.refresh_expires_at > now
