# chirpy/models/database.py
from __future__ import annotations
from typing import Dict, Optional

from pydantic import BaseModel, Field

from chirpy.models.user import UserRecord
from chirpy.models.chirp import ChirpRecord


class Database(BaseModel):
    """Documento inteiro: {"users": {...}, "chirps": {...}} com chaves int serializadas como string."""

    users: Dict[int, UserRecord] = Field(default_factory=dict)
    chirps: Dict[int, ChirpRecord] = Field(default_factory=dict)

    def next_chirp_id(self) -> int:
        # menor inteiro positivo livre
        new_id = 1
        while new_id in self.chirps:
            new_id += 1
        return new_id

    def next_user_id(self) -> int:
        # seguro só porque usuários nunca são removidos
        return len(self.users) + 1

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        for u in self.users.values():
            if u.email == email:
                return u
        return None

    def find_user_by_refresh_token(self, token: str) -> Optional[UserRecord]:
        if not token:
            return None
        for u in self.users.values():
            if u.refresh_token == token:
                return u
        return None
