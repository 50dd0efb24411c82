# chirpy/core/security_password.py
from __future__ import annotations
from passlib.context import CryptContext


class PasswordHasher:
    def __init__(self, rounds: int = 10):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash_password(self, plain: str) -> str:
        return self.pwd_context.hash(plain)

    def verify_password(self, plain: str, stored_hash: str) -> bool:
        if not stored_hash:
            return False
        try:
            return self.pwd_context.verify(plain, stored_hash)
        except ValueError:
            # hash malformado/desconhecido conta como senha errada
            return False
