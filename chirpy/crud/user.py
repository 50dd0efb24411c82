# chirpy/crud/user.py
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Tuple

from chirpy.core.errors import EmailTaken, NotFound, RefreshTokenExpired
from chirpy.core.security_password import PasswordHasher
from chirpy.core.tokens import make_refresh_token
from chirpy.db.store import JSONStore
from chirpy.models.database import Database
from chirpy.models.user import UserRecord

logger = logging.getLogger(__name__)

REFRESH_TOKEN_TTL = timedelta(days=60)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CRUDUser:
    def __init__(self, store: JSONStore, hasher: PasswordHasher, refresh_ttl: timedelta = REFRESH_TOKEN_TTL):
        self.store = store
        self.hasher = hasher
        self.refresh_ttl = refresh_ttl

    def create(self, email: str, password: str) -> UserRecord:
        # hash fora do lock: bcrypt é lento e não depende do estado
        hashed = self.hasher.hash_password(password)
        with self.store.writing() as data:
            if data.find_user_by_email(email) is not None:
                raise EmailTaken()
            user = UserRecord(
                id=data.next_user_id(),
                email=email,
                password_hash=hashed,
                refresh_token="",
                refresh_expires_at=_now(),
                is_premium=False,
            )
            data.users[user.id] = user
        return user

    def update(self, id: int, *, email: str | None = None, password: str | None = None) -> UserRecord:
        hashed = self.hasher.hash_password(password) if password is not None else None
        with self.store.writing() as data:
            user = data.users.get(id)
            if user is None:
                raise NotFound("User not found")
            if email is not None and email != user.email:
                other = data.find_user_by_email(email)
                if other is not None and other.id != id:
                    raise EmailTaken()
                user.email = email
            if hashed is not None:
                user.password_hash = hashed
        return user

    def get(self, id: int) -> UserRecord:
        with self.store.reading() as data:
            user = data.users.get(id)
        if user is None:
            raise NotFound("User not found")
        return user

    def get_by_email(self, email: str) -> UserRecord:
        with self.store.reading() as data:
            user = data.find_user_by_email(email)
        if user is None:
            raise NotFound("Email does not exist")
        return user

    def get_by_refresh_token(self, token: str) -> UserRecord:
        with self.store.reading() as data:
            user = data.find_user_by_refresh_token(token)
        if user is None:
            raise NotFound("Token does not exist")
        if not user.has_live_refresh_token(_now()):
            raise RefreshTokenExpired()
        return user

    def verify_credentials(self, email: str, password: str) -> Tuple[UserRecord, bool]:
        """Checks the password and, on success, issues a refresh token when the
        user has none or it is stale. Everything runs under one exclusive
        lock so the check and the rotation are a single atomic step."""
        with self.store.writing() as data:
            user = data.find_user_by_email(email)
            if user is None:
                raise NotFound("Email does not exist")
            if not self.hasher.verify_password(password, user.password_hash):
                # nada mudou, writing() não regrava o arquivo
                return user, False
            now = _now()
            if not user.has_live_refresh_token(now):
                self._rotate_refresh_token(data, user, now)
        return user, True

    def _rotate_refresh_token(self, data: Database, user: UserRecord, now: datetime) -> None:
        token = make_refresh_token()
        while data.find_user_by_refresh_token(token) is not None:
            token = make_refresh_token()
        user.refresh_token = token
        user.refresh_expires_at = now + self.refresh_ttl
        logger.info("issued refresh token for user %s", user.id)

    def revoke_refresh_token(self, token: str) -> None:
        with self.store.writing() as data:
            user = data.find_user_by_refresh_token(token)
            if user is None:
                raise NotFound("Token does not exist")
            user.refresh_token = ""
            user.refresh_expires_at = _now()

    def upgrade_premium(self, id: int) -> None:
        with self.store.writing() as data:
            user = data.users.get(id)
            if user is None:
                raise NotFound("User not found")
            user.is_premium = True
