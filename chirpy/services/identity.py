# chirpy/services/identity.py
"""Accounts and sessions: registration, login, refresh/revoke, profile
updates and the premium entitlement."""
from __future__ import annotations

import logging
from datetime import timedelta

from chirpy.core.errors import AuthError, NotFound, ValidationFailed
from chirpy.core.tokens import create_access_token, decode_access
from chirpy.crud.user import CRUDUser
from chirpy.models.user import UserRecord
from chirpy.schemas.user import SignedUserOut, TokenOut, UserOut

logger = logging.getLogger(__name__)

UPGRADE_EVENT = "user.upgraded"


def _to_out(u: UserRecord) -> UserOut:
    return UserOut(id=u.id, email=u.email, is_premium=u.is_premium)


class IdentityService:
    def __init__(self, users: CRUDUser, jwt_secret: str, access_ttl: timedelta | None = None):
        self.users = users
        self.jwt_secret = jwt_secret
        self.access_ttl = access_ttl

    def _issue(self, user_id: int) -> str:
        return create_access_token(user_id, self.jwt_secret, expires_delta=self.access_ttl)

    def authenticate(self, access_token: str) -> int:
        return decode_access(access_token, self.jwt_secret)

    def register(self, email: str, password: str) -> UserOut:
        if not email or not password:
            raise ValidationFailed("Email and password are required")
        user = self.users.create(email, password)
        logger.info("registered user %s", user.id)
        return _to_out(user)

    def login(self, email: str, password: str) -> SignedUserOut:
        try:
            user, ok = self.users.verify_credentials(email, password)
        except NotFound:
            ok = False
        if not ok:
            # e-mail inexistente e senha errada dão a mesma resposta
            logger.info("rejected login attempt")
            raise AuthError("Unauthorized")
        return SignedUserOut(
            id=user.id,
            email=user.email,
            is_premium=user.is_premium,
            token=self._issue(user.id),
            refresh_token=user.refresh_token,
        )

    def refresh(self, refresh_token: str) -> TokenOut:
        try:
            user = self.users.get_by_refresh_token(refresh_token)
        except NotFound as exc:
            raise AuthError(exc.message) from exc
        return TokenOut(token=self._issue(user.id))

    def revoke(self, refresh_token: str) -> None:
        try:
            self.users.revoke_refresh_token(refresh_token)
        except NotFound as exc:
            raise AuthError(exc.message) from exc
        logger.info("revoked a refresh token")

    def update_profile(self, access_token: str, *, email: str | None = None, password: str | None = None) -> UserOut:
        user_id = self.authenticate(access_token)
        try:
            user = self.users.update(user_id, email=email, password=password)
        except NotFound as exc:
            # token válido para usuário que não existe mais no arquivo
            raise AuthError(exc.message) from exc
        return _to_out(user)

    def handle_webhook(self, event: str, user_id: int) -> bool:
        """Returns True when the event changed state, False when ignored.
        Unknown user ids raise NotFound."""
        if event != UPGRADE_EVENT:
            return False
        self.users.upgrade_premium(user_id)
        logger.info("upgraded user %s to premium", user_id)
        return True
