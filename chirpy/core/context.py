# chirpy/core/context.py
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import timedelta

from chirpy.core.config import Settings
from chirpy.core.security_password import PasswordHasher
from chirpy.crud.chirp import CRUDChirp
from chirpy.crud.user import CRUDUser
from chirpy.db.store import JSONStore
from chirpy.services.chirps import ChirpService
from chirpy.services.identity import IdentityService


class HitCounter:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def incr(self) -> None:
        with self._lock:
            self._value += 1

    def reset(self) -> None:
        with self._lock:
            self._value = 0

    @property
    def value(self) -> int:
        return self._value


@dataclass
class AppContext:
    """Everything a handler needs, built once per application."""

    settings: Settings
    store: JSONStore
    identity: IdentityService
    chirps: ChirpService
    hits: HitCounter = field(default_factory=HitCounter)


def build_context(settings: Settings) -> AppContext:
    store = JSONStore(settings.DATABASE_PATH)
    hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    users = CRUDUser(store, hasher, refresh_ttl=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS))
    identity = IdentityService(
        users,
        settings.JWT_SECRET,
        access_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return AppContext(
        settings=settings,
        store=store,
        identity=identity,
        chirps=ChirpService(CRUDChirp(store)),
    )
