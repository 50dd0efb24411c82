# chirpy/services/chirps.py
from __future__ import annotations

from typing import List, Optional

from chirpy.core.errors import AuthError, NotFound, ValidationFailed
from chirpy.crud.chirp import CRUDChirp
from chirpy.schemas.chirp import ChirpOut

MAX_CHIRP_LENGTH = 140
PROFANE_WORDS = {"kerfuffle", "sharbert", "fornax"}
CENSORED = "****"


def clean_chirp(body: str) -> str:
    words = body.split()
    if not any(w.lower() in PROFANE_WORDS for w in words):
        return body
    return " ".join(CENSORED if w.lower() in PROFANE_WORDS else w for w in words)


def parse_author_id(raw: Optional[str]) -> Optional[int]:
    """None when absent; unparsable values become 0, which matches nothing."""
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return 0


class ChirpService:
    def __init__(self, chirps: CRUDChirp):
        self.chirps = chirps

    def create(self, author_id: int, body: str) -> ChirpOut:
        # tamanho em bytes, não em code points
        if len(body.encode("utf-8")) > MAX_CHIRP_LENGTH:
            raise ValidationFailed("Chirp is too long")
        try:
            c = self.chirps.create(author_id, clean_chirp(body))
        except NotFound as exc:
            raise AuthError(exc.message) from exc
        return ChirpOut.model_validate(c)

    def get(self, id: int) -> ChirpOut:
        return ChirpOut.model_validate(self.chirps.get(id))

    def list(self, author_id: Optional[int] = None, sort: Optional[str] = None) -> List[ChirpOut]:
        rows = self.chirps.get_multi()
        if author_id is not None:
            rows = [c for c in rows if c.author_id == author_id]
        rows.sort(key=lambda c: c.id, reverse=(sort == "desc"))
        return [ChirpOut.model_validate(c) for c in rows]

    def delete(self, id: int, requesting_user_id: int) -> None:
        self.chirps.remove(id, requesting_user_id)
