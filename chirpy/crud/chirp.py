# chirpy/crud/chirp.py
from __future__ import annotations

from typing import List

from chirpy.core.errors import Forbidden, NotFound
from chirpy.db.store import JSONStore
from chirpy.models.chirp import ChirpRecord


class CRUDChirp:
    def __init__(self, store: JSONStore):
        self.store = store

    def create(self, author_id: int, body: str) -> ChirpRecord:
        with self.store.writing() as data:
            if author_id not in data.users:
                raise NotFound("Author does not exist")
            chirp = ChirpRecord(id=data.next_chirp_id(), author_id=author_id, body=body)
            data.chirps[chirp.id] = chirp
        return chirp

    def get(self, id: int) -> ChirpRecord:
        with self.store.reading() as data:
            chirp = data.chirps.get(id)
        if chirp is None:
            raise NotFound("That chirp does not exist")
        return chirp

    def get_multi(self) -> List[ChirpRecord]:
        with self.store.reading() as data:
            return list(data.chirps.values())

    def remove(self, id: int, requesting_user_id: int) -> ChirpRecord:
        with self.store.writing() as data:
            chirp = data.chirps.get(id)
            if chirp is None:
                raise NotFound("That chirp does not exist")
            if chirp.author_id != requesting_user_id:
                raise Forbidden()
            del data.chirps[id]
        return chirp
