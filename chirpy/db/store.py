# chirpy/db/store.py
"""Single-file JSON persistence.

Every operation reads the whole document from disk; writers hold the
exclusive lock across load, mutation and the full rewrite. The rewrite goes
through a temp file + fsync + rename so a crash leaves either the old or the
new document, never a torn one. The cost is one extra file per write and a
directory entry swap; the blob format stays the same.
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from chirpy.core.errors import StoreError
from chirpy.db.locks import RWLock
from chirpy.models.database import Database

logger = logging.getLogger(__name__)

FILE_MODE = 0o644


class JSONStore:
    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path)
        self._lock = RWLock()

    def ensure(self) -> bool:
        """Cria o arquivo vazio se não existir. Retorna True se criou."""
        with self._lock.write_locked():
            if self.path.exists():
                logger.info("using existing database at %s", self.path)
                return False
            self._write(Database())
            logger.info("created empty database at %s", self.path)
            return True

    @contextmanager
    def reading(self) -> Iterator[Database]:
        with self._lock.read_locked():
            yield self._load()

    @contextmanager
    def writing(self) -> Iterator[Database]:
        """Yields the loaded document; it is written back only if the block
        exits normally and changed something."""
        with self._lock.write_locked():
            data = self._load()
            before = data.model_dump_json(by_alias=True)
            yield data
            if data.model_dump_json(by_alias=True) != before:
                self._write(data)

    # ------------------------------------------------------------------ io

    def _load(self) -> Database:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            logger.error("failed to read %s: %s", self.path, exc)
            raise StoreError() from exc
        try:
            return Database.model_validate_json(raw)
        except ValidationError as exc:
            logger.error("failed to decode %s: %s", self.path, exc)
            raise StoreError() from exc

    def _write(self, data: Database) -> None:
        payload = data.model_dump_json(by_alias=True).encode("utf-8")
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp, FILE_MODE)
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.error("failed to write %s: %s", self.path, exc)
            raise StoreError() from exc
