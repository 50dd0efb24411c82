# chirpy/api/static.py
from __future__ import annotations

import os
from typing import Iterable

from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


class PublicFiles(StaticFiles):
    """StaticFiles que nunca entrega os arquivos listados em `hidden`
    (o database.json e o .tmp da escrita atômica)."""

    def __init__(self, *, hidden: Iterable[str | os.PathLike[str]] = (), **kwargs):
        super().__init__(**kwargs)
        self.hidden = {os.path.realpath(p) for p in hidden}

    async def get_response(self, path: str, scope: Scope):
        if self.directory is not None:
            full = os.path.realpath(os.path.join(self.directory, path))
            if full in self.hidden:
                raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
