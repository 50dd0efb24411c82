# chirpy/models/chirp.py
from pydantic import BaseModel


class ChirpRecord(BaseModel):
    id: int
    author_id: int
    body: str
