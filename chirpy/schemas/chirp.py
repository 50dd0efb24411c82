# chirpy/schemas/chirp.py
from pydantic import BaseModel


class ChirpCreate(BaseModel):
    body: str


class ChirpOut(BaseModel):
    id: int
    author_id: int
    body: str

    model_config = {"from_attributes": True}
