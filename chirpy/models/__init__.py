from chirpy.models.user import UserRecord
from chirpy.models.chirp import ChirpRecord
from chirpy.models.database import Database

__all__ = ["UserRecord", "ChirpRecord", "Database"]
