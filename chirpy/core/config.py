# chirpy/core/config.py
import os
from pydantic import BaseModel, Field

class Settings(BaseModel):
    JWT_SECRET: str = Field(default_factory=lambda: os.getenv("JWT_SECRET", ""))
    POLKA_API_KEY: str = Field(default_factory=lambda: os.getenv("POLKA_API_KEY", ""))
    ALGORITHM: str = "HS256"

    DATABASE_PATH: str = Field(default_factory=lambda: os.getenv("DATABASE_PATH", "database.json"))
    FILESERVER_ROOT: str = Field(default_factory=lambda: os.getenv("FILESERVER_ROOT", "."))

    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")))
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default_factory=lambda: int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "60")))
    # custo do bcrypt; 10 é o default da lib original
    BCRYPT_ROUNDS: int = Field(default_factory=lambda: int(os.getenv("BCRYPT_ROUNDS", "10")))

    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
