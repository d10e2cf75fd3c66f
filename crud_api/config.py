"""Application settings and validation."""

import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    ENV: str
    HOST: str
    PORT: int
    LOG_LEVEL: str
    SEED_USERS: list[str]

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "3000"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        raw_seed = os.getenv("SEED_USERS", "Camila,Silva,Sales")
        self.SEED_USERS = [name.strip() for name in raw_seed.split(",") if name.strip()]
        self._validate()

    def _validate(self):
        if not 1 <= self.PORT <= 65535:
            raise RuntimeError(f"PORT must be between 1 and 65535, got {self.PORT}")
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise RuntimeError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")


settings = Settings()
