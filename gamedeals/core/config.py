import os

from dotenv import load_dotenv


load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Runtime configuration read from the environment (and a local .env file)."""

    def __init__(self) -> None:
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./games.db")
        self.SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO", "False"))

        self.CHEAPSHARK_API: str = os.getenv(
            "CHEAPSHARK_API",
            "https://www.cheapshark.com/api/1.0/games?id=612",
        )
        self.CHEAPSHARK_TIMEOUT: float = float(os.getenv("CHEAPSHARK_TIMEOUT", "10"))

        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "8000"))
        self.RELOAD: bool = _as_bool(os.getenv("RELOAD", "False"))

        self.SSL_KEY_PATH: str = os.getenv("SSL_KEY_PATH", "ssl/server.key")
        self.SSL_CERT_PATH: str = os.getenv("SSL_CERT_PATH", "ssl/server.cert")

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.CORS_ORIGINS: list[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]


settings = Settings()
