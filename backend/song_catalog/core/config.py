from pydantic import BaseModel
import os
from pathlib import Path
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()

BACKEND_DIR = Path(__file__).resolve().parent.parent.parent


def _split_origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(',') if o.strip()]


class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "Musik M-O API")
    app_version: str = "1.0.0"
    debug: bool = os.getenv("DEBUG", "0").lower() in ("1", "true", "yes")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3001"))
    # flat JSON document holding the song array; written by something else, only read here
    songs_file: Path = Path(os.getenv("SONGS_FILE", str(BACKEND_DIR / "data" / "songs.json")))
    cors_origins: list[str] = _split_origins(os.getenv("CORS_ORIGINS", "*"))
    log_level: str = os.getenv("LOG_LEVEL", "info")
    contact_name: str = "API Support"
    contact_email: str = "support@musik-mo.dk"

    @property
    def base_url(self) -> str:
        return f"http://localhost:{self.port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
