from dataclasses import dataclass
from dotenv import load_dotenv  # type: ignore
import os
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./data/database.sqlite"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3001
DEFAULT_API_BASE_URL = "http://localhost:3001"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    api_base_url: str = DEFAULT_API_BASE_URL

    @classmethod
    def from_env(cls):
        """Настройки из переменных окружения (и .env) на момент вызова"""
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            api_host=os.getenv("API_HOST", DEFAULT_API_HOST),
            api_port=int(os.getenv("API_PORT", str(DEFAULT_API_PORT))),
            api_base_url=os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
        )
