import os
from dataclasses import dataclass
from typing import Optional

from .upstream import RAPIDAPI_HOST


@dataclass(frozen=True)
class Settings:
    rapidapi_key: Optional[str] = None
    rapidapi_host: str = RAPIDAPI_HOST
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            rapidapi_key=env.get("RAPIDAPI_KEY") or None,  # missing key -> 500 per request
            rapidapi_host=env.get("RAPIDAPI_HOST", RAPIDAPI_HOST),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT", "5000")),
        )
