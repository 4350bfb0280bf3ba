"""Runtime settings.

Importing this module loads a ``.env`` file if present, so lower layers can
read ``settings`` without calling ``load_dotenv`` themselves.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Neo4j
    neo4j_uri: Optional[str] = os.getenv("NEO4J_URI")
    neo4j_user: str = os.getenv("NEO4J_USER", "neo4j")
    neo4j_password: str = os.getenv("NEO4J_PASSWORD", "password")
    use_mock_neo4j: bool = _env_flag("USE_MOCK_NEO4J")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def use_in_memory_store(self) -> bool:
        """True when no Neo4j server is configured or mock mode is forced"""
        return self.use_mock_neo4j or not self.neo4j_uri


settings = Settings()
