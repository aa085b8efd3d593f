"""Collection configuration - populated once by the hosting harness."""
from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_REGION = "us-east-1"
DEFAULT_SERVICE = "aoss"


class CollectionConfig(BaseModel):
    """Where the search collection lives and how requests to it are signed.

    Handlers take this object explicitly; only the Lambda entry points read
    the environment (see ``from_env``).
    """

    model_config = ConfigDict(frozen=True)

    host: str = ""
    name: str | None = None
    region: str = DEFAULT_REGION
    service: str = DEFAULT_SERVICE
    timeout: float = Field(default=10.0, gt=0)

    @classmethod
    def from_env(cls) -> "CollectionConfig":
        """Build config from COLLECTION_* env vars. Missing host is allowed."""
        values: dict[str, str] = {"host": os.getenv("COLLECTION_HOST", "")}
        optional = {
            "name": "COLLECTION_NAME",
            "region": "COLLECTION_REGION",
            "service": "COLLECTION_SERVICE",
            "timeout": "COLLECTION_TIMEOUT",
        }
        for field_name, env_var in optional.items():
            raw = os.getenv(env_var)
            if raw:
                values[field_name] = raw
        return cls(**values)


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger.

    The Lambda runtime installs its own handler on the root logger, so a
    handler is only added when none exists (local runs).
    """
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s %(message)s")
    root.setLevel(level)
