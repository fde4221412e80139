import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import CampfireConfigError

GRAPHQL_ENDPOINT = "https://niantic-social-api.nianticlabs.com/graphql"
DEFAULT_TIMEOUT = 10.0
DEFAULT_OUTPUT = "export.csv"

# Large enough to fetch all members in one page
PAGE_SIZE = 10000000000


@dataclass
class Settings:
    endpoint: str = GRAPHQL_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    log_file: Optional[str] = None


def load_settings() -> Settings:
    """
    Read overrides from the environment (and a local .env file, if any).
    """
    load_dotenv()

    raw_timeout = os.getenv("CAMPFIRE_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise CampfireConfigError(f"CAMPFIRE_TIMEOUT must be a number, got {raw_timeout!r}")
        if timeout <= 0:
            raise CampfireConfigError(f"CAMPFIRE_TIMEOUT must be positive, got {raw_timeout!r}")

    return Settings(
        endpoint=os.getenv("CAMPFIRE_GRAPHQL_ENDPOINT") or GRAPHQL_ENDPOINT,
        timeout=timeout,
        log_file=os.getenv("CAMPFIRE_LOG_FILE") or None,
    )
