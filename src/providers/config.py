import os
import logging
from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger("flicky.providers.config")

DEFAULT_TIMEOUT = 10


def _timeout(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        return int(raw)
    except ValueError:
        log.warning("PROVIDER_TIMEOUT=%r is not an integer, using %d", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT


IWAATCH_BASE_URL = os.getenv("IWAATCH_BASE_URL", "https://iwaatch.com").rstrip("/")
PROVIDER_TIMEOUT = _timeout(os.getenv("PROVIDER_TIMEOUT"))
PROVIDER_PROXY = os.getenv("PROVIDER_PROXY") or None
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
