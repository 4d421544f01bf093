#Purpose: Settings for the external services the routing adapters talk to.
#Values come from the environment (a local .env file is loaded first).
#Example .env:
#OSRM_BASE_URL=http://router.project-osrm.org
#OSRM_PROFILE=driving
#OVERPASS_URL=https://overpass-api.de/api/interpreter
#HTTP_TIMEOUT_SECONDS=10
#No business logic.

from dotenv import load_dotenv
import os

load_dotenv()

DEFAULT_OSRM_BASE_URL = "https://router.project-osrm.org"
DEFAULT_OVERPASS_URL = "https://overpass-api.de/api/interpreter"


def get_osrm_base_url() -> str:
    """OSRM server root, without a trailing slash."""
    return os.getenv("OSRM_BASE_URL", DEFAULT_OSRM_BASE_URL).rstrip("/")


def get_osrm_profile() -> str:
    return os.getenv("OSRM_PROFILE", "driving")


def get_overpass_url() -> str:
    return os.getenv("OVERPASS_URL", DEFAULT_OVERPASS_URL)


def get_http_timeout() -> float:
    """Seconds to wait for an external service before giving up."""
    raw = os.getenv("HTTP_TIMEOUT_SECONDS", "10")
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}") from None
