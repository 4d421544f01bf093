#Purpose: The OSRM "adapter/client" for road routes.
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route)
#error handling
#parsing the GeoJSON geometry back into internal (lat, lon)
#The tour engine never calls this; it is handed the already ordered waypoints.

from dataclasses import dataclass, field
import logging
from typing import List, Optional

import requests

from routing import config
from waypoints.models import LatLon

logger = logging.getLogger(__name__)


class OSRMError(Exception):
    """Custom exception for OSRM client errors."""
    pass


@dataclass(frozen=True)
class RouteResult:
    """
    A road route through the given stops.
    polyline is in (lat, lon) order, distance in meters, duration in seconds.
    """
    polyline: List[LatLon] = field(default_factory=list)
    distance_m: float = 0.0
    duration_s: float = 0.0


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat) and back
    - Return normalized outputs

    """
    def __init__(self,
                 base_url: Optional[str] = None,
                 profile: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.base_url = (base_url or config.get_osrm_base_url()).rstrip("/")
        self.profile = profile or config.get_osrm_profile() #the mode of transportation (driving, walking, cycling)
        self.timeout = timeout if timeout is not None else config.get_http_timeout()

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

    #----------------
    # Internal helpers
    #----------------
    @staticmethod
    def format_coordinates(coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join(f"{lon},{lat}" for lat, lon in coords)

    #----------------
    # route service
    #----------------
    def compute_route(self, coordinates: List[LatLon]) -> RouteResult:
        """
        Calls the OSRM /route endpoint through the stops in the given order and
        returns the full geometry and total length.

        Raises:
            ValueError: fewer than two coordinates
            OSRMError: HTTP failure or an OSRM error code
        """
        if not coordinates or len(coordinates) < 2:
            raise ValueError("At least two locations required")

        url = f"{self.base_url}/route/v1/{self.profile}/{self.format_coordinates(coordinates)}"
        logger.info("requesting OSRM route through %d stops", len(coordinates))

        response = requests.get(
            url,
            params={
                "overview": "full", # we want the whole polyline
                "geometries": "geojson",
            },
            timeout=self.timeout,
        )

        if not response.ok:
            logger.error("OSRM route request failed with HTTP %s", response.status_code)
            raise OSRMError(f"Failed to fetch route (HTTP {response.status_code})")

        data = response.json()

        #validating OSRM response
        code = data.get("code")
        if code is not None and code != "Ok":
            logger.error("OSRM returned %s: %s", code, data.get("message"))
            raise OSRMError(f"OSRM error: {data.get('message', code)}")

        routes = data.get("routes") or []
        if not routes:
            return RouteResult()

        route = routes[0] #take the first route (OSRM may return alternatives)
        geometry = (route.get("geometry") or {}).get("coordinates") or []

        #GeoJSON is [lon, lat]; convert back to internal (lat, lon)
        return RouteResult(
            polyline=[(float(lat), float(lon)) for lon, lat in geometry],
            distance_m=float(route.get("distance") or 0.0),
            duration_s=float(route.get("duration") or 0.0),
        )
