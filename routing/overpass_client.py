#Purpose: Fetch raw road-network data from the OpenStreetMap Overpass API.
#Returns the JSON payload untouched; road_graph.build_graph_from_osm turns it into a graph.

import logging
from typing import Any, Dict, Optional, Sequence

import requests

from routing import config

logger = logging.getLogger(__name__)

#bbox order expected by Overpass: (south, west, north, east)
HIGHWAY_QUERY = """
[out:json];
(
  way["highway"]({south},{west},{north},{east});
);
out body;
>;
out skel qt;
"""


class OverpassError(Exception):
    """Custom exception for Overpass API errors."""
    pass


class OverpassClient:
    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url or config.get_overpass_url()
        self.timeout = timeout if timeout is not None else config.get_http_timeout()

    @staticmethod
    def build_query(bbox: Sequence[float]) -> str:
        """Overpass QL for every highway way inside bbox = (south, west, north, east)."""
        if len(bbox) != 4:
            raise ValueError("bbox must be (south, west, north, east)")
        south, west, north, east = bbox
        return HIGHWAY_QUERY.format(south=south, west=west, north=north, east=east)

    def fetch_roads(self, bbox: Sequence[float]) -> Dict[str, Any]:
        """
        Download highway ways and their nodes for the bbox.

        Returns the decoded Overpass JSON, i.e. {"elements": [...], ...}.
        """
        query = self.build_query(bbox)
        logger.info("requesting Overpass roads for bbox %s", tuple(bbox))

        response = requests.post(self.url, data={"data": query}, timeout=self.timeout)

        if not response.ok:
            logger.error("Overpass request failed with HTTP %s", response.status_code)
            raise OverpassError(f"Failed to fetch OSM data (HTTP {response.status_code})")

        return response.json()
