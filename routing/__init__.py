#Marks routing as a package.
#Re-exports the public APIs (build_graph, OSRMClient, OverpassClient)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .road_graph import RoadGraph, build_graph, build_graph_from_osm, parse_osm_elements
from .osrm_client import OSRMClient, OSRMError, RouteResult
from .overpass_client import OverpassClient, OverpassError

__all__ = [
           "RoadGraph",
           "build_graph",
             "build_graph_from_osm",
             "parse_osm_elements",
             "OSRMClient",
             "OSRMError",
             "RouteResult",
             "OverpassClient",
             "OverpassError",
             ]
