#Purpose: Road graph construction from raw road-network data.
#Turns node/way records (OpenStreetMap style) into an undirected
#adjacency structure weighted by straight-line distance in km.
#Typical responsibilities:
#split raw Overpass elements into nodes and ways
#link consecutive nodes of each way in both directions
#skip nodes a way references but the payload does not contain
#Output: graph[a][b] == graph[b][a] == km between a and b.
#Does not do shortest paths; that is for whoever consumes the graph.

from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Sequence, Tuple

from tour.distance import haversine_km
from waypoints.models import LatLon

logger = logging.getLogger(__name__)

NodeId = Hashable
RoadGraph = Dict[NodeId, Dict[NodeId, float]]


def build_graph(
        nodes: Mapping[NodeId, LatLon],
        ways: Iterable[Sequence[NodeId]],
) -> RoadGraph:
    """
    Build an undirected weighted graph from node coordinates and ways.

    Args:
        nodes: node id -> (lat, lon)
        ways: each way is the ordered list of node ids along one road

    Returns:
        RoadGraph. Only nodes that appear on at least one kept edge are keys.

    Rules:
        - an edge is inserted for every consecutive pair (a, b) of a way when
          both a and b are in `nodes`; otherwise the pair is skipped silently
        - the same edge seen again overwrites the earlier weight (last write wins)
        - a repeated node (a == b) becomes a self edge of weight 0
    """
    graph: RoadGraph = {}
    skipped = 0

    for way in ways:
        for a, b in zip(way, way[1:]):
            if a not in nodes or b not in nodes:
                skipped += 1
                continue

            weight = haversine_km(nodes[a], nodes[b])
            graph.setdefault(a, {})[b] = weight
            graph.setdefault(b, {})[a] = weight #bidirectional

    if skipped:
        logger.debug("skipped %d way segments with unknown nodes", skipped)
    logger.debug("road graph has %d nodes", len(graph))
    return graph


def parse_osm_elements(
        elements: Iterable[Mapping[str, Any]],
) -> Tuple[Dict[NodeId, LatLon], List[List[NodeId]]]:
    """
    Split raw Overpass elements into (nodes, ways) for build_graph.

    Nodes need "id", "lat", "lon". Ways need a "nodes" list; ways without one
    (e.g. fetched with `out ids`) are ignored.
    """
    nodes: Dict[NodeId, LatLon] = {}
    ways: List[List[NodeId]] = []

    for element in elements:
        element_type = element.get("type")
        if element_type == "node":
            nodes[element["id"]] = (float(element["lat"]), float(element["lon"]))
        elif element_type == "way" and element.get("nodes"):
            ways.append(list(element["nodes"]))

    return nodes, ways


def build_graph_from_osm(osm_data: Mapping[str, Any]) -> RoadGraph:
    """
    Convenience wrapper over an Overpass JSON payload ({"elements": [...]}).
    """
    nodes, ways = parse_osm_elements(osm_data.get("elements", []))
    return build_graph(nodes, ways)
