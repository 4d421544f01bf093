import argparse
import random
import time
from typing import List

import pandas as pd

from routing.osrm_client import OSRMClient
from tour.matrix import build_matrix
from tour.planner import plan_tour
from waypoints.models import Waypoint
from waypoints.validation import WaypointValidationError, parse_waypoint


def load_waypoints(filepath="mock_waypoints.csv", limit=None) -> List[Waypoint]:
    """
    Read a CSV with columns name, lat, lon (and optionally waypoint_id).
    Rows that fail validation are reported and skipped.
    """
    df = pd.read_csv(filepath)
    if limit:
        df = df.head(limit)

    waypoints = []
    for row_number, row in df.iterrows():
        try:
            waypoints.append(
                parse_waypoint(
                    row["name"],
                    row["lat"],
                    row["lon"],
                    waypoint_id=str(row["waypoint_id"]) if "waypoint_id" in row and pd.notna(row["waypoint_id"]) else None,
                )
            )
        except WaypointValidationError as e:
            print(f"  skipping row {row_number}: {e}")
    return waypoints


def run_simulation(filepath: str, seed: int, with_route: bool, limit=None):
    print("=== STARTING TOUR SIMULATION ===")

    # 1. Load Data
    waypoints = load_waypoints(filepath, limit=limit)
    print(f"Loaded {len(waypoints)} waypoints.\n")
    if len(waypoints) < 2:
        print("Add at least 2 waypoints to calculate a tour.")
        return

    # 2. Show the straight-line distance matrix
    matrix = build_matrix(waypoints)
    names = [waypoint.name for waypoint in waypoints]
    print("Distance matrix (km):")
    print(pd.DataFrame(matrix, index=names, columns=names).round(2).to_string())
    print()

    # 3. Plan the tour with a seeded generator so runs are repeatable
    start_time = time.time()
    result = plan_tour(waypoints, rng=random.Random(seed).random)
    print(f"Planned tour in {time.time() - start_time:.4f}s ({result.distance_km:.2f} km straight-line).\n")

    print("--- Tour ---")
    for position, waypoint in enumerate(result.waypoints, 1):
        print(f"{position}. {waypoint.name} ({waypoint.lat:.4f}, {waypoint.lon:.4f})")

    # 4. Optionally fetch the road route for the ordered stops
    if with_route:
        osrm_client = OSRMClient()
        route = osrm_client.compute_route([waypoint.coordinates for waypoint in result.waypoints])
        print(f"\nRoad route: {route.distance_m / 1000:.2f} km, {len(route.polyline)} polyline points")

    print("\n=== SIMULATION COMPLETE ===")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Plan a tour over waypoints from a CSV file.")
    parser.add_argument("--file", default="mock_waypoints.csv")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--with-route", action="store_true", help="also fetch the OSRM road route")
    args = parser.parse_args()

    run_simulation(args.file, seed=args.seed, with_route=args.with_route, limit=args.limit)
