import pandas as pd
import numpy as np
import uuid

def generate_mock_waypoints(num_waypoints=12, spread_deg=0.08, seed=None, output_file="mock_waypoints.csv"):
    """
    Generates a small set of named waypoints scattered around a city centre,
    the kind of list a user would type in before asking for a tour.
    """
    # Center around Harare, Zimbabwe
    CENTER_LAT = -17.824858
    CENTER_LON = 31.053028

    rng = np.random.default_rng(seed)

    data = []
    for waypoint_index in range(num_waypoints):
        lat = CENTER_LAT + rng.uniform(-spread_deg, spread_deg)
        lon = CENTER_LON + rng.uniform(-spread_deg, spread_deg)
        data.append({
            "waypoint_id": f"w_{str(uuid.uuid4())[:8]}",
            "name": f"Stop {waypoint_index + 1}",
            "lat": np.round(lat, 6),
            "lon": np.round(lon, 6),
        })

    df = pd.DataFrame(data)
    df.to_csv(output_file, index=False)
    print(f"Generated {num_waypoints} waypoints and saved to '{output_file}'")
    return df

if __name__ == "__main__":
    generate_mock_waypoints(num_waypoints=12, seed=7)
