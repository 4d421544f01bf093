"""
Purpose: Fixed policy constants for the tour heuristic.
What it does:

GREEDY_PROBABILITY = 0.7
 - chance of extending the path with the single closest unvisited point

RANDOM_WINDOW = 3
 - otherwise, pick uniformly among this many closest unvisited points

Rule: No logic here. These are not runtime configuration; changing them
changes the algorithm.
"""

GREEDY_PROBABILITY: float = 0.7

RANDOM_WINDOW: int = 3

# an itinerary needs at least this many stops before a tour means anything
MIN_WAYPOINTS_FOR_TOUR: int = 2
