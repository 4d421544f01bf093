import pytest

from waypoints.models import Waypoint


@pytest.fixture
def equator_waypoints():
    # Three stops one degree apart along the equator
    return [
        Waypoint.new("A", 0.0, 0.0, waypoint_id="a"),
        Waypoint.new("B", 0.0, 1.0, waypoint_id="b"),
        Waypoint.new("C", 0.0, 2.0, waypoint_id="c"),
    ]


@pytest.fixture
def harare_waypoints():
    return [
        Waypoint.new("Depot", -17.824858, 31.053028, waypoint_id="w1"),
        Waypoint.new("Avondale", -17.796400, 31.036600, waypoint_id="w2"),
        Waypoint.new("Borrowdale", -17.758300, 31.088700, waypoint_id="w3"),
        Waypoint.new("Mbare", -17.856900, 31.037800, waypoint_id="w4"),
        Waypoint.new("Eastlea", -17.825200, 31.075400, waypoint_id="w5"),
        Waypoint.new("Belvedere", -17.826600, 31.020100, waypoint_id="w6"),
    ]


def line_matrix(n):
    """Points 0..n-1 on a line, one unit apart."""
    return [[float(abs(i - j)) for j in range(n)] for i in range(n)]


def scripted(values):
    """Random source that replays `values` and fails loudly if it runs dry."""
    iterator = iter(values)
    return iterator.__next__
