import random

import pytest

from conftest import scripted
from tour.planner import TourResult, plan_tour


def never_called():
    raise AssertionError("random source should not be used")


def test_empty_and_single_waypoint_returned_unchanged(equator_waypoints):
    assert plan_tour([], rng=never_called) == TourResult(waypoints=[], order=[])

    single = plan_tour(equator_waypoints[:1], rng=never_called)
    assert single.waypoints == equator_waypoints[:1]
    assert single.order == [0]
    assert single.distance_km == 0.0


def test_greedy_tour_over_equator(equator_waypoints):
    result = plan_tour(equator_waypoints, rng=lambda: 0.0)

    assert [waypoint.id for waypoint in result.waypoints] == ["a", "b", "c"]
    assert result.order == [0, 1, 2]
    assert result.distance_km == pytest.approx(222.38, abs=0.5)


def test_waypoints_follow_order(harare_waypoints):
    result = plan_tour(harare_waypoints, rng=random.Random(5).random)

    assert result.waypoints == [harare_waypoints[index] for index in result.order]


def test_default_source_still_gives_a_permutation(harare_waypoints):
    result = plan_tour(harare_waypoints)

    assert sorted(waypoint.id for waypoint in result.waypoints) == sorted(w.id for w in harare_waypoints)
    assert len(result.waypoints) == len(harare_waypoints)


def test_does_not_touch_global_random(harare_waypoints):
    random.seed(1234)
    expected = random.random()

    random.seed(1234)
    plan_tour(harare_waypoints)
    plan_tour(harare_waypoints, rng=scripted([0.0] * 10))

    assert random.random() == expected
