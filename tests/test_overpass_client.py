import pytest

from routing import overpass_client
from routing.overpass_client import OverpassClient, OverpassError
from routing.road_graph import build_graph_from_osm


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code
        self.ok = 200 <= status_code < 400

    def json(self):
        return self._payload


def test_query_uses_bbox_order():
    query = OverpassClient.build_query((-17.9, 30.9, -17.7, 31.2))

    assert '[out:json];' in query
    assert 'way["highway"](-17.9,30.9,-17.7,31.2);' in query
    assert "out skel qt;" in query


def test_bbox_must_have_four_values():
    with pytest.raises(ValueError):
        OverpassClient.build_query((1.0, 2.0, 3.0))


def test_fetch_roads_returns_payload(monkeypatch):
    payload = {
        "elements": [
            {"type": "way", "id": 5, "nodes": [1, 2]},
            {"type": "node", "id": 1, "lat": 0.0, "lon": 0.0},
            {"type": "node", "id": 2, "lat": 0.0, "lon": 0.01},
        ]
    }
    sent = {}

    def fake_post(url, data=None, timeout=None):
        sent.update(url=url, data=data, timeout=timeout)
        return FakeResponse(payload)

    monkeypatch.setattr(overpass_client.requests, "post", fake_post)

    client = OverpassClient(url="http://overpass.test/api/interpreter", timeout=4)
    data = client.fetch_roads((0.0, 0.0, 1.0, 1.0))

    assert data == payload
    assert sent["url"] == "http://overpass.test/api/interpreter"
    assert "way[\"highway\"](0.0,0.0,1.0,1.0);" in sent["data"]["data"]
    assert build_graph_from_osm(data)[1][2] > 0.0


def test_fetch_roads_http_failure(monkeypatch):
    monkeypatch.setattr(overpass_client.requests, "post", lambda *args, **kwargs: FakeResponse({}, status_code=429))

    with pytest.raises(OverpassError):
        OverpassClient(url="http://overpass.test").fetch_roads((0, 0, 1, 1))
