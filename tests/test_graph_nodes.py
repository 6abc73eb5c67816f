from __future__ import annotations

from unittest.mock import MagicMock

from conftest import FakeClient, make_payload
from weather_widget.graph import SearchResources, build_graph, fetch_node, route_decision, snapshot_node
from weather_widget.models import FETCH_FAILURE_MESSAGE, WeatherSnapshot
from weather_widget.weather import WeatherAPIError


def test_fetch_node_stores_raw_payload():
    mock_weather = MagicMock()
    mock_weather.get_current.return_value = make_payload()

    node = fetch_node(SearchResources(weather_client=mock_weather))
    final = node({"query": "Paris"})

    mock_weather.get_current.assert_called_once_with("Paris")
    assert final["weather_raw"] == make_payload()
    assert route_decision(final) == "snapshot"


def test_fetch_node_converts_api_error():
    mock_weather = MagicMock()
    mock_weather.get_current.side_effect = WeatherAPIError("Weather API error 400: bad")

    node = fetch_node(SearchResources(weather_client=mock_weather))
    final = node({"query": "Nowhere"})

    assert final["weather_raw"] is None
    assert final["error_message"] == FETCH_FAILURE_MESSAGE
    assert route_decision(final) == "failed"


def test_snapshot_node_maps_payload():
    final = snapshot_node({"query": "Paris", "weather_raw": make_payload()})

    assert final["snapshot"] == WeatherSnapshot(22, "Sunny", "Paris", "C")
    assert final["error_message"] is None


def test_snapshot_node_handles_missing_fields():
    final = snapshot_node({"query": "Paris", "weather_raw": {"error": {"code": 1006}}})

    assert final["snapshot"] is None
    assert final["error_message"] == FETCH_FAILURE_MESSAGE


def test_graph_success():
    client = FakeClient(make_payload(temp_c=-4.2, text="Snow", name="Oslo"))
    result = build_graph(client).invoke({"query": "Oslo"})

    assert result["snapshot"] == WeatherSnapshot(-4.2, "Snow", "Oslo", "C")
    assert not result.get("error_message")
    assert client.calls == ["Oslo"]


def test_graph_failure_skips_mapping():
    client = FakeClient(WeatherAPIError("Weather API error 404: not found"))
    result = build_graph(client).invoke({"query": "Atlantis"})

    assert result.get("snapshot") is None
    assert result["error_message"] == FETCH_FAILURE_MESSAGE


def test_snapshot_node_rejects_mistyped_fields():
    for temp_c, name in ((True, "Paris"), ("22", "Paris"), (22, None)):
        final = snapshot_node({"query": "Paris", "weather_raw": make_payload(temp_c=temp_c, name=name)})

        assert final["snapshot"] is None
        assert final["error_message"] == FETCH_FAILURE_MESSAGE
