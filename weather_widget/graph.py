from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Optional, Protocol, TypedDict

from langgraph.graph import END, StateGraph

from .models import FETCH_FAILURE_MESSAGE, WeatherSnapshot

logger = logging.getLogger(__name__)


class CurrentWeatherSource(Protocol):
    def get_current(self, location: str) -> dict[str, Any]: ...


class SearchState(TypedDict, total=False):
    """State shared across the search pipeline nodes."""

    query: str
    weather_raw: Optional[dict]
    snapshot: Optional[WeatherSnapshot]
    error_message: Optional[str]


@dataclass
class SearchResources:
    """Shared resources for the pipeline nodes."""

    weather_client: CurrentWeatherSource


def fetch_node(resources: SearchResources):
    def _node(state: SearchState) -> SearchState:
        try:
            raw = resources.weather_client.get_current(state["query"])
        except Exception as e:  # WeatherAPIError or a misbehaving substitute client
            logger.error("Error fetching weather data for %r: %s", state["query"], e)
            state["weather_raw"] = None
            state["snapshot"] = None
            state["error_message"] = FETCH_FAILURE_MESSAGE
            return state

        state["weather_raw"] = raw
        return state

    return _node


def snapshot_node(state: SearchState) -> SearchState:
    """Map the raw payload into a WeatherSnapshot."""
    try:
        snapshot = WeatherSnapshot.from_payload(state["weather_raw"])
    except (KeyError, TypeError, AttributeError) as e:
        logger.error("Malformed weather payload for %r: %r", state["query"], e)
        state["snapshot"] = None
        state["error_message"] = FETCH_FAILURE_MESSAGE
        return state

    state["snapshot"] = snapshot
    state["error_message"] = None
    return state


def route_decision(state: SearchState) -> Literal["snapshot", "failed"]:
    return "failed" if state.get("error_message") else "snapshot"


def build_graph(weather_client: CurrentWeatherSource):
    """Build and compile the fetch -> snapshot workflow."""
    resources = SearchResources(weather_client=weather_client)

    workflow = StateGraph(SearchState)
    workflow.add_node("fetch", fetch_node(resources))
    workflow.add_node("snapshot", snapshot_node)
    workflow.set_entry_point("fetch")

    workflow.add_conditional_edges(
        "fetch", route_decision, {"snapshot": "snapshot", "failed": END}
    )
    workflow.add_edge("snapshot", END)

    return workflow.compile()
