"""
Fetch controller. Owns the InteractionState of one widget instance.

Every update replaces the whole state record. A non-empty search runs the
fetch pipeline once; the result is applied only when no newer search was
issued while it was in flight, so the most recently issued request wins.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .config import Settings
from .graph import CurrentWeatherSource, build_graph
from .models import (
    EMPTY_INPUT_MESSAGE,
    FETCH_FAILURE_MESSAGE,
    InteractionState,
    WeatherSnapshot,
)
from .weather import WeatherClient

logger = logging.getLogger(__name__)


class WeatherWidget:
    def __init__(self, weather_client: CurrentWeatherSource, graph: Any = None) -> None:
        self.weather_client = weather_client
        self.graph = graph if graph is not None else build_graph(weather_client)
        self.state = InteractionState()
        self._generation = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> WeatherWidget:
        return cls(WeatherClient.from_settings(settings))

    def _update(self, **changes: Any) -> None:
        self.state = replace(self.state, **changes)

    def set_query(self, text: str) -> None:
        self._update(query=text)

    def set_hovered(self, hovered: bool) -> None:
        self._update(is_hovered=bool(hovered))

    def submit_search(self, raw_input: str) -> None:
        self._update(query=raw_input)
        query = raw_input.strip()
        if not query:
            self._update(error_message=EMPTY_INPUT_MESSAGE, snapshot=None)
            return

        self._generation += 1
        generation = self._generation
        self._update(is_loading=True, error_message=None)

        try:
            snapshot = self._run_search(query)
        finally:
            if generation == self._generation:
                self._update(is_loading=False)

        if generation != self._generation:
            logger.info("Discarding stale weather result for %r", query)
            return

        if snapshot is None:
            self._update(snapshot=None, error_message=FETCH_FAILURE_MESSAGE)
        else:
            self._update(snapshot=snapshot, error_message=None)

    def _run_search(self, query: str) -> WeatherSnapshot | None:
        try:
            result = self.graph.invoke({"query": query})
        except Exception:
            logger.exception("Weather search failed for %r", query)
            return None
        return result.get("snapshot")

    def reset_search(self) -> None:
        self._update(query="", snapshot=None, error_message=None)
