import os
import sys

import pytest

# Ensure project root is on sys.path so tests can import `weather_widget` when
# pytest is invoked from the repository root or other working directories.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def make_payload(temp_c=22, text="Sunny", name="Paris"):
    return {
        "location": {"name": name, "country": "France"},
        "current": {"temp_c": temp_c, "condition": {"text": text}},
    }


class FakeClient:
    """Stands in for WeatherClient; returns canned payloads or raises."""

    def __init__(self, result=None, on_call=None):
        self.result = result if result is not None else make_payload()
        self.on_call = on_call
        self.calls = []

    def get_current(self, location):
        self.calls.append(location)
        if self.on_call is not None:
            self.on_call(location)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def paris_payload():
    return make_payload()
