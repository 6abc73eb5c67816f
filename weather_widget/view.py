from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .formatters import condition_message, location_message, temperature_message
from .models import InteractionState

TITLE = "Weather Widget"
DESCRIPTION = "Search for the current weather conditions in your city."
PLACEHOLDER = "Enter a city name"
SEARCH_LABEL = "Search"
LOADING_LABEL = "Loading..."
RESET_LABEL = "Reset"

BORDER_IDLE = "2px solid white"
BORDER_HOVERED = "2px solid black"


@dataclass(frozen=True)
class SearchForm:
    query: str
    placeholder: str
    submit_label: str
    submit_disabled: bool
    submit_cursor: str


@dataclass(frozen=True)
class ResultLine:
    icon: str
    text: str


@dataclass(frozen=True)
class ResultPanel:
    temperature: ResultLine
    condition: ResultLine
    location: ResultLine

    @property
    def lines(self) -> list[ResultLine]:
        return [self.temperature, self.condition, self.location]


@dataclass(frozen=True)
class ViewTree:
    """Everything the card shows for one InteractionState."""

    title: str
    description: str
    border: str
    form: SearchForm
    reset_label: str
    error: Optional[str] = None
    result: Optional[ResultPanel] = None


def render(state: InteractionState, current_hour: int | None = None) -> ViewTree:
    """Build the view tree for `state`.

    `current_hour` is the clock reading for the day/night location line; the
    local wall clock is read once when it is not supplied.
    """
    form = SearchForm(
        query=state.query,
        placeholder=PLACEHOLDER,
        submit_label=LOADING_LABEL if state.is_loading else SEARCH_LABEL,
        submit_disabled=state.is_loading,
        submit_cursor="not-allowed" if state.is_loading else "pointer",
    )

    result = None
    if state.snapshot is not None:
        if current_hour is None:
            current_hour = datetime.now().hour
        snapshot = state.snapshot
        result = ResultPanel(
            temperature=ResultLine(
                "thermometer", temperature_message(snapshot.temperature, snapshot.unit)
            ),
            condition=ResultLine("cloud", condition_message(snapshot.description)),
            location=ResultLine("map-pin", location_message(snapshot.location, current_hour)),
        )

    return ViewTree(
        title=TITLE,
        description=DESCRIPTION,
        border=BORDER_HOVERED if state.is_hovered else BORDER_IDLE,
        form=form,
        reset_label=RESET_LABEL,
        error=state.error_message,
        result=result,
    )


def card_css(tree: ViewTree) -> str:
    """Stylesheet for the card drawn from `tree`.

    Streamlit delivers no pointer events, so `set_hovered` is never called by
    the app; the `:hover` rule applies the hovered border instead.
    """
    return f"""
<style>
div[data-testid="stVerticalBlockBorderWrapper"] {{
    border: {tree.border};
    border-radius: 0.75rem;
    box-shadow: 0 10px 20px rgba(0, 0, 0, 0.2);
    transition: border-color 0.3s ease;
}}
div[data-testid="stVerticalBlockBorderWrapper"]:hover {{
    border: {BORDER_HOVERED};
}}
div[data-testid="stFormSubmitButton"] button {{
    cursor: {tree.form.submit_cursor};
}}
</style>
"""
