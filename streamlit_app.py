from __future__ import annotations

import logging
import streamlit as st

from weather_widget.config import settings
from weather_widget.controller import WeatherWidget
from weather_widget.view import LOADING_LABEL, ViewTree, card_css, render

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    level=settings.log_level,
)
log = logging.getLogger("streamlit_app")

if not settings.weather_api_key:
    log.warning("WEATHER_API_KEY is not set. Every search will fail.")

QUERY_KEY = "weather_query"
ICONS = {"thermometer": "🌡️", "cloud": "☁️", "map-pin": "📍"}


def get_widget() -> WeatherWidget:
    if "widget" not in st.session_state:
        st.session_state["widget"] = WeatherWidget.from_settings(settings)
    return st.session_state["widget"]


def on_reset() -> None:
    get_widget().reset_search()
    st.session_state[QUERY_KEY] = ""


def draw_panels(tree: ViewTree) -> None:
    if tree.error:
        st.error(tree.error)
    if tree.result:
        for line in tree.result.lines:
            st.markdown(f"{ICONS[line.icon]} {line.text}")


def main() -> None:
    st.set_page_config(page_title="Weather Widget", page_icon="☁️")
    widget = get_widget()
    st.session_state.setdefault(QUERY_KEY, widget.state.query)
    tree = render(widget.state)
    st.markdown(card_css(tree), unsafe_allow_html=True)

    with st.container(border=True):
        st.title(tree.title)
        st.caption(tree.description)

        with st.form("weather_search"):
            query = st.text_input(
                "Location",
                key=QUERY_KEY,
                placeholder=tree.form.placeholder,
                label_visibility="collapsed",
            )
            submitted = st.form_submit_button(
                tree.form.submit_label, disabled=tree.form.submit_disabled
            )
        st.button(tree.reset_label, on_click=on_reset)

        if submitted:
            with st.spinner(LOADING_LABEL):
                widget.submit_search(query)
            tree = render(widget.state)
        else:
            widget.set_query(query)

        draw_panels(tree)


if __name__ == "__main__":
    main()
