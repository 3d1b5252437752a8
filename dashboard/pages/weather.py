"""Weather page: hourly forecast by city plus the astronomy picture of the day."""

from __future__ import annotations

import asyncio

import streamlit as st

from dashboard.charts import hourly_temperature_chart
from watchboard.services.weather import PictureHolder, create_controller
from watchboard.state.controller import ViewController


def _controller() -> ViewController:
    if "weather_controller" not in st.session_state:
        st.session_state.weather_controller = create_controller()
    return st.session_state.weather_controller


def _picture() -> PictureHolder:
    if "picture_holder" not in st.session_state:
        st.session_state.picture_holder = PictureHolder()
    return st.session_state.picture_holder


def render() -> None:
    st.title("Weather & Astronomy")

    controller = _controller()
    asyncio.run(controller.start())
    holder = asyncio.run(_picture().load_once())
    state = controller.state

    cols = st.columns(max(len(state.selections), 1))
    for col, city in zip(cols, state.selections):
        with col:
            kind = "primary" if city == state.selection else "secondary"
            if st.button(city, key=f"city-{city}", type=kind, use_container_width=True):
                with st.spinner("Loading..."):
                    asyncio.run(controller.select(city))
                st.rerun()

    with st.form("add_city", clear_on_submit=True):
        text = st.text_input("City", placeholder="Enter City Name")
        if st.form_submit_button("+"):
            with st.spinner("Loading..."):
                asyncio.run(controller.add_custom(text))
            st.rerun()

    if state.error:
        st.error(state.error)

    if state.results:
        fig = hourly_temperature_chart(list(state.results), state.selection or "")
        st.plotly_chart(fig, use_container_width=True)
        st.dataframe(
            [
                {"Time": p.time, "Temperature (°C)": p.temperature}
                for p in state.results
            ],
            use_container_width=True,
        )

    st.markdown("---")
    st.subheader("Astronomy Picture of the Day")
    if holder.error:
        st.error(holder.error)
    elif holder.picture is not None:
        picture = holder.picture
        if picture.media_type == "image":
            st.image(picture.url, caption=picture.title)
        else:
            st.video(picture.url)
            st.caption(picture.title)
        st.write(picture.explanation)
