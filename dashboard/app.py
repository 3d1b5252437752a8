"""Watchboard: Streamlit multi-page application."""

import streamlit as st

from watchboard.config import settings
from watchboard.logging_config import setup_logging

st.set_page_config(
    page_title="Watchboard",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

setup_logging(settings.log_level)

# Navigation
pages = {
    "House Stock Watcher": "dashboard.pages.stock_watcher",
    "Weather & Astronomy": "dashboard.pages.weather",
}

st.sidebar.title("Watchboard")
st.sidebar.markdown("---")

selection = st.sidebar.radio("Navigation", list(pages.keys()))

st.sidebar.markdown("---")
st.sidebar.caption("Data: House Stock Watcher, Open-Meteo, NASA APOD")
st.sidebar.caption("NOT financial advice. For research only.")

# Load selected page
if selection == "House Stock Watcher":
    from dashboard.pages.stock_watcher import render
    render()
elif selection == "Weather & Astronomy":
    from dashboard.pages.weather import render
    render()
