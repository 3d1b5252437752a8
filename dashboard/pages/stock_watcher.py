"""House Stock Watcher page: one representative's trades by amount."""

from __future__ import annotations

import asyncio

import streamlit as st

from dashboard.charts import transaction_amount_chart
from watchboard.config import settings
from watchboard.processing.normalizer import top_transactions
from watchboard.services.house_stocks import create_controller
from watchboard.state.controller import ViewController


def _controller() -> ViewController:
    if "stock_controller" not in st.session_state:
        st.session_state.stock_controller = create_controller()
    return st.session_state.stock_controller


def render() -> None:
    st.title("House Stock Watcher")

    controller = _controller()
    asyncio.run(controller.start())
    state = controller.state

    # Representative selector
    cols = st.columns(max(len(state.selections), 1))
    for col, rep in zip(cols, state.selections):
        with col:
            kind = "primary" if rep == state.selection else "secondary"
            if st.button(rep, key=f"rep-{rep}", type=kind, use_container_width=True):
                with st.spinner("Loading..."):
                    asyncio.run(controller.select(rep))
                st.rerun()

    with st.form("add_representative", clear_on_submit=True):
        text = st.text_input("Representative", placeholder="Enter Representative Name")
        if st.form_submit_button("+"):
            with st.spinner("Loading..."):
                asyncio.run(controller.add_custom(text))
            st.rerun()

    if state.error:
        st.error(state.error)

    if state.selection:
        st.subheader(f"Stock Transactions for {state.selection}")

    transactions = list(state.results)
    if transactions:
        fig = transaction_amount_chart(transactions)
        st.plotly_chart(fig, use_container_width=True)
    elif state.selection:
        st.info(f"No transactions found for {state.selection}.")

    st.markdown("---")
    st.subheader("Recent Great Buys")
    st.table(
        [
            {
                "Stock": t.ticker or "N/A",
                "Amount": t.amount_text or "N/A",
                "Date": t.transaction_date or "",
            }
            for t in top_transactions(transactions, settings.top_transactions)
        ]
    )
