"""
Flush Payback — Savings Calculator
==================================

Enter usage and tariff details; see how much each replacement toilet saves
per year, how long it takes to pay back, and cumulative savings to year 5.

Run: streamlit run app/streamlit_app.py   (or the `flush-payback` script)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import altair as alt
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import ProjectionConfig
from core.schema import INPUT_FIELDS

from data_prep.validators import validate_inputs

from engine.parameters import InputParameters
from engine.runner import run_projection

from report.tables import build_results_table, cumulative_long_frame, headline_cards

logger = logging.getLogger(__name__)

DEFAULT_INPUTS = InputParameters()


# ---------------------------------------------------------------------------
# Form helpers
# ---------------------------------------------------------------------------
def _number_input(name: str, label: str, integer: bool):
    default = getattr(DEFAULT_INPUTS, name)
    if integer:
        return st.number_input(label, min_value=0, value=int(default), step=1, key=name)
    return st.number_input(label, min_value=0.0, value=float(default), key=name, format="%.2f")


def _read_inputs() -> InputParameters:
    values = {name: _number_input(name, label, integer) for name, label, integer in INPUT_FIELDS}
    return InputParameters(**values)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_cumulative(results, cfg: ProjectionConfig, height=300):
    long = cumulative_long_frame(results)
    if len(long) == 0:
        st.info("No data to plot.")
        return
    chart = (
        alt.Chart(long).mark_line(point=True)
        .encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y(
                "cumulative_saving:Q",
                title=f"Cumulative saving ({cfg.currency_symbol})",
                axis=alt.Axis(format=",.0f"),
            ),
            color=alt.Color("option:N", title="Option", sort=None),
        )
        .properties(title="Cumulative Savings by Year", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _display_cards(results, cfg: ProjectionConfig):
    cards = headline_cards(results, cfg)
    for col, card in zip(st.columns(len(cards)), cards):
        with col:
            st.markdown(f"**{card.label.upper()}**")
            st.metric("Yearly saving", card.yearly_saving)
            st.markdown(card.payback_text)


# ═══════════════════════════════════════════════════════════════════════════
# PAGE
# ═══════════════════════════════════════════════════════════════════════════
def render() -> None:
    cfg = ProjectionConfig()

    st.set_page_config(page_title="Flush Payback", layout="wide")
    st.title("Calculate Savings")
    st.caption(
        "Enter your details below and see how much a Propelair toilet "
        "could save your organisation."
    )

    # --- Inputs ---
    with st.sidebar:
        st.header("Your Details")
        inputs = _read_inputs()

    vr = validate_inputs(inputs)
    if not vr.is_valid:
        st.error("Input validation failed:\n" + vr.summary())
    elif vr.warnings:
        for w in vr.warnings:
            st.warning(w)

    # --- Results ---
    results = run_projection(inputs, cfg)

    st.subheader("Results (per toilet)")
    table = build_results_table(results, cfg, formatted=True)
    st.dataframe(table, use_container_width=True, hide_index=True)

    st.download_button(
        "Download results (CSV)",
        data=build_results_table(results, cfg, formatted=False).to_csv(index=False),
        file_name="flush_payback_results.csv",
        mime="text/csv",
    )

    st.divider()
    _display_cards(results, cfg)

    st.divider()
    _plot_cumulative(results, cfg)


def main() -> None:
    """Console entry point — launches this script under Streamlit."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    render()
