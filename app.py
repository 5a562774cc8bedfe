"""
Net Effective Rent Calculator - Streamlit UI
Form and charts over the engine, which stays the single source of truth
"""

import logging
import os

import streamlit as st

from components.export_panel import render_exports, sync_query_params
from components.inputs_panel import init_state, render_inputs
from components.results_panel import build_figures, render_results
from config.default_params import load_display_settings
from engine.compute import compute


st.set_page_config(
    page_title="Net Effective Rent Calculator",
    page_icon="🏢",
    layout="wide"
)

logging.basicConfig(
    level=os.getenv("NER_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    st.title("🏢 Net Effective Rent Calculator")
    st.caption("Headline rent adjusted for rent-frees, fit-outs, agent fees and unforeseen costs")

    settings = load_display_settings()
    init_state(dict(st.query_params), settings['number_style'])

    col_inputs, col_results = st.columns([1, 2])
    with col_inputs:
        params, reconciler = render_inputs(settings)

    # SINGLE call to engine
    result = compute(params, reconciler)
    fit_out = reconciler.snapshot()
    figures = build_figures(result, settings)

    with col_results:
        render_results(result, settings, figures)
        render_exports(params, fit_out, result, figures, settings)

    sync_query_params(params, fit_out)


if __name__ == "__main__":
    main()
