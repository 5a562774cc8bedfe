"""Downloads and shareable link."""

import streamlit as st

from utils.export import (
    build_inputs_frame,
    build_results_frame,
    export_filename,
    to_csv_bytes,
    to_excel_bytes,
    to_html_report
)
from utils.query_state import encode_state


def sync_query_params(params, fit_out):
    """Mirror the current inputs into the URL so the page can be shared or bookmarked."""
    query = encode_state(params, fit_out)
    if dict(st.query_params) != query:
        st.query_params.from_dict(query)
    return query


def render_exports(params, fit_out, result, figures, settings):
    st.divider()
    st.markdown("### 📥 Exports")

    df_results = build_results_frame(result, settings)
    df_inputs = build_inputs_frame(params, fit_out, settings)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button(
            "Results (CSV)",
            data=to_csv_bytes(df_inputs) + b"\n" + to_csv_bytes(df_results),
            file_name=export_filename("NER", "csv"),
            mime="text/csv"
        )
    with col2:
        st.download_button(
            "Results (Excel)",
            data=to_excel_bytes(params, fit_out, result, settings),
            file_name=export_filename("NER", "xlsx"),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
    with col3:
        st.download_button(
            "Report (HTML)",
            data=to_html_report(params, fit_out, result, figures, settings).encode("utf-8"),
            file_name=export_filename("NER_Report", "html"),
            mime="text/html"
        )

    st.caption("🔗 The page URL carries every input; copy it from the address bar to share this calculation.")
