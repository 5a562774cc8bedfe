"""Results: key figures, NER tiers and charts."""

import streamlit as st

from utils.export import build_results_frame
from utils.formatting import format_currency, format_number, format_percent
from utils.visualizations import (
    create_ner_bar_chart,
    create_ner_waterfall_chart,
    create_cost_breakdown_chart
)


def build_figures(result, settings):
    currency = settings['currency_symbol']
    area_unit = settings['area_unit']
    return [
        create_ner_bar_chart(result, currency, area_unit),
        create_ner_waterfall_chart(result, currency, area_unit),
        create_cost_breakdown_chart(result, currency),
    ]


def render_results(result, settings, figures):
    decimals = settings['decimals']
    style = settings['number_style']
    currency = settings['currency_symbol']
    per_area = f"{currency}/{settings['area_unit']}"

    st.subheader("Key Figures")
    c1, c2, c3, c4, c5 = st.columns(5)
    with c1:
        st.metric("GLA", f"{format_number(result.gross_area, decimals, style)} {settings['area_unit']}")
    with c2:
        st.metric("Months Billed", format_number(result.months_billed, 1, style))
    with c3:
        st.metric("Gross Rent Due", format_currency(result.gross_rent_due, currency, 0, style))
    with c4:
        st.metric("Total Fit-Out", format_currency(result.total_fit_out_cost, currency, 0, style))
    with c5:
        st.metric("Agent Fees", format_currency(result.agent_fee_cost, currency, 0, style))

    st.subheader("Net Effective Rent")
    st.markdown(f"**Headline Rent:** {format_number(result.headline_rent, decimals, style)} {per_area}")
    tier_cols = st.columns(4)
    for col, tier in zip(tier_cols, result.tiers()):
        with col:
            st.metric(
                f"{tier['tier']}. {tier['label']}",
                f"{format_number(tier['ner'], decimals, style)} {per_area}",
                delta=f"{format_percent(tier['delta_pct'], 1, style)} below headline",
                delta_color="off",
            )

    with st.expander("Breakdown"):
        st.dataframe(build_results_frame(result, settings), use_container_width=True, hide_index=True)

    bar_fig, waterfall_fig, breakdown_fig = figures
    tab1, tab2, tab3 = st.tabs(["📊 NER Tiers", "📉 Waterfall", "🥧 Concessions"])
    with tab1:
        st.plotly_chart(bar_fig, use_container_width=True)
    with tab2:
        st.plotly_chart(waterfall_fig, use_container_width=True)
    with tab3:
        st.plotly_chart(breakdown_fig, use_container_width=True)
