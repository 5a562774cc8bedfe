"""Lease input form and the fit-out entry widgets."""

import logging

import streamlit as st

from config.default_params import FIT_OUT_LABELS, INPUT_FIELDS, unit_label
from engine.fitout import FitOutReconciler
from engine.lease import compute_gross_area
from engine.models import FIT_OUT_FIELDS, FitOutInput, FitOutMode, LeaseParameters
from engine.numeric import normalize_lease_parameters
from utils.formatting import format_input, format_number, parse_number
from utils.query_state import decode_state

logger = logging.getLogger(__name__)

STATE_READY = "_ner_state_ready"
RECONCILER_KEY = "fit_out"
MODE_KEY = "fo_mode"
AREA_FIELDS = ("net_area", "add_on_percent")


def lease_key(name):
    return f"in_{name}"


def fit_out_key(field):
    return f"fo_{field}"


def _style():
    return st.session_state.get("_number_style", "en")


def load_state(params, fit_out, style="en"):
    """Write a full set of inputs into session state (initial load / reset)."""
    st.session_state["_number_style"] = style
    for name, _, _ in INPUT_FIELDS:
        st.session_state[lease_key(name)] = format_input(getattr(params, name), style)
    gross_area = compute_gross_area(params.net_area, params.add_on_percent)
    reconciler = FitOutReconciler(fit_out, params.net_area, gross_area)
    st.session_state[RECONCILER_KEY] = reconciler
    st.session_state[MODE_KEY] = reconciler.mode.value
    _write_fit_out_text(reconciler)


def init_state(query=None, style="en"):
    """Seed session state once per session, from the URL when it carries inputs."""
    if st.session_state.get(STATE_READY):
        return
    if query:
        params, fit_out = decode_state(query)
        logger.info("Loaded inputs from URL query parameters")
    else:
        params, fit_out = LeaseParameters(), FitOutInput()
    load_state(params, fit_out, style)
    st.session_state[STATE_READY] = True


def current_params():
    style = _style()
    raw = {name: parse_number(st.session_state.get(lease_key(name)), style) for name, _, _ in INPUT_FIELDS}
    return normalize_lease_parameters(raw)


def current_reconciler():
    return st.session_state[RECONCILER_KEY]


def _write_fit_out_text(reconciler, skip=None):
    # The field being committed keeps the text exactly as the user typed it
    style = _style()
    for field in FIT_OUT_FIELDS.values():
        if field == skip:
            continue
        st.session_state[fit_out_key(field)] = format_input(getattr(reconciler.state, field), style)


def _on_lease_change(name):
    if name not in AREA_FIELDS:
        return
    params = current_params()
    reconciler = current_reconciler()
    reconciler.on_area_changed(params.net_area, compute_gross_area(params.net_area, params.add_on_percent))
    _write_fit_out_text(reconciler)


def _on_fit_out_edit(field):
    """
    Commit of one fit-out input. Streamlit reports no focus or keystrokes,
    so the commit callback is the whole focus window: the field is focused,
    applied, the other two are rewritten, and focus is released.
    """
    reconciler = current_reconciler()
    reconciler.focus(field)
    try:
        reconciler.on_field_edited(field, parse_number(st.session_state.get(fit_out_key(field)), _style()))
        _write_fit_out_text(reconciler, skip=field)
    finally:
        reconciler.blur()


def _on_mode_change():
    current_reconciler().set_mode(st.session_state[MODE_KEY])


def _on_reset():
    load_state(LeaseParameters(), FitOutInput(), _style())


def render_inputs(settings):
    """Render the form; returns (LeaseParameters, FitOutReconciler) for this run."""
    st.subheader("Lease Parameters")
    cols = st.columns(2)
    for i, (name, label, unit) in enumerate(INPUT_FIELDS):
        with cols[i % 2]:
            st.text_input(
                f"{label} ({unit_label(unit, settings)})",
                key=lease_key(name),
                on_change=_on_lease_change,
                args=(name,),
            )

    params = current_params()
    gross_area = compute_gross_area(params.net_area, params.add_on_percent)
    st.text_input(
        f"GLA ({settings['area_unit']})",
        value=format_number(gross_area, settings['decimals'], settings['number_style']),
        disabled=True,
    )

    st.subheader("Fit-Out")
    reconciler = current_reconciler()
    st.radio(
        "Enter fit-out as",
        options=[m.value for m in FitOutMode],
        format_func=lambda v: FIT_OUT_LABELS[v],
        key=MODE_KEY,
        on_change=_on_mode_change,
        horizontal=True,
    )
    units = {
        "per_net_area_rate": unit_label('per_area', settings),
        "per_gross_area_rate": unit_label('per_area', settings),
        "total_amount": unit_label('currency', settings),
    }
    fo_cols = st.columns(3)
    for col, (mode, field) in zip(fo_cols, FIT_OUT_FIELDS.items()):
        with col:
            st.text_input(
                f"{FIT_OUT_LABELS[mode.value]} ({units[field]})",
                key=fit_out_key(field),
                on_change=_on_fit_out_edit,
                args=(field,),
                disabled=field != reconciler.authoritative_field,
            )

    st.button("Reset to defaults", on_click=_on_reset)
    return params, reconciler
