"""Round-trip of lease and fit-out inputs through URL query parameters."""

import logging
from dataclasses import fields

from engine.models import FitOutInput, FitOutMode, LeaseParameters
from engine.numeric import normalize_fit_out, normalize_lease_parameters
from utils.formatting import format_input, parse_number

logger = logging.getLogger(__name__)

LEASE_KEYS = {
    'net_area': 'nla',
    'add_on_percent': 'addon',
    'headline_rent': 'rent',
    'lease_term_months': 'term',
    'rent_free_months': 'rf',
    'agent_fee_months': 'agent',
    'unforeseen_costs': 'other',
}

FIT_OUT_KEYS = {
    'per_net_area_rate': 'fo_nla',
    'per_gross_area_rate': 'fo_gla',
    'total_amount': 'fo_total',
}

MODE_KEY = 'fo_mode'

# Derived rates keep enough digits that a reload reproduces the total
URL_DECIMALS = 10


def encode_state(params, fit_out):
    """Flat dict of short keys -> plain '.'-decimal strings."""
    query = {key: format_input(getattr(params, name), max_decimals=URL_DECIMALS) for name, key in LEASE_KEYS.items()}
    query[MODE_KEY] = fit_out.mode.value
    for name, key in FIT_OUT_KEYS.items():
        query[key] = format_input(getattr(fit_out, name), max_decimals=URL_DECIMALS)
    return query


def _first(value):
    # Older Streamlit query APIs return every value as a list
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def decode_state(query):
    """
    Rebuild (LeaseParameters, FitOutInput) from a query mapping.

    Missing keys keep the defaults, numbers go through parse_number and
    the non-negative clamp, and an unknown fit-out mode falls back to
    per-NLA entry.
    """
    query = query or {}
    defaults = LeaseParameters()
    lease_values = {}
    for f in fields(LeaseParameters):
        raw = _first(query.get(LEASE_KEYS[f.name]))
        lease_values[f.name] = parse_number(raw) if raw is not None else getattr(defaults, f.name)
    params = normalize_lease_parameters(lease_values)

    fit_values = {}
    raw_mode = _first(query.get(MODE_KEY))
    if raw_mode is not None:
        try:
            fit_values['mode'] = FitOutMode(str(raw_mode))
        except ValueError:
            logger.warning("Unknown fit-out mode %r in URL; using %s", raw_mode, FitOutMode.PER_NET_AREA.value)
            fit_values['mode'] = FitOutMode.PER_NET_AREA
    for name, key in FIT_OUT_KEYS.items():
        raw = _first(query.get(key))
        if raw is not None:
            fit_values[name] = parse_number(raw)
    fit_out = normalize_fit_out(fit_values) if fit_values else FitOutInput()
    return params, fit_out
