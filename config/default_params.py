"""Default display settings and form layout for the NER calculator."""

import logging
import os

logger = logging.getLogger(__name__)

DISPLAY_DEFAULTS = {
    'currency_symbol': '€',
    'area_unit': 'sqm',
    'decimals': 2,
    # 'en' -> 1,234.56   'de' -> 1.234,56
    'number_style': 'en',
}

NUMBER_STYLES = ('en', 'de')

# Environment variable -> display setting
ENV_OVERRIDES = {
    'NER_CURRENCY': 'currency_symbol',
    'NER_AREA_UNIT': 'area_unit',
    'NER_DECIMALS': 'decimals',
    'NER_NUMBER_STYLE': 'number_style',
}

# Lease form: (LeaseParameters field, label, unit key)
INPUT_FIELDS = [
    ('net_area', 'NLA', 'area'),
    ('add_on_percent', 'Add-On', '%'),
    ('headline_rent', 'Headline Rent', 'rent'),
    ('lease_term_months', 'Lease Term', 'months'),
    ('rent_free_months', 'Rent-Free', 'months'),
    ('agent_fee_months', 'Agent Fees', 'months'),
    ('unforeseen_costs', 'Unforeseen Costs', 'currency'),
]

FIT_OUT_LABELS = {
    'per_net_area': 'Fit-Out per NLA',
    'per_gross_area': 'Fit-Out per GLA',
    'total': 'Fit-Out Total',
}


def load_display_settings(environ=None):
    """Display defaults with NER_* environment overrides applied"""
    env = os.environ if environ is None else environ
    settings = dict(DISPLAY_DEFAULTS)
    for var, key in ENV_OVERRIDES.items():
        raw = env.get(var)
        if raw is None or raw.strip() == '':
            continue
        raw = raw.strip()
        if key == 'decimals':
            try:
                settings[key] = min(6, max(0, int(raw)))
            except ValueError:
                logger.warning("Ignoring %s=%r: not an integer", var, raw)
        elif key == 'number_style':
            if raw.lower() in NUMBER_STYLES:
                settings[key] = raw.lower()
            else:
                logger.warning("Ignoring %s=%r: expected one of %s", var, raw, NUMBER_STYLES)
        else:
            settings[key] = raw
    return settings


def unit_label(unit_key, settings):
    """Human-readable unit for a form field"""
    currency = settings['currency_symbol']
    area = settings['area_unit']
    return {
        'area': area,
        'rent': f"{currency}/{area}/month",
        'currency': currency,
        'per_area': f"{currency}/{area}",
        'months': 'months',
        '%': '%',
    }.get(unit_key, unit_key)
