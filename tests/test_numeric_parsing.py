"""Test numeric safety helpers and the number parser used by the form"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from engine.models import LeaseParameters, FitOutInput, FitOutMode
from engine.numeric import (
    safe_number, non_negative, safe_divide, normalize_lease_parameters, normalize_fit_out
)
from utils.formatting import parse_number, format_number, format_currency, format_percent, format_input

def test_safe_number():
    assert safe_number(3) == 3.0
    assert safe_number("2.5") == 2.5
    assert safe_number(None) == 0.0
    assert safe_number(float("nan")) == 0.0
    assert safe_number(float("-inf")) == 0.0
    assert safe_number("abc", default=7.0) == 7.0
    assert safe_number(True) == 0.0

def test_non_negative_and_divide():
    assert non_negative(-3) == 0.0
    assert non_negative(4) == 4.0
    assert safe_divide(10, 4) == 2.5
    assert safe_divide(10, 0) == 0.0
    assert safe_divide(10, -2) == 0.0

def test_normalize_lease_parameters():
    """Clamps, keeps defaults for missing fields, ignores unknown keys"""
    params = normalize_lease_parameters({"net_area": -5, "headline_rent": "14", "colour": "blue"})
    assert params.net_area == 0.0
    assert params.headline_rent == 14.0
    assert params.lease_term_months == LeaseParameters().lease_term_months
    assert params.unforeseen_costs == 0.0
    assert normalize_lease_parameters(None) == LeaseParameters()
    assert normalize_lease_parameters(LeaseParameters(rent_free_months=-1)).rent_free_months == 0.0

def test_normalize_fit_out():
    fit = normalize_fit_out({"mode": "total", "total_amount": -1, "per_net_area_rate": 20})
    assert fit.mode == FitOutMode.TOTAL
    assert fit.total_amount == 0.0
    assert fit.per_net_area_rate == 20.0
    assert normalize_fit_out(FitOutInput(per_gross_area_rate=float("inf"))).per_gross_area_rate == 0.0
    with pytest.raises(ValueError):
        normalize_fit_out({"mode": "per_floor"})

@pytest.mark.parametrize("text,expected", [
    ("13", 13.0),
    ("13.5", 13.5),
    ("13,5", 13.5),
    ("1,234.56", 1234.56),
    ("1.234,56", 1234.56),
    ("1.234.567", 1234567.0),
    ("1,234,567", 1234567.0),
    ("12 000", 12000.0),
    ("12 000,5", 12000.5),
    ("1'050", 1050.0),
    ("€ 150", 150.0),
    ("5%", 5.0),
    ("-4", -4.0),
    ("", 0.0),
    ("   ", 0.0),
    ("abc", 0.0),
    ("12abc", 0.0),
    ("1.2.3,4,5", 0.0),
    (".", 0.0),
    (None, 0.0),
    (42, 42.0),
])
def test_parse_number(text, expected):
    assert abs(parse_number(text) - expected) < 1e-9

@pytest.mark.parametrize("text,style,expected", [
    ("1,000", "en", 1000.0),
    ("12,500", "en", 12500.0),
    ("1.000", "en", 1.0),
    ("1,5", "en", 1.5),
    ("1.000", "de", 1000.0),
    ("1,000", "de", 1.0),
    ("160,5", "de", 160.5),
    ("1234,567", "en", 1234.567),
])
def test_parse_number_uses_style_grouping(text, style, expected):
    """A lone grouping separator followed by three digits is a thousands separator"""
    assert abs(parse_number(text, style) - expected) < 1e-9

def test_format_styles():
    assert format_number(1234.5, 2, "en") == "1,234.50"
    assert format_number(1234.5, 2, "de") == "1.234,50"
    assert format_currency(1050350, "€", 0, "de") == "1.050.350 €"
    assert format_percent(8.333, 1) == "8.3%"
    assert format_number(float("nan"), 2) == "0.00"

def test_format_input_round_trips_through_parser():
    """Text written back into inputs parses to the same value in both styles"""
    for value in (0, 150, 142.857142, 1050, 0.5, 1.234):
        for style in ("en", "de"):
            assert abs(parse_number(format_input(value, style), style) - round(value, 4)) < 1e-9
    assert format_input(1050.0) == "1050"
    assert format_input(142.857142) == "142.8571"
    assert format_input(0.0) == "0"
    assert format_input(100, max_decimals=0) == "100"

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
