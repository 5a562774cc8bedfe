"""Numeric safety helpers applied before anything reaches the engine"""
import math
from dataclasses import fields
from typing import Any, Mapping, Union

from .models import FitOutInput, FitOutMode, LeaseParameters

EPSILON = 1e-9


def safe_number(value: Any, default: float = 0.0) -> float:
    """Coerce value to a finite float; None, NaN, inf, bools and junk become default"""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def non_negative(value: Any) -> float:
    return max(0.0, safe_number(value))


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0 when the divisor is not strictly positive"""
    return numerator / denominator if denominator > 0 else 0.0


def _as_mapping(raw) -> dict:
    if isinstance(raw, Mapping):
        return dict(raw)
    return {f.name: getattr(raw, f.name) for f in fields(raw)}


def coerce_mode(mode: Union[FitOutMode, str]) -> FitOutMode:
    if isinstance(mode, FitOutMode):
        return mode
    try:
        return FitOutMode(str(mode))
    except ValueError:
        raise ValueError(f"Unknown fit-out mode: {mode!r}") from None


def normalize_lease_parameters(raw=None) -> LeaseParameters:
    """
    Build a LeaseParameters with every field clamped to >= 0.

    Args:
        raw: LeaseParameters, a mapping of field names, or None for defaults

    Missing fields keep the dataclass defaults; unknown keys are ignored.
    """
    if raw is None:
        return LeaseParameters()
    data = _as_mapping(raw)
    known = {f.name for f in fields(LeaseParameters)}
    cleaned = {k: non_negative(v) for k, v in data.items() if k in known}
    return LeaseParameters(**cleaned)


def normalize_fit_out(raw=None) -> FitOutInput:
    if raw is None:
        return FitOutInput()
    data = _as_mapping(raw)
    out = FitOutInput()
    if "mode" in data:
        out.mode = coerce_mode(data["mode"])
    for name in ("per_net_area_rate", "per_gross_area_rate", "total_amount"):
        if name in data:
            setattr(out, name, non_negative(data[name]))
    return out
