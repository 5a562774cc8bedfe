"""Keeps the three fit-out representations (per NLA, per GLA, total) consistent"""
import logging
from dataclasses import replace
from typing import Optional, Union

from .models import FIT_OUT_FIELDS, FitOutInput, FitOutMode
from .numeric import coerce_mode, non_negative, safe_divide

logger = logging.getLogger(__name__)

FIELD_NAMES = tuple(FIT_OUT_FIELDS.values())


class FitOutReconciler:
    """
    Owns one FitOutInput and refreshes its derived fields on discrete events.

    Only the field selected by ``mode`` is authoritative; the other two are
    recomputed when an edit is committed or when the areas change. A field
    marked as focused by the input layer is never overwritten.
    """

    def __init__(self, fit_out: Optional[FitOutInput] = None,
                 net_area: float = 0.0, gross_area: float = 0.0):
        self.state = replace(fit_out) if fit_out is not None else FitOutInput()
        self.state.mode = coerce_mode(self.state.mode)
        self.focused_field: Optional[str] = None
        self.net_area = non_negative(net_area)
        self.gross_area = non_negative(gross_area)
        self._refresh()

    @property
    def mode(self) -> FitOutMode:
        return self.state.mode

    @property
    def authoritative_field(self) -> str:
        return self.state.mode.field

    def set_mode(self, new_mode: Union[FitOutMode, str]) -> None:
        # Mode switch alone never touches values
        self.state.mode = coerce_mode(new_mode)
        logger.debug("Fit-out mode set to %s", self.state.mode.value)

    def focus(self, field: str) -> None:
        self._check_field(field)
        self.focused_field = field

    def blur(self) -> None:
        self.focused_field = None

    def on_area_changed(self, net_area: float, gross_area: float) -> None:
        self.net_area = non_negative(net_area)
        self.gross_area = non_negative(gross_area)
        self._refresh()

    def on_field_edited(self, field: str, raw_value) -> None:
        """Commit a value to the authoritative field and recompute the other two"""
        self._check_field(field)
        if field != self.authoritative_field:
            raise ValueError(
                f"{field} is derived in {self.state.mode.value} mode; "
                f"edit {self.authoritative_field} instead"
            )
        setattr(self.state, field, non_negative(raw_value))
        self._refresh()

    def resolve_total_fit_out_cost(self) -> float:
        mode = self.state.mode
        if mode == FitOutMode.PER_NET_AREA:
            total = self.state.per_net_area_rate * self.net_area
        elif mode == FitOutMode.PER_GROSS_AREA:
            total = self.state.per_gross_area_rate * self.gross_area
        else:
            total = self.state.total_amount
        return non_negative(total)

    def snapshot(self) -> FitOutInput:
        return replace(self.state)

    def _refresh(self) -> None:
        total = self.resolve_total_fit_out_cost()
        derived = {
            "total_amount": total,
            "per_net_area_rate": safe_divide(total, self.net_area),
            "per_gross_area_rate": safe_divide(total, self.gross_area),
        }
        for name, value in derived.items():
            if name == self.authoritative_field or name == self.focused_field:
                continue
            setattr(self.state, name, value)

    @staticmethod
    def _check_field(field: str) -> None:
        if field not in FIELD_NAMES:
            raise ValueError(f"Unknown fit-out field: {field!r}")
