"""Lease inputs, fit-out representations and NER output records"""
from dataclasses import dataclass, asdict
from enum import Enum


class FitOutMode(str, Enum):
    PER_NET_AREA = "per_net_area"
    PER_GROSS_AREA = "per_gross_area"
    TOTAL = "total"

    @property
    def field(self) -> str:
        """Name of the FitOutInput attribute this mode makes authoritative"""
        return FIT_OUT_FIELDS[self]


FIT_OUT_FIELDS = {
    FitOutMode.PER_NET_AREA: "per_net_area_rate",
    FitOutMode.PER_GROSS_AREA: "per_gross_area_rate",
    FitOutMode.TOTAL: "total_amount",
}


@dataclass(frozen=True)
class LeaseParameters:
    net_area: float = 1000.0          # NLA, sqm
    add_on_percent: float = 5.0       # common-area load on top of NLA
    headline_rent: float = 13.0       # per sqm per month
    lease_term_months: float = 84.0
    rent_free_months: float = 7.0
    agent_fee_months: float = 4.0     # months of full headline rent
    unforeseen_costs: float = 0.0     # lump sum, last tier only


@dataclass
class FitOutInput:
    mode: FitOutMode = FitOutMode.PER_NET_AREA
    per_net_area_rate: float = 150.0
    per_gross_area_rate: float = 0.0  # derived until reconciled
    total_amount: float = 0.0         # derived until reconciled


TIER_LABELS = (
    "NER incl. Rent Frees",
    "NER incl. Fit-Outs",
    "NER incl. Agent Fees",
    "NER incl. Unforeseen Costs",
)


@dataclass(frozen=True)
class NERResult:
    headline_rent: float
    gross_area: float
    months_billed: float
    gross_rent_due: float
    rent_free_cost: float
    total_fit_out_cost: float
    agent_fee_cost: float
    unforeseen_costs: float
    ner1: float
    ner2: float
    ner3: float
    ner4: float
    delta1: float
    delta2: float
    delta3: float
    delta4: float

    def tiers(self) -> list:
        """Four NER tiers in cascade order with their delta vs headline"""
        values = (self.ner1, self.ner2, self.ner3, self.ner4)
        deltas = (self.delta1, self.delta2, self.delta3, self.delta4)
        return [
            {"tier": i + 1, "label": label, "ner": ner, "delta_pct": delta}
            for i, (label, ner, delta) in enumerate(zip(TIER_LABELS, values, deltas))
        ]

    def to_dict(self) -> dict:
        return asdict(self)
