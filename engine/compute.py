import logging
from typing import Optional, Union

from .models import FitOutInput, LeaseParameters, NERResult
from .numeric import normalize_fit_out, normalize_lease_parameters
from .fitout import FitOutReconciler
from .lease import (
    compute_gross_area, compute_months_billed, compute_gross_rent,
    compute_rent_free_cost, compute_agent_fees, compute_ner_tiers, compute_delta
)

logger = logging.getLogger(__name__)


def compute(params: Union[LeaseParameters, dict, None] = None,
            fit_out: Optional[Union[FitOutReconciler, FitOutInput, dict]] = None) -> NERResult:
    """
    Compute the full NER record from lease parameters and fit-out input

    Args:
        params: LeaseParameters or mapping; normalized (clamped >= 0) here
        fit_out: FitOutReconciler (used as-is, areas refreshed) or a
            FitOutInput/mapping wrapped in a fresh reconciler. None means
            no fit-out contribution.
    """
    p = normalize_lease_parameters(params)
    gross_area = compute_gross_area(p.net_area, p.add_on_percent)

    # Fit-out total comes from whichever representation is authoritative
    if fit_out is None:
        fit_out_total = 0.0
    else:
        if isinstance(fit_out, FitOutReconciler):
            reconciler = fit_out
            reconciler.on_area_changed(p.net_area, gross_area)
        else:
            reconciler = FitOutReconciler(normalize_fit_out(fit_out), p.net_area, gross_area)
        fit_out_total = reconciler.resolve_total_fit_out_cost()

    months_billed = compute_months_billed(p.lease_term_months, p.rent_free_months)
    gross_rent = compute_gross_rent(p.headline_rent, gross_area, p.lease_term_months, p.rent_free_months)
    agent_fees = compute_agent_fees(p.agent_fee_months, p.headline_rent, gross_area)

    tiers = compute_ner_tiers(
        gross_rent, fit_out_total, agent_fees, p.unforeseen_costs,
        p.lease_term_months, gross_area
    )

    result = NERResult(
        headline_rent=p.headline_rent,
        gross_area=gross_area,
        months_billed=months_billed,
        gross_rent_due=gross_rent,
        rent_free_cost=compute_rent_free_cost(p.headline_rent, gross_area,
                                              p.lease_term_months, p.rent_free_months),
        total_fit_out_cost=fit_out_total,
        agent_fee_cost=agent_fees,
        unforeseen_costs=p.unforeseen_costs,
        ner1=tiers["ner1"],
        ner2=tiers["ner2"],
        ner3=tiers["ner3"],
        ner4=tiers["ner4"],
        delta1=compute_delta(tiers["ner1"], p.headline_rent),
        delta2=compute_delta(tiers["ner2"], p.headline_rent),
        delta3=compute_delta(tiers["ner3"], p.headline_rent),
        delta4=compute_delta(tiers["ner4"], p.headline_rent),
    )
    logger.debug("NER computed: gla=%.2f gross_rent=%.2f fit_out=%.2f ner=%.4f/%.4f/%.4f/%.4f",
                 gross_area, gross_rent, fit_out_total,
                 result.ner1, result.ner2, result.ner3, result.ner4)
    return result
