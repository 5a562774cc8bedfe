"""Lease economics: gross area, rent, concessions and the NER cascade"""
import logging

from .numeric import EPSILON

logger = logging.getLogger(__name__)


def compute_gross_area(net_area: float, add_on_percent: float) -> float:
    return net_area * (1 + add_on_percent / 100.0)


def compute_months_billed(lease_term_months: float, rent_free_months: float) -> float:
    """Billable months; rent-free beyond the term floors at 0 instead of going negative"""
    months = lease_term_months - rent_free_months
    if months < 0:
        logger.info("Rent-free months (%s) exceed lease term (%s); billable months floored at 0",
                    rent_free_months, lease_term_months)
        return 0.0
    return months


def compute_gross_rent(
    headline_rent: float,
    gross_area: float,
    lease_term_months: float,
    rent_free_months: float
) -> float:
    """
    Rent actually collected over the lease.

    Rent-free months shorten the billable duration rather than being
    deducted separately, so the rent-free concession is already priced
    into ner1.
    """
    months_billed = compute_months_billed(lease_term_months, rent_free_months)
    return headline_rent * gross_area * months_billed


def compute_rent_free_cost(
    headline_rent: float,
    gross_area: float,
    lease_term_months: float,
    rent_free_months: float
) -> float:
    """Headline rent forgone during the rent-free period (capped at the term)"""
    months_billed = compute_months_billed(lease_term_months, rent_free_months)
    return headline_rent * gross_area * (lease_term_months - months_billed)


def compute_agent_fees(agent_fee_months: float, headline_rent: float, gross_area: float) -> float:
    # Agent fees are months of full headline rent, not reduced by rent-frees
    return agent_fee_months * headline_rent * gross_area


def compute_ner_tiers(
    gross_rent: float,
    total_fit_out_cost: float,
    agent_fees: float,
    unforeseen_costs: float,
    lease_term_months: float,
    gross_area: float
) -> dict:
    """
    NER cascade over a shared denominator (term x gross area).

    Each tier deducts one more cost category from the previous numerator:
    rent-frees -> fit-outs -> agent fees -> unforeseen. A zero term or area
    yields 0 for every tier.

    Returns:
        dict with ner1..ner4 in currency per area per month
    """
    area_months = lease_term_months * gross_area
    if area_months <= EPSILON:
        return {"ner1": 0.0, "ner2": 0.0, "ner3": 0.0, "ner4": 0.0}

    denom = max(EPSILON, area_months)
    numerator = gross_rent
    tiers = {"ner1": numerator / denom}
    numerator -= total_fit_out_cost
    tiers["ner2"] = numerator / denom
    numerator -= agent_fees
    tiers["ner3"] = numerator / denom
    numerator -= unforeseen_costs
    tiers["ner4"] = numerator / denom
    return tiers


def compute_delta(tier_value: float, headline_rent: float) -> float:
    """Percentage reduction of a tier vs headline rent (positive = below headline)"""
    if headline_rent > 0:
        return (headline_rent - tier_value) / headline_rent * 100.0
    return 0.0
