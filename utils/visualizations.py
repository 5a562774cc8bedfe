"""Visualization utilities for the NER calculator."""

import plotly.graph_objects as go

from engine.models import TIER_LABELS


TIER_COLORS = ['#1f4e79', '#2e75b6', '#5b9bd5', '#9dc3e6']


def create_ner_bar_chart(result, currency='€', area_unit='sqm'):
    """Headline rent next to the four NER tiers."""
    labels = ['Headline Rent'] + list(TIER_LABELS)
    values = [result.headline_rent, result.ner1, result.ner2, result.ner3, result.ner4]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=labels,
        y=values,
        marker_color=['#7f7f7f'] + TIER_COLORS,
        text=[f"{v:,.2f}" for v in values],
        textposition='outside',
        name='Rent'
    ))
    fig.update_layout(
        title='Headline vs Net Effective Rent',
        xaxis_title='',
        yaxis_title=f'{currency}/{area_unit}/month',
        height=400,
        showlegend=False
    )
    return fig


def deduction_steps(result):
    """Per-area-per-month value of each concession, in cascade order."""
    return [
        ('Rent Frees', result.headline_rent - result.ner1),
        ('Fit-Outs', result.ner1 - result.ner2),
        ('Agent Fees', result.ner2 - result.ner3),
        ('Unforeseen Costs', result.ner3 - result.ner4),
    ]


def create_ner_waterfall_chart(result, currency='€', area_unit='sqm'):
    """Walk from headline rent down to the final NER tier."""
    steps = deduction_steps(result)
    fig = go.Figure(go.Waterfall(
        x=['Headline Rent'] + [name for name, _ in steps] + ['Net Effective Rent'],
        measure=['absolute'] + ['relative'] * len(steps) + ['total'],
        y=[result.headline_rent] + [-value for _, value in steps] + [0],
        text=[f"{result.headline_rent:,.2f}"] + [f"-{value:,.2f}" for _, value in steps]
             + [f"{result.ner4:,.2f}"],
        textposition='outside',
        decreasing=dict(marker=dict(color='#c0504d')),
        increasing=dict(marker=dict(color='#9bbb59')),
        totals=dict(marker=dict(color='#1f4e79')),
        connector=dict(line=dict(color='gray', width=1, dash='dot'))
    ))
    fig.update_layout(
        title='Headline to Net Effective Rent',
        yaxis_title=f'{currency}/{area_unit}/month',
        height=400,
        showlegend=False
    )
    return fig


def create_cost_breakdown_chart(result, currency='€'):
    """Donut of the lump-sum concession values."""
    labels = ['Rent Frees', 'Fit-Outs', 'Agent Fees', 'Unforeseen Costs']
    values = [result.rent_free_cost, result.total_fit_out_cost,
              result.agent_fee_cost, result.unforeseen_costs]
    fig = go.Figure(go.Pie(
        labels=labels,
        values=values,
        hole=0.45,
        sort=False,
        textinfo='label+percent'
    ))
    fig.update_layout(
        title=f'Concession Costs ({currency})',
        height=400
    )
    return fig
