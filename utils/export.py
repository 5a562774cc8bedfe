"""CSV / Excel / HTML exports of a computed NER result."""

import html
from datetime import datetime
from io import BytesIO

import pandas as pd

from config.default_params import DISPLAY_DEFAULTS, FIT_OUT_LABELS, INPUT_FIELDS, unit_label
from engine.models import TIER_LABELS


def export_filename(prefix, extension, when=None):
    when = when or datetime.now()
    return f"{prefix}_{when.strftime('%Y%m%d')}.{extension}"


def build_inputs_frame(params, fit_out, settings=None):
    """Lease and fit-out inputs as Item / Value / Unit rows."""
    settings = settings or DISPLAY_DEFAULTS
    rows = []
    for name, label, unit in INPUT_FIELDS:
        rows.append({'Item': label, 'Value': getattr(params, name), 'Unit': unit_label(unit, settings)})
    # Value stays numeric; the mode label goes in Unit
    rows.append({'Item': 'Fit-Out Mode', 'Value': float('nan'), 'Unit': FIT_OUT_LABELS[fit_out.mode.value]})
    rows.append({'Item': FIT_OUT_LABELS['per_net_area'], 'Value': fit_out.per_net_area_rate,
                 'Unit': unit_label('per_area', settings)})
    rows.append({'Item': FIT_OUT_LABELS['per_gross_area'], 'Value': fit_out.per_gross_area_rate,
                 'Unit': unit_label('per_area', settings)})
    rows.append({'Item': FIT_OUT_LABELS['total'], 'Value': fit_out.total_amount,
                 'Unit': unit_label('currency', settings)})
    return pd.DataFrame(rows, columns=['Item', 'Value', 'Unit'])


def build_results_frame(result, settings=None):
    """Derived quantities and NER tiers as Item / Value / Unit rows."""
    settings = settings or DISPLAY_DEFAULTS
    currency = unit_label('currency', settings)
    rent = unit_label('rent', settings)
    rows = [
        {'Item': 'GLA', 'Value': result.gross_area, 'Unit': unit_label('area', settings)},
        {'Item': 'Months Billed', 'Value': result.months_billed, 'Unit': 'months'},
        {'Item': 'Gross Rent Due', 'Value': result.gross_rent_due, 'Unit': currency},
        {'Item': 'Rent-Free Value', 'Value': result.rent_free_cost, 'Unit': currency},
        {'Item': 'Total Fit-Out Cost', 'Value': result.total_fit_out_cost, 'Unit': currency},
        {'Item': 'Agent Fee Cost', 'Value': result.agent_fee_cost, 'Unit': currency},
        {'Item': 'Unforeseen Costs', 'Value': result.unforeseen_costs, 'Unit': currency},
        {'Item': 'Headline Rent', 'Value': result.headline_rent, 'Unit': rent},
    ]
    for tier in result.tiers():
        rows.append({'Item': tier['label'], 'Value': tier['ner'], 'Unit': rent})
        rows.append({'Item': f"{tier['label']} (vs headline)", 'Value': tier['delta_pct'], 'Unit': '%'})
    return pd.DataFrame(rows, columns=['Item', 'Value', 'Unit'])


def to_csv_bytes(df):
    return df.to_csv(index=False).encode("utf-8")


def to_excel_bytes(params, fit_out, result, settings=None):
    """Workbook with a 'Summary' sheet (results) and an 'Inputs' sheet."""
    df_results = build_results_frame(result, settings)
    df_inputs = build_inputs_frame(params, fit_out, settings)

    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as writer:
        df_results.to_excel(writer, sheet_name="Summary", index=False)
        df_inputs.to_excel(writer, sheet_name="Inputs", index=False)

        workbook = writer.book
        number_format = workbook.add_format({'num_format': '#,##0.00'})
        for sheet_name in ("Summary", "Inputs"):
            worksheet = writer.sheets[sheet_name]
            worksheet.set_column(0, 0, 36)
            worksheet.set_column(1, 1, 18, number_format)
            worksheet.set_column(2, 2, 18)
    bio.seek(0)
    return bio.read()


def to_html_report(params, fit_out, result, figures=None, settings=None):
    """Standalone HTML report: input and result tables plus the plotly charts."""
    settings = settings or DISPLAY_DEFAULTS
    df_inputs = build_inputs_frame(params, fit_out, settings)
    df_results = build_results_frame(result, settings)
    decimals = settings['decimals']

    parts = [
        "<!DOCTYPE html>",
        "<html><head><meta charset='utf-8'><title>Net Effective Rent Report</title>",
        "<style>body{font-family:sans-serif;margin:2em;}table{border-collapse:collapse;}"
        "td,th{border:1px solid #ccc;padding:4px 8px;text-align:left;}</style>",
        "</head><body>",
        "<h1>Net Effective Rent Report</h1>",
        f"<p>Generated {html.escape(datetime.now().strftime('%Y-%m-%d %H:%M'))}</p>",
        "<h2>Inputs</h2>",
        df_inputs.to_html(index=False, na_rep="", float_format=lambda v: f"{v:,.{decimals}f}"),
        "<h2>Results</h2>",
        df_results.to_html(index=False, float_format=lambda v: f"{v:,.{decimals}f}"),
    ]
    for i, fig in enumerate(figures or []):
        # First chart carries plotly.js from the CDN; the rest reuse it
        parts.append(fig.to_html(full_html=False, include_plotlyjs='cdn' if i == 0 else False))
    parts.append("</body></html>")
    return "\n".join(parts)
