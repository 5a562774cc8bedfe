"""Test CSV / Excel / HTML exports and the charts they embed"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io
from datetime import datetime
import pandas as pd
import pytest
from openpyxl import load_workbook
from engine.models import LeaseParameters, FitOutInput, FitOutMode
from engine.fitout import FitOutReconciler
from engine.compute import compute
from config.default_params import DISPLAY_DEFAULTS
from utils.export import (
    build_inputs_frame, build_results_frame, to_csv_bytes, to_excel_bytes, to_html_report, export_filename
)
from utils.visualizations import (
    create_ner_bar_chart, create_ner_waterfall_chart, create_cost_breakdown_chart, deduction_steps
)

TOL = 1e-6

@pytest.fixture
def scenario():
    params = LeaseParameters()
    rec = FitOutReconciler(FitOutInput(mode=FitOutMode.PER_NET_AREA, per_net_area_rate=150),
                           net_area=params.net_area, gross_area=1050.0)
    result = compute(params, rec)
    return params, rec.snapshot(), result

def value_of(df, item):
    return df.loc[df["Item"] == item, "Value"].iloc[0]

def test_results_frame_contents(scenario):
    params, fit, result = scenario
    df = build_results_frame(result, DISPLAY_DEFAULTS)
    assert list(df.columns) == ["Item", "Value", "Unit"]
    assert abs(value_of(df, "GLA") - 1050.0) < TOL
    assert abs(value_of(df, "Total Fit-Out Cost") - 150_000.0) < TOL
    assert abs(value_of(df, "NER incl. Agent Fees") - result.ner3) < TOL
    assert value_of(df, "Headline Rent") == 13.0
    assert df.loc[df["Item"] == "Headline Rent", "Unit"].iloc[0] == "€/sqm/month"

def test_inputs_frame_contents(scenario):
    params, fit, result = scenario
    df = build_inputs_frame(params, fit)
    assert value_of(df, "NLA") == 1000.0
    assert df.loc[df["Item"] == "Fit-Out Mode", "Unit"].iloc[0] == "Fit-Out per NLA"
    assert pd.api.types.is_float_dtype(df["Value"])
    assert abs(value_of(df, "Fit-Out Total") - 150_000.0) < TOL

def test_csv_bytes(scenario):
    params, fit, result = scenario
    df = build_results_frame(result)
    back = pd.read_csv(io.BytesIO(to_csv_bytes(df)))
    assert len(back) == len(df)
    assert abs(back.loc[back["Item"] == "Gross Rent Due", "Value"].iloc[0] - result.gross_rent_due) < TOL

def test_excel_workbook(scenario):
    """Workbook has Summary and Inputs sheets with numeric values"""
    params, fit, result = scenario
    wb = load_workbook(io.BytesIO(to_excel_bytes(params, fit, result)), data_only=True)
    assert wb.sheetnames == ["Summary", "Inputs"]
    ws = wb["Summary"]
    assert ws.cell(1, 1).value == "Item"
    found = {ws.cell(r, 1).value: ws.cell(r, 2).value for r in range(2, ws.max_row + 1)}
    assert abs(found["Agent Fee Cost"] - 54_600.0) < TOL
    assert abs(found["NER incl. Rent Frees"] - result.ner1) < TOL
    inputs = wb["Inputs"]
    labels = [inputs.cell(r, 1).value for r in range(2, inputs.max_row + 1)]
    assert "Headline Rent" in labels and "Fit-Out per GLA" in labels

def test_html_report(scenario):
    params, fit, result = scenario
    figs = [create_ner_bar_chart(result), create_ner_waterfall_chart(result)]
    report = to_html_report(params, fit, result, figs)
    assert report.startswith("<!DOCTYPE html>")
    assert "Net Effective Rent Report" in report
    assert "NER incl. Fit-Outs" in report
    assert "cdn.plot.ly" in report
    assert report.rstrip().endswith("</html>")
    inputs_table = report.split("<h2>Inputs</h2>")[1].split("<h2>Results</h2>")[0]
    assert "1,000.00" in inputs_table
    assert "150,000.00" in inputs_table
    assert "NaN" not in inputs_table

def test_export_filename():
    assert export_filename("NER", "csv", datetime(2024, 3, 9)) == "NER_20240309.csv"

def test_waterfall_steps_sum_to_final_tier(scenario):
    """Headline minus every deduction step lands on ner4"""
    params, fit, result = scenario
    steps = deduction_steps(result)
    assert [name for name, _ in steps] == ["Rent Frees", "Fit-Outs", "Agent Fees", "Unforeseen Costs"]
    assert abs(result.headline_rent - sum(v for _, v in steps) - result.ner4) < 1e-9
    # Rent-free step per sqm/month equals the lump value spread over term * GLA
    assert abs(steps[0][1] - result.rent_free_cost / (84 * 1050)) < 1e-9

def test_charts_build(scenario):
    params, fit, result = scenario
    bar = create_ner_bar_chart(result, "£", "sqft")
    assert len(bar.data) == 1
    assert list(bar.data[0].y) == [result.headline_rent, result.ner1, result.ner2, result.ner3, result.ner4]
    assert bar.layout.yaxis.title.text == "£/sqft/month"

    waterfall = create_ner_waterfall_chart(result)
    assert list(waterfall.data[0].measure) == ["absolute", "relative", "relative", "relative", "relative", "total"]

    pie = create_cost_breakdown_chart(result)
    assert abs(sum(pie.data[0].values) - (result.rent_free_cost + result.total_fit_out_cost
                                          + result.agent_fee_cost + result.unforeseen_costs)) < TOL

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
