"""Tests for the Excel report export."""

import app as app_module
from engines.export import build_workbook
from engines.scoring import assess
from engines.snapshot import coerce_snapshot


def _view(**form):
    snap = coerce_snapshot(form)
    app_module.STATE["submitted"] = False
    return app_module._build_view_object(form=snap, assessment=assess(snap))


def test_sheets_present():
    wb = build_workbook(_view())
    assert wb.sheetnames == ["Summary", "Category Scores", "Initiatives", "Answers", "Business Case"]


def test_initiative_rows_use_display_hours():
    wb = build_workbook(_view(answers={"repetitive_tasks": 3}))
    ws = wb["Initiatives"]
    rows = list(ws.iter_rows(min_row=2, values_only=True))
    by_id = {r[1]: r for r in rows}
    # triage fires with 0 raw hours, shown as the 2-hour floor
    assert by_id["triage"][5] == 2
    assert rows[0][0] == 1


def test_answers_sheet_lists_every_question():
    wb = build_workbook(_view(answers={"ticket_volume": 4}))
    rows = list(wb["Answers"].iter_rows(min_row=2, values_only=True))
    assert len(rows) == 13
    assert 4 in [r[2] for r in rows]


def test_business_case_with_and_without_roi():
    without = build_workbook(_view())
    assert without["Business Case"].cell(row=2, column=1).value == "Projected savings"

    with_roi = build_workbook(_view(teamSize=10, hoursPerPersonWeek=5, hourlyRate=60,
                                    answers={"ticket_volume": 5}))
    labels = [r[0] for r in with_roi["Business Case"].iter_rows(min_row=2, values_only=True)]
    assert "Projected savings / month" in labels
