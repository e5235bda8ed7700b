"""
AI Readiness Finder - Report Export
Excel workbook of the current assessment (summary, categories, initiatives,
answers, business case).
"""
import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from engines.catalog import CATEGORIES, CATEGORY_LABELS, QUESTIONS, round_half_up

HEADER_FONT = Font(bold=True, color='FFFFFF', size=11)
HEADER_FILL = PatternFill(start_color='2E2E38', end_color='2E2E38', fill_type='solid')
THIN_BORDER = Border(left=Side(style='thin'), right=Side(style='thin'),
                     top=Side(style='thin'), bottom=Side(style='thin'))


def ws_write(ws, headers, rows):
    for c, h in enumerate(headers, 1):
        cell = ws.cell(row=1, column=c, value=h)
        cell.font = HEADER_FONT; cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal='center'); cell.border = THIN_BORDER
    for r, row in enumerate(rows, 2):
        for c, val in enumerate(row, 1):
            cell = ws.cell(row=r, column=c, value=val); cell.border = THIN_BORDER
    for col in ws.columns:
        ml = max(len(str(cell.value or '')) for cell in col)
        ws.column_dimensions[col[0].column_letter].width = min(ml + 2, 60)


def build_workbook(view):
    """`view` is the API state object: snapshot fields plus the assessment."""
    wb = openpyxl.Workbook()
    answers = view.get('answers') or {}

    # 1. Summary
    ws = wb.active; ws.title = 'Summary'
    ws_write(ws, ['Field', 'Value'], [
        ['Organisation', view.get('orgName', '')],
        ['Company', view.get('company', '')],
        ['Email', view.get('email', '')],
        ['Overall Readiness', f"{view['overallPct']}%"],
        ['Band', view.get('band', '')],
        ['Initiatives', len(view.get('allInitiatives', []))],
        ['Note', view.get('note', '')],
    ])

    # 2. Category Scores
    ws2 = wb.create_sheet('Category Scores')
    ws_write(ws2, ['Category', 'Score'], [
        [CATEGORY_LABELS[c], f"{round_half_up(view['categoryScores'].get(c, 0))}%"] for c in CATEGORIES
    ])

    # 3. Initiatives
    ws3 = wb.create_sheet('Initiatives')
    ws_write(ws3, ['Priority', 'ID', 'Title', 'Pillar', 'Impact', 'Est. Hours / Month', 'Description'], [
        [idx, i['id'], i['title'], i['pillar'], i['impact'],
         max(2, i['estHoursSavedPerMonth']), i['description']]
        for idx, i in enumerate(view.get('allInitiatives', []), 1)
    ])

    # 4. Answers
    ws4 = wb.create_sheet('Answers')
    ws_write(ws4, ['Question', 'Category', 'Rating'], [
        [q['text'], CATEGORY_LABELS[q['category']], answers.get(q['id'], 0)] for q in QUESTIONS
    ])

    # 5. Business Case
    ws5 = wb.create_sheet('Business Case')
    roi = view.get('roi')
    if roi:
        rows = [
            ['Baseline repetitive hours / month', roi['baselineHrs']],
            ['Automation yield (at current readiness)', f"{roi['automationYield']}%"],
            ['Projected hours saved / month', roi['hoursSaved']],
            ['Projected savings / month', f"${roi['cashSaved']:,}"],
        ]
    else:
        rows = [['Projected savings', 'Fill in team size, hours/week, and hourly rate']]
    ws_write(ws5, ['Metric', 'Value'], rows)

    return wb
