"""
AI Readiness Finder - Category Scoring Engine
Weighted 0-100 score per category, blended into one overall readiness score.

  category % = sum((rating / 5) * weight) / sum(weight) * 100
  overall    = 0.35 automation + 0.30 data + 0.20 people + 0.15 risk

No rounding happens here; the view layer rounds for display.
"""
from engines.catalog import (
    CATEGORIES, CATEGORY_LABELS, CATEGORY_WEIGHTS, MAX_SCORE, QUESTIONS,
    clamp, round_half_up,
)
from engines.initiatives import infer_initiatives
from engines.roi import compute_roi

# (min_overall, band) checked top-down
READINESS_BANDS = [
    (75, 'green'),
    (50, 'amber'),
    (0,  'red'),
]


def score(answers, questions=QUESTIONS):
    """Score an answers map against the catalog.

    Returns {'categoryScores': {category: 0..100}, 'overall': 0..100}.
    Absent answers count as 0; ids outside the catalog are ignored.
    """
    by_cat = {c: {'score': 0.0, 'weight': 0.0} for c in CATEGORIES}
    for q in questions:
        v = answers.get(q['id']) or 0
        by_cat[q['category']]['score'] += (v / MAX_SCORE) * q['weight']
        by_cat[q['category']]['weight'] += q['weight']

    category_scores = {}
    for c, acc in by_cat.items():
        category_scores[c] = (acc['score'] / acc['weight']) * 100 if acc['weight'] else 0.0

    overall = sum(category_scores[c] * CATEGORY_WEIGHTS[c] for c in CATEGORIES)
    return {'categoryScores': category_scores, 'overall': clamp(overall, 0, 100)}


def readiness_band(overall):
    for floor, band in READINESS_BANDS:
        if overall >= floor:
            return band
    return 'red'


def chart_data(category_scores):
    """Bar chart rows in catalog category order."""
    return [{'key': c, 'name': CATEGORY_LABELS[c],
             'score': round_half_up(category_scores.get(c) or 0)} for c in CATEGORIES]


def assess(state):
    """Run all three engines for one form snapshot."""
    answers = state.get('answers') or {}
    scored = score(answers)
    overall = scored['overall']
    return {
        'categoryScores': scored['categoryScores'],
        'overall': overall,
        'band': readiness_band(overall),
        'chart': chart_data(scored['categoryScores']),
        'initiatives': infer_initiatives(answers),
        'roi': compute_roi(state.get('teamSize'), state.get('hoursPerPersonWeek'),
                           state.get('hourlyRate'), overall),
    }
