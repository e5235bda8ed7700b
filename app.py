"""
AI Readiness Finder - Flask API Server
Holds the in-progress survey form, recomputes scores / initiatives / ROI
on every change and persists the form snapshot after each mutation.
"""
import io
import logging
import os

from flask import Flask, jsonify, request, send_file

from engines import config
from engines.catalog import (
    CATEGORIES, CATEGORY_LABELS, CATEGORY_WEIGHTS, QUESTION_IDS, QUESTIONS,
    clamp_rating, round_half_up,
)
from engines.export import build_workbook
from engines.report import build_report, submit_report
from engines.scoring import assess
from engines.snapshot import SnapshotStore, coerce_flag, coerce_snapshot

logger = logging.getLogger(__name__)

app = Flask(__name__)

STORE = SnapshotStore()

STATE = {
    'form': None, 'assessment': None,
    'submitted': False, 'lastSubmission': None, 'loaded': False,
}

TEXT_FIELDS = ('company', 'email', 'note')
ROI_FIELDS = ('teamSize', 'hoursPerPersonWeek', 'hourlyRate')


def _recompute():
    STATE['assessment'] = assess(STATE['form'])


def _commit():
    """Recompute derived values and persist the snapshot."""
    _recompute()
    STORE.save(STATE['form'])


@app.before_request
def _ensure_loaded():
    if not STATE['loaded']:
        STATE['form'] = STORE.load()
        STATE['submitted'] = False
        STATE['lastSubmission'] = None
        _recompute()
        STATE['loaded'] = True
        logger.info(f"Form loaded from {STORE.path} ({len(STATE['form']['answers'])} answers)")


def _build_view_object(form=None, assessment=None):
    """Everything the form needs to render: snapshot fields + derived results."""
    form = form if form is not None else STATE['form']
    ax = assessment if assessment is not None else STATE['assessment']
    has_answers = len(form['answers']) > 0
    ranked = [dict(i, priority=idx, displayHours=max(2, i['estHoursSavedPerMonth']))
              for idx, i in enumerate(ax['initiatives'], 1)]
    return {
        # Snapshot
        'answers': form['answers'], 'company': form['company'], 'email': form['email'],
        'teamSize': form['teamSize'], 'hoursPerPersonWeek': form['hoursPerPersonWeek'],
        'hourlyRate': form['hourlyRate'], 'subscribe': form['subscribe'], 'note': form['note'],
        # Scores
        'categoryScores': ax['categoryScores'],
        'overall': ax['overall'],
        'overallPct': round_half_up(ax['overall']),
        'band': ax['band'],
        'chart': ax['chart'],
        # Initiatives (hidden until the survey is started)
        'hasAnswers': has_answers,
        'initiatives': ranked if has_answers else [],
        'allInitiatives': ranked,
        # Business case
        'roi': ax['roi'],
        'roiAvailable': ax['roi'] is not None,
        # Meta
        'orgName': config.ORG_NAME,
        'ctaUrl': config.CTA_URL,
        'webhookEnabled': bool(config.WEBHOOK_URL),
        'submitted': STATE['submitted'],
    }


def _json_body():
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


# ══════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════

@app.route('/api/questions')
def api_questions():
    return jsonify({
        'questions': list(QUESTIONS),
        'categories': [{'key': c, 'label': CATEGORY_LABELS[c], 'weight': CATEGORY_WEIGHTS[c]}
                       for c in CATEGORIES],
    })


@app.route('/api/state')
def api_state():
    return jsonify(_build_view_object())


@app.route('/api/answers', methods=['POST'])
def api_answers():
    """Merge rating updates. Ratings are clamped to 0..5; null clears an answer.
    Ids outside the catalog are ignored."""
    body = _json_body()
    if body is None or not isinstance(body.get('answers'), dict):
        return jsonify({'error': 'answers object required'}), 400

    answers = STATE['form']['answers']
    for qid, value in body['answers'].items():
        if qid not in QUESTION_IDS:
            continue
        if value is None:
            answers.pop(qid, None)
            continue
        rating = clamp_rating(value)
        if rating is not None:
            answers[qid] = rating

    _commit()
    return jsonify({'status': 'ok', 'data': _build_view_object()})


@app.route('/api/form', methods=['POST'])
def api_form():
    """Update contact fields and ROI inputs. Unknown keys are ignored."""
    body = _json_body()
    if body is None:
        return jsonify({'error': 'JSON object required'}), 400

    form = STATE['form']
    for key in TEXT_FIELDS:
        if key in body:
            form[key] = '' if body[key] is None else str(body[key])
    for key in ROI_FIELDS:
        if key in body:
            form[key] = None if body[key] == '' else body[key]
    if 'subscribe' in body:
        form['subscribe'] = coerce_flag(body['subscribe'])

    _commit()
    return jsonify({'status': 'ok', 'data': _build_view_object()})


@app.route('/api/reset', methods=['POST'])
def api_reset():
    """Restore every field to its default and persist the empty form."""
    STATE['form'] = STORE.reset()
    STATE['submitted'] = False
    STATE['lastSubmission'] = None
    _recompute()
    return jsonify({'status': 'ok', 'data': _build_view_object()})


@app.route('/api/assess', methods=['POST'])
def api_assess():
    """Stateless scoring of a posted snapshot; does not touch the stored form."""
    body = _json_body()
    if body is None:
        return jsonify({'error': 'JSON object required'}), 400
    form = coerce_snapshot(body)
    view = _build_view_object(form=form, assessment=assess(form))
    return jsonify({'status': 'ok', 'data': view})


@app.route('/api/submit', methods=['POST'])
def api_submit():
    """Send the report to the webhook if one is configured, else keep it locally.
    Delivery failures are logged only; the form always reaches 'submitted'."""
    try:
        payload = build_report(STATE['form'], STATE['assessment'])
        result = submit_report(payload, config.WEBHOOK_URL)
        STATE['submitted'] = True
        STATE['lastSubmission'] = payload
        return jsonify({'status': 'ok', **result})
    except Exception as e:
        logger.exception("Report submission failed")
        return jsonify({'status': 'error', 'message': str(e)}), 500


@app.route('/api/export')
def api_export():
    """Download the current report as an Excel workbook."""
    try:
        wb = build_workbook(_build_view_object())
        buf = io.BytesIO()
        wb.save(buf)
        buf.seek(0)
        return send_file(
            buf, as_attachment=True, download_name='AI_Readiness_Report.xlsx',
            mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
        )
    except Exception as e:
        logger.exception("Export failed")
        return jsonify({'error': str(e)}), 500


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s [%(name)s] %(message)s')
    app.run(debug=False, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
