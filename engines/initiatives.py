"""
AI Readiness Finder - Initiative Inference Engine
Independent threshold rules map survey answers to recommended initiatives.
Rules are not mutually exclusive; every rule that fires contributes one record.

Ranking: impact clamped to [5, 100], sorted descending (stable on ties),
truncated to the top 6.
"""
from engines.catalog import clamp, round_half_up

PILLARS = ('DataConnect', 'Insight360', 'PredictIQ', 'Cyber+', 'vCISO', 'SafeGuard', 'CoreIT')

MIN_IMPACT = 5
MAX_IMPACT = 100
MAX_INITIATIVES = 6


def _weighted(g, key, mult):
    return round_half_up(g(key) * mult)


def _gap(g, key):
    """Distance below a rating of 3 (0 when the rating is 3 or more)."""
    return 3 - min(g(key), 3)


def _build_rules():
    """
    Each rule: check(g) -> bool, impact(g) -> raw impact, hours(g) -> est hours/month.
    `g` looks up a rating by question id, defaulting to 0.
    Evaluation order is the tie-break order.
    """
    return [
        {
            'id': 'triage',
            'title': 'Inbox & Ticket Triage Copilot',
            'description': 'Auto-classify, route, and draft first responses for common requests; surface KB answers inline.',
            'pillar': 'Insight360',
            'check': lambda g: g('ticket_volume') >= 2 or g('repetitive_tasks') >= 3,
            'impact': lambda g: _weighted(g, 'ticket_volume', 18) + _weighted(g, 'kb_quality', 8),
            'hours': lambda g: 8 * (g('ticket_volume') + g('kb_quality')),
        },
        {
            'id': 'doc-intake',
            'title': 'Document Intake & Data Extraction',
            'description': 'Parse invoices/forms/PDFs to structured data with validation and ERP/PSA handoff.',
            'pillar': 'Insight360',
            'check': lambda g: g('document_intake') >= 2 or g('data_quality') >= 2,
            'impact': lambda g: _weighted(g, 'document_intake', 20) + _weighted(g, 'data_quality', 10),
            'hours': lambda g: 6 * (g('document_intake') + g('data_quality')),
        },
        {
            'id': 'approvals',
            'title': 'AI-Assisted Approvals & Exceptions',
            'description': 'Policy-aware summaries and risk flags speed up PO/access approvals with audit trails.',
            'pillar': 'Insight360',
            'check': lambda g: g('approvals') >= 2 and g('exec_sponsor') >= 2,
            'impact': lambda g: _weighted(g, 'approvals', 18) + _weighted(g, 'security_basics', 6),
            'hours': lambda g: 5 * (g('approvals') + g('security_basics')),
        },
        {
            'id': 'kb-copilot',
            'title': 'Knowledge Base Q&A Copilot',
            'description': 'Ask natural-language questions across SOPs and policies; cite sources & links.',
            'pillar': 'Insight360',
            'check': lambda g: g('kb_quality') >= 1 and g('ticket_volume') >= 2,
            'impact': lambda g: _weighted(g, 'kb_quality', 12) + _weighted(g, 'ticket_volume', 14),
            'hours': lambda g: 5 * (g('kb_quality') + g('ticket_volume')),
        },
        {
            'id': 'predict',
            'title': 'Predictive KPIs & Anomaly Alerts',
            'description': 'Blend PSA/ERP/CRM to forecast demand, detect churn/drift, and flag bottlenecks.',
            'pillar': 'PredictIQ',
            'check': lambda g: g('data_sources') >= 2 and g('data_quality') >= 2,
            'impact': lambda g: _weighted(g, 'data_sources', 12) + _weighted(g, 'data_quality', 16),
            'hours': lambda g: 4 * (g('data_sources') + g('data_quality')),
        },
        {
            # Fires on a blank survey too (0 <= 2)
            'id': 'policy',
            'title': 'AI Usage Policy & Guardrails',
            'description': 'Define safe prompts/data handling, enable enterprise controls, and monitor usage.',
            'pillar': 'vCISO',
            'check': lambda g: g('security_basics') <= 2 or g('data_handling') <= 2,
            'impact': lambda g: _gap(g, 'security_basics') * 25 + _gap(g, 'data_handling') * 20,
            'hours': lambda g: 3 * _gap(g, 'data_handling'),
        },
    ]

INITIATIVE_RULES = _build_rules()


def _getter(answers):
    def g(key):
        v = answers.get(key)
        return v if v is not None else 0
    return g


def evaluate_rule(rule, answers):
    """Evaluate one rule. Returns the initiative record, or None if it does not fire."""
    g = _getter(answers)
    if not rule['check'](g):
        return None
    return {
        'id': rule['id'],
        'title': rule['title'],
        'description': rule['description'],
        'pillar': rule['pillar'],
        'impact': int(clamp(rule['impact'](g), MIN_IMPACT, MAX_IMPACT)),
        'estHoursSavedPerMonth': rule['hours'](g),
    }


def infer_initiatives(answers, rules=None):
    """Ranked initiatives for an answers map (0..6 records, highest impact first)."""
    fired = []
    for rule in (rules if rules is not None else INITIATIVE_RULES):
        init = evaluate_rule(rule, answers)
        if init:
            fired.append(init)
    fired.sort(key=lambda x: x['impact'], reverse=True)
    return fired[:MAX_INITIATIVES]
