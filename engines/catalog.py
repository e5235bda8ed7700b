"""
AI Readiness Finder - Question Catalog
13 weighted survey statements across 4 readiness categories.
Ratings are 0 (not true) to 5 (very true) for the organisation today.
"""
import math

MIN_RATING = 0
MAX_SCORE = 5

CATEGORIES = ('automation', 'data', 'people', 'risk')

CATEGORY_LABELS = {
    'automation': 'Automation Potential',
    'data':       'Data Readiness',
    'people':     'Change Readiness',
    'risk':       'Risk & Governance',
}

# Overall score blend; must sum to 1.0
CATEGORY_WEIGHTS = {
    'automation': 0.35,
    'data':       0.30,
    'people':     0.20,
    'risk':       0.15,
}

QUESTIONS = (
    # Automation potential
    {'id':'repetitive_tasks','category':'automation','weight':1.2,
     'text':'Teams spend time on repetitive digital tasks (copy/paste, renaming files, routing emails).',
     'helper':'Think back-office, helpdesk triage, report formatting, content prep.'},
    {'id':'ticket_volume','category':'automation','weight':1.1,
     'text':'We handle many inbound tickets/emails/chats with recurring themes/questions.'},
    {'id':'document_intake','category':'automation','weight':1.25,
     'text':'We manually process documents (invoices, PDFs, forms) and re-key data.'},
    {'id':'approvals','category':'automation','weight':0.9,
     'text':'Approvals (POs, access, exceptions) are manual, slow, or inconsistent.'},
    # Data readiness
    {'id':'data_sources','category':'data','weight':1.0,
     'text':'We know where our key data lives and can access it (PSA, ERP, CRM, file shares).'},
    {'id':'kb_quality','category':'data','weight':0.9,
     'text':'We have a usable knowledge base / SOPs (even if imperfect).'},
    {'id':'data_quality','category':'data','weight':1.2,
     'text':'Our data is reasonably clean and structured (naming, owners, duplicates).'},
    # Change readiness
    {'id':'exec_sponsor','category':'people','weight':1.1,
     'text':'We have an executive sponsor who wants AI-enabled efficiency gains.'},
    {'id':'champions','category':'people','weight':1.0,
     'text':'We have team champions who can test new workflows and give feedback.'},
    {'id':'training_budget','category':'people','weight':0.9,
     'text':'We can allocate a small budget/time for training and change management.'},
    # Risk & governance
    {'id':'security_basics','category':'risk','weight':1.0,
     'text':'Security basics are in place (MFA, least privilege, EDR, email security).'},
    {'id':'compliance_req','category':'risk','weight':0.8,
     'text':'We have compliance requirements (HIPAA/PCI/FINRA) that shape AI usage.',
     'helper':'Higher score = clearer governance; lower = unknowns or blockers.'},
    {'id':'data_handling','category':'risk','weight':1.1,
     'text':'We can keep sensitive data out of consumer AI tools (policies/controls).'},
)

QUESTION_IDS = tuple(q['id'] for q in QUESTIONS)


def clamp(v, lo=0, hi=100):
    return max(lo, min(hi, v))


def round_half_up(v):
    """Round .5 away from zero for positives, like the browser's Math.round."""
    return int(math.floor(v + 0.5))


def clamp_rating(value):
    """Coerce a raw form value into an integer rating 0..5.
    Returns None when the value is not numeric at all."""
    if value is None or isinstance(value, bool):
        return None
    try:
        v = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(v) or math.isinf(v):
        return None
    return int(clamp(round_half_up(v), MIN_RATING, MAX_SCORE))


def normalize_answers(raw):
    """Clamp every rating in a raw answers mapping. Non-numeric entries and
    ids outside the catalog are dropped."""
    if not isinstance(raw, dict):
        return {}
    answers = {}
    for qid, value in raw.items():
        if str(qid) not in QUESTION_IDS:
            continue
        rating = clamp_rating(value)
        if rating is not None:
            answers[str(qid)] = rating
    return answers
