"""
AI Readiness Finder - Report Submission
Builds the report payload and fires it at the configured webhook.

Delivery is best-effort: any HTTP failure is logged and the caller still
sees the submitted state. No webhook configured means the report is kept
locally and nothing is sent.
"""
import logging
from datetime import datetime, timezone

import httpx

from engines.config import ORG_NAME, SOURCE_TAG, WEBHOOK_TIMEOUT

logger = logging.getLogger(__name__)

SENT_MESSAGE = "Thanks! We'll send your report shortly."
LOCAL_MESSAGE = 'Saved locally. Set WEBHOOK_URL to enable emailing via Zapier/HubSpot/PSA.'


def build_report(state, assessment, org=ORG_NAME, now=None):
    now = now or datetime.now(timezone.utc)
    return {
        'org': org,
        'company': state.get('company', ''),
        'email': state.get('email', ''),
        'subscribe': state.get('subscribe', True),
        'answers': dict(state.get('answers') or {}),
        'categoryScores': assessment['categoryScores'],
        'overall': assessment['overall'],
        'initiatives': assessment['initiatives'],
        'roi': assessment['roi'],
        'note': state.get('note', ''),
        'createdAt': now.isoformat(),
        'source': SOURCE_TAG,
    }


def submit_report(payload, endpoint, client=None, timeout=WEBHOOK_TIMEOUT):
    """
    POST the report once. Never raises for delivery problems.

    Returns {'submitted', 'delivered', 'mode', 'message'}; `submitted` is
    always True so the form moves on regardless of delivery.
    """
    if not endpoint:
        logger.info("No webhook configured, report saved locally")
        return {'submitted': True, 'delivered': False, 'mode': 'local', 'message': LOCAL_MESSAGE}

    owns_client = client is None
    client = client or httpx.Client(timeout=timeout)
    delivered = False
    try:
        response = client.post(endpoint, json=payload)
        response.raise_for_status()
        delivered = True
        logger.info(f"Report for '{payload.get('company') or 'unknown'}' delivered ({response.status_code})")
    except httpx.HTTPStatusError as e:
        logger.warning(f"Report webhook HTTP error: {e.response.status_code}")
    except httpx.TimeoutException:
        logger.warning(f"Report webhook timeout for '{endpoint}'")
    except httpx.HTTPError as e:
        logger.warning(f"Report webhook error: {e}")
    except httpx.InvalidURL as e:
        logger.warning(f"Report webhook URL '{endpoint}' is invalid: {e}")
    finally:
        if owns_client:
            client.close()

    return {'submitted': True, 'delivered': delivered, 'mode': 'webhook', 'message': SENT_MESSAGE}
