"""
AI Readiness Finder - Configuration
Constants for the form, plus the webhook toggle read from the environment.
Set WEBHOOK_URL (Zapier/HubSpot/PSA endpoint) to enable emailing reports.
"""
import os

ORG_NAME = 'Diversicom'
CTA_URL = 'https://www.diversicomcorp.com/contact/'

SNAPSHOT_KEY = 'ai-readiness-finder'
SOURCE_TAG = 'ai-readiness-finder'

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'data')

WEBHOOK_URL = os.environ.get('WEBHOOK_URL', '').strip()
WEBHOOK_TIMEOUT = 15.0
