"""
AI Readiness Finder - Snapshot Store
The whole in-progress form lives in one JSON document under a fixed key.
Read once at startup, written on every change. Reads never fail: a missing
or corrupt document falls back to the default (empty) form.
"""
import json
import logging
import os

from engines.catalog import normalize_answers
from engines.config import DATA_DIR, SNAPSHOT_KEY

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = ('answers', 'company', 'email', 'teamSize',
                   'hoursPerPersonWeek', 'hourlyRate', 'subscribe', 'note')


def default_snapshot():
    return {
        'answers': {}, 'company': '', 'email': '',
        'teamSize': None, 'hoursPerPersonWeek': None, 'hourlyRate': None,
        'subscribe': True, 'note': '',
    }


FALSE_STRINGS = ('', '0', 'false', 'no', 'off')


def coerce_flag(value):
    """Checkbox value from JSON or a form post: 'false' / 'off' / '0' / 'no' are False."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def coerce_snapshot(raw):
    """Fill a partial/untrusted dict into a full snapshot; null fields take defaults."""
    snap = default_snapshot()
    if not isinstance(raw, dict):
        return snap
    for field in SNAPSHOT_FIELDS:
        if raw.get(field) is not None:
            snap[field] = raw[field]
    snap['answers'] = normalize_answers(snap['answers'])
    snap['subscribe'] = coerce_flag(snap['subscribe'])
    return snap


class SnapshotStore:
    """File-backed key-value store holding one form snapshot."""

    def __init__(self, store_dir=DATA_DIR, key=SNAPSHOT_KEY):
        self.store_dir = store_dir
        self.key = key

    @property
    def path(self):
        return os.path.join(self.store_dir, f'{self.key}.json')

    def load(self):
        try:
            with open(self.path, encoding='utf-8') as f:
                raw = json.load(f)
        except FileNotFoundError:
            logger.debug(f"No snapshot at {self.path}, starting from defaults")
            return default_snapshot()
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable snapshot {self.path} ({e}), starting from defaults")
            return default_snapshot()
        if not isinstance(raw, dict):
            logger.warning(f"Snapshot {self.path} is not an object, starting from defaults")
            return default_snapshot()
        return coerce_snapshot(raw)

    def save(self, state):
        doc = {field: state.get(field) for field in SNAPSHOT_FIELDS}
        try:
            os.makedirs(self.store_dir, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(doc, f)
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Could not write snapshot {self.path}: {e}")
            return False
        return True

    def reset(self):
        snap = default_snapshot()
        self.save(snap)
        return snap
