"""Pytest configuration and fixtures."""

import pytest

import app as app_module
from engines import config
from engines.snapshot import SnapshotStore


@pytest.fixture
def store(tmp_path):
    return SnapshotStore(store_dir=str(tmp_path))


@pytest.fixture
def client(store, monkeypatch):
    """Flask test client backed by a throwaway snapshot store, webhook disabled."""
    monkeypatch.setattr(app_module, "STORE", store)
    monkeypatch.setattr(config, "WEBHOOK_URL", "")
    app_module.STATE.update(form=None, assessment=None, submitted=False,
                            lastSubmission=None, loaded=False)
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c
    app_module.STATE["loaded"] = False


@pytest.fixture
def all_max_answers():
    from engines.catalog import QUESTION_IDS
    return {qid: 5 for qid in QUESTION_IDS}
