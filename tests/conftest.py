# --------------------------------------------------
# conftest.py (Test bootstrap)
# --------------------------------------------------
# Environment variables are process-wide state. Every test
# runs with all DPS_* variables cleared and holds ENV_LOCK,
# so no two tests can interleave env mutation with
# DpsConfig construction.
# --------------------------------------------------

import os
import threading

import pytest

from dps_config import reset_config

ENV_LOCK = threading.Lock()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Serialize the test and start it from an environment with no DPS_* values."""
    with ENV_LOCK:
        for name in [k for k in os.environ if k.startswith("DPS_")]:
            monkeypatch.delenv(name, raising=False)
        reset_config()
        yield monkeypatch
        monkeypatch.undo()
        reset_config()
