import os
import sys
from pathlib import Path

import pytest

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

CONFKIT_ENV_VARS = (
    "CONFKIT_ENV",
    "CONFKIT_PERCENT_PRECISION",
    "CONFKIT_DEFAULT_AUDIO",
    "CONFKIT_DEFAULT_VIDEO",
)


@pytest.fixture(autouse=True)
def clean_confkit_env(monkeypatch):
    for name in CONFKIT_ENV_VARS:
        if name in os.environ:
            monkeypatch.delenv(name)
