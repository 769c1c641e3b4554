import sys
from pathlib import Path

import pytest


# Ensure project root is on sys.path so `core.*` / `services.*` imports work
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from core.singleton import Singleton


@pytest.fixture()
def singleton_cls():
    """Singleton class with its shared instance dropped before and after the test."""
    Singleton.reset()
    yield Singleton
    Singleton.reset()
