import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedBuffer:
    """Stand-in entropy buffer returning a fixed sequence of draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.requested = []
        self.wiped = False

    def draw(self, n):
        self.requested.append(n)
        return self.draws.pop(0)

    def wipe(self):
        self.wiped = True


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config layer at a per-test file that does not exist yet."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("DICEBITS_CONFIG", str(path))
    return path


@pytest.fixture
def scripted_buffer():
    return ScriptedBuffer
