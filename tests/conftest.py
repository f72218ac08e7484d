from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    monkeypatch.delenv("INPUTOUTPUT_JSON", raising=False)
    monkeypatch.chdir(tmp_path)
