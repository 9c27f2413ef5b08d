import json

import pytest


@pytest.fixture(autouse=True)
def event_log(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "events.log"
    monkeypatch.setenv("PWTIER_LOG_PATH", str(path))
    monkeypatch.delenv("PWTIER_LOG", raising=False)
    monkeypatch.delenv("PWTIER_SERVER_URL", raising=False)
    return path


@pytest.fixture
def read_log(event_log):
    def _read():
        if not event_log.exists():
            return []
        with open(event_log, encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]
    return _read


@pytest.fixture
def unwritable_log(tmp_path, monkeypatch):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    monkeypatch.setenv("PWTIER_LOG_PATH", str(blocker / "sub" / "events.log"))
    return blocker
