import json
import shutil
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(REPO_ROOT))


def _write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


@pytest.fixture()
def settings(monkeypatch):
    monkeypatch.delenv("DETECTIVE_QUEST_REPO_ROOT", raising=False)
    monkeypatch.delenv("DETECTIVE_QUEST_CASE_TEMPLATE", raising=False)
    from service.config import get_settings

    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture()
def case(settings):
    from mysteries.engines.generate_mystery import build_case

    return build_case(settings=settings)


@pytest.fixture()
def repo_root(tmp_path, monkeypatch):
    """Isolated repo root holding the schema and a small two-room case"""
    shutil.copytree(REPO_ROOT / "schemas", tmp_path / "schemas")
    template = {
        "id": "tiny_case",
        "title": "Tiny case",
        "mansion": {
            "name": "Hall",
            "left": {"name": "Attic", "clue": "Apple"},
            "right": {"name": "Cellar", "clue": "Zebra"},
        },
        "suspects": [
            {"name": "ab", "clues": ["Apple"]},
            {"name": "ba", "clues": ["Zebra", "Mango"]},
        ],
    }
    _write_json(tmp_path / "mysteries" / "templates" / "tiny_case.json", template)

    monkeypatch.setenv("DETECTIVE_QUEST_REPO_ROOT", str(tmp_path))
    monkeypatch.setenv("DETECTIVE_QUEST_CASE_TEMPLATE", "tiny_case")
    monkeypatch.setenv("DETECTIVE_QUEST_ACCUSATION_THRESHOLD", "1")

    from service.config import get_settings

    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture()
def client(settings):
    from fastapi.testclient import TestClient
    from service.app import app, get_case

    get_case.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_case.cache_clear()


@pytest.fixture()
def restore_logging():
    import logging

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
