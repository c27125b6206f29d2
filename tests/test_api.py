from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

import api.app as app_module
from cueline.models.feedback import FeedbackResult


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(app_module, "remote_evaluator", None)
    return TestClient(app_module.app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "remote_evaluator": False}


def test_evaluate_local(client):
    body = client.post("/evaluate/local", json={
        "spokenText": "", "correctText": "To be or not to be",
    }).json()
    assert body == {"accurate": False, "score": 0, "feedback": "No speech detected.", "source": "local"}


def test_evaluate_uses_remote_when_inconclusive(client, monkeypatch):
    remote = MagicMock()
    remote.evaluate.return_value = FeedbackResult(
        accurate=False, score=40, feedback="Keep going.", source="remote"
    )
    monkeypatch.setattr(app_module, "remote_evaluator", remote)

    body = client.post("/evaluate", json={
        "spokenText": "to be", "correctText": "To be or not to be", "character": "HAMLET",
    }).json()
    assert body["source"] == "remote"
    assert body["score"] == 40
    remote.evaluate.assert_called_once_with("to be", "To be or not to be", "HAMLET", "")


def test_similarity(client):
    body = client.post("/similarity", json={"spokenText": "the cat", "correctText": "the cat sat"}).json()
    assert body["similarity"] == pytest.approx(2 / 3)


def test_best_alternative(client):
    body = client.post("/best-alternative", json={
        "alternatives": ["I can not believe it", "I cannot believe it"],
        "correctText": "I cannot believe it",
    }).json()
    assert body == {"best": "I cannot believe it", "similarity": 1.0}


def test_best_alternative_empty_list(client):
    response = client.post("/best-alternative", json={"alternatives": [], "correctText": "x"})
    assert response.status_code == 422


def test_chunks(client):
    body = client.post("/chunks", json={"text": "Go now. Don't look back."}).json()
    assert body == {
        "chunks": ["Go now.", "Don't look back."],
        "chunkable": True,
        "needsPunctuationTip": False,
    }


def test_hint(client):
    assert client.post("/hint", json={"correctText": "Go now, go", "hintLevel": 3}).json() == {"hint": "Go now, go"}
    assert client.post("/hint", json={"correctText": "Go", "hintLevel": 0}).status_code == 422
