from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from argumentation_core.service import ArgumentationService


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_create_rebuttal(client: TestClient):
    resp = client.post("/api/rebuttals", json={"targetClaimId": 1, "text": "No it isn't", "source": "Alice"})

    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"argumentId", "statementId", "text", "source"}
    assert body["text"] == "No it isn't"
    assert body["source"] == "Alice"

    listed = client.get("/api/rebuttals", params={"targetClaimId": 1}).json()
    assert {
        "argumentId": body["argumentId"],
        "statementId": body["statementId"],
        "text": "No it isn't",
        "source": "Alice",
    } in listed


def test_create_rebuttal_default_source(client: TestClient):
    resp = client.post("/api/rebuttals", json={"targetClaimId": 4, "text": "Only for some children"})

    assert resp.status_code == 200
    assert resp.json()["source"] == "User"


@pytest.mark.parametrize(
    "payload",
    [
        {"text": "No target"},
        {"targetClaimId": 1},
        {"targetClaimId": 1, "text": ""},
        {"targetClaimId": 1, "text": "   "},
    ],
)
def test_create_rebuttal_bad_input(client: TestClient, payload: dict):
    resp = client.post("/api/rebuttals", json=payload)

    assert resp.status_code == 400
    assert "detail" in resp.json()


def test_create_rebuttal_unknown_target(client: TestClient):
    resp = client.post("/api/rebuttals", json={"targetClaimId": 999999, "text": "Orphan"})

    assert resp.status_code == 404
    assert client.get("/api/rebuttals", params={"targetClaimId": 999999}).json() == []


def test_list_rebuttals_with_nullable_argument(client: TestClient):
    resp = client.get("/api/rebuttals", params={"targetClaimId": 1})

    assert resp.status_code == 200
    assert resp.json() == [
        {"argumentId": 2, "statementId": 4, "text": "Educational programming improves literacy.", "source": "args.me"},
        {"argumentId": None, "statementId": 5, "text": "Nobody is forced to watch.", "source": None},
    ]


def test_root_claim_by_topic_name(client: TestClient):
    resp = client.get("/api/structured-arguments/by-topic-name", params={"name": "Television"})

    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "text": "Television does more harm than good.", "source": "args.me"}


def test_root_claim_unknown_topic(client: TestClient):
    resp = client.get("/api/structured-arguments/by-topic-name", params={"name": "Astrology"})

    assert resp.status_code == 404


def test_justifications(client: TestClient):
    resp = client.get("/api/structured-arguments/justifications", params={"argumentId": 1})

    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 2, "text": "Heavy viewers perform worse at school.", "source": "args.me"},
        {"id": 3, "text": "Television displaces reading.", "source": None},
    ]


def test_justifications_empty_and_missing(client: TestClient):
    assert client.get("/api/structured-arguments/justifications", params={"argumentId": 2}).json() == []
    assert client.get("/api/structured-arguments/justifications", params={"argumentId": 999}).status_code == 404


@pytest.mark.parametrize("path", ["argument-by-claim", "argument-id-by-claim"])
def test_argument_by_claim(client: TestClient, path: str):
    found = client.get(f"/api/structured-arguments/{path}", params={"claimId": 1})
    missing = client.get(f"/api/structured-arguments/{path}", params={"claimId": 5})

    assert found.status_code == 200
    assert found.json() == {"argumentId": 1}
    assert missing.status_code == 404


def test_topics(client: TestClient):
    resp = client.get("/api/topics")

    assert resp.status_code == 200
    assert resp.json() == [{"topic": "Television"}, {"topic": "Nuclear Energy"}]


def test_storage_fault_is_reported(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    def fail(self):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(ArgumentationService, "list_topics", fail)
    resp = client.get("/api/topics")

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Storage fault"}


def test_cors_headers(client: TestClient):
    resp = client.get("/api/topics", headers={"Origin": "http://localhost:4200"})

    assert resp.headers["access-control-allow-origin"] == "*"


def test_create_rebuttal_overlong_source(client: TestClient):
    resp = client.post("/api/rebuttals", json={"targetClaimId": 1, "text": "Fine text", "source": "a" * 600})

    assert resp.status_code == 400
    assert resp.json()["field"] == "source"


def test_root_claim_empty_topic_name(client: TestClient):
    resp = client.get("/api/structured-arguments/by-topic-name", params={"name": ""})

    assert resp.status_code == 404
