from fastapi.testclient import TestClient
from sqlmodel import Session, select

from meme_ideas.models.meme_idea import MemeIdea
from meme_ideas.models.meme_template import MemeTemplate


def _template(session: Session, name: str, user_id=None) -> str:
    template = MemeTemplate(name=name, user_id=user_id)
    session.add(template)
    session.commit()
    session.refresh(template)
    return template.id


def test_create_idea_without_template(client: TestClient, alice_headers):
    response = client.post("/api/ideas", json={"context": "Monday standups", "topic": "office life"}, headers=alice_headers)

    assert response.status_code == 201
    idea = response.json()["data"]["idea"]
    assert idea["userId"] == "alice"
    assert idea["templateId"] is None
    assert idea["context"] == "Monday standups"
    assert idea["topic"] == "office life"
    assert idea["createdAt"]


def test_create_idea_with_global_template(client: TestClient, session: Session, alice_headers):
    template_id = _template(session, "Drake")

    response = client.post("/api/ideas", json={"templateId": template_id}, headers=alice_headers)

    assert response.status_code == 201
    assert response.json()["data"]["idea"]["templateId"] == template_id


def test_create_idea_with_own_template(client: TestClient, alice_headers):
    template_id = client.post("/api/templates", json={"name": "Mine"}, headers=alice_headers).json()["data"]["template"]["id"]

    response = client.post("/api/ideas", json={"templateId": template_id}, headers=alice_headers)

    assert response.status_code == 201


def test_create_idea_with_missing_template_is_not_found(client: TestClient, session: Session, alice_headers):
    """Test that a dangling template reference is rejected before any idea row is written"""
    response = client.post("/api/ideas", json={"templateId": "does-not-exist"}, headers=alice_headers)

    assert response.status_code == 404
    assert response.json()["error"] == {"kind": "NOT_FOUND", "message": "Template not found."}
    assert session.exec(select(MemeIdea)).all() == []


def test_create_idea_with_foreign_template_is_forbidden(client: TestClient, session: Session, alice_headers):
    template_id = _template(session, "Bob's", user_id="bob")

    response = client.post("/api/ideas", json={"templateId": template_id}, headers=alice_headers)

    assert response.status_code == 403
    assert response.json()["error"] == {"kind": "FORBIDDEN", "message": "You do not have access to this template."}
    assert session.exec(select(MemeIdea)).all() == []


def test_list_ideas_only_returns_callers_ideas(client: TestClient, alice_headers, bob_headers):
    client.post("/api/ideas", json={"topic": "coding"}, headers=alice_headers)
    client.post("/api/ideas", json={"topic": "cats"}, headers=alice_headers)
    client.post("/api/ideas", json={"topic": "dogs"}, headers=bob_headers)

    response = client.get("/api/ideas", headers=alice_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 2
    assert sorted(i["topic"] for i in data["items"]) == ["cats", "coding"]
    assert all(i["userId"] == "alice" for i in data["items"])


def test_idea_routes_require_identity(client: TestClient):
    assert client.post("/api/ideas", json={}).status_code == 401
    assert client.get("/api/ideas").status_code == 401
