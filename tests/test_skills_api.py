from __future__ import annotations

import pytest

from skill_api.services import skills as skill_service
from skill_api.services.skills import SkillStoreError


API = "/api/v1/skills"


def test_get_skills_empty_list(client) -> None:
    r = client.get(API)
    assert r.status_code == 200
    assert r.json() == {"status": "success", "data": []}


def test_create_then_get_skill(client, python_skill) -> None:
    created = client.post(API, json=python_skill)
    assert created.status_code == 200
    assert created.json() == {"status": "success", "data": python_skill}

    r = client.get(f"{API}/python")
    assert r.status_code == 200
    assert r.json() == {"status": "success", "data": python_skill}


def test_create_skill_defaults_optional_fields(client) -> None:
    r = client.post(API, json={"key": "rust"})
    assert r.status_code == 200
    assert r.json()["data"] == {"key": "rust", "name": "", "description": "", "logo": "", "tags": []}


def test_get_skills_lists_every_skill(client, python_skill) -> None:
    go = {
        "key": "go",
        "name": "Go",
        "description": "Go is a statically typed, compiled programming language designed at Google.",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/0/05/Go_Logo_Blue.svg",
        "tags": ["programming language", "system"],
    }
    nodejs = {
        "key": "nodejs",
        "name": "Node.js",
        "description": "Node.js is an open-source, cross-platform, JavaScript runtime environment.",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/d/d9/Node.js_logo.svg",
        "tags": ["runtime", "javascript"],
    }
    for payload in (python_skill, go, nodejs):
        assert client.post(API, json=payload).status_code == 200

    r = client.get(API)
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "success"
    assert sorted(body["data"], key=lambda s: s["key"]) == [go, nodejs, python_skill]


def test_get_missing_skill_returns_404(client) -> None:
    r = client.get(f"{API}/python")
    assert r.status_code == 404
    assert r.json() == {"status": "error", "message": "Skill not found"}


def test_create_duplicate_skill_returns_409(client, python_skill) -> None:
    assert client.post(API, json=python_skill).status_code == 200

    duplicate = {**python_skill, "name": "Python3", "tags": ["programming language"]}
    r = client.post(API, json=duplicate)
    assert r.status_code == 409
    assert r.json() == {"status": "error", "message": "Skill already exists"}

    # The first record is untouched.
    assert client.get(f"{API}/python").json()["data"]["name"] == "Python"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "No key"},
        {"key": ""},
        {"key": "python", "tags": "not-a-list"},
    ],
)
def test_create_skill_invalid_body_returns_400(client, payload) -> None:
    r = client.post(API, json=payload)
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": "not be able to create skill"}


def test_update_skill_replaces_all_fields(client, python_skill) -> None:
    client.post(API, json=python_skill)

    update = {
        "name": "Python 3",
        "description": "Python 3 is the latest version of Python programming language.",
        "logo": "https://example.com/python3.svg",
        "tags": ["data"],
    }
    r = client.put(f"{API}/python", json=update)
    assert r.status_code == 200
    assert r.json() == {"status": "success", "data": {"key": "python", **update}}

    after = client.get(f"{API}/python").json()["data"]
    assert after == {"key": "python", **update}


def test_update_missing_skill_returns_400(client) -> None:
    update = {"name": "Python 3", "description": "", "logo": "", "tags": ["data"]}
    r = client.put(f"{API}/python", json=update)
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": "not be able to update skill"}


def test_update_skill_requires_every_field(client, python_skill) -> None:
    client.post(API, json=python_skill)

    r = client.put(f"{API}/python", json={"name": "Python 3"})
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": "not be able to update skill"}
    assert client.get(f"{API}/python").json()["data"] == python_skill


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("name", "Python 3"),
        ("description", "Python 3 is the latest version of Python programming language."),
        ("logo", "https://example.com/python3.svg"),
        ("tags", ["data", "ml"]),
    ],
)
def test_patch_changes_only_the_targeted_field(client, python_skill, field, value) -> None:
    client.post(API, json=python_skill)

    r = client.patch(f"{API}/python/actions/{field}", json={field: value})
    assert r.status_code == 200
    expected = {**python_skill, field: value}
    assert r.json() == {"status": "success", "data": expected}
    assert client.get(f"{API}/python").json()["data"] == expected


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("name", "Python 3", "not be able to update skill name"),
        ("description", "New description", "not be able to update skill description"),
        ("logo", "https://example.com/logo.svg", "not be able to update skill logo"),
        ("tags", ["data"], "not be able to update skill tags"),
    ],
)
def test_patch_missing_skill_returns_400(client, field, value, message) -> None:
    r = client.patch(f"{API}/python/actions/{field}", json={field: value})
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": message}


def test_patch_with_wrong_body_returns_route_message(client, python_skill) -> None:
    client.post(API, json=python_skill)

    r = client.patch(f"{API}/python/actions/name", json={"description": "wrong field"})
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": "not be able to update skill name"}


def test_patch_unknown_field_is_not_routed(client, python_skill) -> None:
    client.post(API, json=python_skill)

    r = client.patch(f"{API}/python/actions/key", json={"key": "py"})
    assert r.status_code == 404
    assert r.json()["status"] == "error"
    assert client.get(f"{API}/python").status_code == 200


def test_delete_skill_then_get_returns_404(client, python_skill) -> None:
    client.post(API, json=python_skill)

    r = client.delete(f"{API}/python")
    assert r.status_code == 200
    assert r.json() == {"status": "success", "message": "Skill deleted"}

    after = client.get(f"{API}/python")
    assert after.status_code == 404
    assert after.json() == {"status": "error", "message": "Skill not found"}


def test_delete_missing_skill_returns_400(client) -> None:
    r = client.delete(f"{API}/python")
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": "not be able to delete skill"}


def test_store_failure_collapses_to_route_message(client, monkeypatch) -> None:
    def broken_list_skills(db):
        raise SkillStoreError("Failed to list skills")

    monkeypatch.setattr(skill_service, "list_skills", broken_list_skills)

    r = client.get(API)
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": "not be able to get skills"}


def test_get_store_failure_is_not_reported_as_missing(client, monkeypatch) -> None:
    def broken_get_skill(db, key):
        raise SkillStoreError(f"Failed to get skill '{key}'")

    monkeypatch.setattr(skill_service, "get_skill", broken_get_skill)

    r = client.get(f"{API}/python")
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": "not be able to get skill"}
