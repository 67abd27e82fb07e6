import asyncio

from conftest import make_project

from showcase.core.store import StoreError


def project_id(slug):
    return make_project(slug).id


def test_get_project_returns_record(client):
    response = client.get(f"/api/projects/{project_id('robot-arm')}")

    assert response.status_code == 200
    body = response.json()
    assert body["slug"] == "robot-arm"
    assert body["created_at"] == "2024-05-01T00:00:00+00:00"


def test_get_missing_project_is_404(client):
    response = client.get("/api/projects/does-not-exist")

    assert response.status_code == 404
    assert "error" in response.json()


def test_get_project_store_failure_is_500(client, store):
    store.fail_with = StoreError("database unavailable")
    response = client.get(f"/api/projects/{project_id('robot-arm')}")

    assert response.status_code == 500
    assert response.json() == {"error": "database unavailable"}


def test_list_projects(client):
    response = client.get("/api/projects")

    assert response.status_code == 200
    assert len(response.json()) == 4


def test_put_requires_admin(client, store):
    pid = project_id("robot-arm")
    response = client.put(f"/api/projects/{pid}", json={"title": "Hacked"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert store.projects[pid].title == "Robot Arm"


def test_put_with_wrong_token_is_rejected(client):
    response = client.put(
        f"/api/projects/{project_id('robot-arm')}",
        json={"title": "Hacked"},
        headers={"Authorization": "Bearer wrong"},
    )

    assert response.status_code == 401


def test_put_updates_project(client, admin_headers, store):
    pid = project_id("robot-arm")
    response = client.put(
        f"/api/projects/{pid}", json={"title": "Robot Arm v2"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Robot Arm v2"
    assert store.projects[pid].title == "Robot Arm v2"


def test_put_accepts_admin_token_header(client):
    from conftest import ADMIN_TOKEN

    response = client.put(
        f"/api/projects/{project_id('robot-arm')}",
        json={"featured": False},
        headers={"X-Admin-Token": ADMIN_TOKEN},
    )

    assert response.status_code == 200
    assert response.json()["featured"] is False


def test_put_unknown_project_is_404(client, admin_headers):
    response = client.put(
        "/api/projects/missing", json={"title": "x"}, headers=admin_headers
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Project not found or no changes made"}


def test_put_invalid_payload_is_400(client, admin_headers):
    pid = project_id("robot-arm")

    unknown = client.put(f"/api/projects/{pid}", json={"owner": "me"}, headers=admin_headers)
    broken = client.put(
        f"/api/projects/{pid}",
        content=b"{not json",
        headers={**admin_headers, "Content-Type": "application/json"},
    )

    assert unknown.status_code == 400
    assert broken.status_code == 400


def test_put_store_failure_is_500(client, admin_headers, store):
    store.fail_with = StoreError("timeout")
    response = client.put(
        f"/api/projects/{project_id('robot-arm')}",
        json={"title": "x"},
        headers=admin_headers,
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Error updating project: timeout"}


def test_delete_requires_admin(client, store):
    pid = project_id("old-blog")
    response = client.delete(f"/api/projects/{pid}")

    assert response.status_code == 401
    assert pid in store.projects


def test_delete_removes_project(client, admin_headers, store):
    pid = project_id("old-blog")
    response = client.delete(f"/api/projects/{pid}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Project deleted successfully"}
    assert pid not in store.projects


def test_delete_blank_id_is_400(client, admin_headers):
    response = client.delete("/api/projects/%20", headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Project ID is required"}


def test_delete_missing_project_is_404(client, admin_headers):
    response = client.delete("/api/projects/missing", headers=admin_headers)

    assert response.status_code == 404


def test_create_project(client, admin_headers, store):
    response = client.post(
        "/api/projects",
        json={"title": "New Thing", "slug": "new-thing"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["slug"] == "new-thing"
    assert len(store.projects) == 5


def test_create_requires_admin(client):
    response = client.post("/api/projects", json={"title": "x", "slug": "x"})

    assert response.status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def _on_event_loop():
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def _record_loop_usage(monkeypatch, store, names):
    seen = {}
    for name in names:
        original = getattr(store, name)

        def recorder(*args, _name=name, _original=original, **kwargs):
            seen[_name] = _on_event_loop()
            return _original(*args, **kwargs)

        monkeypatch.setattr(store, name, recorder)
    return seen


def test_store_calls_run_off_the_event_loop(client, admin_headers, store, monkeypatch):
    seen = _record_loop_usage(
        monkeypatch, store, ["list", "get", "create", "update", "delete"]
    )
    pid = project_id("old-blog")

    client.get("/api/projects")
    client.get(f"/api/projects/{pid}")
    client.post("/api/projects", json={"title": "T", "slug": "t"}, headers=admin_headers)
    client.put(f"/api/projects/{pid}", json={"title": "x"}, headers=admin_headers)
    client.delete(f"/api/projects/{pid}", headers=admin_headers)

    assert seen == {
        "list": False,
        "get": False,
        "create": False,
        "update": False,
        "delete": False,
    }
