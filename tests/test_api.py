import pytest

# Skip tests if FastAPI or API app is not available
fastapi = pytest.importorskip("fastapi")
from api.main import app  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402

client = TestClient(app)


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.json()["message"]


def test_analyze_endpoint_success():
    response = client.post("/analyze", json={"code": "def f():\n    pass"})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["statusMessage"] == "Code executed successfully!"
    assert data["logicNotes"] == ["Found 'pass' statement - consider implementing actual logic"]
    assert data["debugHints"] == []
    assert data["styleNotes"] == ["Consider adding comments to explain your code"]


def test_analyze_endpoint_error():
    response = client.post("/analyze", json={"code": "print('hi'"})
    data = response.json()
    assert response.status_code == 200
    assert data["ok"] is False
    assert len(data["debugHints"]) == 2


def test_analyze_rejects_huge_code(monkeypatch):
    import api.schemas as schemas

    monkeypatch.setattr(schemas, "MAX_SOURCE_CHARS", 10)
    response = client.post("/analyze", json={"code": "x" * 11})
    assert response.status_code == 422


def test_list_exercises():
    response = client.get("/exercises")
    assert response.status_code == 200
    assert len(response.json()) >= 4
    response = client.get("/exercises", params={"difficulty": "intermediate"})
    assert [ex["difficulty"] for ex in response.json()] == ["intermediate"] * len(response.json())


def test_list_exercises_bad_difficulty():
    response = client.get("/exercises", params={"difficulty": "expert"})
    assert response.status_code == 422


def test_get_exercise():
    response = client.get("/exercises/1")
    assert response.status_code == 200
    assert response.json()["template"] == "print('Hello, World!')"
    assert client.get("/exercises/999").status_code == 404


def test_tutorials():
    response = client.get("/tutorials")
    assert response.status_code == 200
    assert response.json()[0]["title"] == "Introduction to Python"
    response = client.get("/tutorials/1")
    assert response.json()["steps"][2] == "Return values: def square(x): return x * x"
    assert client.get("/tutorials/50").status_code == 404


def test_module_entry_point_serves_with_uvicorn(monkeypatch):
    import runpy

    import uvicorn

    from api.config import API_HOST, API_PORT, LOG_LEVEL

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
    runpy.run_module("api.main", run_name="__main__")
    assert calls == [{"host": API_HOST, "port": API_PORT, "log_level": LOG_LEVEL.lower()}]
