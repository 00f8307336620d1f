import json
from pathlib import Path
import pytest
from proverbs import Engine
from proverbs_web.web import app as flask_app

def _seed(tmp: Path) -> str:
    path = tmp / "proverbs.json"
    path.write_text(json.dumps([
        {"kabyle": "Ɛeqel ideg telliḍ", "francais": "Connais ta place", "theme": "Sagesse"},
        {"kabyle": "Azul fell-ak", "francais": "Salut à toi", "theme": "Salutations"},
    ], ensure_ascii=False), encoding="utf-8")
    return str(path)

@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Engine(); eng.load(_seed(tmp_path))
    import proverbs_web.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()

@pytest.mark.e2e
def test_api_proverbs_search(client):
    rv = client.get("/api/proverbs?search=salut")
    assert rv.status_code == 200
    assert rv.get_json() == {
        "totalResults": 1,
        "currentPage": 0,
        "proverbs": [{"sourceText": "Azul fell-ak", "translatedText": "Salut à toi",
                      "theme": "Salutations", "id": 1}],
    }

@pytest.mark.e2e
def test_api_proverbs_defaults_and_pagination(client):
    data = client.get("/api/proverbs").get_json()
    assert data["totalResults"] == 2 and data["currentPage"] == 0
    assert [p["id"] for p in data["proverbs"]] == [0, 1]

    data = client.get("/api/proverbs?page=1&limit=1").get_json()
    assert data["totalResults"] == 2 and data["currentPage"] == 1
    assert [p["id"] for p in data["proverbs"]] == [1]

    data = client.get("/api/proverbs?page=9&limit=1").get_json()
    assert data["totalResults"] == 2 and data["proverbs"] == []

@pytest.mark.e2e
def test_api_proverbs_theme_and_malformed_numbers(client):
    data = client.get("/api/proverbs?theme=tous").get_json()
    assert data["totalResults"] == 2
    data = client.get("/api/proverbs?theme=sagess").get_json()
    assert [p["id"] for p in data["proverbs"]] == [0]
    data = client.get("/api/proverbs?page=abc&limit=xyz").get_json()
    assert data["totalResults"] == 2 and data["currentPage"] == 0 and data["proverbs"] == []

@pytest.mark.e2e
def test_cors_header_present(client):
    rv = client.get("/api/proverbs", headers={"Origin": "http://example.test"})
    assert rv.headers.get("Access-Control-Allow-Origin") in ("*", "http://example.test")

@pytest.mark.e2e
def test_api_themes(client):
    assert client.get("/api/themes").get_json() == {"themes": ["Sagesse", "Salutations"]}

@pytest.mark.e2e
def test_api_proverbs_overlong_numbers_do_not_fail(client):
    rv = client.get("/api/proverbs?limit=" + "9" * 5000)
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["totalResults"] == 2
    assert [p["id"] for p in data["proverbs"]] == [0, 1]

    rv = client.get("/api/proverbs?page=" + "9" * 5000)
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["totalResults"] == 2 and data["proverbs"] == []
