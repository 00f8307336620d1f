import pytest
from proverbs import Engine
from proverbs_web.web import app as flask_app
import proverbs_web.web as webmod

@pytest.mark.e2e
def test_frontend_home_page_renders(monkeypatch):
    eng = Engine(); eng.build([{"kabyle": "Azul", "francais": "Salut", "theme": "T"}])
    monkeypatch.setattr(webmod, "_engine", eng)

    r = flask_app.test_client().get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "/api/proverbs" in html and "proverbes" in html

    eng.shutdown()
