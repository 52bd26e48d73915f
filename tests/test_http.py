from fastapi.testclient import TestClient

from app import config, main


def _client():
    return TestClient(main.app)


def test_healthz():
    with _client() as client:
        response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root():
    with _client() as client:
        response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "running"}


def test_annotate_returns_counts():
    with _client() as client:
        response = client.post("/annotate", content=b".*.*.\n..*..\n..*..\n.....\n")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "1*3*1\n13*31\n.2*2.\n.111.\n"


def test_annotate_empty_body():
    with _client() as client:
        response = client.post("/annotate", content=b"")
    assert response.status_code == 400


def test_annotate_malformed_board():
    with _client() as client:
        response = client.post("/annotate", content=b"...\n..\n")
    assert response.status_code == 422
    assert "row 2" in response.json()["detail"]


def test_annotate_too_large(monkeypatch):
    monkeypatch.setattr(config, "MAX_BOARD_BYTES", 4)
    with _client() as client:
        response = client.post("/annotate", content=b"....\n....\n")
    assert response.status_code == 413


def test_annotate_legacy_ragged_board(monkeypatch):
    monkeypatch.setattr(config, "STRICT_PARSING", False)
    with _client() as client:
        response = client.post("/annotate", content=b"..*..\n..**\n*...*\n")
    assert response.status_code == 422
    assert "inconsistent" in response.json()["detail"]


def test_annotate_png():
    with _client() as client:
        response = client.post("/annotate.png", content=b"*.\n..\n")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")
