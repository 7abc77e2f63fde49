"""HTTP API tests. The generator dependency is replaced by one with no providers configured."""

from fastapi.testclient import TestClient

from dreamboard.dependencies import get_generator
from dreamboard.main import app
from dreamboard.pipeline import VisionBoardGenerator

generator = VisionBoardGenerator()
app.dependency_overrides[get_generator] = lambda: generator
client = TestClient(app)

DREAM = {"title": "Launch my startup", "description": "Build and launch a revolutionary app", "category": "career"}


def test_health():
    resp = client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["strategies_registered"] == 6
    assert data["templates_available"] == 6
    assert data["providers_configured"] == []


def test_templates():
    resp = client.get("/api/templates")
    assert resp.status_code == 200
    ids = [t["id"] for t in resp.json()["templates"]]
    assert "magazine_hero" in ids
    assert len(ids) == 6


def test_analyze():
    resp = client.post("/api/analyze", json={"dream": DREAM, "user_id": "api-user"})
    assert resp.status_code == 200
    analysis = resp.json()["analysis"]
    assert analysis["primary_categories"][0] == "career_business"
    assert analysis["suggestions"]["image_queries"]


def test_board():
    resp = client.post("/api/board", json={"dream": DREAM, "template_id": "magazine_hero", "seed": 3})
    assert resp.status_code == 200
    board = resp.json()
    assert board["template_id"] == "magazine_hero"
    assert board["layout_valid"] is True
    assert len(board["elements"]) == 8
    assert board["elements"][0]["id"] == "hero_image"


def test_board_without_template():
    resp = client.post("/api/board", json={"dream": DREAM})
    assert resp.status_code == 200
    assert resp.json()["elements"]


def test_blank_title_rejected():
    resp = client.post("/api/board", json={"dream": {"title": "   "}})
    assert resp.status_code == 422


def test_missing_dream_rejected():
    resp = client.post("/api/analyze", json={"user_id": "x"})
    assert resp.status_code == 422


def test_create_app_uses_given_settings():
    from dreamboard.config import Settings
    from dreamboard.main import create_app

    custom = create_app(Settings(cors_origins=["https://dreams.example"]))
    custom.dependency_overrides[get_generator] = lambda: generator
    resp = TestClient(custom).get("/api/health", headers={"Origin": "https://dreams.example"})
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "https://dreams.example"
