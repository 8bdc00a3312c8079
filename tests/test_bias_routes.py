"""HTTP tests for /api/bias/* and the analytics page."""
from fastapi.testclient import TestClient

from biasmeter.core.config import Settings
from biasmeter.main import create_app
from biasmeter.services.user_store import UserStore

CSV = b"Gender,Experience,Position,Selected\nF,3,Engineer,1\n"


def test_health(client):
    r = client.get("/api/bias/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "UP"
    assert body["service"] == "BiasMeter AI API"
    assert body["version"] == "1.0.0"
    assert body["message"] == "Ready to analyze bias in AI systems"
    assert isinstance(body["timestamp"], int)


def test_analyze_returns_report_and_file_info(client):
    r = client.post(
        "/api/bias/analyze",
        files={"file": ("hiring.csv", CSV, "text/csv")},
        data={"industry": "hiring"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["fileName"] == "hiring.csv"
    assert body["fileSize"] == len(CSV)
    assert body["industry"] == "hiring"
    assert isinstance(body["analysisTime"], int)

    assert body["biasScore"] == 30.0
    assert body["status"] == "Moderate Bias"
    assert body["maleRate"] == 50.0
    assert body["metrics"] == {
        "disparateImpact": 10.0,
        "statisticalParity": 90.0,
        "biasScore": 30.0,
        "riskLevel": "Medium",
        "sampleSize": 500,
        "confidence": 80.0,
    }
    assert len(body["recommendations"]) == 5


def test_analyze_missing_industry_is_400(client):
    r = client.post("/api/bias/analyze", files={"file": ("x.csv", CSV, "text/csv")})
    assert r.status_code == 400
    body = r.json()
    assert body["error"] is True
    assert body["message"].startswith("Failed to analyze file:")
    assert body["suggestion"] == "Please check if the file is a valid CSV format"


def test_analyze_missing_file_is_400(client):
    r = client.post("/api/bias/analyze", data={"industry": "hiring"})
    assert r.status_code == 400
    assert r.json()["error"] is True


class _BrokenGenerator:
    def analyze(self, industry, file_size):
        raise RuntimeError("disk unavailable")


def test_analyze_unexpected_failure_is_400():
    app = create_app(user_store=UserStore(), report_generator=_BrokenGenerator())
    with TestClient(app) as c:
        r = c.post("/api/bias/analyze", files={"file": ("x.csv", CSV, "text/csv")}, data={"industry": "hiring"})
    assert r.status_code == 400
    assert r.json() == {
        "error": True,
        "message": "Failed to analyze file: disk unavailable",
        "suggestion": "Please check if the file is a valid CSV format",
    }


def test_format_known_and_unknown(client):
    r = client.get("/api/bias/format/hiring")
    assert r.json() == {
        "industry": "hiring",
        "format": "Gender,Experience,Position,Selected",
        "description": "Analyzes gender bias in hiring decisions",
    }

    r = client.get("/api/bias/format/Nonexistent")
    assert r.json() == {
        "industry": "Nonexistent",
        "format": "Gender,Feature1,Feature2,Selected",
        "description": "Analyzes bias in decision-making systems",
    }


def test_cors_is_permissive(client):
    r = client.get("/api/bias/health", headers={"Origin": "http://frontend.example"})
    assert r.headers.get("access-control-allow-origin") in ("*", "http://frontend.example")


def test_analytics_page_served(client):
    r = client.get("/analytics")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "BiasMeter AI Analytics" in r.text


def test_analytics_page_missing(tmp_path):
    app = create_app(settings=Settings(static_dir=str(tmp_path)), user_store=UserStore())
    with TestClient(app) as c:
        r = c.get("/analytics")
    assert r.status_code == 404
    assert r.json()["success"] is False
