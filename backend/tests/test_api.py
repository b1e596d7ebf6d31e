import pytest
from fastapi.testclient import TestClient

from api.router import limiter
from main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def _disable_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["taxonomy"]["sections"] == 8


def test_analyze(sample_resume, sample_jd):
    response = client.post(
        "/analyze",
        json={"resume_text": sample_resume, "job_description": sample_jd},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["atsScore"] == 81
    assert data["hardSkillsMatch"]["missingSkills"] == ["Kubernetes"]
    assert data["softSkillsMatch"]["percent"] == 100
    assert data["missingSections"] == ["Contact Information", "Languages"]
    assert isinstance(data["overview"], str)
    assert 1 <= len(data["recommendations"]) <= 5


def test_analyze_empty_body():
    response = client.post("/analyze", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["hardSkillsMatch"]["percent"] == 100
    assert data["presentSections"] == []


def test_analyze_rejects_oversized_job_description():
    response = client.post(
        "/analyze",
        json={"resume_text": "Python", "job_description": "x" * 10001},
    )
    assert response.status_code == 422


def test_parse(sample_resume):
    response = client.post("/parse", json={"resume_text": sample_resume})
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Jane Smith"
    assert data["email"] == "jane.smith@example.com"
    assert data["experience"][0]["company"] == "TechCorp"
    assert data["projects"][0]["technologies"] == ["Python", "FastAPI", "Docker"]
