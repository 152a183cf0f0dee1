import pytest

from app.services.errors import BackendError, MalformedResponseError

from tests.fakes import FakeCompletionClient

PAYLOAD = {
    "resumeText": "Jane Doe\nPython developer with 5 years building Flask and FastAPI services.",
    "jobDesc": "Backend engineer: Python, Docker, AWS, PostgreSQL.",
    "analysisType": "analyze",
}


def test_analyze_returns_parsed_fields(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient(
        "MATCH_SCORE: 73\n\nMISSING_KEYWORDS: Docker, AWS\n\nREWRITTEN_SUMMARY: Python backend engineer."
    ))

    response = client.post("/api/analyze", json=PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "analysisType": "analyze",
        "matchScore": 73,
        "missingKeywords": "Docker, AWS",
        "rewrittenSummary": "Python backend engineer.",
    }


def test_cover_letter_content_is_returned_verbatim(client, use_orchestrator):
    letter = "[Your Name]\n[Date]\n\nDear Hiring Manager,\n\nI am writing to apply...\n\nSincerely,\n[Your Name]"
    use_orchestrator(FakeCompletionClient(letter))

    response = client.post("/api/analyze", json={**PAYLOAD, "analysisType": "cover-letter"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "analysisType": "cover-letter", "content": letter}


def test_rewrite_resume_passes_focus_area(client, use_orchestrator):
    fake = FakeCompletionClient("PROFESSIONAL SUMMARY\n...")
    use_orchestrator(fake)

    response = client.post(
        "/api/analyze",
        json={**PAYLOAD, "analysisType": "rewrite-resume", "additionalInfo": "Cloud migration work"},
    )

    assert response.status_code == 200
    assert response.json()["content"] == "PROFESSIONAL SUMMARY\n..."
    assert "Cloud migration work" in fake.calls[0][0]


@pytest.mark.parametrize("mode", ["analyze", "cover-letter", "rewrite-resume"])
def test_missing_job_description_is_400(client, use_orchestrator, mode):
    fake = FakeCompletionClient("unused")
    use_orchestrator(fake)
    payload = {"resumeText": PAYLOAD["resumeText"], "analysisType": mode}

    response = client.post("/api/analyze", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Resume text, job description, and analysis type are required"}
    assert fake.calls == []


def test_invalid_mode_is_400(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient("unused"))

    response = client.post("/api/analyze", json={**PAYLOAD, "analysisType": "invalid-mode"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid analysis type"}


def test_malformed_json_is_400(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient("unused"))

    response = client.post(
        "/api/analyze", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_missing_api_key_is_500(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient("unused"), api_key=None)

    response = client.post("/api/analyze", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "API key not configured"}


def test_missing_api_key_checked_before_fields(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient("unused"), api_key="")

    response = client.post("/api/analyze", json={})

    assert response.status_code == 500


def test_quota_exhaustion_is_429(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient(error=BackendError("API request failed: 429", status_code=429)))

    response = client.post("/api/analyze", json=PAYLOAD)

    assert response.status_code == 429
    assert response.json() == {"error": "API quota exceeded. Please try again later."}


def test_invalid_upstream_key_is_401(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient(error=BackendError("API request failed: 401", status_code=401)))

    response = client.post("/api/analyze", json=PAYLOAD)

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid API key. Please check your Gemini API key."}


def test_other_upstream_failure_is_500(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient(error=BackendError("API request failed: 503 overloaded", status_code=503)))

    response = client.post("/api/analyze", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed: API request failed: 503 overloaded"}


def test_malformed_upstream_response_is_500(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient(error=MalformedResponseError("Invalid response format from Gemini API")))

    response = client.post("/api/analyze", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed: Invalid response format from Gemini API"}


def test_unexpected_error_is_500(client, use_orchestrator):
    use_orchestrator(FakeCompletionClient(error=ConnectionError("connection reset")))

    response = client.post("/api/analyze", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed: connection reset"}
