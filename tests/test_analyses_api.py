from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import HTTPException

from app.services.errors import ValidationError

SAVE_PAYLOAD = {
    "analysisType": "analyze",
    "jobTitle": "Backend Engineer",
    "company": "Acme",
    "jobDescription": "Python, AWS",
    "resumeText": "Jane Doe",
    "result": {"success": True, "analysisType": "analyze", "matchScore": 81},
}


@pytest.fixture
def signed_in():
    with patch(
        "app.routers.analyses.authenticate_and_get_user_details", return_value={"user_id": "user_1"}
    ) as auth, patch("app.routers.analyses.ensure_db_initialized", new_callable=AsyncMock):
        yield auth


def test_save_analysis_returns_summary(client, signed_in):
    saved = MagicMock()
    saved.summary.return_value = {"id": "abc", "analysisType": "analyze", "matchScore": 81}

    with patch("app.routers.analyses.history.save_analysis", new_callable=AsyncMock, return_value=saved) as save:
        response = client.post("/api/analyses", json=SAVE_PAYLOAD)

    assert response.status_code == 201
    assert response.json() == {"id": "abc", "analysisType": "analyze", "matchScore": 81}
    owner_id, body = save.await_args.args
    assert owner_id == "user_1"
    assert body.company == "Acme"


def test_save_analysis_without_company_is_400(client, signed_in):
    with patch(
        "app.routers.analyses.history.save_analysis",
        new_callable=AsyncMock,
        side_effect=ValidationError("Job title and company are required to save an analysis"),
    ):
        response = client.post("/api/analyses", json={**SAVE_PAYLOAD, "company": ""})

    assert response.status_code == 400
    assert response.json() == {"error": "Job title and company are required to save an analysis"}


def test_save_analysis_with_unknown_type_is_400(client, signed_in):
    response = client.post("/api/analyses", json={**SAVE_PAYLOAD, "analysisType": "poem"})

    assert response.status_code == 400


def test_list_analyses_passes_limit(client, signed_in):
    listing = [{"id": "2"}, {"id": "1"}]
    with patch(
        "app.routers.analyses.history.list_recent_analyses", new_callable=AsyncMock, return_value=listing
    ) as list_recent:
        response = client.get("/api/analyses", params={"limit": 5})

    assert response.status_code == 200
    assert response.json() == listing
    list_recent.assert_awaited_once_with("user_1", 5)


def test_unauthenticated_requests_are_401(client):
    with patch(
        "app.routers.analyses.authenticate_and_get_user_details",
        side_effect=HTTPException(status_code=401, detail="Authentication required"),
    ):
        response = client.get("/api/analyses")

    assert response.status_code == 401
    assert response.json() == {"error": "Authentication required"}
