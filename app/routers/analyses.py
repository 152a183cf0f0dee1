from fastapi import APIRouter, Query, Request
import logging

from app.models.analysis import SaveAnalysisBody
from app.services import history
from app.utils.auth import authenticate_and_get_user_details
from app.utils.db import ensure_db_initialized

logger = logging.getLogger("uvicorn.error")

router = APIRouter(
    prefix="/analyses",
    tags=["Saved Analyses"]
)


# POST: save a generated result with the job title and company it was made for
@router.post("", status_code=201, response_model=dict)
async def save_analysis(request: Request, body: SaveAnalysisBody):
    user_details = authenticate_and_get_user_details(request)
    clerk_id = user_details.get("user_id")
    logger.info(f"Saving {body.analysisType.value} analysis for user {clerk_id}")

    await ensure_db_initialized()
    analysis = await history.save_analysis(clerk_id, body)
    return analysis.summary()


# GET: most recent saved analyses for the authenticated user, newest first
@router.get("", response_model=list[dict])
async def list_analyses(request: Request, limit: int = Query(history.DEFAULT_HISTORY_LIMIT)):
    user_details = authenticate_and_get_user_details(request)
    clerk_id = user_details.get("user_id")
    logger.info(f"Fetching saved analyses for user {clerk_id}")

    await ensure_db_initialized()
    return await history.list_recent_analyses(clerk_id, limit)
