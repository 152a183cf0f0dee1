from fastapi import APIRouter, Depends, HTTPException, Request
import logging

from app.models.analysis import AnalyzeRequestBody
from app.routers.dependencies import get_orchestrator
from app.services.config import settings
from app.services.errors import ResumeToolsError
from app.services.generator import AnalysisOrchestrator
from app.utils.rate_limit import limiter

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["Resume Tools"])


# POST: score-and-summary, cover letter or resume rewrite for a resume + job description
@router.post("/analyze", response_model=dict)
@limiter.limit(settings.ANALYZE_RATE_LIMIT)
def analyze(
    request: Request,
    body: AnalyzeRequestBody,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
):
    logger.info(f"Analyze request received: analysisType={body.analysisType}")
    try:
        result = orchestrator.handle(body)
    except ResumeToolsError as e:
        logger.error(f"Analysis failed with {type(e).__name__}: {e.message}")
        raise
    except Exception as e:
        logger.exception("Unhandled error during analysis")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {e}")

    logger.info(f"{result.analysis_type.value} analysis completed successfully")
    return result.to_response()
