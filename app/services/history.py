import json
import logging
from typing import Any, Dict, List

import redis

from app.models.analysis import AnalysisType, SaveAnalysisBody, SavedAnalysis
from app.services.cache import history_cache_key, history_cache_pattern, redis_client
from app.services.config import settings
from app.services.errors import ValidationError

logger = logging.getLogger("uvicorn.error")

DEFAULT_HISTORY_LIMIT = 10
MAX_HISTORY_LIMIT = 50


def clamp_limit(limit: int) -> int:
    return max(1, min(limit, MAX_HISTORY_LIMIT))


def _match_score(body: SaveAnalysisBody):
    if body.analysisType is not AnalysisType.ANALYZE:
        return None
    score = body.result.get("matchScore")
    return score if isinstance(score, int) and not isinstance(score, bool) else None


def invalidate_history_cache(owner_id: str) -> None:
    try:
        for key in redis_client.scan_iter(history_cache_pattern(owner_id)):
            redis_client.delete(key)
    except redis.RedisError as e:
        logger.warning(f"Could not invalidate history cache for {owner_id}: {repr(e)}")


async def save_analysis(owner_id: str, body: SaveAnalysisBody) -> SavedAnalysis:
    if not body.jobTitle.strip() or not body.company.strip():
        raise ValidationError("Job title and company are required to save an analysis")

    analysis = SavedAnalysis(
        owner_id=owner_id,
        analysis_type=body.analysisType,
        job_title=body.jobTitle.strip(),
        company=body.company.strip(),
        job_description=body.jobDescription,
        resume_text=body.resumeText,
        additional_info=body.additionalInfo,
        result=body.result,
        match_score=_match_score(body),
    )
    await analysis.insert()
    logger.info(f"Saved {analysis.analysis_type.value} analysis {analysis.id} for user {owner_id}")

    invalidate_history_cache(owner_id)
    return analysis


async def list_recent_analyses(owner_id: str, limit: int = DEFAULT_HISTORY_LIMIT) -> List[Dict[str, Any]]:
    limit = clamp_limit(limit)
    cache_key = history_cache_key(owner_id, limit)

    try:
        cached = redis_client.get(cache_key)
    except redis.RedisError as e:
        logger.warning(f"History cache read failed: {repr(e)}")
        cached = None

    if cached:
        logger.info(f"Serving analysis history for {owner_id} from Redis")
        return json.loads(cached)

    analyses = await SavedAnalysis.find(
        SavedAnalysis.owner_id == owner_id
    ).sort(-SavedAnalysis.created_at).limit(limit).to_list()
    summaries = [analysis.summary() for analysis in analyses]
    logger.info(f"Loaded {len(summaries)} analyses for user {owner_id} from MongoDB")

    try:
        redis_client.setex(cache_key, settings.HISTORY_CACHE_TTL, json.dumps(summaries))
    except redis.RedisError as e:
        logger.warning(f"History cache write failed: {repr(e)}")

    return summaries
