import redis
from app.services.config import settings

redis_client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)


def history_cache_key(owner_id: str, limit: int) -> str:
    return f"analyses:{owner_id}:{limit}"


def history_cache_pattern(owner_id: str) -> str:
    return f"analyses:{owner_id}:*"
