from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    PORT: int = 8000
    DEBUG: bool = False
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash-lite"
    ALLOWED_ORIGINS: str = ""
    ANALYZE_RATE_LIMIT: str = "20/minute"
    RATE_LIMIT_ENABLED: bool = True
    REDIS_URL: str = "redis://localhost:6379/0"
    HISTORY_CACHE_TTL: int = 300
    MONGO_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "resume_tools"
    CLERK_SECRET_KEY: Optional[str] = None
    CLERK_WEBHOOK_SECRET: Optional[str] = None
    CLERK_AUTHORIZED_PARTIES: str = ""

    @field_validator("ALLOWED_ORIGINS", "CLERK_AUTHORIZED_PARTIES")
    def parse_comma_list(cls, v: str) -> List[str]:
        return [item.strip() for item in v.split(",") if item.strip()] if v else []

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

settings = Settings()


def get_settings() -> Settings:
    return settings
