from enum import Enum
from beanie import Document, Indexed
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional, Union
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------- Analysis Type ----------
class AnalysisType(str, Enum):
    ANALYZE = "analyze"
    COVER_LETTER = "cover-letter"
    REWRITE_RESUME = "rewrite-resume"


# ---------- Request Models ----------
class AnalyzeRequestBody(BaseModel):
    # Everything optional so missing fields surface as 400 from the orchestrator
    resumeText: Optional[str] = None
    jobDesc: Optional[str] = None
    analysisType: Optional[str] = None
    additionalInfo: Optional[str] = None


class AnalysisRequest(BaseModel):
    resume_text: str
    job_description: str
    analysis_type: AnalysisType
    additional_info: Optional[str] = None


class GenerationParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float
    top_k: int
    top_p: float
    max_output_tokens: int


# ---------- Result Models ----------
class ScoreResult(BaseModel):
    analysis_type: Literal[AnalysisType.ANALYZE] = AnalysisType.ANALYZE
    match_score: int
    missing_keywords: str
    rewritten_summary: str

    def to_response(self) -> Dict[str, Any]:
        return {
            "success": True,
            "analysisType": self.analysis_type.value,
            "matchScore": self.match_score,
            "missingKeywords": self.missing_keywords,
            "rewrittenSummary": self.rewritten_summary,
        }


class ContentResult(BaseModel):
    analysis_type: Literal[AnalysisType.COVER_LETTER, AnalysisType.REWRITE_RESUME]
    content: str

    def to_response(self) -> Dict[str, Any]:
        return {
            "success": True,
            "analysisType": self.analysis_type.value,
            "content": self.content,
        }


AnalysisResult = Union[ScoreResult, ContentResult]


# ---------- Saved Analysis ----------
class SaveAnalysisBody(BaseModel):
    analysisType: AnalysisType
    jobTitle: str = ""
    company: str = ""
    jobDescription: str = ""
    resumeText: str = ""
    additionalInfo: Optional[str] = None
    result: Dict[str, Any] = Field(default_factory=dict)


class SavedAnalysis(Document):
    owner_id: Indexed(str)
    analysis_type: AnalysisType
    job_title: str
    company: str
    job_description: str
    resume_text: str
    additional_info: Optional[str] = None
    result: Dict[str, Any] = Field(default_factory=dict)
    match_score: Optional[int] = None
    created_at: datetime = Field(default_factory=_utcnow)

    class Settings:
        name = "analyses"

    def summary(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "analysisType": self.analysis_type.value,
            "jobTitle": self.job_title,
            "company": self.company,
            "matchScore": self.match_score,
            "createdAt": self.created_at.isoformat(),
        }
