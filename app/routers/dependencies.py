from fastapi import Depends

from app.services.completion import GeminiCompletionClient
from app.services.config import Settings, get_settings
from app.services.generator import AnalysisOrchestrator


def get_orchestrator(settings: Settings = Depends(get_settings)) -> AnalysisOrchestrator:
    client = GeminiCompletionClient(api_key=settings.GEMINI_API_KEY, model_name=settings.GEMINI_MODEL)
    return AnalysisOrchestrator(api_key=settings.GEMINI_API_KEY, client=client)
