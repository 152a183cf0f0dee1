import logging
from typing import Optional, Protocol

import google.api_core.exceptions as google_exceptions
import google.generativeai as genai

from app.models.analysis import AnalysisType, GenerationParameters
from app.services.errors import BackendError, ConfigurationError, MalformedResponseError

logger = logging.getLogger("uvicorn.error")

SCORE_PARAMETERS = GenerationParameters(temperature=0.3, top_k=40, top_p=0.8, max_output_tokens=1024)
WRITING_PARAMETERS = GenerationParameters(temperature=0.7, top_k=40, top_p=0.8, max_output_tokens=2048)

GENERATION_PARAMETERS = {
    AnalysisType.ANALYZE: SCORE_PARAMETERS,
    AnalysisType.COVER_LETTER: WRITING_PARAMETERS,
    AnalysisType.REWRITE_RESUME: WRITING_PARAMETERS,
}


def generation_parameters_for(analysis_type: AnalysisType) -> GenerationParameters:
    return GENERATION_PARAMETERS[analysis_type]


class CompletionClient(Protocol):
    def complete(self, prompt: str, params: GenerationParameters) -> str: ...


class GeminiCompletionClient:
    """Single-shot text completion against the Gemini API.

    One ``generate_content`` call per ``complete``; no retries and no caching,
    so duplicate submissions are billed twice.
    """

    def __init__(self, api_key: Optional[str], model_name: str = "gemini-2.5-flash-lite"):
        self.api_key = api_key
        self.model_name = model_name

    def _get_llm(self):
        if not self.api_key:
            raise ConfigurationError("API key not configured")
        genai.configure(api_key=self.api_key)
        return genai

    def complete(self, prompt: str, params: GenerationParameters) -> str:
        client = self._get_llm()
        model = client.GenerativeModel(self.model_name)

        try:
            response = model.generate_content(
                contents=prompt,
                generation_config=genai.types.GenerationConfig(
                    temperature=params.temperature,
                    top_k=params.top_k,
                    top_p=params.top_p,
                    max_output_tokens=params.max_output_tokens,
                ),
                # One attempt only; the SDK otherwise retries 503s
                request_options={"retry": None},
            )
        except google_exceptions.GoogleAPICallError as e:
            status_code = int(e.code) if e.code is not None else None
            logger.error("Gemini API error: %s %s", status_code, e)
            # str(e) keeps the error details, where Gemini puts reasons like API_KEY_INVALID
            raise BackendError(f"API request failed: {e}", status_code=status_code)

        return self.extract_text(response)

    @staticmethod
    def extract_text(response) -> str:
        candidates = getattr(response, "candidates", None)
        if not candidates:
            raise MalformedResponseError("Invalid response format from Gemini API")

        content = getattr(candidates[0], "content", None)
        for part in getattr(content, "parts", None) or []:
            text = getattr(part, "text", None)
            if text:
                return text

        raise MalformedResponseError("Invalid response format from Gemini API")
