import logging
from typing import Optional

from app.models.analysis import AnalysisRequest, AnalysisResult, AnalysisType, AnalyzeRequestBody
from app.services.completion import CompletionClient, generation_parameters_for
from app.services.errors import ConfigurationError, ValidationError
from app.services.parser import parse_response
from app.services.prompts import build_prompt

logger = logging.getLogger("uvicorn.error")


class AnalysisOrchestrator:
    """Runs one analysis request: validate, build the prompt, call Gemini, parse.

    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(self, api_key: Optional[str], client: CompletionClient):
        self.api_key = api_key
        self.client = client

    @staticmethod
    def validate(body: AnalyzeRequestBody) -> AnalysisRequest:
        if not _present(body.resumeText) or not _present(body.jobDesc) or not _present(body.analysisType):
            raise ValidationError("Resume text, job description, and analysis type are required")

        try:
            analysis_type = AnalysisType(body.analysisType)
        except ValueError:
            raise ValidationError("Invalid analysis type")

        return AnalysisRequest(
            resume_text=body.resumeText,
            job_description=body.jobDesc,
            analysis_type=analysis_type,
            additional_info=body.additionalInfo,
        )

    def handle(self, body: AnalyzeRequestBody) -> AnalysisResult:
        if not self.api_key:
            raise ConfigurationError("API key not configured")

        request = self.validate(body)
        logger.info("Running %s analysis", request.analysis_type.value)

        prompt = build_prompt(
            request.resume_text,
            request.job_description,
            request.analysis_type,
            request.additional_info,
        )
        params = generation_parameters_for(request.analysis_type)
        logger.info("Built prompt with %d characters", len(prompt))

        generated_text = self.client.complete(prompt, params)
        logger.info("Received LLM response (first 200 chars): %s", generated_text[:200].replace('\n', ' '))

        return parse_response(generated_text, request.analysis_type)


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())
