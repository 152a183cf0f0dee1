import re

from app.models.analysis import AnalysisResult, AnalysisType, ContentResult, ScoreResult

# Any non-digit text may sit between the label and the score, e.g. "**MATCH_SCORE:** 85" or "[85]"
MATCH_SCORE_RE = re.compile(r"MATCH_SCORE:\D*?(\d+)", re.IGNORECASE)
MISSING_KEYWORDS_RE = re.compile(r"MISSING_KEYWORDS:[ \t]*([^\n]*)", re.IGNORECASE)
# Lazy up to the first blank line; a summary with an internal blank line is truncated there
REWRITTEN_SUMMARY_RE = re.compile(r"REWRITTEN_SUMMARY:\s*([\s\S]+?)(?=\n\n|$)", re.IGNORECASE)

MAX_MATCH_SCORE = 100

DEFAULT_MATCH_SCORE = 0
DEFAULT_MISSING_KEYWORDS = "No keywords identified"
DEFAULT_REWRITTEN_SUMMARY = "Unable to generate summary"


def _match_score(text: str) -> int:
    score_match = MATCH_SCORE_RE.search(text)
    if not score_match:
        return DEFAULT_MATCH_SCORE
    return min(int(score_match.group(1)), MAX_MATCH_SCORE)


def _missing_keywords(text: str) -> str:
    keywords_match = MISSING_KEYWORDS_RE.search(text)
    keywords = keywords_match.group(1).strip() if keywords_match else ""
    return keywords or DEFAULT_MISSING_KEYWORDS


def parse_score_response(text: str) -> ScoreResult:
    summary_match = REWRITTEN_SUMMARY_RE.search(text)

    return ScoreResult(
        match_score=_match_score(text),
        missing_keywords=_missing_keywords(text),
        rewritten_summary=summary_match.group(1).strip() if summary_match else DEFAULT_REWRITTEN_SUMMARY,
    )


def parse_response(text: str, analysis_type: AnalysisType) -> AnalysisResult:
    """Turn raw completion text into a result for the given mode.

    Never raises: fields the model failed to emit fall back to defaults.
    Cover letters and rewritten resumes are passed through untouched.
    """
    if analysis_type is AnalysisType.ANALYZE:
        return parse_score_response(text)
    return ContentResult(analysis_type=analysis_type, content=text)
