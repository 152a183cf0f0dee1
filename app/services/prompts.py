import re
from typing import Optional

from app.models.analysis import AnalysisType

ANALYZE_PROMPT = """
You are a professional ATS (Applicant Tracking System) analyzer. Analyze the resume against the job description and provide EXACTLY the following format:

RESUME:
${resumeText}

JOB DESCRIPTION:
${jobDescription}

Provide your analysis in this EXACT format:

MATCH_SCORE: [number between 0-100]

MISSING_KEYWORDS: [comma-separated list of important keywords/skills from job description that are missing from resume]

REWRITTEN_SUMMARY: [A 3-4 sentence professional summary that incorporates missing keywords and better aligns with the job requirements. Make it specific to this role and include relevant skills/experience.]

Instructions:
- Match score should be a whole number from 0 to 100 reflecting how well the resume aligns with job requirements
- Missing keywords should be technical skills, tools, qualifications, or important terms from the job description
- Rewritten summary should be tailored specifically for this job application
- Keep the format exactly as specified above
- Be concise but accurate
"""

COVER_LETTER_PROMPT = """
You are a professional career counselor. Write a compelling cover letter based on the resume and job description provided.

RESUME:
${resumeText}

JOB DESCRIPTION:
${jobDescription}

ADDITIONAL INFO (if provided):
${additionalInfo}

Write a professional cover letter that:
1. Has a strong opening that grabs attention
2. Highlights relevant experience from the resume that matches the job
3. Shows enthusiasm for the role and company
4. Includes specific achievements and quantifiable results where possible
5. Has a compelling closing that requests action
6. Is 3-4 paragraphs long
7. Uses a professional but engaging tone

Format the cover letter with proper business letter structure including placeholders for:
[Your Name]
[Your Address]
[City, State ZIP Code]
[Your Email]
[Your Phone]
[Date]

[Hiring Manager's Name]
[Company Name]
[Company Address]
[City, State ZIP Code]

Dear [Hiring Manager's Name / Hiring Manager],

[Cover letter content]

Sincerely,
[Your Name]
"""

REWRITE_RESUME_PROMPT = """
You are a professional resume writer and career coach. Rewrite the provided resume to better match the job description while maintaining truthfulness and the candidate's actual experience.

ORIGINAL RESUME:
${resumeText}

TARGET JOB DESCRIPTION:
${jobDescription}

FOCUS AREAS (if provided):
${additionalInfo}

Please rewrite the resume with the following improvements:
1. Optimize the professional summary/objective for this specific job
2. Reorder and rewrite experience bullets to highlight relevant skills
3. Add relevant keywords naturally throughout
4. Quantify achievements where possible
5. Ensure ATS-friendly formatting
6. Tailor skills section to match job requirements
7. Keep all information truthful - only reframe, don't fabricate

Provide the rewritten resume in a clean, professional format with clear sections:
- Professional Summary
- Core Skills/Technical Skills
- Professional Experience
- Education
- Additional relevant sections as needed

Make it compelling while staying honest about the candidate's background.
"""

PROMPT_TEMPLATES = {
    AnalysisType.ANALYZE: ANALYZE_PROMPT,
    AnalysisType.COVER_LETTER: COVER_LETTER_PROMPT,
    AnalysisType.REWRITE_RESUME: REWRITE_RESUME_PROMPT,
}

# Used in place of additionalInfo when the caller sends none
ADDITIONAL_INFO_FALLBACKS = {
    AnalysisType.ANALYZE: "",
    AnalysisType.COVER_LETTER: "None provided",
    AnalysisType.REWRITE_RESUME: "General optimization",
}

_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")


def build_prompt(
    resume_text: str,
    job_description: str,
    analysis_type: AnalysisType,
    additional_info: Optional[str] = None,
) -> str:
    if additional_info is None or not additional_info.strip():
        additional_info = ADDITIONAL_INFO_FALLBACKS[analysis_type]

    values = {
        "resumeText": resume_text,
        "jobDescription": job_description,
        "additionalInfo": additional_info,
    }
    # Single pass so user text that happens to contain ${...} is left alone
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], PROMPT_TEMPLATES[analysis_type])
