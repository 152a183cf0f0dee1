from fastapi import APIRouter, File, UploadFile
from starlette.concurrency import run_in_threadpool
import logging

from app.services.errors import PdfExtractionError
from app.services.extractor import extract_text_from_pdf

logger = logging.getLogger("uvicorn.error")

router = APIRouter(
    prefix="/resume",
    tags=["Resume Upload"]
)


# POST: extract the text of an uploaded PDF resume
@router.post("/extract", response_model=dict)
async def extract_resume_text(resume: UploadFile = File(...)):
    logger.info(f"Resume upload received: content_type={resume.content_type}, filename={resume.filename}")

    if resume.content_type != "application/pdf":
        raise PdfExtractionError("Please upload your resume as a PDF file.")

    resume_bytes = await resume.read()
    logger.info(f"Resume file read: {len(resume_bytes)} bytes")

    resume_text = await run_in_threadpool(extract_text_from_pdf, resume_bytes)
    logger.info(f"Extracted {len(resume_text)} characters from PDF")

    return {
        "fileName": resume.filename,
        "resumeText": resume_text,
        "characters": len(resume_text),
    }
