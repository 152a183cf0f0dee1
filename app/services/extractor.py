import io
import logging

import pdfplumber

from app.services.errors import PdfExtractionError

logger = logging.getLogger("uvicorn.error")

EMPTY_PDF_MESSAGE = "Could not extract text from PDF. Please ensure it's a text-based PDF."


def extract_text_from_pdf(file_bytes: bytes) -> str:
    text = ""
    try:
        with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
    except Exception as e:
        logger.exception("Failed to extract text from PDF")
        raise PdfExtractionError("Error reading PDF file. Please try a different file.") from e

    if not text.strip():
        logger.warning("PDF contained no extractable text")
        raise PdfExtractionError(EMPTY_PDF_MESSAGE)
    return text
