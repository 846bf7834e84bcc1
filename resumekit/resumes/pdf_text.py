"""
PDF text extraction for uploaded resumes
"""
import io
from pathlib import Path
from typing import Optional
import pdfplumber
import structlog

from resumekit.core.config import settings
from resumekit.core.exceptions import ProcessingError

logger = structlog.get_logger()

PDF_MAGIC = b"%PDF"


def check_upload(content: bytes, filename: Optional[str] = None):
    """Reject uploads with a disallowed extension, oversized or non-PDF bodies"""
    if filename:
        file_ext = Path(filename).suffix.lower().lstrip(".")
        if file_ext not in settings.ALLOWED_FILE_EXTENSIONS:
            raise ProcessingError(
                f"File type not allowed. Allowed types: {', '.join(settings.ALLOWED_FILE_EXTENSIONS)}",
                details={"filename": filename},
            )

    file_size_mb = len(content) / (1024 * 1024)
    if file_size_mb > settings.MAX_UPLOAD_SIZE_MB:
        raise ProcessingError(
            f"File size exceeds maximum allowed size of {settings.MAX_UPLOAD_SIZE_MB}MB",
            details={"size_mb": round(file_size_mb, 2)},
        )

    if not content.startswith(PDF_MAGIC):
        raise ProcessingError("Uploaded file is not a PDF document")


def extract_text_from_pdf(content: bytes, filename: Optional[str] = None) -> str:
    """
    Extract newline-separated text from PDF bytes, pages separated by a blank line.

    Raises:
        ProcessingError: non-PDF, oversized, unreadable or text-less documents
    """
    check_upload(content, filename)

    text_parts = []
    try:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            for page in pdf.pages:
                text = page.extract_text()
                if text:
                    text_parts.append(text)
    except Exception as e:
        logger.error("text_extraction_failed", filename=filename, error=str(e))
        raise ProcessingError("Could not read PDF document", details={"error": str(e)}) from e

    if not text_parts:
        raise ProcessingError("No text could be extracted from the PDF")

    logger.info("pdf_text_extracted", filename=filename, pages=len(text_parts))
    return "\n\n".join(text_parts)
