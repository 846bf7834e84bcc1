"""
Resume processing routes
"""
from fastapi import APIRouter, File, UploadFile
import structlog

from resumekit.resumes.pdf_text import extract_text_from_pdf
from resumekit.resumes.schemas import (
    ApplyFixRequest,
    PaginateResponse,
    ParseTextRequest,
    QualityCheckRequest,
    QualityReport,
    ResumeSessionResponse,
    ResumeStateRequest,
    UpdateFieldRequest,
)
from resumekit.resumes.service import resume_service

router = APIRouter(prefix="/api/v1/resumes", tags=["Resumes"])
logger = structlog.get_logger()


@router.post("/upload", response_model=ResumeSessionResponse)
def upload_resume(file: UploadFile = File(...)):
    """Upload a PDF resume and get back the parsed record with issues and pages"""
    content = file.file.read()
    text = extract_text_from_pdf(content, filename=file.filename)
    logger.info("resume_uploaded", file_name=file.filename, size=len(content))
    return resume_service.load(text)


@router.post("/parse", response_model=ResumeSessionResponse)
def parse_resume(request: ParseTextRequest):
    """Parse resume text that was already extracted"""
    return resume_service.load(request.text)


@router.post("/validate", response_model=ResumeSessionResponse)
def validate_resume(request: ResumeStateRequest):
    return resume_service.refresh(request.resume)


@router.post("/fix", response_model=ResumeSessionResponse)
def apply_fix(request: ApplyFixRequest):
    """Apply a fix value to the field an issue points at"""
    return resume_service.apply_fix(request.resume, request.issue_id, request.value)


@router.post("/fields", response_model=ResumeSessionResponse)
def update_field(request: UpdateFieldRequest):
    return resume_service.update_field(request.resume, request.field, request.value)


@router.post("/paginate", response_model=PaginateResponse)
def paginate_resume(request: ResumeStateRequest):
    return PaginateResponse(pages=resume_service.planner.paginate(request.resume))


@router.post("/quality", response_model=QualityReport)
def check_quality(request: QualityCheckRequest):
    """Run the export quality gates, optionally against a job description"""
    return resume_service.quality(request.resume, job_description=request.job_description)
