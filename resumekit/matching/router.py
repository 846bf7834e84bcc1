"""
Matching routes
"""
from fastapi import APIRouter
import structlog

from resumekit.matching.schemas import JDMatchRequest, JDMatchResponse
from resumekit.matching.scoring import jd_matcher

router = APIRouter(prefix="/api/v1/matching", tags=["Matching"])
logger = structlog.get_logger()


@router.post("/jd", response_model=JDMatchResponse)
def match_job_description(request: JDMatchRequest):
    """Match a resume against a job description and/or target role"""
    return jd_matcher.match(request.resume, request.job_description, request.target_role)
