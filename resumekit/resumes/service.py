"""
Resume session service - ties extraction, validation and pagination together

Every operation returns the full derived state (record, issues, pages) so the
presentation layer can simply re-render after a change.
"""
from datetime import date
from typing import Optional
import structlog

from resumekit.core.config import settings
from resumekit.core.exceptions import NotFoundError
from resumekit.resumes.ai_parser import LLMExtractor, ProviderState
from resumekit.resumes.extraction import Extractor, rule_based_extractor
from resumekit.resumes.pagination import PaginationPlanner, pagination_planner
from resumekit.resumes.quality_gates import QualityGateRunner, quality_gate_runner
from resumekit.resumes.resume_validator import ResumeValidator, resume_validator
from resumekit.resumes.schemas import CanonicalResume, QualityReport, ResumeSessionResponse, Severity
from resumekit.resumes.seniority_analyzer import compute_meta

logger = structlog.get_logger()


def build_extractor(mode: Optional[str] = None) -> Extractor:
    """Extractor for the configured mode ("rules" or "llm")"""
    mode = mode or settings.EXTRACTION_MODE
    if mode == "llm":
        return LLMExtractor(state=ProviderState(cooldown_seconds=settings.PROVIDER_COOLDOWN_SECONDS))
    return rule_based_extractor


class ResumeService:
    """Stateless operations over a resume record; the caller keeps the record"""

    def __init__(
        self,
        extractor: Optional[Extractor] = None,
        validator: ResumeValidator = resume_validator,
        planner: PaginationPlanner = pagination_planner,
        gates: QualityGateRunner = quality_gate_runner,
    ):
        self.extractor = extractor or rule_based_extractor
        self.validator = validator
        self.planner = planner
        self.gates = gates

    def load(self, text: str, now: Optional[date] = None) -> ResumeSessionResponse:
        """Extract a record from text and derive its full state"""
        extraction = self.extractor.extract(text)
        session = self.refresh(extraction.resume, now=now)
        session.extraction = extraction.model_copy(update={"resume": session.resume})
        logger.info(
            "resume_loaded",
            source=extraction.source,
            confidence=extraction.confidence,
            issues=len(session.issues),
        )
        return session

    def refresh(self, record: CanonicalResume, now: Optional[date] = None) -> ResumeSessionResponse:
        """Recompute meta, issues and pages for the current record"""
        record = compute_meta(record, now=now)
        issues = self.validator.validate(record, now=now)
        pages = self.planner.paginate(record)
        return ResumeSessionResponse(
            resume=record,
            issues=issues,
            pages=pages,
            has_errors=any(issue.severity == Severity.ERROR for issue in issues),
        )

    def apply_fix(
        self,
        record: CanonicalResume,
        issue_id: str,
        value: str,
        now: Optional[date] = None,
    ) -> ResumeSessionResponse:
        """Resolve an issue by id against the current record and apply the value"""
        issue = next((i for i in self.validator.validate(record, now=now) if i.id == issue_id), None)
        if issue is None:
            raise NotFoundError("Issue", issue_id)
        updated = self.validator.apply_fix(record, issue, value, now=now)
        logger.info("resume_fix_applied", issue_id=issue_id, field=issue.field)
        return self.refresh(updated, now=now)

    def update_field(
        self,
        record: CanonicalResume,
        path: str,
        value: str,
        now: Optional[date] = None,
    ) -> ResumeSessionResponse:
        """Direct edit of one text field, e.g. from an inline editor"""
        updated = self.validator.set_field(record, path, value, now=now)
        return self.refresh(updated, now=now)

    def quality(
        self,
        record: CanonicalResume,
        job_description: str = "",
        now: Optional[date] = None,
    ) -> QualityReport:
        """Export gates over the record with freshly derived meta"""
        return self.gates.run(compute_meta(record, now=now), job_description=job_description)


resume_service = ResumeService(extractor=build_extractor())
