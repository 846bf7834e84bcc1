"""
Quality gates - export readiness checks over a resume record

Gates are advisory and deterministic. Only a failed completeness gate
blocks export; everything else is a warning.
"""
from typing import List
import structlog

from resumekit.matching.scoring import JDMatcher, jd_matcher
from resumekit.resumes.patterns import ATS_UNSAFE_CHAR, FILLER_WORD, GRAMMAR_SLIP
from resumekit.resumes.schemas import (
    CanonicalResume,
    ProfileLevel,
    QualityGate,
    QualityReport,
    Severity,
)

logger = structlog.get_logger()

EARLY_CAREER_LEVELS = (ProfileLevel.FRESHER, ProfileLevel.INTERN)


def _gate(name: str, passed: bool, ok: str, failed: str, severity: Severity = Severity.WARNING) -> QualityGate:
    return QualityGate(
        name=name,
        passed=passed,
        message=ok if passed else failed,
        severity=Severity.INFO if passed else severity,
    )


class QualityGateRunner:
    """Runs the export gates and level-aware missing-section hints"""

    MIN_CONTENT_CHARS = 300
    MAX_CONTENT_CHARS = 5000
    MAX_FILLER_WORDS = 3
    JD_PASS_SCORE = 50
    JD_WARN_SCORE = 30

    def __init__(self, matcher: JDMatcher = jd_matcher):
        self.matcher = matcher

    @staticmethod
    def narrative(record: CanonicalResume) -> str:
        """Free text written by the candidate: profile and experience"""
        parts = [record.profile]
        for entry in record.experience:
            parts.extend([entry.role, entry.company])
            parts.extend(entry.bullets)
        return " ".join(part.strip() for part in parts if part.strip())

    @staticmethod
    def content_length(record: CanonicalResume) -> int:
        header = record.header
        parts = [header.name, header.email, header.phone, header.linkedin, header.github, record.profile]
        parts.extend(item for group in record.skills for item in group.items)
        for entry in record.experience:
            parts.extend([entry.role, entry.company, entry.start_date, entry.end_date])
            parts.extend(entry.bullets)
        for edu in record.education:
            parts.extend([edu.degree, edu.institution, edu.year])
        for project in record.projects:
            parts.extend([project.name, project.description])
            parts.extend(project.tech)
        return sum(len(part) for part in parts)

    def missing_sections(self, record: CanonicalResume) -> List[str]:
        """Hints for empty sections; early-career resumes lean on education and projects"""
        missing = []
        if not record.header.name.strip():
            missing.append("Name is required")
        if not record.header.email.strip():
            missing.append("Email is required")
        if not record.header.phone.strip():
            missing.append("Phone number is recommended")
        if not any(group.items for group in record.skills):
            missing.append("Add your skills")

        has_profile = bool(record.profile.strip())
        if record.meta.profile_level in EARLY_CAREER_LEVELS:
            if not record.education:
                missing.append("Education is essential for freshers")
            if not record.projects:
                missing.append("Add projects to showcase your skills")
            if not has_profile:
                missing.append("Add a brief profile summary")
        else:
            if not record.experience:
                missing.append("Work experience is essential")
            if not has_profile:
                missing.append("Add a professional summary")
        return missing

    def run(self, record: CanonicalResume, job_description: str = "") -> QualityReport:
        text = self.narrative(record)
        gates = [
            _gate(
                "Grammar Check", not GRAMMAR_SLIP.search(text),
                "Grammar looks good", "Minor grammar issues detected",
            ),
            _gate(
                "ATS Readability", not ATS_UNSAFE_CHAR.search(text),
                "ATS-friendly format", "Some characters may not parse well in ATS",
            ),
            self._completeness(record),
            self._page_balance(record),
        ]
        if job_description.strip():
            gates.append(self._jd_coverage(record, job_description))

        fillers = len(FILLER_WORD.findall(text))
        gates.append(_gate(
            "Concise Writing", fillers < self.MAX_FILLER_WORDS,
            "Writing is concise", "Remove filler words for impact",
        ))

        report = QualityReport(
            gates=gates,
            missing_sections=self.missing_sections(record),
            passed=not any(gate.severity == Severity.ERROR for gate in gates),
        )
        logger.info(
            "quality_gates_complete",
            failed=[gate.name for gate in gates if not gate.passed],
            passed=report.passed,
        )
        return report

    def _completeness(self, record: CanonicalResume) -> QualityGate:
        missing = []
        if not record.header.name.strip():
            missing.append("name")
        if not record.header.email.strip():
            missing.append("email")
        if not any(group.items for group in record.skills):
            missing.append("skills")
        return _gate(
            "Section Completeness", not missing,
            "All required sections present", f"Missing: {', '.join(missing)}",
            severity=Severity.ERROR,
        )

    def _page_balance(self, record: CanonicalResume) -> QualityGate:
        length = self.content_length(record)
        too_short = length < self.MIN_CONTENT_CHARS
        return _gate(
            "Page Balance", not too_short and length <= self.MAX_CONTENT_CHARS,
            "Good content length", "Resume is too short" if too_short else "Resume might be too long",
        )

    def _jd_coverage(self, record: CanonicalResume, job_description: str) -> QualityGate:
        score = self.matcher.match(record, job_description).match_score
        passed = score >= self.JD_PASS_SCORE
        message = f"{score}% keyword match with job description"
        return QualityGate(
            name="JD Coverage",
            passed=passed,
            message=message,
            severity=Severity.WARNING if score < self.JD_WARN_SCORE else Severity.INFO,
        )


# Global instance
quality_gate_runner = QualityGateRunner()
