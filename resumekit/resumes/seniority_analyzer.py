"""
Seniority classification

Years of tenure and role titles map a resume to one of four levels. Title
keywords can lift the level above what the tenure alone would give.
"""
from datetime import date
from typing import List, Optional, Tuple
import structlog

from resumekit.resumes.patterns import INTERN_TITLE, PROFESSIONAL_TITLE, SENIOR_TITLE
from resumekit.resumes.schemas import CanonicalResume, ExperienceEntry, ProfileLevel, ResumeMeta
from resumekit.resumes.tenure import compute_years

logger = structlog.get_logger()


class SeniorityClassifier:
    """Rule-based seniority tiers; the first matching rule wins"""

    SENIOR_YEARS = 7
    PROFESSIONAL_YEARS = 3

    def classify(self, years: float, roles: List[str]) -> Tuple[ProfileLevel, str]:
        """
        Returns:
            Tuple[level, reason]
        """
        titles = " ".join(role for role in roles if role)

        if years >= self.SENIOR_YEARS:
            return ProfileLevel.SENIOR, f"{years} years of experience"
        if SENIOR_TITLE.search(titles):
            return ProfileLevel.SENIOR, "Executive or principal title"

        if years >= self.PROFESSIONAL_YEARS:
            return ProfileLevel.PROFESSIONAL, f"{years} years of experience"
        if PROFESSIONAL_TITLE.search(titles):
            return ProfileLevel.PROFESSIONAL, "Senior, lead or manager title"

        if INTERN_TITLE.search(titles):
            return ProfileLevel.INTERN, "Internship or trainee role"

        return ProfileLevel.FRESHER, f"{years} years of experience"

    def analyze(self, experience: List[ExperienceEntry], now: Optional[date] = None) -> ResumeMeta:
        """Derive the meta block (tenure and tier) from experience entries"""
        years = compute_years(experience, now=now)
        level, reason = self.classify(years, [entry.role for entry in experience])
        logger.debug("seniority_classified", years=years, level=level.value)
        return ResumeMeta(experience_years=years, profile_level=level, profile_reason=reason)


# Global instance
seniority_classifier = SeniorityClassifier()


def compute_meta(record: CanonicalResume, now: Optional[date] = None) -> CanonicalResume:
    """Copy of the record with meta recomputed from its experience"""
    meta = seniority_classifier.analyze(record.experience, now=now)
    return record.model_copy(update={"meta": meta})
