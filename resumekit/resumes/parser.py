"""
Resume parsing service
"""
from typing import List
import structlog

from resumekit.resumes import extractors
from resumekit.resumes.schemas import CanonicalResume, ResumeHeader
from resumekit.resumes.section_locator import SectionLocator, section_locator

logger = structlog.get_logger()


class ResumeParser:
    """Build a canonical resume record from plain text with rule-based extractors"""

    def __init__(self, locator: SectionLocator = section_locator):
        self.locator = locator

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """Trimmed, non-empty lines in document order"""
        return [line.strip() for line in (text or "").splitlines() if line.strip()]

    def parse(self, text: str) -> CanonicalResume:
        """
        Parse resume text into the canonical record.

        Order is contact, profile, skills, experience, education, projects.
        The result depends only on the text; meta is left at its defaults.
        """
        text = text or ""
        lines = self.split_lines(text)

        header = ResumeHeader(
            name=extractors.extract_name(lines),
            email=extractors.extract_email(text),
            phone=extractors.extract_phone(text),
            linkedin=extractors.extract_linkedin(text),
            github=extractors.extract_github(text),
        )
        profile = extractors.extract_profile(self.locator.locate_named(lines, "profile"))
        skills = extractors.extract_skills(self.locator.locate_named(lines, "skills"), text)
        experience = extractors.extract_experience(self.locator.locate_named(lines, "experience"))
        education = extractors.extract_education(self.locator.locate_named(lines, "education"))
        projects = extractors.extract_projects(self.locator.locate_named(lines, "projects"))

        record = CanonicalResume(
            header=header,
            profile=profile,
            experience=experience,
            education=education,
            skills=skills,
            projects=projects,
        )
        logger.info(
            "resume_parsed",
            lines=len(lines),
            experience=len(experience),
            education=len(education),
            projects=len(projects),
            skill_groups=len(skills),
        )
        return record


resume_parser = ResumeParser()


def build_record(text: str) -> CanonicalResume:
    return resume_parser.parse(text)
