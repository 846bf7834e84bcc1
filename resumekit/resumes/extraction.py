"""
Extractor interface and the deterministic rule-based implementation
"""
from abc import ABC, abstractmethod
from typing import List, Tuple

from resumekit.resumes.parser import ResumeParser, resume_parser
from resumekit.resumes.schemas import CanonicalResume, ExtractionResult


class Extractor(ABC):
    """Turns plain resume text into an ExtractionResult"""

    source = "unknown"

    @abstractmethod
    def extract(self, text: str) -> ExtractionResult:
        raise NotImplementedError


def summarize_fields(record: CanonicalResume) -> Tuple[int, List[str], List[str]]:
    """
    Which fields an extraction produced, and a 0-100 confidence.

    Name, Email, Phone, Skills, Experience and Education count against the
    score when missing; LinkedIn, GitHub, Profile and Projects only count
    when found.
    """
    extracted: List[str] = []
    missing: List[str] = []

    required = [
        ("Name", record.header.name),
        ("Email", record.header.email),
        ("Phone", record.header.phone),
    ]
    optional = [
        ("LinkedIn", record.header.linkedin),
        ("GitHub", record.header.github),
        ("Profile", record.profile),
    ]
    for label, value in required:
        (extracted if value else missing).append(label)
    for label, value in optional:
        if value:
            extracted.append(label)

    for label, items in [("Skills", record.skills), ("Experience", record.experience), ("Education", record.education)]:
        (extracted if items else missing).append(label)
    if record.projects:
        extracted.append("Projects")

    confidence = round(len(extracted) / (len(extracted) + len(missing)) * 100)
    return confidence, extracted, missing


def to_result(record: CanonicalResume, source: str) -> ExtractionResult:
    confidence, extracted, missing = summarize_fields(record)
    return ExtractionResult(
        resume=record,
        confidence=confidence,
        extracted_fields=extracted,
        missing_fields=missing,
        source=source,
    )


class RuleBasedExtractor(Extractor):
    """Deterministic regex and keyword extraction; never fails"""

    source = "rules"

    def __init__(self, parser: ResumeParser = resume_parser):
        self.parser = parser

    def extract(self, text: str) -> ExtractionResult:
        return to_result(self.parser.parse(text), self.source)


rule_based_extractor = RuleBasedExtractor()
