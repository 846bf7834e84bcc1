"""
Scoring engine for resume to job description matching
"""
import re
from typing import List, Optional, Tuple
import structlog

from resumekit.matching.schemas import JDMatchResponse, SemanticMatch
from resumekit.resumes.patterns import JD_SKILLS, SEMANTIC_EQUIVALENTS, keyword_alternation
from resumekit.resumes.schemas import CanonicalResume

logger = structlog.get_logger()


def _contains_term(text: str, term: str) -> bool:
    """Whole-token containment, so "java" does not match inside "javascript" """
    return re.search(keyword_alternation([re.escape(term)]), text) is not None


class JDMatcher:
    """Keyword and semantic-equivalent coverage of a job description"""

    SUGGESTED_SKILLS = 3
    ROLE_WORD_MIN = 3

    def resume_text(self, record: CanonicalResume) -> str:
        """Lower-cased searchable text of everything a recruiter would read"""
        parts = [record.profile]
        parts.extend(item for group in record.skills for item in group.items)
        for entry in record.experience:
            parts.append(entry.role)
            parts.extend(entry.bullets)
        for project in record.projects:
            parts.extend([project.name, project.description])
            parts.extend(project.tech)
        return re.sub(r"\s+", " ", " ".join(parts)).lower()

    def jd_skills(self, job_description: str) -> List[str]:
        """Distinct skill terms mentioned by the job description, in order"""
        found: List[str] = []
        for match in JD_SKILLS.finditer(job_description or ""):
            term = re.sub(r"\s+", " ", match.group(0)).lower()
            if term not in found:
                found.append(term)
        return found

    def semantic_equivalent(self, term: str, text: str) -> Optional[str]:
        """A resume term that covers ``term`` through the equivalence table"""
        for key, equivalents in SEMANTIC_EQUIVALENTS.items():
            if key in term or term in key:
                for equivalent in equivalents:
                    if _contains_term(text, equivalent):
                        return equivalent
        return None

    def role_alignment(self, record: CanonicalResume, target_role: str) -> Tuple[int, bool]:
        """
        Share of the target role's words found in the resume's titles and
        profile, and whether the full role title appears verbatim.
        """
        haystack = " ".join([record.profile] + [entry.role for entry in record.experience]).lower()
        words = [word for word in re.findall(r"[a-z0-9+#/.]+", target_role.lower()) if len(word) >= self.ROLE_WORD_MIN]
        if not words:
            return 0, False
        hits = sum(1 for word in words if _contains_term(haystack, word))
        return round(hits / len(words) * 100), target_role.strip().lower() in haystack

    def match(self, record: CanonicalResume, job_description: str = "", target_role: str = "") -> JDMatchResponse:
        """
        Score how well a resume covers a job description.

        match_score is matched / mentioned skills x 100. Role alignment follows
        the target role when one is given, otherwise it mirrors match_score.
        """
        if not (job_description or "").strip() and not (target_role or "").strip():
            return JDMatchResponse()

        text = self.resume_text(record)
        skills = self.jd_skills(job_description)

        matched: List[str] = []
        missing: List[str] = []
        semantic: List[SemanticMatch] = []
        for term in skills:
            if _contains_term(text, term):
                matched.append(term)
                continue
            equivalent = self.semantic_equivalent(term, text)
            if equivalent:
                matched.append(term)
                semantic.append(SemanticMatch(jd_term=term, resume_term=equivalent))
            else:
                missing.append(term)

        score = round(len(matched) / len(skills) * 100) if skills else 0

        suggestions = []
        if missing:
            suggestions.append(f"Consider adding: {', '.join(missing[:self.SUGGESTED_SKILLS])}")

        alignment = score
        if (target_role or "").strip():
            alignment, verbatim = self.role_alignment(record, target_role)
            if not verbatim:
                suggestions.append(f'Consider adding experience related to "{target_role.strip()}" role')

        logger.info(
            "jd_match_calculated",
            score=score,
            matched=len(matched),
            missing=len(missing),
            role_alignment=alignment,
        )
        return JDMatchResponse(
            match_score=score,
            matched_skills=matched,
            missing_skills=missing,
            semantic_matches=semantic,
            role_alignment=alignment,
            suggestions=suggestions,
        )


# Global instance
jd_matcher = JDMatcher()
