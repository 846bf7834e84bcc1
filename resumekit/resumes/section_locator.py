"""
Section Locator - finds the line range of a named resume section

Headers are recognised by keyword containment on short lines only, so a
keyword buried in a long prose sentence never opens or closes a section.
"""
from typing import List, Optional, Sequence
import structlog

from resumekit.resumes.patterns import SECTIONS, SHORT_LINE_MAX

logger = structlog.get_logger()


class SectionLocator:
    """Keyword-bounded section scanning over an ordered list of lines"""

    def __init__(self, short_line_max: int = SHORT_LINE_MAX):
        self.short_line_max = short_line_max

    def _is_header(self, lowered: str, keywords: Sequence[str]) -> bool:
        return len(lowered) < self.short_line_max and any(k in lowered for k in keywords)

    def find_start(self, lowered: List[str], keywords: Sequence[str]) -> Optional[int]:
        """Index of the first short line containing a start keyword"""
        for i, line in enumerate(lowered):
            if self._is_header(line, keywords):
                return i
        return None

    def locate(
        self,
        lines: List[str],
        start_keywords: Sequence[str],
        end_keywords: Sequence[str],
        max_span: int,
    ) -> List[str]:
        """
        Return the lines strictly after the section header and before the next
        header (or after ``max_span`` lines, whichever comes first).

        An empty list means the section header was not found.
        """
        lowered = [line.lower() for line in lines]
        start = self.find_start(lowered, start_keywords)
        if start is None:
            logger.debug("section_not_found", keyword=start_keywords[0] if start_keywords else None)
            return []

        end = min(start + 1 + max_span, len(lines))
        for i in range(start + 1, end):
            if self._is_header(lowered[i], end_keywords):
                end = i
                break

        logger.debug("section_located", keyword=start_keywords[0], start=start, end=end)
        return lines[start + 1:end]

    def locate_named(self, lines: List[str], section: str) -> List[str]:
        """Locate one of the predefined sections (profile, skills, experience, ...)"""
        rule = SECTIONS[section]
        return self.locate(lines, rule.start_keywords, rule.end_keywords, rule.max_span)


section_locator = SectionLocator()


def locate_section(
    lines: List[str],
    start_keywords: Sequence[str],
    end_keywords: Sequence[str],
    max_span: int,
) -> List[str]:
    """Functional entry point over the shared locator"""
    return section_locator.locate(lines, start_keywords, end_keywords, max_span)
