"""
Pagination planner - lays the resume out onto fixed-height A4 pages
"""
from typing import List
import structlog

from resumekit.resumes.schemas import (
    CanonicalResume,
    EducationSection,
    ExperienceSection,
    HeaderSection,
    Page,
    PageSection,
    ProfileSection,
    ProjectSection,
    SectionTitle,
    SkillSection,
)

logger = structlog.get_logger()


class PaginationPlanner:
    """First-fit packing of section blocks into pages"""

    # A4 at 96 dpi, 56px padding top and bottom
    PAGE_HEIGHT = 1123
    PAGE_PADDING = 112

    HEADER_HEIGHT = 100
    PROFILE_HEIGHT = 70
    SECTION_TITLE_HEIGHT = 30
    SKILL_HEIGHT = 22
    EXPERIENCE_HEIGHT = 120
    EDUCATION_HEIGHT = 50
    PROJECT_HEIGHT = 60

    @property
    def usable_height(self) -> int:
        return self.PAGE_HEIGHT - self.PAGE_PADDING

    def sections(self, record: CanonicalResume) -> List[PageSection]:
        """Flatten the record into blocks in rendering order"""
        blocks: List[PageSection] = [HeaderSection(height=self.HEADER_HEIGHT, header=record.header)]

        if record.profile:
            blocks.append(ProfileSection(height=self.PROFILE_HEIGHT, text=record.profile))

        if record.skills:
            blocks.append(SectionTitle(height=self.SECTION_TITLE_HEIGHT, title="Skills"))
            blocks.extend(SkillSection(height=self.SKILL_HEIGHT, group=group) for group in record.skills)

        if record.experience:
            blocks.append(SectionTitle(height=self.SECTION_TITLE_HEIGHT, title="Experience"))
            blocks.extend(ExperienceSection(height=self.EXPERIENCE_HEIGHT, entry=entry) for entry in record.experience)

        if record.education:
            blocks.append(SectionTitle(height=self.SECTION_TITLE_HEIGHT, title="Education"))
            blocks.extend(EducationSection(height=self.EDUCATION_HEIGHT, entry=entry) for entry in record.education)

        if record.projects:
            blocks.append(SectionTitle(height=self.SECTION_TITLE_HEIGHT, title="Projects"))
            blocks.extend(ProjectSection(height=self.PROJECT_HEIGHT, entry=entry) for entry in record.projects)

        return blocks

    def pack(self, blocks: List[PageSection]) -> List[Page]:
        """
        Place blocks in order, opening a new page when the next block would
        overflow a non-empty page. A block taller than a page gets a page of
        its own. There is always at least one page.
        """
        pages = [Page()]
        for block in blocks:
            page = pages[-1]
            if page.sections and page.used_height + block.height > self.usable_height:
                page = Page()
                pages.append(page)
            page.sections.append(block)
            page.used_height += block.height
        return pages

    def paginate(self, record: CanonicalResume) -> List[Page]:
        pages = self.pack(self.sections(record))
        logger.debug("resume_paginated", pages=len(pages))
        return pages


# Global instance
pagination_planner = PaginationPlanner()


def paginate(record: CanonicalResume) -> List[Page]:
    return pagination_planner.paginate(record)
