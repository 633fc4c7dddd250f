#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Table of Contents Builder

One entry per law, in law order: truncated name, clause/marked counts
and the page the law opens on. Entries flow down the page and continue
on further TOC pages; the grand total goes at the foot of the last one.

Page numbers come from one of two modes:
- exact: TOC pages are reserved, the content is laid out, then the
  recorded opening pages are written into the reserved pages
- estimate: TOC page holding the entry + 1 + 2 * law index

Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging

from config.constants import TOC_ESTIMATED_PAGES_PER_LAW
from vademecum.contracts import Law
from ..canvas.base import Canvas
from ..commands import (
    DocumentLayout,
    PageKind,
    PageLayout,
    RectCommand,
    RoundedRectCommand,
    TextCommand,
    centered_text,
)
from ..constants import (
    COLORS,
    FONTS,
    PAGE_WIDTH,
    PAGE_HEIGHT,
    MARGIN_LEFT,
    MARGIN_RIGHT,
    SECTION_BAND_HEIGHT,
    TOC_FIRST_Y,
    TOC_CONTINUED_Y,
    TOC_ENTRY_STEP,
    TOC_ENTRY_BOX_HEIGHT,
    TOC_BOTTOM_LIMIT,
    TOC_NAME_MAX_CHARS,
)
from ..labels import Labels
from ..executor.heading import truncate

logger = logging.getLogger(__name__)


class TocMode(str, Enum):
    """How TOC page numbers are obtained"""
    EXACT = "exact"
    ESTIMATE = "estimate"


@dataclass
class TocEntry:
    """One TOC line"""
    law_name: str
    clause_count: int
    highlighted_count: int
    page: int

    @property
    def display_name(self) -> str:
        return truncate(self.law_name, TOC_NAME_MAX_CHARS)


def toc_slots(count: int) -> List[Tuple[int, float]]:
    """
    Position of each entry as (TOC page offset, y).

    A new TOC page starts only when another entry is still to come.
    """
    slots = []
    offset, y = 0, TOC_FIRST_Y
    for index in range(count):
        if index > 0 and y > TOC_BOTTOM_LIMIT:
            offset += 1
            y = TOC_CONTINUED_Y
        slots.append((offset, y))
        y += TOC_ENTRY_STEP
    return slots


def toc_page_count(law_count: int) -> int:
    slots = toc_slots(law_count)
    return slots[-1][0] + 1 if slots else 1


def estimated_opening_page(toc_page: int, index: int) -> int:
    """Heuristic opening page; toc_page is the TOC page the entry is printed on"""
    return toc_page + 1 + TOC_ESTIMATED_PAGES_PER_LAW * index


class TocBuilder:
    """
    Builds and lays out the table of contents.

    Usage:
        toc = TocBuilder(measurer, labels, TocMode.EXACT)
        pages = toc.reserve(layout, laws)
        ...content flow...
        toc.fill(layout, laws, pages)
    """

    def __init__(self, measurer: Canvas, labels: Labels, mode: TocMode = TocMode.EXACT):
        self.measurer = measurer
        self.labels = labels
        self.mode = TocMode(mode)

    def reserve(self, layout: DocumentLayout, laws: List[Law]) -> List[PageLayout]:
        """Append the TOC pages the given laws need"""
        count = toc_page_count(len(laws))
        return [layout.new_page(PageKind.TOC) for _ in range(count)]

    def build_entries(
        self,
        laws: List[Law],
        first_toc_page: int,
        law_pages: Optional[List[int]] = None,
    ) -> List[TocEntry]:
        exact = self.mode == TocMode.EXACT and law_pages is not None and len(law_pages) == len(laws)
        if self.mode == TocMode.EXACT and not exact and laws:
            logger.warning("Opening pages unavailable, falling back to estimated TOC pages")

        entries = []
        slots = toc_slots(len(laws))
        for index, law in enumerate(laws):
            if exact:
                page = law_pages[index]
            else:
                page = estimated_opening_page(first_toc_page + slots[index][0], index)
            entries.append(TocEntry(
                law_name=law.name,
                clause_count=law.clause_count,
                highlighted_count=law.highlighted_count,
                page=page,
            ))
        return entries

    def fill(self, layout: DocumentLayout, laws: List[Law], pages: List[PageLayout]) -> List[TocEntry]:
        """Write entries into the reserved TOC pages"""
        first = pages[0].number
        entries = self.build_entries(laws, first, layout.law_pages)
        layout.toc_entries = entries

        self._draw_title(pages[0])
        for entry, (offset, y) in zip(entries, toc_slots(len(entries))):
            self._draw_entry(pages[offset], entry, y)

        total_clauses = sum(e.clause_count for e in entries)
        total_marked = sum(e.highlighted_count for e in entries)
        footer = self.labels.get(
            "toc_footer", laws=len(entries), clauses=total_clauses, marked=total_marked,
        )
        centered_text(
            self.measurer, pages[-1], footer, PAGE_HEIGHT - 25,
            FONTS["small"], color=COLORS["muted"], role="toc-footer",
        )

        logger.info(f"TOC: {len(entries)} entries on {len(pages)} page(s), mode={self.mode.value}")
        return entries

    def _draw_title(self, page: PageLayout) -> None:
        page.add(RectCommand(0, 0, PAGE_WIDTH, SECTION_BAND_HEIGHT, fill=COLORS["primary"], role="toc-band"))
        centered_text(
            self.measurer, page, self.labels.get("toc_title"), 25,
            FONTS["title"], weight="bold", color=COLORS["white"], role="toc-title",
        )

    def _draw_entry(self, page: PageLayout, entry: TocEntry, y: float) -> None:
        page.add(RoundedRectCommand(
            MARGIN_LEFT, y - 5, PAGE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT, TOC_ENTRY_BOX_HEIGHT, 3,
            fill=COLORS["light"], role="toc-entry-box",
        ))
        page.add(TextCommand(
            15, y + 5, entry.display_name, FONTS["subheading"],
            weight="bold", color=COLORS["text"], role="toc-entry",
        ))
        page.add(TextCommand(
            15, y + 14,
            self.labels.get("toc_counts", clauses=entry.clause_count, marked=entry.highlighted_count),
            FONTS["small"], color=COLORS["muted"], role="toc-counts",
        ))
        page.add(TextCommand(
            PAGE_WIDTH - MARGIN_RIGHT - 25, y + 10,
            self.labels.get("toc_page", page=entry.page),
            FONTS["body"], weight="bold", color=COLORS["primary"], role="toc-page",
        ))
