#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Law Heading

Centered, uppercased law name with a short rule under it. A heading
never starts in the right column or deep into a column: in both cases
the law opens on a fresh page.

Version: 1.0.0
"""

from dataclasses import replace
import logging

from vademecum.contracts import Law
from ..canvas.base import Canvas
from ..commands import DocumentLayout, RectCommand, centered_text
from ..constants import (
    COLORS,
    FONTS,
    PAGE_WIDTH,
    HEADING_HEIGHT,
    HEADING_TOP_ALLOWANCE,
    HEADING_MAX_CHARS,
)
from ..cursor import Column, RenderCursor
from .transitions import open_content_page

logger = logging.getLogger(__name__)

RULE_WIDTH = 100.0
RULE_THICKNESS = 0.5


def truncate(text: str, limit: int) -> str:
    """Cut text to limit characters, marking the cut with '...'"""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def heading_text(law: Law) -> str:
    return truncate(law.name, HEADING_MAX_CHARS).upper()


def needs_new_page(cursor: RenderCursor) -> bool:
    if cursor.column != Column.LEFT:
        return True
    return cursor.y > cursor.top + HEADING_TOP_ALLOWANCE


def layout_law_heading(
    layout: DocumentLayout,
    measurer: Canvas,
    law: Law,
    cursor: RenderCursor,
) -> RenderCursor:
    """
    Place a law heading.

    Returns:
        Cursor below the heading, in the left column of the page the
        heading was drawn on
    """
    if needs_new_page(cursor):
        cursor = open_content_page(layout)
    cursor = replace(cursor, y=max(cursor.y, cursor.top))

    page = layout.page(cursor.page)
    centered_text(
        measurer, page, heading_text(law), cursor.y + 5,
        FONTS["heading"], weight="bold", color=COLORS["primary"], role="law-heading",
    )
    page.add(RectCommand(
        PAGE_WIDTH / 2 - RULE_WIDTH / 2, cursor.y + 10, RULE_WIDTH, RULE_THICKNESS,
        fill=COLORS["primary"], role="law-heading-rule",
    ))

    logger.debug(f"Heading '{law.name}' on page {cursor.page} at y={cursor.y:.1f}")
    return cursor.advance(HEADING_HEIGHT)
