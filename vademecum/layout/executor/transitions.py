#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Column Flow Transitions

The three cursor transitions of the two-column flow:
- advance-within-column (RenderCursor.advance)
- switch-column: left -> right on the same page
- new-page: append a content page, back to the left column

Version: 1.0.0
"""

from dataclasses import replace
import logging

from ..commands import DocumentLayout, PageKind
from ..constants import CONTENT_BOTTOM, FRONT_MATTER_PAGES, top_offset
from ..cursor import Column, RenderCursor

logger = logging.getLogger(__name__)


def open_content_page(layout: DocumentLayout) -> RenderCursor:
    """Append a content page and return a cursor at its left column top"""
    number = layout.page_count + 1
    page = layout.new_page(PageKind.CONTENT, running_header=number > FRONT_MATTER_PAGES)
    logger.debug(f"New content page {page.number} (running header: {page.running_header})")
    return RenderCursor(page=page.number, column=Column.LEFT, y=top_offset(page.number))


def switch_column(cursor: RenderCursor) -> RenderCursor:
    """Move to the top of the right column of the same page"""
    return replace(cursor, column=Column.RIGHT, y=cursor.top)


def break_column(layout: DocumentLayout, cursor: RenderCursor) -> RenderCursor:
    """Leave the current column: right column if in the left one, else a new page"""
    if cursor.column == Column.LEFT:
        return switch_column(cursor)
    return open_content_page(layout)


def settle(cursor: RenderCursor) -> RenderCursor:
    """Clamp trailing spacing so the remaining space never goes negative"""
    if cursor.y > CONTENT_BOTTOM:
        return replace(cursor, y=CONTENT_BOTTOM)
    return cursor
