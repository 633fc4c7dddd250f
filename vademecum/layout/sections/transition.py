#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Transition page between the table of contents and the laws.
"""

import logging

from vademecum.contracts import RenderConfig
from ..canvas.base import Canvas
from ..commands import DocumentLayout, PageKind, PageLayout, RectCommand, centered_text
from ..constants import COLORS, FONTS, PAGE_WIDTH, PAGE_HEIGHT
from ..labels import Labels

logger = logging.getLogger(__name__)


def layout_transition_page(
    layout: DocumentLayout,
    measurer: Canvas,
    labels: Labels,
    config: RenderConfig,
) -> PageLayout:
    """Full-bleed light page with the section title and subtitle"""
    page = layout.new_page(PageKind.TRANSITION)
    middle = PAGE_HEIGHT / 2

    page.add(RectCommand(0, 0, PAGE_WIDTH, PAGE_HEIGHT, fill=COLORS["light"], role="transition-background"))

    title = config.transition_title.strip() or labels.get("transition_title")
    subtitle = config.transition_subtitle.strip() or labels.get("transition_subtitle")

    centered_text(measurer, page, title, middle - 20, 24, weight="bold",
                  color=COLORS["primary"], role="transition-title")
    page.add(RectCommand(65, middle + 10, 80, 1, fill=COLORS["primary"], role="transition-rule"))
    centered_text(measurer, page, subtitle, middle + 10 + 12, FONTS["subtitle"],
                  color=COLORS["muted"], role="transition-subtitle")

    logger.debug(f"Transition page {page.number}: '{title}'")
    return page
