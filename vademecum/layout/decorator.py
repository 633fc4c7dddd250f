#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Decorator

Runs after layout, once the final page count is known:
- running header band, title and rule on content pages
- "k / N" page number on every page but the cover

Decorations are kept apart from the page commands and applied by
selecting each page on the canvas after the main replay.

Version: 1.0.0
"""

from typing import Dict, List
import logging

from .canvas.base import Canvas
from .commands import DocumentLayout, DrawCommand, PageLayout, RectCommand, LineCommand, TextCommand
from .constants import (
    COLORS,
    FONTS,
    PAGE_WIDTH,
    MARGIN_LEFT,
    HEADER_BAND_HEIGHT,
    HEADER_TEXT_Y,
    FOOTER_Y,
)
from .labels import Labels

logger = logging.getLogger(__name__)


class PageDecorator:
    """
    Usage:
        decorator = PageDecorator(measurer, labels)
        decorations = decorator.decorate(layout)
        decorator.apply(canvas, decorations)
    """

    def __init__(self, measurer: Canvas, labels: Labels):
        self.measurer = measurer
        self.labels = labels

    def header_commands(self) -> List[DrawCommand]:
        return [
            RectCommand(0, 0, PAGE_WIDTH, HEADER_BAND_HEIGHT, fill=COLORS["light"], role="running-header-band"),
            TextCommand(MARGIN_LEFT, HEADER_TEXT_Y, self.labels.get("running_header"), FONTS["small"],
                        weight="bold", color=COLORS["primary"], role="running-header"),
            LineCommand(0, HEADER_BAND_HEIGHT, PAGE_WIDTH, HEADER_BAND_HEIGHT,
                        color=COLORS["border"], width=0.3, role="running-header-rule"),
        ]

    def page_number_command(self, number: int, total: int) -> TextCommand:
        text = f"{number} / {total}"
        width = self.measurer.measure_text(text, FONTS["tiny"])
        return TextCommand((PAGE_WIDTH - width) / 2, FOOTER_Y, text, FONTS["tiny"],
                           color=COLORS["muted"], role="page-number")

    def decorations_for(self, page: PageLayout, total: int) -> List[DrawCommand]:
        commands: List[DrawCommand] = []
        if page.running_header:
            commands.extend(self.header_commands())
        if page.number > 1:
            commands.append(self.page_number_command(page.number, total))
        return commands

    def decorate(self, layout: DocumentLayout) -> Dict[int, List[DrawCommand]]:
        total = layout.page_count
        decorations = {}
        for page in layout.pages:
            commands = self.decorations_for(page, total)
            if commands:
                decorations[page.number] = commands
        logger.debug(f"Decorated {len(decorations)} of {total} pages")
        return decorations

    def apply(self, canvas: Canvas, decorations: Dict[int, List[DrawCommand]]) -> None:
        for number in sorted(decorations):
            canvas.select_page(number)
            for command in decorations[number]:
                command.draw(canvas)
