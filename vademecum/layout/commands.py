#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Draw Commands and Page Layout

The layout pass never draws directly. It appends positioned draw
commands to PageLayouts; the render pass replays them on a Canvas.
Every command carries a role tag ("clause-background", "toc-entry"...)
so tests and the decorator can find what was placed where.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union, TYPE_CHECKING
import logging

from .canvas.base import Canvas, RGB, BLACK
from .constants import PAGE_WIDTH

if TYPE_CHECKING:
    from .cursor import RenderCursor

logger = logging.getLogger(__name__)


class PageKind(Enum):
    """What a page is for"""
    COVER = "cover"
    STATISTICS = "statistics"
    INFORMATION = "information"
    LEGEND = "legend"
    TOC = "toc"
    TRANSITION = "transition"
    CONTENT = "content"


@dataclass
class RectCommand:
    x: float
    y: float
    width: float
    height: float
    fill: Optional[RGB] = None
    stroke: Optional[RGB] = None
    line_width: float = 0.3
    role: str = ""

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def draw(self, canvas: Canvas) -> None:
        canvas.rect(self.x, self.y, self.width, self.height,
                    fill=self.fill, stroke=self.stroke, line_width=self.line_width)


@dataclass
class RoundedRectCommand:
    x: float
    y: float
    width: float
    height: float
    radius: float
    fill: RGB
    role: str = ""

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def draw(self, canvas: Canvas) -> None:
        canvas.rounded_rect(self.x, self.y, self.width, self.height, self.radius, self.fill)


@dataclass
class CircleCommand:
    cx: float
    cy: float
    radius: float
    fill: RGB
    role: str = ""

    def draw(self, canvas: Canvas) -> None:
        canvas.circle(self.cx, self.cy, self.radius, self.fill)


@dataclass
class LineCommand:
    x1: float
    y1: float
    x2: float
    y2: float
    color: RGB = BLACK
    width: float = 0.3
    role: str = ""

    def draw(self, canvas: Canvas) -> None:
        canvas.line(self.x1, self.y1, self.x2, self.y2, color=self.color, width=self.width)


@dataclass
class TextCommand:
    x: float
    y: float
    text: str
    size: float
    weight: str = "normal"
    color: RGB = BLACK
    role: str = ""

    def draw(self, canvas: Canvas) -> None:
        canvas.text(self.x, self.y, self.text, self.size, weight=self.weight, color=self.color)


DrawCommand = Union[RectCommand, RoundedRectCommand, CircleCommand, LineCommand, TextCommand]


@dataclass
class PageLayout:
    """Commands placed on one page"""
    number: int
    kind: PageKind
    running_header: bool = False
    commands: List[DrawCommand] = field(default_factory=list)

    def add(self, command: DrawCommand) -> DrawCommand:
        self.commands.append(command)
        return command

    def find(self, role: str) -> List[DrawCommand]:
        return [c for c in self.commands if c.role == role]

    def texts(self, role: Optional[str] = None) -> List[str]:
        return [
            c.text for c in self.commands
            if isinstance(c, TextCommand) and (role is None or c.role == role)
        ]


@dataclass
class ClausePlacement:
    """Where a clause block started and how it was laid out"""
    law_index: int
    clause_id: str
    label: str
    start: 'RenderCursor'
    height: float
    line_count: int
    long: bool = False
    highlighted: bool = False


@dataclass
class DocumentLayout:
    """
    Complete positioned layout of a document.

    Pages are numbered from 1 in creation order.
    """
    pages: List[PageLayout] = field(default_factory=list)
    placements: List[ClausePlacement] = field(default_factory=list)
    law_pages: List[int] = field(default_factory=list)
    toc_entries: List[Any] = field(default_factory=list)

    def new_page(self, kind: PageKind, running_header: bool = False) -> PageLayout:
        page = PageLayout(number=len(self.pages) + 1, kind=kind, running_header=running_header)
        self.pages.append(page)
        return page

    def page(self, number: int) -> PageLayout:
        return self.pages[number - 1]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def pages_of_kind(self, kind: PageKind) -> List[PageLayout]:
        return [p for p in self.pages if p.kind == kind]

    def first_page_of_kind(self, kind: PageKind) -> Optional[int]:
        for page in self.pages:
            if page.kind == kind:
                return page.number
        return None

    def replay(self, canvas: Canvas) -> None:
        """Render pass: one canvas page per layout page, commands in order"""
        for page in self.pages:
            canvas.new_page()
            for command in page.commands:
                command.draw(canvas)
        logger.debug(f"Replayed {len(self.pages)} pages onto {type(canvas).__name__}")


def centered_text(
    measurer: Canvas,
    page: PageLayout,
    text: str,
    y: float,
    size: float,
    weight: str = "normal",
    color: RGB = BLACK,
    role: str = "",
) -> TextCommand:
    """Place text horizontally centered on the page"""
    width = measurer.measure_text(text, size, weight)
    x = (PAGE_WIDTH - width) / 2
    return page.add(TextCommand(x, y, text, size, weight=weight, color=color, role=role))
