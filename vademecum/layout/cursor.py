#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Render Cursor

Position state of the column flow: page, column and vertical offset.
The cursor is an immutable value; every transition returns a new one.

Version: 1.0.0
"""

from dataclasses import dataclass, replace
from enum import Enum

from .constants import CONTENT_BOTTOM, column_x, top_offset


class Column(str, Enum):
    """Content columns"""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class RenderCursor:
    """Where the next unit of content is drawn"""
    page: int
    column: Column = Column.LEFT
    y: float = 0.0

    @property
    def x(self) -> float:
        return column_x(self.column.value)

    @property
    def top(self) -> float:
        return top_offset(self.page)

    @property
    def remaining(self) -> float:
        """Vertical space left in the current column"""
        return CONTENT_BOTTOM - self.y

    @property
    def at_column_top(self) -> bool:
        return self.y <= self.top

    def advance(self, height: float) -> 'RenderCursor':
        return replace(self, y=self.y + height)

    def fits(self, height: float) -> bool:
        return height <= self.remaining

    def to_dict(self):
        return {"page": self.page, "column": self.column.value, "y": self.y}
