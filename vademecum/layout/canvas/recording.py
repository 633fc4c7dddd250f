#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Recording Canvas

Deterministic canvas that records every drawing call per page instead of
producing a real document. Text width is a fixed width per character, so
wrapped line counts are predictable.

Version: 1.0.0
"""

from typing import Any, Dict, List, Optional
import json

from .base import Canvas, BLACK


class RecordingCanvas(Canvas):
    """
    Canvas fake for layout tests.

    Usage:
        canvas = RecordingCanvas(char_width=1.5)
        renderer = VademecumRenderer(canvas_factory=lambda: canvas)
        renderer.render(laws, config)
        canvas.texts(page=3)
    """

    def __init__(self, char_width: float = 1.5, page_width: float = 210.0, page_height: float = 297.0):
        """
        Initialize recording canvas.

        Args:
            char_width: Width of every character in mm, at any font size
        """
        super().__init__(page_width, page_height)
        self.char_width = char_width
        self.pages: List[List[Dict[str, Any]]] = []
        self.metadata: Dict[str, str] = {}
        self.finalized = False
        self._current: Optional[int] = None

    def new_page(self) -> int:
        self.pages.append([])
        self._current = len(self.pages) - 1
        return len(self.pages)

    def select_page(self, number: int) -> None:
        if not 1 <= number <= len(self.pages):
            raise IndexError(f"Page {number} does not exist (document has {len(self.pages)})")
        self._current = number - 1

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def _record(self, op: str, **values: Any) -> None:
        if self._current is None:
            self.new_page()
        values["op"] = op
        self.pages[self._current].append(values)

    def rect(self, x, y, width, height, fill=None, stroke=None, line_width=0.3):
        self._record("rect", x=x, y=y, width=width, height=height, fill=fill, stroke=stroke)

    def rounded_rect(self, x, y, width, height, radius, fill):
        self._record("rounded_rect", x=x, y=y, width=width, height=height, radius=radius, fill=fill)

    def circle(self, cx, cy, radius, fill):
        self._record("circle", cx=cx, cy=cy, radius=radius, fill=fill)

    def line(self, x1, y1, x2, y2, color=BLACK, width=0.3):
        self._record("line", x1=x1, y1=y1, x2=x2, y2=y2, color=color, width=width)

    def text(self, x, y, text, size, weight="normal", color=BLACK):
        self._record("text", x=x, y=y, text=text, size=size, weight=weight, color=color)

    def measure_text(self, text: str, size: float, weight: str = "normal") -> float:
        return len(text) * self.char_width

    def set_metadata(self, title="", subject="", author="", creator="", keywords=""):
        self.metadata = {
            "title": title,
            "subject": subject,
            "author": author,
            "creator": creator,
            "keywords": keywords,
        }

    def finalize(self) -> bytes:
        self.finalized = True
        return json.dumps({"metadata": self.metadata, "pages": self.pages}, default=list).encode("utf-8")

    # ------------------------------------------------------------------
    # Inspection helpers
    # ------------------------------------------------------------------

    def operations(self, page: int, op: Optional[str] = None) -> List[Dict[str, Any]]:
        ops = self.pages[page - 1]
        if op is None:
            return list(ops)
        return [o for o in ops if o["op"] == op]

    def texts(self, page: int) -> List[str]:
        return [o["text"] for o in self.operations(page, "text")]
