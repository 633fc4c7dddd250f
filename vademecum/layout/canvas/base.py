#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Base Canvas Interface

Minimal drawing surface the layout engine renders onto.

Coordinates are millimetres with the origin at the top-left corner of
the page; the y of a text call is its baseline. Colors are 0-255 RGB
triples.

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

RGB = Tuple[int, int, int]

BLACK: RGB = (0, 0, 0)


class Canvas(ABC):
    """
    Abstract base class for drawing backends.

    All canvases must implement page management, the five drawing
    primitives, text measurement, metadata and finalize().
    """

    def __init__(self, page_width: float = 210.0, page_height: float = 297.0):
        """
        Initialize canvas.

        Args:
            page_width: Page width in mm
            page_height: Page height in mm
        """
        self.page_width = page_width
        self.page_height = page_height

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    @abstractmethod
    def new_page(self) -> int:
        """Append a page, make it current and return its 1-based number"""
        pass

    @abstractmethod
    def select_page(self, number: int) -> None:
        """Make an existing page current for further drawing"""
        pass

    @property
    @abstractmethod
    def page_count(self) -> int:
        pass

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    @abstractmethod
    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: Optional[RGB] = None,
        stroke: Optional[RGB] = None,
        line_width: float = 0.3,
    ) -> None:
        pass

    @abstractmethod
    def rounded_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        fill: RGB,
    ) -> None:
        pass

    @abstractmethod
    def circle(self, cx: float, cy: float, radius: float, fill: RGB) -> None:
        pass

    @abstractmethod
    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: RGB = BLACK,
        width: float = 0.3,
    ) -> None:
        pass

    @abstractmethod
    def text(
        self,
        x: float,
        y: float,
        text: str,
        size: float,
        weight: str = "normal",
        color: RGB = BLACK,
    ) -> None:
        pass

    # ------------------------------------------------------------------
    # Text metrics
    # ------------------------------------------------------------------

    @abstractmethod
    def measure_text(self, text: str, size: float, weight: str = "normal") -> float:
        """Width of text in mm"""
        pass

    def wrap_text(self, text: str, width: float, size: float, weight: str = "normal") -> List[str]:
        """
        Greedy word wrap honoring explicit newlines.

        Whitespace-only text wraps to no lines. A single word wider than
        width stays on its own line.
        """
        if not text or not text.strip():
            return []

        lines: List[str] = []
        for paragraph in text.split("\n"):
            words = paragraph.split()
            if not words:
                lines.append("")
                continue

            current = words[0]
            for word in words[1:]:
                candidate = f"{current} {word}"
                if self.measure_text(candidate, size, weight) <= width:
                    current = candidate
                else:
                    lines.append(current)
                    current = word
            lines.append(current)

        return lines

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @abstractmethod
    def set_metadata(
        self,
        title: str = "",
        subject: str = "",
        author: str = "",
        creator: str = "",
        keywords: str = "",
    ) -> None:
        pass

    @abstractmethod
    def finalize(self) -> bytes:
        """Produce the finished document"""
        pass
