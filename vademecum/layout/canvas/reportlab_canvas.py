#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReportLab Canvas

PDF backend built on reportlab.pdfgen. ReportLab writes pages strictly
in sequence, so drawing operations are buffered per page and replayed on
finalize(); this lets the page decorator revisit earlier pages once the
total page count is known.

Version: 1.0.0
"""

from io import BytesIO
from typing import Any, Dict, List, Optional, Tuple
import logging

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas as rl_canvas

from .base import Canvas, RGB, BLACK

logger = logging.getLogger(__name__)

Operation = Tuple[str, Tuple[Any, ...]]


class ReportLabCanvas(Canvas):
    """
    Canvas that renders to PDF bytes with ReportLab.

    Usage:
        canvas = ReportLabCanvas()
        canvas.new_page()
        canvas.text(10, 20, "Art. 1", size=10, weight="bold")
        pdf_bytes = canvas.finalize()
    """

    FONTS = {
        "normal": "Helvetica",
        "bold": "Helvetica-Bold",
        "italic": "Helvetica-Oblique",
    }

    def __init__(self, page_width: float = 210.0, page_height: float = 297.0):
        super().__init__(page_width, page_height)
        self._pages: List[List[Operation]] = []
        self._current: Optional[int] = None
        self._metadata: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def new_page(self) -> int:
        self._pages.append([])
        self._current = len(self._pages) - 1
        return len(self._pages)

    def select_page(self, number: int) -> None:
        if not 1 <= number <= len(self._pages):
            raise IndexError(f"Page {number} does not exist (document has {len(self._pages)})")
        self._current = number - 1

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def _record(self, name: str, *args: Any) -> None:
        if self._current is None:
            self.new_page()
        self._pages[self._current].append((name, args))

    # ------------------------------------------------------------------
    # Drawing (buffered)
    # ------------------------------------------------------------------

    def rect(self, x, y, width, height, fill=None, stroke=None, line_width=0.3):
        self._record("rect", x, y, width, height, fill, stroke, line_width)

    def rounded_rect(self, x, y, width, height, radius, fill):
        self._record("rounded_rect", x, y, width, height, radius, fill)

    def circle(self, cx, cy, radius, fill):
        self._record("circle", cx, cy, radius, fill)

    def line(self, x1, y1, x2, y2, color=BLACK, width=0.3):
        self._record("line", x1, y1, x2, y2, color, width)

    def text(self, x, y, text, size, weight="normal", color=BLACK):
        self._record("text", x, y, text, size, weight, color)

    # ------------------------------------------------------------------
    # Text metrics
    # ------------------------------------------------------------------

    def _font(self, weight: str) -> str:
        return self.FONTS.get(weight, self.FONTS["normal"])

    def measure_text(self, text: str, size: float, weight: str = "normal") -> float:
        return pdfmetrics.stringWidth(text, self._font(weight), size) / mm

    def wrap_text(self, text: str, width: float, size: float, weight: str = "normal") -> List[str]:
        if not text or not text.strip():
            return []
        return simpleSplit(text, self._font(weight), size, width * mm)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def set_metadata(self, title="", subject="", author="", creator="", keywords=""):
        self._metadata = {
            "title": title,
            "subject": subject,
            "author": author,
            "creator": creator,
            "keywords": keywords,
        }

    def finalize(self) -> bytes:
        """Replay buffered pages onto a ReportLab canvas and return PDF bytes"""
        buffer = BytesIO()
        pdf = rl_canvas.Canvas(
            buffer,
            pagesize=(self.page_width * mm, self.page_height * mm),
        )

        if self._metadata:
            pdf.setTitle(self._metadata["title"])
            pdf.setSubject(self._metadata["subject"])
            pdf.setAuthor(self._metadata["author"])
            pdf.setCreator(self._metadata["creator"])
            pdf.setKeywords(self._metadata["keywords"])

        for operations in self._pages:
            for name, args in operations:
                getattr(self, f"_draw_{name}")(pdf, *args)
            pdf.showPage()

        pdf.save()
        logger.debug(f"ReportLab canvas finalized: {len(self._pages)} pages")
        return buffer.getvalue()

    def _y(self, y: float) -> float:
        """Top-left millimetres to ReportLab's bottom-left points"""
        return (self.page_height - y) * mm

    @staticmethod
    def _rgb(color: RGB) -> Tuple[float, float, float]:
        return color[0] / 255.0, color[1] / 255.0, color[2] / 255.0

    def _draw_rect(self, pdf, x, y, width, height, fill, stroke, line_width):
        if fill is not None:
            pdf.setFillColorRGB(*self._rgb(fill))
        if stroke is not None:
            pdf.setStrokeColorRGB(*self._rgb(stroke))
            pdf.setLineWidth(line_width * mm)
        pdf.rect(
            x * mm, self._y(y + height), width * mm, height * mm,
            stroke=1 if stroke is not None else 0,
            fill=1 if fill is not None else 0,
        )

    def _draw_rounded_rect(self, pdf, x, y, width, height, radius, fill):
        pdf.setFillColorRGB(*self._rgb(fill))
        pdf.roundRect(
            x * mm, self._y(y + height), width * mm, height * mm, radius * mm,
            stroke=0, fill=1,
        )

    def _draw_circle(self, pdf, cx, cy, radius, fill):
        pdf.setFillColorRGB(*self._rgb(fill))
        pdf.circle(cx * mm, self._y(cy), radius * mm, stroke=0, fill=1)

    def _draw_line(self, pdf, x1, y1, x2, y2, color, width):
        pdf.setStrokeColorRGB(*self._rgb(color))
        pdf.setLineWidth(width * mm)
        pdf.line(x1 * mm, self._y(y1), x2 * mm, self._y(y2))

    def _draw_text(self, pdf, x, y, text, size, weight, color):
        pdf.setFillColorRGB(*self._rgb(color))
        pdf.setFont(self._font(weight), size)
        pdf.drawString(x * mm, self._y(y), text)
