#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Canvas Module

Provides drawing surfaces for the layout engine.
"""

from .base import Canvas, RGB
from .reportlab_canvas import ReportLabCanvas
from .recording import RecordingCanvas

__all__ = [
    "Canvas",
    "RGB",
    "ReportLabCanvas",
    "RecordingCanvas",
]
