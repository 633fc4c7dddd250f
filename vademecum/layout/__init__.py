"""
Layout Engine Module

Positions everything on the page before anything is drawn:
- canvas: drawing surfaces (ReportLab, recording fake)
- executor: two-column content flow
- sections: front matter, TOC, transition page
- decorator: running headers and page numbers
- metadata: document properties and export file name

Version: 1.0.0
"""

from .canvas import Canvas, ReportLabCanvas, RecordingCanvas
from .commands import (
    DocumentLayout,
    PageLayout,
    PageKind,
    ClausePlacement,
    RectCommand,
    RoundedRectCommand,
    CircleCommand,
    LineCommand,
    TextCommand,
)
from .cursor import Column, RenderCursor
from .decorator import PageDecorator
from .executor import FlowEngine, ArticleRenderer, ContinuationPolicy
from .labels import Labels
from .metadata import MetadataWriter, DocumentProperties, export_file_name
from .sections import FrontMatterGenerator, TocBuilder, TocMode, TocEntry

__all__ = [
    "Canvas",
    "ReportLabCanvas",
    "RecordingCanvas",
    "DocumentLayout",
    "PageLayout",
    "PageKind",
    "ClausePlacement",
    "RectCommand",
    "RoundedRectCommand",
    "CircleCommand",
    "LineCommand",
    "TextCommand",
    "Column",
    "RenderCursor",
    "PageDecorator",
    "FlowEngine",
    "ArticleRenderer",
    "ContinuationPolicy",
    "Labels",
    "MetadataWriter",
    "DocumentProperties",
    "export_file_name",
    "FrontMatterGenerator",
    "TocBuilder",
    "TocMode",
    "TocEntry",
]
