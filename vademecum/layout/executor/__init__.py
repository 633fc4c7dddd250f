"""
Content flow: cursor transitions, law headings and clause blocks.
"""

from .transitions import open_content_page, switch_column, break_column
from .article import (
    ArticleRenderer,
    ClauseBlock,
    BodyLine,
    ContinuationPolicy,
    strip_redundant_label,
)
from .heading import layout_law_heading, truncate
from .flow import FlowEngine

__all__ = [
    "open_content_page",
    "switch_column",
    "break_column",
    "ArticleRenderer",
    "ClauseBlock",
    "BodyLine",
    "ContinuationPolicy",
    "strip_redundant_label",
    "layout_law_heading",
    "truncate",
    "FlowEngine",
]
