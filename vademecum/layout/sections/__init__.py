"""
Document sections: front matter, table of contents, transition page.
"""

from .front_matter import (
    FrontMatterGenerator,
    ColorStatistic,
    DocumentStatistics,
    compute_statistics,
)
from .toc import (
    TocBuilder,
    TocEntry,
    TocMode,
    toc_slots,
    toc_page_count,
    estimated_opening_page,
)
from .transition import layout_transition_page

__all__ = [
    "FrontMatterGenerator",
    "ColorStatistic",
    "DocumentStatistics",
    "compute_statistics",
    "TocBuilder",
    "TocEntry",
    "TocMode",
    "toc_slots",
    "toc_page_count",
    "estimated_opening_page",
    "layout_transition_page",
]
