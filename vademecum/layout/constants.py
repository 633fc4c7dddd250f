#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Constants - Page geometry, typography and palette.

All lengths are millimetres on a portrait A4 page (210 x 297).
Font sizes are points.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from vademecum.contracts import HighlightColor

RGB = Tuple[int, int, int]

# =============================================================================
# PAGE GEOMETRY
# =============================================================================

PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0

MARGIN_TOP = 15.0
MARGIN_BOTTOM = 15.0
MARGIN_LEFT = 10.0
MARGIN_RIGHT = 10.0

COLUMN_WIDTH = 92.0
COLUMN_GAP = 6.0

# Pages 1..FRONT_MATTER_PAGES never carry the running header
FRONT_MATTER_PAGES = 5

# Running header band on content pages
HEADER_BAND_HEIGHT = 20.0
HEADER_TEXT_Y = 12.0
HEADER_TOP_OFFSET = 30.0  # First baseline below the header band

# Page number footer baseline
FOOTER_Y = PAGE_HEIGHT - 8.0

# Lowest baseline content may reach
CONTENT_BOTTOM = PAGE_HEIGHT - MARGIN_BOTTOM

# =============================================================================
# TYPOGRAPHY
# =============================================================================

FONTS = {
    "title": 16,
    "subtitle": 14,
    "heading": 11,
    "subheading": 10,
    "body": 8,
    "small": 7,
    "tiny": 6,
}

LINE_HEIGHT = 3.5
ARTICLE_SPACING = 8.0
PARAGRAPH_SPACING = 2.0

# =============================================================================
# CLAUSE BLOCK
# =============================================================================

LABEL_ROW_HEIGHT = 8.0      # Height reserved for the label row
LABEL_ADVANCE = 10.0        # Cursor advance after drawing the label
BLOCK_PADDING = 6.0
ACCENT_BAR_WIDTH = 4.0
TEXT_INSET = 6.0            # Text x offset from the column edge
TEXT_WIDTH = COLUMN_WIDTH - 8.0
INDICATOR_RADIUS = 2.5
INDICATOR_INSET = 8.0       # Indicator circle x offset from the column's right edge
IMPORTANCE_DOT_RADIUS = 0.8
IMPORTANCE_DOT_STEP = 2.4

LONG_CLAUSE_RATIO = 0.8     # Share of the max column height that makes a clause "long"
LONG_HEADER_BAND = 15.0     # Highlight band height for long clauses
CONTINUATION_ADVANCE = 8.0

# =============================================================================
# LAW HEADING
# =============================================================================

HEADING_HEIGHT = 20.0
HEADING_TOP_ALLOWANCE = 40.0  # Heading may start this far below the column top
HEADING_MAX_CHARS = 85
LAW_SPACING = 20.0

# =============================================================================
# TABLE OF CONTENTS
# =============================================================================

TOC_FIRST_Y = 60.0
TOC_CONTINUED_Y = 40.0
TOC_ENTRY_STEP = 35.0
TOC_ENTRY_BOX_HEIGHT = 25.0
TOC_BOTTOM_LIMIT = PAGE_HEIGHT - 60.0
TOC_NAME_MAX_CHARS = 60

# Title band at the top of TOC, information and legend pages
SECTION_BAND_HEIGHT = 35.0
SECTION_CONTINUED_Y = 40.0

# =============================================================================
# COLORS
# =============================================================================

COLORS: Dict[str, RGB] = {
    "primary": (41, 98, 255),
    "secondary": (99, 102, 241),
    "text": (30, 30, 30),
    "muted": (100, 116, 139),
    "light": (248, 250, 252),
    "border": (226, 232, 240),
    "white": (255, 255, 255),
    "bar_track": (240, 240, 240),
    "bar_border": (200, 200, 200),
    "notice_fill": (255, 248, 220),
    "notice_text": (180, 83, 9),
    "alert_fill": (255, 245, 245),
    "alert_text": (220, 38, 38),
    "info_fill": (240, 249, 255),
}


@dataclass(frozen=True)
class ColorStyle:
    """Accent and pastel background pair for one palette key"""
    accent: RGB
    pastel: RGB


PALETTE_STYLES: Dict[HighlightColor, ColorStyle] = {
    HighlightColor.VERDE: ColorStyle(accent=(34, 197, 94), pastel=(200, 255, 210)),
    HighlightColor.AZUL: ColorStyle(accent=(59, 130, 246), pastel=(200, 230, 255)),
    HighlightColor.AMARELO: ColorStyle(accent=(255, 193, 7), pastel=(255, 248, 180)),
    HighlightColor.LARANJA: ColorStyle(accent=(255, 87, 34), pastel=(255, 220, 180)),
    HighlightColor.ROXO: ColorStyle(accent=(156, 39, 176), pastel=(230, 200, 255)),
    HighlightColor.CINZA: ColorStyle(accent=(96, 125, 139), pastel=(220, 220, 225)),
}


def column_x(column: str) -> float:
    """Left edge of a content column"""
    if column == "left":
        return MARGIN_LEFT
    return MARGIN_LEFT + COLUMN_WIDTH + COLUMN_GAP


def top_offset(page_number: int) -> float:
    """First usable baseline of a column on the given page"""
    if page_number > FRONT_MATTER_PAGES:
        return HEADER_TOP_OFFSET
    return MARGIN_TOP


def max_column_height(page_number: int) -> float:
    """Usable column height for the page class"""
    return CONTENT_BOTTOM - top_offset(page_number)
