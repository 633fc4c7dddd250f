#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Article Renderer

Lays out one clause in the column flow:
- strips a label the body already repeats
- wraps the body to the column text width
- chooses the normal branch or the long-clause branch
- draws the highlight (pastel background, accent bar, indicator)
- draws label and body lines, breaking columns/pages line by line

Version: 1.0.0
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging
import re

from vademecum.contracts import Clause, RenderConfig
from ..canvas.base import Canvas
from ..commands import (
    DocumentLayout,
    ClausePlacement,
    RectCommand,
    CircleCommand,
    TextCommand,
)
from ..constants import (
    COLORS,
    FONTS,
    PALETTE_STYLES,
    ColorStyle,
    COLUMN_WIDTH,
    CONTENT_BOTTOM,
    LINE_HEIGHT,
    ARTICLE_SPACING,
    LABEL_ROW_HEIGHT,
    LABEL_ADVANCE,
    BLOCK_PADDING,
    ACCENT_BAR_WIDTH,
    TEXT_INSET,
    TEXT_WIDTH,
    INDICATOR_RADIUS,
    INDICATOR_INSET,
    IMPORTANCE_DOT_RADIUS,
    IMPORTANCE_DOT_STEP,
    LONG_CLAUSE_RATIO,
    LONG_HEADER_BAND,
    CONTINUATION_ADVANCE,
    max_column_height,
)
from ..cursor import Column, RenderCursor
from ..labels import Labels
from .transitions import open_content_page, break_column, settle

logger = logging.getLogger(__name__)


class ContinuationPolicy(str, Enum):
    """
    When a clause split across columns gets a continuation marker.

    render() moves a normal block to the next column whenever its height
    plus spacing does not fit, so blocks it places never split and ALWAYS
    only differs from LONG_ONLY for blocks drawn from a lower starting
    point (ArticleRenderer._render_normal called directly).
    """
    LONG_ONLY = "long_only"  # Only clauses forced onto their own page
    ALWAYS = "always"        # Any clause broken mid-render


@dataclass
class BodyLine:
    """One wrapped line of a clause block"""
    text: str
    style: str = "body"  # body | annotation | tags


@dataclass
class ClauseBlock:
    """Measured clause, ready to place"""
    clause: Clause
    label: str
    body: str
    lines: List[BodyLine] = field(default_factory=list)
    style: Optional[ColorStyle] = None

    @property
    def height(self) -> float:
        return LABEL_ROW_HEIGHT + len(self.lines) * LINE_HEIGHT + BLOCK_PADDING

    @property
    def highlighted(self) -> bool:
        return self.style is not None


def strip_redundant_label(text: str, label: str) -> str:
    """
    Remove a leading copy of the clause's own label from its body.

    "Art. 5º - Todos são iguais" with label "Art. 5º" becomes
    "Todos são iguais". Dots, ordinal marks and dash separators are
    tolerated between the label and the text.
    """
    body = text.strip()
    match = re.match(r"^\s*([^\W\d_]+)\.?\s*(\S+?)[ºª°]?\s*$", label)
    if match:
        prefix, numeral = match.group(1), match.group(2).rstrip("ºª°")
        head = rf"{re.escape(prefix)}\.?\s*{re.escape(numeral)}[ºª°]?"
    else:
        head = re.escape(label.strip())
    pattern = rf"^{head}(?:\s*[\-–—.:]\s*|\s+)"

    if re.match(pattern, body, flags=re.IGNORECASE):
        body = re.sub(pattern, "", body, count=1, flags=re.IGNORECASE).strip()
    return body


class ArticleRenderer:
    """
    Places clause blocks and advances the cursor.

    Usage:
        articles = ArticleRenderer(layout, measurer, labels, config)
        cursor = articles.render(clause, cursor, law_index=0)
    """

    def __init__(
        self,
        layout: DocumentLayout,
        measurer: Canvas,
        labels: Labels,
        config: RenderConfig,
        continuation_policy: ContinuationPolicy = ContinuationPolicy.LONG_ONLY,
    ):
        self.layout = layout
        self.measurer = measurer
        self.labels = labels
        self.config = config
        self.continuation_policy = continuation_policy

    # ------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------

    def prepare(self, clause: Clause) -> ClauseBlock:
        """Strip, wrap and measure a clause"""
        label = clause.display_label
        body = strip_redundant_label(clause.text, label)
        size = FONTS["body"]

        lines = [BodyLine(t) for t in self.measurer.wrap_text(body, TEXT_WIDTH, size)]

        if self.config.export_annotations and clause.annotation.strip():
            note = self.labels.get("annotation", text=clause.annotation.strip())
            lines.extend(
                BodyLine(t, "annotation")
                for t in self.measurer.wrap_text(note, TEXT_WIDTH, size, "italic")
            )

        if self.config.export_tags and clause.tags:
            tag_line = " ".join(f"#{tag}" for tag in clause.tags)
            lines.extend(BodyLine(t, "tags") for t in self.measurer.wrap_text(tag_line, TEXT_WIDTH, size))

        color = clause.highlight
        if clause.highlighted and color is None:
            logger.warning(f"{label}: unknown highlight color '{clause.color}', rendering unhighlighted")

        return ClauseBlock(
            clause=clause,
            label=label,
            body=body,
            lines=lines,
            style=PALETTE_STYLES.get(color) if color else None,
        )

    def is_long(self, block: ClauseBlock, cursor: RenderCursor) -> bool:
        return block.height > max_column_height(cursor.page) * LONG_CLAUSE_RATIO

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def render(self, clause: Clause, cursor: RenderCursor, law_index: int = 0) -> RenderCursor:
        """
        Lay out one clause starting at cursor.

        Returns:
            Cursor after the clause and its trailing spacing
        """
        block = self.prepare(clause)

        if self.is_long(block, cursor):
            if cursor.column != Column.LEFT or not cursor.at_column_top:
                cursor = open_content_page(self.layout)
            logger.debug(f"{block.label}: long clause ({block.height:.1f}mm) on page {cursor.page}")
            self._place(block, cursor, law_index, long=True)
            return self._render_long(block, cursor)

        if block.height + ARTICLE_SPACING > cursor.remaining:
            cursor = break_column(self.layout, cursor)
            logger.debug(f"{block.label}: moved to page {cursor.page}, {cursor.column.value} column")

        self._place(block, cursor, law_index, long=False)
        return self._render_normal(block, cursor)

    def _place(self, block: ClauseBlock, cursor: RenderCursor, law_index: int, long: bool) -> None:
        self.layout.placements.append(ClausePlacement(
            law_index=law_index,
            clause_id=block.clause.id,
            label=block.label,
            start=cursor,
            height=block.height,
            line_count=len(block.lines),
            long=long,
            highlighted=block.highlighted,
        ))

    def _render_normal(self, block: ClauseBlock, cursor: RenderCursor) -> RenderCursor:
        if block.style:
            self._draw_highlight(block.style, cursor, block.height)
        cursor = self._draw_label(block, cursor)

        mark = self.continuation_policy == ContinuationPolicy.ALWAYS
        cursor = self._draw_lines(block, cursor, mark_continuation=mark)
        return settle(cursor.advance(ARTICLE_SPACING))

    def _render_long(self, block: ClauseBlock, cursor: RenderCursor) -> RenderCursor:
        # Only the header band is tinted; the body may span several columns
        if block.style:
            self._draw_highlight(block.style, cursor, LONG_HEADER_BAND)
        cursor = self._draw_label(block, cursor)
        cursor = self._draw_lines(block, cursor, mark_continuation=True)
        return settle(cursor.advance(ARTICLE_SPACING))

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _draw_highlight(self, style: ColorStyle, cursor: RenderCursor, height: float) -> None:
        page = self.layout.page(cursor.page)
        x, y = cursor.x, cursor.y
        page.add(RectCommand(x, y, COLUMN_WIDTH, height, fill=style.pastel, role="clause-background"))
        page.add(RectCommand(x, y, ACCENT_BAR_WIDTH, height, fill=style.accent, role="clause-accent"))
        page.add(CircleCommand(
            x + COLUMN_WIDTH - INDICATOR_INSET, y + 4, INDICATOR_RADIUS,
            fill=style.accent, role="clause-indicator",
        ))

    def _draw_label(self, block: ClauseBlock, cursor: RenderCursor) -> RenderCursor:
        page = self.layout.page(cursor.page)
        color = block.style.accent if block.style else COLORS["primary"]
        x = cursor.x + TEXT_INSET
        size = FONTS["subheading"]

        page.add(TextCommand(x, cursor.y + 5, block.label, size, weight="bold", color=color, role="clause-label"))

        if self.config.show_importance:
            dot_x = x + self.measurer.measure_text(block.label, size, "bold") + 3
            for i in range(max(1, min(5, block.clause.importance))):
                page.add(CircleCommand(
                    dot_x + i * IMPORTANCE_DOT_STEP, cursor.y + 4, IMPORTANCE_DOT_RADIUS,
                    fill=color, role="clause-importance",
                ))

        return cursor.advance(LABEL_ADVANCE)

    def _draw_lines(self, block: ClauseBlock, cursor: RenderCursor, mark_continuation: bool) -> RenderCursor:
        for line in block.lines:
            if cursor.y + LINE_HEIGHT > CONTENT_BOTTOM:
                cursor = break_column(self.layout, cursor)
                if mark_continuation:
                    cursor = self._draw_continuation(block, cursor)

            page = self.layout.page(cursor.page)
            page.add(self._line_command(line, cursor))
            cursor = cursor.advance(LINE_HEIGHT)
        return cursor

    def _line_command(self, line: BodyLine, cursor: RenderCursor) -> TextCommand:
        x = cursor.x + TEXT_INSET
        if line.style == "annotation":
            return TextCommand(x, cursor.y, line.text, FONTS["body"], weight="italic",
                               color=COLORS["muted"], role="clause-annotation")
        if line.style == "tags":
            return TextCommand(x, cursor.y, line.text, FONTS["body"],
                               color=COLORS["muted"], role="clause-tags")
        return TextCommand(x, cursor.y, line.text, FONTS["body"], color=COLORS["text"], role="clause-line")

    def _draw_continuation(self, block: ClauseBlock, cursor: RenderCursor) -> RenderCursor:
        page = self.layout.page(cursor.page)
        page.add(TextCommand(
            cursor.x + TEXT_INSET, cursor.y,
            self.labels.get("continuation", label=block.label),
            FONTS["tiny"], weight="italic", color=COLORS["muted"], role="continuation",
        ))
        return cursor.advance(CONTINUATION_ADVANCE)
