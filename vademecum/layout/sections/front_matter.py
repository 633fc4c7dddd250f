#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Front Matter Generator

Pages that precede the table of contents:
- Cover: title block, edition lines, optional notices banner
- Statistics: totals and per-color distribution bars
- Information: notices, comments and technical details (optional)
- Legend: color meanings and reading instructions

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import List
import logging

from vademecum.contracts import Law, RenderConfig, ColorLegend, HighlightColor, PALETTE_ORDER
from ..canvas.base import Canvas
from ..commands import (
    DocumentLayout,
    PageKind,
    PageLayout,
    RectCommand,
    RoundedRectCommand,
    CircleCommand,
    TextCommand,
    centered_text,
)
from ..constants import (
    COLORS,
    FONTS,
    PALETTE_STYLES,
    PAGE_WIDTH,
    PAGE_HEIGHT,
    MARGIN_LEFT,
    MARGIN_RIGHT,
    MARGIN_BOTTOM,
    SECTION_BAND_HEIGHT,
    SECTION_CONTINUED_Y,
)
from ..labels import Labels

logger = logging.getLogger(__name__)

# Statistics bars
BAR_X = 25.0
BAR_MAX_WIDTH = 100.0
BAR_MIN_WIDTH = 8.0
BAR_HEIGHT = 12.0
BAR_STEP = 16.0
BAR_LABEL_INSIDE_WIDTH = 50.0

# Information page
INFO_WRAP_WIDTH = 180.0
INFO_FONT_SIZE = 9
INFO_LINE_STEP = 4.0
INFO_PAGE_LIMIT = PAGE_HEIGHT - 40
INFO_BOX_HEIGHT = 50.0
INFO_BOX_MIN_Y = PAGE_HEIGHT - 80


@dataclass
class ColorStatistic:
    """Clause count for one palette color"""
    color: HighlightColor
    description: str
    quantity: int
    percentage: float


@dataclass
class DocumentStatistics:
    total_clauses: int
    highlighted: int
    by_color: List[ColorStatistic] = field(default_factory=list)

    @property
    def visible_colors(self) -> List[ColorStatistic]:
        """Colors that get a bar"""
        return [s for s in self.by_color if s.quantity > 0]


def compute_statistics(laws: List[Law], legend: ColorLegend) -> DocumentStatistics:
    """
    Count clauses per palette color.

    Percentages are relative to the marked clauses, rounded to one
    decimal. Unknown colors count as marked but get no bar.
    """
    clauses = [c for law in laws for c in law.clauses]
    total = len(clauses)
    highlighted = sum(1 for c in clauses if c.highlighted)

    by_color = []
    for color in PALETTE_ORDER:
        quantity = sum(1 for c in clauses if c.highlight == color)
        percentage = round(quantity / highlighted * 100, 1) if highlighted else 0.0
        by_color.append(ColorStatistic(color, legend.description(color), quantity, percentage))

    return DocumentStatistics(total_clauses=total, highlighted=highlighted, by_color=by_color)


class FrontMatterGenerator:
    """
    Appends front matter pages to a DocumentLayout.

    Usage:
        front = FrontMatterGenerator(layout, measurer, labels, app_name, version)
        front.cover(config)
        front.statistics(laws, config.color_legend)
    """

    def __init__(
        self,
        layout: DocumentLayout,
        measurer: Canvas,
        labels: Labels,
        app_name: str,
        version: str,
    ):
        self.layout = layout
        self.measurer = measurer
        self.labels = labels
        self.app_name = app_name
        self.version = version

    def _centered(self, page: PageLayout, text: str, y: float, size: float, **kwargs) -> TextCommand:
        return centered_text(self.measurer, page, text, y, size, **kwargs)

    def _title_band(self, page: PageLayout, title: str, fill=None) -> None:
        page.add(RectCommand(
            0, 0, PAGE_WIDTH, SECTION_BAND_HEIGHT,
            fill=fill or COLORS["primary"], role="section-band",
        ))
        self._centered(page, title, 25, FONTS["title"], weight="bold", color=COLORS["white"], role="section-title")

    # ------------------------------------------------------------------
    # Cover
    # ------------------------------------------------------------------

    def cover(self, config: RenderConfig) -> PageLayout:
        page = self.layout.new_page(PageKind.COVER)
        labels = self.labels

        page.add(RectCommand(0, 0, PAGE_WIDTH, 3, fill=COLORS["primary"], role="cover-band"))
        self._centered(page, config.title.upper(), 70, 22, weight="bold", color=COLORS["text"], role="cover-title")
        page.add(RectCommand(65, 80, 80, 1, fill=COLORS["primary"], role="cover-rule"))

        if config.contest:
            self._centered(page, config.contest, 100, 16, color=COLORS["primary"], role="cover-contest")
        self._centered(page, labels.get("cover_subtitle"), 120, 12, color=COLORS["muted"], role="cover-subtitle")

        lines = []
        if config.author:
            lines.append(labels.get("author", author=config.author))
        if config.publisher:
            lines.append(config.publisher)
        edition = " - ".join(part for part in (config.edition, config.year) if part)
        if edition:
            lines.append(edition)
        if config.code:
            lines.append(labels.get("code", code=config.code))

        y = 140.0
        for line in lines:
            self._centered(page, line, y, 11, color=COLORS["text"], role="cover-detail")
            y += 15

        moment = config.timestamp()
        self._centered(
            page, labels.get("generated_on", date=labels.long_date(moment)), PAGE_HEIGHT - 60,
            FONTS["subheading"], color=COLORS["muted"], role="cover-date",
        )

        if config.notices.strip():
            self._notice_banner(page, config.notices)

        page.add(RectCommand(0, PAGE_HEIGHT - 25, PAGE_WIDTH, 25, fill=COLORS["light"], role="cover-footer"))
        page.add(TextCommand(
            MARGIN_LEFT, PAGE_HEIGHT - 10, self.app_name, FONTS["small"],
            weight="bold", color=COLORS["primary"], role="cover-footer-text",
        ))
        version = f"v{self.version}"
        page.add(TextCommand(
            PAGE_WIDTH - MARGIN_RIGHT - self.measurer.measure_text(version, FONTS["small"]),
            PAGE_HEIGHT - 10, version, FONTS["small"], color=COLORS["muted"], role="cover-footer-text",
        ))
        page.add(RectCommand(0, PAGE_HEIGHT - 25, PAGE_WIDTH, 0.5, fill=COLORS["primary"], role="cover-footer-rule"))

        logger.debug(f"Cover page for '{config.title}'")
        return page

    def _notice_banner(self, page: PageLayout, notices: str) -> None:
        top = PAGE_HEIGHT - 50
        page.add(RectCommand(
            MARGIN_LEFT, top, PAGE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT, 15,
            fill=COLORS["notice_fill"], role="cover-notice",
        ))
        page.add(TextCommand(
            MARGIN_LEFT + 2, PAGE_HEIGHT - 42, self.labels.get("notice_banner"), FONTS["body"],
            weight="bold", color=COLORS["notice_text"], role="cover-notice-label",
        ))
        label_width = self.measurer.measure_text(self.labels.get("notice_banner"), FONTS["body"], "bold")
        x = MARGIN_LEFT + 4 + label_width
        width = PAGE_WIDTH - MARGIN_RIGHT - 2 - x
        lines = self.measurer.wrap_text(notices, width, FONTS["body"])[:2]
        for i, line in enumerate(lines):
            page.add(TextCommand(
                x, PAGE_HEIGHT - 42 + i * 4, line, FONTS["body"],
                color=COLORS["notice_text"], role="cover-notice-text",
            ))

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def statistics(self, laws: List[Law], legend: ColorLegend) -> PageLayout:
        page = self.layout.new_page(PageKind.STATISTICS)
        stats = compute_statistics(laws, legend)
        labels = self.labels

        self._centered(page, labels.get("stats_title"), 40, FONTS["title"],
                       weight="bold", color=COLORS["primary"], role="stats-title")
        page.add(RectCommand(55, 45, 100, 0.5, fill=COLORS["primary"], role="stats-rule"))

        self._stat_card(page, 30, str(stats.total_clauses), labels.get("stats_total"),
                        COLORS["light"], COLORS["primary"], COLORS["muted"])
        self._stat_card(page, 125, str(stats.highlighted), labels.get("stats_marked"),
                        COLORS["primary"], COLORS["white"], COLORS["white"])

        page.add(TextCommand(30, 140, labels.get("stats_distribution"), FONTS["subheading"],
                             weight="bold", color=COLORS["text"], role="stats-section"))

        y = 160.0
        for stat in stats.visible_colors:
            self._color_bar(page, stat, stats.highlighted, y)
            y += BAR_STEP

        logger.info(
            f"Statistics: {stats.total_clauses} clauses, {stats.highlighted} marked, "
            f"{len(stats.visible_colors)} colors in use"
        )
        return page

    def _stat_card(self, page, x, value, caption, fill, value_color, caption_color) -> None:
        page.add(RoundedRectCommand(x, 70, 70, 50, 5, fill=fill, role="stats-card"))
        width = self.measurer.measure_text(value, 28, "bold")
        page.add(TextCommand(x + (70 - width) / 2, 95, value, 28, weight="bold",
                             color=value_color, role="stats-value"))
        width = self.measurer.measure_text(caption, FONTS["subheading"])
        page.add(TextCommand(x + (70 - width) / 2, 110, caption, FONTS["subheading"],
                             color=caption_color, role="stats-caption"))

    def _color_bar(self, page: PageLayout, stat: ColorStatistic, highlighted: int, y: float) -> None:
        style = PALETTE_STYLES[stat.color]
        share = stat.quantity / highlighted if highlighted else 0.0
        bar_width = max(BAR_MIN_WIDTH, share * BAR_MAX_WIDTH)

        page.add(CircleCommand(20, y + 8, 3, fill=style.accent, role="stats-dot"))
        page.add(RectCommand(BAR_X, y, BAR_MAX_WIDTH, BAR_HEIGHT, fill=COLORS["bar_track"], role="stats-track"))
        page.add(RectCommand(BAR_X, y, bar_width, BAR_HEIGHT, fill=style.accent, role="stats-bar"))
        page.add(RectCommand(BAR_X, y, BAR_MAX_WIDTH, BAR_HEIGHT, stroke=COLORS["bar_border"],
                             line_width=0.5, role="stats-border"))

        amount = f"{stat.quantity} ({stat.percentage:.1f}%)"
        if bar_width > BAR_LABEL_INSIDE_WIDTH:
            page.add(TextCommand(BAR_X + 2, y + 5, stat.description, FONTS["small"], weight="bold",
                                 color=COLORS["white"], role="stats-label"))
            page.add(TextCommand(BAR_X + 2, y + 10, amount, FONTS["tiny"],
                                 color=COLORS["white"], role="stats-amount"))
        else:
            page.add(TextCommand(BAR_X + 2, y + 5, stat.description, FONTS["small"], weight="bold",
                                 color=COLORS["text"], role="stats-label"))
            page.add(TextCommand(BAR_X + BAR_MAX_WIDTH + 10, y + 8, amount, FONTS["small"],
                                 color=COLORS["text"], role="stats-amount"))

    # ------------------------------------------------------------------
    # Information
    # ------------------------------------------------------------------

    def information(self, config: RenderConfig) -> List[PageLayout]:
        """Notices, comments and technical details; may span pages"""
        pages = [self.layout.new_page(PageKind.INFORMATION)]
        labels = self.labels
        self._title_band(pages[0], labels.get("info_title"))

        y = 55.0
        sections = [
            (labels.get("info_notices"), config.notices, COLORS["alert_fill"], COLORS["alert_text"]),
            (labels.get("info_comments"), config.comments, COLORS["info_fill"], COLORS["primary"]),
        ]
        for title, text, fill, color in sections:
            if not text.strip():
                continue
            if y + 20 > INFO_PAGE_LIMIT:
                pages.append(self.layout.new_page(PageKind.INFORMATION))
                y = SECTION_CONTINUED_Y
            pages[-1].add(RoundedRectCommand(
                MARGIN_LEFT, y - 7, PAGE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT, 12, 2,
                fill=fill, role="info-heading-box",
            ))
            pages[-1].add(TextCommand(15, y, title, FONTS["heading"], weight="bold",
                                      color=color, role="info-heading"))
            y += 15

            for line in self.measurer.wrap_text(text, INFO_WRAP_WIDTH, INFO_FONT_SIZE):
                if y > INFO_PAGE_LIMIT:
                    pages.append(self.layout.new_page(PageKind.INFORMATION))
                    y = SECTION_CONTINUED_Y
                pages[-1].add(TextCommand(15, y, line, INFO_FONT_SIZE, color=COLORS["text"], role="info-line"))
                y += INFO_LINE_STEP
            y += 10

        box_y = max(y + 30, INFO_BOX_MIN_Y)
        if box_y + INFO_BOX_HEIGHT > PAGE_HEIGHT - MARGIN_BOTTOM:
            pages.append(self.layout.new_page(PageKind.INFORMATION))
            box_y = SECTION_CONTINUED_Y
        self._technical_box(pages[-1], config, box_y)

        logger.debug(f"Information section: {len(pages)} page(s)")
        return pages

    def _technical_box(self, page: PageLayout, config: RenderConfig, y: float) -> None:
        labels = self.labels
        missing = labels.get("not_specified")
        page.add(RoundedRectCommand(
            MARGIN_LEFT, y, PAGE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT, INFO_BOX_HEIGHT, 3,
            fill=COLORS["light"], role="info-box",
        ))
        page.add(TextCommand(15, y + 8, labels.get("info_technical"), FONTS["subheading"],
                             weight="bold", color=COLORS["primary"], role="info-box-title"))

        left = [
            labels.get("info_title_line", value=config.title),
            labels.get("info_author_line", value=config.author or missing),
            labels.get("info_publisher_line", value=config.publisher or missing),
            labels.get("info_edition_line", value=config.edition or missing),
        ]
        right = [
            labels.get("info_year_line", value=config.year or missing),
            labels.get("info_code_line", value=config.code or missing),
            labels.get("info_system_line", value=f"{self.app_name} v{self.version}"),
            labels.get("info_generated_line", value=labels.short_timestamp(config.timestamp())),
        ]
        for column_x, lines in ((15, left), (110, right)):
            line_y = y + 16
            for line in lines:
                page.add(TextCommand(column_x, line_y, line, FONTS["small"],
                                     color=COLORS["text"], role="info-box-line"))
                line_y += 7

    # ------------------------------------------------------------------
    # Legend
    # ------------------------------------------------------------------

    def legend(self, legend: ColorLegend) -> PageLayout:
        page = self.layout.new_page(PageKind.LEGEND)
        labels = self.labels
        self._title_band(page, labels.get("legend_title"))

        y = 60.0
        for color in PALETTE_ORDER:
            style = PALETTE_STYLES[color]
            page.add(RoundedRectCommand(
                MARGIN_LEFT, y - 8, PAGE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT, 20, 3,
                fill=COLORS["light"], role="legend-row",
            ))
            page.add(CircleCommand(25, y, 5, fill=style.accent, role="legend-dot"))
            page.add(TextCommand(40, y - 2, color.value.upper(), 9, weight="bold",
                                 color=COLORS["text"], role="legend-name"))
            page.add(TextCommand(40, y + 6, legend.description(color), FONTS["small"],
                                 color=COLORS["muted"], role="legend-description"))
            y += 20

        y += 15
        page.add(RectCommand(0, y, PAGE_WIDTH, 20, fill=COLORS["secondary"], role="legend-howto-band"))
        self._centered(page, labels.get("legend_howto"), y + 13, FONTS["heading"],
                       weight="bold", color=COLORS["white"], role="legend-howto")

        line_y = y + 30
        for key in ("instruction_1", "instruction_2", "instruction_3", "instruction_4", "instruction_5"):
            page.add(TextCommand(20, line_y, labels.get(key), 9, color=COLORS["text"], role="legend-instruction"))
            line_y += 10

        footer_y = PAGE_HEIGHT - 40
        page.add(RoundedRectCommand(
            MARGIN_LEFT, footer_y, PAGE_WIDTH - MARGIN_LEFT - MARGIN_RIGHT, 15, 3,
            fill=COLORS["light"], role="legend-footer-box",
        ))
        self._centered(
            page, labels.get("legend_footer", app=self.app_name, version=self.version), footer_y + 9,
            FONTS["small"], color=COLORS["muted"], role="legend-footer",
        )
        return page
