#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Flow Engine

Walks the laws in order and flows their clauses through the two-column
content pages:
1. Open the first content page
2. For each law: heading, clauses in ascending order, law spacing
3. Record the page each law opens on (used by the TOC)

Version: 1.0.0
"""

from typing import List, Optional
import logging

from vademecum.contracts import Law, RenderConfig
from ..canvas.base import Canvas
from ..commands import DocumentLayout
from ..constants import LAW_SPACING
from ..cursor import RenderCursor
from ..labels import Labels
from .article import ArticleRenderer, ContinuationPolicy
from .heading import layout_law_heading
from .transitions import open_content_page, settle

logger = logging.getLogger(__name__)


class FlowEngine:
    """
    Lays out the content section into a DocumentLayout.

    Usage:
        engine = FlowEngine(layout, measurer, labels, config)
        engine.run(laws)
        layout.law_pages  # opening page of each law
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
        self.articles = ArticleRenderer(layout, measurer, labels, config, continuation_policy)

    def run(self, laws: List[Law]) -> Optional[RenderCursor]:
        """
        Flow every law.

        Returns:
            Final cursor, or None when there was nothing to lay out
        """
        if not laws:
            logger.warning("No laws to lay out; content section is empty")
            return None

        first_page = self.layout.page_count + 1
        cursor = open_content_page(self.layout)

        for index, law in enumerate(laws):
            cursor = layout_law_heading(self.layout, self.measurer, law, cursor)
            self.layout.law_pages.append(cursor.page)

            for clause in law.ordered_clauses():
                cursor = self.articles.render(clause, cursor, law_index=index)

            cursor = settle(cursor.advance(LAW_SPACING))
            logger.debug(f"Law {index + 1}/{len(laws)} '{law.name}': {law.clause_count} clauses")

        logger.info(
            f"Content flow: {len(laws)} laws, {len(self.layout.placements)} clauses, "
            f"pages {first_page}-{self.layout.page_count}"
        )
        return cursor
