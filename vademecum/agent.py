#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Vademecum Renderer

Main orchestrator of the layout engine.
Takes laws plus a render configuration and produces a finished PDF.

Pipeline (strictly sequential, each step needs the page count of the
previous one):
1. Front matter: cover, statistics, information (optional), legend
2. Table of contents pages (reserved)
3. Transition page
4. Content flow
5. Table of contents entries
6. Render pass: replay, page decorations, metadata, finalize

Version: 1.0.0
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union
import asyncio
import logging

from config.constants import APP_VERSION
from config.settings import settings
from vademecum.contracts import ExportError, Law, RenderConfig, VademecumDocument

from .layout.canvas import Canvas, ReportLabCanvas
from .layout.commands import DocumentLayout
from .layout.decorator import PageDecorator
from .layout.executor import FlowEngine, ContinuationPolicy
from .layout.labels import Labels
from .layout.metadata import MetadataWriter, export_file_name
from .layout.sections import FrontMatterGenerator, TocBuilder, TocMode, layout_transition_page

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Finished document"""
    data: bytes
    file_name: str
    page_count: int
    layout: DocumentLayout


class VademecumRenderer:
    """
    Vademecum layout engine.

    Usage:
        renderer = VademecumRenderer()
        result = renderer.render(laws, config)

        # Or write straight to disk:
        path = await renderer.export(laws, config, "data/output")

        # Layout only (no drawing backend needed beyond text metrics):
        layout = renderer.layout(laws, config)
    """

    def __init__(
        self,
        canvas_factory: Callable[[], Canvas] = ReportLabCanvas,
        toc_mode: Optional[Union[TocMode, str]] = None,
        continuation_policy: Optional[Union[ContinuationPolicy, str]] = None,
        app_name: Optional[str] = None,
    ):
        """
        Initialize renderer.

        Args:
            canvas_factory: Builds a fresh canvas for every render
            toc_mode: exact | estimate (default from settings)
            continuation_policy: long_only | always (default from settings)
            app_name: Name printed on cover, legend and document properties
        """
        self.canvas_factory = canvas_factory
        self.toc_mode = TocMode(toc_mode or settings.toc_mode)
        self.continuation_policy = ContinuationPolicy(continuation_policy or settings.continuation_markers)
        self.app_name = app_name or settings.app_name

        logger.info(
            f"VademecumRenderer initialized: toc={self.toc_mode.value}, "
            f"continuations={self.continuation_policy.value}"
        )

    def labels_for(self, config: RenderConfig) -> Labels:
        """Printed strings in the document's language, else the configured default"""
        return Labels(config.language or settings.language)

    def layout(self, laws: List[Law], config: RenderConfig, measurer: Optional[Canvas] = None) -> DocumentLayout:
        """
        Layout pass: position every draw command without drawing.

        Args:
            laws: Laws in document order
            config: Render configuration
            measurer: Canvas used for text metrics (a fresh one by default)

        Returns:
            DocumentLayout with pages, clause placements and law opening pages
        """
        measurer = measurer or self.canvas_factory()
        labels = self.labels_for(config)
        layout = DocumentLayout()

        if not laws:
            logger.warning("Rendering a document without laws; only front matter will be produced")

        # 1. Front matter
        front = FrontMatterGenerator(layout, measurer, labels, self.app_name, APP_VERSION)
        front.cover(config)
        front.statistics(laws, config.color_legend)
        if config.notices.strip() or config.comments.strip():
            front.information(config)
        front.legend(config.color_legend)
        logger.info(f"Step 1: Front matter done ({layout.page_count} pages)")

        # 2. Table of contents pages
        toc = TocBuilder(measurer, labels, self.toc_mode)
        toc_pages = toc.reserve(layout, laws)

        # 3. Transition page
        layout_transition_page(layout, measurer, labels, config)

        # 4. Content flow
        flow = FlowEngine(layout, measurer, labels, config, self.continuation_policy)
        flow.run(laws)
        logger.info(f"Step 2: Content flow done ({layout.page_count} pages total)")

        # 5. Table of contents entries
        toc.fill(layout, laws, toc_pages)

        return layout

    def render(self, laws: List[Law], config: RenderConfig) -> RenderResult:
        """
        Lay out and draw the document.

        Returns:
            RenderResult with the document bytes and export file name
        """
        canvas = self.canvas_factory()
        labels = self.labels_for(config)

        layout = self.layout(laws, config, measurer=canvas)
        layout.replay(canvas)

        decorator = PageDecorator(canvas, labels)
        decorator.apply(canvas, decorator.decorate(layout))

        MetadataWriter(labels, self.app_name).apply(canvas, config)
        data = canvas.finalize()

        logger.info(f"Step 3: Rendered {layout.page_count} pages ({len(data)} bytes)")
        return RenderResult(
            data=data,
            file_name=export_file_name(config.title),
            page_count=layout.page_count,
            layout=layout,
        )

    def render_document(self, document: VademecumDocument) -> RenderResult:
        return self.render(document.laws, document.config)

    async def export(
        self,
        laws: List[Law],
        config: RenderConfig,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Render and write the document.

        Raises:
            ExportError: The file could not be written
        """
        result = self.render(laws, config)
        directory = Path(output_dir) if output_dir is not None else settings.output_dir
        path = directory / result.file_name

        try:
            directory.mkdir(parents=True, exist_ok=True)
            await asyncio.to_thread(path.write_bytes, result.data)
        except OSError as e:
            raise ExportError(f"Could not write {path}: {e}") from e

        logger.info(f"Exported: {path}")
        return path


def render(laws: List[Law], config: RenderConfig, **kwargs) -> RenderResult:
    """Render with a one-off VademecumRenderer"""
    return VademecumRenderer(**kwargs).render(laws, config)
