#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Integration tests for the full layout and render pipeline.

Runs VademecumRenderer end to end against the recording canvas and
checks page order, TOC consistency, decorations and metadata.
"""

from dataclasses import replace

import pytest
from config.settings import settings
from vademecum import VademecumDocument, VademecumRenderer, render
from vademecum.layout.canvas import RecordingCanvas
from vademecum.layout.commands import PageKind
from vademecum.layout.cursor import Column, RenderCursor


class TestSingleLawScenario:
    """One law, three short clauses."""

    @pytest.fixture
    def result(self, recording_renderer, three_clause_law, render_config):
        return recording_renderer.render([three_clause_law], render_config)

    def test_page_sequence(self, result):
        """Test cover, statistics, legend, TOC, transition, then one content page."""
        kinds = [p.kind for p in result.layout.pages]
        assert kinds == [
            PageKind.COVER, PageKind.STATISTICS, PageKind.LEGEND,
            PageKind.TOC, PageKind.TRANSITION, PageKind.CONTENT,
        ]
        assert result.page_count == 6

    def test_left_column_only(self, result):
        """Test every clause lands in the left column of the content page."""
        placements = result.layout.placements
        assert [p.clause_id for p in placements] == ["c1", "c2", "c3"]
        assert all(p.start.page == 6 and p.start.column == Column.LEFT for p in placements)

    def test_heading_above_first_clause(self, result):
        """Test the law heading is drawn above the first clause."""
        heading = result.layout.page(6).find("law-heading")[0]
        assert heading.text == "CONSTITUIÇÃO FEDERAL"
        assert heading.y < result.layout.placements[0].start.y

    def test_toc_entry(self, result, recording_canvas):
        """Test one TOC entry with 3 clauses, 0 marked, pointing at page 6."""
        texts = recording_canvas.texts(4)
        assert "Constituição Federal" in texts
        assert "3 artigos • 0 marcados" in texts
        assert "Pág. 6" in texts
        assert "Total: 1 leis • 3 artigos • 0 marcados" in texts

    def test_decorations(self, result, recording_canvas):
        """Test page numbers and the running header."""
        assert not any(" / " in t for t in recording_canvas.texts(1))
        assert "6 / 6" in recording_canvas.texts(6)
        assert "2 / 6" in recording_canvas.texts(2)
        assert "VADEMECUM JURÍDICO" in recording_canvas.texts(6)
        assert "VADEMECUM JURÍDICO" not in recording_canvas.texts(5)

    def test_metadata_and_file_name(self, result, recording_canvas):
        """Test document properties and the export name."""
        assert recording_canvas.finalized is True
        assert recording_canvas.metadata["title"] == "Vademecum OAB 2024"
        assert recording_canvas.metadata["subject"] == "Vademecum para OAB XL"
        assert result.file_name == "Vademecum-OAB-2024.pdf"
        assert result.data


class TestTocModes:
    """Exact vs estimated TOC page numbers."""

    def test_exact_pages_follow_flow(self, layout_renderer, long_law_corpus, render_config):
        """Test exact mode points at the pages the laws really open on."""
        layout = layout_renderer.layout(long_law_corpus, render_config)

        assert layout.law_pages == [6, 9]
        assert [e.page for e in layout.toc_entries] == [6, 9]
        assert layout.page(4).texts("toc-page") == ["Pág. 6", "Pág. 9"]

        heading_pages = [p.number for p in layout.pages if p.find("law-heading")]
        assert heading_pages == layout.law_pages

    def test_estimate_uses_heuristic(self, long_law_corpus, render_config):
        """Test estimate mode keeps the fixed per-law multiplier."""
        renderer = VademecumRenderer(canvas_factory=RecordingCanvas, toc_mode="estimate")
        layout = renderer.layout(long_law_corpus, render_config)
        assert [e.page for e in layout.toc_entries] == [5, 7]


class TestLongClauseFlow:
    """A clause spanning several columns and pages."""

    def test_long_clause_layout(self, layout_renderer, long_law_corpus, render_config):
        """Test forced page, header band and continuation markers."""
        layout = layout_renderer.layout(long_law_corpus, render_config)

        long_placement = next(p for p in layout.placements if p.long)
        assert long_placement.clause_id == "c4"
        assert long_placement.start == RenderCursor(page=7, column=Column.LEFT, y=30.0)
        assert layout.page(7).find("clause-background")[0].height == 15.0

        assert layout.page(7).texts("continuation") == ["[...continuação Art. 4º]"]
        assert layout.page(8).texts("continuation") == ["[...continuação Art. 4º]"]
        assert layout.page(6).texts("continuation") == []

    def test_statistics_reflect_corpus(self, layout_renderer, long_law_corpus, render_config):
        """Test the statistics cards count all clauses and marks."""
        layout = layout_renderer.layout(long_law_corpus, render_config)
        assert layout.page(2).texts("stats-value") == ["6", "2"]


class TestOptionalSections:
    """Information page and empty inputs."""

    def test_information_page_inserted(self, layout_renderer, three_clause_law, render_config):
        """Test notices add an information page before the legend."""
        config = replace(render_config, notices="Conteúdo atualizado até 2024.")
        layout = layout_renderer.layout([three_clause_law], config)

        assert layout.page(3).kind == PageKind.INFORMATION
        assert layout.first_page_of_kind(PageKind.CONTENT) == 7
        assert layout.law_pages == [7]
        assert layout.page(1).texts("cover-notice-label") == ["AVISO IMPORTANTE:"]

    def test_empty_laws(self, recording_renderer, render_config, recording_canvas, caplog):
        """Test an empty corpus renders front matter only."""
        result = recording_renderer.render([], render_config)

        assert result.page_count == 5
        assert result.layout.pages_of_kind(PageKind.CONTENT) == []
        assert "Total: 0 leis • 0 artigos • 0 marcados" in recording_canvas.texts(4)
        assert "without laws" in caplog.text

    def test_english_strings(self, layout_renderer, three_clause_law, render_config):
        """Test the language switch reaches every section."""
        layout = layout_renderer.layout([three_clause_law], replace(render_config, language="en"))
        assert layout.page(4).texts("toc-title") == ["TABLE OF CONTENTS"]
        assert layout.page(5).texts("transition-title") == ["LEGISLATION"]
        assert layout.page(2).texts("stats-section") == ["DISTRIBUTION BY CATEGORY"]

    def test_module_render(self, three_clause_law, render_config):
        """Test the module-level convenience function."""
        result = render([three_clause_law], render_config, canvas_factory=RecordingCanvas)
        assert result.page_count == 6

    def test_render_document(self, layout_renderer, three_clause_law, render_config):
        """Test rendering straight from a VademecumDocument."""
        document = VademecumDocument(config=render_config, laws=[three_clause_law])
        result = layout_renderer.render_document(document)
        assert result.layout.law_pages == [6]

    def test_language_setting_default(self, layout_renderer, three_clause_law, render_config, monkeypatch):
        """Test VADEMECUM_LANGUAGE applies when the document leaves language unset."""
        monkeypatch.setattr(settings, "language", "en")

        layout = layout_renderer.layout([three_clause_law], render_config)
        assert layout.page(2).texts("stats-title") == ["HIGHLIGHT STATISTICS"]

        layout = layout_renderer.layout([three_clause_law], replace(render_config, language="pt"))
        assert layout.page(2).texts("stats-title") == ["ESTATÍSTICAS DE MARCAÇÃO"]
