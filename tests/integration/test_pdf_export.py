#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Integration tests for PDF export.

Renders with the ReportLab backend, reads the files back with pypdf and
drives the command-line entry point.
"""

import json
from io import BytesIO

import pytest
from pypdf import PdfReader

import generate_vademecum
from vademecum import ExportError, VademecumRenderer


class TestReportLabRender:
    """Real PDF output."""

    def test_pdf_pages_and_metadata(self, three_clause_law, render_config):
        """Test page count, document properties and page-number footer."""
        result = VademecumRenderer(toc_mode="exact").render([three_clause_law], render_config)
        reader = PdfReader(BytesIO(result.data))

        assert len(reader.pages) == result.page_count == 6
        assert reader.metadata.title == "Vademecum OAB 2024"
        assert reader.metadata.author == "Maria Souza"
        assert "6 / 6" in reader.pages[5].extract_text()
        assert "Pág. 6" in reader.pages[3].extract_text()

    def test_long_clause_pdf(self, long_law_corpus, render_config):
        """Test a multi-page clause renders with real text metrics."""
        result = VademecumRenderer().render(long_law_corpus, render_config)
        reader = PdfReader(BytesIO(result.data))

        assert len(reader.pages) == result.page_count
        assert result.page_count >= 8
        assert "continuação Art. 4º" in reader.pages[6].extract_text()


class TestAsyncExport:
    """File export."""

    @pytest.mark.asyncio
    async def test_export_writes_file(self, three_clause_law, render_config, temp_output_dir):
        """Test export writes the PDF under its derived name."""
        path = await VademecumRenderer().export([three_clause_law], render_config, temp_output_dir)

        assert path == temp_output_dir / "Vademecum-OAB-2024.pdf"
        assert path.read_bytes().startswith(b"%PDF")
        assert len(PdfReader(str(path)).pages) == 6

    @pytest.mark.asyncio
    async def test_export_error(self, three_clause_law, render_config, temp_output_dir):
        """Test write failures surface as ExportError."""
        blocked = temp_output_dir / "blocked"
        blocked.write_text("not a directory")

        with pytest.raises(ExportError) as exc:
            await VademecumRenderer().export([three_clause_law], render_config, blocked)
        assert isinstance(exc.value.__cause__, OSError)


class TestCommandLine:
    """generate_vademecum entry point."""

    def test_generates_pdf(self, corpus_file, temp_output_dir, capsys):
        """Test a valid corpus exits 0 and prints the written path."""
        out = temp_output_dir / "out"
        code = generate_vademecum.main([str(corpus_file), "--output-dir", str(out), "--toc-mode", "estimate"])

        assert code == 0
        assert (out / "Vademecum-OAB-2024.pdf").exists()
        assert "Vademecum-OAB-2024.pdf" in capsys.readouterr().out

    def test_title_override(self, corpus_file, temp_output_dir):
        """Test --title renames the output."""
        code = generate_vademecum.main([str(corpus_file), "--output-dir", str(temp_output_dir), "--title", "Meu Vade"])
        assert code == 0
        assert (temp_output_dir / "Meu-Vade.pdf").exists()

    def test_editor_workspace(self, temp_output_dir):
        """Test the editor format is detected."""
        workspace = {
            "titulo": "Penal",
            "leis": [{"id": 1, "nome": "Código Penal", "artigos": [
                {"id": 1, "numero": 1, "numeroTexto": "1º", "texto": "Não há crime sem lei anterior.",
                 "marcado": True, "cor": "verde", "anotacoes": "Princípio da legalidade"},
            ]}],
            "configuracoes": {"exportarAnotacoes": True},
        }
        path = temp_output_dir / "workspace.json"
        path.write_text(json.dumps(workspace), encoding="utf-8")

        assert generate_vademecum.main([str(path), "--output-dir", str(temp_output_dir)]) == 0
        assert (temp_output_dir / "Penal.pdf").exists()

    def test_invalid_document(self, temp_output_dir, capsys):
        """Test an empty corpus exits 1 with the validation errors."""
        path = temp_output_dir / "empty.json"
        path.write_text(json.dumps({"config": {"title": "Vazio"}, "laws": []}), encoding="utf-8")

        assert generate_vademecum.main([str(path), "--output-dir", str(temp_output_dir)]) == 1
        assert "laws cannot be empty" in capsys.readouterr().out

    def test_missing_file(self, temp_output_dir):
        """Test a missing input exits 1."""
        assert generate_vademecum.main([str(temp_output_dir / "nope.json")]) == 1

    def test_show_config(self, corpus_file, temp_output_dir, capsys):
        """Test --show-config prints the active settings."""
        assert generate_vademecum.main([str(corpus_file), "--output-dir", str(temp_output_dir), "--show-config"]) == 0
        assert "TOC Mode:" in capsys.readouterr().out
