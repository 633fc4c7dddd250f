"""
Unit Tests for the Document Model

Tests the laws/clauses contract, the color palette and the editor
workspace import before they reach the layout engine.
"""

import json
from datetime import datetime

import pytest
from vademecum.contracts import (
    Clause,
    Law,
    ColorLegend,
    RenderConfig,
    HighlightColor,
    VademecumDocument,
    DocumentValidator,
    ContractValidationError,
    DEFAULT_LEGEND,
    PALETTE_ORDER,
    summarize_document,
)


class TestHighlightColor:
    """Test palette key parsing."""

    def test_parse_known_keys(self):
        """Test every palette key parses to its member."""
        for color in PALETTE_ORDER:
            assert HighlightColor.parse(color.value) is color

    def test_parse_is_tolerant(self):
        """Test case and surrounding whitespace are ignored."""
        assert HighlightColor.parse("  Verde ") is HighlightColor.VERDE

    def test_parse_unknown_returns_none(self):
        """Test unknown or empty keys degrade to None."""
        assert HighlightColor.parse("rosa") is None
        assert HighlightColor.parse("") is None
        assert HighlightColor.parse(None) is None

    def test_palette_has_six_colors(self):
        """Test the fixed palette order."""
        assert len(PALETTE_ORDER) == 6
        assert PALETTE_ORDER[0] is HighlightColor.VERDE
        assert PALETTE_ORDER[-1] is HighlightColor.CINZA


class TestClause:
    """Test Clause data structure."""

    def test_default_label_uses_number_text(self):
        """Test the printed numeral drives the label."""
        clause = Clause(id="1", number=5, text="x", number_text="5º")
        assert clause.display_label == "Art. 5º"

    def test_label_falls_back_to_number(self):
        """Test integral order keys print without decimals."""
        assert Clause(id="1", number=12, text="x").display_label == "Art. 12"

    def test_explicit_label_wins(self):
        """Test an explicit label overrides the default."""
        clause = Clause(id="1", number=1, text="x", label="Súmula 1")
        assert clause.display_label == "Súmula 1"

    def test_highlight_requires_flag(self):
        """Test a color without the highlight flag is not drawn."""
        clause = Clause(id="1", number=1, text="x", color="verde")
        assert clause.highlight is None

    def test_highlight_unknown_color(self):
        """Test an unknown color on a marked clause renders unhighlighted."""
        clause = Clause(id="1", number=1, text="x", highlighted=True, color="rosa")
        assert clause.highlight is None

    def test_roundtrip_dict(self):
        """Test to_dict/from_dict keeps every field."""
        clause = Clause(
            id="7", number=7, text="Texto", number_text="7º", highlighted=True,
            color="azul", annotation="nota", tags=["prova", "prova", "stf"], importance=5,
        )
        restored = Clause.from_dict(clause.to_dict())
        assert restored == Clause.from_dict(restored.to_dict())
        assert restored.tags == ["prova", "stf"]
        assert restored.highlight is HighlightColor.AZUL


class TestLaw:
    """Test Law data structure."""

    def test_ordered_clauses_sorted_by_number(self):
        """Test clauses render in ascending order key regardless of insertion."""
        law = Law(id="l", name="Lei", clauses=[
            Clause(id="c", number=3, text="c"),
            Clause(id="a", number=1, text="a"),
            Clause(id="b", number=2, text="b"),
        ])
        assert [c.id for c in law.ordered_clauses()] == ["a", "b", "c"]

    def test_ordered_clauses_stable_for_equal_keys(self):
        """Test equal order keys keep insertion order."""
        law = Law(id="l", name="Lei", clauses=[
            Clause(id="x", number=1, text="x"),
            Clause(id="y", number=1, text="y"),
        ])
        assert [c.id for c in law.ordered_clauses()] == ["x", "y"]

    def test_counts(self, marked_laws):
        """Test clause and highlighted counts."""
        cdc = marked_laws[0]
        assert cdc.clause_count == 4
        assert cdc.highlighted_count == 3


class TestColorLegend:
    """Test ColorLegend defaults and overrides."""

    def test_defaults(self):
        """Test every palette key has a default description."""
        legend = ColorLegend()
        for color in PALETTE_ORDER:
            assert legend.description(color) == DEFAULT_LEGEND[color]

    def test_from_dict_overrides_and_ignores_unknown(self):
        """Test custom descriptions replace defaults; unknown keys are dropped."""
        legend = ColorLegend.from_dict({"verde": "Cai sempre", "rosa": "?"})
        assert legend.description(HighlightColor.VERDE) == "Cai sempre"
        assert legend.description(HighlightColor.AZUL) == DEFAULT_LEGEND[HighlightColor.AZUL]
        assert set(legend.to_dict()) == {c.value for c in PALETTE_ORDER}


class TestRenderConfig:
    """Test RenderConfig serialization."""

    def test_roundtrip(self):
        """Test to_dict/from_dict keeps the timestamp and switches."""
        config = RenderConfig(
            title="Vademecum", contest="OAB", year="2024",
            generated_at=datetime(2024, 1, 2, 3, 4, 5), export_tags=True,
        )
        restored = RenderConfig.from_dict(config.to_dict())
        assert restored.generated_at == datetime(2024, 1, 2, 3, 4, 5)
        assert restored.export_tags is True
        assert restored.export_annotations is False
        assert restored.contest == "OAB"

    def test_timestamp_defaults_to_now(self):
        """Test a missing timestamp resolves at render time."""
        before = datetime.now()
        assert RenderConfig(title="x").timestamp() >= before


class TestVademecumDocument:
    """Test the document contract."""

    def test_valid_document(self, three_clause_law, render_config):
        """Test a complete document validates."""
        document = VademecumDocument(config=render_config, laws=[three_clause_law])
        assert document.validate() == []
        assert document.total_clauses == 3
        assert document.total_highlighted == 0

    def test_validation_errors(self):
        """Test missing title, empty laws and bad importance are reported."""
        document = VademecumDocument(config=RenderConfig(title=" "), laws=[])
        errors = document.validate()
        assert "config.title is required" in errors
        assert "laws cannot be empty" in errors

        bad = VademecumDocument(
            config=RenderConfig(title="x"),
            laws=[Law(id="l", name="Lei", clauses=[
                Clause(id="a", number=1, text="a", importance=9),
                Clause(id="a", number=2, text="b"),
            ])],
        )
        errors = bad.validate()
        assert any("importance" in e for e in errors)
        assert any("duplicate" in e for e in errors)

    def test_validator_raises(self):
        """Test validate_or_raise carries the error list."""
        document = VademecumDocument(config=RenderConfig(title=""), laws=[])
        with pytest.raises(ContractValidationError) as exc:
            DocumentValidator().validate_or_raise(document)
        assert "laws cannot be empty" in exc.value.errors

    def test_json_roundtrip_and_checksum(self, marked_laws, render_config):
        """Test JSON serialization and checksum verification."""
        document = VademecumDocument(config=render_config, laws=marked_laws)
        restored = VademecumDocument.from_json(document.to_json())

        assert [law.name for law in restored.laws] == [law.name for law in marked_laws]
        assert restored.config.generated_at == render_config.generated_at
        assert restored.provenance.checksum == document.checksum()
        assert not restored.content_changed()

    def test_content_edited_after_save(self, marked_laws, render_config):
        """Test a hand edit after saving is reported as a warning, not an error."""
        saved = json.loads(VademecumDocument(config=render_config, laws=marked_laws).to_json())
        saved["laws"][0]["clauses"][0]["text"] = "Texto alterado à mão."
        document = VademecumDocument.from_dict(saved)

        assert document.content_changed()
        assert document.validate() == []
        warnings = DocumentValidator().warnings(document)
        assert len(warnings) == 2
        assert "Content changed since it was saved by vademecum_editor" in warnings[1]

    def test_unsaved_document_has_no_checksum(self, three_clause_law, render_config):
        """Test documents built in memory never report drift."""
        document = VademecumDocument(config=render_config, laws=[three_clause_law])
        assert document.provenance.checksum == ""
        assert not document.content_changed()
        assert DocumentValidator().warnings(document) == []

    def test_unknown_colors_listed(self, marked_laws, render_config):
        """Test unknown colors are reported for logging."""
        document = VademecumDocument(config=render_config, laws=marked_laws)
        warnings = DocumentValidator().unknown_colors(document)
        assert len(warnings) == 1
        assert "rosa" in warnings[0]

    def test_summary(self, marked_laws, render_config):
        """Test the logging summary."""
        summary = summarize_document(VademecumDocument(config=render_config, laws=marked_laws))
        assert summary["laws"] == 2
        assert summary["clauses"] == 6
        assert summary["highlighted"] == 5
        assert summary["valid"] is True


class TestEditorExport:
    """Test import of the editor's saved workspace."""

    @pytest.fixture
    def workspace(self):
        return {
            "leis": [
                {
                    "id": 1,
                    "nome": "Código Penal",
                    "categoria": "Penal",
                    "artigos": [
                        {"id": 11, "numero": 2, "numeroTexto": "2º", "texto": "Art. 2º Ninguém pode ser punido.",
                         "marcado": True, "cor": "laranja", "anotacoes": "Cai muito",
                         "tags": ["penal"], "importancia": 5, "dataUltimaEdicao": "2024-01-01"},
                        {"id": 10, "numero": 1, "numeroTexto": "1º", "texto": "Não há crime sem lei.",
                         "marcado": False, "cor": None, "tags": []},
                    ],
                }
            ],
            "legendaCores": {"laranja": "Doutrina"},
            "configuracoes": {"exportarAnotacoes": True, "exportarTags": False, "mostrarImportancia": True},
        }

    def test_maps_portuguese_keys(self, workspace):
        """Test laws and clauses are mapped from the editor format."""
        document = VademecumDocument.from_editor_export(workspace, RenderConfig(title="Penal"))
        law = document.laws[0]

        assert law.name == "Código Penal"
        assert law.category == "Penal"
        assert [c.id for c in law.ordered_clauses()] == ["10", "11"]

        clause = law.clauses[0]
        assert clause.highlight is HighlightColor.LARANJA
        assert clause.annotation == "Cai muito"
        assert clause.importance == 5

    def test_switches_and_legend(self, workspace):
        """Test export switches and the color legend override the config."""
        document = VademecumDocument.from_editor_export(workspace, RenderConfig(title="Penal"))
        assert document.config.export_annotations is True
        assert document.config.export_tags is False
        assert document.config.show_importance is True
        assert document.config.color_legend.description(HighlightColor.LARANJA) == "Doutrina"
        assert document.provenance.source == "vademecum_editor_export"

    def test_default_title(self, workspace):
        """Test a workspace without config still yields a titled document."""
        document = VademecumDocument.from_editor_export(json.loads(json.dumps(workspace)))
        assert document.config.title
