#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Vademecum Document Contract

Defines the validated input handed to the layout engine:
ordered bodies of law, their clauses and the render configuration.
Pure data; the engine never mutates it during a render pass.

Version: 1.0.0
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import List, Dict, Optional, Any
import json

from .base import Provenance, content_checksum


class HighlightColor(str, Enum):
    """Fixed highlight palette"""
    VERDE = "verde"
    AZUL = "azul"
    AMARELO = "amarelo"
    LARANJA = "laranja"
    ROXO = "roxo"
    CINZA = "cinza"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['HighlightColor']:
        """Return the palette member for value, or None when unknown"""
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


# Palette order used by the statistics and legend pages
PALETTE_ORDER: List[HighlightColor] = [
    HighlightColor.VERDE,
    HighlightColor.AZUL,
    HighlightColor.AMARELO,
    HighlightColor.LARANJA,
    HighlightColor.ROXO,
    HighlightColor.CINZA,
]

DEFAULT_LEGEND: Dict[HighlightColor, str] = {
    HighlightColor.VERDE: "Artigos mais cobrados",
    HighlightColor.AZUL: "Jurisprudência relevante",
    HighlightColor.AMARELO: "Alterações recentes",
    HighlightColor.LARANJA: "Doutrina importante",
    HighlightColor.ROXO: "Súmulas vinculantes",
    HighlightColor.CINZA: "Observações gerais",
}


@dataclass
class Clause:
    """A single numbered unit of legal text"""
    id: str
    number: float  # Order key
    text: str
    number_text: str = ""  # Printed numeral, e.g. "5º" or "1-A"
    label: Optional[str] = None
    highlighted: bool = False
    color: Optional[str] = None  # Raw palette key, may be unknown
    annotation: str = ""
    tags: List[str] = field(default_factory=list)
    importance: int = 3  # 1 = low, 5 = very high
    last_edited: str = ""

    @property
    def display_label(self) -> str:
        if self.label:
            return self.label
        numeral = self.number_text or _format_number(self.number)
        return f"Art. {numeral}"

    @property
    def highlight(self) -> Optional[HighlightColor]:
        """Palette color to render, None when unmarked or the key is unknown"""
        if not self.highlighted:
            return None
        return HighlightColor.parse(self.color)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "number": self.number,
            "number_text": self.number_text,
            "label": self.label,
            "text": self.text,
            "highlighted": self.highlighted,
            "color": self.color,
            "annotation": self.annotation,
            "tags": list(self.tags),
            "importance": self.importance,
            "last_edited": self.last_edited,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Clause':
        return cls(
            id=str(data["id"]),
            number=data.get("number", 0),
            number_text=str(data.get("number_text", "") or ""),
            label=data.get("label"),
            text=data.get("text", ""),
            highlighted=bool(data.get("highlighted", False)),
            color=data.get("color"),
            annotation=data.get("annotation", "") or "",
            tags=_unique(data.get("tags", [])),
            importance=int(data.get("importance", 3)),
            last_edited=data.get("last_edited", "") or "",
        )


@dataclass
class Law:
    """A named, ordered collection of clauses"""
    id: str
    name: str
    clauses: List[Clause] = field(default_factory=list)
    category: str = ""

    def ordered_clauses(self) -> List[Clause]:
        """Clauses in ascending order key, stable for equal keys"""
        return sorted(self.clauses, key=lambda c: c.number)

    @property
    def clause_count(self) -> int:
        return len(self.clauses)

    @property
    def highlighted_count(self) -> int:
        return sum(1 for c in self.clauses if c.highlighted)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "clauses": [c.to_dict() for c in self.clauses],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Law':
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            category=data.get("category", "") or "",
            clauses=[Clause.from_dict(c) for c in data.get("clauses", [])],
        )


@dataclass
class ColorLegend:
    """Human-readable description for each palette key"""
    entries: Dict[HighlightColor, str] = field(default_factory=lambda: dict(DEFAULT_LEGEND))

    def description(self, color: HighlightColor) -> str:
        text = self.entries.get(color)
        if text:
            return text
        return DEFAULT_LEGEND.get(color, color.value)

    def to_dict(self) -> Dict[str, str]:
        return {color.value: self.description(color) for color in PALETTE_ORDER}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, str]]) -> 'ColorLegend':
        entries = dict(DEFAULT_LEGEND)
        for key, text in (data or {}).items():
            color = HighlightColor.parse(key)
            if color is not None and text:
                entries[color] = text
        return cls(entries=entries)


@dataclass
class RenderConfig:
    """Render configuration; only the title is mandatory"""
    title: str
    contest: str = ""
    author: str = ""
    code: str = ""
    publisher: str = ""
    edition: str = ""
    year: str = ""
    notices: str = ""
    comments: str = ""
    transition_title: str = ""
    transition_subtitle: str = ""
    color_legend: ColorLegend = field(default_factory=ColorLegend)
    language: Optional[str] = None  # None: VADEMECUM_LANGUAGE setting
    generated_at: Optional[datetime] = None

    # Editor export switches
    export_annotations: bool = False
    export_tags: bool = False
    show_importance: bool = False

    def timestamp(self) -> datetime:
        return self.generated_at or datetime.now()

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "contest": self.contest,
            "author": self.author,
            "code": self.code,
            "publisher": self.publisher,
            "edition": self.edition,
            "year": self.year,
            "notices": self.notices,
            "comments": self.comments,
            "transition_title": self.transition_title,
            "transition_subtitle": self.transition_subtitle,
            "color_legend": self.color_legend.to_dict(),
            "language": self.language,
            "generated_at": self.generated_at.isoformat() if self.generated_at else None,
            "export_annotations": self.export_annotations,
            "export_tags": self.export_tags,
            "show_importance": self.show_importance,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'RenderConfig':
        generated_at = data.get("generated_at")
        return cls(
            title=data.get("title", ""),
            contest=data.get("contest", "") or "",
            author=data.get("author", "") or "",
            code=data.get("code", "") or "",
            publisher=data.get("publisher", "") or "",
            edition=data.get("edition", "") or "",
            year=str(data.get("year", "") or ""),
            notices=data.get("notices", "") or "",
            comments=data.get("comments", "") or "",
            transition_title=data.get("transition_title", "") or "",
            transition_subtitle=data.get("transition_subtitle", "") or "",
            color_legend=ColorLegend.from_dict(data.get("color_legend")),
            language=data.get("language") or None,
            generated_at=datetime.fromisoformat(generated_at) if generated_at else None,
            export_annotations=bool(data.get("export_annotations", False)),
            export_tags=bool(data.get("export_tags", False)),
            show_importance=bool(data.get("show_importance", False)),
        )


@dataclass
class VademecumDocument:
    """
    Complete input for one render pass.

    Holds the ordered laws plus the render configuration. The editor
    hands this over already validated; validate() is offered to callers
    that want to guard before rendering.

    Serializing stamps the provenance with a checksum of config and laws;
    a document read back keeps the stored checksum so edits made outside
    the editor can be detected with content_changed().
    """

    config: RenderConfig
    laws: List[Law] = field(default_factory=list)
    provenance: Provenance = field(default_factory=Provenance)

    def checksum(self) -> str:
        return content_checksum(self.config.to_dict(), [law.to_dict() for law in self.laws])

    def content_changed(self) -> bool:
        """True when a stored checksum no longer matches the content"""
        return bool(self.provenance.checksum) and self.provenance.checksum != self.checksum()

    def to_dict(self) -> Dict[str, Any]:
        self.provenance.checksum = self.checksum()
        return {
            "provenance": self.provenance.to_dict(),
            "config": self.config.to_dict(),
            "laws": [law.to_dict() for law in self.laws],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VademecumDocument':
        return cls(
            config=RenderConfig.from_dict(data.get("config", {})),
            laws=[Law.from_dict(law) for law in data.get("laws", [])],
            provenance=Provenance.from_dict(data.get("provenance") or {}),
        )

    @classmethod
    def from_json(cls, json_str: str) -> 'VademecumDocument':
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def from_editor_export(
        cls,
        data: Dict[str, Any],
        config: Optional[RenderConfig] = None,
    ) -> 'VademecumDocument':
        """
        Build a document from the editor's saved workspace.

        The editor stores Portuguese keys (leis, artigos, numeroTexto...).
        Its color legend and export switches override the given config.

        Args:
            data: Parsed workspace JSON
            config: Base render configuration (title etc.)

        Returns:
            VademecumDocument
        """
        laws = []
        for lei in data.get("leis", []):
            clauses = [
                Clause(
                    id=str(artigo["id"]),
                    number=artigo.get("numero", 0),
                    number_text=str(artigo.get("numeroTexto", "") or ""),
                    text=artigo.get("texto", ""),
                    highlighted=bool(artigo.get("marcado", False)),
                    color=artigo.get("cor"),
                    annotation=artigo.get("anotacoes", "") or "",
                    tags=_unique(artigo.get("tags", [])),
                    importance=int(artigo.get("importancia", 3)),
                    last_edited=artigo.get("dataUltimaEdicao", "") or "",
                )
                for artigo in lei.get("artigos", [])
            ]
            laws.append(Law(
                id=str(lei.get("id", len(laws) + 1)),
                name=lei.get("nome", ""),
                clauses=clauses,
                category=lei.get("categoria", "") or "",
            ))

        base = config or RenderConfig(title=data.get("titulo") or "Vademecum")
        options = data.get("configuracoes", {})
        base = replace(
            base,
            color_legend=ColorLegend.from_dict(data.get("legendaCores")) if data.get("legendaCores") else base.color_legend,
            export_annotations=bool(options.get("exportarAnotacoes", base.export_annotations)),
            export_tags=bool(options.get("exportarTags", base.export_tags)),
            show_importance=bool(options.get("mostrarImportancia", base.show_importance)),
        )

        return cls(
            config=base,
            laws=laws,
            provenance=Provenance(source="vademecum_editor_export"),
        )

    def validate(self) -> List[str]:
        """Validate the contract"""
        errors = []

        if not self.config.title or not self.config.title.strip():
            errors.append("config.title is required")

        # Laws required
        if not self.laws:
            errors.append("laws cannot be empty")

        for i, law in enumerate(self.laws):
            if not law.name:
                errors.append(f"law[{i}].name is required")

            # Clause ID uniqueness
            seen_ids = set()
            for j, clause in enumerate(law.clauses):
                if not clause.id:
                    errors.append(f"law[{i}].clause[{j}].id is required")
                elif clause.id in seen_ids:
                    errors.append(f"law[{i}].clause[{j}].id '{clause.id}' is duplicate")
                else:
                    seen_ids.add(clause.id)

                if not 1 <= clause.importance <= 5:
                    errors.append(f"law[{i}].clause[{j}].importance must be between 1 and 5")

        return errors

    # Convenience methods
    @property
    def total_clauses(self) -> int:
        return sum(law.clause_count for law in self.laws)

    @property
    def total_highlighted(self) -> int:
        return sum(law.highlighted_count for law in self.laws)


def _format_number(number: float) -> str:
    if float(number).is_integer():
        return str(int(number))
    return str(number)


def _unique(items) -> List[str]:
    seen = []
    for item in items or []:
        if item not in seen:
            seen.append(item)
    return seen
