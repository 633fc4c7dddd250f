#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Printed Strings - Localized text drawn on the document (pt / en).
"""

from datetime import datetime
from typing import Dict

LABELS: Dict[str, Dict[str, str]] = {
    "pt": {
        "cover_subtitle": "Compilação Jurídica com Marcação Inteligente",
        "author": "Autor: {author}",
        "code": "Código: {code}",
        "generated_on": "Gerado em {date}",
        "notice_banner": "AVISO IMPORTANTE:",
        "stats_title": "ESTATÍSTICAS DE MARCAÇÃO",
        "stats_total": "Total de Artigos",
        "stats_marked": "Marcados",
        "stats_distribution": "DISTRIBUIÇÃO POR CATEGORIA",
        "info_title": "INFORMAÇÕES IMPORTANTES",
        "info_notices": "AVISOS IMPORTANTES",
        "info_comments": "COMENTÁRIOS E OBSERVAÇÕES",
        "info_technical": "INFORMAÇÕES TÉCNICAS",
        "info_title_line": "• Título: {value}",
        "info_author_line": "• Autor: {value}",
        "info_publisher_line": "• Empresa/Editora: {value}",
        "info_edition_line": "• Edição: {value}",
        "info_year_line": "• Ano: {value}",
        "info_code_line": "• Código: {value}",
        "info_system_line": "• Sistema: {value}",
        "info_generated_line": "• Gerado em: {value}",
        "not_specified": "Não especificado",
        "legend_title": "SISTEMA DE CORES",
        "legend_howto": "COMO USAR ESTE VADEMECUM",
        "legend_footer": "{app} • Versão {version} • Marcação jurídica por cores",
        "instruction_1": "- Os artigos estão organizados por lei de origem",
        "instruction_2": "- Cada cor representa um tipo de importância específica",
        "instruction_3": "- Use o sumário para navegação rápida entre leis",
        "instruction_4": "- Layout em duas colunas para máximo aproveitamento",
        "instruction_5": "- Artigos marcados possuem fundo colorido e círculo identificador",
        "toc_title": "SUMÁRIO GERAL",
        "toc_counts": "{clauses} artigos • {marked} marcados",
        "toc_page": "Pág. {page}",
        "toc_footer": "Total: {laws} leis • {clauses} artigos • {marked} marcados",
        "transition_title": "LEGISLAÇÃO",
        "transition_subtitle": "Compilação de Artigos por Lei",
        "running_header": "VADEMECUM JURÍDICO",
        "continuation": "[...continuação {label}]",
        "annotation": "Nota: {text}",
        "subject": "Vademecum para {contest}",
        "subject_default": "Concurso",
        "keywords": "vademecum, leis, artigos, concurso, marcação",
        "creator": "{app} - Sistema de Marcação Estatística",
        "default_author": "Vademecum Editor",
    },
    "en": {
        "cover_subtitle": "Legal Compilation with Smart Highlighting",
        "author": "Author: {author}",
        "code": "Code: {code}",
        "generated_on": "Generated on {date}",
        "notice_banner": "IMPORTANT NOTICE:",
        "stats_title": "HIGHLIGHT STATISTICS",
        "stats_total": "Total Articles",
        "stats_marked": "Marked",
        "stats_distribution": "DISTRIBUTION BY CATEGORY",
        "info_title": "IMPORTANT INFORMATION",
        "info_notices": "IMPORTANT NOTICES",
        "info_comments": "COMMENTS AND REMARKS",
        "info_technical": "TECHNICAL INFORMATION",
        "info_title_line": "• Title: {value}",
        "info_author_line": "• Author: {value}",
        "info_publisher_line": "• Publisher: {value}",
        "info_edition_line": "• Edition: {value}",
        "info_year_line": "• Year: {value}",
        "info_code_line": "• Code: {value}",
        "info_system_line": "• System: {value}",
        "info_generated_line": "• Generated on: {value}",
        "not_specified": "Not specified",
        "legend_title": "COLOR SYSTEM",
        "legend_howto": "HOW TO USE THIS VADEMECUM",
        "legend_footer": "{app} • Version {version} • Color-coded legal highlighting",
        "instruction_1": "- Articles are grouped by their law of origin",
        "instruction_2": "- Each color stands for a specific kind of importance",
        "instruction_3": "- Use the table of contents to jump between laws",
        "instruction_4": "- Two-column layout for maximum use of the page",
        "instruction_5": "- Marked articles carry a colored background and indicator",
        "toc_title": "TABLE OF CONTENTS",
        "toc_counts": "{clauses} articles • {marked} marked",
        "toc_page": "p. {page}",
        "toc_footer": "Total: {laws} laws • {clauses} articles • {marked} marked",
        "transition_title": "LEGISLATION",
        "transition_subtitle": "Articles Compiled by Law",
        "running_header": "LEGAL VADEMECUM",
        "continuation": "[...continuation of {label}]",
        "annotation": "Note: {text}",
        "subject": "Vademecum for {contest}",
        "subject_default": "Exam",
        "keywords": "vademecum, laws, articles, exam, highlighting",
        "creator": "{app} - Statistical Highlighting System",
        "default_author": "Vademecum Editor",
    },
}

MONTHS = {
    "pt": ["janeiro", "fevereiro", "março", "abril", "maio", "junho", "julho",
           "agosto", "setembro", "outubro", "novembro", "dezembro"],
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
}


class Labels:
    """Lookup of printed strings for one language, falling back to pt"""

    def __init__(self, language: str = "pt"):
        self.language = language if language in LABELS else "pt"
        self._table = LABELS[self.language]

    def get(self, key: str, **values) -> str:
        text = self._table.get(key) or LABELS["pt"][key]
        return text.format(**values) if values else text

    def long_date(self, moment: datetime) -> str:
        month = MONTHS[self.language][moment.month - 1]
        if self.language == "pt":
            return f"{moment.day:02d} de {month} de {moment.year}"
        return f"{month} {moment.day:02d}, {moment.year}"

    def short_timestamp(self, moment: datetime) -> str:
        if self.language == "pt":
            return moment.strftime("%d/%m/%Y às %H:%M:%S")
        return moment.strftime("%Y-%m-%d at %H:%M:%S")
