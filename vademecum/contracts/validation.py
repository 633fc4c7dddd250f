#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Validation

Pre-render checks on a VademecumDocument. Errors block rendering;
warnings (highlight colors outside the palette, content edited after
the editor saved it) are logged and rendering goes on.

Version: 1.0.0
"""

from typing import List, Dict, Any
import logging

from .base import ContractValidationError
from .document import VademecumDocument, HighlightColor

logger = logging.getLogger(__name__)


class DocumentValidator:
    """
    Usage:
        validator = DocumentValidator()
        validator.validate_or_raise(document)
        for warning in validator.warnings(document):
            logger.warning(warning)
    """

    def validate_or_raise(self, document: VademecumDocument) -> None:
        """
        Raises:
            ContractValidationError: Title missing, no laws, duplicate
                clause ids or importance outside 1-5
        """
        errors = document.validate()
        if errors:
            logger.warning(f"Document rejected: {len(errors)} errors")
            raise ContractValidationError(errors)

        logger.info(
            f"Document validated: {len(document.laws)} laws, "
            f"{document.total_clauses} clauses ({document.provenance.source})"
        )

    def unknown_colors(self, document: VademecumDocument) -> List[str]:
        """Highlighted clauses whose color key is outside the palette; they render unhighlighted"""
        warnings = []
        for law in document.laws:
            for clause in law.clauses:
                if clause.highlighted and HighlightColor.parse(clause.color) is None:
                    warnings.append(f"{law.name} / {clause.display_label}: unknown color '{clause.color}'")
        return warnings

    def warnings(self, document: VademecumDocument) -> List[str]:
        warnings = self.unknown_colors(document)
        if document.content_changed():
            warnings.append(
                f"Content changed since it was saved by {document.provenance.source} "
                f"(checksum {document.provenance.checksum} != {document.checksum()})"
            )
        return warnings


def summarize_document(document: VademecumDocument) -> Dict[str, Any]:
    """Counts logged before rendering"""
    return {
        "title": document.config.title,
        "laws": len(document.laws),
        "clauses": document.total_clauses,
        "highlighted": document.total_highlighted,
        "valid": not document.validate(),
    }
