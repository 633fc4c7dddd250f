#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Contracts Module

Defines the input contract of the layout engine:
- VademecumDocument: laws + render configuration + provenance
- Law / Clause: the ordered legal corpus
- RenderConfig / ColorLegend: titles, notices and palette descriptions

Usage:
    from vademecum.contracts import VademecumDocument, DocumentValidator

    document = VademecumDocument.from_json(json_str)
    DocumentValidator().validate_or_raise(document)

Version: 1.0.0
"""

from .base import (
    Provenance,
    content_checksum,
    ContractError,
    ContractValidationError,
    ExportError,
)

from .document import (
    Clause,
    Law,
    ColorLegend,
    RenderConfig,
    HighlightColor,
    VademecumDocument,
    PALETTE_ORDER,
    DEFAULT_LEGEND,
)

from .validation import (
    DocumentValidator,
    summarize_document,
)

__all__ = [
    # Base
    "Provenance",
    "content_checksum",
    "ContractError",
    "ContractValidationError",
    "ExportError",

    # Document model
    "Clause",
    "Law",
    "ColorLegend",
    "RenderConfig",
    "HighlightColor",
    "VademecumDocument",
    "PALETTE_ORDER",
    "DEFAULT_LEGEND",

    # Validation
    "DocumentValidator",
    "summarize_document",
]

__version__ = "1.0.0"
