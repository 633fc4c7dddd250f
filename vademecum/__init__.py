"""
Vademecum PDF - Two-column legal compilation layout engine.

Usage:
    from vademecum import VademecumRenderer, VademecumDocument

    document = VademecumDocument.from_json(json_str)
    result = VademecumRenderer().render(document.laws, document.config)
"""

from .contracts import (
    Clause,
    Law,
    ColorLegend,
    RenderConfig,
    HighlightColor,
    VademecumDocument,
    ContractError,
    ContractValidationError,
    ExportError,
)
from .agent import VademecumRenderer, RenderResult, render

__version__ = "1.0.0"

__all__ = [
    "Clause",
    "Law",
    "ColorLegend",
    "RenderConfig",
    "HighlightColor",
    "VademecumDocument",
    "ContractError",
    "ContractValidationError",
    "ExportError",
    "VademecumRenderer",
    "RenderResult",
    "render",
]
