#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Contract Errors and Provenance

Error hierarchy raised around the vademecum document, plus the
provenance record saved with every serialized document: which tool
wrote it, the schema version and a checksum of the laws and render
configuration at save time. A checksum that no longer matches means
the file was edited outside the editor.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
import hashlib
import json

SCHEMA_VERSION = "1.0"
DEFAULT_SOURCE = "vademecum_editor"


class ContractError(Exception):
    """Base error of the vademecum engine"""
    pass


class ContractValidationError(ContractError):
    """The document cannot be rendered; errors lists every problem found"""
    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Invalid vademecum document ({len(errors)} errors): {'; '.join(errors)}")


class ExportError(ContractError):
    """Raised when a finished document cannot be written out"""
    pass


def content_checksum(config: Dict[str, Any], laws: List[Dict[str, Any]]) -> str:
    """Short SHA-256 of the serialized configuration and laws"""
    payload = json.dumps({"config": config, "laws": laws}, sort_keys=True, ensure_ascii=False, default=str)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


@dataclass
class Provenance:
    """Origin of a saved document"""
    source: str = DEFAULT_SOURCE
    schema_version: str = SCHEMA_VERSION
    saved_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    checksum: str = ""  # Empty until the document is serialized

    def to_dict(self) -> Dict[str, str]:
        return {
            "source": self.source,
            "schema_version": self.schema_version,
            "saved_at": self.saved_at,
            "checksum": self.checksum,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Provenance':
        return cls(
            source=data.get("source", DEFAULT_SOURCE),
            schema_version=data.get("schema_version", SCHEMA_VERSION),
            saved_at=data.get("saved_at", ""),
            checksum=data.get("checksum", ""),
        )
