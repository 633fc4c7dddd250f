#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document properties and export file name.
"""

from dataclasses import dataclass, asdict
import re

from config.constants import DOCUMENT_EXTENSION, FILE_NAME_SEPARATOR
from vademecum.contracts import RenderConfig
from .canvas.base import Canvas
from .labels import Labels


def export_file_name(title: str, extension: str = DOCUMENT_EXTENSION) -> str:
    """Replace every non-alphanumeric character of the title with '-'"""
    return re.sub(r"[^a-zA-Z0-9]", FILE_NAME_SEPARATOR, title) + extension


@dataclass
class DocumentProperties:
    title: str
    subject: str
    author: str
    creator: str
    keywords: str

    def to_dict(self):
        return asdict(self)


class MetadataWriter:
    def __init__(self, labels: Labels, app_name: str):
        self.labels = labels
        self.app_name = app_name

    def build(self, config: RenderConfig) -> DocumentProperties:
        labels = self.labels
        return DocumentProperties(
            title=config.title,
            subject=labels.get("subject", contest=config.contest or labels.get("subject_default")),
            author=config.author or labels.get("default_author"),
            creator=labels.get("creator", app=self.app_name),
            keywords=labels.get("keywords"),
        )

    def apply(self, canvas: Canvas, config: RenderConfig) -> DocumentProperties:
        properties = self.build(config)
        canvas.set_metadata(**properties.to_dict())
        return properties
