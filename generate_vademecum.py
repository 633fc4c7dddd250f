#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Vademecum Generator CLI - Render a vademecum PDF from a JSON corpus

Accepts either the engine's document format or the editor's saved
workspace (detected by its "leis" key).

Usage:
    python generate_vademecum.py corpus.json
    python generate_vademecum.py workspace.json --title "Vademecum OAB" --language en
    python generate_vademecum.py corpus.json --toc-mode estimate --continuations always
"""

import sys
import json
import asyncio
import argparse
import logging
from dataclasses import replace
from pathlib import Path

from config.constants import TOC_MODES, CONTINUATION_MODES, SUPPORTED_LANGUAGES
from config.logging_config import setup_logger
from config.settings import settings
from vademecum import VademecumDocument, VademecumRenderer
from vademecum.contracts import (
    ContractError,
    ContractValidationError,
    DocumentValidator,
    summarize_document,
)

logger = logging.getLogger('vademecum')


def load_document(path: Path) -> VademecumDocument:
    """Read a document or editor workspace from JSON"""
    data = json.loads(path.read_text(encoding="utf-8"))
    if "leis" in data:
        logger.info(f"Editor workspace detected: {path.name}")
        return VademecumDocument.from_editor_export(data)
    return VademecumDocument.from_dict(data)


def apply_overrides(document: VademecumDocument, args) -> VademecumDocument:
    """Apply command-line overrides to the render configuration"""
    config = document.config
    changes = {}
    if args.title:
        changes["title"] = args.title
    if args.language:
        changes["language"] = args.language
    if args.annotations:
        changes["export_annotations"] = True
    if args.tags:
        changes["export_tags"] = True
    if args.importance:
        changes["show_importance"] = True
    if changes:
        document.config = replace(config, **changes)
    return document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a two-column vademecum PDF from a JSON corpus",
    )
    parser.add_argument("input", help="Input JSON (document or editor workspace)")
    parser.add_argument("--output-dir", help=f"Output directory (default: {settings.output_dir})")
    parser.add_argument("--title", help="Override the document title")
    parser.add_argument("--language", choices=SUPPORTED_LANGUAGES, help="Printed strings language")
    parser.add_argument("--toc-mode", choices=TOC_MODES, help="TOC page numbers: exact or estimate")
    parser.add_argument("--continuations", choices=CONTINUATION_MODES,
                        help="Continuation markers: long_only or always")
    parser.add_argument("--annotations", action="store_true", help="Print clause annotations")
    parser.add_argument("--tags", action="store_true", help="Print clause tags")
    parser.add_argument("--importance", action="store_true", help="Draw importance dots")
    parser.add_argument("--show-config", action="store_true", help="Print the active settings before rendering")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger('vademecum')

    try:
        settings.validate_choices()
    except ValueError as e:
        print(f"Invalid settings: {e}")
        return 1
    if args.show_config:
        settings.print_config()

    input_file = Path(args.input).resolve()
    if not input_file.exists():
        print(f"Input file not found: {input_file}")
        return 1

    try:
        document = apply_overrides(load_document(input_file), args)
        DocumentValidator().validate_or_raise(document)
    except ContractValidationError as e:
        print("Invalid document:")
        for error in e.errors:
            print(f"   - {error}")
        return 1
    except (ValueError, KeyError) as e:
        print(f"Could not read {input_file}: {e}")
        return 1

    summary = summarize_document(document)
    logger.info(f"Document: {summary}")
    for warning in DocumentValidator().warnings(document):
        logger.warning(warning)

    renderer = VademecumRenderer(
        toc_mode=args.toc_mode,
        continuation_policy=args.continuations,
    )

    try:
        path = asyncio.run(renderer.export(document.laws, document.config, args.output_dir))
    except ContractError as e:
        print(f"Export failed: {e}")
        return 1

    print(f"Vademecum written: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
